"""
Configuração compartilhada dos testes.
- client: API com a sessão mockada (nenhuma conexão real).
- sqlite_client / session_factory: banco SQLite temporário, para testes de integração.
"""

import pytest
from fastapi.testclient import TestClient
from unittest.mock import MagicMock
from sqlalchemy import create_engine
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from app.database import Base, get_db
from app.main import app


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def client():
    """Cliente HTTP de teste com o banco mockado."""
    mock_db = MagicMock()
    app.dependency_overrides[get_db] = lambda: mock_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def database_url(tmp_path):
    """Arquivo SQLite novo por teste, com as tabelas já criadas."""
    db_file = tmp_path / "estudantes_test.sqlite"
    sync_engine = create_engine(f"sqlite:///{db_file}")
    Base.metadata.create_all(sync_engine)
    sync_engine.dispose()
    return f"sqlite+aiosqlite:///{db_file}"


@pytest.fixture
def session_factory(database_url):
    # NullPool: cada sessão abre a própria conexão no event loop corrente.
    engine = create_async_engine(database_url, poolclass=NullPool)
    return async_sessionmaker(bind=engine, expire_on_commit=False)


@pytest.fixture
def sqlite_client(session_factory):
    """Cliente HTTP de teste ligado a um banco SQLite real e temporário."""
    async def override_get_db():
        async with session_factory() as db:
            yield db

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
