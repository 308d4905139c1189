"""
Configuração da conexão com o banco de dados.
Usa SQLAlchemy com um motor assíncrono (SQLite via aiosqlite por padrão).
"""

from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from app.config import settings

engine = create_async_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO)

SessionLocal = async_sessionmaker(bind=engine, class_=AsyncSession, autoflush=False, expire_on_commit=False)

Base = declarative_base()


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Dependência FastAPI: fornece uma sessão por requisição e a fecha depois do uso."""
    async with SessionLocal() as db:
        yield db
