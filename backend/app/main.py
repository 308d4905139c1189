"""
Ponto de entrada principal da Estudantes API.
Execução: uvicorn app.main:app --reload
Esquema do banco: alembic upgrade head
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import app.models  # noqa: F401 (registra os modelos em Base.metadata antes dos routers)
from app.database import engine
from app.logging_config import configure_logging
from app.routers import students

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Ciclo de vida: configura o logging na subida e libera o pool de conexões na parada."""
    configure_logging()
    yield
    await engine.dispose()


app = FastAPI(
    title="Estudantes API",
    description="API de cadastro de estudantes: criação, listagem, atualização e desativação",
    version="1.0.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
    lifespan=lifespan,
)

# CORS: libera localhost em desenvolvimento.
app.add_middleware(
    CORSMiddleware,
    allow_origins=[],
    allow_origin_regex=r"https?://(localhost|127\.0\.0\.1)(:\d+)?",
    allow_credentials=False,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Accept"],
)


app.include_router(students.router)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Captura qualquer exceção não tratada (banco indisponível etc.) e devolve 500.
    Sem esse handler a resposta 500 sairia sem os headers do CORSMiddleware.
    """
    logger.error("Exceção não tratada em %s: %s", request.url.path, exc, exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "Ocorreu um erro interno."},
    )


@app.get("/api/health", tags=["Saúde"])
def health_check():
    """Verifica se a API está no ar."""
    return {"status": "ok", "service": "Estudantes API", "version": "1.0.0"}
