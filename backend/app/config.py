"""
Configuração central da aplicação via variáveis de ambiente.
Em desenvolvimento, os valores podem vir de um arquivo .env.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Banco de dados (driver assíncrono obrigatório)
    DATABASE_URL: str = "sqlite+aiosqlite:///./banco.sqlite"
    SQL_ECHO: bool = False

    # Logs
    LOG_LEVEL: str = "INFO"

    # Ambiente
    ENV: str = "development"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


settings = Settings()
