"""
Configuração do logging do processo a partir das settings.
"""

import logging

from app.config import settings

_LOGGING_CONFIGURED = False


def configure_logging() -> None:
    """Configura o logging global uma única vez (chamado no lifespan da API)."""
    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    _LOGGING_CONFIGURED = True
