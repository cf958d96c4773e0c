# --------------------------------------------------------------
# File: logs.py
# Description: Configuración de logging estructurado con structlog.
# --------------------------------------------------------------
"""Logging estructurado de los módulos del paquete.

Importar el paquete no configura structlog: la aplicación que lo usa decide
sus procesadores, o llama explícitamente a `setup_logging`.

Nunca se registran claves, textos en claro, passphrases ni nonces: sólo
algoritmos, tamaños y el tipo de fallo.
"""

from __future__ import annotations

import logging

import structlog
from structlog.types import Processor

from cryptokit import config


def setup_logging(level: str | None = None, *, json: bool | None = None) -> None:
    """Configura structlog sobre el logging estándar.

    Pensada para aplicaciones y pruebas; la librería nunca la invoca por su
    cuenta.

    Args:
        level (str | None): Nivel para el logger `cryptokit`; por defecto
            `config.LOG_LEVEL`.
        json (bool | None): Si es True se emite JSON, si no salida de consola;
            por defecto `config.LOG_JSON`.

    """
    level_name = (level or config.LOG_LEVEL).upper()
    use_json = config.LOG_JSON if json is None else json

    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if use_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    # Sin caché: los loggers de módulo se crean al importar y deben seguir
    # la configuración vigente cuando se usan.
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )
    logging.getLogger("cryptokit").setLevel(getattr(logging, level_name, logging.WARNING))


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Devuelve un logger estructurado sin tocar la configuración global."""

    return structlog.get_logger(name)
