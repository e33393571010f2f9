# bloglist/log.py
"""Configuración de logs de consola con Rich.

Los registros de librerías de terceros (werkzeug, sqlalchemy...) llevan un
prefijo corto como "[werkzeug]" para distinguirlos de los del backend.
"""

from __future__ import annotations

import logging
from typing import Literal

from rich.console import Console
from rich.logging import RichHandler

PROJECT_PREFIX = "bloglist"


class ThirdPartyPrefixFilter(logging.Filter):
    """Añade `record.prefix` a los registros de terceros; nunca filtra."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not record.name.startswith(PROJECT_PREFIX):
            # "sqlalchemy.engine.Engine" -> "[sqlalchemy]"
            record.prefix = f"[{record.name.split('.')[0]}]"
        else:
            record.prefix = ""
        return True


def config_console_handler(level: int = logging.INFO, color: bool = True) -> RichHandler:
    """Crea un RichHandler que escribe en stderr.

    Args:
        level: Nivel mínimo para la consola.
        color: Desactiva los colores cuando es False (útil en CI y tests).

    Returns:
        RichHandler: handler listo para colgar de un logger.
    """
    color_system: Literal["auto"] | None = "auto" if color else None
    console = Console(color_system=color_system, stderr=True)

    handler = RichHandler(
        level=level,
        console=console,
        rich_tracebacks=True,
        show_time=level <= logging.DEBUG,
        show_path=level <= logging.DEBUG,
    )
    handler.setFormatter(logging.Formatter(fmt="%(prefix)s %(message)s"))
    handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def configure_logging(level: str | int = "INFO", color: bool = True) -> logging.Logger:
    """Configura el logger del proyecto y lo devuelve.

    Idempotente: si el logger ya tiene un RichHandler (p. ej. varias llamadas a
    create_app en los tests) sólo se actualiza el nivel.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger(PROJECT_PREFIX)
    logger.setLevel(level)
    # El RichHandler ya imprime; sin esto `flask run` duplica cada línea
    logger.propagate = False

    for handler in logger.handlers:
        if isinstance(handler, RichHandler):
            handler.setLevel(level)
            break
    else:
        logger.addHandler(config_console_handler(level=level, color=color))

    return logger
