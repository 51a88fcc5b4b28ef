# -*- coding: utf-8 -*-
"""
backend/app/shared/config/logging_config.py

Configuración centralizada de logging del Libro de Reclamaciones.
Soporta formato plain (desarrollo) y json (producción) vía python-json-logger.

Autor: CODEPLEX
Fecha: 2026-02-02
"""

import importlib
import logging.config
from typing import Literal


def _json_formatter_path() -> str:
    # python-json-logger v3 movió jsonlogger -> json
    try:
        importlib.import_module("pythonjsonlogger.json")
        return "pythonjsonlogger.json.JsonFormatter"
    except ModuleNotFoundError:  # pragma: no cover
        return "pythonjsonlogger.jsonlogger.JsonFormatter"


def setup_logging(
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO",
    fmt: Literal["plain", "pretty", "json"] = "plain",
) -> None:
    """
    Configura el sistema de logging de la aplicación.

    Args:
        level: Nivel de logging (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        fmt: Formato de salida (plain, pretty, json). pretty equivale a plain.

    Ejemplos:
        >>> setup_logging("INFO", "plain")
        >>> setup_logging("WARNING", "json")
    """
    use_json = fmt == "json"

    formatters = {
        "default": {
            "format": "%(asctime)s %(levelname)s [%(name)s]: %(message)s",
        },
        "json": {
            "()": _json_formatter_path(),
            "format": "%(asctime)s %(name)s %(levelname)s %(message)s",
        },
    }

    handlers = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "json" if use_json else "default",
            "stream": "ext://sys.stdout",
        }
    }

    logging_config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": formatters,
        "handlers": handlers,
        "loggers": {
            # SQL de SQLAlchemy solo si DB_ECHO=true (lo maneja el engine)
            "sqlalchemy.engine": {"level": "WARNING"},
            "uvicorn.access": {"level": "INFO" if level.upper() == "DEBUG" else "WARNING"},
        },
        "root": {
            "handlers": ["console"],
            "level": level.upper(),
        },
    }

    logging.config.dictConfig(logging_config)


__all__ = ["setup_logging"]
# Fin del archivo backend/app/shared/config/logging_config.py
