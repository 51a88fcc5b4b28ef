# -*- coding: utf-8 -*-
"""
backend/app/core/__init__.py

Fachada unificada para componentes centrales del backend:
- Configuración (settings)
- Logging
- Base de datos y sesiones

Esta capa envuelve la implementación existente en `app.shared.*` para
ofrecer puntos de entrada estables hacia el resto de los módulos.

Autor: CODEPLEX
Fecha: 2026-02-02
"""

from .settings import get_app_settings, get_settings
from app.shared.config.logging_config import setup_logging
from .db import Base, Database, get_db

__all__ = [
    "get_settings",
    "get_app_settings",
    "setup_logging",
    "Base",
    "Database",
    "get_db",
]

# Fin del archivo backend\app\core\__init__.py
