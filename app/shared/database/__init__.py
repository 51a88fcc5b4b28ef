# -*- coding: utf-8 -*-
"""
backend/app/shared/database/__init__.py

Re-exporta utilidades comunes de base de datos.

Autor: CODEPLEX
Fecha: 2026-02-02
"""

from __future__ import annotations

from .database import Database, get_database, get_db
from .base import Base, NAMING_CONVENTION, str_enum

__all__ = [
    "Database",
    "get_database",
    "get_db",
    "Base",
    "NAMING_CONVENTION",
    "str_enum",
]

# Fin del archivo backend/app/shared/database/__init__.py
