# -*- coding: utf-8 -*-
"""
backend/app/core/db.py

Fachada para la capa de acceso a datos basada en SQLAlchemy async.
Envuelve `app.shared.database` para exponer:

- Database (engine + sessionmaker por aplicación)
- Base
- get_db (dependencia FastAPI)

Autor: CODEPLEX
Fecha: 2026-02-02
"""

from app.shared.database import Base, Database, get_db

__all__ = ["Base", "Database", "get_db"]

# Fin del archivo backend\app\core\db.py
