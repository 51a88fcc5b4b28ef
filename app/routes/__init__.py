# -*- coding: utf-8 -*-
"""
backend/app/routes/__init__.py

Ensamblador principal de ruteadores de la API.
Uso: `from app.routes import router` en app.main.

Autor: CODEPLEX
Fecha: 2026-02-09
"""

from fastapi import APIRouter

from .master_routes import api, loaded_routers

router = APIRouter()
router.include_router(api)

__all__ = ["router", "loaded_routers"]

# Fin del archivo backend/app/routes/__init__.py
