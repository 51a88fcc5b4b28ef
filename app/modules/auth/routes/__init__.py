# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/routes/__init__.py

Ensambla los routers del módulo Auth (login + gestión de usuarios).
Se importa desde master_routes.py para montar bajo /api.

Autor: CODEPLEX
Fecha: 2026-02-05
"""

from fastapi import APIRouter

from .auth_routes import router as auth_router
from .usuarios_routes import router as usuarios_router


def get_auth_routers() -> list[APIRouter]:
    """Devuelve todos los routers listos para montar."""
    return [auth_router, usuarios_router]

# Fin del archivo backend/app/modules/auth/routes/__init__.py
