# -*- coding: utf-8 -*-
"""
backend/app/modules/reclamos/routes/__init__.py

Routers del módulo de reclamos.

Autor: CODEPLEX
Fecha: 2026-02-08
"""

from typing import List

from fastapi import APIRouter

from .reclamos_routes import router as reclamos_router
from .seguimiento_routes import router as seguimiento_router
from .admin_reclamos_routes import router as admin_reclamos_router


def get_reclamos_routers() -> List[APIRouter]:
    return [reclamos_router, seguimiento_router, admin_reclamos_router]


__all__ = ["get_reclamos_routers"]
