# -*- coding: utf-8 -*-
"""
backend/app/routes/master_routes.py

Router maestro: monta todos los routers de módulos bajo /api.

- Auth: login del panel y gestión de usuarios (/api/admin/auth, /api/admin/usuarios)
- Reclamos: registro y consulta pública, seguimiento y panel
- Health (/api/health)

Autor: CODEPLEX
Fecha: 2026-02-09
"""
from __future__ import annotations

import logging

from fastapi import APIRouter

from app.modules.auth.routes import get_auth_routers
from app.modules.reclamos.routes import get_reclamos_routers
from .health_routes import router as health_router

logger = logging.getLogger(__name__)

api = APIRouter(prefix="/api")

_loaded: list[str] = []  # trazabilidad/debug


def _include(target: APIRouter, router: APIRouter, name: str) -> None:
    """Incluye un router en la capa dada y registra trazabilidad en logs."""
    target.include_router(router)
    _loaded.append(f"{target.prefix or '/'}:{name}")
    logger.debug(
        "Router '%s' montado en prefix '%s' (router.prefix='%s')",
        name,
        target.prefix or "/",
        getattr(router, "prefix", ""),
    )


def _tag(router: APIRouter) -> str:
    return str(router.tags[0]) if router.tags else "unknown"


_include(api, health_router, "health")

for r in get_auth_routers():
    _include(api, r, f"auth.{_tag(r)}")

for r in get_reclamos_routers():
    _include(api, r, f"reclamos.{_tag(r)}")


def loaded_routers() -> list[str]:
    return list(_loaded)


# Fin del archivo backend/app/routes/master_routes.py
