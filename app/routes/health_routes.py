# -*- coding: utf-8 -*-
"""
backend/app/routes/health_routes.py

Endpoint de health check: estado del servicio y conectividad a la base de datos.

Autor: CODEPLEX
Fecha: 2026-02-09
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from app.shared.database import Database, get_database

router = APIRouter(tags=["health"])

HEALTH_DB_TIMEOUT_SECONDS = 2.0


@router.get("/health", summary="Health check del backend")
async def health_check(database: Database = Depends(get_database)) -> dict:
    """
    Devuelve `status` ok|degraded según la conectividad a la base de datos
    (SELECT 1 con timeout).
    """
    db_ok = await database.check_health(timeout_s=HEALTH_DB_TIMEOUT_SECONDS)
    return {
        "status": "ok" if db_ok else "degraded",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "database": "connected" if db_ok else "disconnected",
    }

# Fin del archivo backend/app/routes/health_routes.py
