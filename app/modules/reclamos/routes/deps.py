# -*- coding: utf-8 -*-
"""
backend/app/modules/reclamos/routes/deps.py

Proveedores de servicios para las rutas del módulo (overridables en tests).

Autor: CODEPLEX
Fecha: 2026-02-08
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.settings import get_app_settings
from app.shared.config.settings_base import BaseAppSettings
from app.shared.database import get_db
from app.modules.reclamos.services import ReclamoLifecycleService, ReclamoQueryService


def get_lifecycle_service(
    db: AsyncSession = Depends(get_db),
    settings: BaseAppSettings = Depends(get_app_settings),
) -> ReclamoLifecycleService:
    return ReclamoLifecycleService(db, settings)


def get_query_service(
    db: AsyncSession = Depends(get_db),
    settings: BaseAppSettings = Depends(get_app_settings),
) -> ReclamoQueryService:
    return ReclamoQueryService(db, settings)
