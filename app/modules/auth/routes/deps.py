# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/routes/deps.py

Proveedores de servicios para las rutas del módulo (overridables en tests).

Autor: CODEPLEX
Fecha: 2026-02-05
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.database import get_db
from app.modules.auth.dependencies import get_token_service
from app.modules.auth.security import TokenService
from app.modules.auth.services import LoginService, UsuarioAdminService


def get_login_service(
    db: AsyncSession = Depends(get_db),
    token_service: TokenService = Depends(get_token_service),
) -> LoginService:
    return LoginService(db, token_service)


def get_usuario_admin_service(db: AsyncSession = Depends(get_db)) -> UsuarioAdminService:
    return UsuarioAdminService(db)
