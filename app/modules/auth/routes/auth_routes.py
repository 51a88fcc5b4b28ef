# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/routes/auth_routes.py

Login del panel administrativo: POST /api/admin/auth/login

Autor: CODEPLEX
Fecha: 2026-02-05
"""

# Note: NOT using 'from __future__ import annotations' to ensure FastAPI
# can properly resolve Request type annotation for dependency injection

from fastapi import APIRouter, BackgroundTasks, Depends, Request

from app.shared.database import Database, get_database
from app.shared.http_utils.request_meta import get_client_ip
from app.shared.utils.base_models import ok
from app.modules.auth.schemas import LoginRequest
from app.modules.auth.services import LoginService, touch_ultimo_acceso
from .deps import get_login_service

router = APIRouter(prefix="/admin/auth", tags=["admin-auth"])


@router.post("/login", summary="Inicio de sesión del personal")
async def login(
    payload: LoginRequest,
    request: Request,
    background_tasks: BackgroundTasks,
    service: LoginService = Depends(get_login_service),
    database: Database = Depends(get_database),
):
    """
    Valida credenciales y devuelve un token Bearer con vigencia de 24 horas.

    - 401 si el email no existe o la contraseña no coincide
    - 403 si la cuenta está desactivada
    """
    data = await service.login(payload, ip_address=get_client_ip(request))
    background_tasks.add_task(touch_ultimo_acceso, database, data.usuario.id)
    return ok(data=data)
