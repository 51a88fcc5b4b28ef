# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/routes/usuarios_routes.py

Gestión de cuentas del personal. Todas las rutas exigen rol ADMIN.

Endpoints:
- GET  /api/admin/usuarios
- POST /api/admin/usuarios
- PUT  /api/admin/usuarios/{usuario_id}
- PUT  /api/admin/usuarios/{usuario_id}/password

Autor: CODEPLEX
Fecha: 2026-02-05
"""

import uuid

from fastapi import APIRouter, Depends, Request, status

from app.shared.events import EventDispatcher, get_event_dispatcher
from app.shared.http_utils.request_meta import get_client_ip
from app.shared.utils.base_models import ok
from app.modules.auth.dependencies import require_admin
from app.modules.auth.schemas import (
    PasswordChangeRequest,
    UsuarioCreateRequest,
    UsuarioUpdateRequest,
)
from app.modules.auth.security import AdminClaims
from app.modules.auth.services import UsuarioAdminService
from .deps import get_usuario_admin_service

router = APIRouter(prefix="/admin/usuarios", tags=["admin-usuarios"])


@router.get("", summary="Listar usuarios del panel")
async def list_usuarios(
    _admin: AdminClaims = Depends(require_admin),
    service: UsuarioAdminService = Depends(get_usuario_admin_service),
):
    return ok(data=await service.list_usuarios())


@router.post("", status_code=status.HTTP_201_CREATED, summary="Crear usuario del panel")
async def create_usuario(
    payload: UsuarioCreateRequest,
    request: Request,
    admin: AdminClaims = Depends(require_admin),
    service: UsuarioAdminService = Depends(get_usuario_admin_service),
    events: EventDispatcher = Depends(get_event_dispatcher),
):
    usuario, event = await service.create_usuario(payload, admin, ip_address=get_client_ip(request))
    events.publish([event])
    return ok(data=usuario, message="Usuario creado correctamente")


@router.put("/{usuario_id}", summary="Actualizar usuario del panel")
async def update_usuario(
    usuario_id: uuid.UUID,
    payload: UsuarioUpdateRequest,
    request: Request,
    admin: AdminClaims = Depends(require_admin),
    service: UsuarioAdminService = Depends(get_usuario_admin_service),
    events: EventDispatcher = Depends(get_event_dispatcher),
):
    usuario, event = await service.update_usuario(usuario_id, payload, admin, ip_address=get_client_ip(request))
    events.publish([event])
    return ok(data=usuario, message="Usuario actualizado")


@router.put("/{usuario_id}/password", summary="Restablecer contraseña")
async def change_password(
    usuario_id: uuid.UUID,
    payload: PasswordChangeRequest,
    request: Request,
    admin: AdminClaims = Depends(require_admin),
    service: UsuarioAdminService = Depends(get_usuario_admin_service),
    events: EventDispatcher = Depends(get_event_dispatcher),
):
    event = await service.change_password(usuario_id, payload, admin, ip_address=get_client_ip(request))
    events.publish([event])
    return ok(message="Contraseña actualizada")
