# -*- coding: utf-8 -*-
"""
backend/app/modules/reclamos/routes/admin_reclamos_routes.py

Gestión de reclamos desde el panel (ADMIN y SOPORTE).

Endpoints:
- GET  /api/admin/reclamos
- GET  /api/admin/reclamos/{reclamo_id}
- PUT  /api/admin/reclamos/{reclamo_id}/estado
- POST /api/admin/reclamos/{reclamo_id}/respuesta
- GET  /api/admin/dashboard/stats

Autor: CODEPLEX
Fecha: 2026-02-08
"""

import uuid
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, status

from app.shared.events import EventDispatcher, get_event_dispatcher
from app.shared.http_utils.request_meta import get_client_ip
from app.shared.utils.base_models import ok
from app.modules.auth.dependencies import get_current_admin
from app.modules.auth.security import AdminClaims
from app.modules.reclamos.repositories.reclamo_query_builder import DEFAULT_LIMIT, DEFAULT_PAGE
from app.modules.reclamos.schemas import CambioEstadoRequest, RespuestaCreateRequest
from app.modules.reclamos.services import ReclamoLifecycleService, ReclamoQueryService
from .deps import get_lifecycle_service, get_query_service

router = APIRouter(prefix="/admin", tags=["admin-reclamos"])


@router.get("/reclamos", summary="Listado paginado de reclamos")
async def listar_reclamos(
    page: int = Query(DEFAULT_PAGE),
    limit: int = Query(DEFAULT_LIMIT),
    estado: Optional[str] = Query(None),
    search: Optional[str] = Query(None),
    _admin: AdminClaims = Depends(get_current_admin),
    service: ReclamoQueryService = Depends(get_query_service),
):
    """Filtra por estado y por texto (código, nombre o email); más recientes primero."""
    items, pagination = await service.listar(page=page, limit=limit, estado=estado, search=search)
    body = ok(data=items)
    body["pagination"] = pagination
    return body


@router.get("/reclamos/{reclamo_id}", summary="Detalle de un reclamo")
async def detalle_reclamo(
    reclamo_id: uuid.UUID,
    _admin: AdminClaims = Depends(get_current_admin),
    service: ReclamoQueryService = Depends(get_query_service),
):
    return ok(data=await service.detalle(reclamo_id))


@router.put("/reclamos/{reclamo_id}/estado", summary="Cambiar estado del reclamo")
async def cambiar_estado(
    reclamo_id: uuid.UUID,
    payload: CambioEstadoRequest,
    request: Request,
    admin: AdminClaims = Depends(get_current_admin),
    service: ReclamoLifecycleService = Depends(get_lifecycle_service),
    events: EventDispatcher = Depends(get_event_dispatcher),
):
    """Solo ADMIN puede cerrar; las transiciones no previstas devuelven 400."""
    event = await service.cambiar_estado(reclamo_id, payload, admin, ip_address=get_client_ip(request))
    events.publish([event])
    return ok(message="Estado actualizado correctamente")


@router.post(
    "/reclamos/{reclamo_id}/respuesta",
    status_code=status.HTTP_201_CREATED,
    summary="Registrar respuesta de la empresa",
)
async def responder_reclamo(
    reclamo_id: uuid.UUID,
    payload: RespuestaCreateRequest,
    request: Request,
    admin: AdminClaims = Depends(get_current_admin),
    service: ReclamoLifecycleService = Depends(get_lifecycle_service),
    events: EventDispatcher = Depends(get_event_dispatcher),
):
    event = await service.responder(reclamo_id, payload, admin, ip_address=get_client_ip(request))
    events.publish([event])
    return ok(message="Respuesta enviada correctamente")


@router.get("/dashboard/stats", summary="Estadísticas del panel")
async def estadisticas(
    _admin: AdminClaims = Depends(get_current_admin),
    service: ReclamoQueryService = Depends(get_query_service),
):
    return ok(data=await service.estadisticas_admin())
