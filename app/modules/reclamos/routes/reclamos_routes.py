# -*- coding: utf-8 -*-
"""
backend/app/modules/reclamos/routes/reclamos_routes.py

Rutas públicas del libro de reclamaciones.

Endpoints:
- POST /api/reclamos
- GET  /api/reclamos/{codigo}
- GET  /api/reclamos/{codigo}/firma
- GET  /api/dashboard

Autor: CODEPLEX
Fecha: 2026-02-08
"""

from fastapi import APIRouter, Depends, Request, Response, status

from app.shared.events import EventDispatcher, get_event_dispatcher
from app.shared.http_utils.request_meta import get_client_ip, get_user_agent
from app.shared.utils.base_models import ok
from app.modules.reclamos.schemas import ReclamoCreateRequest
from app.modules.reclamos.services import ReclamoLifecycleService, ReclamoQueryService
from .deps import get_lifecycle_service, get_query_service

router = APIRouter(tags=["reclamos"])


@router.post("/reclamos", status_code=status.HTTP_201_CREATED, summary="Registrar reclamo o queja")
async def crear_reclamo(
    payload: ReclamoCreateRequest,
    request: Request,
    service: ReclamoLifecycleService = Depends(get_lifecycle_service),
    events: EventDispatcher = Depends(get_event_dispatcher),
):
    """
    Registra la hoja de reclamación y devuelve el código asignado.

    Los correos a soporte y al consumidor se envían después de responder.
    """
    data, event = await service.crear(
        payload,
        ip_address=get_client_ip(request),
        user_agent=get_user_agent(request),
    )
    events.publish([event])
    return ok(data=data, message="Reclamo registrado exitosamente")


@router.get("/reclamos/{codigo}", summary="Consultar reclamo por código")
async def obtener_reclamo(
    codigo: str,
    service: ReclamoQueryService = Depends(get_query_service),
):
    return ok(data=await service.get_publico(codigo))


@router.get(
    "/reclamos/{codigo}/firma",
    summary="Firma digital del consumidor",
    response_class=Response,
    responses={200: {"content": {"image/png": {}}}},
)
async def obtener_firma(
    codigo: str,
    service: ReclamoQueryService = Depends(get_query_service),
):
    image = await service.get_firma(codigo)
    return Response(content=image, media_type="image/png")


@router.get("/dashboard", summary="Resumen público de reclamos")
async def dashboard(service: ReclamoQueryService = Depends(get_query_service)):
    return ok(data=await service.dashboard_publico())
