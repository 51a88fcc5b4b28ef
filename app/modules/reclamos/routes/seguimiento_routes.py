# -*- coding: utf-8 -*-
"""
backend/app/modules/reclamos/routes/seguimiento_routes.py

Seguimiento del reclamo por parte del consumidor. El acceso exige el
código y el número de documento con que se registró.

Endpoints:
- GET  /api/seguimiento/{codigo}?documento=...
- POST /api/seguimiento/{codigo}/mensaje

Autor: CODEPLEX
Fecha: 2026-02-08
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, status

from app.shared.events import EventDispatcher, get_event_dispatcher
from app.shared.http_utils.request_meta import get_client_ip
from app.shared.utils.base_models import ok
from app.modules.reclamos.schemas import MensajeCreateRequest
from app.modules.reclamos.services import ReclamoLifecycleService, ReclamoQueryService
from .deps import get_lifecycle_service, get_query_service

router = APIRouter(prefix="/seguimiento", tags=["seguimiento"])


@router.get("/{codigo}", summary="Seguimiento del reclamo")
async def seguimiento(
    codigo: str,
    documento: Optional[str] = Query(None),
    service: ReclamoQueryService = Depends(get_query_service),
):
    return ok(data=await service.seguimiento(codigo, documento))


@router.post("/{codigo}/mensaje", status_code=status.HTTP_201_CREATED, summary="Mensaje adicional del consumidor")
async def enviar_mensaje(
    codigo: str,
    payload: MensajeCreateRequest,
    request: Request,
    service: ReclamoLifecycleService = Depends(get_lifecycle_service),
    events: EventDispatcher = Depends(get_event_dispatcher),
):
    event = await service.agregar_mensaje(codigo, payload, ip_address=get_client_ip(request))
    events.publish([event])
    return ok(message="Mensaje enviado correctamente")
