# -*- coding: utf-8 -*-
"""
backend/app/modules/reclamos/schemas/admin_schemas.py

Schemas del panel administrativo: cambio de estado, respuesta,
listado paginado y estadísticas.

Autor: CODEPLEX
Fecha: 2026-02-06
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import Field

from app.shared.utils.base_models import UTF8SafeModel
from app.modules.reclamos.enums import EstadoReclamo, TipoSolicitud
from .reclamo_schemas import HistorialOut, MensajeOut, ReclamoPublicoOut, RespuestaOut


# ========== REQUESTS ==========

class CambioEstadoRequest(UTF8SafeModel):
    estado: EstadoReclamo
    comentario: Optional[str] = Field(None, max_length=1000)


class RespuestaCreateRequest(UTF8SafeModel):
    """La longitud mínima se valida en el servicio (mensaje específico)."""
    respuesta_empresa: str = ""
    accion_tomada: Optional[str] = None
    compensacion_ofrecida: Optional[str] = None


# ========== RESPONSES ==========

class ReclamoListItem(UTF8SafeModel):
    id: uuid.UUID
    codigo_reclamo: str
    tipo_solicitud: TipoSolicitud
    estado: EstadoReclamo
    nombre_completo: str
    email: str
    numero_documento: str
    fecha_registro: datetime
    fecha_limite_respuesta: datetime
    fecha_respuesta: Optional[datetime] = None
    dias_restantes: Optional[int] = None
    nombre_admin_atendio: Optional[str] = None


class PaginationOut(UTF8SafeModel):
    total: int
    page: int
    limit: int
    total_pages: int
    has_next: bool
    has_prev: bool


class ReclamoDetalleOut(ReclamoPublicoOut):
    """Vista completa para el panel (incluye metadatos de la solicitud)."""
    dias_restantes: Optional[int] = None
    atendido_por: Optional[uuid.UUID] = None
    nombre_admin_atendio: Optional[str] = None
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None


class ReclamoAdminDetailOut(UTF8SafeModel):
    reclamo: ReclamoDetalleOut
    respuesta: Optional[RespuestaOut] = None
    historial: list[HistorialOut]
    mensajes: list[MensajeOut]


class EstadisticasPublicasOut(UTF8SafeModel):
    pendientes: int = 0
    en_proceso: int = 0
    resueltos: int = 0
    vencidos: int = 0
    total_reclamos: int = 0
    total_quejas: int = 0
    total: int = 0


class PendienteOut(UTF8SafeModel):
    id: uuid.UUID
    codigo_reclamo: str
    tipo_solicitud: TipoSolicitud
    nombre_completo: str
    email: str
    fecha_registro: datetime
    fecha_limite_respuesta: datetime
    dias_restantes: int
    prioridad: str


class DashboardOut(UTF8SafeModel):
    estadisticas: EstadisticasPublicasOut
    pendientes: list[PendienteOut]


class AdminStatsOut(UTF8SafeModel):
    total_reclamos: int = 0
    pendientes: int = 0
    en_proceso: int = 0
    resueltos: int = 0
    cerrados: int = 0
    reclamos_hoy: int = 0
    reclamos_semana: int = 0
    reclamos_mes: int = 0
    promedio_dias_resolucion: Optional[float] = None


__all__ = [
    "CambioEstadoRequest",
    "RespuestaCreateRequest",
    "ReclamoListItem",
    "PaginationOut",
    "ReclamoDetalleOut",
    "ReclamoAdminDetailOut",
    "EstadisticasPublicasOut",
    "PendienteOut",
    "DashboardOut",
    "AdminStatsOut",
]
