# -*- coding: utf-8 -*-
"""
backend/app/modules/reclamos/schemas/__init__.py

Schemas Pydantic del módulo de reclamos.

Autor: CODEPLEX
Fecha: 2026-02-06
"""

from .reclamo_schemas import (
    ReclamoCreateRequest,
    MensajeCreateRequest,
    ReclamoCreadoOut,
    ReclamoPublicoOut,
    ReclamoResumenOut,
    HistorialOut,
    MensajeOut,
    RespuestaOut,
    SeguimientoOut,
)
from .admin_schemas import (
    CambioEstadoRequest,
    RespuestaCreateRequest,
    ReclamoListItem,
    PaginationOut,
    ReclamoDetalleOut,
    ReclamoAdminDetailOut,
    EstadisticasPublicasOut,
    PendienteOut,
    DashboardOut,
    AdminStatsOut,
)

__all__ = [
    "ReclamoCreateRequest",
    "MensajeCreateRequest",
    "ReclamoCreadoOut",
    "ReclamoPublicoOut",
    "ReclamoResumenOut",
    "HistorialOut",
    "MensajeOut",
    "RespuestaOut",
    "SeguimientoOut",
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
