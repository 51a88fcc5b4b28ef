# -*- coding: utf-8 -*-
"""
backend/app/modules/reclamos/services/plazos.py

Cálculo de plazos de respuesta, días restantes y prioridad.

Todas las fechas se manejan en UTC. SQLite devuelve datetimes naive;
`as_utc` los interpreta como UTC.

Autor: CODEPLEX
Fecha: 2026-02-06
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Optional

from app.modules.reclamos.enums import EstadoReclamo

PRIORIDAD_VENCIDO = "VENCIDO"
PRIORIDAD_ALTA = "ALTA"
PRIORIDAD_MEDIA = "MEDIA"
PRIORIDAD_BAJA = "BAJA"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def inicio_del_dia(now: datetime) -> datetime:
    """00:00 UTC del día de `now`; un plazo anterior a este instante está vencido."""
    return as_utc(now).replace(hour=0, minute=0, second=0, microsecond=0)


def fecha_limite(fecha_registro: datetime, plazo_dias: int) -> datetime:
    """Plazo legal en días calendario a partir del registro."""
    return as_utc(fecha_registro) + timedelta(days=plazo_dias)


def dias_restantes(
    fecha_limite_respuesta: datetime,
    estado: EstadoReclamo,
    now: Optional[datetime] = None,
) -> Optional[int]:
    """
    Días calendario hasta el vencimiento (negativo si ya venció).

    Solo aplica a reclamos abiertos; RESUELTO y CERRADO devuelven None.
    """
    if not EstadoReclamo(estado).abierto:
        return None
    today = as_utc(now or utcnow()).date()
    return (as_utc(fecha_limite_respuesta).date() - today).days


def prioridad(dias: int) -> str:
    if dias < 0:
        return PRIORIDAD_VENCIDO
    if dias <= 3:
        return PRIORIDAD_ALTA
    if dias <= 7:
        return PRIORIDAD_MEDIA
    return PRIORIDAD_BAJA


__all__ = [
    "utcnow",
    "as_utc",
    "inicio_del_dia",
    "fecha_limite",
    "dias_restantes",
    "prioridad",
    "PRIORIDAD_VENCIDO",
    "PRIORIDAD_ALTA",
    "PRIORIDAD_MEDIA",
    "PRIORIDAD_BAJA",
]
