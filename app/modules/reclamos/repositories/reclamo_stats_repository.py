# -*- coding: utf-8 -*-
"""
backend/app/modules/reclamos/repositories/reclamo_stats_repository.py

Consultas agregadas para el dashboard público y las estadísticas del panel.

Los conteos se resuelven en una sola sentencia con SUM(CASE ...) para
no depender de FILTER (WHERE ...), que no todas las versiones de
SQLite soportan.

Autor: CODEPLEX
Fecha: 2026-02-07
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional, Sequence

from sqlalchemy import ColumnElement, case, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.reclamos.enums import ESTADOS_ABIERTOS, EstadoReclamo, TipoSolicitud
from app.modules.reclamos.models import Reclamo

PENDIENTES_DASHBOARD_LIMIT = 10


def _count_if(condition: ColumnElement[bool]):
    return func.coalesce(func.sum(case((condition, 1), else_=0)), 0)


class ReclamoStatsRepository:
    def __init__(self, db: AsyncSession) -> None:
        self._db = db

    async def public_counts(self, inicio_hoy: datetime) -> Dict[str, int]:
        """Vencidos: abiertos cuyo plazo cayó antes de hoy (días restantes < 0)."""
        abierto = Reclamo.estado.in_(ESTADOS_ABIERTOS)
        stmt = select(
            _count_if(Reclamo.estado == EstadoReclamo.PENDIENTE).label("pendientes"),
            _count_if(Reclamo.estado == EstadoReclamo.EN_PROCESO).label("en_proceso"),
            _count_if(Reclamo.estado == EstadoReclamo.RESUELTO).label("resueltos"),
            _count_if(abierto & (Reclamo.fecha_limite_respuesta < inicio_hoy)).label("vencidos"),
            _count_if(Reclamo.tipo_solicitud == TipoSolicitud.RECLAMO).label("total_reclamos"),
            _count_if(Reclamo.tipo_solicitud == TipoSolicitud.QUEJA).label("total_quejas"),
            func.count(Reclamo.id).label("total"),
        )
        row = (await self._db.execute(stmt)).one()
        return {key: int(value or 0) for key, value in row._mapping.items()}

    async def pendientes(self, limit: int = PENDIENTES_DASHBOARD_LIMIT) -> Sequence[Reclamo]:
        """Reclamos abiertos más próximos a vencer."""
        stmt = (
            select(Reclamo)
            .where(Reclamo.estado.in_(ESTADOS_ABIERTOS))
            .order_by(Reclamo.fecha_limite_respuesta.asc(), Reclamo.id.asc())
            .limit(limit)
        )
        result = await self._db.execute(stmt)
        return result.scalars().all()

    async def admin_counts(
        self,
        *,
        desde_hoy: datetime,
        desde_semana: datetime,
        desde_mes: datetime,
    ) -> Dict[str, int]:
        stmt = select(
            func.count(Reclamo.id).label("total_reclamos"),
            _count_if(Reclamo.estado == EstadoReclamo.PENDIENTE).label("pendientes"),
            _count_if(Reclamo.estado == EstadoReclamo.EN_PROCESO).label("en_proceso"),
            _count_if(Reclamo.estado == EstadoReclamo.RESUELTO).label("resueltos"),
            _count_if(Reclamo.estado == EstadoReclamo.CERRADO).label("cerrados"),
            _count_if(Reclamo.fecha_registro >= desde_hoy).label("reclamos_hoy"),
            _count_if(Reclamo.fecha_registro >= desde_semana).label("reclamos_semana"),
            _count_if(Reclamo.fecha_registro >= desde_mes).label("reclamos_mes"),
        )
        row = (await self._db.execute(stmt)).one()
        return {key: int(value or 0) for key, value in row._mapping.items()}

    async def promedio_dias_resolucion(self) -> Optional[float]:
        """Promedio de días entre registro y respuesta; None si no hay respondidos."""
        dialect = self._db.get_bind().dialect.name
        if dialect == "sqlite":
            dias: Any = func.julianday(Reclamo.fecha_respuesta) - func.julianday(Reclamo.fecha_registro)
        else:
            dias = func.extract("epoch", Reclamo.fecha_respuesta - Reclamo.fecha_registro) / 86400

        stmt = select(func.avg(dias)).where(Reclamo.fecha_respuesta.is_not(None))
        value = (await self._db.execute(stmt)).scalar_one_or_none()
        if value is None:
            return None
        return round(float(value), 1)


__all__ = ["ReclamoStatsRepository", "PENDIENTES_DASHBOARD_LIMIT"]
