# -*- coding: utf-8 -*-
"""
backend/app/modules/reclamos/repositories/historial_repository.py

Historial del reclamo y mensajes de seguimiento (append-only).

Autor: CODEPLEX
Fecha: 2026-02-06
"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Optional, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.reclamos.enums import AccionHistorial, EstadoReclamo, TipoMensaje
from app.modules.reclamos.models import HistorialReclamo, MensajeSeguimiento


class HistorialRepository:
    def __init__(self, db: AsyncSession) -> None:
        self._db = db

    async def add_entry(
        self,
        *,
        reclamo_id: uuid.UUID,
        estado_anterior: Optional[EstadoReclamo],
        estado_nuevo: EstadoReclamo,
        tipo_accion: AccionHistorial,
        comentario: Optional[str],
        usuario_accion: str,
        fecha_accion: datetime,
        ip_address: Optional[str] = None,
    ) -> HistorialReclamo:
        entry = HistorialReclamo(
            reclamo_id=reclamo_id,
            estado_anterior=estado_anterior,
            estado_nuevo=estado_nuevo,
            tipo_accion=tipo_accion,
            comentario=comentario,
            usuario_accion=usuario_accion,
            ip_address=ip_address,
            fecha_accion=fecha_accion,
        )
        self._db.add(entry)
        await self._db.flush()
        return entry

    async def list_entries(self, reclamo_id: uuid.UUID) -> Sequence[HistorialReclamo]:
        """Más reciente primero; el id desempata eventos del mismo instante."""
        stmt = (
            select(HistorialReclamo)
            .where(HistorialReclamo.reclamo_id == reclamo_id)
            .order_by(HistorialReclamo.fecha_accion.desc(), HistorialReclamo.id.desc())
        )
        result = await self._db.execute(stmt)
        return result.scalars().all()

    async def add_mensaje(
        self,
        *,
        reclamo_id: uuid.UUID,
        mensaje: str,
        fecha_mensaje: datetime,
        tipo_mensaje: TipoMensaje = TipoMensaje.CLIENTE,
    ) -> MensajeSeguimiento:
        row = MensajeSeguimiento(
            reclamo_id=reclamo_id,
            mensaje=mensaje,
            tipo_mensaje=tipo_mensaje,
            fecha_mensaje=fecha_mensaje,
        )
        self._db.add(row)
        await self._db.flush()
        return row

    async def list_mensajes(self, reclamo_id: uuid.UUID) -> Sequence[MensajeSeguimiento]:
        """Orden cronológico ascendente."""
        stmt = (
            select(MensajeSeguimiento)
            .where(MensajeSeguimiento.reclamo_id == reclamo_id)
            .order_by(MensajeSeguimiento.fecha_mensaje.asc(), MensajeSeguimiento.id.asc())
        )
        result = await self._db.execute(stmt)
        return result.scalars().all()


__all__ = ["HistorialRepository"]
# Fin del archivo
