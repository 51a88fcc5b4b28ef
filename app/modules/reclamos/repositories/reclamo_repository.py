# -*- coding: utf-8 -*-
"""
backend/app/modules/reclamos/repositories/reclamo_repository.py

Acceso a datos de reclamos y respuestas.

Ninguna escritura hace commit: la transacción la decide el servicio.

Autor: CODEPLEX
Fecha: 2026-02-06
"""

from __future__ import annotations

import uuid
from typing import Optional, Sequence, Tuple

from sqlalchemy import Row, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.auth.models import UsuarioAdmin
from app.modules.reclamos.models import Reclamo, Respuesta
from .reclamo_query_builder import ReclamoListQuery


class ReclamoRepository:
    """Repositorio de reclamos (tabla reclamos + respuestas)."""

    def __init__(self, db: AsyncSession) -> None:
        self._db = db

    # ------------------------------------------------------------------
    # Lecturas
    # ------------------------------------------------------------------
    async def get_by_id(self, reclamo_id: uuid.UUID, *, for_update: bool = False) -> Optional[Reclamo]:
        """
        Obtiene un reclamo por id.

        for_update=True bloquea la fila (SELECT ... FOR UPDATE) hasta el fin
        de la transacción; en SQLite la cláusula se omite.
        """
        stmt = select(Reclamo).where(Reclamo.id == reclamo_id)
        if for_update:
            stmt = stmt.with_for_update()
        result = await self._db.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_codigo(self, codigo: str) -> Optional[Reclamo]:
        stmt = select(Reclamo).where(Reclamo.codigo_reclamo == codigo)
        result = await self._db.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_codigo_y_documento(self, codigo: str, numero_documento: str) -> Optional[Reclamo]:
        """Prueba de titularidad: código + documento del consumidor."""
        stmt = select(Reclamo).where(
            Reclamo.codigo_reclamo == codigo,
            Reclamo.numero_documento == numero_documento.strip(),
        )
        result = await self._db.execute(stmt)
        return result.scalar_one_or_none()

    async def get_with_respuesta(self, codigo: str) -> Optional[Tuple[Reclamo, Optional[Respuesta]]]:
        stmt = (
            select(Reclamo, Respuesta)
            .outerjoin(Respuesta, Respuesta.reclamo_id == Reclamo.id)
            .where(Reclamo.codigo_reclamo == codigo)
        )
        row = (await self._db.execute(stmt)).first()
        return (row[0], row[1]) if row else None

    async def get_firma(self, codigo: str) -> Optional[str]:
        stmt = select(Reclamo.firma_digital).where(Reclamo.codigo_reclamo == codigo)
        result = await self._db.execute(stmt)
        return result.scalar_one_or_none()

    async def get_nombre_admin(self, usuario_id: Optional[uuid.UUID]) -> Optional[str]:
        if usuario_id is None:
            return None
        stmt = select(UsuarioAdmin.nombre_completo).where(UsuarioAdmin.id == usuario_id)
        return (await self._db.execute(stmt)).scalar_one_or_none()

    async def latest_codigo(self, codigo_prefix: str) -> Optional[str]:
        """
        Código más alto emitido con el prefijo dado (p.ej. "CODEPLEX-2026-").

        Ordena por longitud y luego lexicográficamente, de modo que
        "...-100000" queda por encima de "...-99999".
        """
        stmt = (
            select(Reclamo.codigo_reclamo)
            .where(Reclamo.codigo_reclamo.startswith(codigo_prefix, autoescape=True))
            .order_by(func.length(Reclamo.codigo_reclamo).desc(), Reclamo.codigo_reclamo.desc())
            .limit(1)
        )
        result = await self._db.execute(stmt)
        return result.scalar_one_or_none()

    # ------------------------------------------------------------------
    # Listado paginado
    # ------------------------------------------------------------------
    async def count(self, query: ReclamoListQuery) -> int:
        result = await self._db.execute(query.count_statement())
        return int(result.scalar_one() or 0)

    async def list_page(self, query: ReclamoListQuery) -> Sequence[Row]:
        """Filas (Reclamo, nombre_admin_atendio) de la página pedida."""
        result = await self._db.execute(query.page_statement())
        return result.all()

    # ------------------------------------------------------------------
    # Respuestas
    # ------------------------------------------------------------------
    async def get_respuesta(self, reclamo_id: uuid.UUID) -> Optional[Respuesta]:
        stmt = select(Respuesta).where(Respuesta.reclamo_id == reclamo_id)
        result = await self._db.execute(stmt)
        return result.scalar_one_or_none()

    # ------------------------------------------------------------------
    # Escrituras
    # ------------------------------------------------------------------
    async def add(self, entity: Reclamo | Respuesta) -> None:
        self._db.add(entity)
        await self._db.flush()


__all__ = ["ReclamoRepository"]
# Fin del archivo
