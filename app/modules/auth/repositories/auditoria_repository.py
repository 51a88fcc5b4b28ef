# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/repositories/auditoria_repository.py

Inserción y consulta de la bitácora auditoria_admin (append-only).

Autor: CODEPLEX
Fecha: 2026-02-04
"""

from __future__ import annotations

import uuid
from typing import Any, Dict, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.auth.enums import AccionAuditoria, EntidadAuditoria
from app.modules.auth.models import AuditoriaAdmin


class AuditoriaRepository:
    def __init__(self, db: AsyncSession) -> None:
        self._db = db

    async def add(
        self,
        *,
        usuario_id: Optional[uuid.UUID],
        accion: AccionAuditoria,
        entidad: EntidadAuditoria,
        entidad_id: Optional[str],
        detalles: Optional[Dict[str, Any]] = None,
        ip_address: Optional[str] = None,
    ) -> AuditoriaAdmin:
        entry = AuditoriaAdmin(
            usuario_id=usuario_id,
            accion=accion,
            entidad=entidad,
            entidad_id=entidad_id,
            detalles=detalles,
            ip_address=ip_address,
        )
        self._db.add(entry)
        await self._db.flush()
        return entry

    async def list_for_entity(self, entidad: EntidadAuditoria, entidad_id: str) -> Sequence[AuditoriaAdmin]:
        stmt = (
            select(AuditoriaAdmin)
            .where(AuditoriaAdmin.entidad == entidad, AuditoriaAdmin.entidad_id == entidad_id)
            .order_by(AuditoriaAdmin.id.asc())
        )
        result = await self._db.execute(stmt)
        return result.scalars().all()


__all__ = ["AuditoriaRepository"]
# Fin del archivo
