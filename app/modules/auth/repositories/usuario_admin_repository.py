# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/repositories/usuario_admin_repository.py

Repositorio de acceso a datos para UsuarioAdmin (personal del panel).
Encapsula consultas y escrituras sobre usuarios_admin, dejando la
lógica de negocio en los servicios.

Autor: CODEPLEX
Fecha: 2026-02-04
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any, Optional, Sequence

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.auth.models import UsuarioAdmin


def normalize_email(email: Optional[str]) -> str:
    return (email or "").strip().lower()


class UsuarioAdminRepository:
    """Repositorio de usuarios administrativos."""

    def __init__(self, db: AsyncSession) -> None:
        self._db = db

    # ------------------------------------------------------------------
    # Lecturas
    # ------------------------------------------------------------------
    async def get_by_id(self, usuario_id: uuid.UUID) -> Optional[UsuarioAdmin]:
        stmt = select(UsuarioAdmin).where(UsuarioAdmin.id == usuario_id)
        result = await self._db.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> Optional[UsuarioAdmin]:
        """
        Obtiene un usuario por email comparando lower(trim(email)).
        Devuelve None si no existe.
        """
        norm_email = normalize_email(email)
        if not norm_email:
            return None

        stmt = select(UsuarioAdmin).where(
            func.lower(func.trim(UsuarioAdmin.email)) == norm_email
        )
        result = await self._db.execute(stmt)
        return result.scalar_one_or_none()

    async def exists_by_email(self, email: str) -> bool:
        norm_email = normalize_email(email)
        if not norm_email:
            return False
        stmt = select(func.count()).select_from(UsuarioAdmin).where(
            func.lower(func.trim(UsuarioAdmin.email)) == norm_email
        )
        result = await self._db.execute(stmt)
        return (result.scalar_one() or 0) > 0

    async def list_all(self) -> Sequence[UsuarioAdmin]:
        stmt = select(UsuarioAdmin).order_by(UsuarioAdmin.fecha_creacion.desc(), UsuarioAdmin.email)
        result = await self._db.execute(stmt)
        return result.scalars().all()

    # ------------------------------------------------------------------
    # Escrituras (sin commit: lo decide el servicio)
    # ------------------------------------------------------------------
    async def create(self, **fields: Any) -> UsuarioAdmin:
        fields["email"] = normalize_email(fields.get("email"))
        usuario = UsuarioAdmin(**fields)
        self._db.add(usuario)
        await self._db.flush()
        return usuario

    async def touch_ultimo_acceso(self, usuario_id: uuid.UUID, when: Optional[datetime] = None) -> None:
        stmt = (
            update(UsuarioAdmin)
            .where(UsuarioAdmin.id == usuario_id)
            .values(ultimo_acceso=when or datetime.now(timezone.utc))
        )
        await self._db.execute(stmt)


__all__ = ["UsuarioAdminRepository", "normalize_email"]
# Fin del archivo
