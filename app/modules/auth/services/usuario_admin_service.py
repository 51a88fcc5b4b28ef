# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/services/usuario_admin_service.py

Gestión de cuentas del personal (solo ADMIN):
- Listado
- Alta con contraseña inicial
- Actualización parcial (nombre, rol, activo)
- Restablecimiento de contraseña

Cada operación confirma su transacción y devuelve el evento
UsuarioAdminModificado que la ruta publica para auditoría.

Autor: CODEPLEX
Fecha: 2026-02-05
"""

from __future__ import annotations

import logging
import uuid
from typing import List, Optional, Tuple

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.auth.enums import AccionAuditoria
from app.modules.auth.events import UsuarioAdminModificado
from app.modules.auth.repositories import UsuarioAdminRepository
from app.modules.auth.schemas import (
    PasswordChangeRequest,
    UsuarioCreateRequest,
    UsuarioOut,
    UsuarioUpdateRequest,
)
from app.modules.auth.security import AdminClaims, hash_password

logger = logging.getLogger(__name__)


class UsuarioAdminService:
    def __init__(self, db: AsyncSession) -> None:
        self._db = db
        self._users = UsuarioAdminRepository(db)

    async def list_usuarios(self) -> List[UsuarioOut]:
        usuarios = await self._users.list_all()
        return [UsuarioOut.model_validate(u) for u in usuarios]

    async def create_usuario(
        self,
        payload: UsuarioCreateRequest,
        actor: AdminClaims,
        ip_address: Optional[str] = None,
    ) -> Tuple[UsuarioOut, UsuarioAdminModificado]:
        if await self._users.exists_by_email(payload.email):
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="El email ya está registrado",
            )

        try:
            usuario = await self._users.create(
                email=payload.email,
                nombre_completo=payload.nombre_completo,
                password_hash=hash_password(payload.password),
                rol=payload.rol,
                activo=True,
                debe_cambiar_password=True,
                creado_por=actor.user_id,
            )
            # fecha_creacion viene del servidor: se lee antes de cerrar la transacción
            await self._db.refresh(usuario)
            await self._db.commit()
        except IntegrityError as e:
            # Carrera entre dos altas con el mismo email
            await self._db.rollback()
            logger.info("usuario_duplicado email=%s: %s", payload.email, e.orig)
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="El email ya está registrado",
            ) from e

        logger.info("usuario_creado id=%s rol=%s por=%s", usuario.id, usuario.rol, actor.user_id)

        event = UsuarioAdminModificado(
            usuario_id=actor.user_id,
            accion=AccionAuditoria.CREAR_USUARIO,
            entidad_id=str(usuario.id),
            detalles={"email": usuario.email, "rol": str(usuario.rol)},
            ip_address=ip_address,
        )
        return UsuarioOut.model_validate(usuario), event

    async def update_usuario(
        self,
        usuario_id: uuid.UUID,
        payload: UsuarioUpdateRequest,
        actor: AdminClaims,
        ip_address: Optional[str] = None,
    ) -> Tuple[UsuarioOut, UsuarioAdminModificado]:
        usuario = await self._get_or_404(usuario_id)

        cambios = payload.model_dump(exclude_unset=True, exclude_none=True)
        if not cambios:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="No hay campos para actualizar",
            )

        for campo, valor in cambios.items():
            setattr(usuario, campo, valor)
        await self._db.commit()

        event = UsuarioAdminModificado(
            usuario_id=actor.user_id,
            accion=AccionAuditoria.ACTUALIZAR_USUARIO,
            entidad_id=str(usuario.id),
            detalles={k: str(v) for k, v in cambios.items()},
            ip_address=ip_address,
        )
        return UsuarioOut.model_validate(usuario), event

    async def change_password(
        self,
        usuario_id: uuid.UUID,
        payload: PasswordChangeRequest,
        actor: AdminClaims,
        ip_address: Optional[str] = None,
    ) -> UsuarioAdminModificado:
        usuario = await self._get_or_404(usuario_id)

        usuario.password_hash = hash_password(payload.new_password)
        # Contraseña fijada por un tercero: se pide cambiarla al entrar
        usuario.debe_cambiar_password = usuario.id != actor.user_id
        await self._db.commit()

        return UsuarioAdminModificado(
            usuario_id=actor.user_id,
            accion=AccionAuditoria.CAMBIAR_PASSWORD,
            entidad_id=str(usuario.id),
            ip_address=ip_address,
        )

    async def _get_or_404(self, usuario_id: uuid.UUID):
        usuario = await self._users.get_by_id(usuario_id)
        if usuario is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Usuario no encontrado",
            )
        return usuario


__all__ = ["UsuarioAdminService"]
