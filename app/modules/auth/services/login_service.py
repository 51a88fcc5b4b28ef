# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/services/login_service.py

Flujo de login del panel administrativo:
- Busca al usuario por email normalizado (lower + trim).
- Verifica contraseña y que la cuenta esté activa.
- Emite el token de sesión (24h).
- El sello de último acceso se aplica fuera del camino crítico
  (BackgroundTasks en la ruta), con su propia sesión.

Autor: CODEPLEX
Fecha: 2026-02-04
"""

from __future__ import annotations

import logging
import uuid

from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.database import Database
from app.modules.auth.repositories import UsuarioAdminRepository
from app.modules.auth.schemas import LoginData, LoginRequest, UsuarioSesionOut
from app.modules.auth.security import TokenService, verify_password

logger = logging.getLogger(__name__)


class LoginService:
    """Autentica personal administrativo y emite tokens."""

    def __init__(self, db: AsyncSession, token_service: TokenService) -> None:
        self._users = UsuarioAdminRepository(db)
        self._tokens = token_service

    async def login(self, payload: LoginRequest, ip_address: str = "unknown") -> LoginData:
        usuario = await self._users.get_by_email(payload.email)
        if usuario is None:
            logger.info("login_failed reason=not_found ip=%s", ip_address)
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Credenciales inválidas",
            )

        # Cuenta deshabilitada: 403 aun con contraseña correcta
        if not usuario.activo:
            logger.info("login_failed reason=inactive user_id=%s ip=%s", usuario.id, ip_address)
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Usuario inactivo",
            )

        if not verify_password(payload.password, usuario.password_hash):
            logger.info("login_failed reason=bad_password user_id=%s ip=%s", usuario.id, ip_address)
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Credenciales inválidas",
            )

        token = self._tokens.create_access_token(usuario.id, usuario.email, usuario.rol)
        logger.info("login_success user_id=%s rol=%s ip=%s", usuario.id, usuario.rol, ip_address)

        return LoginData(
            token=token,
            usuario=UsuarioSesionOut.model_validate(usuario),
            expires_in=self._tokens.expires_in,
        )


async def touch_ultimo_acceso(database: Database, usuario_id: uuid.UUID) -> None:
    """Actualiza ultimo_acceso; los errores se registran y se descartan."""
    try:
        async with database.session_scope() as db:
            await UsuarioAdminRepository(db).touch_ultimo_acceso(usuario_id)
            await db.commit()
    except SQLAlchemyError as e:
        logger.warning("ultimo_acceso no actualizado user_id=%s: %s", usuario_id, e)


__all__ = ["LoginService", "touch_ultimo_acceso"]
