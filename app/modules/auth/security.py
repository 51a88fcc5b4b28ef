# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/security.py

Módulo de seguridad para el panel administrativo:
- Esquema OAuth2 (Bearer) para extraer el token
- Hash / verificación de contraseñas (Argon2id vía passlib)
- Emisión / verificación de JWT (python-jose, HS256)

La configuración del token (clave, algoritmo, vigencia) se inyecta vía
`TokenService.from_settings`; no hay estado global de módulo.

Autor: CODEPLEX
Fecha: 2026-02-03
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from fastapi.security import OAuth2PasswordBearer
from jose import JWTError, jwt
from passlib.context import CryptContext

from app.shared.config.settings_base import BaseAppSettings
from app.modules.auth.enums import RolAdmin

# -----------------------------------------------------------------------------
# Esquema OAuth2: auto_error=False para responder con el mensaje propio
# ("Token requerido") en lugar del genérico de FastAPI.
# -----------------------------------------------------------------------------
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/admin/auth/login", auto_error=False)

# -----------------------------------------------------------------------------
# Hash de contraseñas (Argon2id)
# -----------------------------------------------------------------------------
MAX_PASSWORD_LENGTH = 1024

pwd_context = CryptContext(
    schemes=["argon2"],
    deprecated="auto",
    argon2__type="ID",
    argon2__memory_cost=65536,  # 64 MB
    argon2__time_cost=3,
    argon2__parallelism=2,
)


class PasswordTooLongError(ValueError):
    """Contraseña excede el límite máximo permitido."""


def hash_password(password: str) -> str:
    if len(password) > MAX_PASSWORD_LENGTH:
        raise PasswordTooLongError(
            f"La contraseña no puede exceder {MAX_PASSWORD_LENGTH} caracteres"
        )
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Compara la contraseña con su hash; hashes corruptos cuentan como no-match."""
    if not plain_password or not hashed_password or len(plain_password) > MAX_PASSWORD_LENGTH:
        return False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        return False


# -----------------------------------------------------------------------------
# Manejo de JWT
# -----------------------------------------------------------------------------
class TokenDecodeError(Exception):
    """Error al decodificar/validar un token JWT."""


@dataclass(frozen=True)
class AdminClaims:
    """Identidad extraída de un token válido."""

    user_id: uuid.UUID
    email: str
    rol: RolAdmin

    @property
    def is_admin(self) -> bool:
        return self.rol == RolAdmin.ADMIN


class TokenService:
    """Emite y verifica tokens de sesión del panel administrativo."""

    def __init__(self, secret_key: str, algorithm: str = "HS256", expire_hours: int = 24):
        self._secret_key = secret_key
        self._algorithm = algorithm
        self.expires_in = int(timedelta(hours=expire_hours).total_seconds())

    @classmethod
    def from_settings(cls, settings: BaseAppSettings) -> "TokenService":
        return cls(
            secret_key=settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
            expire_hours=settings.access_token_expire_hours,
        )

    def create_access_token(
        self,
        user_id: uuid.UUID,
        email: str,
        rol: RolAdmin,
        now: Optional[datetime] = None,
    ) -> str:
        now = now or datetime.now(tz=timezone.utc)
        expire = now + timedelta(seconds=self.expires_in)
        to_encode: Dict[str, Any] = {
            "user_id": str(user_id),
            "email": email,
            "rol": str(rol),
            "iat": int(now.timestamp()),
            "exp": int(expire.timestamp()),
        }
        return jwt.encode(to_encode, self._secret_key, algorithm=self._algorithm)

    def decode_access_token(self, token: str) -> AdminClaims:
        """
        Decodifica y valida un JWT (firma + expiración + claims mínimos).
        Lanza TokenDecodeError si es inválido/expirado.
        """
        try:
            payload = jwt.decode(token, self._secret_key, algorithms=[self._algorithm])
        except JWTError as e:
            raise TokenDecodeError("Token inválido o expirado") from e

        try:
            return AdminClaims(
                user_id=uuid.UUID(str(payload["user_id"])),
                email=str(payload["email"]),
                rol=RolAdmin(payload["rol"]),
            )
        except (KeyError, ValueError) as e:
            raise TokenDecodeError("Token con claims incompletos") from e


__all__ = [
    "oauth2_scheme",
    "hash_password",
    "verify_password",
    "PasswordTooLongError",
    "TokenDecodeError",
    "AdminClaims",
    "TokenService",
]
# Fin del archivo
