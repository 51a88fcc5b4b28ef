# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/schemas/usuario_schemas.py

Schemas para la gestión de cuentas del personal (usuarios_admin).

Autor: CODEPLEX
Fecha: 2026-02-04
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import EmailStr, Field, field_validator

from app.shared.utils.base_models import UTF8SafeModel
from app.modules.auth.enums import RolAdmin

PASSWORD_MIN_LENGTH = 6


class UsuarioCreateRequest(UTF8SafeModel):
    email: EmailStr
    nombre_completo: str = Field(..., min_length=1, max_length=200)
    password: str = Field(..., min_length=PASSWORD_MIN_LENGTH, max_length=128)
    rol: RolAdmin

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, v):
        return v.lower().strip() if isinstance(v, str) else v


class UsuarioUpdateRequest(UTF8SafeModel):
    """Actualización parcial: solo se aplican los campos enviados."""
    nombre_completo: Optional[str] = Field(None, min_length=1, max_length=200)
    rol: Optional[RolAdmin] = None
    activo: Optional[bool] = None


class PasswordChangeRequest(UTF8SafeModel):
    new_password: str = Field(..., min_length=PASSWORD_MIN_LENGTH, max_length=128)


class UsuarioOut(UTF8SafeModel):
    id: uuid.UUID
    email: str
    nombre_completo: str
    rol: RolAdmin
    activo: bool
    debe_cambiar_password: bool = False
    ultimo_acceso: Optional[datetime] = None
    fecha_creacion: Optional[datetime] = None


__all__ = [
    "PASSWORD_MIN_LENGTH",
    "UsuarioCreateRequest",
    "UsuarioUpdateRequest",
    "PasswordChangeRequest",
    "UsuarioOut",
]
