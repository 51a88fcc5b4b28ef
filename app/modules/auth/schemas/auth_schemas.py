# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/schemas/auth_schemas.py

Schemas Pydantic para el login del panel administrativo.

Autor: CODEPLEX
Fecha: 2026-02-04
"""

import uuid

from pydantic import EmailStr, Field, field_validator

from app.shared.utils.base_models import UTF8SafeModel
from app.modules.auth.enums import RolAdmin


# ========== REQUESTS ==========

class LoginRequest(UTF8SafeModel):
    """Petición de inicio de sesión"""
    email: EmailStr
    password: str = Field(..., min_length=1)

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, v):
        """Normaliza email a minúsculas"""
        return v.lower().strip() if isinstance(v, str) else v


# ========== RESPONSES ==========

class UsuarioSesionOut(UTF8SafeModel):
    id: uuid.UUID
    email: str
    nombre_completo: str
    rol: RolAdmin
    debe_cambiar_password: bool = False


class LoginData(UTF8SafeModel):
    token: str
    usuario: UsuarioSesionOut
    expires_in: int


__all__ = ["LoginRequest", "UsuarioSesionOut", "LoginData"]
