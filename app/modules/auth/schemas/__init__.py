# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/schemas/__init__.py

Schemas Pydantic del módulo de autenticación.

Autor: CODEPLEX
Fecha: 2026-02-04
"""

from .auth_schemas import LoginRequest, UsuarioSesionOut, LoginData
from .usuario_schemas import (
    PASSWORD_MIN_LENGTH,
    UsuarioCreateRequest,
    UsuarioUpdateRequest,
    PasswordChangeRequest,
    UsuarioOut,
)

__all__ = [
    "LoginRequest",
    "UsuarioSesionOut",
    "LoginData",
    "PASSWORD_MIN_LENGTH",
    "UsuarioCreateRequest",
    "UsuarioUpdateRequest",
    "PasswordChangeRequest",
    "UsuarioOut",
]
