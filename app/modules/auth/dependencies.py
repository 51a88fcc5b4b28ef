# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/dependencies.py

Dependencias de autenticación JWT para FastAPI.

Provee:
- get_token_service: TokenService construido desde settings
- get_current_admin: valida el Bearer token y devuelve AdminClaims
- require_admin: además exige rol ADMIN

Autor: CODEPLEX
Fecha: 2026-02-03
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import Depends, HTTPException, Request, status

from app.core.settings import get_app_settings
from app.shared.config.settings_base import BaseAppSettings
from .security import AdminClaims, TokenDecodeError, TokenService, oauth2_scheme

logger = logging.getLogger(__name__)


def get_token_service(settings: BaseAppSettings = Depends(get_app_settings)) -> TokenService:
    return TokenService.from_settings(settings)


async def get_current_admin(
    request: Request,
    token: Optional[str] = Depends(oauth2_scheme),
    token_service: TokenService = Depends(get_token_service),
) -> AdminClaims:
    """
    Dependencia de autenticación para endpoints protegidos.

    Extrae el JWT del header Authorization: Bearer <token>, lo valida
    y deja la identidad en request.state.admin para capas posteriores.

    Raises:
        HTTPException 401: Token ausente ("Token requerido") o inválido/expirado.
    """
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token requerido",
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        claims = token_service.decode_access_token(token)
    except TokenDecodeError as e:
        logger.info("auth_token_rejected path=%s reason=%s", request.url.path, e)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token inválido",
            headers={"WWW-Authenticate": "Bearer"},
        ) from e

    request.state.admin = claims
    return claims


async def require_admin(
    admin: AdminClaims = Depends(get_current_admin),
) -> AdminClaims:
    """
    Dependencia que requiere rol ADMIN.

    Raises:
        HTTPException 401: Token inválido
        HTTPException 403: El usuario no es ADMIN
    """
    if not admin.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Acceso denegado",
        )
    return admin


__all__ = [
    "get_token_service",
    "get_current_admin",
    "require_admin",
]
