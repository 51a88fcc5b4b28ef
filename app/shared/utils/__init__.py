# -*- coding: utf-8 -*-
"""
backend/app/shared/utils/__init__.py

Utilidades comunes: modelos base Pydantic, sobre de respuesta y JSON UTF-8.

Autor: CODEPLEX
Fecha: 2026-02-02
"""

from .base_models import UTF8SafeModel, ok
from .json_response import UTF8JSONResponse, json_response_utf8

__all__ = [
    "UTF8SafeModel",
    "ok",
    "UTF8JSONResponse",
    "json_response_utf8",
]
