# -*- coding: utf-8 -*-
"""
backend/app/shared/utils/base_models.py

Modelo base para los esquemas Pydantic de la API.

Incluye:
- Eliminación automática de espacios en campos de texto (`str_strip_whitespace`)
- Modo de atributos activado para construir desde modelos ORM (`from_attributes`)

Autor: CODEPLEX
Fecha: 2026-02-02
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class UTF8SafeModel(BaseModel):
    """Base de todos los schemas; la salida JSON se sirve con charset UTF-8."""
    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


def ok(data: Any = None, message: Optional[str] = None) -> dict:
    """Construye el sobre de éxito omitiendo claves vacías."""
    body: dict = {"success": True}
    if message is not None:
        body["message"] = message
    if data is not None:
        body["data"] = data
    return body


__all__ = ["UTF8SafeModel", "ok"]
# Fin del archivo base_models.py
