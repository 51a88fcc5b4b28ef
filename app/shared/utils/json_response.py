# -*- coding: utf-8 -*-
"""
backend/app/shared/utils/json_response.py

Respuestas JSON con charset UTF-8 explícito.

1. UTF8JSONResponse: default_response_class de la aplicación
2. json_response_utf8: helper para handlers de errores

Evita mojibake (AtenciÃ³n → Atención) en clientes o proxies que no
asumen UTF-8 por defecto; los mensajes de la API van en español.

Autor: CODEPLEX
Fecha: 2026-02-09
"""

from typing import Any, Dict, Optional

from fastapi.responses import JSONResponse


class UTF8JSONResponse(JSONResponse):
    media_type = "application/json; charset=utf-8"


def json_response_utf8(
    content: Any,
    status_code: int = 200,
    headers: Optional[Dict[str, str]] = None,
) -> UTF8JSONResponse:
    return UTF8JSONResponse(content=content, status_code=status_code, headers=headers)


__all__ = ["UTF8JSONResponse", "json_response_utf8"]
