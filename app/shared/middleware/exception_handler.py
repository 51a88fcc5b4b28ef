# -*- coding: utf-8 -*-
"""
backend/app/shared/middleware/exception_handler.py

Manejo de errores con el sobre de respuesta {"success": false, "message": ...}.

- JSONExceptionMiddleware: captura excepciones no manejadas y responde
  500 "Error interno del servidor" (con `error` solo en desarrollo).
- register_exception_handlers: HTTPException → su detail y
  RequestValidationError → 400 "Datos inválidos".

Autor: CODEPLEX
Fecha: 2026-02-09
"""

from __future__ import annotations

import logging
import uuid
from typing import Any, Callable, Dict, Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from app.shared.utils.json_response import json_response_utf8

logger = logging.getLogger(__name__)

# Header para request ID (proxies, balanceadores)
REQUEST_ID_HEADERS = ["x-request-id", "x-correlation-id"]

MENSAJE_ERROR_INTERNO = "Error interno del servidor"
MENSAJE_DATOS_INVALIDOS = "Datos inválidos"


def get_request_id(request: Request) -> str:
    """Extrae request_id de headers o genera uno nuevo."""
    for header in REQUEST_ID_HEADERS:
        value = request.headers.get(header)
        if value:
            return value
    return uuid.uuid4().hex[:16]


def error_body(message: str, **extra: Any) -> Dict[str, Any]:
    body: Dict[str, Any] = {"success": False, "message": message}
    body.update({k: v for k, v in extra.items() if v is not None})
    return body


class JSONExceptionMiddleware(BaseHTTPMiddleware):
    """
    Captura excepciones no manejadas y devuelve el sobre JSON de error.

    Args:
        app: ASGI app
        expose_errors: incluye `error` (repr de la excepción) en la respuesta;
            solo debe activarse en desarrollo.
    """

    def __init__(self, app, expose_errors: bool = False):
        super().__init__(app)
        self.expose_errors = expose_errors

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = get_request_id(request)
        request.state.request_id = request_id

        try:
            return await call_next(request)
        except Exception as e:
            logger.exception(
                "unhandled_exception request_id=%s method=%s path=%s error=%r",
                request_id,
                request.method,
                request.url.path,
                e,
            )
            return json_response_utf8(
                content=error_body(MENSAJE_ERROR_INTERNO, error=repr(e) if self.expose_errors else None),
                status_code=500,
                headers={"X-Request-ID": request_id},
            )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> Response:
    detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    return json_response_utf8(
        content=error_body(detail),
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> Response:
    errors: Optional[list] = None
    try:
        errors = [
            {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
            for err in exc.errors()
        ]
    except (TypeError, AttributeError):
        errors = None
    logger.info("request_validation_failed path=%s errors=%s", request.url.path, errors)
    return json_response_utf8(content=error_body(MENSAJE_DATOS_INVALIDOS, errors=errors), status_code=400)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)


__all__ = [
    "JSONExceptionMiddleware",
    "get_request_id",
    "error_body",
    "register_exception_handlers",
    "MENSAJE_ERROR_INTERNO",
    "MENSAJE_DATOS_INVALIDOS",
]
