# -*- coding: utf-8 -*-
"""
backend/app/shared/middleware/__init__.py

Módulo de middlewares compartidos.
"""

from .exception_handler import (
    JSONExceptionMiddleware,
    error_body,
    get_request_id,
    register_exception_handlers,
)
from .request_logging import RequestLoggingMiddleware

__all__ = [
    "JSONExceptionMiddleware",
    "error_body",
    "get_request_id",
    "register_exception_handlers",
    "RequestLoggingMiddleware",
]
