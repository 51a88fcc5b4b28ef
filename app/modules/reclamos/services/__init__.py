# -*- coding: utf-8 -*-
"""
backend/app/modules/reclamos/services/__init__.py

Servicios del módulo de reclamos.

Autor: CODEPLEX
Fecha: 2026-02-07
"""

from .codigo_allocator import CodigoReclamoAllocator, format_codigo, parse_sequence
from .reclamo_lifecycle_service import ReclamoLifecycleService
from .reclamo_query_service import ReclamoQueryService, decode_firma
from .notification_service import NotificationService

__all__ = [
    "CodigoReclamoAllocator",
    "format_codigo",
    "parse_sequence",
    "ReclamoLifecycleService",
    "ReclamoQueryService",
    "decode_firma",
    "NotificationService",
]
