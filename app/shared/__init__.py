# -*- coding: utf-8 -*-
"""
backend/app/shared/__init__.py

Infraestructura compartida: configuración, base de datos, eventos,
integraciones de email, middlewares y utilidades.

No inicializa settings en import-time para evitar efectos colaterales
durante la recolección de tests.
"""

from app.shared.config.config_loader import get_settings

__all__ = ["get_settings"]
