# -*- coding: utf-8 -*-
"""
backend/app/shared/config/__init__.py

Punto único de acceso a la configuración:
    from app.shared.config import get_settings

Autor: CODEPLEX
Fecha: 2026-02-02
"""

from .config_loader import get_settings
from .settings_base import BaseAppSettings
from .logging_config import setup_logging

__all__ = ["get_settings", "BaseAppSettings", "setup_logging"]
# Fin del archivo
