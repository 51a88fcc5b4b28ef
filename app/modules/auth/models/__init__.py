# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/models/__init__.py

Modelos ORM del módulo de autenticación y auditoría.

Autor: CODEPLEX
Fecha: 2026-02-03
"""

from .usuario_admin_models import UsuarioAdmin
from .auditoria_models import AuditoriaAdmin

__all__ = ["UsuarioAdmin", "AuditoriaAdmin"]
