# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/services/__init__.py

Servicios del módulo de autenticación.

Autor: CODEPLEX
Fecha: 2026-02-05
"""

from .audit_service import AuditService
from .login_service import LoginService, touch_ultimo_acceso
from .usuario_admin_service import UsuarioAdminService

__all__ = ["AuditService", "LoginService", "touch_ultimo_acceso", "UsuarioAdminService"]
