# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/enums/__init__.py

Enums del módulo de autenticación y auditoría.

Autor: CODEPLEX
Fecha: 2026-02-03
"""

from .rol_admin_enum import RolAdmin
from .accion_auditoria_enum import AccionAuditoria, EntidadAuditoria

__all__ = ["RolAdmin", "AccionAuditoria", "EntidadAuditoria"]
