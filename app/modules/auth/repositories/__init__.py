# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/repositories/__init__.py

Repositorios del módulo de autenticación.

Autor: CODEPLEX
Fecha: 2026-02-04
"""

from .usuario_admin_repository import UsuarioAdminRepository, normalize_email
from .auditoria_repository import AuditoriaRepository

__all__ = ["UsuarioAdminRepository", "AuditoriaRepository", "normalize_email"]
