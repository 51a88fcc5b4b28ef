# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/enums/rol_admin_enum.py

Roles del personal administrativo.

- ADMIN: acceso total (incluye cerrar reclamos y gestionar usuarios)
- SOPORTE: atiende reclamos, sin cierre ni gestión de cuentas

Autor: CODEPLEX
Fecha: 2026-02-03
"""
from enum import StrEnum


class RolAdmin(StrEnum):
    ADMIN = "ADMIN"
    SOPORTE = "SOPORTE"


__all__ = ["RolAdmin"]

# Fin del archivo backend/app/modules/auth/enums/rol_admin_enum.py
