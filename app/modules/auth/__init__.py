# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/__init__.py

Módulo de autenticación del panel administrativo:
usuarios_admin, login JWT, control de roles y auditoría.

Autor: CODEPLEX
Fecha: 2026-02-03
"""
