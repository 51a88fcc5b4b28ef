# -*- coding: utf-8 -*-
"""
backend/app/modules/reclamos/__init__.py

Módulo del Libro de Reclamaciones: registro de reclamos y quejas,
seguimiento del consumidor y atención desde el panel administrativo.

Autor: CODEPLEX
Fecha: 2026-02-05
"""
