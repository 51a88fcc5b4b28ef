# -*- coding: utf-8 -*-
"""
backend/app/__init__.py

Paquete principal del backend del Libro de Reclamaciones.

Autor: CODEPLEX
Fecha: 2026-02-02
"""
