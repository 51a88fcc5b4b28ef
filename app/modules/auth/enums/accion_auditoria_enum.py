# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/enums/accion_auditoria_enum.py

Acciones y entidades registradas en auditoria_admin.

Autor: CODEPLEX
Fecha: 2026-02-03
"""
from enum import StrEnum


class AccionAuditoria(StrEnum):
    CAMBIO_ESTADO = "CAMBIO_ESTADO"
    RESPONDER = "RESPONDER"
    CREAR_USUARIO = "CREAR_USUARIO"
    ACTUALIZAR_USUARIO = "ACTUALIZAR_USUARIO"
    CAMBIAR_PASSWORD = "CAMBIAR_PASSWORD"


class EntidadAuditoria(StrEnum):
    RECLAMO = "RECLAMO"
    USUARIO = "USUARIO"


__all__ = ["AccionAuditoria", "EntidadAuditoria"]

# Fin del archivo backend/app/modules/auth/enums/accion_auditoria_enum.py
