# -*- coding: utf-8 -*-
"""
backend/app/modules/reclamos/enums/historial_enum.py

Tipos de acción del historial, autores y tipos de mensaje de seguimiento.

Autor: CODEPLEX
Fecha: 2026-02-05
"""
from enum import StrEnum


class AccionHistorial(StrEnum):
    CREACION = "CREACION"
    CAMBIO_ESTADO = "CAMBIO_ESTADO"
    RESPUESTA = "RESPUESTA"
    MENSAJE_CLIENTE = "MENSAJE_CLIENTE"


class TipoMensaje(StrEnum):
    CLIENTE = "CLIENTE"
    EMPRESA = "EMPRESA"


# Autores no-staff registrados en historial_reclamos.usuario_accion
ACTOR_CLIENTE = "CLIENTE"
ACTOR_SISTEMA = "SISTEMA"

__all__ = ["AccionHistorial", "TipoMensaje", "ACTOR_CLIENTE", "ACTOR_SISTEMA"]

# Fin del archivo backend/app/modules/reclamos/enums/historial_enum.py
