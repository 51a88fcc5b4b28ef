# -*- coding: utf-8 -*-
"""
backend/app/modules/reclamos/enums/tipo_solicitud_enum.py

Tipos de solicitud y de bien contratado.

- RECLAMO: disconformidad con el producto o servicio
- QUEJA: malestar respecto a la atención, no al bien

Autor: CODEPLEX
Fecha: 2026-02-05
"""
from enum import StrEnum


class TipoSolicitud(StrEnum):
    RECLAMO = "RECLAMO"
    QUEJA = "QUEJA"


class TipoBien(StrEnum):
    PRODUCTO = "PRODUCTO"
    SERVICIO = "SERVICIO"


__all__ = ["TipoSolicitud", "TipoBien"]

# Fin del archivo backend/app/modules/reclamos/enums/tipo_solicitud_enum.py
