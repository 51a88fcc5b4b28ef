# -*- coding: utf-8 -*-
"""
backend/app/modules/reclamos/enums/estado_reclamo_enum.py

Estados del ciclo de vida de un reclamo.

Autor: CODEPLEX
Fecha: 2026-02-05
"""
from enum import StrEnum


class EstadoReclamo(StrEnum):
    PENDIENTE = "PENDIENTE"
    EN_PROCESO = "EN_PROCESO"
    RESUELTO = "RESUELTO"
    CERRADO = "CERRADO"

    @property
    def abierto(self) -> bool:
        """Pendiente de atención (cuenta para plazos y vencidos)."""
        return self in (EstadoReclamo.PENDIENTE, EstadoReclamo.EN_PROCESO)


ESTADOS_ABIERTOS = (EstadoReclamo.PENDIENTE, EstadoReclamo.EN_PROCESO)

__all__ = ["EstadoReclamo", "ESTADOS_ABIERTOS"]

# Fin del archivo backend/app/modules/reclamos/enums/estado_reclamo_enum.py
