# -*- coding: utf-8 -*-
"""
backend/app/modules/reclamos/models/__init__.py

Modelos ORM del módulo de reclamos.

El import de app.modules.auth.models registra usuarios_admin en la
metadata antes de resolver las FKs atendido_por / usuario_id.

Autor: CODEPLEX
Fecha: 2026-02-05
"""

import app.modules.auth.models  # noqa: F401

from .reclamo_models import (
    Reclamo,
    MAX_NOMBRE,
    MAX_DESCRIPCION_BIEN,
    MAX_DETALLE,
    MAX_PEDIDO,
    MAX_MONTO,
)
from .respuesta_models import Respuesta, MIN_RESPUESTA_LENGTH
from .historial_models import HistorialReclamo, MensajeSeguimiento, MAX_MENSAJE_LENGTH

__all__ = [
    "Reclamo",
    "Respuesta",
    "HistorialReclamo",
    "MensajeSeguimiento",
    "MAX_NOMBRE",
    "MAX_DESCRIPCION_BIEN",
    "MAX_DETALLE",
    "MAX_PEDIDO",
    "MAX_MONTO",
    "MIN_RESPUESTA_LENGTH",
    "MAX_MENSAJE_LENGTH",
]
