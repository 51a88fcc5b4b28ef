# -*- coding: utf-8 -*-
"""
backend/app/modules/reclamos/enums/__init__.py

Enums del módulo de reclamos.

Autor: CODEPLEX
Fecha: 2026-02-05
"""

from .tipo_solicitud_enum import TipoSolicitud, TipoBien
from .estado_reclamo_enum import EstadoReclamo, ESTADOS_ABIERTOS
from .historial_enum import AccionHistorial, TipoMensaje, ACTOR_CLIENTE, ACTOR_SISTEMA
from .estado_transitions import (
    VALID_STATE_TRANSITIONS,
    TransicionInvalidaError,
    is_valid_state_transition,
    get_allowed_transitions,
    can_role_target,
    validate_state_transition,
)

__all__ = [
    "TipoSolicitud",
    "TipoBien",
    "EstadoReclamo",
    "ESTADOS_ABIERTOS",
    "AccionHistorial",
    "TipoMensaje",
    "ACTOR_CLIENTE",
    "ACTOR_SISTEMA",
    "VALID_STATE_TRANSITIONS",
    "TransicionInvalidaError",
    "is_valid_state_transition",
    "get_allowed_transitions",
    "can_role_target",
    "validate_state_transition",
]
