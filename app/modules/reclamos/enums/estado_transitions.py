# -*- coding: utf-8 -*-
"""
backend/app/modules/reclamos/enums/estado_transitions.py

Mapa de transiciones válidas para EstadoReclamo (cambio de estado manual).

Reglas de transición:
- PENDIENTE  → EN_PROCESO | RESUELTO | CERRADO
- EN_PROCESO → RESUELTO | CERRADO
- RESUELTO   → CERRADO
- CERRADO    → (estado terminal)

Ningún estado regresa a PENDIENTE. Solo ADMIN puede llevar un reclamo
a CERRADO. El registro de una respuesta fuerza RESUELTO por su cuenta
(ver ReclamoLifecycleService.responder) y no pasa por este mapa.

Autor: CODEPLEX
Fecha: 2026-02-05
"""

from typing import Dict, Set

from app.modules.auth.enums import RolAdmin
from .estado_reclamo_enum import EstadoReclamo


VALID_STATE_TRANSITIONS: Dict[EstadoReclamo, Set[EstadoReclamo]] = {
    EstadoReclamo.PENDIENTE: {
        EstadoReclamo.EN_PROCESO,
        EstadoReclamo.RESUELTO,
        EstadoReclamo.CERRADO,
    },
    EstadoReclamo.EN_PROCESO: {
        EstadoReclamo.RESUELTO,
        EstadoReclamo.CERRADO,
    },
    EstadoReclamo.RESUELTO: {
        EstadoReclamo.CERRADO,
    },
    EstadoReclamo.CERRADO: set(),
}

# Estados destino reservados a ciertos roles
RESTRICTED_TARGETS: Dict[EstadoReclamo, Set[RolAdmin]] = {
    EstadoReclamo.CERRADO: {RolAdmin.ADMIN},
}


class TransicionInvalidaError(ValueError):
    def __init__(self, from_state: EstadoReclamo, to_state: EstadoReclamo):
        self.from_state = from_state
        self.to_state = to_state
        super().__init__(f"Transición de estado no permitida: {from_state.value} → {to_state.value}")


def is_valid_state_transition(from_state: EstadoReclamo, to_state: EstadoReclamo) -> bool:
    return to_state in VALID_STATE_TRANSITIONS.get(from_state, set())


def get_allowed_transitions(from_state: EstadoReclamo) -> Set[EstadoReclamo]:
    return VALID_STATE_TRANSITIONS.get(from_state, set())


def can_role_target(rol: RolAdmin, to_state: EstadoReclamo) -> bool:
    """Indica si el rol puede llevar un reclamo al estado destino."""
    allowed_roles = RESTRICTED_TARGETS.get(to_state)
    return allowed_roles is None or rol in allowed_roles


def validate_state_transition(from_state: EstadoReclamo, to_state: EstadoReclamo) -> None:
    """
    Raises:
        TransicionInvalidaError: Si la transición no está en el mapa.
    """
    if not is_valid_state_transition(from_state, to_state):
        raise TransicionInvalidaError(from_state, to_state)


__all__ = [
    "VALID_STATE_TRANSITIONS",
    "RESTRICTED_TARGETS",
    "TransicionInvalidaError",
    "is_valid_state_transition",
    "get_allowed_transitions",
    "can_role_target",
    "validate_state_transition",
]

# Fin del archivo backend\app\modules\reclamos\enums\estado_transitions.py
