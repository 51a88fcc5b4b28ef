# -*- coding: utf-8 -*-
"""
backend/app/shared/events/base.py

Clase base de eventos de dominio.

Los servicios devuelven eventos tras confirmar (commit) la transacción;
la ruta los publica en el EventDispatcher de la app.

Autor: CODEPLEX
Fecha: 2026-02-04
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True, kw_only=True)
class DomainEvent:
    """Hecho inmutable ocurrido en el dominio."""

    event_id: uuid.UUID = field(default_factory=uuid.uuid4)
    ocurrido_en: datetime = field(default_factory=_utcnow)

    @property
    def nombre(self) -> str:
        return type(self).__name__


__all__ = ["DomainEvent"]
# Fin del archivo backend/app/shared/events/base.py
