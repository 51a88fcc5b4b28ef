# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/events.py

Eventos de acciones administrativas. Toda subclase de
AccionAdministrativa termina como una fila en auditoria_admin.

Autor: CODEPLEX
Fecha: 2026-02-04
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from app.shared.events import DomainEvent
from app.modules.auth.enums import AccionAuditoria, EntidadAuditoria


@dataclass(frozen=True, kw_only=True)
class AccionAdministrativa(DomainEvent):
    usuario_id: Optional[uuid.UUID]
    accion: AccionAuditoria
    entidad: EntidadAuditoria
    entidad_id: str
    detalles: Dict[str, Any] = field(default_factory=dict)
    ip_address: Optional[str] = None


@dataclass(frozen=True, kw_only=True)
class UsuarioAdminModificado(AccionAdministrativa):
    entidad: EntidadAuditoria = EntidadAuditoria.USUARIO


__all__ = ["AccionAdministrativa", "UsuarioAdminModificado"]
# Fin del archivo
