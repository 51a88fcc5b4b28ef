# -*- coding: utf-8 -*-
"""
backend/app/modules/reclamos/events.py

Eventos de dominio del ciclo de vida de un reclamo.

- ReclamoCreado / MensajeClienteRecibido: disparan notificaciones por email.
- EstadoCambiado / RespuestaRegistrada: son AccionAdministrativa, por lo que
  AuditService las persiste en auditoria_admin.

Autor: CODEPLEX
Fecha: 2026-02-06
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from app.shared.events import DomainEvent
from app.modules.auth.enums import AccionAuditoria, EntidadAuditoria
from app.modules.auth.events import AccionAdministrativa
from app.modules.reclamos.enums import EstadoReclamo, TipoSolicitud


@dataclass(frozen=True, kw_only=True)
class ReclamoCreado(DomainEvent):
    """Copia inmutable de los datos que necesitan los correos."""
    reclamo_id: uuid.UUID
    codigo_reclamo: str
    tipo_solicitud: TipoSolicitud
    nombre_completo: str
    tipo_documento: str
    numero_documento: str
    telefono: str
    email: str
    tipo_bien: str
    monto_reclamado: Decimal
    descripcion_bien: str
    fecha_incidente: date
    detalle_reclamo: str
    pedido_consumidor: str
    fecha_registro: datetime
    fecha_limite_respuesta: datetime
    acepta_copia: bool
    domicilio: Optional[str] = None
    departamento: Optional[str] = None
    provincia: Optional[str] = None
    distrito: Optional[str] = None


@dataclass(frozen=True, kw_only=True)
class MensajeClienteRecibido(DomainEvent):
    reclamo_id: uuid.UUID
    codigo_reclamo: str
    tipo_solicitud: TipoSolicitud
    estado: EstadoReclamo
    nombre_completo: str
    numero_documento: str
    email: str
    mensaje: str


@dataclass(frozen=True, kw_only=True)
class EstadoCambiado(AccionAdministrativa):
    accion: AccionAuditoria = AccionAuditoria.CAMBIO_ESTADO
    entidad: EntidadAuditoria = EntidadAuditoria.RECLAMO
    codigo_reclamo: str
    estado_anterior: EstadoReclamo
    estado_nuevo: EstadoReclamo
    comentario: Optional[str] = None


@dataclass(frozen=True, kw_only=True)
class RespuestaRegistrada(AccionAdministrativa):
    accion: AccionAuditoria = AccionAuditoria.RESPONDER
    entidad: EntidadAuditoria = EntidadAuditoria.RECLAMO
    codigo_reclamo: str
    estado_anterior: EstadoReclamo
    respondido_por: str


__all__ = [
    "ReclamoCreado",
    "MensajeClienteRecibido",
    "EstadoCambiado",
    "RespuestaRegistrada",
]
# Fin del archivo
