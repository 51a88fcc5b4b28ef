# -*- coding: utf-8 -*-
"""
backend/app/modules/reclamos/models/reclamo_models.py

Modelo principal del libro de reclamaciones (tabla reclamos).

Invariantes:
- codigo_reclamo es único e inmutable tras la creación.
- fecha_registro y fecha_limite_respuesta se fijan una sola vez.
- fecha_respuesta / atendido_por solo se llenan al registrar respuesta.

Las relaciones con respuestas, historial y mensajes se consultan
explícitamente en los repositorios (sin lazy-loading en async).

Autor: CODEPLEX
Fecha: 2026-02-05
"""

from __future__ import annotations

import uuid
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Date,
    DateTime,
    ForeignKey,
    Index,
    Numeric,
    String,
    Text,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column

from app.shared.database.base import Base, str_enum
from app.modules.reclamos.enums import EstadoReclamo, TipoBien, TipoSolicitud

# Límites de longitud (caracteres) validados también en el servicio
MAX_NOMBRE = 200
MAX_DESCRIPCION_BIEN = 600
MAX_DETALLE = 3000
MAX_PEDIDO = 2000
MAX_MONTO = Decimal("9999999.99")


class Reclamo(Base):
    __tablename__ = "reclamos"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    codigo_reclamo: Mapped[str] = mapped_column(String(30), unique=True, nullable=False)
    tipo_solicitud: Mapped[TipoSolicitud] = mapped_column(
        str_enum(TipoSolicitud, name="tipo_solicitud"), nullable=False
    )
    estado: Mapped[EstadoReclamo] = mapped_column(
        str_enum(EstadoReclamo, name="estado_reclamo"),
        nullable=False,
        default=EstadoReclamo.PENDIENTE,
    )

    # --- Consumidor ---
    nombre_completo: Mapped[str] = mapped_column(String(MAX_NOMBRE), nullable=False)
    tipo_documento: Mapped[str] = mapped_column(String(20), nullable=False)
    numero_documento: Mapped[str] = mapped_column(String(20), nullable=False)
    telefono: Mapped[str] = mapped_column(String(20), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    domicilio: Mapped[Optional[str]] = mapped_column(String(300), nullable=True)
    departamento: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    provincia: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    distrito: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    # --- Bien contratado ---
    tipo_bien: Mapped[Optional[TipoBien]] = mapped_column(
        str_enum(TipoBien, name="tipo_bien"), nullable=True
    )
    monto_reclamado: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False, default=Decimal("0"))
    descripcion_bien: Mapped[str] = mapped_column(String(MAX_DESCRIPCION_BIEN), nullable=False)

    # --- Detalle ---
    area_queja: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    descripcion_situacion: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    fecha_incidente: Mapped[date] = mapped_column(Date, nullable=False)
    detalle_reclamo: Mapped[str] = mapped_column(Text, nullable=False)
    pedido_consumidor: Mapped[str] = mapped_column(Text, nullable=False)

    # --- Firma y consentimientos ---
    firma_digital: Mapped[str] = mapped_column(Text, nullable=False)
    acepta_terminos: Mapped[bool] = mapped_column(Boolean, nullable=False)
    acepta_copia: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    # --- Metadatos de la solicitud ---
    ip_address: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    user_agent: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)

    # --- Plazos y atención ---
    fecha_registro: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    fecha_limite_respuesta: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    fecha_respuesta: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    atendido_por: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid, ForeignKey("usuarios_admin.id", ondelete="SET NULL"), nullable=True
    )

    __table_args__ = (
        CheckConstraint("monto_reclamado >= 0 AND monto_reclamado <= 9999999.99", name="monto_rango"),
        CheckConstraint("acepta_terminos", name="acepta_terminos"),
        Index("ix_reclamos_estado_fecha", "estado", "fecha_registro"),
        Index("ix_reclamos_numero_documento", "numero_documento"),
    )

    def __repr__(self) -> str:
        return f"<Reclamo codigo={self.codigo_reclamo!r} estado={self.estado}>"


__all__ = [
    "Reclamo",
    "MAX_NOMBRE",
    "MAX_DESCRIPCION_BIEN",
    "MAX_DETALLE",
    "MAX_PEDIDO",
    "MAX_MONTO",
]
# Fin del archivo
