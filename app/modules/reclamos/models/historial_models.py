# -*- coding: utf-8 -*-
"""
backend/app/modules/reclamos/models/historial_models.py

Historial append-only de eventos del reclamo (historial_reclamos) y
mensajes de seguimiento del consumidor (mensajes_seguimiento).

Ninguna de las dos tablas se actualiza ni se borra desde la aplicación.

Autor: CODEPLEX
Fecha: 2026-02-05
"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import BigInteger, DateTime, ForeignKey, Index, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.shared.database.base import Base, str_enum
from app.modules.reclamos.enums import AccionHistorial, EstadoReclamo, TipoMensaje

MAX_MENSAJE_LENGTH = 1000

# BIGSERIAL en PostgreSQL, INTEGER PRIMARY KEY (rowid) en SQLite
_BigId = BigInteger().with_variant(Integer, "sqlite")


class HistorialReclamo(Base):
    __tablename__ = "historial_reclamos"

    id: Mapped[int] = mapped_column(_BigId, primary_key=True, autoincrement=True)
    reclamo_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("reclamos.id", ondelete="CASCADE"), nullable=False
    )
    estado_anterior: Mapped[Optional[EstadoReclamo]] = mapped_column(
        str_enum(EstadoReclamo, name="estado_reclamo"), nullable=True
    )
    estado_nuevo: Mapped[EstadoReclamo] = mapped_column(
        str_enum(EstadoReclamo, name="estado_reclamo"), nullable=False
    )
    tipo_accion: Mapped[AccionHistorial] = mapped_column(
        str_enum(AccionHistorial, name="accion_historial"), nullable=False
    )
    comentario: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    usuario_accion: Mapped[str] = mapped_column(String(255), nullable=False)
    ip_address: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    fecha_accion: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    __table_args__ = (
        Index("ix_historial_reclamos_reclamo_fecha", "reclamo_id", "fecha_accion"),
    )


class MensajeSeguimiento(Base):
    __tablename__ = "mensajes_seguimiento"

    id: Mapped[int] = mapped_column(_BigId, primary_key=True, autoincrement=True)
    reclamo_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("reclamos.id", ondelete="CASCADE"), nullable=False
    )
    tipo_mensaje: Mapped[TipoMensaje] = mapped_column(
        str_enum(TipoMensaje, name="tipo_mensaje"), nullable=False, default=TipoMensaje.CLIENTE
    )
    mensaje: Mapped[str] = mapped_column(String(MAX_MENSAJE_LENGTH), nullable=False)
    fecha_mensaje: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    __table_args__ = (
        Index("ix_mensajes_seguimiento_reclamo_fecha", "reclamo_id", "fecha_mensaje"),
    )


__all__ = ["HistorialReclamo", "MensajeSeguimiento", "MAX_MENSAJE_LENGTH"]
# Fin del archivo
