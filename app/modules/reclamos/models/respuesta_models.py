# -*- coding: utf-8 -*-
"""
backend/app/modules/reclamos/models/respuesta_models.py

Respuesta de la empresa a un reclamo. Relación 1:1 forzada por la
restricción única sobre reclamo_id.

Autor: CODEPLEX
Fecha: 2026-02-05
"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.shared.database.base import Base

MIN_RESPUESTA_LENGTH = 10


class Respuesta(Base):
    __tablename__ = "respuestas"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    reclamo_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("reclamos.id", ondelete="CASCADE"), unique=True, nullable=False
    )
    respuesta_empresa: Mapped[str] = mapped_column(Text, nullable=False)
    accion_tomada: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    compensacion_ofrecida: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    respondido_por: Mapped[str] = mapped_column(String(255), nullable=False)
    usuario_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid, ForeignKey("usuarios_admin.id", ondelete="SET NULL"), nullable=True
    )
    fecha_respuesta: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)


__all__ = ["Respuesta", "MIN_RESPUESTA_LENGTH"]
# Fin del archivo
