# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/models/auditoria_models.py

Bitácora append-only de acciones administrativas (auditoria_admin).
Nunca se actualiza ni se borra.

Autor: CODEPLEX
Fecha: 2026-02-03
"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Any, Optional

from sqlalchemy import JSON, BigInteger, DateTime, ForeignKey, Index, Integer, String, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from app.shared.database.base import Base, str_enum
from app.modules.auth.enums import AccionAuditoria, EntidadAuditoria


class AuditoriaAdmin(Base):
    __tablename__ = "auditoria_admin"

    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True
    )
    usuario_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid, ForeignKey("usuarios_admin.id", ondelete="SET NULL"), nullable=True
    )
    accion: Mapped[AccionAuditoria] = mapped_column(
        str_enum(AccionAuditoria, name="accion_auditoria"), nullable=False
    )
    entidad: Mapped[EntidadAuditoria] = mapped_column(
        str_enum(EntidadAuditoria, name="entidad_auditoria"), nullable=False
    )
    entidad_id: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    detalles: Mapped[Optional[dict[str, Any]]] = mapped_column(JSON, nullable=True)
    ip_address: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    fecha: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    __table_args__ = (
        Index("ix_auditoria_admin_entidad", "entidad", "entidad_id"),
    )


__all__ = ["AuditoriaAdmin"]
# Fin del archivo
