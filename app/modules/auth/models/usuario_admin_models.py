# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/models/usuario_admin_models.py

Modelo de usuarios del panel administrativo (UsuarioAdmin).

- El email se guarda normalizado (trim + minúsculas) y es único.
- `activo=False` deshabilita la cuenta sin borrarla.
- `ultimo_acceso` se actualiza fuera del camino crítico del login.

Autor: CODEPLEX
Fecha: 2026-02-03
"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import Boolean, DateTime, ForeignKey, String, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from app.shared.database.base import Base, str_enum
from app.modules.auth.enums import RolAdmin


class UsuarioAdmin(Base):
    __tablename__ = "usuarios_admin"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    nombre_completo: Mapped[str] = mapped_column(String(200), nullable=False)
    rol: Mapped[RolAdmin] = mapped_column(
        str_enum(RolAdmin, name="rol_admin"),
        nullable=False,
        default=RolAdmin.SOPORTE,
    )
    activo: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    debe_cambiar_password: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    ultimo_acceso: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    fecha_creacion: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    creado_por: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid, ForeignKey("usuarios_admin.id", ondelete="SET NULL"), nullable=True
    )

    def __repr__(self) -> str:
        return f"<UsuarioAdmin id={self.id} email={self.email!r} rol={self.rol} activo={self.activo}>"


__all__ = ["UsuarioAdmin"]
# Fin del archivo
