# -*- coding: utf-8 -*-
"""
backend/app/shared/database/base.py

Base declarativa y convención de nombres para modelos ORM.

Este módulo proporciona:
- Base: clase base declarativa de SQLAlchemy
- NAMING_CONVENTION: convención de nombres para constraints
- str_enum: helper para mapear StrEnum a columnas VARCHAR

Autor: CODEPLEX
Fecha: 2026-02-02
"""

from __future__ import annotations

from enum import Enum
from typing import Type

from sqlalchemy import Enum as SAEnum
from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

# ===== NAMING CONVENTION =====
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


# ===== BASE DECLARATIVA =====
class Base(DeclarativeBase):
    """
    Base declarativa para todos los modelos ORM del Libro de Reclamaciones.
    Incluye convención de nombres para constraints.
    """
    metadata = MetaData(naming_convention=NAMING_CONVENTION)


# ===== HELPER PARA ENUMS =====
def str_enum(enum_cls: Type[Enum], name: str | None = None) -> SAEnum:
    """
    Devuelve un tipo Enum de SQLAlchemy almacenado como VARCHAR.

    Uso típico:

        estado: Mapped[EstadoReclamo] = mapped_column(
            str_enum(EstadoReclamo, name="estado_reclamo"),
            nullable=False,
        )

    - native_enum=False: funciona igual en PostgreSQL y SQLite (tests).
    - Sin CHECK: el mismo tipo se reutiliza en varias columnas de una tabla;
      los valores se validan del lado de Python (validate_strings).
    - Persiste el `.value` del enum, no el nombre del miembro.
    """
    enum_name = name or enum_cls.__name__.lower()

    def _values(_: object) -> list[str]:
        return [e.value for e in enum_cls]  # type: ignore[arg-type]

    return SAEnum(
        enum_cls,
        name=enum_name,
        native_enum=False,
        create_constraint=False,
        length=20,
        values_callable=_values,
        validate_strings=True,
    )


__all__ = ["Base", "NAMING_CONVENTION", "str_enum"]

# Fin del archivo backend/app/shared/database/base.py
