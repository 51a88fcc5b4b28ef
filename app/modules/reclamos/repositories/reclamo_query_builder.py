# -*- coding: utf-8 -*-
"""
backend/app/modules/reclamos/repositories/reclamo_query_builder.py

Construcción del listado paginado de reclamos para el panel.

Cada filtro es una variante con su propio valor ligado (bind param):
las sentencias se arman con expresiones SQLAlchemy, nunca
concatenando texto del usuario.

- EstadoFilter: estado exacto
- BusquedaFilter: ILIKE sobre código, nombre y email (comodines escapados)

Conteo y página son dos consultas independientes; bajo escrituras
concurrentes pueden no coincidir exactamente (aceptable para el panel).

Autor: CODEPLEX
Fecha: 2026-02-06
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

from sqlalchemy import ColumnElement, Select, func, or_, select

from app.modules.auth.models import UsuarioAdmin
from app.modules.reclamos.enums import EstadoReclamo
from app.modules.reclamos.models import Reclamo

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 30
MAX_LIMIT = 100


class FiltroInvalidoError(ValueError):
    """Parámetro de filtro con valor fuera de dominio."""


@dataclass(frozen=True)
class EstadoFilter:
    estado: EstadoReclamo

    def clause(self) -> ColumnElement[bool]:
        return Reclamo.estado == self.estado


@dataclass(frozen=True)
class BusquedaFilter:
    texto: str

    def clause(self) -> ColumnElement[bool]:
        pattern = f"%{_escape_like(self.texto)}%"
        return or_(
            Reclamo.codigo_reclamo.ilike(pattern, escape="\\"),
            Reclamo.nombre_completo.ilike(pattern, escape="\\"),
            Reclamo.email.ilike(pattern, escape="\\"),
        )


ReclamoFilter = Union[EstadoFilter, BusquedaFilter]


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


@dataclass(frozen=True)
class PageRequest:
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    @classmethod
    def from_params(cls, page: Optional[int], limit: Optional[int]) -> "PageRequest":
        """Normaliza: mínimo 1 para ambos, limit máximo MAX_LIMIT."""
        page = max(DEFAULT_PAGE if page is None else page, 1)
        limit = min(max(DEFAULT_LIMIT if limit is None else limit, 1), MAX_LIMIT)
        return cls(page=page, limit=limit)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


@dataclass(frozen=True)
class PageMeta:
    total: int
    page: int
    limit: int
    total_pages: int
    has_next: bool
    has_prev: bool

    @classmethod
    def build(cls, total: int, request: PageRequest) -> "PageMeta":
        total_pages = math.ceil(total / request.limit) if total > 0 else 0
        return cls(
            total=total,
            page=request.page,
            limit=request.limit,
            total_pages=total_pages,
            has_next=request.page < total_pages,
            has_prev=request.page > 1,
        )


@dataclass(frozen=True)
class ReclamoListQuery:
    filters: Tuple[ReclamoFilter, ...] = field(default_factory=tuple)
    page: PageRequest = field(default_factory=PageRequest)

    @classmethod
    def from_params(
        cls,
        *,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        estado: Optional[str] = None,
        search: Optional[str] = None,
    ) -> "ReclamoListQuery":
        """
        Arma la consulta desde los query params del endpoint.

        Raises:
            FiltroInvalidoError: estado desconocido.
        """
        filters: list[ReclamoFilter] = []
        if estado and estado.strip():
            try:
                filters.append(EstadoFilter(EstadoReclamo(estado.strip().upper())))
            except ValueError as e:
                raise FiltroInvalidoError(f"Estado inválido: {estado}") from e
        if search and search.strip():
            filters.append(BusquedaFilter(search.strip()))
        return cls(filters=tuple(filters), page=PageRequest.from_params(page, limit))

    def _where(self, stmt: Select) -> Select:
        for f in self.filters:
            stmt = stmt.where(f.clause())
        return stmt

    def count_statement(self) -> Select:
        return self._where(select(func.count()).select_from(Reclamo))

    def page_statement(self) -> Select:
        """Filas (Reclamo, nombre_admin_atendio), más recientes primero."""
        stmt = select(Reclamo, UsuarioAdmin.nombre_completo.label("nombre_admin_atendio")).outerjoin(
            UsuarioAdmin, UsuarioAdmin.id == Reclamo.atendido_por
        )
        return (
            self._where(stmt)
            .order_by(Reclamo.fecha_registro.desc(), Reclamo.id.desc())
            .limit(self.page.limit)
            .offset(self.page.offset)
        )


__all__ = [
    "DEFAULT_PAGE",
    "DEFAULT_LIMIT",
    "MAX_LIMIT",
    "FiltroInvalidoError",
    "EstadoFilter",
    "BusquedaFilter",
    "ReclamoFilter",
    "PageRequest",
    "PageMeta",
    "ReclamoListQuery",
]
