# -*- coding: utf-8 -*-
"""
backend/app/modules/reclamos/repositories/__init__.py

Repositorios del módulo de reclamos.

Autor: CODEPLEX
Fecha: 2026-02-06
"""

from .reclamo_query_builder import (
    FiltroInvalidoError,
    EstadoFilter,
    BusquedaFilter,
    PageRequest,
    PageMeta,
    ReclamoListQuery,
)
from .reclamo_repository import ReclamoRepository
from .historial_repository import HistorialRepository
from .reclamo_stats_repository import ReclamoStatsRepository

__all__ = [
    "FiltroInvalidoError",
    "EstadoFilter",
    "BusquedaFilter",
    "PageRequest",
    "PageMeta",
    "ReclamoListQuery",
    "ReclamoRepository",
    "HistorialRepository",
    "ReclamoStatsRepository",
]
