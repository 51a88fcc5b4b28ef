# -*- coding: utf-8 -*-
"""
backend/app/modules/reclamos/services/codigo_allocator.py

Asignación del código correlativo de reclamos: PREFIJO-AAAA-NNNNN.

Garantías:
- En PostgreSQL la asignación se serializa por (prefijo, año) con
  pg_advisory_xact_lock; el lock se libera al cerrar la transacción
  que inserta el reclamo, así que dos altas concurrentes no leen el
  mismo máximo.
- En cualquier motor, codigo_reclamo tiene restricción UNIQUE. Si aun
  así hay colisión (p.ej. SQLite o inserciones externas), el servicio
  reintenta la transacción completa (ver ReclamoLifecycleService).

El correlativo no se reinicia dentro del año y se ensancha por encima
de 99999 sin perder el orden (se compara por longitud y luego texto).

Autor: CODEPLEX
Fecha: 2026-02-06
"""

from __future__ import annotations

import logging
import re
import zlib
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.reclamos.repositories import ReclamoRepository

logger = logging.getLogger(__name__)

SEQUENCE_WIDTH = 5

_CODIGO_RE = re.compile(r"^(?P<prefix>.+)-(?P<year>\d{4})-(?P<seq>\d+)$")


def format_codigo(prefix: str, year: int, sequence: int) -> str:
    return f"{prefix}-{year}-{sequence:0{SEQUENCE_WIDTH}d}"


def parse_sequence(codigo: str) -> Optional[int]:
    """Correlativo numérico de un código; None si no tiene el formato esperado."""
    match = _CODIGO_RE.match(codigo or "")
    return int(match.group("seq")) if match else None


def advisory_lock_key(prefix: str, year: int) -> int:
    """Clave estable de 32 bits para pg_advisory_xact_lock."""
    return zlib.crc32(f"{prefix}-{year}".encode("utf-8"))


class CodigoReclamoAllocator:
    def __init__(self, db: AsyncSession, prefix: str) -> None:
        self._db = db
        self._prefix = prefix
        self._reclamos = ReclamoRepository(db)

    async def next_codigo(self, year: int) -> str:
        """
        Siguiente código libre del año. Debe llamarse dentro de la misma
        transacción que inserta el reclamo.
        """
        await self._lock_year(year)

        latest = await self._reclamos.latest_codigo(f"{self._prefix}-{year}-")
        sequence = 1
        if latest:
            last = parse_sequence(latest)
            if last is None:
                logger.warning("codigo_reclamo con formato inesperado: %s", latest)
            else:
                sequence = last + 1
        return format_codigo(self._prefix, year, sequence)

    async def _lock_year(self, year: int) -> None:
        bind = self._db.get_bind()
        if bind.dialect.name != "postgresql":
            return
        await self._db.execute(select(func.pg_advisory_xact_lock(advisory_lock_key(self._prefix, year))))


__all__ = [
    "CodigoReclamoAllocator",
    "format_codigo",
    "parse_sequence",
    "advisory_lock_key",
    "SEQUENCE_WIDTH",
]
