# -*- coding: utf-8 -*-
"""
backend/app/shared/database/database.py

SQLAlchemy async (asyncpg en producción, aiosqlite en pruebas).

Provee:
- Database: contenedor explícito de engine + sessionmaker, construido
  en el lifespan y guardado en `app.state.database`.
- Dependencia FastAPI: get_db (lee la instancia desde request.app.state)
- session_scope() para scripts/tests
- check_health()

No hay engine global de módulo: cada app (y cada test) construye el suyo.

Autor: CODEPLEX
Fecha: 2026-02-02
"""

from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from app.shared.config.settings_base import BaseAppSettings
from app.shared.database.base import Base

logger = logging.getLogger(__name__)


class Database:
    """Engine + fábrica de sesiones de una instancia de la aplicación."""

    def __init__(self, engine: AsyncEngine):
        self.engine = engine
        self.sessionmaker = async_sessionmaker(
            bind=engine,
            expire_on_commit=False,
            class_=AsyncSession,
            autoflush=False,
        )

    @classmethod
    def from_settings(cls, settings: BaseAppSettings) -> "Database":
        url = settings.database_url
        if url.startswith("sqlite"):
            # SQLite en memoria: una sola conexión compartida por todo el engine
            engine = create_async_engine(
                url,
                echo=settings.db_echo_sql,
                poolclass=StaticPool,
                connect_args={"check_same_thread": False},
            )
        else:
            engine = create_async_engine(
                url,
                echo=settings.db_echo_sql,
                pool_size=settings.db_pool_size,
                max_overflow=settings.db_max_overflow,
                pool_timeout=settings.db_pool_timeout,
                pool_recycle=settings.db_pool_recycle,
                pool_pre_ping=True,
            )
        logger.info("[DB] Engine creado (dialect=%s)", engine.dialect.name)
        return cls(engine)

    async def create_all(self) -> None:
        """Crea las tablas registradas en Base.metadata (dev/test)."""
        # Registrar modelos antes de crear el esquema
        import app.modules.auth.models  # noqa: F401
        import app.modules.reclamos.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("[DB] Esquema verificado (create_all)")

    async def dispose(self) -> None:
        await self.engine.dispose()

    @asynccontextmanager
    async def session_scope(self) -> AsyncGenerator[AsyncSession, None]:
        """Sesión para scripts/tests; el commit queda a cargo de quien la usa."""
        async with self.sessionmaker() as session:
            try:
                yield session
            finally:
                if session.in_transaction():
                    await session.rollback()

    async def check_health(self, timeout_s: float = 3.0, sql: str = "SELECT 1") -> bool:
        """
        Verifica conectividad a la base de datos.

        Returns:
            True si la conexión es exitosa, False en caso contrario
        """
        try:
            async with asyncio.timeout(timeout_s):
                async with self.engine.connect() as conn:
                    await conn.execute(text(sql))
            return True
        except (SQLAlchemyError, OSError, TimeoutError) as e:
            logger.warning("[DB] Health check falló: %s", e)
            return False


def get_database(request: Request) -> Database:
    return request.app.state.database


# ── Dependencia FastAPI
async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    database: Optional[Database] = getattr(request.app.state, "database", None)
    if database is None:
        raise RuntimeError("Database no inicializada en app.state (¿lifespan no ejecutado?)")
    async with database.sessionmaker() as session:
        try:
            yield session
        except SQLAlchemyError:
            await session.rollback()
            raise
        finally:
            if session.in_transaction():
                await session.rollback()


__all__ = ["Database", "get_database", "get_db"]
# Fin del archivo backend/app/shared/database/database.py
