# backend/tests/conftest.py
# -*- coding: utf-8 -*-
"""
Config global de tests del Libro de Reclamaciones.

- PYTHON_ENV=test: SQLite en memoria (aiosqlite), create_all y emails en
  modo console (StubEmailSender, que guarda lo enviado en `.sent`).
- Cada test obtiene una app nueva (create_app) con su propio engine,
  así que la base arranca vacía.
- Cliente httpx con ASGITransport; startup/shutdown vía asgi-lifespan.
"""

import os
import sys
import pathlib
from collections.abc import AsyncIterator

# -----------------------------------------------------------------------------
# 1) Entorno antes de importar la app
# -----------------------------------------------------------------------------
os.environ["PYTHON_ENV"] = "test"
os.environ["EMAIL_MODE"] = "console"

BACKEND_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))

import pytest
from asgi_lifespan import LifespanManager
from httpx import ASGITransport, AsyncClient

from app.shared.config.config_loader import get_settings
from app.modules.auth.enums import RolAdmin
from tests.helpers import auth_headers, crear_usuario


@pytest.fixture
def settings():
    get_settings.cache_clear()
    return get_settings()


@pytest.fixture
async def app(settings):
    from app.main import create_app

    application = create_app(settings)
    async with LifespanManager(application):
        yield application


@pytest.fixture
async def client(app) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as c:
        yield c


@pytest.fixture
def email_sender(app):
    """StubEmailSender de la app (modo console)."""
    return app.state.email_sender


# -----------------------------------------------------------------------------
# 2) Usuarios del panel
# -----------------------------------------------------------------------------
@pytest.fixture
async def admin(app):
    return await crear_usuario(app, "admin@codeplex.com", RolAdmin.ADMIN, nombre="Administrador Principal")


@pytest.fixture
async def soporte(app):
    return await crear_usuario(app, "soporte@codeplex.com", RolAdmin.SOPORTE, nombre="Agente Soporte")


@pytest.fixture
def admin_headers(settings, admin):
    return auth_headers(settings, admin)


@pytest.fixture
def soporte_headers(settings, soporte):
    return auth_headers(settings, soporte)
