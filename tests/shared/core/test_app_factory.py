# -*- coding: utf-8 -*-
"""
Tests de create_app: la app atiende requests con los settings que recibe,
no con los del proceso.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone

import pytest
from asgi_lifespan import LifespanManager
from httpx import ASGITransport, AsyncClient
from pydantic import SecretStr

from app.main import create_app
from app.modules.auth.enums import RolAdmin
from tests.helpers import auth_headers, crear_usuario, registrar_reclamo


@asynccontextmanager
async def _cliente(app_settings):
    application = create_app(app_settings)
    async with LifespanManager(application):
        transport = ASGITransport(app=application)
        async with AsyncClient(transport=transport, base_url="http://testserver") as c:
            yield application, c


@pytest.fixture
def propios(settings):
    return settings.model_copy(
        update={
            "codigo_prefix": "ZZZ",
            "plazo_respuesta_dias": 30,
            "empresa_razon_social": "Otra Empresa S.A.C.",
            "jwt_secret_key": SecretStr("otra-clave-de-pruebas-0123456789abcdefghij"),
        }
    )


async def test_registro_usa_prefijo_y_plazo_de_la_app(propios):
    async with _cliente(propios) as (application, c):
        creado = await registrar_reclamo(c, application)

        year = datetime.now(timezone.utc).year
        assert creado["codigo_reclamo"] == f"ZZZ-{year}-00001"
        assert creado["plazo_dias"] == 30

        r = await c.get(f"/api/reclamos/{creado['codigo_reclamo']}")
        assert r.json()["data"]["razon_social"] == "Otra Empresa S.A.C."


async def test_tokens_se_validan_con_la_clave_de_la_app(settings, propios):
    async with _cliente(propios) as (application, c):
        admin = await crear_usuario(application, "admin@codeplex.com", RolAdmin.ADMIN)

        r = await c.get("/api/admin/reclamos", headers=auth_headers(propios, admin))
        assert r.status_code == 200

        # Firmado con la clave del proceso, no con la de esta app
        r = await c.get("/api/admin/reclamos", headers=auth_headers(settings, admin))
        assert r.status_code == 401
        assert r.json()["message"] == "Token inválido"
