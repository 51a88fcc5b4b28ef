# -*- coding: utf-8 -*-
"""
Tests del sobre de errores y middlewares de la app.

Cubre:
- Excepción no manejada → 500 "Error interno del servidor" sin detalles
- Propagación de X-Request-ID
- 404 de ruta inexistente con el mismo sobre
- Content-Type JSON con charset UTF-8
- CORS con comodín (sin credenciales)
"""

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from app.shared.middleware import JSONExceptionMiddleware


@pytest.fixture
def ruta_con_fallo(app):
    async def fallo():
        raise RuntimeError("detalle interno que no debe filtrarse")

    app.add_api_route("/api/_fallo", fallo, methods=["GET"])
    return "/api/_fallo"


async def test_excepcion_no_manejada(client, ruta_con_fallo):
    r = await client.get(ruta_con_fallo)

    assert r.status_code == 500
    assert r.json() == {"success": False, "message": "Error interno del servidor"}
    assert r.headers["x-request-id"]


async def test_request_id_se_respeta(client, ruta_con_fallo):
    r = await client.get(ruta_con_fallo, headers={"X-Request-ID": "req-123"})
    assert r.headers["x-request-id"] == "req-123"


async def test_excepcion_expuesta_solo_en_desarrollo():
    dev_app = FastAPI()
    dev_app.add_middleware(JSONExceptionMiddleware, expose_errors=True)

    @dev_app.get("/fallo")
    async def fallo():
        raise RuntimeError("detalle interno")

    async with AsyncClient(transport=ASGITransport(app=dev_app), base_url="http://testserver") as c:
        r = await c.get("/fallo")

    assert r.status_code == 500
    assert "detalle interno" in r.json()["error"]


async def test_ruta_inexistente(client):
    r = await client.get("/api/no-existe")

    assert r.status_code == 404
    assert r.json() == {"success": False, "message": "Not Found"}


async def test_respuesta_json_utf8(client):
    r = await client.get("/api/reclamos/NO-EXISTE")

    assert r.headers["content-type"] == "application/json; charset=utf-8"
    assert "Reclamo no encontrado" in r.content.decode("utf-8")


async def test_cors_preflight_con_comodin(client):
    r = await client.options(
        "/api/reclamos",
        headers={
            "Origin": "https://libro.codeplex.pe",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "Content-Type",
        },
    )

    assert r.status_code == 200
    assert r.headers["access-control-allow-origin"] == "*"
    assert "access-control-allow-credentials" not in r.headers
