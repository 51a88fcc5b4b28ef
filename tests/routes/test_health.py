# -*- coding: utf-8 -*-
"""
Tests de GET /api/health.
"""

from datetime import datetime


async def test_health_ok(client):
    r = await client.get("/api/health")

    assert r.status_code == 200
    data = r.json()
    assert data["status"] == "ok"
    assert data["database"] == "connected"
    assert datetime.fromisoformat(data["timestamp"]).tzinfo is not None


async def test_health_degradado(client, app, monkeypatch):
    async def sin_db(*args, **kwargs):
        return False

    monkeypatch.setattr(app.state.database, "check_health", sin_db)

    r = await client.get("/api/health")

    assert r.status_code == 200
    assert r.json()["status"] == "degraded"
    assert r.json()["database"] == "disconnected"


def test_routers_cargados():
    from app.routes import loaded_routers

    nombres = loaded_routers()
    assert "/api:health" in nombres
    assert "/api:reclamos.reclamos" in nombres
    assert "/api:reclamos.seguimiento" in nombres
    assert "/api:auth.admin-usuarios" in nombres
