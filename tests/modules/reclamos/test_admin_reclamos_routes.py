# -*- coding: utf-8 -*-
"""
Tests del panel administrativo de reclamos.

Cubre:
- Autenticación (401 sin token o con token inválido)
- GET /api/admin/reclamos - filtros, búsqueda y paginación
- GET /api/admin/reclamos/{id} - detalle con historial
- PUT /api/admin/reclamos/{id}/estado - transiciones y restricción de rol
- POST /api/admin/reclamos/{id}/respuesta - respuesta única, RESUELTO forzado
- Auditoría de acciones administrativas
- GET /api/admin/dashboard/stats
"""

import uuid
from datetime import datetime, timedelta, timezone

import pytest

from app.modules.auth.enums import EntidadAuditoria
from app.modules.auth.repositories import AuditoriaRepository
from app.modules.reclamos.enums import EstadoReclamo
from tests.helpers import insertar_reclamo, obtener_id, registrar_reclamo

RESPUESTA = {
    "respuesta_empresa": "Se aplicó el descuento proporcional en el siguiente recibo.",
    "accion_tomada": "Nota de crédito emitida",
    "compensacion_ofrecida": "S/ 25.00",
}


@pytest.fixture
async def reclamo(client, app, admin_headers):
    """Reclamo registrado por la API; devuelve (id, codigo)."""
    creado = await registrar_reclamo(client, app)
    codigo = creado["codigo_reclamo"]
    return await obtener_id(client, admin_headers, codigo), codigo


async def _estado(client, headers, reclamo_id: str) -> str:
    r = await client.get(f"/api/admin/reclamos/{reclamo_id}", headers=headers)
    return r.json()["data"]["reclamo"]["estado"]


# ==================== AUTENTICACIÓN ====================

async def test_sin_token(client):
    r = await client.get("/api/admin/reclamos")

    assert r.status_code == 401
    assert r.json() == {"success": False, "message": "Token requerido"}


async def test_token_invalido(client):
    r = await client.get("/api/admin/reclamos", headers={"Authorization": "Bearer no.es.jwt"})

    assert r.status_code == 401
    assert r.json()["message"] == "Token inválido"


# ==================== LISTADO ====================

async def test_listado_paginado(client, app, admin_headers):
    base = datetime.now(timezone.utc) - timedelta(days=3)
    for i in range(1, 6):
        await insertar_reclamo(app, f"CODEPLEX-2026-{i:05d}", fecha_registro=base + timedelta(hours=i))

    r = await client.get("/api/admin/reclamos", params={"page": 2, "limit": 2}, headers=admin_headers)

    assert r.status_code == 200
    body = r.json()
    assert body["success"] is True
    assert [i["codigo_reclamo"] for i in body["data"]] == ["CODEPLEX-2026-00003", "CODEPLEX-2026-00002"]
    assert body["pagination"] == {
        "total": 5,
        "page": 2,
        "limit": 2,
        "total_pages": 3,
        "has_next": True,
        "has_prev": True,
    }


async def test_listado_filtra_por_estado_y_busqueda(client, app, admin_headers):
    await insertar_reclamo(app, "CODEPLEX-2026-00001")
    await insertar_reclamo(app, "CODEPLEX-2026-00002", estado=EstadoReclamo.EN_PROCESO)
    await registrar_reclamo(client, app)

    r = await client.get("/api/admin/reclamos", params={"estado": "en_proceso"}, headers=admin_headers)
    assert [i["codigo_reclamo"] for i in r.json()["data"]] == ["CODEPLEX-2026-00002"]

    r = await client.get("/api/admin/reclamos", params={"search": "QUISPE"}, headers=admin_headers)
    data = r.json()["data"]
    assert len(data) == 1
    assert data[0]["nombre_completo"] == "María Quispe Huamán"
    assert data[0]["dias_restantes"] == 15


async def test_busqueda_escapa_comodines(client, app, admin_headers):
    await insertar_reclamo(app, "CODEPLEX-2026-00001")

    r = await client.get("/api/admin/reclamos", params={"search": "%"}, headers=admin_headers)

    assert r.json()["data"] == []
    assert r.json()["pagination"]["total"] == 0


async def test_listado_estado_invalido(client, admin_headers):
    r = await client.get("/api/admin/reclamos", params={"estado": "ARCHIVADO"}, headers=admin_headers)

    assert r.status_code == 400
    assert r.json()["message"] == "Estado inválido: ARCHIVADO"


async def test_soporte_puede_listar(client, app, soporte_headers):
    await insertar_reclamo(app, "CODEPLEX-2026-00001")

    r = await client.get("/api/admin/reclamos", headers=soporte_headers)

    assert r.status_code == 200
    assert r.json()["pagination"]["total"] == 1


# ==================== DETALLE ====================

async def test_detalle(client, reclamo, admin_headers, settings):
    reclamo_id, codigo = reclamo

    r = await client.get(f"/api/admin/reclamos/{reclamo_id}", headers=admin_headers)

    assert r.status_code == 200
    data = r.json()["data"]
    assert data["reclamo"]["codigo_reclamo"] == codigo
    assert data["reclamo"]["razon_social"] == settings.empresa_razon_social
    assert data["reclamo"]["nombre_admin_atendio"] is None
    assert data["respuesta"] is None
    assert [h["tipo_accion"] for h in data["historial"]] == ["CREACION"]


async def test_detalle_inexistente(client, admin_headers):
    r = await client.get(f"/api/admin/reclamos/{uuid.uuid4()}", headers=admin_headers)

    assert r.status_code == 404
    assert r.json()["message"] == "Reclamo no encontrado"


# ==================== CAMBIO DE ESTADO ====================

async def test_cambiar_estado(client, app, reclamo, admin_headers, admin):
    reclamo_id, _ = reclamo

    r = await client.put(
        f"/api/admin/reclamos/{reclamo_id}/estado",
        json={"estado": "EN_PROCESO", "comentario": "Revisando con el área técnica"},
        headers=admin_headers,
    )

    assert r.status_code == 200
    assert r.json() == {"success": True, "message": "Estado actualizado correctamente"}
    await app.state.events.drain()

    r = await client.get(f"/api/admin/reclamos/{reclamo_id}", headers=admin_headers)
    data = r.json()["data"]
    assert data["reclamo"]["estado"] == "EN_PROCESO"
    cambio = data["historial"][0]
    assert cambio["tipo_accion"] == "CAMBIO_ESTADO"
    assert cambio["estado_anterior"] == "PENDIENTE"
    assert cambio["estado_nuevo"] == "EN_PROCESO"
    assert cambio["comentario"] == "Revisando con el área técnica"
    assert cambio["usuario_accion"] == admin.email

    async with app.state.database.session_scope() as db:
        auditoria = await AuditoriaRepository(db).list_for_entity(EntidadAuditoria.RECLAMO, reclamo_id)
        filas = [(a.accion, a.usuario_id, a.detalles) for a in auditoria]
    assert filas == [
        ("CAMBIO_ESTADO", admin.id, {"estado_anterior": "PENDIENTE", "estado_nuevo": "EN_PROCESO"}),
    ]


async def test_soporte_no_puede_cerrar(client, reclamo, soporte_headers, admin_headers):
    reclamo_id, _ = reclamo

    r = await client.put(
        f"/api/admin/reclamos/{reclamo_id}/estado", json={"estado": "CERRADO"}, headers=soporte_headers
    )

    assert r.status_code == 403
    assert r.json()["message"] == "No tiene permisos para cerrar reclamos"
    assert await _estado(client, admin_headers, reclamo_id) == "PENDIENTE"


async def test_soporte_puede_pasar_a_en_proceso(client, reclamo, soporte_headers, admin_headers):
    reclamo_id, _ = reclamo

    r = await client.put(
        f"/api/admin/reclamos/{reclamo_id}/estado", json={"estado": "EN_PROCESO"}, headers=soporte_headers
    )

    assert r.status_code == 200
    assert await _estado(client, admin_headers, reclamo_id) == "EN_PROCESO"


async def test_admin_puede_cerrar(client, app, reclamo, admin_headers):
    reclamo_id, _ = reclamo

    r = await client.put(
        f"/api/admin/reclamos/{reclamo_id}/estado", json={"estado": "CERRADO"}, headers=admin_headers
    )

    assert r.status_code == 200
    await app.state.events.drain()

    r = await client.get(f"/api/admin/reclamos/{reclamo_id}", headers=admin_headers)
    data = r.json()["data"]
    assert data["reclamo"]["estado"] == "CERRADO"
    cambio = data["historial"][0]
    assert cambio["tipo_accion"] == "CAMBIO_ESTADO"
    assert cambio["estado_anterior"] == "PENDIENTE"
    assert cambio["estado_nuevo"] == "CERRADO"


async def test_transicion_invalida(client, app, admin_headers):
    cerrado = await insertar_reclamo(app, "CODEPLEX-2026-00001", estado=EstadoReclamo.CERRADO)

    r = await client.put(
        f"/api/admin/reclamos/{cerrado.id}/estado", json={"estado": "EN_PROCESO"}, headers=admin_headers
    )

    assert r.status_code == 400
    assert r.json()["message"] == "Transición de estado no permitida: CERRADO → EN_PROCESO"


async def test_mismo_estado_es_invalido(client, reclamo, admin_headers):
    reclamo_id, _ = reclamo

    r = await client.put(
        f"/api/admin/reclamos/{reclamo_id}/estado", json={"estado": "PENDIENTE"}, headers=admin_headers
    )

    assert r.status_code == 400


async def test_estado_desconocido_es_datos_invalidos(client, reclamo, admin_headers):
    reclamo_id, _ = reclamo

    r = await client.put(
        f"/api/admin/reclamos/{reclamo_id}/estado", json={"estado": "ARCHIVADO"}, headers=admin_headers
    )

    assert r.status_code == 400
    assert r.json()["message"] == "Datos inválidos"


async def test_cambiar_estado_inexistente(client, admin_headers):
    r = await client.put(
        f"/api/admin/reclamos/{uuid.uuid4()}/estado", json={"estado": "EN_PROCESO"}, headers=admin_headers
    )

    assert r.status_code == 404


# ==================== RESPUESTA ====================

async def test_respuesta_corta(client, reclamo, admin_headers):
    reclamo_id, _ = reclamo

    r = await client.post(
        f"/api/admin/reclamos/{reclamo_id}/respuesta",
        json={"respuesta_empresa": "   Ok.     "},
        headers=admin_headers,
    )

    assert r.status_code == 400
    assert r.json()["message"] == "La respuesta debe tener al menos 10 caracteres"
    assert await _estado(client, admin_headers, reclamo_id) == "PENDIENTE"


async def test_responder(client, app, reclamo, admin_headers, admin):
    reclamo_id, codigo = reclamo

    r = await client.post(f"/api/admin/reclamos/{reclamo_id}/respuesta", json=RESPUESTA, headers=admin_headers)

    assert r.status_code == 201
    assert r.json() == {"success": True, "message": "Respuesta enviada correctamente"}
    await app.state.events.drain()

    r = await client.get(f"/api/admin/reclamos/{reclamo_id}", headers=admin_headers)
    data = r.json()["data"]
    assert data["reclamo"]["estado"] == "RESUELTO"
    assert data["reclamo"]["fecha_respuesta"] is not None
    assert data["reclamo"]["nombre_admin_atendio"] == "Administrador Principal"
    assert data["reclamo"]["dias_restantes"] is None
    assert data["respuesta"]["respuesta_empresa"] == RESPUESTA["respuesta_empresa"]
    assert data["respuesta"]["respondido_por"] == admin.email

    respuestas = [h for h in data["historial"] if h["tipo_accion"] == "RESPUESTA"]
    assert len(respuestas) == 1
    assert respuestas[0]["estado_anterior"] == "PENDIENTE"
    assert respuestas[0]["estado_nuevo"] == "RESUELTO"

    # Visible para el consumidor
    r = await client.get(f"/api/reclamos/{codigo}")
    assert r.json()["data"]["respuesta_empresa"] == RESPUESTA["respuesta_empresa"]

    async with app.state.database.session_scope() as db:
        auditoria = await AuditoriaRepository(db).list_for_entity(EntidadAuditoria.RECLAMO, reclamo_id)
        acciones = [a.accion for a in auditoria]
    assert acciones == ["RESPONDER"]


async def test_responder_desde_en_proceso(client, app, reclamo, admin_headers):
    reclamo_id, _ = reclamo
    await client.put(f"/api/admin/reclamos/{reclamo_id}/estado", json={"estado": "EN_PROCESO"}, headers=admin_headers)

    r = await client.post(f"/api/admin/reclamos/{reclamo_id}/respuesta", json=RESPUESTA, headers=admin_headers)

    assert r.status_code == 201
    assert await _estado(client, admin_headers, reclamo_id) == "RESUELTO"
    await app.state.events.drain()


async def test_responder_desde_cerrado(client, app, reclamo, admin_headers):
    reclamo_id, _ = reclamo
    r = await client.put(f"/api/admin/reclamos/{reclamo_id}/estado", json={"estado": "CERRADO"}, headers=admin_headers)
    assert r.status_code == 200

    r = await client.post(f"/api/admin/reclamos/{reclamo_id}/respuesta", json=RESPUESTA, headers=admin_headers)

    assert r.status_code == 201
    await app.state.events.drain()

    r = await client.get(f"/api/admin/reclamos/{reclamo_id}", headers=admin_headers)
    data = r.json()["data"]
    assert data["reclamo"]["estado"] == "RESUELTO"
    respuesta = [h for h in data["historial"] if h["tipo_accion"] == "RESPUESTA"][0]
    assert respuesta["estado_anterior"] == "CERRADO"
    assert respuesta["estado_nuevo"] == "RESUELTO"


async def test_segunda_respuesta_es_conflicto(client, app, reclamo, admin_headers):
    reclamo_id, _ = reclamo
    r = await client.post(f"/api/admin/reclamos/{reclamo_id}/respuesta", json=RESPUESTA, headers=admin_headers)
    assert r.status_code == 201

    r = await client.post(
        f"/api/admin/reclamos/{reclamo_id}/respuesta",
        json={"respuesta_empresa": "Segunda respuesta que no debe registrarse."},
        headers=admin_headers,
    )

    assert r.status_code == 409
    assert r.json()["message"] == "El reclamo ya tiene una respuesta registrada"

    r = await client.get(f"/api/admin/reclamos/{reclamo_id}", headers=admin_headers)
    data = r.json()["data"]
    assert data["respuesta"]["respuesta_empresa"] == RESPUESTA["respuesta_empresa"]
    assert len([h for h in data["historial"] if h["tipo_accion"] == "RESPUESTA"]) == 1
    await app.state.events.drain()


async def test_responder_inexistente(client, admin_headers):
    r = await client.post(f"/api/admin/reclamos/{uuid.uuid4()}/respuesta", json=RESPUESTA, headers=admin_headers)
    assert r.status_code == 404


# ==================== ESTADÍSTICAS ====================

async def test_estadisticas_vacias(client, admin_headers):
    r = await client.get("/api/admin/dashboard/stats", headers=admin_headers)

    assert r.status_code == 200
    data = r.json()["data"]
    assert data["total_reclamos"] == 0
    assert data["promedio_dias_resolucion"] is None


async def test_estadisticas(client, app, admin_headers):
    now = datetime.now(timezone.utc)
    await insertar_reclamo(app, "CODEPLEX-2026-00001", fecha_registro=now)
    await insertar_reclamo(
        app, "CODEPLEX-2026-00002",
        estado=EstadoReclamo.EN_PROCESO,
        fecha_registro=now - timedelta(days=3),
    )
    await insertar_reclamo(
        app, "CODEPLEX-2026-00003",
        estado=EstadoReclamo.RESUELTO,
        fecha_registro=now - timedelta(days=20),
        fecha_respuesta=now - timedelta(days=16),
    )
    await insertar_reclamo(
        app, "CODEPLEX-2026-00004",
        estado=EstadoReclamo.CERRADO,
        fecha_registro=now - timedelta(days=60),
        fecha_respuesta=now - timedelta(days=58),
    )

    r = await client.get("/api/admin/dashboard/stats", headers=admin_headers)

    data = r.json()["data"]
    assert data == {
        "total_reclamos": 4,
        "pendientes": 1,
        "en_proceso": 1,
        "resueltos": 1,
        "cerrados": 1,
        "reclamos_hoy": 1,
        "reclamos_semana": 2,
        "reclamos_mes": 3,
        "promedio_dias_resolucion": 3.0,
    }
