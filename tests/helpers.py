# -*- coding: utf-8 -*-
"""
backend/tests/helpers.py

Helpers compartidos por los tests de rutas: usuarios del panel, tokens
y payloads de reclamos.
"""

from datetime import date, datetime, timedelta, timezone

from app.modules.auth.enums import RolAdmin
from app.modules.auth.models import UsuarioAdmin
from app.modules.reclamos.enums import EstadoReclamo, TipoSolicitud
from app.modules.reclamos.models import Reclamo
from app.modules.auth.security import TokenService, hash_password

# PNG 1x1 transparente
FIRMA_PNG_B64 = (
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=="
)
FIRMA_DATA_URL = f"data:image/png;base64,{FIRMA_PNG_B64}"

ADMIN_PASSWORD = "Admin123!"


async def crear_usuario(
    app,
    email: str,
    rol: RolAdmin = RolAdmin.ADMIN,
    password: str = ADMIN_PASSWORD,
    activo: bool = True,
    nombre: str = "Usuario de Prueba",
) -> UsuarioAdmin:
    async with app.state.database.session_scope() as db:
        usuario = UsuarioAdmin(
            email=email,
            nombre_completo=nombre,
            password_hash=hash_password(password),
            rol=rol,
            activo=activo,
        )
        db.add(usuario)
        await db.commit()
        return usuario


def auth_headers(settings, usuario: UsuarioAdmin) -> dict:
    token = TokenService.from_settings(settings).create_access_token(usuario.id, usuario.email, usuario.rol)
    return {"Authorization": f"Bearer {token}"}


def reclamo_payload(**overrides) -> dict:
    payload = {
        "tipo_solicitud": "RECLAMO",
        "nombre_completo": "María Quispe Huamán",
        "tipo_documento": "DNI",
        "numero_documento": "45678912",
        "telefono": "987654321",
        "email": "maria.quispe@example.com",
        "domicilio": "Av. Los Olivos 123",
        "departamento": "Lima",
        "provincia": "Lima",
        "distrito": "Miraflores",
        "tipo_bien": "SERVICIO",
        "monto_reclamado": 150.5,
        "descripcion_bien": "Plan de internet hogar 200 Mbps",
        "fecha_incidente": date(2026, 1, 15).isoformat(),
        "detalle_reclamo": "El servicio estuvo caído durante cinco días sin atención.",
        "pedido_consumidor": "Solicito el descuento proporcional en mi recibo.",
        "firma_digital": FIRMA_DATA_URL,
        "acepta_terminos": True,
        "acepta_copia": True,
    }
    payload.update(overrides)
    return payload


async def registrar_reclamo(client, app, **overrides) -> dict:
    r = await client.post("/api/reclamos", json=reclamo_payload(**overrides))
    assert r.status_code == 201, r.text
    await app.state.events.drain()
    return r.json()["data"]


async def obtener_id(client, headers, codigo: str) -> str:
    r = await client.get("/api/admin/reclamos", params={"search": codigo}, headers=headers)
    assert r.status_code == 200, r.text
    return r.json()["data"][0]["id"]


async def insertar_reclamo(
    app,
    codigo: str,
    estado=None,
    fecha_registro=None,
    plazo_dias: int = 15,
    fecha_respuesta=None,
    numero_documento: str = "45678912",
    tipo_solicitud=None,
):
    """Inserta un reclamo directamente (sin historial), como una carga externa."""
    fecha_registro = fecha_registro or datetime.now(timezone.utc)
    async with app.state.database.session_scope() as db:
        reclamo = Reclamo(
            codigo_reclamo=codigo,
            tipo_solicitud=tipo_solicitud or TipoSolicitud.RECLAMO,
            estado=estado or EstadoReclamo.PENDIENTE,
            nombre_completo="Carga Externa",
            tipo_documento="DNI",
            numero_documento=numero_documento,
            telefono="999888777",
            email="externo@example.com",
            monto_reclamado=0,
            descripcion_bien="Servicio de soporte",
            fecha_incidente=fecha_registro.date(),
            detalle_reclamo="Detalle cargado fuera de la API",
            pedido_consumidor="Pedido cargado fuera de la API",
            firma_digital=FIRMA_DATA_URL,
            acepta_terminos=True,
            acepta_copia=False,
            fecha_registro=fecha_registro,
            fecha_limite_respuesta=fecha_registro + timedelta(days=plazo_dias),
            fecha_respuesta=fecha_respuesta,
        )
        db.add(reclamo)
        await db.commit()
        return reclamo
