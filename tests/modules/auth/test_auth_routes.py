# -*- coding: utf-8 -*-
"""
Tests de POST /api/admin/auth/login.
"""

from app.modules.auth.enums import RolAdmin
from app.modules.auth.models import UsuarioAdmin
from app.modules.auth.security import TokenService
from tests.helpers import ADMIN_PASSWORD, crear_usuario

LOGIN_URL = "/api/admin/auth/login"


async def test_login_exitoso(client, app, admin, settings):
    r = await client.post(LOGIN_URL, json={"email": "  ADMIN@codeplex.com ", "password": ADMIN_PASSWORD})

    assert r.status_code == 200
    body = r.json()
    assert body["success"] is True
    data = body["data"]
    assert data["expires_in"] == 86400
    assert data["usuario"] == {
        "id": str(admin.id),
        "email": "admin@codeplex.com",
        "nombre_completo": "Administrador Principal",
        "rol": "ADMIN",
        "debe_cambiar_password": False,
    }

    claims = TokenService.from_settings(settings).decode_access_token(data["token"])
    assert claims.user_id == admin.id
    assert claims.rol == RolAdmin.ADMIN

    async with app.state.database.session_scope() as db:
        usuario = await db.get(UsuarioAdmin, admin.id)
        assert usuario.ultimo_acceso is not None


async def test_token_del_login_abre_el_panel(client, admin):
    r = await client.post(LOGIN_URL, json={"email": "admin@codeplex.com", "password": ADMIN_PASSWORD})
    token = r.json()["data"]["token"]

    r = await client.get("/api/admin/reclamos", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 200


async def test_password_incorrecta(client, admin):
    r = await client.post(LOGIN_URL, json={"email": "admin@codeplex.com", "password": "otra-clave"})

    assert r.status_code == 401
    assert r.json() == {"success": False, "message": "Credenciales inválidas"}


async def test_email_desconocido(client):
    r = await client.post(LOGIN_URL, json={"email": "nadie@codeplex.com", "password": ADMIN_PASSWORD})

    assert r.status_code == 401
    assert r.json()["message"] == "Credenciales inválidas"


async def test_usuario_inactivo(client, app):
    await crear_usuario(app, "baja@codeplex.com", RolAdmin.SOPORTE, activo=False)

    r = await client.post(LOGIN_URL, json={"email": "baja@codeplex.com", "password": ADMIN_PASSWORD})

    assert r.status_code == 403
    assert r.json()["message"] == "Usuario inactivo"


async def test_payload_incompleto(client):
    r = await client.post(LOGIN_URL, json={"email": "admin@codeplex.com"})

    assert r.status_code == 400
    assert r.json()["message"] == "Datos inválidos"
