# -*- coding: utf-8 -*-
"""
Tests de hashing Argon2 y tokens JWT del panel.
"""

import uuid
from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from app.modules.auth.enums import RolAdmin
from app.modules.auth.security import (
    MAX_PASSWORD_LENGTH,
    PasswordTooLongError,
    TokenDecodeError,
    TokenService,
    hash_password,
    verify_password,
)

SECRET = "test-secret-key-0123456789abcdefghijklmnop"


# ==================== PASSWORDS ====================

def test_hash_y_verificacion():
    hashed = hash_password("Admin123!")

    assert hashed.startswith("$argon2id$")
    assert verify_password("Admin123!", hashed)
    assert not verify_password("admin123!", hashed)


def test_hash_es_salado():
    assert hash_password("Admin123!") != hash_password("Admin123!")


@pytest.mark.parametrize("hashed", ["", "no-es-un-hash", "$argon2id$corrupto"])
def test_hash_corrupto_no_coincide(hashed):
    assert verify_password("Admin123!", hashed) is False


def test_password_demasiado_larga():
    with pytest.raises(PasswordTooLongError):
        hash_password("x" * (MAX_PASSWORD_LENGTH + 1))
    assert verify_password("x" * (MAX_PASSWORD_LENGTH + 1), hash_password("corta")) is False


# ==================== TOKENS ====================

def test_token_ida_y_vuelta():
    service = TokenService(SECRET, expire_hours=24)
    user_id = uuid.uuid4()

    claims = service.decode_access_token(service.create_access_token(user_id, "admin@codeplex.com", RolAdmin.ADMIN))

    assert claims.user_id == user_id
    assert claims.email == "admin@codeplex.com"
    assert claims.rol == RolAdmin.ADMIN
    assert claims.is_admin
    assert service.expires_in == 86400


def test_token_soporte_no_es_admin():
    service = TokenService(SECRET)
    token = service.create_access_token(uuid.uuid4(), "soporte@codeplex.com", RolAdmin.SOPORTE)

    assert service.decode_access_token(token).is_admin is False


def test_token_con_otra_clave():
    token = TokenService("otra-clave").create_access_token(uuid.uuid4(), "a@codeplex.com", RolAdmin.ADMIN)

    with pytest.raises(TokenDecodeError):
        TokenService(SECRET).decode_access_token(token)


def test_token_expirado():
    service = TokenService(SECRET, expire_hours=24)
    emitido = datetime.now(timezone.utc) - timedelta(hours=25)
    token = service.create_access_token(uuid.uuid4(), "a@codeplex.com", RolAdmin.ADMIN, now=emitido)

    with pytest.raises(TokenDecodeError):
        service.decode_access_token(token)


def test_token_sin_claims_requeridos():
    token = jwt.encode(
        {"email": "a@codeplex.com", "exp": int((datetime.now(timezone.utc) + timedelta(hours=1)).timestamp())},
        SECRET,
        algorithm="HS256",
    )

    with pytest.raises(TokenDecodeError):
        TokenService(SECRET).decode_access_token(token)
