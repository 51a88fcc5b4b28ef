# -*- coding: utf-8 -*-
"""
Tests de configuración: normalización de URL/CORS y validaciones de seguridad.
"""

import pytest

from app.shared.config.settings_base import BaseAppSettings
from app.shared.config.settings_prod import ProdSettings
from app.shared.config.settings_testing import EnvTestingSettings

STRONG_SECRET = "s" * 40


def test_settings_de_test(settings):
    assert settings.is_test
    assert settings.database_url.startswith("sqlite+aiosqlite")
    assert settings.email_mode == "console"
    assert settings.plazo_respuesta_dias == 15
    assert settings.codigo_prefix == "CODEPLEX"


@pytest.mark.parametrize(
    "url, esperado",
    [
        ("postgres://u:p@db:5432/libro", "postgresql+asyncpg://u:p@db:5432/libro"),
        ("postgresql://u:p@db/libro", "postgresql+asyncpg://u:p@db/libro"),
        ("postgresql+asyncpg://u:p@db/libro", "postgresql+asyncpg://u:p@db/libro"),
        ("sqlite+aiosqlite:///:memory:", "sqlite+aiosqlite:///:memory:"),
    ],
)
def test_database_url_normaliza_driver(url, esperado):
    assert EnvTestingSettings(db_url=url).database_url == esperado


@pytest.mark.parametrize(
    "valor, esperado",
    [
        ("*", ["*"]),
        ("", ["*"]),
        ("https://a.pe, 'https://b.pe' ,", ["https://a.pe", "https://b.pe"]),
    ],
)
def test_cors_origins(valor, esperado):
    assert EnvTestingSettings(CORS_ORIGINS=valor).get_cors_origins() == esperado


def test_produccion_exige_jwt_fuerte(monkeypatch):
    monkeypatch.setenv("PYTHON_ENV", "production")
    monkeypatch.setenv("CORS_ORIGINS", "https://libro.codeplex.pe")
    monkeypatch.setenv("JWT_SECRET", "corta")
    with pytest.raises(ValueError, match="JWT_SECRET"):
        ProdSettings()._security_checks()


def test_produccion_rechaza_cors_comodin(monkeypatch):
    monkeypatch.setenv("PYTHON_ENV", "production")
    monkeypatch.setenv("JWT_SECRET", STRONG_SECRET)
    monkeypatch.setenv("CORS_ORIGINS", "*")
    with pytest.raises(ValueError, match="CORS_ORIGINS"):
        ProdSettings()._security_checks()


def test_produccion_valida(monkeypatch):
    monkeypatch.setenv("PYTHON_ENV", "production")
    monkeypatch.setenv("JWT_SECRET", STRONG_SECRET)
    monkeypatch.setenv("CORS_ORIGINS", "https://libro.codeplex.pe")
    settings = ProdSettings()
    settings._security_checks()
    assert settings.enable_docs is False
    assert settings.log_format == "json"


def test_smtp_requiere_credenciales():
    with pytest.raises(ValueError, match="EMAIL_MODE=smtp"):
        EnvTestingSettings(email_mode="smtp")._security_checks()


def test_plazo_minimo():
    with pytest.raises(ValueError, match="PLAZO_RESPUESTA_DIAS"):
        EnvTestingSettings(PLAZO_RESPUESTA_DIAS=0)._security_checks()


def test_es_subclase_de_base(settings):
    assert isinstance(settings, BaseAppSettings)
