# -*- coding: utf-8 -*-
"""
backend/app/shared/config/settings_testing.py

Overrides para entorno de PRUEBAS (test) usando Pydantic v2.
Busca ser determinista: logging moderado, SQLite en memoria
y emails en modo consola.

Autor: CODEPLEX
Fecha: 2026-02-02
"""

from pydantic import SecretStr
from pydantic_settings import SettingsConfigDict

from .settings_base import BaseAppSettings


class EnvTestingSettings(BaseAppSettings):
    # --- Identidad de entorno ---
    python_env: str = "test"

    # --- Logging en test: menos ruido ---
    log_level: str = "WARNING"
    log_format: str = "plain"

    # --- Base de datos aislada ---
    db_url: str = "sqlite+aiosqlite:///:memory:"
    db_create_all: bool = True

    # --- Auth: clave fija para firmar tokens en pruebas ---
    jwt_secret_key: SecretStr = SecretStr("test-secret-key-0123456789abcdefghijklmnop")

    email_mode: str = "console"
    notification_timeout_sec: float = 2.0

    model_config = SettingsConfigDict(
        env_file=".env.test",
        env_file_encoding="utf-8",
        extra="ignore",
    )


__all__ = ["EnvTestingSettings"]
# Fin del archivo backend\app\shared\config\settings_testing.py
