# -*- coding: utf-8 -*-
"""
backend/app/core/settings.py

Fachada de configuración del Libro de Reclamaciones.
Reexpone la carga de settings basada en Pydantic v2 definida en
`app.shared.config`.

- get_settings: settings del proceso (según PYTHON_ENV), para arrancar
- get_app_settings: dependencia FastAPI con los settings de la app que
  atiende el request (los recibidos por create_app)

Autor: CODEPLEX
Fecha: 2026-02-02
"""

from starlette.requests import Request

from app.shared.config.config_loader import get_settings as _get_settings
from app.shared.config.settings_base import BaseAppSettings


def get_settings() -> BaseAppSettings:
    """Devuelve la configuración del proceso (según PYTHON_ENV)."""
    return _get_settings()


def get_app_settings(request: Request) -> BaseAppSettings:
    """
    Settings guardados en app.state por create_app.

    Fuera de una app (requests construidos a mano) cae a get_settings().
    """
    app = request.scope.get("app")
    settings = getattr(getattr(app, "state", None), "settings", None)
    return settings if settings is not None else get_settings()

# Fin del archivo backend\app\core\settings.py
