# -*- coding: utf-8 -*-
"""
backend/app/main.py

Punto de entrada del backend del Libro de Reclamaciones.

- create_app(): construye la aplicación FastAPI (tests y producción)
- lifespan: crea Database y EventDispatcher en app.state, registra
  auditoría y notificaciones por email; en shutdown drena eventos
  pendientes y cierra el engine
- Respuestas JSON UTF-8 y sobre de errores {"success": false, "message": ...}
- CORS configurable vía CORS_ORIGINS

Autor: CODEPLEX
Fecha: 2026-02-09
"""

import logging
import os
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

# ---------------------------------------------------------------------------
# Cargar .env ANTES de leer settings
# En PROD: override=False para respetar variables del entorno
# ---------------------------------------------------------------------------
from dotenv import load_dotenv

_ENV_PATH = Path(__file__).resolve().parents[1] / ".env"
load_dotenv(dotenv_path=_ENV_PATH, override=os.getenv("PYTHON_ENV", "development").lower() == "development")

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.settings import get_settings
from app.shared.config import BaseAppSettings, setup_logging
from app.shared.database import Database
from app.shared.events import EventDispatcher
from app.shared.integrations import EmailSender
from app.shared.middleware import (
    JSONExceptionMiddleware,
    RequestLoggingMiddleware,
    register_exception_handlers,
)
from app.shared.utils.json_response import UTF8JSONResponse
from app.modules.auth.services import AuditService
from app.modules.reclamos.services import NotificationService

logger = logging.getLogger(__name__)

openapi_tags = [
    {"name": "reclamos", "description": "Registro y consulta pública de reclamos y quejas"},
    {"name": "seguimiento", "description": "Seguimiento del consumidor con su número de documento"},
    {"name": "admin-reclamos", "description": "Panel administrativo de reclamos"},
    {"name": "admin-auth", "description": "Login del panel administrativo"},
    {"name": "admin-usuarios", "description": "Gestión de usuarios del panel"},
    {"name": "health", "description": "Estado del servicio"},
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    # ────────── STARTUP ──────────
    settings: BaseAppSettings = app.state.settings

    database = Database.from_settings(settings)
    if settings.db_create_all:
        await database.create_all()
    app.state.database = database

    events = EventDispatcher(timeout=settings.notification_timeout_sec)
    AuditService(database).register(events)

    email_sender = EmailSender.from_settings(settings)
    NotificationService(email_sender, settings).register(events)
    app.state.events = events
    app.state.email_sender = email_sender

    logger.info(
        "🟢 %s iniciado (env=%s, email_mode=%s)",
        settings.app_name,
        settings.python_env,
        settings.email_mode,
    )
    try:
        yield
    finally:
        # ────────── SHUTDOWN ──────────
        logger.info("🔴 Iniciando shutdown ordenado...")
        await events.aclose(grace=settings.notification_shutdown_grace_sec)
        await database.dispose()
        logger.info("🔴 %s apagado.", settings.app_name)


def _configure_cors(app_instance: FastAPI, settings: BaseAppSettings) -> dict:
    """
    Configura CORS middleware.

    Con CORS_ORIGINS='*' no se permiten credenciales (restricción del estándar).
    """
    origins = settings.get_cors_origins()
    wildcard = "*" in origins
    cors_config = {
        "allow_origins": ["*"] if wildcard else origins,
        "allow_credentials": not wildcard,
        "allow_methods": ["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        "allow_headers": ["Authorization", "Content-Type", "X-Request-ID"],
        "expose_headers": ["X-Request-ID"],
        "max_age": 600,
    }
    app_instance.add_middleware(CORSMiddleware, **cors_config)
    logger.info("CORS configurado: origins=%s credentials=%s", cors_config["allow_origins"], cors_config["allow_credentials"])
    return cors_config


def create_app(settings: Optional[BaseAppSettings] = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(level=settings.log_level, fmt=settings.log_format)

    app = FastAPI(
        title=settings.app_name,
        description="API del Libro de Reclamaciones virtual",
        version=settings.app_version,
        lifespan=lifespan,
        openapi_tags=openapi_tags,
        default_response_class=UTF8JSONResponse,
        docs_url="/docs" if settings.enable_docs else None,
        redoc_url="/redoc" if settings.enable_docs else None,
        openapi_url="/openapi.json" if settings.enable_docs else None,
    )
    app.state.settings = settings

    register_exception_handlers(app)

    # El orden real de ejecución de middlewares es inverso al registro:
    # CORS se registra al final para ejecutarse primero (outermost).
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(JSONExceptionMiddleware, expose_errors=settings.is_dev)
    _configure_cors(app, settings)

    from app.routes import router as main_router

    app.include_router(main_router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    _settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=_settings.app_host,
        port=_settings.app_port,
        reload=_settings.is_dev,
    )

# Fin del archivo backend/app/main.py
