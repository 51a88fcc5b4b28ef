# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/services/audit_service.py

Servicio de auditoría de acciones administrativas.

- Persiste cada AccionAdministrativa en auditoria_admin usando su propia
  sesión (independiente de la transacción que originó el evento).
- Emite además una línea de log estructurada JSON ([AUDIT]).
- Best-effort: si la escritura falla se registra el error y se descarta;
  nunca revierte ni bloquea la acción auditada.

Autor: CODEPLEX
Fecha: 2026-02-04
"""

from __future__ import annotations

import json
import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

from app.shared.database import Database
from app.shared.events import EventDispatcher
from app.modules.auth.events import AccionAdministrativa
from app.modules.auth.repositories import AuditoriaRepository

logger = logging.getLogger(__name__)


class AuditService:
    """Suscriptor de eventos administrativos que escribe la bitácora."""

    def __init__(self, database: Database) -> None:
        self._database = database

    def register(self, dispatcher: EventDispatcher) -> None:
        dispatcher.subscribe(AccionAdministrativa, self.handle)

    async def handle(self, event: AccionAdministrativa) -> None:
        self.log_event(event)
        try:
            async with self._database.session_scope() as db:
                await AuditoriaRepository(db).add(
                    usuario_id=event.usuario_id,
                    accion=event.accion,
                    entidad=event.entidad,
                    entidad_id=event.entidad_id,
                    detalles=event.detalles or None,
                    ip_address=event.ip_address,
                )
                await db.commit()
        except SQLAlchemyError as e:
            logger.error(
                "[AUDIT] no se pudo registrar %s %s/%s: %s",
                event.accion, event.entidad, event.entidad_id, e,
            )

    @staticmethod
    def log_event(event: AccionAdministrativa, error_message: Optional[str] = None) -> None:
        """Registra el evento como log estructurado JSON."""
        audit_payload = {
            "timestamp": event.ocurrido_en.isoformat(),
            "event_id": str(event.event_id),
            "accion": str(event.accion),
            "entidad": str(event.entidad),
            "entidad_id": event.entidad_id,
            "usuario_id": str(event.usuario_id) if event.usuario_id else None,
            "ip_address": event.ip_address,
        }
        if event.detalles:
            audit_payload["detalles"] = event.detalles
        if error_message:
            audit_payload["error"] = error_message

        logger.info("[AUDIT] %s", json.dumps(audit_payload, ensure_ascii=False, default=str))


__all__ = ["AuditService"]
