# -*- coding: utf-8 -*-
"""
backend/app/modules/reclamos/services/notification_service.py

Notificaciones por email de reclamos, suscritas al EventDispatcher.

- ReclamoCreado: aviso a soporte y, si el consumidor aceptó copia,
  confirmación al consumidor (ambos envíos en paralelo).
- MensajeClienteRecibido: aviso a soporte.

La entrega es best-effort: el dispatcher aplica el timeout y registra
los fallos; aquí solo se registra qué envío falló y para qué código.

Autor: CODEPLEX
Fecha: 2026-02-08
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, List

from app.shared.config.settings_base import BaseAppSettings
from app.shared.events import EventDispatcher
from app.shared.integrations import IEmailSender, render_email
from app.modules.reclamos.events import MensajeClienteRecibido, ReclamoCreado
from .plazos import as_utc

logger = logging.getLogger(__name__)

FORMATO_FECHA = "%d/%m/%Y"
FORMATO_FECHA_HORA = "%d/%m/%Y %H:%M:%S"


def ubicacion(domicilio: str | None, departamento: str | None, provincia: str | None, distrito: str | None) -> str:
    if not (departamento or provincia or distrito):
        return domicilio or "No especificada"
    texto = f"{departamento or ''} / {provincia or ''} - {distrito or ''}"
    return f"{domicilio} ({texto})" if domicilio else texto


class NotificationService:
    def __init__(self, sender: IEmailSender, settings: BaseAppSettings) -> None:
        self._sender = sender
        self._settings = settings

    def register(self, dispatcher: EventDispatcher) -> None:
        dispatcher.subscribe(ReclamoCreado, self.on_reclamo_creado)
        dispatcher.subscribe(MensajeClienteRecibido, self.on_mensaje_cliente)

    def _base_context(self, codigo: str) -> Dict[str, Any]:
        frontend = self._settings.frontend_url.rstrip("/")
        backend = self._settings.backend_url.rstrip("/")
        return {
            "razon_social": self._settings.empresa_razon_social,
            "ruc": self._settings.empresa_ruc,
            "direccion_proveedor": self._settings.empresa_direccion,
            "plazo_dias": self._settings.plazo_respuesta_dias,
            "seguimiento_url": f"{frontend}/seguimiento?codigo={codigo}",
            "firma_url": f"{backend}/api/reclamos/{codigo}/firma",
        }

    async def on_reclamo_creado(self, event: ReclamoCreado) -> None:
        context = self._base_context(event.codigo_reclamo)
        context.update(
            codigo_reclamo=event.codigo_reclamo,
            tipo_solicitud=event.tipo_solicitud.value,
            nombre_completo=event.nombre_completo,
            tipo_documento=event.tipo_documento,
            numero_documento=event.numero_documento,
            email=event.email,
            telefono=event.telefono,
            ubicacion=ubicacion(event.domicilio, event.departamento, event.provincia, event.distrito),
            tipo_bien=event.tipo_bien,
            descripcion_bien=event.descripcion_bien,
            monto_reclamado=f"{event.monto_reclamado:.2f}",
            detalle_reclamo=event.detalle_reclamo,
            pedido_consumidor=event.pedido_consumidor,
            fecha_registro=as_utc(event.fecha_registro).strftime(FORMATO_FECHA_HORA),
            fecha_limite=as_utc(event.fecha_limite_respuesta).strftime(FORMATO_FECHA),
        )

        envios = [
            self._send(
                self._settings.support_email,
                f"Nuevo {event.tipo_solicitud.value} - {event.codigo_reclamo}",
                "nuevo_reclamo_soporte",
                context,
            )
        ]
        if event.acepta_copia and event.email:
            envios.append(
                self._send(
                    event.email,
                    f"Confirmación de {event.tipo_solicitud.value} - {event.codigo_reclamo}",
                    "confirmacion_reclamo_cliente",
                    context,
                )
            )

        await self._gather(event.codigo_reclamo, envios)

    async def on_mensaje_cliente(self, event: MensajeClienteRecibido) -> None:
        context = self._base_context(event.codigo_reclamo)
        context.update(
            codigo_reclamo=event.codigo_reclamo,
            tipo_solicitud=event.tipo_solicitud.value,
            estado=event.estado.value,
            nombre_completo=event.nombre_completo,
            numero_documento=event.numero_documento,
            mensaje=event.mensaje,
        )
        await self._gather(
            event.codigo_reclamo,
            [
                self._send(
                    self._settings.support_email,
                    f"💬 Nuevo mensaje en {event.tipo_solicitud.value} - {event.codigo_reclamo}",
                    "nuevo_mensaje_soporte",
                    context,
                )
            ],
        )

    async def _send(self, to_email: str, subject: str, template: str, context: Dict[str, Any]) -> str:
        html_body, text_body = render_email(template, context)
        await self._sender.send_email(to_email, subject, html_body, text_body)
        return to_email

    @staticmethod
    async def _gather(codigo: str, envios: List) -> None:
        results = await asyncio.gather(*envios, return_exceptions=True)
        for result in results:
            if isinstance(result, Exception):
                logger.error("[email] envío fallido codigo=%s: %r", codigo, result)
            else:
                logger.info("[email] enviado codigo=%s to=%s", codigo, result)


__all__ = ["NotificationService", "ubicacion"]
