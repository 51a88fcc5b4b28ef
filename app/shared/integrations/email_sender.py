# -*- coding: utf-8 -*-
"""
backend/app/shared/integrations/email_sender.py

Factory unificado para EmailSender.
Soporta dos modos:
- console: stub que solo loguea (desarrollo/tests)
- smtp: envío via SMTP tradicional

Autor: CODEPLEX
Fecha: 2026-02-08
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Protocol, TYPE_CHECKING

if TYPE_CHECKING:
    from app.shared.config.settings_base import BaseAppSettings

logger = logging.getLogger(__name__)


class IEmailSender(Protocol):
    """Protocolo para implementaciones de email sender."""
    async def send_email(self, to_email: str, subject: str, html_body: str, text_body: str) -> None: ...


@dataclass(frozen=True)
class SentEmail:
    to_email: str
    subject: str
    html_body: str
    text_body: str


class StubEmailSender:
    """
    Implementación que no envía correos (modo console).

    Conserva los mensajes en `sent` para inspección en tests.
    """

    def __init__(self) -> None:
        self.sent: List[SentEmail] = []

    async def send_email(self, to_email: str, subject: str, html_body: str, text_body: str) -> None:
        self.sent.append(SentEmail(to_email, subject, html_body, text_body))
        logger.info("[CONSOLE EMAIL] %s → %s", subject, to_email)


class EmailSender:
    """
    Selección del sender según settings.

    - Desarrollo/tests: EMAIL_MODE=console
    - Producción: EMAIL_MODE=smtp + SMTP_HOST, SMTP_USER, SMTP_PASS, SMTP_FROM
    """

    @staticmethod
    def from_settings(settings: BaseAppSettings) -> IEmailSender:
        mode = (settings.email_mode or "console").strip().lower()
        logger.info("[EmailSender] mode=%r", mode)

        if mode == "smtp":
            from app.shared.integrations.smtp_email_sender import SMTPEmailSender
            logger.info("[EmailSender] Usando SMTPEmailSender")
            return SMTPEmailSender.from_settings(settings)

        logger.info("[EmailSender] Usando StubEmailSender (modo console)")
        return StubEmailSender()


__all__ = ["IEmailSender", "SentEmail", "StubEmailSender", "EmailSender"]

# Fin del archivo backend/app/shared/integrations/email_sender.py
