# -*- coding: utf-8 -*-
"""
backend/app/shared/integrations/smtp_email_sender.py

Implementación de envío de correos por SMTP.

Notas:
- smtplib es bloqueante: cada envío corre en un hilo (asyncio.to_thread).
- Se usa certifi.where() como CA bundle para no depender de los
  certificados del sistema en runtimes minimalistas.
- SMTP_USE_SSL=true abre SMTP_SSL (puerto 465); si no, SMTP + STARTTLS (587).

Autor: CODEPLEX
Fecha: 2026-02-08
"""

from __future__ import annotations

import asyncio
import logging
import smtplib
import ssl
from email.message import EmailMessage
from email.utils import formataddr, formatdate, make_msgid

import certifi

from app.shared.config.settings_base import BaseAppSettings

logger = logging.getLogger(__name__)


def _build_tls_context() -> ssl.SSLContext:
    ctx = ssl.create_default_context(cafile=certifi.where())
    ctx.check_hostname = True
    ctx.verify_mode = ssl.CERT_REQUIRED
    return ctx


class SMTPEmailSender:
    """Envío de correos por SMTP con SSL/STARTTLS."""

    def __init__(
        self,
        server: str,
        port: int,
        username: str,
        password: str,
        from_email: str,
        from_name: str = "Libro de Reclamaciones",
        use_ssl: bool = False,
        timeout: int = 30,
    ):
        self.server = server
        self.port = port
        self.username = username
        self.password = password
        self.from_email = from_email
        self.from_name = from_name
        self.use_ssl = use_ssl
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: BaseAppSettings) -> "SMTPEmailSender":
        password = settings.smtp_password.get_secret_value() if settings.smtp_password else ""
        if not all([settings.smtp_server, settings.smtp_username, password, settings.email_from]):
            raise ValueError("SMTP_HOST, SMTP_USER, SMTP_PASS y SMTP_FROM son requeridos")

        logger.info(
            "[SMTP] config: server=%s port=%s ssl=%s timeout=%ss",
            settings.smtp_server,
            settings.smtp_port,
            settings.email_use_ssl,
            settings.email_timeout_sec,
        )
        return cls(
            server=settings.smtp_server,
            port=settings.smtp_port,
            username=settings.smtp_username,
            password=password,
            from_email=settings.email_from,
            from_name=settings.email_from_name,
            use_ssl=settings.email_use_ssl,
            timeout=settings.email_timeout_sec,
        )

    def build_email_message(
        self, to_email: str, subject: str, html_body: str, text_body: str
    ) -> EmailMessage:
        msg = EmailMessage()
        msg["From"] = formataddr((self.from_name, self.from_email))
        msg["To"] = to_email
        msg["Subject"] = subject
        msg["Date"] = formatdate(localtime=True)

        domain = self.from_email.split("@")[-1] if "@" in self.from_email else "localhost"
        msg["Message-ID"] = make_msgid(domain=domain)

        msg.set_content(text_body)
        msg.add_alternative(html_body, subtype="html")
        return msg

    def _send_sync(self, to_email: str, subject: str, html_body: str, text_body: str) -> str:
        """Envío síncrono por SMTP. Retorna Message-ID."""
        msg = self.build_email_message(to_email, subject, html_body, text_body)
        context = _build_tls_context()

        logger.info(
            "[SMTP] sending: to=%s subject=%s via=%s:%s ssl=%s",
            to_email, subject, self.server, self.port, self.use_ssl,
        )

        try:
            if self.use_ssl:
                smtp = smtplib.SMTP_SSL(self.server, self.port, context=context, timeout=self.timeout)
            else:
                smtp = smtplib.SMTP(self.server, self.port, timeout=self.timeout)

            with smtp as server:
                if not self.use_ssl:
                    server.ehlo()
                    server.starttls(context=context)
                    server.ehlo()
                server.login(self.username, self.password)
                refused = server.send_message(msg)
                if refused:
                    logger.warning("[SMTP] refused: %s", refused)
        except (smtplib.SMTPException, OSError):
            logger.exception("[SMTP] send failed to=%s", to_email)
            raise

        msg_id = msg.get("Message-ID", "unknown")
        logger.info("[SMTP] sent ok to=%s msg_id=%s", to_email, msg_id)
        return msg_id

    async def send_email(self, to_email: str, subject: str, html_body: str, text_body: str) -> None:
        await asyncio.to_thread(self._send_sync, to_email, subject, html_body, text_body)


__all__ = ["SMTPEmailSender"]

# Fin del archivo backend/app/shared/integrations/smtp_email_sender.py
