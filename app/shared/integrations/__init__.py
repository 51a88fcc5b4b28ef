# -*- coding: utf-8 -*-
"""
backend/app/shared/integrations/__init__.py

Integraciones con servicios externos (correo saliente).
"""

from .email_sender import EmailSender, IEmailSender, SentEmail, StubEmailSender
from .email_templates import render_email

__all__ = [
    "EmailSender",
    "IEmailSender",
    "SentEmail",
    "StubEmailSender",
    "render_email",
]
