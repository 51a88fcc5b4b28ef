# -*- coding: utf-8 -*-
"""
backend/app/shared/http_utils/request_meta.py

Helpers para extraer metadatos de request (IP, User-Agent) detrás de
proxies. Se guardan en reclamos (ip_address, user_agent), en el
historial y en auditoria_admin.

Autor: CODEPLEX
Fecha: 2026-02-05
"""
from __future__ import annotations

from typing import Optional

from starlette.requests import Request

from app.core.settings import get_app_settings

USER_AGENT_MAX_LENGTH = 500


def get_client_ip(request: Request) -> str:
    """
    IP del cliente.

    Con TRUST_PROXY_HEADERS=true se usa el primer valor de X-Forwarded-For
    (o X-Real-IP); si no, solo la IP del socket. "unknown" si no hay ninguna.
    """
    if get_app_settings(request).trust_proxy_headers:
        xff = request.headers.get("x-forwarded-for")
        if xff:
            return xff.split(",")[0].strip()
        real_ip = request.headers.get("x-real-ip")
        if real_ip:
            return real_ip.strip()

    if request.client and request.client.host:
        return request.client.host
    return "unknown"


def get_user_agent(request: Request) -> Optional[str]:
    ua = request.headers.get("user-agent")
    return ua.strip()[:USER_AGENT_MAX_LENGTH] if ua else None


__all__ = [
    "get_client_ip",
    "get_user_agent",
]
