# -*- coding: utf-8 -*-
"""
backend/app/shared/events/__init__.py

Eventos de dominio y su despachador.

Autor: CODEPLEX
Fecha: 2026-02-04
"""

from fastapi import Request

from .base import DomainEvent
from .dispatcher import EventDispatcher, EventHandler


def get_event_dispatcher(request: Request) -> EventDispatcher:
    """Dependencia FastAPI: dispatcher construido en el lifespan."""
    return request.app.state.events


__all__ = ["DomainEvent", "EventDispatcher", "EventHandler", "get_event_dispatcher"]
