# -*- coding: utf-8 -*-
"""
backend/app/shared/events/dispatcher.py

Despachador de eventos de dominio hacia efectos secundarios
(auditoría, notificaciones por email).

Política de entrega: best-effort, a lo sumo una vez.
- `publish` no bloquea la respuesta HTTP: agenda una task por lote.
- Los handlers de cada evento corren en paralelo y se esperan como
  máximo `timeout` segundos; lo que no termine se cancela.
- Los errores y timeouts se registran en log y no se reintentan.
- Las tasks se mantienen referenciadas en el dispatcher para permitir
  `drain()` (tests) y `aclose()` (shutdown ordenado).

Autor: CODEPLEX
Fecha: 2026-02-04
"""

from __future__ import annotations

import asyncio
import logging
from collections import defaultdict
from typing import Awaitable, Callable, Dict, Iterable, List, Set, Type

from .base import DomainEvent

logger = logging.getLogger(__name__)

EventHandler = Callable[[DomainEvent], Awaitable[None]]


class EventDispatcher:
    """Registro de handlers por tipo de evento + entrega asíncrona supervisada."""

    def __init__(self, timeout: float = 30.0):
        self._timeout = timeout
        self._handlers: Dict[Type[DomainEvent], List[EventHandler]] = defaultdict(list)
        self._tasks: Set[asyncio.Task] = set()
        self._closed = False

    # ------------------------------------------------------------------
    # Registro
    # ------------------------------------------------------------------
    def subscribe(self, event_type: Type[DomainEvent], handler: EventHandler) -> None:
        self._handlers[event_type].append(handler)
        logger.debug("[events] handler registrado: %s -> %s", event_type.__name__, _handler_name(handler))

    def handlers_for(self, event: DomainEvent) -> List[EventHandler]:
        handlers: List[EventHandler] = []
        for event_type in type(event).__mro__:
            handlers.extend(self._handlers.get(event_type, ()))
        return handlers

    # ------------------------------------------------------------------
    # Publicación
    # ------------------------------------------------------------------
    def publish(self, events: Iterable[DomainEvent]) -> None:
        """Agenda la entrega de los eventos sin esperar su resultado."""
        batch = [e for e in events if e is not None]
        if not batch:
            return
        if self._closed:
            logger.warning("[events] dispatcher cerrado, se descartan %d eventos", len(batch))
            return

        task = asyncio.create_task(self._deliver_batch(batch))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _deliver_batch(self, batch: List[DomainEvent]) -> None:
        for event in batch:
            await self.deliver(event)

    async def deliver(self, event: DomainEvent) -> None:
        """Ejecuta los handlers de un evento con timeout; nunca propaga errores."""
        handlers = self.handlers_for(event)
        if not handlers:
            return

        try:
            results = await asyncio.wait_for(
                asyncio.gather(*(h(event) for h in handlers), return_exceptions=True),
                timeout=self._timeout,
            )
        except asyncio.TimeoutError:
            logger.warning(
                "[events] timeout (%.0fs) entregando %s event_id=%s",
                self._timeout, event.nombre, event.event_id,
            )
            return

        for handler, result in zip(handlers, results):
            if isinstance(result, Exception):
                logger.error(
                    "[events] handler %s falló para %s event_id=%s: %r",
                    _handler_name(handler), event.nombre, event.event_id, result,
                )

    # ------------------------------------------------------------------
    # Ciclo de vida
    # ------------------------------------------------------------------
    @property
    def pending(self) -> int:
        return len([t for t in self._tasks if not t.done()])

    async def drain(self) -> None:
        """Espera a que terminen todas las entregas en curso."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    async def aclose(self, grace: float = 5.0) -> None:
        """
        Shutdown: deja de aceptar eventos, espera `grace` segundos
        y cancela lo que siga pendiente.
        """
        self._closed = True
        active = [t for t in self._tasks if not t.done()]
        if not active:
            return

        logger.info("[events] esperando %d entregas pendientes...", len(active))
        _, still_pending = await asyncio.wait(active, timeout=grace)
        for task in still_pending:
            task.cancel()
        if still_pending:
            await asyncio.gather(*still_pending, return_exceptions=True)
            logger.warning("[events] %d entregas canceladas en shutdown", len(still_pending))


def _handler_name(handler: EventHandler) -> str:
    return getattr(handler, "__qualname__", None) or repr(handler)


__all__ = ["EventDispatcher", "EventHandler"]
# Fin del archivo backend/app/shared/events/dispatcher.py
