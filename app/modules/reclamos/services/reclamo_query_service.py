# -*- coding: utf-8 -*-
"""
backend/app/modules/reclamos/services/reclamo_query_service.py

Consultas de reclamos:
- Consulta pública por código y descarga de la firma
- Seguimiento con prueba de titularidad (código + documento)
- Listado paginado y detalle para el panel
- Dashboard público y estadísticas del panel

Autor: CODEPLEX
Fecha: 2026-02-07
"""

from __future__ import annotations

import base64
import binascii
import logging
import uuid
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional, Tuple

from fastapi import HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.config.settings_base import BaseAppSettings
from app.modules.reclamos.enums import ACTOR_SISTEMA, AccionHistorial, EstadoReclamo
from app.modules.reclamos.models import Reclamo, Respuesta
from app.modules.reclamos.repositories import (
    FiltroInvalidoError,
    HistorialRepository,
    PageMeta,
    ReclamoListQuery,
    ReclamoRepository,
    ReclamoStatsRepository,
)
from app.modules.reclamos.schemas import (
    AdminStatsOut,
    DashboardOut,
    EstadisticasPublicasOut,
    HistorialOut,
    MensajeOut,
    PaginationOut,
    PendienteOut,
    ReclamoAdminDetailOut,
    ReclamoDetalleOut,
    ReclamoListItem,
    ReclamoPublicoOut,
    ReclamoResumenOut,
    RespuestaOut,
    SeguimientoOut,
)
from .plazos import as_utc, dias_restantes, inicio_del_dia, prioridad, utcnow

logger = logging.getLogger(__name__)

COMENTARIO_CREACION_SISTEMA = "Reclamo registrado en el sistema"


def _columns(reclamo: Reclamo) -> Dict[str, Any]:
    return {c.key: getattr(reclamo, c.key) for c in Reclamo.__table__.columns}


def decode_firma(data_url: str) -> bytes:
    """
    Decodifica una firma en formato data URL ("data:image/png;base64,....").

    Raises:
        HTTPException 500: sin separador o base64 inválido.
    """
    _, sep, encoded = data_url.partition(",")
    if not sep:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Formato de firma inválido",
        )
    try:
        return base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError) as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error decodificando firma",
        ) from e


class ReclamoQueryService:
    def __init__(self, db: AsyncSession, settings: BaseAppSettings) -> None:
        self._db = db
        self._settings = settings
        self._reclamos = ReclamoRepository(db)
        self._historial = HistorialRepository(db)
        self._stats = ReclamoStatsRepository(db)

    def _proveedor(self) -> Dict[str, str]:
        return {
            "razon_social": self._settings.empresa_razon_social,
            "ruc": self._settings.empresa_ruc,
            "direccion_proveedor": self._settings.empresa_direccion,
        }

    # ------------------------------------------------------------------
    # Público
    # ------------------------------------------------------------------
    async def get_publico(self, codigo: str) -> ReclamoPublicoOut:
        found = await self._reclamos.get_with_respuesta(codigo)
        if found is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Reclamo no encontrado")
        reclamo, respuesta = found

        data = _columns(reclamo)
        data.update(self._proveedor())
        data["respuesta_empresa"] = respuesta.respuesta_empresa if respuesta else None
        data["respondido_por"] = respuesta.respondido_por if respuesta else None
        return ReclamoPublicoOut.model_validate(data)

    async def get_firma(self, codigo: str) -> bytes:
        firma = await self._reclamos.get_firma(codigo)
        if firma is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Reclamo no encontrado")
        return decode_firma(firma)

    # ------------------------------------------------------------------
    # Seguimiento
    # ------------------------------------------------------------------
    async def seguimiento(self, codigo: str, documento: Optional[str]) -> SeguimientoOut:
        if not documento or not documento.strip():
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Número de documento requerido")

        reclamo = await self._reclamos.get_by_codigo_y_documento(codigo, documento)
        if reclamo is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Reclamo no encontrado o documento no coincide",
            )

        historial = list(await self._historial.list_entries(reclamo.id))
        if not historial:
            # Reclamos sin fila de creación (cargados por fuera de la API)
            entry = await self._historial.add_entry(
                reclamo_id=reclamo.id,
                estado_anterior=None,
                estado_nuevo=EstadoReclamo(reclamo.estado),
                tipo_accion=AccionHistorial.CREACION,
                comentario=COMENTARIO_CREACION_SISTEMA,
                usuario_accion=ACTOR_SISTEMA,
                fecha_accion=reclamo.fecha_registro,
            )
            await self._db.commit()
            logger.info("historial_creacion_sintetico codigo=%s", reclamo.codigo_reclamo)
            historial = [entry]

        mensajes = await self._historial.list_mensajes(reclamo.id)
        respuesta = await self._reclamos.get_respuesta(reclamo.id)

        resumen = ReclamoResumenOut.model_validate(
            {**_columns(reclamo), "dias_restantes": self._dias(reclamo)}
        )
        return SeguimientoOut(
            reclamo=resumen,
            historial=[HistorialOut.model_validate(h) for h in historial],
            mensajes=[MensajeOut.model_validate(m) for m in mensajes],
            respuesta=RespuestaOut.model_validate(respuesta) if respuesta else None,
        )

    # ------------------------------------------------------------------
    # Panel
    # ------------------------------------------------------------------
    async def listar(
        self,
        *,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        estado: Optional[str] = None,
        search: Optional[str] = None,
    ) -> Tuple[List[ReclamoListItem], PaginationOut]:
        try:
            query = ReclamoListQuery.from_params(page=page, limit=limit, estado=estado, search=search)
        except FiltroInvalidoError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e

        total = await self._reclamos.count(query)
        rows = await self._reclamos.list_page(query)

        now = utcnow()
        items = [
            ReclamoListItem.model_validate(
                {
                    **_columns(reclamo),
                    "dias_restantes": self._dias(reclamo, now),
                    "nombre_admin_atendio": nombre_admin,
                }
            )
            for reclamo, nombre_admin in rows
        ]
        meta = PageMeta.build(total, query.page)
        return items, PaginationOut.model_validate(meta)

    async def detalle(self, reclamo_id: uuid.UUID) -> ReclamoAdminDetailOut:
        reclamo = await self._reclamos.get_by_id(reclamo_id)
        if reclamo is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Reclamo no encontrado")

        respuesta: Optional[Respuesta] = await self._reclamos.get_respuesta(reclamo.id)
        historial = await self._historial.list_entries(reclamo.id)
        mensajes = await self._historial.list_mensajes(reclamo.id)

        data = _columns(reclamo)
        data.update(self._proveedor())
        data.update(
            respuesta_empresa=respuesta.respuesta_empresa if respuesta else None,
            respondido_por=respuesta.respondido_por if respuesta else None,
            dias_restantes=self._dias(reclamo),
            nombre_admin_atendio=await self._reclamos.get_nombre_admin(reclamo.atendido_por),
        )
        return ReclamoAdminDetailOut(
            reclamo=ReclamoDetalleOut.model_validate(data),
            respuesta=RespuestaOut.model_validate(respuesta) if respuesta else None,
            historial=[HistorialOut.model_validate(h) for h in historial],
            mensajes=[MensajeOut.model_validate(m) for m in mensajes],
        )

    # ------------------------------------------------------------------
    # Estadísticas
    # ------------------------------------------------------------------
    async def dashboard_publico(self) -> DashboardOut:
        now = utcnow()
        counts = await self._stats.public_counts(inicio_del_dia(now))
        pendientes = []
        for reclamo in await self._stats.pendientes():
            dias = self._dias(reclamo, now)
            pendientes.append(
                PendienteOut.model_validate(
                    {**_columns(reclamo), "dias_restantes": dias, "prioridad": prioridad(dias)}
                )
            )
        return DashboardOut(
            estadisticas=EstadisticasPublicasOut(**counts),
            pendientes=pendientes,
        )

    async def estadisticas_admin(self, now: Optional[datetime] = None) -> AdminStatsOut:
        """
        Ventanas: hoy desde las 00:00 UTC, semana y mes como los últimos
        7 y 30 días.
        """
        now = as_utc(now or utcnow())
        counts = await self._stats.admin_counts(
            desde_hoy=inicio_del_dia(now),
            desde_semana=now - timedelta(days=7),
            desde_mes=now - timedelta(days=30),
        )
        promedio = await self._stats.promedio_dias_resolucion()
        return AdminStatsOut(**counts, promedio_dias_resolucion=promedio)

    @staticmethod
    def _dias(reclamo: Reclamo, now: Optional[datetime] = None) -> Optional[int]:
        return dias_restantes(reclamo.fecha_limite_respuesta, EstadoReclamo(reclamo.estado), now)


__all__ = ["ReclamoQueryService", "decode_firma"]
