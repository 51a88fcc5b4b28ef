# -*- coding: utf-8 -*-
"""
backend/app/modules/reclamos/services/reclamo_lifecycle_service.py

Ciclo de vida del reclamo: alta, cambio de estado, respuesta de la
empresa y mensajes del consumidor.

Reglas de transacción:
- La mutación principal y su fila de historial se confirman juntas.
- Auditoría y correos NO forman parte de la transacción: cada operación
  devuelve eventos de dominio que la ruta publica tras el commit.
- Cambio de estado y respuesta bloquean la fila del reclamo
  (SELECT ... FOR UPDATE) para evitar actualizaciones perdidas.

Autor: CODEPLEX
Fecha: 2026-02-07
"""

from __future__ import annotations

import logging
import re
import uuid
from datetime import datetime
from typing import Optional, Tuple

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.config.settings_base import BaseAppSettings
from app.modules.auth.enums import RolAdmin
from app.modules.auth.security import AdminClaims
from app.modules.reclamos.enums import (
    ACTOR_CLIENTE,
    AccionHistorial,
    EstadoReclamo,
    TipoBien,
    TipoSolicitud,
    TransicionInvalidaError,
    can_role_target,
    validate_state_transition,
)
from app.modules.reclamos.events import (
    EstadoCambiado,
    MensajeClienteRecibido,
    ReclamoCreado,
    RespuestaRegistrada,
)
from app.modules.reclamos.models import (
    MAX_DESCRIPCION_BIEN,
    MAX_DETALLE,
    MAX_MENSAJE_LENGTH,
    MAX_MONTO,
    MAX_NOMBRE,
    MAX_PEDIDO,
    MIN_RESPUESTA_LENGTH,
    Reclamo,
    Respuesta,
)
from app.modules.reclamos.repositories import HistorialRepository, ReclamoRepository
from app.modules.reclamos.schemas import (
    CambioEstadoRequest,
    MensajeCreateRequest,
    ReclamoCreadoOut,
    ReclamoCreateRequest,
    RespuestaCreateRequest,
)
from .codigo_allocator import CodigoReclamoAllocator
from .plazos import fecha_limite, utcnow

logger = logging.getLogger(__name__)

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

CREATE_MAX_ATTEMPTS = 3

COMENTARIO_CREACION = "Reclamo registrado por el consumidor"
COMENTARIO_RESPUESTA = "Respuesta enviada por la empresa"
COMENTARIO_MENSAJE = "Cliente envió mensaje adicional"


def _bad_request(message: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=message)


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Reclamo no encontrado")


def validate_reclamo_payload(payload: ReclamoCreateRequest) -> TipoSolicitud:
    """
    Reglas de negocio del formulario, en el orden en que se reportan.

    Raises:
        HTTPException 400 con el mensaje del primer error encontrado.
    """
    if payload.tipo_solicitud not in (TipoSolicitud.RECLAMO.value, TipoSolicitud.QUEJA.value):
        raise _bad_request("Tipo de solicitud inválido")

    if not payload.firma_digital or not payload.firma_digital.startswith("data:image"):
        raise _bad_request("Firma digital requerida")

    if not payload.acepta_terminos:
        raise _bad_request("Debe aceptar los términos y condiciones")

    if not EMAIL_RE.match(payload.email or ""):
        raise _bad_request("Formato de correo electrónico inválido")

    if not payload.descripcion_bien or not payload.detalle_reclamo or not payload.pedido_consumidor:
        raise _bad_request("Faltan detalles del reclamo o el pedido del consumidor")

    if payload.monto_reclamado > MAX_MONTO:
        raise _bad_request("El monto reclamado excede el límite permitido")

    if (
        len(payload.detalle_reclamo) > MAX_DETALLE
        or len(payload.pedido_consumidor) > MAX_PEDIDO
        or len(payload.nombre_completo) > MAX_NOMBRE
        or len(payload.descripcion_bien) > MAX_DESCRIPCION_BIEN
    ):
        raise _bad_request("Uno de los campos excede el límite permitido de caracteres.")

    return TipoSolicitud(payload.tipo_solicitud)


class ReclamoLifecycleService:
    def __init__(self, db: AsyncSession, settings: BaseAppSettings) -> None:
        self._db = db
        self._settings = settings
        self._reclamos = ReclamoRepository(db)
        self._historial = HistorialRepository(db)

    # ------------------------------------------------------------------
    # Alta
    # ------------------------------------------------------------------
    async def crear(
        self,
        payload: ReclamoCreateRequest,
        ip_address: Optional[str] = None,
        user_agent: Optional[str] = None,
    ) -> Tuple[ReclamoCreadoOut, ReclamoCreado]:
        """
        Registra un reclamo nuevo en estado PENDIENTE.

        Código, reclamo e historial CREACION se confirman en una sola
        transacción. Si el código choca con la restricción UNIQUE (alta
        concurrente), se revierte y se reintenta completa hasta
        CREATE_MAX_ATTEMPTS veces.
        """
        tipo = validate_reclamo_payload(payload)
        allocator = CodigoReclamoAllocator(self._db, self._settings.codigo_prefix)

        for attempt in range(1, CREATE_MAX_ATTEMPTS + 1):
            now = utcnow()
            try:
                codigo = await allocator.next_codigo(now.year)
                reclamo = self._build_reclamo(payload, tipo, codigo, now, ip_address, user_agent)
                await self._reclamos.add(reclamo)
                await self._historial.add_entry(
                    reclamo_id=reclamo.id,
                    estado_anterior=None,
                    estado_nuevo=EstadoReclamo.PENDIENTE,
                    tipo_accion=AccionHistorial.CREACION,
                    comentario=COMENTARIO_CREACION,
                    usuario_accion=ACTOR_CLIENTE,
                    ip_address=ip_address,
                    fecha_accion=now,
                )
                await self._db.commit()
                break
            except IntegrityError as e:
                await self._db.rollback()
                logger.warning(
                    "reclamo_codigo_colision attempt=%d/%d: %s", attempt, CREATE_MAX_ATTEMPTS, e.orig
                )
                if attempt == CREATE_MAX_ATTEMPTS:
                    raise HTTPException(
                        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                        detail="Error al registrar el reclamo",
                    ) from e

        logger.info("reclamo_creado codigo=%s tipo=%s", reclamo.codigo_reclamo, tipo)

        out = ReclamoCreadoOut(
            codigo_reclamo=reclamo.codigo_reclamo,
            fecha_registro=reclamo.fecha_registro,
            fecha_limite_respuesta=reclamo.fecha_limite_respuesta,
            plazo_dias=self._settings.plazo_respuesta_dias,
        )
        return out, self._creado_event(reclamo)

    def _build_reclamo(
        self,
        payload: ReclamoCreateRequest,
        tipo: TipoSolicitud,
        codigo: str,
        now: datetime,
        ip_address: Optional[str],
        user_agent: Optional[str],
    ) -> Reclamo:
        return Reclamo(
            id=uuid.uuid4(),
            codigo_reclamo=codigo,
            tipo_solicitud=tipo,
            estado=EstadoReclamo.PENDIENTE,
            nombre_completo=payload.nombre_completo,
            tipo_documento=payload.tipo_documento,
            numero_documento=payload.numero_documento,
            telefono=payload.telefono,
            email=payload.email,
            domicilio=payload.domicilio,
            departamento=payload.departamento,
            provincia=payload.provincia,
            distrito=payload.distrito,
            tipo_bien=payload.tipo_bien,
            monto_reclamado=payload.monto_reclamado,
            descripcion_bien=payload.descripcion_bien,
            area_queja=payload.area_queja,
            descripcion_situacion=payload.descripcion_situacion,
            fecha_incidente=payload.fecha_incidente,
            detalle_reclamo=payload.detalle_reclamo,
            pedido_consumidor=payload.pedido_consumidor,
            firma_digital=payload.firma_digital,
            acepta_terminos=payload.acepta_terminos,
            acepta_copia=payload.acepta_copia,
            ip_address=ip_address,
            user_agent=user_agent,
            fecha_registro=now,
            fecha_limite_respuesta=fecha_limite(now, self._settings.plazo_respuesta_dias),
        )

    @staticmethod
    def _creado_event(reclamo: Reclamo) -> ReclamoCreado:
        return ReclamoCreado(
            reclamo_id=reclamo.id,
            codigo_reclamo=reclamo.codigo_reclamo,
            tipo_solicitud=reclamo.tipo_solicitud,
            nombre_completo=reclamo.nombre_completo,
            tipo_documento=reclamo.tipo_documento,
            numero_documento=reclamo.numero_documento,
            telefono=reclamo.telefono,
            email=reclamo.email,
            tipo_bien=(reclamo.tipo_bien or TipoBien.SERVICIO).value,
            monto_reclamado=reclamo.monto_reclamado,
            descripcion_bien=reclamo.descripcion_bien,
            fecha_incidente=reclamo.fecha_incidente,
            detalle_reclamo=reclamo.detalle_reclamo,
            pedido_consumidor=reclamo.pedido_consumidor,
            fecha_registro=reclamo.fecha_registro,
            fecha_limite_respuesta=reclamo.fecha_limite_respuesta,
            acepta_copia=reclamo.acepta_copia,
            domicilio=reclamo.domicilio,
            departamento=reclamo.departamento,
            provincia=reclamo.provincia,
            distrito=reclamo.distrito,
        )

    # ------------------------------------------------------------------
    # Cambio de estado (panel)
    # ------------------------------------------------------------------
    async def cambiar_estado(
        self,
        reclamo_id: uuid.UUID,
        payload: CambioEstadoRequest,
        actor: AdminClaims,
        ip_address: Optional[str] = None,
    ) -> EstadoCambiado:
        """
        Raises:
            HTTPException 403: SOPORTE intenta cerrar.
            HTTPException 404: reclamo inexistente.
            HTTPException 400: transición fuera del mapa permitido.
        """
        nuevo = payload.estado
        if not can_role_target(RolAdmin(actor.rol), nuevo):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="No tiene permisos para cerrar reclamos",
            )

        reclamo = await self._reclamos.get_by_id(reclamo_id, for_update=True)
        if reclamo is None:
            raise _not_found()

        anterior = EstadoReclamo(reclamo.estado)
        try:
            validate_state_transition(anterior, nuevo)
        except TransicionInvalidaError as e:
            await self._db.rollback()
            raise _bad_request(str(e)) from e

        reclamo.estado = nuevo
        await self._historial.add_entry(
            reclamo_id=reclamo.id,
            estado_anterior=anterior,
            estado_nuevo=nuevo,
            tipo_accion=AccionHistorial.CAMBIO_ESTADO,
            comentario=payload.comentario,
            usuario_accion=actor.email,
            ip_address=ip_address,
            fecha_accion=utcnow(),
        )
        await self._db.commit()

        logger.info(
            "reclamo_estado codigo=%s %s->%s por=%s", reclamo.codigo_reclamo, anterior, nuevo, actor.user_id
        )
        return EstadoCambiado(
            usuario_id=actor.user_id,
            entidad_id=str(reclamo.id),
            detalles={"estado_anterior": anterior.value, "estado_nuevo": nuevo.value},
            ip_address=ip_address,
            codigo_reclamo=reclamo.codigo_reclamo,
            estado_anterior=anterior,
            estado_nuevo=nuevo,
            comentario=payload.comentario,
        )

    # ------------------------------------------------------------------
    # Respuesta de la empresa (panel)
    # ------------------------------------------------------------------
    async def responder(
        self,
        reclamo_id: uuid.UUID,
        payload: RespuestaCreateRequest,
        actor: AdminClaims,
        ip_address: Optional[str] = None,
    ) -> RespuestaRegistrada:
        """
        Registra la única respuesta del reclamo y lo deja en RESUELTO,
        cualquiera sea su estado previo.

        Raises:
            HTTPException 400: respuesta demasiado corta.
            HTTPException 404: reclamo inexistente.
            HTTPException 409: el reclamo ya tiene respuesta.
        """
        texto = (payload.respuesta_empresa or "").strip()
        if len(texto) < MIN_RESPUESTA_LENGTH:
            raise _bad_request(f"La respuesta debe tener al menos {MIN_RESPUESTA_LENGTH} caracteres")

        reclamo = await self._reclamos.get_by_id(reclamo_id, for_update=True)
        if reclamo is None:
            raise _not_found()

        if await self._reclamos.get_respuesta(reclamo.id) is not None:
            await self._db.rollback()
            raise _respuesta_duplicada()

        now = utcnow()
        anterior = EstadoReclamo(reclamo.estado)
        try:
            await self._reclamos.add(
                Respuesta(
                    reclamo_id=reclamo.id,
                    respuesta_empresa=texto,
                    accion_tomada=payload.accion_tomada or None,
                    compensacion_ofrecida=payload.compensacion_ofrecida or None,
                    respondido_por=actor.email,
                    usuario_id=actor.user_id,
                    fecha_respuesta=now,
                )
            )
            reclamo.estado = EstadoReclamo.RESUELTO
            reclamo.fecha_respuesta = now
            reclamo.atendido_por = actor.user_id
            await self._historial.add_entry(
                reclamo_id=reclamo.id,
                estado_anterior=anterior,
                estado_nuevo=EstadoReclamo.RESUELTO,
                tipo_accion=AccionHistorial.RESPUESTA,
                comentario=COMENTARIO_RESPUESTA,
                usuario_accion=actor.email,
                ip_address=ip_address,
                fecha_accion=now,
            )
            await self._db.commit()
        except IntegrityError as e:
            # Otra respuesta se confirmó entre la verificación y el insert
            await self._db.rollback()
            raise _respuesta_duplicada() from e

        logger.info("reclamo_respondido codigo=%s por=%s", reclamo.codigo_reclamo, actor.user_id)
        return RespuestaRegistrada(
            usuario_id=actor.user_id,
            entidad_id=str(reclamo.id),
            ip_address=ip_address,
            codigo_reclamo=reclamo.codigo_reclamo,
            estado_anterior=anterior,
            respondido_por=actor.email,
        )

    # ------------------------------------------------------------------
    # Mensaje del consumidor (seguimiento)
    # ------------------------------------------------------------------
    async def agregar_mensaje(
        self,
        codigo: str,
        payload: MensajeCreateRequest,
        ip_address: Optional[str] = None,
    ) -> MensajeClienteRecibido:
        mensaje = (payload.mensaje or "").strip()
        if not mensaje or len(mensaje) > MAX_MENSAJE_LENGTH:
            raise _bad_request(f"Mensaje inválido (máx {MAX_MENSAJE_LENGTH} caracteres)")

        reclamo = await self._reclamos.get_by_codigo_y_documento(codigo, payload.numero_documento or "")
        if reclamo is None:
            raise _not_found()

        now = utcnow()
        estado = EstadoReclamo(reclamo.estado)
        await self._historial.add_mensaje(reclamo_id=reclamo.id, mensaje=mensaje, fecha_mensaje=now)
        await self._historial.add_entry(
            reclamo_id=reclamo.id,
            estado_anterior=estado,
            estado_nuevo=estado,
            tipo_accion=AccionHistorial.MENSAJE_CLIENTE,
            comentario=COMENTARIO_MENSAJE,
            usuario_accion=ACTOR_CLIENTE,
            ip_address=ip_address,
            fecha_accion=now,
        )
        await self._db.commit()

        logger.info("reclamo_mensaje codigo=%s", reclamo.codigo_reclamo)
        return MensajeClienteRecibido(
            reclamo_id=reclamo.id,
            codigo_reclamo=reclamo.codigo_reclamo,
            tipo_solicitud=reclamo.tipo_solicitud,
            estado=estado,
            nombre_completo=reclamo.nombre_completo,
            numero_documento=reclamo.numero_documento,
            email=reclamo.email,
            mensaje=mensaje,
        )


def _respuesta_duplicada() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_409_CONFLICT,
        detail="El reclamo ya tiene una respuesta registrada",
    )


__all__ = ["ReclamoLifecycleService", "validate_reclamo_payload", "EMAIL_RE", "CREATE_MAX_ATTEMPTS"]
