# -*- coding: utf-8 -*-
"""
backend/app/modules/reclamos/schemas/reclamo_schemas.py

Schemas Pydantic del formulario público y de las consultas de reclamos.

El request de creación usa tipos laxos (str con default) para que las
reglas de negocio se validen en ReclamoLifecycleService y devuelvan el
mensaje específico de cada caso; los errores de tipo (fecha o monto mal
formados) caen en el handler global ("Datos inválidos").

Autor: CODEPLEX
Fecha: 2026-02-06
"""

import uuid
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field, field_validator

from app.shared.utils.base_models import UTF8SafeModel
from app.modules.reclamos.enums import EstadoReclamo, TipoBien, TipoSolicitud


def _blank_to_none(v):
    if isinstance(v, str) and not v.strip():
        return None
    return v


# ========== REQUESTS ==========

class ReclamoCreateRequest(UTF8SafeModel):
    """Hoja de reclamación enviada por el consumidor"""
    tipo_solicitud: str = ""

    # Consumidor
    nombre_completo: str = Field(..., min_length=1)
    tipo_documento: str = Field(..., min_length=1, max_length=20)
    numero_documento: str = Field(..., min_length=1, max_length=20)
    telefono: str = Field(..., min_length=1, max_length=20)
    email: str = ""
    domicilio: Optional[str] = Field(None, max_length=300)
    departamento: Optional[str] = Field(None, max_length=100)
    provincia: Optional[str] = Field(None, max_length=100)
    distrito: Optional[str] = Field(None, max_length=100)

    # Bien contratado
    tipo_bien: Optional[TipoBien] = None
    monto_reclamado: Decimal = Field(default=Decimal("0"), ge=0)
    descripcion_bien: str = ""

    # Detalle
    area_queja: Optional[str] = Field(None, max_length=100)
    descripcion_situacion: Optional[str] = None
    fecha_incidente: date
    detalle_reclamo: str = ""
    pedido_consumidor: str = ""

    # Firma (data URL) y consentimientos
    firma_digital: str = ""
    acepta_terminos: bool = False
    acepta_copia: bool = False

    @field_validator(
        "domicilio", "departamento", "provincia", "distrito",
        "tipo_bien", "area_queja", "descripcion_situacion",
        mode="before",
    )
    @classmethod
    def blank_optional_to_none(cls, v):
        return _blank_to_none(v)

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, v):
        return v.strip().lower() if isinstance(v, str) else v


class MensajeCreateRequest(UTF8SafeModel):
    """Mensaje de seguimiento del consumidor (validado en el servicio)"""
    mensaje: str = ""
    numero_documento: str = ""


# ========== RESPONSES ==========

class ReclamoCreadoOut(UTF8SafeModel):
    codigo_reclamo: str
    fecha_registro: datetime
    fecha_limite_respuesta: datetime
    plazo_dias: int


class ReclamoPublicoOut(UTF8SafeModel):
    """Consulta pública por código (sin firma)."""
    id: uuid.UUID
    codigo_reclamo: str
    tipo_solicitud: TipoSolicitud
    estado: EstadoReclamo
    nombre_completo: str
    tipo_documento: str
    numero_documento: str
    telefono: str
    email: str
    domicilio: Optional[str] = None
    departamento: Optional[str] = None
    provincia: Optional[str] = None
    distrito: Optional[str] = None
    razon_social: str
    ruc: str
    direccion_proveedor: str
    tipo_bien: Optional[TipoBien] = None
    monto_reclamado: Decimal
    descripcion_bien: str
    area_queja: Optional[str] = None
    descripcion_situacion: Optional[str] = None
    fecha_incidente: date
    detalle_reclamo: str
    pedido_consumidor: str
    acepta_terminos: bool
    acepta_copia: bool
    fecha_registro: datetime
    fecha_limite_respuesta: datetime
    fecha_respuesta: Optional[datetime] = None
    respuesta_empresa: Optional[str] = None
    respondido_por: Optional[str] = None


class ReclamoResumenOut(UTF8SafeModel):
    """Vista del reclamo en seguimiento (con plazo restante)."""
    id: uuid.UUID
    codigo_reclamo: str
    tipo_solicitud: TipoSolicitud
    estado: EstadoReclamo
    nombre_completo: str
    email: str
    descripcion_bien: str
    detalle_reclamo: str
    pedido_consumidor: str
    fecha_registro: datetime
    fecha_limite_respuesta: datetime
    fecha_respuesta: Optional[datetime] = None
    dias_restantes: Optional[int] = None


class HistorialOut(UTF8SafeModel):
    id: int
    estado_anterior: Optional[EstadoReclamo] = None
    estado_nuevo: EstadoReclamo
    tipo_accion: str
    comentario: Optional[str] = None
    usuario_accion: str
    fecha_accion: datetime


class MensajeOut(UTF8SafeModel):
    id: int
    tipo_mensaje: str
    mensaje: str
    fecha_mensaje: datetime


class RespuestaOut(UTF8SafeModel):
    respuesta_empresa: str
    accion_tomada: Optional[str] = None
    compensacion_ofrecida: Optional[str] = None
    respondido_por: str
    fecha_respuesta: datetime


class SeguimientoOut(UTF8SafeModel):
    reclamo: ReclamoResumenOut
    historial: list[HistorialOut]
    mensajes: list[MensajeOut]
    respuesta: Optional[RespuestaOut] = None


__all__ = [
    "ReclamoCreateRequest",
    "MensajeCreateRequest",
    "ReclamoCreadoOut",
    "ReclamoPublicoOut",
    "ReclamoResumenOut",
    "HistorialOut",
    "MensajeOut",
    "RespuestaOut",
    "SeguimientoOut",
]
