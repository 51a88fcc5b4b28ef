# -*- coding: utf-8 -*-
"""
Tests unitarios de NotificationService y de la decodificación de firmas.
"""

import uuid
from datetime import date, datetime, timezone
from decimal import Decimal

import pytest
from fastapi import HTTPException

from app.modules.reclamos.enums import EstadoReclamo, TipoSolicitud
from app.modules.reclamos.events import MensajeClienteRecibido, ReclamoCreado
from app.modules.reclamos.services import NotificationService, decode_firma
from app.modules.reclamos.services.notification_service import ubicacion
from app.shared.integrations import StubEmailSender
from tests.helpers import FIRMA_DATA_URL


def _reclamo_creado(**overrides) -> ReclamoCreado:
    data = dict(
        reclamo_id=uuid.uuid4(),
        codigo_reclamo="CODEPLEX-2026-00001",
        tipo_solicitud=TipoSolicitud.QUEJA,
        nombre_completo="Luis Ramos",
        tipo_documento="CE",
        numero_documento="001234567",
        telefono="912345678",
        email="luis@example.com",
        tipo_bien="PRODUCTO",
        monto_reclamado=Decimal("0"),
        descripcion_bien="Router WiFi",
        fecha_incidente=date(2026, 2, 1),
        detalle_reclamo="Atención descortés en tienda",
        pedido_consumidor="Disculpas formales",
        fecha_registro=datetime(2026, 2, 3, 9, 15, tzinfo=timezone.utc),
        fecha_limite_respuesta=datetime(2026, 2, 18, 9, 15, tzinfo=timezone.utc),
        acepta_copia=True,
    )
    data.update(overrides)
    return ReclamoCreado(**data)


# ==================== UBICACIÓN ====================

@pytest.mark.parametrize(
    "args, esperado",
    [
        ((None, None, None, None), "No especificada"),
        (("Jr. Unión 45", None, None, None), "Jr. Unión 45"),
        ((None, "Cusco", "Cusco", "Wanchaq"), "Cusco / Cusco - Wanchaq"),
        (("Jr. Unión 45", "Lima", None, "Lince"), "Jr. Unión 45 (Lima /  - Lince)"),
    ],
)
def test_ubicacion(args, esperado):
    assert ubicacion(*args) == esperado


# ==================== CORREOS ====================

async def test_reclamo_creado_con_copia(settings):
    sender = StubEmailSender()

    await NotificationService(sender, settings).on_reclamo_creado(_reclamo_creado())

    assert [m.to_email for m in sender.sent] == [settings.support_email, "luis@example.com"]
    soporte, cliente = sender.sent
    assert soporte.subject == "Nuevo QUEJA - CODEPLEX-2026-00001"
    assert "18/02/2026" in soporte.text_body
    assert cliente.subject == "Confirmación de QUEJA - CODEPLEX-2026-00001"
    assert "03/02/2026 09:15:00" in cliente.text_body


async def test_un_envio_fallido_no_bloquea_el_otro(settings):
    class SoporteCaido(StubEmailSender):
        async def send_email(self, to_email, subject, html_body, text_body):
            if to_email == settings.support_email:
                raise ConnectionError("SMTP caído")
            await super().send_email(to_email, subject, html_body, text_body)

    sender = SoporteCaido()
    await NotificationService(sender, settings).on_reclamo_creado(_reclamo_creado())

    assert [m.to_email for m in sender.sent] == ["luis@example.com"]


async def test_mensaje_cliente(settings):
    sender = StubEmailSender()
    event = MensajeClienteRecibido(
        reclamo_id=uuid.uuid4(),
        codigo_reclamo="CODEPLEX-2026-00001",
        tipo_solicitud=TipoSolicitud.RECLAMO,
        estado=EstadoReclamo.EN_PROCESO,
        nombre_completo="Luis Ramos",
        numero_documento="001234567",
        email="luis@example.com",
        mensaje="Sigo esperando",
    )

    await NotificationService(sender, settings).on_mensaje_cliente(event)

    assert len(sender.sent) == 1
    assert sender.sent[0].to_email == settings.support_email
    assert "EN_PROCESO" in sender.sent[0].text_body


# ==================== FIRMA ====================

def test_decode_firma():
    assert decode_firma(FIRMA_DATA_URL).startswith(b"\x89PNG")


@pytest.mark.parametrize(
    "firma, mensaje",
    [
        ("data:image/png;base64", "Formato de firma inválido"),
        ("data:image/png;base64,@@no-base64@@", "Error decodificando firma"),
    ],
)
def test_decode_firma_invalida(firma, mensaje):
    with pytest.raises(HTTPException) as exc:
        decode_firma(firma)
    assert exc.value.status_code == 500
    assert exc.value.detail == mensaje
