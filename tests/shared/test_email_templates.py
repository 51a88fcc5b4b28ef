# -*- coding: utf-8 -*-
"""
Tests del render de plantillas de email.
"""

from app.shared.integrations.email_templates import load_template, render_email, render_template


def test_render_template_ambos_estilos_de_placeholder():
    raw = "Hola {{ nombre }}, tu código es {{codigo}}."
    assert render_template(raw, {"nombre": "María", "codigo": "CODEPLEX-2026-00001"}) == (
        "Hola María, tu código es CODEPLEX-2026-00001."
    )


def test_render_template_escapa_html_solo_si_se_pide():
    raw = "<p>{{ detalle }}</p>"
    ctx = {"detalle": "<script>alert(1)</script>"}

    assert render_template(raw, ctx) == "<p><script>alert(1)</script></p>"
    assert render_template(raw, ctx, escape=True) == "<p>&lt;script&gt;alert(1)&lt;/script&gt;</p>"


def test_render_template_none_como_vacio():
    assert render_template("[{{ distrito }}]", {"distrito": None}) == "[]"


def test_plantillas_de_reclamos_existen():
    for base in ("nuevo_reclamo_soporte", "confirmacion_reclamo_cliente", "nuevo_mensaje_soporte"):
        assert load_template(f"{base}.html")
        assert load_template(f"{base}.txt")


def test_render_email_escapa_el_html_pero_no_el_texto():
    html, text = render_email(
        "nuevo_mensaje_soporte",
        {
            "codigo_reclamo": "CODEPLEX-2026-00001",
            "tipo_solicitud": "RECLAMO",
            "nombre_completo": "Ana <b>Pérez</b>",
            "mensaje": "¿Y mi reembolso?",
        },
    )

    assert "Ana &lt;b&gt;Pérez&lt;/b&gt;" in html
    assert "Ana <b>Pérez</b>" in text
    assert "CODEPLEX-2026-00001" in text


def test_render_email_sin_plantilla_usa_texto_minimo():
    html, text = render_email("no_existe", {"codigo_reclamo": "X-1", "vacio": ""})

    assert text == "codigo_reclamo: X-1"
    assert html == "<pre>codigo_reclamo: X-1</pre>"
