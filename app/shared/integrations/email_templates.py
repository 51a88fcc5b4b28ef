# -*- coding: utf-8 -*-
"""
backend/app/shared/integrations/email_templates.py

Helper para carga y renderizado de templates de email.
Convención: los templates viven en templates/emails/ como <nombre>.html y <nombre>.txt.

En la versión HTML los valores del contexto se escapan; el texto del
consumidor nunca se inyecta como marcado.

Autor: CODEPLEX
Fecha: 2026-02-08
"""

import html
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

logger = logging.getLogger(__name__)

# Directorio canónico de templates
EMAILS_DIR = Path(__file__).resolve().parent.parent / "templates" / "emails"


@lru_cache(maxsize=32)
def load_template(template_name: str) -> Optional[str]:
    """
    Carga template desde templates/emails/ (None si no existe).
    """
    path = EMAILS_DIR / template_name
    if not path.exists():
        logger.warning("[EmailTemplates] not found: %s", template_name)
        return None
    return path.read_text(encoding="utf-8")


def render_template(raw: str, context: Dict[str, Any], escape: bool = False) -> str:
    """
    Renderiza template reemplazando placeholders {{ variable }} y {{variable}}.
    """
    result = raw
    for key, value in context.items():
        text = "" if value is None else str(value)
        if escape:
            text = html.escape(text)
        result = result.replace(f"{{{{ {key} }}}}", text)
        result = result.replace(f"{{{{{key}}}}}", text)
    return result


def render_email(template_base: str, context: Dict[str, Any]) -> Tuple[str, str]:
    """
    Renderiza (html, texto) de un email.

    Si falta el .txt se usa una versión mínima armada con el contexto;
    si falta el .html se envuelve el texto en <pre>.
    """
    html_raw = load_template(f"{template_base}.html")
    txt_raw = load_template(f"{template_base}.txt")

    text = render_template(txt_raw, context) if txt_raw else _fallback_text(context)
    body = (
        render_template(html_raw, context, escape=True)
        if html_raw
        else f"<pre>{html.escape(text)}</pre>"
    )
    return body, text


def _fallback_text(context: Dict[str, Any]) -> str:
    return "\n".join(f"{key}: {value}" for key, value in context.items() if value not in (None, ""))


__all__ = ["EMAILS_DIR", "load_template", "render_template", "render_email"]
