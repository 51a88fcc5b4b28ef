# -*- coding: utf-8 -*-
"""
Tests del listado paginado: normalización de página, metadatos,
filtros y escape de comodines.
"""

import pytest

from app.modules.reclamos.enums import EstadoReclamo
from app.modules.reclamos.repositories import (
    BusquedaFilter,
    EstadoFilter,
    FiltroInvalidoError,
    PageMeta,
    PageRequest,
    ReclamoListQuery,
)
from app.modules.reclamos.repositories.reclamo_query_builder import DEFAULT_LIMIT, MAX_LIMIT, _escape_like


# ==================== PÁGINA ====================

@pytest.mark.parametrize(
    "page, limit, esperado",
    [
        (None, None, (1, DEFAULT_LIMIT)),
        (0, 10, (1, 10)),
        (-3, 0, (1, 1)),
        (2, 500, (2, MAX_LIMIT)),
        (4, 25, (4, 25)),
    ],
)
def test_page_request_normaliza(page, limit, esperado):
    req = PageRequest.from_params(page, limit)
    assert (req.page, req.limit) == esperado


def test_page_request_offset():
    assert PageRequest(page=3, limit=20).offset == 40


def test_page_meta():
    meta = PageMeta.build(45, PageRequest(page=2, limit=20))
    assert meta.total_pages == 3
    assert meta.has_next is True
    assert meta.has_prev is True


def test_page_meta_sin_resultados():
    meta = PageMeta.build(0, PageRequest())
    assert meta.total_pages == 0
    assert meta.has_next is False
    assert meta.has_prev is False


# ==================== FILTROS ====================

def test_sin_filtros():
    query = ReclamoListQuery.from_params()
    assert query.filters == ()


def test_estado_se_normaliza_a_mayusculas():
    query = ReclamoListQuery.from_params(estado=" en_proceso ")
    assert query.filters == (EstadoFilter(EstadoReclamo.EN_PROCESO),)


def test_estado_invalido():
    with pytest.raises(FiltroInvalidoError) as exc:
        ReclamoListQuery.from_params(estado="ARCHIVADO")
    assert str(exc.value) == "Estado inválido: ARCHIVADO"


def test_busqueda_en_blanco_se_ignora():
    assert ReclamoListQuery.from_params(search="   ").filters == ()


def test_busqueda_y_estado_combinados():
    query = ReclamoListQuery.from_params(estado="PENDIENTE", search=" quispe ")
    assert query.filters == (EstadoFilter(EstadoReclamo.PENDIENTE), BusquedaFilter("quispe"))


def test_escape_de_comodines_like():
    assert _escape_like("100%_a\\b") == "100\\%\\_a\\\\b"


def test_busqueda_usa_parametros_ligados():
    clause = BusquedaFilter("x' OR 1=1 --").clause()
    compiled = clause.compile()
    assert "OR 1=1" not in str(compiled)
    assert "%x' OR 1=1 --%" in compiled.params.values()
