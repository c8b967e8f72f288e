import json
from datetime import date

import pytest

from tablero.artifacts import export_filename, export_json
from tablero.formatting import clp_fmt, es_number, format_total
from tablero.views.detail import field_section, group_fields, is_aggregate_row


@pytest.mark.parametrize("key,value,section", [
    ("Fecha Inicio", "01/01/2023", "dates"),
    ("Plazo", 120, "dates"),
    ("Monto Contrato", 5, "financial"),
    ("Código BIP", 30100101, "financial"),
    ("Comuna", "Arica", "location"),
    ("Estado", "Terminado", "status"),
    ("Avance Físico", 0.5, "status"),
    ("Monitor", "Ana", "general"),
])
def test_field_section(key, value, section):
    assert field_section(key, value) == section


def test_group_fields_skips_missing_values():
    groups = group_fields({"Comuna": "Arica", "Monitor": None, "Estado": "", "Fecha": "01/01/2023"})
    assert groups["location"] == [("Comuna", "Arica")]
    assert groups["general"] == []
    assert groups["status"] == [("Estado", "")]
    assert list(groups) == ["general", "dates", "financial", "location", "status"]


def test_is_aggregate_row():
    assert is_aggregate_row({"Total Registros": 3})
    assert not is_aggregate_row({"Comuna": "Arica"})


def test_es_number():
    assert es_number(1234.5) == "1.234,5"
    assert es_number(1234567.891) == "1.234.567,89"
    assert es_number(1000) == "1.000"
    assert es_number(-0.25) == "-0,25"
    assert es_number(None) == "N/A"


def test_clp_fmt():
    assert clp_fmt(1234567) == "$1.234.567"
    assert clp_fmt(99.6) == "$100"
    assert clp_fmt(-5000) == "-$5.000"
    assert clp_fmt(0) == "$0"
    assert clp_fmt(-0.4) == "$0"


def test_format_total():
    assert format_total("Valor UF", 1500.5) == "1.500,5"
    assert format_total("Aumento (IVA)", 1500.5) == "$1.501"


def test_export_json_keeps_field_order():
    rows = [{"Nombre": "Ñandú", "Monto": 1, "Año": "2023"}]
    text = export_json(rows)
    assert "Ñandú" in text
    assert list(json.loads(text)[0]) == ["Nombre", "Monto", "Año"]
    assert export_json([]) is None


def test_export_filename():
    assert export_filename(date(2024, 3, 5)) == "data_export_2024-03-05.json"
