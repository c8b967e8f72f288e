import pytest

from tablero.cleaner import HEADER_RULES, canonical_header, header_collisions, match_header_rule, normalize_value


@pytest.mark.parametrize("raw,expected", [
    ("AUMENTO (VALOR CON IVA)", "Aumento (IVA)"),
    ("  DISMINUCIÓN DE OBRA CON IVA ", "Disminución (IVA)"),
    ("OBRA EXTRAORDINARIA ($ CON IVA)", "Obra Extra (IVA)"),
    ("INDEMNIZACIÓN POR PLAZO CON IVA", "Indemnización Plazo (IVA)"),
    ("N° ORD. INGRESO NC", "Ord. Ingreso"),
    ("RESPUESTA C4 MINSAL", "C4 Minsal Respuesta"),
    ("FECHA INGRESO NC", "Fecha Ingreso"),
    ("VALOR UF (2022)", "Valor UF"),
])
def test_header_rules(raw, expected):
    assert canonical_header(raw) == expected


def test_unmatched_header_is_only_trimmed():
    assert canonical_header("  Nombre   del Proyecto ") == "Nombre   del Proyecto"
    assert canonical_header("aumento con iva") == "aumento con iva"


def test_first_rule_wins():
    assert canonical_header("AUMENTO Y DISMINUCIÓN CON IVA") == "Aumento (IVA)"


def test_rules_are_ordered_table():
    assert match_header_rule("VALOR UF", []) is None
    assert match_header_rule("X Y", [(("X",), "first"), (("Y",), "second")]) == "first"
    assert HEADER_RULES[0][1] == "Aumento (IVA)"


def test_non_string_header():
    assert canonical_header(7) == "7"


def test_canonical_headers_are_fixed_points():
    for _, canonical in HEADER_RULES:
        assert canonical_header(canonical) == canonical


@pytest.mark.parametrize("raw", ["ejecucion", "en ejecución", "EN EJECUCION", "  En   ejecucion "])
def test_status_variants(raw):
    assert normalize_value(raw) == "En Ejecución"


def test_other_status_labels():
    assert normalize_value("Recepcionado") == "Terminado"
    assert normalize_value("FINALIZADO") == "Terminado"
    assert normalize_value("en diseno") == "En Diseño"


def test_whitespace_collapse_keeps_case():
    assert normalize_value("  Arica  y\tParinacota ") == "Arica y Parinacota"


def test_non_strings_pass_through():
    assert normalize_value(None) is None
    assert normalize_value(12.5) == 12.5
    assert normalize_value(True) is True


def test_value_normalization_is_idempotent():
    for v in ["ejecucion", " en  diseño", "Terminado", "  otro valor "]:
        once = normalize_value(v)
        assert normalize_value(once) == once


def test_header_collisions():
    out = header_collisions(["VALOR UF", "VALOR UF (2022)", "Comuna"])
    assert out == {"Valor UF": ["VALOR UF", "VALOR UF (2022)"]}
