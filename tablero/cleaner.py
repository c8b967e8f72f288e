"""Header and value canonicalization.

Spreadsheet exports of the same report drift between versions: headers gain
units or footnotes, status cells get typed by hand. These helpers map both to
one canonical spelling so the analysis stage sees a stable schema.
"""
from typing import Any, Dict, Iterable, List, Tuple
import re

# (substrings that must all be present, canonical name); first match wins
HEADER_RULES: List[Tuple[Tuple[str, ...], str]] = [
    (("AUMENTO", "CON IVA"), "Aumento (IVA)"),
    (("DISMINUCIÓN", "CON IVA"), "Disminución (IVA)"),
    (("OBRA EXTRAORDINARIA", "CON IVA"), "Obra Extra (IVA)"),
    (("INDEMNIZACIÓN POR PLAZO", "CON IVA"), "Indemnización Plazo (IVA)"),
    (("ORD", "INGRESO NC"), "Ord. Ingreso"),
    (("C4 MINSAL", "RESPUESTA"), "C4 Minsal Respuesta"),
    (("FECHA INGRESO",), "Fecha Ingreso"),
    (("VALOR UF",), "Valor UF"),
]

STATUS_MAPPINGS: Dict[str, str] = {
    # en ejecución
    "en ejecucion": "En Ejecución",
    "en ejecución": "En Ejecución",
    "ejecucion": "En Ejecución",
    "ejecución": "En Ejecución",
    # terminado
    "terminado": "Terminado",
    "finalizado": "Terminado",
    "completo": "Terminado",
    "recepcionado": "Terminado",
    # en diseño
    "en diseño": "En Diseño",
    "en diseno": "En Diseño",
    "diseno": "En Diseño",
    "diseño": "En Diseño",
}

_ws_re = re.compile(r"\s+")


def match_header_rule(header: str, rules: Iterable[Tuple[Tuple[str, ...], str]] = HEADER_RULES):
    for needles, canonical in rules:
        if all(n in header for n in needles):
            return canonical
    return None


def canonical_header(raw: Any) -> str:
    clean = str(raw).strip()
    canonical = match_header_rule(clean)
    return canonical if canonical is not None else clean


def normalize_string(value: str) -> str:
    return _ws_re.sub(" ", value).strip()


def normalize_value(value: Any) -> Any:
    if not isinstance(value, str):
        return value
    value = normalize_string(value)
    return STATUS_MAPPINGS.get(value.lower(), value)


def header_collisions(raw_headers: Iterable[Any]) -> Dict[str, List[str]]:
    """Canonical names that more than one raw header maps onto."""
    seen: Dict[str, List[str]] = {}
    for h in raw_headers:
        seen.setdefault(canonical_header(h), []).append(str(h))
    return {k: v for k, v in seen.items() if len(v) > 1}
