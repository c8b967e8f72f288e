from typing import Any, Dict, List, Tuple

from ..utils import is_absent, is_number, is_truthy
from .base import TOTAL_FIELD

SECTIONS = ['general', 'dates', 'financial', 'location', 'status']

DATE_KEYWORDS = ('fecha', 'plazo', 'inicio', 'termino')
FINANCIAL_KEYWORDS = ('monto', 'inversion', 'costo')
LOCATION_KEYWORDS = ('ubicacion', 'comuna', 'direccion', 'region')
STATUS_KEYWORDS = ('estado', 'avance', 'situacion')
LARGE_AMOUNT = 10000


def field_section(key: str, value: Any) -> str:
    lk = key.lower()
    if any(k in lk for k in DATE_KEYWORDS):
        return 'dates'
    if any(k in lk for k in FINANCIAL_KEYWORDS) or (is_number(value) and value > LARGE_AMOUNT):
        return 'financial'
    if any(k in lk for k in LOCATION_KEYWORDS):
        return 'location'
    if any(k in lk for k in STATUS_KEYWORDS):
        return 'status'
    return 'general'


def group_fields(row: Dict[str, Any]) -> Dict[str, List[Tuple[str, Any]]]:
    groups: Dict[str, List[Tuple[str, Any]]] = {s: [] for s in SECTIONS}
    for key, value in row.items():
        if is_absent(value):
            continue
        groups[field_section(key, value)].append((key, value))
    return groups


def is_aggregate_row(row: Dict[str, Any]) -> bool:
    return is_truthy(row.get(TOTAL_FIELD))
