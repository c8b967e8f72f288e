from typing import Any, Dict, List, Sequence, Tuple

from .cleaner import header_collisions
from .constants import DEFAULT_CONFIG

EMPTY_TABLE_MESSAGE = "El archivo parece estar vacío o no tiene datos legibles."


def validate_records(records: Sequence[Dict[str, Any]], raw_headers: Sequence[Any], cfg: dict = None) -> Tuple[List[str], List[str]]:
    cfg = cfg or DEFAULT_CONFIG
    warnings: List[str] = []
    errors: List[str] = []

    if not records:
        errors.append(EMPTY_TABLE_MESSAGE)
        return warnings, errors

    if len(records) < cfg.get("small_table_rows", 10):
        warnings.append(f"Very small number of rows (<{cfg.get('small_table_rows', 10)})")

    # later column wins on collision
    for canonical, raws in header_collisions(raw_headers).items():
        warnings.append(f"Headers {raws} all map to '{canonical}'; the last one wins")

    return warnings, errors
