from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence
import logging

from ..constants import DEFAULT_CONFIG
from ..schema import is_categorical_candidate, is_identifier_like
from ..utils import is_absent, is_truthy, value_sort_key
from .base import find_column, upper_has

log = logging.getLogger("tablero.views.facets")


@dataclass
class QuickFilter:
    label: str
    column: str
    values: List[Any]


def distinct_values(rows: Sequence[Dict[str, Any]], col: str, keep=lambda v: not is_absent(v)) -> List[Any]:
    seen: Dict[Any, Any] = {}
    for row in rows:
        v = row.get(col)
        if keep(v):
            # 1 and 1.0 collapse like a javascript Set would; True stays apart from 1
            seen.setdefault((type(v) is bool, v), v)
    return sorted(seen.values(), key=value_sort_key)


def build_facets(dataset: Sequence[Dict[str, Any]],
                 min_values: int = DEFAULT_CONFIG["facet_min_values"],
                 max_values: int = DEFAULT_CONFIG["facet_max_values"]) -> Dict[str, List[Any]]:
    """Filterable columns and their sorted candidate values.

    Built from the full dataset; an active filter never shrinks the list.
    """
    if not dataset:
        return {}
    first = dataset[0]
    options: Dict[str, List[Any]] = {}
    for col, value in first.items():
        if not is_categorical_candidate(value) or is_identifier_like(col):
            continue
        values = distinct_values(dataset, col)
        if min_values <= len(values) <= max_values:
            options[col] = values
    log.debug(f"facets: {len(options)} of {len(first)} columns")
    return options


def quick_filters(dataset: Sequence[Dict[str, Any]], columns: Sequence[str],
                  max_values: int = DEFAULT_CONFIG["quick_filter_max_values"]) -> List[QuickFilter]:
    out: List[QuickFilter] = []
    candidates = [
        ("Servicios", find_column(columns, upper_has("SERVICIO"), upper_has("SALUD"))),
        ("Cartera", find_column(columns, upper_has("CARTERA"))),
    ]
    for label, col in candidates:
        if col is None:
            continue
        values = distinct_values(dataset, col, keep=is_truthy)
        if values and len(values) <= max_values:
            out.append(QuickFilter(label, col, values))
    return out


def quick_filter_for(filters: Sequence[QuickFilter], column: Optional[str]) -> Optional[QuickFilter]:
    return next((q for q in filters if q.column == column), None)
