from typing import Any, Dict, List

from ..utils import strict_equals
from .base import FilterState


def apply_filter(dataset: List[Dict[str, Any]], state: FilterState) -> List[Dict[str, Any]]:
    """Working subset for the active filter.

    With no column or value set the dataset itself is returned, not a copy.
    """
    if not state.is_active:
        return dataset
    return [row for row in dataset if strict_equals(row.get(state.column), state.value)]
