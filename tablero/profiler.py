from typing import Any, Dict, Sequence

from .utils import is_absent, is_number


def numeric_totals(rows: Sequence[Dict[str, Any]], numeric_columns: Sequence[str]) -> Dict[str, float]:
    totals: Dict[str, float] = {}
    for col in numeric_columns:
        total = 0
        for row in rows:
            v = row.get(col)
            # text or empty cells in a numeric column count as 0
            if is_number(v) and not is_absent(v):
                total += v
        totals[col] = total
    return totals
