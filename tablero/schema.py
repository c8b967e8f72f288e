"""Column classification.

Known limitation: a column's base type comes from the first row only. A
column whose first value is empty, or whose type changes further down, is
classified by that first cell (or left unclassified). A full-column scan
would be a separate, opt-in classifier.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence

from .utils import is_number

IDENTIFIER_KEYWORDS = ("id", "bip", "codigo")
MEASUREMENT_KEYWORDS = ("superficie", "avance", "permiso")
NUMERIC_EXCLUDE_KEYWORDS = ("bip", "codigo", "id") + MEASUREMENT_KEYWORDS

IDENTIFIER = "identifier"
NUMERIC = "numeric"
CATEGORICAL = "categorical"
UNCLASSIFIED = "unclassified"


@dataclass
class ColumnTypes:
    columns: List[str] = field(default_factory=list)
    numeric: List[str] = field(default_factory=list)
    categorical: List[str] = field(default_factory=list)
    roles: Dict[str, str] = field(default_factory=dict)


def _has_keyword(header: str, keywords: Sequence[str]) -> bool:
    lc = header.lower()
    return any(k in lc for k in keywords)


def is_identifier_like(header: str) -> bool:
    return _has_keyword(header, IDENTIFIER_KEYWORDS)


def is_numeric_candidate(header: str, value: Any) -> bool:
    return is_number(value) and not _has_keyword(header, NUMERIC_EXCLUDE_KEYWORDS)


def is_categorical_candidate(value: Any) -> bool:
    return isinstance(value, str)


def column_role(header: str, value: Any) -> str:
    if is_identifier_like(header):
        return IDENTIFIER
    if is_numeric_candidate(header, value):
        return NUMERIC
    if is_categorical_candidate(value):
        return CATEGORICAL
    return UNCLASSIFIED


def classify_columns(rows: Sequence[Dict[str, Any]]) -> ColumnTypes:
    out = ColumnTypes()
    if not rows:
        return out
    first = rows[0]
    for col, value in first.items():
        out.columns.append(col)
        out.roles[col] = column_role(col, value)
        if is_numeric_candidate(col, value):
            out.numeric.append(col)
        if is_categorical_candidate(value):
            out.categorical.append(col)
    return out
