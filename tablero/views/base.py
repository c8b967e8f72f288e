from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional, Tuple

from ..constants import DEFAULT_CONFIG
from ..utils import is_empty

TOTAL_FIELD = "Total Registros"


@dataclass(frozen=True)
class FilterState:
    column: Optional[str] = None
    value: Any = None

    @property
    def is_active(self) -> bool:
        return bool(self.column) and not is_empty(self.value)

    def with_column(self, column: Optional[str]) -> "FilterState":
        # changing the column always clears the value
        return FilterState(column=column or None, value=None)

    def with_value(self, value: Any) -> "FilterState":
        return replace(self, value=value)

    def cleared(self) -> "FilterState":
        return FilterState()


@dataclass
class ChartSpec:
    title: str
    key: str
    data: List[Tuple[str, int]] = field(default_factory=list)

    @property
    def full_width(self) -> bool:
        return self.key == "SERVICIO DE SALUD"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "key": self.key,
            "full_width": self.full_width,
            "data": [{"name": n, "value": v} for n, v in self.data],
        }


@dataclass
class AggregateRow:
    project: Any
    service: Any
    total: int = 0
    counts: Dict[str, int] = field(default_factory=dict)

    def add(self, label: str) -> None:
        self.total += 1
        self.counts[label] = self.counts.get(label, 0) + 1

    def as_row(self, service_col: str, project_col: str) -> Dict[str, Any]:
        row = {service_col: self.service, project_col: self.project, TOTAL_FIELD: self.total}
        row.update(self.counts)
        return row


@dataclass
class TableProjection:
    columns: List[str]
    rows: List[Dict[str, Any]]
    branch: str = "default"
    aggregated: bool = False


@dataclass
class AnalysisConfig:
    chart_max_categories: int = DEFAULT_CONFIG["chart_max_categories"]
    chart_top_n: int = DEFAULT_CONFIG["chart_top_n"]
    max_charts: int = DEFAULT_CONFIG["max_charts"]
    min_obras_columns: int = DEFAULT_CONFIG["min_obras_columns"]
    items_per_page: int = DEFAULT_CONFIG["items_per_page"]


@dataclass
class ProjectionContext:
    rows: List[Dict[str, Any]]
    columns: List[str]
    view_type: str
    cfg: AnalysisConfig


@dataclass
class AnalysisResult:
    row_count: int
    columns: List[str]
    all_columns: List[str]
    table_rows: List[Dict[str, Any]]
    numeric_columns: List[str] = field(default_factory=list)
    categorical_columns: List[str] = field(default_factory=list)
    totals: Dict[str, float] = field(default_factory=dict)
    charts: List[ChartSpec] = field(default_factory=list)
    branch: str = "default"
    aggregated: bool = False


class ProjectionBase:
    branch_name: str = "base"

    def applies(self, ctx: ProjectionContext) -> bool:
        raise NotImplementedError()

    def project(self, ctx: ProjectionContext) -> Optional[TableProjection]:
        raise NotImplementedError()


def find_column(columns, *predicates) -> Optional[str]:
    """First column satisfying every predicate."""
    for c in columns:
        if all(p(c) for p in predicates):
            return c
    return None


def upper_has(*needles):
    return lambda c: any(n in c.upper() for n in needles)


def lower_has(*needles):
    return lambda c: any(n in c.lower() for n in needles)
