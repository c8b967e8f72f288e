"""One analysis pass over the working subset.

Everything here is a pure function of (dataset, filter state, view type):
nothing is cached between passes, so a new filter or a new file simply means
calling again.
"""
from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional, Sequence
import logging
import math

from ..formatting import format_total
from ..profiler import numeric_totals
from ..schema import classify_columns
from .base import AnalysisConfig, AnalysisResult, FilterState, ProjectionContext
from .charts import build_charts
from .facets import build_facets, quick_filters
from .filtering import apply_filter
from .registry import select_projection

log = logging.getLogger("tablero.views.analysis")


@dataclass
class Page:
    page: int
    per_page: int
    total_pages: int
    total_rows: int
    rows: List[Dict[str, Any]]


def analyze(rows: Sequence[Dict[str, Any]], filter_state: Optional[FilterState] = None,
            view_type: str = 'obras', cfg: Optional[AnalysisConfig] = None) -> Optional[AnalysisResult]:
    """Classify, chart and project an already filtered working subset.

    Returns None for an empty subset ("no analysis").
    """
    if not rows:
        return None
    cfg = cfg or AnalysisConfig()
    filter_state = filter_state or FilterState()
    rows = list(rows)

    types = classify_columns(rows)
    charts = build_charts(rows, types.categorical, filter_state.column, cfg)
    projection = select_projection(ProjectionContext(rows, types.columns, view_type, cfg))
    log.debug(f"analysis: {len(rows)} rows, {len(charts)} charts, table via '{projection.branch}'")

    return AnalysisResult(
        row_count=len(rows),
        columns=projection.columns,
        all_columns=types.columns,
        table_rows=projection.rows,
        numeric_columns=types.numeric,
        categorical_columns=types.categorical,
        totals=numeric_totals(rows, types.numeric),
        charts=charts,
        branch=projection.branch,
        aggregated=projection.aggregated,
    )


def paginate(rows: Sequence[Dict[str, Any]], page: int = 1, per_page: int = 10) -> Page:
    per_page = max(1, int(per_page))
    total_pages = math.ceil(len(rows) / per_page)
    page = min(max(1, int(page)), max(1, total_pages))
    start = (page - 1) * per_page
    return Page(page, per_page, total_pages, len(rows), list(rows[start:start + per_page]))


def build_dashboard(dataset: List[Dict[str, Any]], filter_state: Optional[FilterState] = None,
                    view_type: str = 'obras', page: int = 1,
                    cfg: Optional[AnalysisConfig] = None) -> Dict[str, Any]:
    """Everything the UI needs for one render, as plain JSON-able data."""
    cfg = cfg or AnalysisConfig()
    filter_state = filter_state or FilterState()
    if not dataset:
        return {'has_data': False}

    working = apply_filter(dataset, filter_state)
    result = analyze(working, filter_state, view_type, cfg)
    columns = list(dataset[0].keys())
    qf = quick_filters(dataset, result.all_columns if result else columns)

    out: Dict[str, Any] = {
        'has_data': True,
        'filter': {'column': filter_state.column, 'value': filter_state.value, 'active': filter_state.is_active},
        'facets': build_facets(dataset),
        'quick_filters': [
            dict(asdict(q), active=(q.column == filter_state.column)) for q in qf
        ],
        'working_rows': len(working),
        'analysis': None,
    }
    if result is None:
        return out

    pg = paginate(result.table_rows, page, cfg.items_per_page)
    out['analysis'] = {
        'row_count': result.row_count,
        'columns': result.columns,
        'all_columns': result.all_columns,
        'branch': result.branch,
        'aggregated': result.aggregated,
        'numeric_columns': result.numeric_columns,
        'totals': result.totals,
        'totals_display': {k: format_total(k, v) for k, v in result.totals.items()},
        'charts': [c.to_dict() for c in result.charts],
        'table': {
            'page': pg.page,
            'per_page': pg.per_page,
            'total_pages': pg.total_pages,
            'total_rows': pg.total_rows,
            'rows': pg.rows,
        },
    }
    return out
