from typing import Any, Dict, List, Optional, Sequence
import logging

from ..schema import is_identifier_like
from ..utils import display_text, is_truthy
from .base import AnalysisConfig, ChartSpec

log = logging.getLogger("tablero.views.charts")

EMPTY_LABEL = "(Vacío)"

CHART_PRIORITY_TERMS = [
    "servicio de salud",
    "clasificacion",
    "clasificación",
    "partida",
    "nombre del proyecto",
    "cartera",
    "macrozona",
    "monitor",
    "estado",
    "comuna",
    "situacion",
    "etapa",
]

# header -> title overrides
CHART_TITLES = {
    "Macrozona": "Cartera",
    "NOMBRE DEL PROYECTO": "Registros por Proyecto",
}


def chart_title(col: str) -> str:
    return CHART_TITLES.get(col, f"Proyectos por {col}")


def chart_priority(title: str, terms: Sequence[str] = CHART_PRIORITY_TERMS) -> int:
    lt = title.lower()
    for i, t in enumerate(terms):
        if t in lt:
            return i
    return len(terms)


def value_counts(rows: Sequence[Dict[str, Any]], col: str) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for row in rows:
        v = row.get(col)
        key = display_text(v) if is_truthy(v) else EMPTY_LABEL
        counts[key] = counts.get(key, 0) + 1
    return counts


def build_chart(rows: Sequence[Dict[str, Any]], col: str, cfg: AnalysisConfig) -> Optional[ChartSpec]:
    counts = value_counts(rows, col)
    if not 1 < len(counts) <= cfg.chart_max_categories:
        return None
    # ties keep encounter order
    ranked = sorted(counts.items(), key=lambda kv: kv[1], reverse=True)
    return ChartSpec(title=chart_title(col), key=col, data=ranked[:cfg.chart_top_n])


def build_charts(rows: Sequence[Dict[str, Any]], categorical: Sequence[str],
                 filter_column: Optional[str] = None, cfg: Optional[AnalysisConfig] = None) -> List[ChartSpec]:
    cfg = cfg or AnalysisConfig()
    charts: List[ChartSpec] = []
    for col in categorical:
        if is_identifier_like(col) or col == filter_column:
            continue
        spec = build_chart(rows, col, cfg)
        if spec is not None:
            charts.append(spec)
    charts.sort(key=lambda c: chart_priority(c.title))
    log.debug(f"charts: {len(charts)} eligible, keeping {min(len(charts), cfg.max_charts)}")
    return charts[:cfg.max_charts]
