"""Change-note history report ("Histórico NC Hospitales").

One table row per project instead of one per change note: the health service,
how many notes the project has and how they split by classification.
"""
from typing import Any, Dict, Iterable, List
import unicodedata

from ..utils import display_text, is_truthy
from .base import TOTAL_FIELD, AggregateRow, ProjectionBase, ProjectionContext, TableProjection

SERVICE_COL = 'SERVICIO DE SALUD'
PROJECT_COL = 'NOMBRE DEL PROYECTO'
CLASSIFICATION_FIELDS = ('Clasificación', 'Clasificacion')
UNCLASSIFIED_LABEL = 'Sin Clasificar'
KNOWN_CLASSIFICATION_ORDER = ['Errores de Diseño', 'Funcionalidad', 'AS/NTB', 'Normativa']


def _collation_key(label: str):
    stripped = ''.join(ch for ch in unicodedata.normalize('NFKD', label) if not unicodedata.combining(ch))
    return (stripped.casefold(), label)


def classification_sort_key(label: str):
    """Known labels first in their fixed order, then the rest alphabetically."""
    if label in KNOWN_CLASSIFICATION_ORDER:
        return (0, KNOWN_CLASSIFICATION_ORDER.index(label), ('', ''))
    return (1, 0, _collation_key(label))


def order_classifications(labels: Iterable[str]) -> List[str]:
    return sorted(set(labels), key=classification_sort_key)


def row_classification(row: Dict[str, Any]) -> str:
    for f in CLASSIFICATION_FIELDS:
        v = row.get(f)
        if is_truthy(v):
            return display_text(v)
    return UNCLASSIFIED_LABEL


def aggregate_projects(rows: Iterable[Dict[str, Any]]) -> List[AggregateRow]:
    aggregated: Dict[Any, AggregateRow] = {}
    for row in rows:
        project = row.get(PROJECT_COL)
        if not is_truthy(project):
            continue
        agg = aggregated.get(project)
        if agg is None:
            agg = aggregated[project] = AggregateRow(project=project, service=row.get(SERVICE_COL))
        agg.add(row_classification(row))
    return sorted(aggregated.values(), key=lambda a: a.total, reverse=True)


class HospitalReportProjection(ProjectionBase):
    branch_name = 'hospital'

    def applies(self, ctx: ProjectionContext) -> bool:
        return SERVICE_COL in ctx.columns and PROJECT_COL in ctx.columns

    def project(self, ctx: ProjectionContext) -> TableProjection:
        aggregates = aggregate_projects(ctx.rows)
        labels = order_classifications(l for a in aggregates for l in a.counts)
        return TableProjection(
            columns=[SERVICE_COL, PROJECT_COL, TOTAL_FIELD] + labels,
            rows=[a.as_row(SERVICE_COL, PROJECT_COL) for a in aggregates],
            branch=self.branch_name,
            aggregated=True,
        )
