"""
Derived views over a canonical dataset: filter facets, the working subset,
ranked charts and the table projection.
"""

from .analysis import analyze, build_dashboard, paginate
from .base import AggregateRow, AnalysisConfig, AnalysisResult, ChartSpec, FilterState, TableProjection
from .charts import build_charts
from .facets import build_facets, quick_filters
from .filtering import apply_filter
from .registry import select_projection

__all__ = [
    'analyze',
    'build_dashboard',
    'paginate',
    'AggregateRow',
    'AnalysisConfig',
    'AnalysisResult',
    'ChartSpec',
    'FilterState',
    'TableProjection',
    'build_charts',
    'build_facets',
    'quick_filters',
    'apply_filter',
    'select_projection',
]
