"""
tablero

Schema inference and dashboard views for spreadsheet exports whose headers,
types and spellings are not known in advance.
"""

from .cleaner import canonical_header, normalize_value
from .dates import resolve_date
from .pipeline import PipelineResult, normalize_rows, run_pipeline
from .schema import classify_columns
from .state import DashboardState
from .views import FilterState, analyze, build_dashboard

__version__ = "0.1.0"

__all__ = [
    'canonical_header',
    'normalize_value',
    'resolve_date',
    'PipelineResult',
    'normalize_rows',
    'run_pipeline',
    'classify_columns',
    'DashboardState',
    'FilterState',
    'analyze',
    'build_dashboard',
]
