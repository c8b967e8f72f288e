"""Host-side dashboard state.

The loaded dataset and the filter are the only things that live between
analysis passes, and both are swapped wholesale: loading a file replaces the
dataset and resets the filter in one step.
"""
from typing import Any, Dict, List, Optional
import logging

from .artifacts import export_json
from .constants import DEFAULT_TAB
from .pipeline import PipelineResult, tab_config
from .views.analysis import analyze, build_dashboard
from .views.base import AnalysisConfig, AnalysisResult, FilterState
from .views.filtering import apply_filter

log = logging.getLogger("tablero.state")


class DashboardState:
    def __init__(self, tab: str = DEFAULT_TAB, cfg: Optional[AnalysisConfig] = None):
        tab_config(tab)
        self.tab = tab
        self.cfg = cfg or AnalysisConfig()
        self.dataset: Optional[List[Dict[str, Any]]] = None
        self.file_name: Optional[str] = None
        self.sheet_name: Optional[str] = None
        self.filter = FilterState()

    @property
    def view_type(self) -> str:
        return tab_config(self.tab)["type"]

    @property
    def has_data(self) -> bool:
        return bool(self.dataset)

    def load(self, result: PipelineResult) -> None:
        if not result.ok:
            raise ValueError(f"cannot load a failed pipeline result: {result.errors}")
        self.dataset, self.file_name, self.sheet_name, self.filter = (
            result.dataset, result.input_name, result.sheet_name, FilterState())
        log.info(f"[{self.tab}] loaded {self.file_name} [{self.sheet_name}] with {len(self.dataset)} rows")

    def clear(self) -> None:
        self.dataset, self.file_name, self.sheet_name, self.filter = None, None, None, FilterState()

    def switch_tab(self, tab: str) -> bool:
        tab_config(tab)
        if tab == self.tab:
            return False
        self.tab = tab
        self.clear()
        return True

    def set_filter_column(self, column: Optional[str]) -> None:
        self.filter = self.filter.with_column(column)

    def set_filter_value(self, value: Any) -> None:
        self.filter = self.filter.with_value(value)

    def reset_filter(self) -> None:
        self.filter = self.filter.cleared()

    def working_rows(self) -> List[Dict[str, Any]]:
        return apply_filter(self.dataset or [], self.filter)

    def analysis(self) -> Optional[AnalysisResult]:
        return analyze(self.working_rows(), self.filter, self.view_type, self.cfg)

    def dashboard(self, page: int = 1) -> Dict[str, Any]:
        out = build_dashboard(self.dataset or [], self.filter, self.view_type, page, self.cfg)
        tcfg = tab_config(self.tab)
        out.update({
            'tab': self.tab,
            'title': tcfg['title'],
            'description': tcfg['description'],
            'file_name': self.file_name,
            'sheet_name': self.sheet_name,
        })
        return out

    def export_json(self) -> Optional[str]:
        return export_json(self.working_rows())
