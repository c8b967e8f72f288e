from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence
import logging
import time
import uuid

from .cleaner import canonical_header, normalize_value
from .constants import DEFAULT_CONFIG, DEFAULT_TAB, TAB_CONFIG
from .dates import YEAR_FIELD, resolve_date
from .errors import ConfigError, LoadError
from .loader import load_records
from .validator import validate_records

log = logging.getLogger("tablero.pipeline")

INVALID_FILE_MESSAGE = "Por favor, sube un archivo Excel válido (.xlsx, .xls) o CSV."
CORRUPT_FILE_MESSAGE = "Error al procesar el archivo. Asegúrate de que no esté dañado."


@dataclass
class PipelineConfig:
    max_upload_mb: int = DEFAULT_CONFIG["max_upload_mb"]
    allowed_extensions: Sequence[str] = DEFAULT_CONFIG["allowed_extensions"]
    small_table_rows: int = DEFAULT_CONFIG["small_table_rows"]


@dataclass
class PipelineResult:
    run_id: str
    input_name: str
    tab: str
    sheet_name: Optional[str]
    source_type: str
    dataset: List[Dict[str, Any]]
    warnings: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    meta: Dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.errors


def tab_config(tab: str) -> Dict[str, Any]:
    try:
        return TAB_CONFIG[tab]
    except KeyError:
        raise ConfigError(f"Unknown tab '{tab}'. Expected one of {sorted(TAB_CONFIG)}")


def normalize_row(raw: Dict[Any, Any]) -> Dict[str, Any]:
    row: Dict[str, Any] = {}
    for key, value in raw.items():
        header = canonical_header(key)
        value, year = resolve_date(normalize_value(value), header)
        # Año is written once per row, by whichever field gets there first
        if year is not None and YEAR_FIELD not in row:
            row[YEAR_FIELD] = year
        if header == YEAR_FIELD and YEAR_FIELD in row:
            continue
        row[header] = value
    return row


def normalize_rows(rows: Any) -> List[Dict[str, Any]]:
    """Canonical dataset for a sequence of decoded rows.

    Idempotent: already-normalized rows come back equal, since canonical
    strings re-normalize to themselves and formatted dates are no longer
    numbers.
    """
    if not isinstance(rows, (list, tuple)) or not rows:
        return []
    return [normalize_row(r) for r in rows]


def _now_id() -> str:
    return time.strftime("%Y%m%d_%H%M%S") + "_" + uuid.uuid4().hex[:8]


def run_pipeline(path: str, filename: Optional[str] = None, tab: str = DEFAULT_TAB, cfg: Optional[PipelineConfig] = None) -> PipelineResult:
    cfg = cfg or PipelineConfig()
    tcfg = tab_config(tab)
    filename = filename or Path(path).name
    start = time.time()
    res = PipelineResult(_now_id(), filename, tab, None, "unknown", [])

    if Path(filename).suffix.lower() not in cfg.allowed_extensions:
        res.errors.append(INVALID_FILE_MESSAGE)
        return res

    # load
    try:
        loaded = load_records(path, tcfg["allowed_sheet_names"])
    except LoadError as e:
        log.warning(f"Load failed for {filename}: {e}")
        res.errors.append(CORRUPT_FILE_MESSAGE)
        res.meta["detail"] = str(e)
        return res
    res.sheet_name = loaded.sheet_name
    res.source_type = loaded.source_type

    # validate
    warnings, errors = validate_records(loaded.records, loaded.raw_headers, {"small_table_rows": cfg.small_table_rows})
    res.warnings.extend(warnings)
    res.errors.extend(errors)
    for w in warnings:
        log.warning(w)
    if errors:
        return res

    # normalize
    res.dataset = normalize_rows(loaded.records)
    res.meta = {
        "run_id": res.run_id,
        "input_name": filename,
        "sheet_name": loaded.sheet_name,
        "available_sheets": loaded.available_sheets,
        "rows": len(res.dataset),
        "cols": len(loaded.raw_headers),
        "elapsed_seconds": time.time() - start,
    }
    log.info(f"Pipeline {res.run_id}: {filename} [{loaded.sheet_name}] -> {len(res.dataset)} rows")
    return res
