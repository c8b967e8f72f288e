from dataclasses import dataclass, field
from datetime import date, datetime, time
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence
import logging

import numpy as np
import pandas as pd

from .errors import LoadError
from .utils import detect_delimiter, detect_encoding

log = logging.getLogger("tablero.loader")

_EXCEL_DAY_ZERO = datetime(1899, 12, 30)


@dataclass
class LoadedTable:
    records: List[Dict[str, Any]]
    sheet_name: Optional[str]
    source_type: str
    raw_headers: List[Any] = field(default_factory=list)
    available_sheets: List[str] = field(default_factory=list)


@dataclass
class HeaderInspection:
    sheet_name: Optional[str]
    headers: List[Any]
    sample_rows: List[List[Any]]
    column_count: int


def select_sheet(available: Sequence[str], allowed: Sequence[str]) -> Optional[str]:
    """First allowed name present in the workbook, else the first sheet."""
    for name in allowed or []:
        if name in available:
            return name
    return available[0] if available else None


def to_serial(value: Any) -> float:
    if isinstance(value, pd.Timestamp):
        value = value.to_pydatetime()
    if isinstance(value, datetime):
        value = value.replace(tzinfo=None)
        return (value - _EXCEL_DAY_ZERO).total_seconds() / 86400
    if isinstance(value, date):
        return float((value - _EXCEL_DAY_ZERO.date()).days)
    if isinstance(value, time):
        return (value.hour * 3600 + value.minute * 60 + value.second) / 86400
    raise TypeError(f"not a date value: {value!r}")


def to_primitive(value: Any) -> Any:
    """Cell value as a raw decode would hand it over; None means empty."""
    if value is None or value is pd.NaT:
        return None
    if isinstance(value, (pd.Timestamp, datetime, date, time)):
        return to_serial(value)
    if isinstance(value, np.generic):
        value = value.item()
    if isinstance(value, float) and np.isnan(value):
        return None
    if isinstance(value, (str, bool, int, float)):
        return value
    return str(value)


def frame_to_records(df: pd.DataFrame) -> List[Dict[str, Any]]:
    records = []
    cols = list(df.columns)
    for values in df.itertuples(index=False, name=None):
        row = {}
        for c, v in zip(cols, values):
            v = to_primitive(v)
            # empty cells are omitted from the row mapping
            if v is None or v == "":
                continue
            row[str(c)] = v
        if row:
            records.append(row)
    return records


def load_records(path: str, allowed_sheet_names: Sequence[str] = ()) -> LoadedTable:
    p = Path(path)
    if not p.exists():
        raise LoadError(f"File not found: {path}")
    ext = p.suffix.lower()
    if ext == ".csv":
        return _load_csv(p)
    if ext in (".xls", ".xlsx"):
        return _load_excel(p, allowed_sheet_names)
    raise LoadError(f"Unsupported file type: {ext}")


def _load_excel(p: Path, allowed_sheet_names: Sequence[str]) -> LoadedTable:
    try:
        with pd.ExcelFile(str(p)) as xls:
            sheets = [str(s) for s in xls.sheet_names]
            target = select_sheet(sheets, allowed_sheet_names)
            if target is None:
                raise LoadError("Workbook has no sheets")
            if allowed_sheet_names and target not in allowed_sheet_names:
                log.warning(f"None of {list(allowed_sheet_names)} found in {p.name}; using first sheet '{target}'")
            df = xls.parse(target)
    except LoadError:
        raise
    except Exception as e:
        log.exception("Excel load failed")
        raise LoadError(f"Excel load failed: {e}")

    records = frame_to_records(df)
    log.info(f"Excel loaded: sheet='{target}' rows={len(records)} cols={df.shape[1]}")
    return LoadedTable(records, target, "excel", list(df.columns), sheets)


def _read_csv(p: Path, **kwargs) -> pd.DataFrame:
    enc = detect_encoding(str(p))
    delim = detect_delimiter(str(p), enc)
    log.debug(f"CSV sniffed delimiter={delim!r} encoding={enc}")
    return pd.read_csv(str(p), encoding=enc, delimiter=delim, on_bad_lines="skip", **kwargs)


def _load_csv(p: Path) -> LoadedTable:
    try:
        df = _read_csv(p)
    except Exception as e:
        log.exception("CSV load failed")
        raise LoadError(f"CSV load failed: {e}")

    records = frame_to_records(df)
    log.info(f"CSV loaded: rows={len(records)} cols={df.shape[1]}")
    return LoadedTable(records, None, "csv", list(df.columns), [])


def inspect_headers(path: str, sheet_name: Optional[str] = None, sample: int = 2) -> HeaderInspection:
    """Header row plus the first data rows, as positional sequences."""
    p = Path(path)
    if not p.exists():
        raise LoadError(f"File not found: {path}")

    try:
        if p.suffix.lower() == ".csv":
            df = _read_csv(p, header=None, nrows=sample + 1)
            target = None
        else:
            with pd.ExcelFile(str(p)) as xls:
                sheets = [str(s) for s in xls.sheet_names]
                if sheet_name is not None and sheet_name not in sheets:
                    raise LoadError(f"Sheet '{sheet_name}' does not exist. Available sheets: {sheets}")
                target = sheet_name if sheet_name is not None else (sheets[0] if sheets else None)
                if target is None:
                    raise LoadError("Workbook has no sheets")
                df = xls.parse(target, header=None, nrows=sample + 1)
    except LoadError:
        raise
    except Exception as e:
        log.exception("Header inspection failed")
        raise LoadError(f"Could not read {p.name}: {e}")

    rows = [[to_primitive(v) for v in r] for r in df.itertuples(index=False, name=None)]
    if not rows:
        return HeaderInspection(target, [], [], 0)
    headers = rows[0]
    return HeaderInspection(target, headers, rows[1:], len(headers))
