"""Spreadsheet serial dates.

Serial day 25569 is 1970-01-01 (day zero 1899-12-30, the 1900 date system).
The fictitious 1900-02-29 of that system is not corrected, so serials before
61 land one day off; that is accepted.
"""
from datetime import date, timedelta
from typing import Any, Optional, Tuple
import math

from .constants import DEFAULT_CONFIG
from .utils import is_number

UNIX_EPOCH = date(1970, 1, 1)
YEAR_FIELD = "Año"


def is_date_header(header: str) -> bool:
    return "fecha" in header.lower()


def excel_serial_to_date(serial: Any, offset: int = DEFAULT_CONFIG["excel_epoch_offset"]) -> Optional[date]:
    if not is_number(serial) or not serial:
        return None
    serial = float(serial)
    if math.isnan(serial) or math.isinf(serial):
        return None
    days = math.floor(serial - offset)
    try:
        return UNIX_EPOCH + timedelta(days=days)
    except OverflowError:
        return None


def format_date(d: date) -> str:
    return f"{d.day:02d}/{d.month:02d}/{d.year:04d}"


def resolve_date(value: Any, header: str) -> Tuple[Any, Optional[str]]:
    """Return (display value, year) for a serial date cell.

    Inactive unless the value is a number and the header names a date
    ("fecha"). When the serial does not map to a calendar date the value is
    returned untouched and the year is None.
    """
    if not is_number(value) or not is_date_header(header):
        return value, None
    d = excel_serial_to_date(value)
    if d is None:
        return value, None
    return format_date(d), f"{d.year:04d}"
