import math
import re
from datetime import date

import numpy as np
import pytest

from tablero.dates import excel_serial_to_date, format_date, resolve_date


def test_epoch_serial():
    assert resolve_date(25569, "Fecha Ingreso") == ("01/01/1970", "1970")


def test_known_serials():
    assert resolve_date(44927, "FECHA TÉRMINO") == ("01/01/2023", "2023")
    assert resolve_date(44713, "fecha") == ("01/06/2022", "2022")


def test_fractional_serial_is_floored():
    assert resolve_date(44927.99, "Fecha") == ("01/01/2023", "2023")


def test_numpy_numbers_resolve():
    assert resolve_date(np.float64(25569), "Fecha") == ("01/01/1970", "1970")


def test_leap_year_quirk_not_corrected():
    # the 1900 system counts a 29/02/1900 that never existed
    assert resolve_date(60, "Fecha") == ("28/02/1900", "1900")
    assert resolve_date(61, "Fecha") == ("01/03/1900", "1900")


@pytest.mark.parametrize("value,header", [
    (44927, "Monto"),
    ("44927", "Fecha"),
    (True, "Fecha"),
    (None, "Fecha"),
])
def test_inactive_cases(value, header):
    assert resolve_date(value, header) == (value, None)


def test_invalid_serials_left_untouched():
    assert resolve_date(0, "Fecha") == (0, None)
    assert resolve_date(1e12, "Fecha") == (1e12, None)
    assert resolve_date(1e8, "Fecha") == (1e8, None)
    v, year = resolve_date(float("nan"), "Fecha")
    assert math.isnan(v) and year is None
    assert resolve_date(float("inf"), "Fecha") == (float("inf"), None)


def test_display_format():
    value, year = resolve_date(40000, "Fecha Inicio")
    assert re.fullmatch(r"\d{2}/\d{2}/\d{4}", value)
    assert value.endswith(year)


def test_helpers():
    assert excel_serial_to_date(25569) == date(1970, 1, 1)
    assert excel_serial_to_date("x") is None
    assert format_date(date(5, 3, 9)) == "09/03/0005"
