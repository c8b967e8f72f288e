from datetime import date, datetime

import numpy as np
import pandas as pd
import pytest

from tablero.errors import LoadError
from tablero.loader import frame_to_records, inspect_headers, load_records, select_sheet, to_primitive, to_serial


def test_select_sheet():
    assert select_sheet(["Hoja1", "Notas de Cambio"], ["2_Notas de Cambio", "Notas de Cambio", "Hoja1"]) == "Notas de Cambio"
    assert select_sheet(["Resumen", "Otra"], ["DMO-Obras"]) == "Resumen"
    assert select_sheet(["Resumen"], []) == "Resumen"
    assert select_sheet([], ["DMO-Obras"]) is None


def test_to_serial():
    assert to_serial(datetime(1970, 1, 1)) == 25569
    assert to_serial(date(2023, 1, 1)) == 44927
    assert to_serial(pd.Timestamp("2023-01-01 12:00")) == 44927.5


def test_to_primitive():
    assert to_primitive(np.int64(3)) == 3
    assert type(to_primitive(np.int64(3))) is int
    assert to_primitive(np.nan) is None
    assert to_primitive(pd.NaT) is None
    assert to_primitive(np.bool_(True)) is True
    assert to_primitive("x") == "x"


def test_frame_to_records_omits_empty_cells():
    df = pd.DataFrame({"A": [1, np.nan, np.nan], "B": ["x", "", None]})
    assert frame_to_records(df) == [{"A": 1.0, "B": "x"}]


def test_load_records_excel(obras_workbook):
    t = load_records(str(obras_workbook), ["DMO-Obras"])
    assert t.sheet_name == "DMO-Obras"
    assert t.source_type == "excel"
    assert "CÓDIGO BIP" in t.raw_headers
    assert len(t.records) == 3
    # dates come through as serial numbers
    assert t.records[1]["FECHA TÉRMINO"] == 44713


def test_load_records_missing_file(tmp_path):
    with pytest.raises(LoadError):
        load_records(str(tmp_path / "nope.xlsx"))


def test_load_records_unsupported(tmp_path):
    p = tmp_path / "a.parquet"
    p.write_bytes(b"")
    with pytest.raises(LoadError):
        load_records(str(p))


def test_inspect_headers(hospital_workbook):
    res = inspect_headers(str(hospital_workbook), "2_Notas de Cambio")
    assert res.sheet_name == "2_Notas de Cambio"
    assert res.headers[:2] == ["SERVICIO DE SALUD", "NOMBRE DEL PROYECTO"]
    assert res.column_count == len(res.headers)
    assert len(res.sample_rows) == 2
    assert res.sample_rows[0][0] == "S1"


def test_inspect_headers_default_sheet(hospital_workbook):
    res = inspect_headers(str(hospital_workbook))
    assert res.sheet_name == "Portada"
    assert res.headers == ["Nota"]


def test_inspect_headers_missing_sheet(hospital_workbook):
    with pytest.raises(LoadError) as exc:
        inspect_headers(str(hospital_workbook), "No existe")
    assert "Portada" in str(exc.value)
