from datetime import datetime

import pandas as pd
import pytest


@pytest.fixture
def hospital_rows():
    return [
        {"SERVICIO DE SALUD": "S1", "NOMBRE DEL PROYECTO": "P1", "Clasificación": "Normativa", "Partida": "Obra gruesa"},
        {"SERVICIO DE SALUD": "S1", "NOMBRE DEL PROYECTO": "P1", "Clasificación": "Funcionalidad", "Partida": "Terminaciones"},
        {"SERVICIO DE SALUD": "S2", "NOMBRE DEL PROYECTO": "P2", "Clasificación": "Errores de Diseño", "Partida": "Obra gruesa"},
        {"SERVICIO DE SALUD": "S2", "NOMBRE DEL PROYECTO": "P2", "Partida": "Instalaciones"},
        {"SERVICIO DE SALUD": "S2", "NOMBRE DEL PROYECTO": "P2", "Clasificacion": "AS/NTB", "Partida": "Obra gruesa"},
        {"SERVICIO DE SALUD": "S3", "Clasificación": "Normativa", "Partida": "Terminaciones"},
    ]


@pytest.fixture
def obras_rows():
    return [
        {"Código BIP": 30100101, "Nombre Obra": "Hospital Arica", "Monitor": "Ana", "Servicio Salud": "Arica",
         "Avance Físico": 0.5, "Fecha Término": "01/01/2024", "Comuna": "Arica", "Estado": "En Ejecución", "Monto": 1000},
        {"Código BIP": 30100102, "Nombre Obra": "CESFAM Norte", "Monitor": "Luis", "Servicio Salud": "Iquique",
         "Avance Físico": 1, "Fecha Término": "01/06/2022", "Comuna": "Iquique", "Estado": "Terminado", "Monto": 2500},
        {"Código BIP": 30100103, "Nombre Obra": "SAR Sur", "Monitor": "Ana", "Servicio Salud": "Iquique",
         "Avance Físico": 0, "Fecha Término": "01/03/2026", "Comuna": "Alto Hospicio", "Estado": "En Diseño", "Monto": 500},
    ]


def write_workbook(path, sheets):
    """sheets: {sheet name: list of row dicts}"""
    with pd.ExcelWriter(str(path), engine="openpyxl") as w:
        for name, rows in sheets.items():
            pd.DataFrame(rows).to_excel(w, sheet_name=name, index=False)
    return path


@pytest.fixture
def obras_workbook(tmp_path):
    rows = [
        {"CÓDIGO BIP": 30100101, "NOMBRE PROYECTO": "Hospital  Arica ", "MONITOR": "Ana",
         "SERVICIO SALUD": "Arica", "ESTADO": "en ejecucion", "FECHA TÉRMINO": 44927, "COMUNA": "Arica"},
        {"CÓDIGO BIP": 30100102, "NOMBRE PROYECTO": "CESFAM Norte", "MONITOR": "Luis",
         "SERVICIO SALUD": "Iquique", "ESTADO": "FINALIZADO", "FECHA TÉRMINO": datetime(2022, 6, 1), "COMUNA": "Iquique"},
        {"CÓDIGO BIP": 30100103, "NOMBRE PROYECTO": "SAR Sur", "MONITOR": None,
         "SERVICIO SALUD": "Iquique", "ESTADO": "Terminado", "FECHA TÉRMINO": None, "COMUNA": "Iquique"},
    ]
    return write_workbook(tmp_path / "obras.xlsx", {
        "Resumen": [{"Nota": "hoja de portada"}],
        "DMO-Obras": rows,
    })


@pytest.fixture
def hospital_workbook(tmp_path, hospital_rows):
    return write_workbook(tmp_path / "Histórico NC 2022 Hospitales.xlsx", {
        "Portada": [{"Nota": "x"}],
        "2_Notas de Cambio": hospital_rows,
    })
