DEFAULT_CONFIG = {
    "max_upload_mb": 50,
    "allowed_extensions": (".xlsx", ".xls", ".csv"),
    "excel_epoch_offset": 25569,
    "facet_min_values": 2,
    "facet_max_values": 50,
    "chart_max_categories": 100,
    "chart_top_n": 15,
    "max_charts": 6,
    "min_obras_columns": 3,
    "quick_filter_max_values": 50,
    "items_per_page": 10,
    "small_table_rows": 10,
}

TAB_CONFIG = {
    "obras": {
        "title": "Control de Proyectos DMO",
        "allowed_sheet_names": ["DMO-Obras"],
        "description": "Estado de avance, presupuestos y gestión de obras.",
        "type": "obras",
    },
    "nuevo": {
        "title": "Histórico Notas de Cambio (Hospitales 2022)",
        "allowed_sheet_names": ["2_Notas de Cambio", "Notas de Cambio", "Hoja1"],
        "description": "Análisis de aumentos, disminuciones y obras extraordinarias.",
        "type": "nuevo",
    },
    "data": {
        "title": "Datos de Proyectos",
        "allowed_sheet_names": ["DMO-Obras"],
        "description": "Código BIP, proyecto y servicio de salud.",
        "type": "data",
    },
}

DEFAULT_TAB = "obras"
