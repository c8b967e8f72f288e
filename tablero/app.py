"""Dashboard host - Flask JSON API

Endpoints:
- GET    /api/tabs            -> configured tabs and the active one
- POST   /api/tab             -> switch tab (clears loaded data)
- POST   /api/upload          -> upload .xlsx/.xls/.csv, normalize, replace dataset
- DELETE /api/data            -> drop the loaded dataset
- GET    /api/dashboard       -> facets, charts, totals and a table page (?page=N)
- POST   /api/filter          -> {"column": ...} and/or {"value": ...}
- DELETE /api/filter          -> clear the filter
- GET    /api/export          -> working subset as a JSON download
- GET    /api/detail/<index>  -> grouped fields of one table row

Run with: flask --app tablero.app run
"""
from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from flask import Blueprint, Flask, Response, current_app, jsonify, request

from .artifacts import export_filename
from .constants import DEFAULT_CONFIG, DEFAULT_TAB, TAB_CONFIG
from .errors import ConfigError
from .pipeline import PipelineConfig, run_pipeline
from .state import DashboardState
from .views.detail import group_fields, is_aggregate_row
from .views.facets import build_facets, quick_filters

log = logging.getLogger("tablero.app")

MAX_CONTENT_LENGTH = DEFAULT_CONFIG["max_upload_mb"] * 1024 * 1024

bp = Blueprint("tablero", __name__, url_prefix="/api")


def _state() -> DashboardState:
    return current_app.extensions["tablero"]


@bp.route("/tabs")
def tabs():
    st = _state()
    return jsonify({
        "active": st.tab,
        "tabs": {k: {"title": v["title"], "description": v["description"], "allowed_sheet_names": v["allowed_sheet_names"]}
                 for k, v in TAB_CONFIG.items()},
    })


@bp.route("/tab", methods=["POST"])
def switch_tab():
    body = request.get_json(silent=True) or {}
    try:
        changed = _state().switch_tab(body.get("tab") or "")
    except ConfigError as e:
        return jsonify({"error": str(e)}), 400
    return jsonify({"active": _state().tab, "changed": changed})


@bp.route("/upload", methods=["POST"])
def upload():
    if "file" not in request.files:
        return jsonify({"error": "No file provided"}), 400
    f = request.files["file"]
    if not f.filename:
        return jsonify({"error": "Empty filename"}), 400

    st = _state()
    tmp = tempfile.NamedTemporaryFile(delete=False, suffix=Path(f.filename).suffix)
    try:
        f.save(tmp.name)
        tmp.close()
        pr = run_pipeline(tmp.name, f.filename, tab=st.tab, cfg=current_app.config["TABLERO_PIPELINE"])
    finally:
        tmp.close()
        os.unlink(tmp.name)

    if not pr.ok:
        return jsonify({"error": pr.errors[0], "errors": pr.errors, "warnings": pr.warnings}), 400
    st.load(pr)
    return jsonify({
        "file_name": pr.input_name,
        "sheet_name": pr.sheet_name,
        "rows": len(pr.dataset),
        "warnings": pr.warnings,
    })


@bp.route("/data", methods=["DELETE"])
def clear_data():
    _state().clear()
    return jsonify({"has_data": False})


@bp.route("/dashboard")
def dashboard():
    page = request.args.get("page", 1, type=int) or 1
    return jsonify(_state().dashboard(page))


@bp.route("/filter", methods=["POST"])
def set_filter():
    st = _state()
    if not st.has_data:
        return jsonify({"error": "No data loaded"}), 400
    body = request.get_json(silent=True) or {}

    if "column" in body:
        col = body.get("column") or None
        allowed = set(build_facets(st.dataset)) | {q.column for q in quick_filters(st.dataset, list(st.dataset[0]))}
        if col is not None and col not in allowed:
            return jsonify({"error": f"Column '{col}' is not filterable"}), 400
        st.set_filter_column(col)
    if "value" in body:
        if not st.filter.column:
            return jsonify({"error": "Select a column before a value"}), 400
        st.set_filter_value(body.get("value"))
    return jsonify({"column": st.filter.column, "value": st.filter.value, "active": st.filter.is_active,
                    "working_rows": len(st.working_rows())})


@bp.route("/filter", methods=["DELETE"])
def reset_filter():
    st = _state()
    st.reset_filter()
    return jsonify({"column": None, "value": None, "active": False})


@bp.route("/export")
def export():
    payload = _state().export_json()
    if payload is None:
        return jsonify({"error": "Nothing to export"}), 404
    return Response(
        payload,
        mimetype="application/json",
        headers={"Content-Disposition": f"attachment; filename={export_filename()}"},
    )


@bp.route("/detail/<int:index>")
def detail(index: int):
    res = _state().analysis()
    if res is None or not 0 <= index < len(res.table_rows):
        return jsonify({"error": "row not found"}), 404
    row = res.table_rows[index]
    if res.aggregated or is_aggregate_row(row):
        return jsonify({"error": "Aggregated rows have no detail"}), 409
    return jsonify({k: [{"key": key, "value": v} for key, v in items] for k, items in group_fields(row).items()})


def create_app(tab: str = DEFAULT_TAB) -> Flask:
    logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO"))
    app = Flask(__name__)
    app.config["MAX_CONTENT_LENGTH"] = MAX_CONTENT_LENGTH
    app.config["SECRET_KEY"] = os.getenv("SECRET_KEY", "dev-secret-key")
    app.config["TABLERO_PIPELINE"] = PipelineConfig()
    # facets and rows keep dataset header order
    app.json.sort_keys = False
    app.extensions["tablero"] = DashboardState(tab)
    app.register_blueprint(bp)

    @app.errorhandler(413)
    def file_too_large(e):
        limit_mb = MAX_CONTENT_LENGTH // (1024 * 1024)
        return jsonify({"error": f"File too large. Maximum size: {limit_mb}MB"}), 413

    return app


if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=8080, debug=True)
