"""Command line entry points.

    python -m tablero inspect "Histórico NC 2022 Hospitales.xlsx" --sheet "2_Notas de Cambio"
    python -m tablero analyze obras.xlsx --tab obras --filter-column Comuna --filter-value Arica
"""
import argparse
import json
import logging
import os
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from .constants import DEFAULT_TAB, TAB_CONFIG
from .errors import LoadError
from .loader import inspect_headers
from .pipeline import run_pipeline
from .state import DashboardState


def _parse_args(argv: Optional[List[str]] = None) -> Dict[str, Any]:
    p = argparse.ArgumentParser(prog="tablero", description="Spreadsheet schema inference and dashboard views")
    p.add_argument("--log-level", type=str, default=os.getenv("LOG_LEVEL", "INFO"))
    sub = p.add_subparsers(dest="command", required=True)

    ins = sub.add_parser("inspect", help="Print the header row and first data rows of a sheet")
    ins.add_argument("path")
    ins.add_argument("--sheet", type=str, default=None)

    an = sub.add_parser("analyze", help="Normalize a file and print the dashboard payload as JSON")
    an.add_argument("path")
    an.add_argument("--tab", type=str, default=DEFAULT_TAB, choices=sorted(TAB_CONFIG))
    an.add_argument("--filter-column", type=str, default=None)
    an.add_argument("--filter-value", type=str, default=None)
    an.add_argument("--page", type=int, default=1)

    return vars(p.parse_args(argv))


def _inspect(args: Dict[str, Any]) -> int:
    try:
        res = inspect_headers(args["path"], args.get("sheet"))
    except LoadError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    if not res.headers:
        print("La hoja está vacía.")
        return 0
    print(json.dumps(asdict(res), indent=2, ensure_ascii=False, default=str))
    return 0


def _analyze(args: Dict[str, Any]) -> int:
    pr = run_pipeline(args["path"], tab=args["tab"])
    for w in pr.warnings:
        print(f"WARNING: {w}", file=sys.stderr)
    if not pr.ok:
        for e in pr.errors:
            print(f"ERROR: {e}", file=sys.stderr)
        return 1
    state = DashboardState(args["tab"])
    state.load(pr)
    if args.get("filter_column"):
        state.set_filter_column(args["filter_column"])
        if args.get("filter_value") is not None:
            state.set_filter_value(args["filter_value"])
    print(json.dumps(state.dashboard(args.get("page") or 1), indent=2, ensure_ascii=False, default=str))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    level = str(args.get("log_level") or "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s | %(levelname)s | %(message)s",
        stream=sys.stderr,
    )
    if args["command"] == "inspect":
        return _inspect(args)
    return _analyze(args)


if __name__ == "__main__":
    sys.exit(main())
