import csv
import math
import numbers
from typing import Any

import chardet


def is_number(value: Any) -> bool:
    # booleans are ints in python but not numbers for column typing
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def is_absent(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, float) and math.isnan(value)


def is_empty(value: Any) -> bool:
    return is_absent(value) or value == ""


def is_truthy(value: Any) -> bool:
    if is_absent(value):
        return False
    return bool(value)


def display_text(value: Any) -> str:
    """Render a cell the way a spreadsheet UI would show it as a label."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, numbers.Integral):
        return str(int(value))
    if isinstance(value, numbers.Real):
        f = float(value)
        if math.isnan(f):
            return "NaN"
        if math.isinf(f):
            return "Infinity" if f > 0 else "-Infinity"
        if f.is_integer():
            return str(int(f))
        return repr(f)
    return str(value)


def value_sort_key(value: Any) -> str:
    return display_text(value)


def strict_equals(a: Any, b: Any) -> bool:
    # no coercion between strings, numbers and booleans
    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool) and a == b
    if isinstance(a, str) or isinstance(b, str):
        return isinstance(a, str) and isinstance(b, str) and a == b
    if is_number(a) and is_number(b):
        return a == b
    if a is None or b is None:
        return a is b
    return type(a) is type(b) and a == b


def detect_encoding(path: str, sample_size: int = 4096) -> str:
    with open(path, "rb") as f:
        raw = f.read(sample_size)
    res = chardet.detect(raw)
    enc = res.get("encoding") or "utf-8"
    if enc.lower() == "ascii":
        return "utf-8"
    return enc


def detect_delimiter(path: str, encoding: str = "utf-8") -> str:
    with open(path, "r", encoding=encoding, errors="ignore") as f:
        sample = f.read(16384)
    try:
        delim = csv.Sniffer().sniff(sample, delimiters=",;\t|").delimiter
        if delim and delim.strip():
            return delim
    except csv.Error:
        pass

    # fallback: pick the delimiter giving the most consistent column count
    lines = [l for l in sample.splitlines() if l.strip()][:20]
    if not lines:
        return ","
    best = ","
    best_score = -1.0
    for d in [",", ";", "\t", "|"]:
        counts = [len(l.split(d)) for l in lines]
        score = (sum(counts) / len(counts)) - (max(counts) - min(counts)) * 0.1
        if score > best_score:
            best_score = score
            best = d
    return best
