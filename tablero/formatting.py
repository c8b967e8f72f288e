import math


def _group_thousands(digits: str) -> str:
    out = []
    while len(digits) > 3:
        out.insert(0, digits[-3:])
        digits = digits[:-3]
    out.insert(0, digits)
    return ".".join(out)


def es_number(v, max_decimals: int = 2) -> str:
    """Format like es-CL: '.' groups thousands, ',' separates decimals."""
    if v is None:
        return 'N/A'
    neg = v < 0
    text = f"{abs(v):.{max_decimals}f}"
    whole, _, frac = text.partition('.')
    frac = frac.rstrip('0')
    out = _group_thousands(whole)
    if frac:
        out += ',' + frac
    return ('-' if neg else '') + out


def clp_fmt(v) -> str:
    if v is None:
        return 'N/A'
    # whole pesos, halves round away from zero
    pesos = math.floor(abs(v) + 0.5)
    text = es_number(pesos, 0)
    return ('-$' if v < 0 and pesos else '$') + text


def format_total(column: str, value) -> str:
    # UF amounts keep decimals; everything else is pesos
    if 'uf' in column.lower():
        return es_number(value, 2)
    return clp_fmt(value)
