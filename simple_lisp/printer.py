"""Render runtime values in Lisp notation."""

from __future__ import annotations

import math
import re
from decimal import Decimal

from simple_lisp import LispValue
from simple_lisp.types.nil import Nil
from simple_lisp.types.symbol import Symbol
from simple_lisp.types.procedure import Procedure

_EXPONENT_RE = re.compile(r"e([+-])0*(\d)")


def format_number(x: float) -> str:
    """Shortest decimal form; integral values print without a fraction."""
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "Infinity" if x > 0 else "-Infinity"
    if x.is_integer() and abs(x) < 1e21:
        return str(int(x))
    text = repr(x)
    # fixed notation down to 1e-6: 0.00001 rather than 1e-5
    if "e-" in text and abs(x) >= 1e-6:
        return format(Decimal(text), "f")
    # 1e-07 -> 1e-7
    return _EXPONENT_RE.sub(r"e\1\2", text)


def stringify(value: LispValue) -> str:
    """Return the printed representation of `value`.

    Booleans and Nil collapse: both False and Nil print as NIL.
    """
    match value:
        case _ if value is Nil or value is False:
            return "NIL"
        case True:
            return "T"
        case float() | int():
            return format_number(float(value))
        case Symbol():
            # print upper case only when it reads back as the same symbol
            upper = value.name.upper()
            return upper if upper.lower() == value.name else value.name
        case list():
            return "(" + " ".join(stringify(v) for v in value) + ")"
        case Procedure():
            return repr(value)
    return str(value)
