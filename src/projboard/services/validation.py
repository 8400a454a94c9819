# Rev 0.1.0

"""Field validation rules (Rev 0.1.0)
Pure allow/deny checks for single form values. No state, never raises.
"""
from __future__ import annotations
import math
import re
from dataclasses import dataclass
from typing import Optional, Union

from projboard.models.entities import Number


class ValidationRejected(ValueError):
    """One or more submitted fields failed their rules."""


@dataclass(frozen=True)
class Validatable:
    value: Union[str, Number]
    required: bool = False
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    min: Optional[Number] = None
    max: Optional[Number] = None


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate(v: Validatable) -> bool:
    """Return True if every supplied rule passes; rules for the other value type are skipped."""
    ok = True
    if v.required:
        ok = ok and len(str(v.value).strip()) != 0

    if isinstance(v.value, str):
        if v.min_length is not None:
            ok = ok and len(v.value) >= v.min_length
        if v.max_length is not None:
            ok = ok and len(v.value) <= v.max_length

    if _is_number(v.value):
        # NaN compares False against everything, so it fails any bound
        if v.min is not None:
            ok = ok and v.value >= v.min
        if v.max is not None:
            ok = ok and v.value <= v.max

    return ok


# ASCII only: no "_" separators, no non-Latin digits
_DECIMAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_RADIX = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)", re.ASCII)
_INFINITY = {"Infinity": math.inf, "+Infinity": math.inf, "-Infinity": -math.inf}


def coerce_number(text: str) -> Number:
    """
    Convert raw form text to a number with browser unary-plus rules:
      blank -> 0, decimal/exponent text -> int if integral else float,
      unsigned 0x/0o/0b literals -> int, [+-]Infinity -> inf, anything else -> nan
    """
    s = (text or "").strip()
    if not s:
        return 0
    if s in _INFINITY:
        return _INFINITY[s]
    if _RADIX.fullmatch(s):
        return int(s, 0)
    if not _DECIMAL.fullmatch(s):
        return math.nan
    f = float(s)
    if math.isfinite(f) and f.is_integer():
        return int(f)
    return f
