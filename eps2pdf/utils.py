from __future__ import annotations

import math
from typing import Any

MM_PER_INCH = 25.4
PT_PER_INCH = 72.0
PT_PER_MM = PT_PER_INCH / MM_PER_INCH

ORIENTATION_MODES = (0, 1, 2)


def pt_to_mm(value_pt: float) -> float:
    return value_pt / PT_PER_MM


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero (2.5 -> 3, -2.5 -> -3)."""
    result = int(math.floor(abs(value) + 0.5))
    return -result if value < 0 else result


def coerce_orientation(value: Any) -> int:
    """Normalise a user supplied orientation mode to 0, 1 or 2.

    Sequences contribute their first element, numbers are rounded and made
    positive. Anything outside the known modes falls back to 0.
    """
    if value is None:
        return 0
    if isinstance(value, (list, tuple)):
        if not value:
            return 0
        value = value[0]
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0
    if math.isnan(number) or math.isinf(number):
        return 0
    mode = abs(round_half_away(number))
    if mode not in ORIENTATION_MODES:
        return 0
    return mode
