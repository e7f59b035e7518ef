"""Unit conversion functions for Davis imperial readings.

Every converter accepts ``None`` and returns ``None`` unchanged so that a
missing reading propagates instead of raising.  Results are rounded to a
fixed number of decimals with round-half-away-from-zero applied to the
exact binary value of the float, which is what fixed-point formatting to
N decimals produces on the device dashboards.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

DEFAULT_RAIN_CUP_SIZE_MM = 0.2

HPA_PER_INHG = 33.8639
MS_PER_MPH = 0.44704

# WeatherLink ``rain_size`` code -> rain collector cup size in mm per tip.
RAIN_CUP_SIZES_MM: dict[int, float] = {
    1: 0.254,  # 0.01 in
    2: 0.2,
    3: 0.1,
    4: 0.0254,  # 0.001 in
}

# Above this magnitude fixed-point formatting falls back to plain notation.
_FIXED_POINT_LIMIT = 1e21


def round_fixed(value: float, places: int) -> float:
    """Round *value* to *places* decimals, ties away from zero.

    NaN and infinities are returned as-is.
    """
    if not math.isfinite(value) or abs(value) >= _FIXED_POINT_LIMIT:
        return value
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def to_number(value: Any) -> float | None:
    """Coerce a raw JSON value to a number.

    ``None`` stays ``None``; numeric strings are parsed; anything that is
    not a number (booleans, malformed strings, containers, integers too
    large for a float) becomes NaN.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return math.nan
    if isinstance(value, float):
        return value
    if isinstance(value, int):
        try:
            return float(value)
        except OverflowError:
            return math.nan
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return math.nan
    return math.nan


def fahrenheit_to_celsius(f: float | None) -> float | None:
    if f is None:
        return None
    return round_fixed((f - 32) * 5 / 9, 1)


def inhg_to_hpa(inhg: float | None) -> float | None:
    if inhg is None:
        return None
    return round_fixed(inhg * HPA_PER_INHG, 1)


def inhg_to_hpa_trend(inhg: float | None) -> float | None:
    """Barometric trend keeps three decimals; the change is usually tiny."""
    if inhg is None:
        return None
    return round_fixed(inhg * HPA_PER_INHG, 3)


def mph_to_ms(mph: float | None) -> float | None:
    if mph is None:
        return None
    return round_fixed(mph * MS_PER_MPH, 2)


def tips_to_mm(tips: float | None, cup_size_mm: float = DEFAULT_RAIN_CUP_SIZE_MM) -> float | None:
    """Convert rain collector tip counts to millimetres."""
    if tips is None:
        return None
    return round_fixed(tips * cup_size_mm, 1)


def cup_size_for_rain_size(code: Any) -> float | None:
    """Map a WeatherLink ``rain_size`` code to mm per tip, ``None`` if unknown."""
    if isinstance(code, bool) or not isinstance(code, (int, float)):
        return None
    if not float(code).is_integer():
        return None
    return RAIN_CUP_SIZES_MM.get(int(code))
