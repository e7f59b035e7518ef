"""Unit conversion and numeric coercion helpers."""

from davis_lp.conversion.units import (
    DEFAULT_RAIN_CUP_SIZE_MM,
    RAIN_CUP_SIZES_MM,
    cup_size_for_rain_size,
    fahrenheit_to_celsius,
    inhg_to_hpa,
    inhg_to_hpa_trend,
    mph_to_ms,
    round_fixed,
    tips_to_mm,
    to_number,
)

__all__ = [
    "DEFAULT_RAIN_CUP_SIZE_MM",
    "RAIN_CUP_SIZES_MM",
    "cup_size_for_rain_size",
    "fahrenheit_to_celsius",
    "inhg_to_hpa",
    "inhg_to_hpa_trend",
    "mph_to_ms",
    "round_fixed",
    "tips_to_mm",
    "to_number",
]
