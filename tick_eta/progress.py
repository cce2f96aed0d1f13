"""Helpers for estimating and formatting progress timing information."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal

import numpy as np

_DURATION_UNITS = (
    (86400, "mo"),
    (3600, "h"),
    (60, "m"),
)


def safe_divide(numerator: float, denominator: float) -> float:
    """Divide with IEEE semantics, yielding ``inf``/``nan`` instead of raising."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(numerator) / np.float64(denominator))


def _floor_mod_60(value: float) -> str:
    with np.errstate(invalid="ignore"):
        component = np.floor(np.fmod(value, 60.0))
    if np.isfinite(component):
        return str(int(component))
    return str(float(component))


def humanize_duration(seconds: float) -> str:
    """Return a compact human-readable duration string such as ``1h 1m 1s``.

    Every unit is taken from the raw total modulo 60 of that unit, without
    carrying a remainder into the smaller units, so 90000 seconds renders as
    ``1mo 25h 0m 0s``.
    """
    parts = []
    for unit_seconds, suffix in _DURATION_UNITS:
        if seconds >= unit_seconds:
            parts.append(f"{_floor_mod_60(safe_divide(seconds, unit_seconds))}{suffix}")
    parts.append(f"{_floor_mod_60(seconds)}s")
    return " ".join(parts).strip()


def _round_significant(value: Decimal, digits: int) -> Decimal:
    if not value:
        return value.quantize(Decimal(1).scaleb(1 - digits))
    quantum = Decimal(1).scaleb(value.adjusted() - digits + 1)
    rounded = value.quantize(quantum, rounding=ROUND_HALF_UP)
    if rounded.adjusted() != value.adjusted():
        # 9.9996 -> 10.000 gained a digit
        rounded = rounded.quantize(Decimal(1).scaleb(rounded.adjusted() - digits + 1))
    return rounded


def to_precision(value: float, digits: int) -> str:
    """Format ``value`` with ``digits`` significant digits, keeping trailing zeros."""
    number = float(value)
    if not math.isfinite(number):
        return str(number)
    if number == 0:
        number = 0.0

    # Round the exact binary value, ties away from zero.
    rounded = _round_significant(Decimal(number), digits)
    exponent = rounded.adjusted() if rounded else 0
    if exponent < -6 or exponent >= digits:
        mantissa = format(rounded.scaleb(-exponent), "f")
        sign = "+" if exponent >= 0 else "-"
        return f"{mantissa}e{sign}{abs(exponent)}"
    return format(rounded, "f")


__all__ = ["humanize_duration", "safe_divide", "to_precision"]
