"""Convert roster weights and heights into metric units."""

from __future__ import annotations

import re

from hoopstats.errors import NonNumericInputError

POUNDS_TO_KG = 0.453592
INCHES_TO_CM = 2.54
INCHES_PER_FOOT = 12

_LEADING_FLOAT = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def _leading_float(text: str) -> float | None:
    match = _LEADING_FLOAT.match(text)
    if not match:
        return None
    return float(match.group(1))


def _leading_int(text: str) -> int | None:
    match = _LEADING_INT.match(text)
    if not match:
        return None
    return int(match.group(1))


def convert_weight_to_kg(weight: str) -> float:
    """Return ``weight`` in kilograms.

    Values tagged with ``kg`` are returned unchanged; anything else is read as
    pounds.
    """

    value = _leading_float(weight)
    if value is None:
        raise NonNumericInputError(f"Unable to parse weight {weight!r}")
    if "kg" in weight:
        return value
    return value * POUNDS_TO_KG


def convert_height_to_cm(height: str) -> float:
    """Return a ``<feet>feet<inches>inches`` height in centimetres."""

    if "feet" not in height:
        raise NonNumericInputError(f"Height {height!r} has no 'feet' component")
    feet_text, _, inches_text = height.partition("feet")
    feet = _leading_int(feet_text)
    if feet is None:
        raise NonNumericInputError(f"Unable to parse feet in height {height!r}")
    inches = 0
    if inches_text.strip():
        parsed = _leading_int(inches_text)
        if parsed is None:
            raise NonNumericInputError(f"Unable to parse inches in height {height!r}")
        inches = parsed
    return (feet * INCHES_PER_FOOT + inches) * INCHES_TO_CM
