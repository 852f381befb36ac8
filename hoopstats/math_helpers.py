from __future__ import annotations

import math


def square(value: float) -> float:
    return value * value


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between ``(x1, y1)`` and ``(x2, y2)``."""

    return math.sqrt(square(x2 - x1) + square(y2 - y1))
