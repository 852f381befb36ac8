#!/usr/bin/env python3
"""Compute the distance between two points and save it under ``dataPoints/``."""

from __future__ import annotations

import argparse
import math
from pathlib import Path

from hoopstats.math_helpers import distance

DEFAULT_DATA_DIR = Path("dataPoints")
POINTS_FILE_NAME = "points.txt"


def to_number(text: str) -> float:
    """Coerce ``text`` to a float; anything unparsable becomes ``nan``."""

    try:
        return float(text)
    except ValueError:
        return math.nan


def format_distance(value: float) -> str:
    """Render a distance at full precision, spelling out non-finite values."""

    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def record_distance(
    x1: str,
    y1: str,
    x2: str,
    y2: str,
    data_dir: Path = DEFAULT_DATA_DIR,
) -> float:
    data_dir.mkdir(parents=True, exist_ok=True)
    output_path = data_dir / POINTS_FILE_NAME

    output_path.write_text(f"{x1}, {y1}, {x2}, {y2}", encoding="utf-8")
    print("Content written to file")

    result = distance(to_number(x1), to_number(y1), to_number(x2), to_number(y2))
    message = (
        f"\nThe distance between your two points: ({x1},{y1}), ({x2},{y2}) "
        f"is {format_distance(result)}"
    )
    with output_path.open("a", encoding="utf-8") as handle:
        handle.write(message)
    return result


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    for name in ("x1", "y1", "x2", "y2"):
        parser.add_argument(name, help=f"Coordinate {name}")
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=DEFAULT_DATA_DIR,
        help="Directory that receives points.txt (default: %(default)s)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    record_distance(args.x1, args.y1, args.x2, args.y2, args.data_dir)
    print("program completed!")


if __name__ == "__main__":  # pragma: no cover
    main()
