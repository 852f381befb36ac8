"""Parse the roster and game-result extracts into typed records.

``players.csv`` is a plain comma separated table with eight positional
columns. ``games.csv`` embeds two bracketed lists in each row::

    China,[2,4,5,7,9,11,12,17],[2,8,10,2,2,2,3,3]

so it cannot be split on commas. Each game row is matched against a pattern
with named groups for the winning team and the two lists, and the lists are
zipped into ``PlayerPoints`` entries so the player/points pairing cannot drift.

Both files use a header line, which is discarded, and CRLF line endings.
"""

from __future__ import annotations

import csv
import re
import warnings
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterator, TypeVar

from hoopstats.errors import (
    MalformedRowError,
    MissingFileError,
    NonNumericInputError,
    SkippedRowWarning,
)
from hoopstats.units import convert_height_to_cm, convert_weight_to_kg

PLAYER_FIELDS: tuple[str, ...] = (
    "id",
    "first_name",
    "last_name",
    "country",
    "gender",
    "age",
    "weight",
    "height",
)

GAME_LINE_PATTERN = re.compile(
    r"^(?P<team>[^,]*),\[(?P<players>[^\[\]]*)\],\[(?P<points>[^\[\]]*)\]$"
)

Number = int | float
T = TypeVar("T")


@dataclass(frozen=True)
class Player:
    player_id: str
    first_name: str
    last_name: str
    country: str
    gender: str
    age: str
    weight_kg: float
    height_cm: float

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass(frozen=True)
class PlayerPoints:
    player_id: str
    points: Number


@dataclass(frozen=True)
class Game:
    winning_team: str
    entries: tuple[PlayerPoints, ...]

    @property
    def player_ids(self) -> tuple[str, ...]:
        return tuple(entry.player_id for entry in self.entries)

    @property
    def points(self) -> tuple[Number, ...]:
        return tuple(entry.points for entry in self.entries)

    @property
    def total_points(self) -> Number:
        return sum(self.points)


def _iter_data_lines(text: str) -> Iterator[tuple[int, str]]:
    """Yield ``(line_number, line)`` for every non-blank line after the header."""

    lines = text.splitlines()
    for index, line in enumerate(lines[1:], start=2):
        if not line.strip():
            continue
        yield index, line


def _parse_number(token: str) -> Number:
    text = token.strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        raise NonNumericInputError(f"Expected a number, found {token!r}") from None


def _parse_number_list(text: str) -> list[Number]:
    if not text.strip():
        return []
    return [_parse_number(token) for token in text.split(",")]


def _player_id(value: Number) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _collect(
    rows: Iterator[tuple[int, str]],
    parse: Callable[[str, int], T],
    *,
    strict: bool,
) -> list[T]:
    records: list[T] = []
    for line_number, line in rows:
        try:
            records.append(parse(line, line_number))
        except MalformedRowError as exc:
            if strict:
                raise
            warnings.warn(f"Skipping row: {exc}", SkippedRowWarning, stacklevel=3)
    return records


def parse_player_row(line: str, line_number: int | None = None) -> Player:
    fields = next(csv.reader([line]), [])
    if len(fields) != len(PLAYER_FIELDS):
        raise MalformedRowError(
            f"expected {len(PLAYER_FIELDS)} player fields, found {len(fields)}",
            line_number=line_number,
        )
    row = dict(zip(PLAYER_FIELDS, (field.strip() for field in fields)))
    try:
        weight_kg = convert_weight_to_kg(row["weight"])
        height_cm = convert_height_to_cm(row["height"])
    except NonNumericInputError as exc:
        raise NonNumericInputError(str(exc), line_number=line_number) from exc
    return Player(
        player_id=row["id"],
        first_name=row["first_name"],
        last_name=row["last_name"],
        country=row["country"],
        gender=row["gender"],
        age=row["age"],
        weight_kg=weight_kg,
        height_cm=height_cm,
    )


def parse_players(text: str, *, strict: bool = True) -> list[Player]:
    """Return the roster rows of ``players.csv`` with metric weight and height."""

    return _collect(_iter_data_lines(text), parse_player_row, strict=strict)


def split_game_line(line: str) -> tuple[str, list[str], list[Number]]:
    """Split a game row into ``(winning_team, player_ids, points)``.

    Player identifiers are returned in the string form of their numeric value
    so they can be matched against ``Player.player_id``.
    """

    match = GAME_LINE_PATTERN.match(line.strip())
    if not match:
        raise MalformedRowError(f"game row does not match team,[ids],[points]: {line!r}")
    player_ids = [_player_id(value) for value in _parse_number_list(match.group("players"))]
    points = _parse_number_list(match.group("points"))
    return match.group("team"), player_ids, points


def parse_game_row(line: str, line_number: int | None = None) -> Game:
    try:
        team, player_ids, points = split_game_line(line)
    except NonNumericInputError as exc:
        raise NonNumericInputError(str(exc), line_number=line_number) from exc
    except MalformedRowError as exc:
        raise MalformedRowError(str(exc), line_number=line_number) from exc
    if len(player_ids) != len(points):
        raise MalformedRowError(
            f"{len(player_ids)} player ids but {len(points)} point totals",
            line_number=line_number,
        )
    entries = tuple(
        PlayerPoints(player_id=player_id, points=value)
        for player_id, value in zip(player_ids, points)
    )
    return Game(winning_team=team, entries=entries)


def parse_games(text: str, *, strict: bool = True) -> list[Game]:
    """Return the rows of ``games.csv`` in file order."""

    return _collect(_iter_data_lines(text), parse_game_row, strict=strict)


def format_game_line(game: Game) -> str:
    """Render ``game`` back into the ``team,[ids],[points]`` row form.

    Numbers are written in their canonical form, so the source text is only
    reproduced for rows whose tokens are already canonical (``2.50`` comes
    back as ``2.5``, ``07`` as ``7``).
    """

    player_ids = ",".join(game.player_ids)
    points = ",".join(str(value) for value in game.points)
    return f"{game.winning_team},[{player_ids}],[{points}]"


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise MissingFileError(f"{path} is missing; cannot build the stats report.") from exc


def load_players(path: Path, *, strict: bool = True) -> list[Player]:
    return parse_players(_read_text(path), strict=strict)


def load_games(path: Path, *, strict: bool = True) -> list[Game]:
    return parse_games(_read_text(path), strict=strict)
