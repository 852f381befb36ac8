"""Render query answers and write them to ``stats.txt``."""

from __future__ import annotations

import io
import math
from pathlib import Path
from typing import Iterable

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from hoopstats.queries import DEFAULT_CONFIG, StatsAnswers, StatsConfig, TopScorer
from hoopstats.records import Number, Player

TABLE_WIDTH = 100


def format_number(value: Number) -> str:
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if value.is_integer():
            return str(int(value))
        return f"{value:.2f}".rstrip("0").rstrip(".")
    return str(value)


def format_heaviest_table(players: Iterable[Player]) -> str:
    headers = ("Name", "Country", "Weight")
    rows = [
        (player.full_name, player.country, format_number(player.weight_kg))
        for player in players
    ]

    table = Table(box=box.SQUARE, show_lines=True)
    table.add_column(headers[0], no_wrap=True)
    table.add_column(headers[1], no_wrap=True)
    table.add_column(headers[2], justify="right", no_wrap=True)
    for row in rows:
        table.add_row(*(Text(cell) for cell in row))

    # One border plus a space of padding on each side per column.
    column_widths = [max(len(cell) for cell in column) for column in zip(headers, *rows)]
    needed = sum(column_widths) + 3 * len(column_widths) + 1

    buffer = io.StringIO()
    console = Console(
        file=buffer,
        width=max(TABLE_WIDTH, needed),
        color_system=None,
        force_terminal=False,
        emoji=False,
        highlight=False,
    )
    console.print(table)
    return buffer.getvalue()


def format_heaviest_section(players: Iterable[Player]) -> str:
    return f"Q1: \n{format_heaviest_table(players)}"


def format_tallest_section(player: Player, country: str) -> str:
    return (
        "\nQ2: TALLEST PLAYER:\n"
        f"The tallest female basketball player from {country} is {player.full_name}, "
        f"{format_number(player.height_cm)}cm tall.\n"
    )


def format_high_scoring_section(count: int, country: str, threshold: Number) -> str:
    label = f"GAMES WHERE {country.upper()} SCORED OVER {format_number(threshold)} POINTS"
    return f"\nQ3: {label}\n {count} \n"


def format_top_scorer_section(top_scorer: TopScorer, demonym: str) -> str:
    return (
        f"\nQ4: HIGHEST SCORING MALE {demonym.upper()} PLAYER:\n"
        f"{top_scorer.player.full_name} with {format_number(top_scorer.total_points)} points total.\n"
    )


def write_section(path: Path, content: str, *, append: bool) -> None:
    mode = "a" if append else "w"
    with path.open(mode, encoding="utf-8") as handle:
        handle.write(content)


def write_report(path: Path, answers: StatsAnswers, config: StatsConfig = DEFAULT_CONFIG) -> None:
    """Write Q1 over any existing report, then append Q2 to Q4 in order."""

    write_section(path, format_heaviest_section(answers.heaviest_males), append=False)
    sections = (
        format_tallest_section(answers.tallest_female, config.tallest_country),
        format_high_scoring_section(
            answers.high_scoring_wins, config.high_scoring_country, config.points_threshold
        ),
        format_top_scorer_section(answers.top_scorer, config.top_scorer_demonym),
    )
    for content in sections:
        write_section(path, content, append=True)
