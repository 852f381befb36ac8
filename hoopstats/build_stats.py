#!/usr/bin/env python3
"""Build ``stats.txt`` from the ``players.csv`` roster and ``games.csv`` results."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from hoopstats.errors import StatsError
from hoopstats.queries import DEFAULT_CONFIG, StatsConfig, answer_questions
from hoopstats.records import load_games, load_players
from hoopstats.report import write_report

DEFAULT_PLAYERS_PATH = Path("players.csv")
DEFAULT_GAMES_PATH = Path("games.csv")
DEFAULT_OUTPUT_PATH = Path("stats.txt")


def build_stats(
    players_path: Path,
    games_path: Path,
    output_path: Path,
    *,
    config: StatsConfig = DEFAULT_CONFIG,
    strict: bool = True,
) -> None:
    players = load_players(players_path, strict=strict)
    games = load_games(games_path, strict=strict)
    print(f"Loaded {len(players)} players and {len(games)} games", file=sys.stderr)

    answers = answer_questions(players, games, config)
    write_report(output_path, answers, config)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--players",
        type=Path,
        default=DEFAULT_PLAYERS_PATH,
        help="Roster CSV (default: %(default)s)",
    )
    parser.add_argument(
        "--games",
        type=Path,
        default=DEFAULT_GAMES_PATH,
        help="Game results CSV (default: %(default)s)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=DEFAULT_OUTPUT_PATH,
        help="Report file to write (default: %(default)s)",
    )
    parser.add_argument(
        "--skip-malformed",
        action="store_true",
        help="Warn about and skip malformed rows instead of aborting.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    try:
        build_stats(args.players, args.games, args.output, strict=not args.skip_malformed)
    except StatsError as exc:
        raise SystemExit(str(exc)) from exc
    print(f"Wrote stats report to {args.output}")


if __name__ == "__main__":  # pragma: no cover
    main()
