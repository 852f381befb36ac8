"""Answer the fixed roster and results questions behind ``stats.txt``."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Iterable, Sequence

from hoopstats.errors import EmptyResultSetError
from hoopstats.records import Game, Number, Player

MALE = "M"
FEMALE = "F"


@dataclass(frozen=True)
class StatsConfig:
    top_n: int = 5
    male_code: str = MALE
    female_code: str = FEMALE
    tallest_country: str = "China"
    high_scoring_country: str = "China"
    points_threshold: Number = 50
    top_scorer_country: str = "Canada"
    top_scorer_demonym: str = "Canadian"


DEFAULT_CONFIG = StatsConfig()


@dataclass(frozen=True)
class TopScorer:
    player: Player
    total_points: Number


@dataclass(frozen=True)
class StatsAnswers:
    heaviest_males: list[Player]
    tallest_female: Player
    high_scoring_wins: int
    top_scorer: TopScorer


def games_won_by(games: Iterable[Game], country: str) -> list[Game]:
    return [game for game in games if game.winning_team == country]


def top_heaviest_males(
    players: Iterable[Player],
    *,
    limit: int = 5,
    male_code: str = MALE,
) -> list[Player]:
    """Return up to ``limit`` male players ordered by weight, heaviest first.

    ``sorted`` is stable, so players with equal weights keep their roster order.
    """

    males = [player for player in players if player.gender == male_code]
    males = sorted(males, key=lambda player: player.weight_kg, reverse=True)
    return males[:limit]


def tallest_female(
    players: Iterable[Player],
    country: str,
    *,
    female_code: str = FEMALE,
) -> Player:
    candidates = [
        player
        for player in players
        if player.country == country and player.gender == female_code
    ]
    if not candidates:
        raise EmptyResultSetError(f"no matching player found: no female players from {country}")
    # max() keeps the first of several equally tall players.
    return max(candidates, key=lambda player: player.height_cm)


def count_high_scoring_wins(games: Iterable[Game], country: str, threshold: Number = 50) -> int:
    """Count the games ``country`` won while scoring more than ``threshold`` points."""

    return sum(1 for game in games_won_by(games, country) if game.total_points > threshold)


def accumulate_points(games: Iterable[Game], country: str) -> dict[str, Number]:
    """Total each player's points across every game won by ``country``."""

    totals: dict[str, Number] = defaultdict(int)
    for game in games_won_by(games, country):
        for entry in game.entries:
            totals[entry.player_id] += entry.points
    return dict(totals)


def top_scoring_male(
    players: Sequence[Player],
    games: Iterable[Game],
    country: str,
    *,
    male_code: str = MALE,
) -> TopScorer:
    """Return the male player with the most points across ``country``'s wins.

    Players are scanned in roster order and only a strictly greater total
    replaces the current leader, so ties go to the earlier player.
    """

    totals = accumulate_points(games, country)
    leader: Player | None = None
    best: Number = 0
    for player in players:
        if player.gender != male_code:
            continue
        total = totals.get(player.player_id, 0)
        if total > best:
            best = total
            leader = player
    if leader is None:
        raise EmptyResultSetError(
            f"no matching player found: no male player scored in {country} wins"
        )
    return TopScorer(player=leader, total_points=best)


def answer_questions(
    players: Sequence[Player],
    games: Sequence[Game],
    config: StatsConfig = DEFAULT_CONFIG,
) -> StatsAnswers:
    return StatsAnswers(
        heaviest_males=top_heaviest_males(
            players, limit=config.top_n, male_code=config.male_code
        ),
        tallest_female=tallest_female(
            players, config.tallest_country, female_code=config.female_code
        ),
        high_scoring_wins=count_high_scoring_wins(
            games, config.high_scoring_country, config.points_threshold
        ),
        top_scorer=top_scoring_male(
            players, games, config.top_scorer_country, male_code=config.male_code
        ),
    )
