"""End-to-end tests for the ``stats.txt`` builder."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from hoopstats import build_stats
from hoopstats.errors import SkippedRowWarning

PLAYERS_ROWS = [
    "id,first_name,last_name,country,gender,age,weight,height",
    "1,Yao,Ming,China,M,38,310lbs,7feet6inches",
    "2,Li,Meng,China,F,29,70kg,6feet2inches",
    "3,Han,Xu,China,F,24,95kg,6feet9inches",
    "4,Zach,Edey,Canada,M,22,300lbs,7feet4inches",
    "5,Kia,Nurse,Canada,F,28,65kg,6feet0inches",
    "6,Kelly,Olynyk,Canada,M,33,240lbs,6feet11inches",
]

GAMES_ROWS = [
    "winning_team,players,points",
    "China,[1,2,3],[20,20,15]",
    "China,[1,3],[10,5]",
    "Canada,[4,6,5],[10,30,8]",
    "Canada,[4,6],[25,10]",
]


def _write_inputs(tmp_path: Path, players: list[str], games: list[str]) -> tuple[Path, Path]:
    players_path = tmp_path / "players.csv"
    games_path = tmp_path / "games.csv"
    players_path.write_bytes("\r\n".join(players).encode("utf-8"))
    games_path.write_bytes("\r\n".join(games).encode("utf-8"))
    return players_path, games_path


def _argv(players_path: Path, games_path: Path, output: Path, *extra: str) -> list[str]:
    return [
        "--players",
        str(players_path),
        "--games",
        str(games_path),
        "--output",
        str(output),
        *extra,
    ]


def test_main_writes_every_section(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    players_path, games_path = _write_inputs(tmp_path, PLAYERS_ROWS, GAMES_ROWS)
    output = tmp_path / "stats.txt"

    build_stats.main(_argv(players_path, games_path, output))

    content = output.read_text(encoding="utf-8")
    assert content.startswith("Q1: \n")
    assert content.index("Yao Ming") < content.index("Zach Edey") < content.index("Kelly Olynyk")
    assert "Han Xu, 205.74cm tall." in content
    assert "\nQ3: GAMES WHERE CHINA SCORED OVER 50 POINTS\n 1 \n" in content
    assert "Kelly Olynyk with 40 points total." in content
    assert "Wrote stats report to" in capsys.readouterr().out


def test_main_reports_missing_input(tmp_path: Path) -> None:
    _, games_path = _write_inputs(tmp_path, PLAYERS_ROWS, GAMES_ROWS)
    output = tmp_path / "stats.txt"

    with pytest.raises(SystemExit, match="missing"):
        build_stats.main(_argv(tmp_path / "absent.csv", games_path, output))
    assert not output.exists()


def test_main_fails_before_writing_on_empty_result(tmp_path: Path) -> None:
    players = [row for row in PLAYERS_ROWS if ",China,F," not in row]
    players_path, games_path = _write_inputs(tmp_path, players, GAMES_ROWS)
    output = tmp_path / "stats.txt"

    with pytest.raises(SystemExit, match="no matching player found"):
        build_stats.main(_argv(players_path, games_path, output))
    assert not output.exists()


def test_main_aborts_on_malformed_row(tmp_path: Path) -> None:
    players_path, games_path = _write_inputs(tmp_path, PLAYERS_ROWS, GAMES_ROWS + ["Canada,[4"])
    output = tmp_path / "stats.txt"

    with pytest.raises(SystemExit, match="line 6"):
        build_stats.main(_argv(players_path, games_path, output))


def test_main_can_skip_malformed_rows(tmp_path: Path) -> None:
    players_path, games_path = _write_inputs(tmp_path, PLAYERS_ROWS, GAMES_ROWS + ["Canada,[4"])
    output = tmp_path / "stats.txt"

    with pytest.warns(SkippedRowWarning):
        build_stats.main(_argv(players_path, games_path, output, "--skip-malformed"))
    assert "Kelly Olynyk with 40 points total." in output.read_text(encoding="utf-8")
