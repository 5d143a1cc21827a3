from datetime import datetime

import pytest

from analytics.stats import (
    club_statistics,
    overall_shot_stats,
    round_summary,
    score_type_distribution,
    scoring_vs_hole_rank,
)
from models import Course, Game, Hole, Player, Shot
from scoring.config import ScoringConfig


def _build_course() -> Course:
    holes = []
    for i in range(1, 19):
        if i <= 4:
            par = 3
        elif i <= 14:
            par = 4
        else:
            par = 5
        holes.append(Hole(number=i, par=par, handicap=i))
    return Course(id="course-1", name="Demo Course", holes=holes)


def _build_games():
    course = _build_course()
    player = Player(id="p1", name="Ann", handicap=9.0)   # a stroke on holes 1-9

    game_1 = Game(id="g1", course=course, players=[player], date=datetime(2026, 2, 1))
    for i in range(1, 19):
        game_1.set_score("p1", i, 5)

    game_2 = Game(id="g2", course=course, players=[player], date=datetime(2026, 2, 2))
    for i in range(1, 10):
        game_2.set_score("p1", i, 4)
    return [game_1, game_2]


def test_round_summary():
    summary = round_summary(_build_games()[0], "p1")

    assert summary["holes_played"] == 18
    assert summary["gross"] == 90
    assert summary["net"] == 81
    assert summary["gross_to_par"] == 18
    assert summary["net_to_par"] == 9
    assert summary["front_nine"] == 45
    assert summary["back_nine"] == 45
    # holes 1-4 par 3 net 4: 1 pt; 5-9 par 4 net 4: 2; 10-14 par 4 gross 5: 1; 15-18 par 5: 2
    assert summary["points"] == 4 * 1 + 5 * 2 + 5 * 1 + 4 * 2


def test_round_summary_partial_round():
    summary = round_summary(_build_games()[1], "p1")
    assert summary["holes_played"] == 9
    assert summary["gross"] == 36
    assert summary["net"] == 27
    assert summary["gross_to_par"] == 36 - 32
    assert summary["back_nine"] is None


def test_round_summary_unknown_player():
    with pytest.raises(KeyError):
        round_summary(_build_games()[0], "nobody")


def test_scoring_vs_hole_rank():
    rows = scoring_vs_hole_rank(_build_games(), "p1", ScoringConfig())

    assert len(rows) == 18
    assert rows[0]["rank"] == 1
    # hole 1 (par 3): net 4 and net 3 -> +1 and 0
    assert rows[0]["average_net_to_par"] == pytest.approx(0.5)
    assert rows[0]["average_points"] == pytest.approx(1.5)
    assert rows[0]["sample_size"] == 2

    assert rows[17]["rank"] == 18
    assert rows[17]["sample_size"] == 1
    assert rows[17]["average_net_to_par"] == pytest.approx(0.0)


def test_score_type_distribution():
    row = score_type_distribution(_build_games()[0], "p1")
    assert row["holes_counted"] == 18
    # net bogey on 1-4 and 10-14, net par on 5-9 and 15-18
    assert row["bogey"] == pytest.approx(9 / 18 * 100)
    assert row["par"] == pytest.approx(9 / 18 * 100)
    assert row["birdie"] == 0.0

    empty = score_type_distribution(Game(id="g3"), "p1")
    assert empty["holes_counted"] == 0
    assert empty["par"] == 0.0


def _shots():
    return [
        Shot(player_id="p1", hole_number=1, shot_number=1, club="Driver", distance_traveled=250),
        Shot(player_id="p1", hole_number=2, shot_number=1, club="Driver", distance_traveled=230),
        Shot(player_id="p1", hole_number=1, shot_number=2, club="7 Iron", distance_traveled=150),
        Shot(player_id="p1", hole_number=1, shot_number=3, club="Putter", distance_traveled=-2),
        Shot(player_id="p1", hole_number=1, shot_number=4, club="Putter"),
        Shot(player_id="p2", hole_number=1, shot_number=1, club="Driver", distance_traveled=300),
    ]


def test_club_statistics():
    stats = club_statistics(_shots(), "p1")

    assert set(stats) == {"Driver", "7 Iron"}
    driver = stats["Driver"]
    assert driver.total_shots == 2
    assert driver.average_distance == pytest.approx(240.0)
    assert driver.min_distance == 230
    assert driver.max_distance == 250
    assert stats["7 Iron"].distances == [150]


def test_overall_shot_stats():
    stats = overall_shot_stats(_shots(), "p1")
    assert stats["total_shots"] == 4
    assert stats["total_distance"] == 628
    assert stats["average_distance"] == pytest.approx(157.0)

    assert overall_shot_stats([], "p1")["average_distance"] == 0.0
