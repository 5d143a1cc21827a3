import pytest
from pydantic import ValidationError

from models import Course, Game, Hole, Player
from scoring.config import ScoringConfig, StablefordPoints
from scoring.stableford import points_for_net, stableford_points_for_hole


def test_default_points_table():
    table = StablefordPoints()
    assert points_for_net(2, 4, table) == 4    # eagle
    assert points_for_net(2, 5, table) == 5    # double eagle
    assert points_for_net(1, 4, table) == 5    # hole in one on a par 4
    assert points_for_net(1, 5, table) == 5    # four under is still "or better"
    assert points_for_net(3, 5, table) == 4    # eagle
    assert points_for_net(3, 4, table) == 3    # birdie
    assert points_for_net(4, 4, table) == 2    # par
    assert points_for_net(5, 4, table) == 1    # bogey
    assert points_for_net(6, 4, table) == 0    # double bogey
    assert points_for_net(9, 4, table) == 0


def test_missing_net_or_par_gives_no_points():
    table = StablefordPoints()
    assert points_for_net(None, 4, table) is None
    assert points_for_net(4, None, table) is None


@pytest.mark.parametrize("par_points", [0, 2, 3, 7])
def test_net_par_always_scores_par_value(par_points):
    table = StablefordPoints(double_eagle=9, eagle=8, birdie=6, par=par_points, bogey=-1, double_bogey=-3)
    for par in (3, 4, 5, 6):
        assert points_for_net(par, par, table) == par_points


def test_custom_table_and_reset():
    table = StablefordPoints(birdie=4, eagle=6)
    assert points_for_net(3, 4, table) == 4
    table.reset_to_defaults()
    assert table == StablefordPoints()


def test_config_from_env(monkeypatch):
    monkeypatch.setenv("STABLEFORD_POINTS_BIRDIE", "4")
    monkeypatch.setenv("STABLEFORD_POINTS_DOUBLE_BOGEY", "-1")
    monkeypatch.setenv("STABLEFORD_POINTS_PAR", "lots")
    monkeypatch.setenv("HANDICAP_ALLOWANCE", "0.9")

    config = ScoringConfig.from_env(current_player_id="me")
    assert config.stableford.birdie == 4
    assert config.stableford.double_bogey == -1
    assert config.stableford.par == 2          # unparseable value ignored
    assert config.handicap_allowance == pytest.approx(0.9)
    assert config.current_player_id == "me"


@pytest.mark.parametrize("raw", ["1.5", "-0.2", "nan"])
def test_config_from_env_ignores_out_of_range_allowance(monkeypatch, raw):
    monkeypatch.setenv("HANDICAP_ALLOWANCE", raw)
    config = ScoringConfig.from_env()
    assert config.handicap_allowance == 1.0


def test_config_from_env_defaults(monkeypatch):
    for name in ("DOUBLE_EAGLE", "EAGLE", "BIRDIE", "PAR", "BOGEY", "DOUBLE_BOGEY"):
        monkeypatch.delenv(f"STABLEFORD_POINTS_{name}", raising=False)
    monkeypatch.delenv("HANDICAP_ALLOWANCE", raising=False)

    config = ScoringConfig.from_env()
    assert config.stableford == StablefordPoints()
    assert config.handicap_allowance == 1.0
    assert config.current_player_id is None


def test_config_rejects_bad_allowance():
    with pytest.raises(ValidationError):
        ScoringConfig(handicap_allowance=1.5)


def test_points_for_hole_use_net_score():
    holes = [Hole(number=i, par=4, handicap=i) for i in range(1, 19)]
    player = Player(name="Ann", handicap=18.0)
    game = Game(course=Course(holes=holes), players=[player])
    game.set_score(player.id, 1, 5)      # net 4 = par
    game.set_score(player.id, 2, 4)      # net 3 = birdie

    config = ScoringConfig()
    assert stableford_points_for_hole(game, player, 1, config) == 2
    assert stableford_points_for_hole(game, player, 2, config) == 3
    assert stableford_points_for_hole(game, player, 3, config) is None

    # A changed table applies to the next calculation
    config.stableford.birdie = 4
    assert stableford_points_for_hole(game, player, 2, config) == 4


def test_points_for_hole_without_course():
    player = Player(name="Ann")
    game = Game(players=[player])
    game.set_score(player.id, 1, 4)
    assert stableford_points_for_hole(game, player, 1, ScoringConfig()) is None
