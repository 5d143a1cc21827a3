import pytest

from models import Course, Game, GameFormat, Hole, Player
from scoring import ScoringConfig, score_game
from scoring.formats import resolve_format
from scoring.matchplay import MatchResult, NassauResult, TeamMatchRecord, hole_winner, match_result


def _build_game(fmt: GameFormat = GameFormat.BEST_BALL_MATCH_PLAY) -> Game:
    # Scratch players on a flat par-4 course so net == gross
    course = Course(holes=[Hole(number=i, par=4, handicap=i) for i in range(1, 19)])
    players = [Player(id=pid, name=pid.upper()) for pid in ("a", "b", "c", "d")]
    return Game(
        course=course,
        players=players,
        format=fmt,
        team_assignments={"Eagles": ["a", "b"], "Hawks": ["c", "d"]},
    )


def _play(game: Game, hole: int, a: int, b: int, c: int, d: int) -> None:
    for pid, strokes in zip("abcd", (a, b, c, d)):
        game.set_score(pid, hole, strokes)


def test_hole_winner():
    game = _build_game()
    teams = resolve_format(game).teams
    config = ScoringConfig()
    _play(game, 1, 4, 5, 5, 5)
    _play(game, 2, 4, 4, 4, 6)
    game.set_score("a", 3, 3)

    assert hole_winner(game, teams, 1, config).name == "Eagles"
    assert hole_winner(game, teams, 2, config) is None    # halved
    assert hole_winner(game, teams, 3, config) is None    # Hawks have no score


def test_match_in_progress():
    game = _build_game()
    _play(game, 1, 4, 5, 5, 5)    # Eagles win
    _play(game, 2, 4, 4, 4, 6)    # halved
    _play(game, 3, 5, 5, 4, 6)    # Hawks win
    _play(game, 4, 3, 5, 4, 4)    # Eagles win
    game.set_score("a", 5, 3)     # only one side recorded, not played

    result = score_game(game)
    assert isinstance(result, MatchResult)
    eagles, hawks = result.teams
    assert (eagles.won, eagles.lost, eagles.halved) == (2, 1, 1)
    assert (hawks.won, hawks.lost, hawks.halved) == (1, 2, 1)
    assert result.holes_played == 4
    assert result.holes_remaining == 14
    assert result.leader == "Eagles"
    assert result.margin == 1
    assert not result.is_decided
    assert result.status == "Eagles 1 up with 14 to play"


def test_match_all_square_and_halved():
    game = _build_game()
    assert score_game(game).status == "All square with 18 to play"
    for hole in range(1, 19):
        _play(game, hole, 4, 4, 4, 4)
    result = score_game(game)
    assert result.status == "Match halved"
    assert result.is_decided
    assert result.teams[0].halved == 18


def test_match_decided_early():
    game = _build_game()
    for hole in range(1, 11):
        _play(game, hole, 5, 5, 4, 5)    # Hawks win ten straight
    result = score_game(game)
    assert result.leader == "Hawks"
    assert result.margin == 10
    assert result.holes_remaining == 8
    assert result.is_decided
    assert result.status == "Hawks wins 10 up"


def test_match_status_after_final_hole():
    result = MatchResult(
        teams=(TeamMatchRecord(name="Eagles", won=3, lost=1), TeamMatchRecord(name="Hawks", won=1, lost=3)),
        holes_played=18,
        leader="Eagles",
        margin=2,
    )
    assert result.status == "Eagles wins 2 up"


def test_match_uses_net_scores():
    game = _build_game()
    game.players[2].handicap = 18.0    # Hawks' C gets a stroke everywhere
    _play(game, 1, 4, 5, 5, 6)         # C nets 4: halved
    result = match_result(game, resolve_format(game).teams, ScoringConfig())
    assert result.teams[0].halved == 1
    assert result.leader is None


def test_nassau_runs_three_matches():
    game = _build_game(GameFormat.NASSAU)
    for hole in range(1, 10):
        _play(game, hole, 4, 4, 5, 5)       # Eagles sweep the front
    _play(game, 10, 5, 5, 4, 4)
    _play(game, 11, 5, 5, 4, 4)             # Hawks 2 up on the back

    result = score_game(game)
    assert isinstance(result, NassauResult)

    assert result.front.label == "Front 9"
    assert result.front.leader == "Eagles"
    assert result.front.margin == 9
    assert result.front.holes_remaining == 0
    assert result.front.status == "Eagles wins 9 up"

    assert result.back.leader == "Hawks"
    assert result.back.margin == 2
    assert result.back.status == "Hawks 2 up with 7 to play"

    assert result.overall.leader == "Eagles"
    assert result.overall.margin == 7
    assert result.overall.holes_played == 11
    assert result.overall.status == "Eagles 7 up with 7 to play"


@pytest.mark.parametrize("fmt", [GameFormat.BEST_BALL_MATCH_PLAY, GameFormat.NASSAU])
def test_empty_match(fmt):
    result = score_game(_build_game(fmt))
    match = result if isinstance(result, MatchResult) else result.overall
    assert match.holes_played == 0
    assert match.leader is None
