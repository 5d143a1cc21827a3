from __future__ import annotations

from statistics import mean
from typing import Callable, Iterable, List, Optional

from pydantic import Field

from models.base import BaseGolfModel, round_half_away
from models.game import ALL_HOLES, Game
from models.player import Player

from .config import ScoringConfig
from .formats import Team
from .net import hole_strokes, net_score_for_hole
from .stableford import stableford_points_for_hole


class Standing(BaseGolfModel):
    """One line of a leaderboard: a player or a team."""
    rank: int = 0
    name: str
    player_ids: List[str] = Field(default_factory=list)
    gross: Optional[int] = None
    net: Optional[int] = None
    points: Optional[int] = None
    holes_played: int = 0
    handicap: Optional[float] = None


def _sum_defined(values: Iterable[Optional[int]]) -> Optional[int]:
    present = [v for v in values if v is not None]
    return sum(present) if present else None


def ordered_players(game: Game, config: ScoringConfig) -> List[Player]:
    """Roster order with the current user moved to the front."""
    current_id = config.current_player_id
    if current_id is None and game.current_player is not None:
        current_id = game.current_player.id
    first = [p for p in game.players if p.id == current_id]
    rest = [p for p in game.players if p.id != current_id]
    return first + rest


def rank_standings(
    standings: List[Standing],
    value: Callable[[Standing], Optional[float]],
    descending: bool = False,
) -> List[Standing]:
    """
    Sort and number standings with competition ranking (1, 2, 2, 4).

    Sorting is stable, so tied entries keep their incoming order. Entries
    without a value go last and share the final rank.
    """
    present = [s for s in standings if value(s) is not None]
    missing = [s for s in standings if value(s) is None]
    present.sort(key=value, reverse=descending)

    previous = None
    for index, standing in enumerate(present, start=1):
        current = value(standing)
        standing.rank = present[index - 2].rank if index > 1 and current == previous else index
        previous = current
    for standing in missing:
        standing.rank = len(present) + 1
    return present + missing


def _net_or_gross(standing: Standing) -> Optional[int]:
    return standing.net if standing.net is not None else standing.gross


# ================================================================
# Individual formats
# ================================================================

def player_standing(game: Game, player: Player, config: ScoringConfig, holes=ALL_HOLES) -> Standing:
    """Gross, net and points for one player over the holes they have recorded."""
    holes = list(holes)
    recorded = [h for h in holes if game.get_score(player.id, h) is not None]
    return Standing(
        name=player.name,
        player_ids=[player.id],
        gross=_sum_defined(game.get_score(player.id, h) for h in recorded),
        net=_sum_defined(net_score_for_hole(game, player, h, config) for h in recorded),
        points=_sum_defined(stableford_points_for_hole(game, player, h, config) for h in recorded),
        holes_played=len(recorded),
        handicap=player.handicap,
    )


def stroke_play_standings(game: Game, config: ScoringConfig, holes=ALL_HOLES) -> List[Standing]:
    """Rank players by net total, lowest first. Pass FRONT_NINE or BACK_NINE for a nine."""
    standings = [player_standing(game, p, config, holes) for p in ordered_players(game, config)]
    return rank_standings(standings, _net_or_gross)


def stableford_standings(game: Game, config: ScoringConfig, holes=ALL_HOLES) -> List[Standing]:
    """Rank players by Stableford points, highest first."""
    standings = [player_standing(game, p, config, holes) for p in ordered_players(game, config)]
    return rank_standings(standings, lambda s: s.points, descending=True)


# ================================================================
# Team formats
# ================================================================

def _members(game: Game, team: Team) -> List[Player]:
    return [p for p in (game.get_player(i) for i in team.player_ids) if p is not None]


def team_stableford_hole_points(game: Game, team: Team, hole_number: int, config: ScoringConfig) -> Optional[int]:
    """Sum of points of the members who have a score on the hole; None if nobody does."""
    return _sum_defined(
        stableford_points_for_hole(game, p, hole_number, config) for p in _members(game, team)
    )


def team_stableford_standings(game: Game, teams: Iterable[Team], config: ScoringConfig) -> List[Standing]:
    standings = []
    for team in teams:
        per_hole = [team_stableford_hole_points(game, team, h, config) for h in ALL_HOLES]
        standings.append(Standing(
            name=team.name,
            player_ids=list(team.player_ids),
            points=_sum_defined(per_hole),
            holes_played=sum(1 for p in per_hole if p is not None),
            handicap=team_handicap(game, team),
        ))
    return rank_standings(standings, lambda s: s.points, descending=True)


def best_ball_net(game: Game, team: Team, hole_number: int, config: ScoringConfig) -> Optional[int]:
    """Lowest member net score on the hole, None if no member has a score."""
    nets = [net_score_for_hole(game, p, hole_number, config) for p in _members(game, team)]
    nets = [n for n in nets if n is not None]
    return min(nets) if nets else None


def best_ball_gross(game: Game, team: Team, hole_number: int) -> Optional[int]:
    scores = [game.get_score(i, hole_number) for i in team.player_ids]
    scores = [s for s in scores if s is not None]
    return min(scores) if scores else None


def best_ball_standings(game: Game, teams: Iterable[Team], config: ScoringConfig, holes=ALL_HOLES) -> List[Standing]:
    """Rank teams by total best-ball net, lowest first."""
    holes = list(holes)
    standings = []
    for team in teams:
        gross = [best_ball_gross(game, team, h) for h in holes]
        standings.append(Standing(
            name=team.name,
            player_ids=list(team.player_ids),
            gross=_sum_defined(gross),
            net=_sum_defined(best_ball_net(game, team, h, config) for h in holes),
            holes_played=sum(1 for g in gross if g is not None),
            handicap=team_handicap(game, team),
        ))
    return rank_standings(standings, _net_or_gross)


def team_handicap(game: Game, team: Team) -> Optional[float]:
    """Mean handicap index of the team members."""
    members = _members(game, team)
    if not members:
        return None
    return mean(p.handicap for p in members)


def scramble_gross(game: Game, team: Team, hole_number: int) -> Optional[int]:
    """The team score, kept under the first listed member."""
    return game.get_score(team.player_ids[0], hole_number)


def scramble_net(game: Game, team: Team, hole_number: int, config: ScoringConfig) -> Optional[int]:
    """Team gross less the members' average strokes on the hole, rounded."""
    gross = scramble_gross(game, team, hole_number)
    if gross is None:
        return None
    strokes = [hole_strokes(game, p, hole_number, config) for p in _members(game, team)]
    if not strokes or any(s is None for s in strokes):
        return None
    return round_half_away(gross - mean(strokes))


def scramble_standings(game: Game, teams: Iterable[Team], config: ScoringConfig, holes=ALL_HOLES) -> List[Standing]:
    holes = list(holes)
    standings = []
    for team in teams:
        gross = [scramble_gross(game, team, h) for h in holes]
        standings.append(Standing(
            name=team.name,
            player_ids=list(team.player_ids),
            gross=_sum_defined(gross),
            net=_sum_defined(scramble_net(game, team, h, config) for h in holes),
            holes_played=sum(1 for g in gross if g is not None),
            handicap=team_handicap(game, team),
        ))
    return rank_standings(standings, _net_or_gross)
