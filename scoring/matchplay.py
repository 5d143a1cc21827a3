from __future__ import annotations

from typing import Optional, Sequence, Tuple

from models.base import BaseGolfModel
from models.game import ALL_HOLES, BACK_NINE, FRONT_NINE, Game

from .config import ScoringConfig
from .formats import Team
from .standings import best_ball_net


class TeamMatchRecord(BaseGolfModel):
    """Holes won, lost and halved by one side."""
    name: str
    won: int = 0
    lost: int = 0
    halved: int = 0


class MatchResult(BaseGolfModel):
    """State of a best-ball net match over a run of holes."""
    label: str = "Overall"
    teams: Tuple[TeamMatchRecord, TeamMatchRecord]
    holes_in_match: int = 18
    holes_played: int = 0
    leader: Optional[str] = None
    margin: int = 0

    @property
    def holes_remaining(self) -> int:
        return self.holes_in_match - self.holes_played

    @property
    def is_decided(self) -> bool:
        """True once the leader cannot be caught, or every hole is played."""
        return self.margin > self.holes_remaining or self.holes_remaining == 0

    @property
    def status(self) -> str:
        remaining = self.holes_remaining
        if self.leader is None:
            if remaining > 0:
                return f"All square with {remaining} to play"
            return "Match halved"
        if remaining > 0 and self.margin <= remaining:
            return f"{self.leader} {self.margin} up with {remaining} to play"
        return f"{self.leader} wins {self.margin} up"


class NassauResult(BaseGolfModel):
    """Three separate matches: front nine, back nine and the full eighteen."""
    front: MatchResult
    back: MatchResult
    overall: MatchResult


def hole_winner(game: Game, teams: Tuple[Team, Team], hole_number: int, config: ScoringConfig) -> Optional[Team]:
    """Team with the lower best-ball net, or None for a halved or unplayed hole."""
    first, second = teams
    first_net = best_ball_net(game, first, hole_number, config)
    second_net = best_ball_net(game, second, hole_number, config)
    if first_net is None or second_net is None or first_net == second_net:
        return None
    return first if first_net < second_net else second


def match_result(
    game: Game,
    teams: Tuple[Team, Team],
    config: ScoringConfig,
    holes: Sequence[int] = ALL_HOLES,
    label: str = "Overall",
) -> MatchResult:
    """
    Play out the match hole by hole.

    Only holes where both sides have a best-ball net count; the rest stay
    in the holes remaining.
    """
    first, second = teams
    records = (TeamMatchRecord(name=first.name), TeamMatchRecord(name=second.name))
    played = 0
    for hole_number in holes:
        first_net = best_ball_net(game, first, hole_number, config)
        second_net = best_ball_net(game, second, hole_number, config)
        if first_net is None or second_net is None:
            continue
        played += 1
        if first_net < second_net:
            records[0].won += 1
            records[1].lost += 1
        elif second_net < first_net:
            records[1].won += 1
            records[0].lost += 1
        else:
            records[0].halved += 1
            records[1].halved += 1

    diff = records[0].won - records[1].won
    leader = None
    if diff > 0:
        leader = first.name
    elif diff < 0:
        leader = second.name
    return MatchResult(
        label=label,
        teams=records,
        holes_in_match=len(holes),
        holes_played=played,
        leader=leader,
        margin=abs(diff),
    )


def nassau_result(game: Game, teams: Tuple[Team, Team], config: ScoringConfig) -> NassauResult:
    return NassauResult(
        front=match_result(game, teams, config, FRONT_NINE, "Front 9"),
        back=match_result(game, teams, config, BACK_NINE, "Back 9"),
        overall=match_result(game, teams, config, ALL_HOLES, "Overall"),
    )
