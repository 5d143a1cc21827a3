from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from pydantic import Field

from models.base import BaseGolfModel
from models.game import ALL_HOLES, BACK_NINE, FRONT_NINE, Game
from models.shot import Shot
from scoring.config import ScoringConfig
from scoring.net import net_score_for_hole
from scoring.stableford import stableford_points_for_hole
from scoring.standings import player_standing

SCORE_TYPE_ORDER = [
    "eagle",
    "birdie",
    "par",
    "bogey",
    "double_bogey",
    "triple_bogey",
    "quad_bogey",
]


class ClubStatistics(BaseGolfModel):
    """Carry distances recorded with one club."""
    club: str
    distances: List[int] = Field(default_factory=list)

    def add_distance(self, distance: int) -> None:
        self.distances = self.distances + [distance]

    @property
    def total_shots(self) -> int:
        return len(self.distances)

    @property
    def average_distance(self) -> float:
        return sum(self.distances) / len(self.distances) if self.distances else 0.0

    @property
    def min_distance(self) -> int:
        return min(self.distances) if self.distances else 0

    @property
    def max_distance(self) -> int:
        return max(self.distances) if self.distances else 0


def club_statistics(shots: Iterable[Shot], player_id: str) -> Dict[str, ClubStatistics]:
    """Group a player's positive carries by club."""
    stats: Dict[str, ClubStatistics] = {}
    for shot in shots:
        if shot.player_id != player_id or not shot.club:
            continue
        if shot.distance_traveled is None or shot.distance_traveled <= 0:
            continue
        stats.setdefault(shot.club, ClubStatistics(club=shot.club)).add_distance(shot.distance_traveled)
    return stats


def overall_shot_stats(shots: Iterable[Shot], player_id: str) -> Dict[str, Any]:
    """Shot count, total and average carry over every shot with a known carry."""
    carries = [
        s.distance_traveled for s in shots
        if s.player_id == player_id and s.distance_traveled is not None
    ]
    total = sum(carries)
    return {
        "total_shots": len(carries),
        "total_distance": total,
        "average_distance": total / len(carries) if carries else 0.0,
    }


def round_summary(game: Game, player_id: str, config: Optional[ScoringConfig] = None) -> Dict[str, Optional[float]]:
    """Compute summary metrics for one player's round."""
    config = config or ScoringConfig()
    player = game.get_player(player_id)
    if player is None:
        raise KeyError(f"Player '{player_id}' is not in game {game.id}")

    totals = player_standing(game, player, config, ALL_HOLES)
    course_par = None
    if game.course:
        pars = [game.course.get_hole(h) for h in game.holes_recorded(player_id)]
        pars = [h.par for h in pars if h is not None and h.par is not None]
        course_par = sum(pars) if pars else None

    return {
        "holes_played": float(totals.holes_played),
        "gross": float(totals.gross) if totals.gross is not None else None,
        "net": float(totals.net) if totals.net is not None else None,
        "points": float(totals.points) if totals.points is not None else None,
        "gross_to_par": float(totals.gross - course_par) if totals.gross is not None and course_par else None,
        "net_to_par": float(totals.net - course_par) if totals.net is not None and course_par else None,
        "front_nine": _as_float(game.calculate_total_score(player_id, FRONT_NINE)),
        "back_nine": _as_float(game.calculate_total_score(player_id, BACK_NINE)),
    }


def _as_float(value: Optional[int]) -> Optional[float]:
    return float(value) if value is not None else None


def scoring_vs_hole_rank(games: Iterable[Game], player_id: str, config: Optional[ScoringConfig] = None) -> List[Dict[str, Any]]:
    """
    Aggregate average net score-to-par by stroke-allocation rank.

    Output rows:
    - rank: 1-18
    - average_net_to_par: mean(net - par)
    - average_points: mean Stableford points
    - sample_size: number of scored holes used
    """
    config = config or ScoringConfig()
    by_rank: Dict[int, List[tuple]] = {}

    for game in games:
        player = game.get_player(player_id)
        if player is None or not game.course:
            continue
        for hole_number in game.holes_recorded(player_id):
            hole = game.course.get_hole(hole_number)
            if not hole or hole.par is None or hole.handicap is None:
                continue
            net = net_score_for_hole(game, player, hole_number, config)
            points = stableford_points_for_hole(game, player, hole_number, config)
            by_rank.setdefault(hole.handicap, []).append((net - hole.par, points))

    results: List[Dict[str, Any]] = []
    for rank in sorted(by_rank):
        values = by_rank[rank]
        results.append(
            {
                "rank": rank,
                "average_net_to_par": sum(v[0] for v in values) / len(values),
                "average_points": sum(v[1] for v in values) / len(values),
                "sample_size": len(values),
            }
        )
    return results


def _score_type_from_to_par(to_par: int) -> str:
    if to_par <= -2:
        return "eagle"
    if to_par == -1:
        return "birdie"
    if to_par == 0:
        return "par"
    if to_par == 1:
        return "bogey"
    if to_par == 2:
        return "double_bogey"
    if to_par == 3:
        return "triple_bogey"
    return "quad_bogey"


def score_type_distribution(game: Game, player_id: str, config: Optional[ScoringConfig] = None) -> Dict[str, Any]:
    """
    Percentage of a player's holes by net score type.

    Eagle includes anything better; anything worse than quad bogey is
    counted as quad_bogey.
    """
    config = config or ScoringConfig()
    counts = {name: 0 for name in SCORE_TYPE_ORDER}
    total = 0
    player = game.get_player(player_id)

    if player is not None and game.course:
        for hole_number in game.holes_recorded(player_id):
            hole = game.course.get_hole(hole_number)
            if not hole or hole.par is None:
                continue
            net = net_score_for_hole(game, player, hole_number, config)
            counts[_score_type_from_to_par(net - hole.par)] += 1
            total += 1

    row: Dict[str, Any] = {"game_id": game.id, "holes_counted": total}
    for name in SCORE_TYPE_ORDER:
        row[name] = (counts[name] / total * 100.0) if total else 0.0
    return row
