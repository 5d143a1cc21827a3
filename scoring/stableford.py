from typing import Optional

from models.game import Game
from models.player import Player

from .config import ScoringConfig, StablefordPoints
from .net import net_score_for_hole


def points_for_net(net: Optional[int], par: Optional[int], table: StablefordPoints) -> Optional[int]:
    """Stableford points for a net score on a hole of the given par."""
    if net is None or par is None:
        return None
    return table.points_for(par - net)


def stableford_points_for_hole(game: Game, player: Player, hole_number: int, config: ScoringConfig) -> Optional[int]:
    if game.course is None:
        return None
    hole = game.course.get_hole(hole_number)
    if hole is None:
        return None
    net = net_score_for_hole(game, player, hole_number, config)
    return points_for_net(net, hole.par, config.stableford)
