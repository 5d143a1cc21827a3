from typing import Optional

from models.game import Game
from models.player import Player

from .config import ScoringConfig
from .handicap import strokes_received


def net_score(gross: Optional[int], strokes: int) -> Optional[int]:
    """Gross minus strokes received; None while the hole is not recorded."""
    if gross is None:
        return None
    return gross - strokes


def gross_from_net(net: int, strokes: int) -> int:
    return net + strokes


def hole_strokes(game: Game, player: Player, hole_number: int, config: ScoringConfig) -> Optional[int]:
    """Strokes the player receives on a hole; None when the game has no course."""
    if game.course is None:
        return None
    hole = game.course.get_hole(hole_number)
    rank = hole.handicap if hole else None
    return strokes_received(player.handicap, rank, config.handicap_allowance)


def net_score_for_hole(game: Game, player: Player, hole_number: int, config: ScoringConfig) -> Optional[int]:
    strokes = hole_strokes(game, player, hole_number, config)
    if strokes is None:
        return None
    return net_score(game.get_score(player.id, hole_number), strokes)
