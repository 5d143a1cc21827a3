from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import Field

from models.base import BaseGolfModel
from models.game import ALL_HOLES, Game

from .config import ScoringConfig
from .formats import Skins
from .net import net_score_for_hole
from .standings import Standing, ordered_players, rank_standings


class SkinHole(BaseGolfModel):
    """Outcome of one hole in a skins game."""
    hole_number: int
    decided: bool = False  # every player has a score on the hole
    winner_id: Optional[str] = None
    skins: int = 0  # skins won here, including carried ones
    carried: bool = False  # tied and passed on to the next decided hole


class SkinsResult(BaseGolfModel):
    holes: List[SkinHole] = Field(default_factory=list)
    skins_per_player: Dict[str, int] = Field(default_factory=dict)
    carried_over: int = 0  # skins still unclaimed after the last decided hole
    total_pot: Optional[float] = None
    value_per_skin: Optional[float] = None
    payouts: Dict[str, float] = Field(default_factory=dict)
    standings: List[Standing] = Field(default_factory=list)

    def winner_for_hole(self, hole_number: int) -> Optional[str]:
        for hole in self.holes:
            if hole.hole_number == hole_number:
                return hole.winner_id
        return None


def skins_result(game: Game, variant: Skins, config: ScoringConfig) -> SkinsResult:
    """
    Award one skin per hole to a unique low net score.

    A hole is only settled once every player has a score on it. Tied holes
    pass their skin to the next settled hole when carryover is on and are
    void otherwise.
    """
    players = ordered_players(game, config)
    won = {p.id: 0 for p in players}
    holes: List[SkinHole] = []
    carry = 0

    for hole_number in ALL_HOLES:
        nets = {p.id: net_score_for_hole(game, p, hole_number, config) for p in players}
        if not players or any(n is None for n in nets.values()):
            holes.append(SkinHole(hole_number=hole_number))
            continue

        low = min(nets.values())
        leaders = [pid for pid, net in nets.items() if net == low]
        if len(leaders) == 1:
            value = 1 + carry
            won[leaders[0]] += value
            holes.append(SkinHole(hole_number=hole_number, decided=True, winner_id=leaders[0], skins=value))
            carry = 0
        else:
            if variant.carryover:
                carry += 1
            holes.append(SkinHole(hole_number=hole_number, decided=True, carried=variant.carryover))

    result = SkinsResult(holes=holes, skins_per_player=won, carried_over=carry)

    if variant.pot_per_player:
        result.total_pot = variant.pot_per_player * len(players)
        total_skins = sum(won.values())
        if total_skins:
            result.value_per_skin = result.total_pot / total_skins
            result.payouts = {pid: count * result.value_per_skin for pid, count in won.items()}

    standings = [
        Standing(name=p.name, player_ids=[p.id], points=won[p.id], handicap=p.handicap,
                 holes_played=len(game.holes_recorded(p.id)))
        for p in players
    ]
    result.standings = rank_standings(standings, lambda s: s.points, descending=True)
    return result
