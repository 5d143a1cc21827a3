"""Carry inference over each player's shot sequence on a hole.

Each shot records how far from the hole the ball finished. How far a shot
went is the drop in remaining distance to the next shot, so the carry of a
shot is only known once the following shot exists:

    shot 1  remaining 150  ->  carry 150 - 20 = 130
    shot 2  remaining  20  ->  carry 20 - (-3) = 23   (next putt measured 9 ft long)
    shot 3  putt 9 ft long ->  no carry yet

Every add, edit or removal refreshes the touched shot and its predecessor
before returning, so callers never see a shot without its neighbour updated.
"""

from __future__ import annotations

import bisect
import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple

from models.base import round_half_away
from models.game import Game
from models.shot import Shot, feet_to_yards
from scoring.exceptions import DuplicateShotError, ShotChainError, ShotNotFoundError

logger = logging.getLogger(__name__)

ChainKey = Tuple[str, int]

# Fields that place a shot in its sequence; edits may not move a shot.
_KEY_FIELDS = frozenset({"id", "player_id", "hole_number", "shot_number"})


def carry_between(earlier: Shot, later: Shot) -> Optional[int]:
    """Yards the earlier shot travelled, judged from the later shot's reading."""
    start = earlier.distance_to_hole
    end = later.effective_remaining()
    if start is None or end is None:
        return None
    return round_half_away(start - end)


def _normalize_putt(shot: Shot) -> None:
    if shot.is_putt and shot.putt_length_feet is not None:
        shot.distance_to_hole = feet_to_yards(shot.putt_length_feet)
    elif not shot.is_putt and shot.putt_length_feet is not None:
        shot.putt_length_feet = None


class ShotChain:
    """
    Index of a game's shots by (player, hole), ordered by shot number.

    The chain writes through to the list it was built from, so a game's
    `shots` stays the owner of every record.
    """

    def __init__(self, shots: List[Shot]):
        self._shots = shots
        self._sequences: Dict[ChainKey, List[Shot]] = {}
        for shot in shots:
            self._sequences.setdefault(shot.key, []).append(shot)
        for key, sequence in self._sequences.items():
            sequence.sort(key=lambda s: s.shot_number)
            numbers = [s.shot_number for s in sequence]
            if len(set(numbers)) != len(numbers):
                raise DuplicateShotError(f"Duplicate shot numbers for player {key[0]} on hole {key[1]}")

    @classmethod
    def for_game(cls, game: Game) -> "ShotChain":
        return cls(game.shots)

    def __len__(self) -> int:
        return len(self._shots)

    def keys(self) -> Iterable[ChainKey]:
        return list(self._sequences)

    def sequence(self, player_id: str, hole_number: int) -> List[Shot]:
        """Shots for one player on one hole, in shot order."""
        return list(self._sequences.get((player_id, hole_number), []))

    def next_shot_number(self, player_id: str, hole_number: int) -> int:
        sequence = self._sequences.get((player_id, hole_number))
        return sequence[-1].shot_number + 1 if sequence else 1

    # ---- mutation -----------------------------------------------------

    def add_shot(self, shot: Shot) -> Shot:
        """Insert a shot and refresh its own carry and its predecessor's."""
        sequence = self._sequences.setdefault(shot.key, [])
        numbers = [s.shot_number for s in sequence]
        if shot.shot_number in numbers:
            raise DuplicateShotError(
                f"Shot {shot.shot_number} already recorded for player {shot.player_id} "
                f"on hole {shot.hole_number}"
            )
        _normalize_putt(shot)
        index = bisect.bisect_left(numbers, shot.shot_number)
        sequence.insert(index, shot)
        self._shots.append(shot)
        self._refresh_around(sequence, index)
        logger.debug("Added shot %s for %s on hole %s", shot.shot_number, shot.player_id, shot.hole_number)
        return shot

    def edit_shot(self, shot: Shot, **changes: Any) -> Shot:
        """
        Apply edits (club, result, putt length, bias, distance...) to a shot.

        All changes are validated before any is applied. Raises
        ValidationError for bad values and ShotChainError for attempts to
        move the shot to another player, hole or number.
        """
        sequence, index = self._locate(shot)
        unknown = set(changes) - set(Shot.model_fields)
        if unknown:
            raise ShotChainError(f"Unknown shot fields: {sorted(unknown)}")
        moved = _KEY_FIELDS.intersection(changes)
        if moved:
            raise ShotChainError(f"Cannot change {sorted(moved)} of a recorded shot; remove and add it instead")

        if "distance_to_hole" in changes and "putt_length_feet" not in changes:
            # A typed yardage replaces the feet reading it was derived from
            changes["putt_length_feet"] = None
        Shot.model_validate({**shot.model_dump(), **changes})
        for name, value in changes.items():
            setattr(shot, name, value)
        _normalize_putt(shot)
        self._refresh_around(sequence, index)
        logger.debug("Edited shot %s for %s on hole %s: %s",
                     shot.shot_number, shot.player_id, shot.hole_number, sorted(changes))
        return shot

    def remove_shot(self, shot: Shot) -> None:
        """Drop a shot; the previous shot is re-paired with whatever now follows it."""
        sequence, index = self._locate(shot)
        del sequence[index]
        for position, owned in enumerate(self._shots):
            if owned is shot:
                del self._shots[position]
                break
        if not sequence:
            del self._sequences[shot.key]
        elif index > 0:
            self._refresh(sequence, index - 1)
        logger.debug("Removed shot %s for %s on hole %s", shot.shot_number, shot.player_id, shot.hole_number)

    def recompute(self, player_id: str, hole_number: int) -> List[Shot]:
        """Refresh every carry in one sequence."""
        sequence = self._sequences.get((player_id, hole_number), [])
        for index in range(len(sequence)):
            self._refresh(sequence, index)
        return list(sequence)

    def recompute_all(self) -> None:
        for player_id, hole_number in self.keys():
            self.recompute(player_id, hole_number)

    # ---- internals ----------------------------------------------------

    def _locate(self, shot: Shot) -> Tuple[List[Shot], int]:
        sequence = self._sequences.get(shot.key, [])
        for index, candidate in enumerate(sequence):
            if candidate is shot:
                return sequence, index
        raise ShotNotFoundError(
            f"Shot {shot.shot_number} for player {shot.player_id} on hole {shot.hole_number} is not in this chain"
        )

    def _refresh(self, sequence: List[Shot], index: int) -> None:
        shot = sequence[index]
        if index + 1 < len(sequence):
            shot.distance_traveled = carry_between(shot, sequence[index + 1])
        else:
            shot.distance_traveled = None

    def _refresh_around(self, sequence: List[Shot], index: int) -> None:
        if index > 0:
            self._refresh(sequence, index - 1)
        self._refresh(sequence, index)


def record_shot(game: Game, shot: Shot) -> Shot:
    """Add a shot to a game, refreshing neighbour carries."""
    if game.get_player(shot.player_id) is None:
        raise ShotChainError(f"Player '{shot.player_id}' is not in this game")
    return ShotChain.for_game(game).add_shot(shot)
