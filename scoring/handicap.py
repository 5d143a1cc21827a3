"""Handicap stroke allocation.

The player's handicap index is used directly as course handicap (no
slope/rating conversion), rounded to the nearest whole stroke. Strokes are
handed out by hole rank: rank 1 is the hardest hole and receives extra
strokes first.

    H = 13  -> one stroke on ranks 1-13
    H = 20  -> one stroke everywhere, two on ranks 1-2
    H = -3  -> ranks 16-18 give a stroke back

Floor division and modulo make one formula cover plus handicaps: for
H = -3, H // 18 == -1 and H % 18 == 15, so ranks 1-15 get 0 and ranks 16-18
get -1.
"""

from typing import Dict, Optional

from models.base import round_half_away
from models.course import Course

HOLES_PER_ROUND = 18


def course_handicap(handicap: Optional[float], allowance: float = 1.0) -> int:
    """Whole-stroke playing handicap; a missing index counts as scratch."""
    if handicap is None:
        return 0
    return round_half_away(handicap * allowance)


def strokes_for_rank(course_hcp: int, rank: Optional[int]) -> int:
    """Strokes received on a hole of the given rank for an integer course handicap."""
    if rank is None:
        return 0
    base, extra = divmod(course_hcp, HOLES_PER_ROUND)
    return base + 1 if rank <= extra else base


def strokes_received(handicap: Optional[float], rank: Optional[int], allowance: float = 1.0) -> int:
    """Strokes a player with this index receives on a hole of this rank."""
    return strokes_for_rank(course_handicap(handicap, allowance), rank)


def stroke_allocation(handicap: Optional[float], course: Course, allowance: float = 1.0) -> Dict[int, int]:
    """Strokes received on every hole of the course, keyed by hole number."""
    course_hcp = course_handicap(handicap, allowance)
    return {hole.number: strokes_for_rank(course_hcp, hole.handicap) for hole in course.holes}
