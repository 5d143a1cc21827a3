from datetime import datetime
from enum import Enum
from pydantic import Field, ValidationError, model_validator
from typing import Dict, List, Optional, Set
from uuid import uuid4

from .base import BaseGolfModel
from .course import Course
from .hole_score import HoleScore
from .player import Player
from .shot import Shot

ALL_HOLES = range(1, 19)
FRONT_NINE = range(1, 10)
BACK_NINE = range(10, 19)

# Tee used when the game does not pick one, in priority order.
DEFAULT_TEE_COLORS = ("White", "Green")


class GameFormat(str, Enum):
    """Scoring format for a game."""
    STROKE = "stroke"
    STABLEFORD = "stableford"
    TEAM_STABLEFORD = "team_stableford"
    BEST_BALL = "bestball"
    BEST_BALL_MATCH_PLAY = "bestball_matchplay"
    SCRAMBLE = "scramble"
    SKINS = "skins"
    NASSAU = "nassau"

    @property
    def is_team_format(self) -> bool:
        return self in TEAM_FORMATS


TEAM_FORMATS = frozenset({
    GameFormat.TEAM_STABLEFORD,
    GameFormat.BEST_BALL,
    GameFormat.BEST_BALL_MATCH_PLAY,
    GameFormat.SCRAMBLE,
    GameFormat.NASSAU,
})


class Game(BaseGolfModel):
    """A round played by a group of players on one course."""
    id: str = Field(default_factory=lambda: str(uuid4()))
    course: Optional[Course] = None
    players: List[Player] = Field(default_factory=list)
    selected_tee_color: Optional[str] = None
    format: GameFormat = GameFormat.STROKE
    team_assignments: Dict[str, List[str]] = Field(default_factory=dict)  # team name -> player ids
    tracking_player_ids: Set[str] = Field(default_factory=set)
    is_completed: bool = False
    date: datetime = Field(default_factory=datetime.now)
    created_at: Optional[datetime] = None
    hole_scores: List[HoleScore] = Field(default_factory=list)
    shots: List[Shot] = Field(default_factory=list)

    # Skins settings
    skins_carryover: bool = True
    skins_pot_per_player: Optional[float] = Field(None, ge=0)

    @model_validator(mode='after')
    def validate_roster(self):
        roster = [p.id for p in self.players]
        if len(set(roster)) != len(roster):
            raise ValueError("A player can only appear once on the roster")

        current = [p for p in self.players if p.is_current_user]
        if len(current) > 1:
            raise ValueError("Only one player can be the current user")

        seen: Dict[str, str] = {}
        for team_name, player_ids in self.team_assignments.items():
            for player_id in player_ids:
                if player_id not in roster:
                    raise ValueError(f"Team '{team_name}' lists unknown player '{player_id}'")
                if player_id in seen:
                    raise ValueError(
                        f"Player '{player_id}' is on both '{seen[player_id]}' and '{team_name}'"
                    )
                seen[player_id] = team_name

        unknown = self.tracking_player_ids - set(roster)
        if unknown:
            raise ValueError(f"Tracked players not on the roster: {sorted(unknown)}")
        return self

    # ---- roster -------------------------------------------------------

    def get_player(self, player_id: str) -> Optional[Player]:
        for player in self.players:
            if player.id == player_id:
                return player
        return None

    @property
    def current_player(self) -> Optional[Player]:
        for player in self.players:
            if player.is_current_user:
                return player
        return None

    @property
    def tracking_players(self) -> List[Player]:
        return [p for p in self.players if p.id in self.tracking_player_ids]

    @property
    def team_names(self) -> List[str]:
        return sorted(self.team_assignments)

    def players_for_team(self, team_name: str) -> List[Player]:
        """Team members in the order they were assigned."""
        ids = self.team_assignments.get(team_name, [])
        return [p for p in (self.get_player(i) for i in ids) if p is not None]

    @property
    def effective_tee_color(self) -> Optional[str]:
        """Selected tee, else White, else Green, else the first tee on the first hole."""
        if self.selected_tee_color:
            return self.selected_tee_color
        if not self.course:
            return None
        colors = self.course.tee_colors()
        for preferred in DEFAULT_TEE_COLORS:
            if preferred in colors:
                return preferred
        return colors[0] if colors else None

    # ---- scores -------------------------------------------------------

    def get_hole_score(self, hole_number: int) -> Optional[HoleScore]:
        for hole_score in self.hole_scores:
            if hole_score.hole_number == hole_number:
                return hole_score
        return None

    def get_score(self, player_id: str, hole_number: int) -> Optional[int]:
        """Gross strokes for a player on a hole, or None when not entered."""
        hole_score = self.get_hole_score(hole_number)
        return hole_score.get(player_id) if hole_score else None

    def set_score(self, player_id: str, hole_number: int, strokes: Optional[int]) -> Optional[str]:
        """Record a gross score (None or 0 clears it). Returns error message if validation fails."""
        if self.get_player(player_id) is None:
            return f"Player '{player_id}' is not in this game"
        hole_score = self.get_hole_score(hole_number)
        if hole_score is None:
            if not strokes:
                return None
            try:
                hole_score = HoleScore(hole_number=hole_number)
            except ValidationError as e:
                return e.errors()[0]['msg']
            error = hole_score.set_score(player_id, strokes)
            if error:
                return error
            self.hole_scores.append(hole_score)
            self.hole_scores.sort(key=lambda hs: hs.hole_number)
            return None
        return hole_score.set_score(player_id, strokes)

    def set_team_score(self, team_name: str, hole_number: int, strokes: Optional[int]) -> Optional[str]:
        """Record a scramble team score, stored under the first listed team member."""
        members = self.team_assignments.get(team_name)
        if not members:
            return f"Unknown team '{team_name}'"
        return self.set_score(members[0], hole_number, strokes)

    def holes_recorded(self, player_id: str) -> List[int]:
        return [hs.hole_number for hs in self.hole_scores if hs.is_recorded(player_id)]

    @property
    def is_all_scored(self) -> bool:
        """Check if every player has a score on all 18 holes."""
        if not self.players:
            return False
        return all(
            self.get_score(player.id, hole) is not None
            for hole in ALL_HOLES
            for player in self.players
        )

    def calculate_total_score(self, player_id: str, holes=ALL_HOLES) -> Optional[int]:
        """Total gross strokes over the given holes; None if none are recorded."""
        strokes = [self.get_score(player_id, h) for h in holes]
        strokes = [s for s in strokes if s is not None]
        return sum(strokes) if strokes else None
