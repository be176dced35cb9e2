"""Data models for the padel planner."""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Dict, List, Optional

from .constants import STATUS_AVAILABLE, STATUS_LABELS, STATUS_TENTATIVE, STATUS_UNAVAILABLE


class AvailabilityStatus(IntEnum):
    """A player's availability for a single week."""
    UNAVAILABLE = STATUS_UNAVAILABLE
    TENTATIVE = STATUS_TENTATIVE
    AVAILABLE = STATUS_AVAILABLE

    @property
    def label(self) -> str:
        return STATUS_LABELS[self.value]


# availability[week][player] = status
Availability = Dict[int, Dict[str, AvailabilityStatus]]


@dataclass
class Match:
    """Two teams of up to two players for one week."""
    team1: List[str] = field(default_factory=list)
    team2: List[str] = field(default_factory=list)

    def team(self, team_id: str) -> List[str]:
        if team_id == 'team1':
            return self.team1
        if team_id == 'team2':
            return self.team2
        raise ValueError(f'Unknown team: {team_id}')

    @property
    def players(self) -> List[str]:
        return [*self.team1, *self.team2]

    def has_player(self, player: str) -> bool:
        return player in self.team1 or player in self.team2

    def team_of(self, player: str) -> Optional[str]:
        """Return the team id holding ``player``, or None."""
        if player in self.team1:
            return 'team1'
        if player in self.team2:
            return 'team2'
        return None

    def copy(self) -> 'Match':
        return Match(team1=list(self.team1), team2=list(self.team2))


@dataclass(frozen=True)
class MatchResult:
    """Final score of a week's match."""
    team1_score: int
    team2_score: int

    @property
    def winner(self) -> Optional[str]:
        """Winning team id, or None for a tie."""
        if self.team1_score > self.team2_score:
            return 'team1'
        if self.team2_score > self.team1_score:
            return 'team2'
        return None


@dataclass
class PlayerStats:
    """Aggregate statistics for one player over the season."""
    name: str
    play_count: int = 0
    win_count: int = 0
    win_rate: float = 0.0  # percent of played matches won
    participation: float = 0.0  # percent of season weeks played
