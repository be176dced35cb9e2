"""Season state and the user actions that change it.

PadelPlanner owns one season's availability, matches, results and guest
pool. Every action either completes fully or raises before touching any
state. Whenever a week's team composition changes, that week's result is
dropped because the score no longer belongs to those teams.
"""

import logging
from datetime import date
from typing import Iterable, Optional

from .errors import DuplicatePlayerError
from .models import Availability, AvailabilityStatus, Match, MatchResult, PlayerStats
from .schemas import LeagueConfig
from .scores import parse_score
from .stats import compute_player_stats, completed_matches, rank_by_wins
from .teams import (
    assign_teams,
    compute_eligible_players,
    compute_match_counts,
    move_player,
    replace_player,
    swap_players,
)
from .weeks import get_current_week, next_status

logger = logging.getLogger('padel.planner')


class PadelPlanner:
    """Availability, teams and results for one season."""

    def __init__(
        self,
        roster: Iterable[str],
        start_date: date,
        total_weeks: int,
        availability: Optional[Availability] = None,
        matches: Optional[dict[int, Match]] = None,
        results: Optional[dict[int, MatchResult]] = None,
    ):
        self.roster = list(roster)
        self.start_date = start_date
        self.total_weeks = total_weeks
        self.availability: Availability = availability if availability is not None else {}
        self.matches: dict[int, Match] = matches if matches is not None else {}
        self.results: dict[int, MatchResult] = results if results is not None else {}
        self.guest_pool: list[str] = []
        self.editing_result: Optional[int] = None

    @classmethod
    def from_config(cls, config: LeagueConfig, **state) -> 'PadelPlanner':
        return cls(config.roster, config.start_date, config.total_weeks, **state)

    # Availability

    def get_status(self, week: int, player: str) -> AvailabilityStatus:
        return self.availability.get(week, {}).get(player, AvailabilityStatus.UNAVAILABLE)

    def set_availability(self, week: int, player: str, status: AvailabilityStatus | int) -> None:
        if player not in self.roster:
            raise ValueError(f'{player} is not on the roster')
        self.availability.setdefault(week, {})[player] = AvailabilityStatus(status)

    def cycle_availability(self, week: int, player: str) -> AvailabilityStatus:
        """Advance a player's status for a week and return the new status."""
        status = next_status(self.get_status(week, player))
        self.set_availability(week, player, status)
        return status

    # Guests

    def add_guest(self, name: str) -> None:
        """
        Add a guest for the next team assignment.

        Raises:
            ValueError: If the name is blank or belongs to a roster member
        """
        name = name.strip()
        if not name:
            raise ValueError('Guest name must not be blank')
        if name in self.roster:
            raise ValueError(f'{name} is on the roster, mark them available instead')
        if name in self.guest_pool:
            logger.warning(f'Guest {name} already added')
            return
        self.guest_pool.append(name)

    def remove_guest(self, name: str) -> None:
        if name in self.guest_pool:
            self.guest_pool.remove(name)

    # Team assignment

    def eligible_players(self, week: int) -> list[str]:
        return compute_eligible_players(self.availability, week, self.roster, self.guest_pool)

    def match_counts(self) -> dict[str, int]:
        return compute_match_counts(self.matches, [*self.roster, *self.guest_pool])

    def create_teams_for_week(self, week: int) -> Match:
        """
        Create teams for a week from the least-played available players.

        On success the guest pool is emptied and any result for the week is
        removed.

        Raises:
            InsufficientPlayersError: If fewer than four players are eligible
        """
        match = assign_teams(self.eligible_players(week), self.match_counts(), week)

        self.matches[week] = match
        self.guest_pool = []
        self._clear_result(week)

        logger.info(f'Week {week}: {" & ".join(match.team1)} vs {" & ".join(match.team2)}')
        return match

    # Team editing

    def move_player(self, week: int, player: str, from_team: str, to_team: str) -> Match | None:
        match = self.matches.get(week)
        if match is None:
            return None
        return self._update_match(week, move_player(match, player, from_team, to_team))

    def swap_players(
        self, week: int, player_a: str, team_a: str, player_b: str, team_b: str
    ) -> Match | None:
        match = self.matches.get(week)
        if match is None:
            return None
        return self._update_match(week, swap_players(match, player_a, team_a, player_b, team_b))

    def replace_player(self, week: int, team_id: str, index: int, new_player: str) -> Match | None:
        """
        Put a player into a team slot.

        A player already in either team is refused with a warning and the
        match is left as it was.
        """
        match = self.matches.get(week)
        if match is None:
            return None
        try:
            updated = replace_player(match, team_id, index, new_player)
        except DuplicatePlayerError as e:
            logger.warning(str(e))
            return match
        return self._update_match(week, updated)

    def _update_match(self, week: int, match: Match) -> Match:
        if match != self.matches[week]:
            self.matches[week] = match
            self._clear_result(week)
        return self.matches[week]

    def _clear_result(self, week: int) -> None:
        if self.results.pop(week, None) is not None:
            logger.info(f'Week {week}: teams changed, result cleared')

    # Results

    def start_editing_result(self, week: int) -> tuple[str, str]:
        """Enter result editing for a week, returning the current scores as text."""
        self.editing_result = week
        existing = self.results.get(week)
        if existing is None:
            return '', ''
        return str(existing.team1_score), str(existing.team2_score)

    def cancel_editing_result(self) -> None:
        self.editing_result = None

    def record_result(self, week: int, team1_score, team2_score) -> MatchResult:
        """
        Store the score for a week, replacing any earlier result.

        Raises:
            InvalidScoreError: If either score is missing, non-numeric or negative
        """
        result = MatchResult(parse_score(team1_score), parse_score(team2_score))

        if week not in self.matches:
            logger.warning(f'Week {week} has no teams, result will not count in stats')

        self.results[week] = result
        self.editing_result = None
        return result

    # Reporting

    def player_stats(self) -> list[PlayerStats]:
        """Stats for every roster player, most wins first."""
        stats = compute_player_stats(self.roster, self.matches, self.results, self.total_weeks)
        return rank_by_wins(stats)

    def history(self) -> list[tuple[int, Match, MatchResult]]:
        return completed_matches(self.matches, self.results)

    def current_week(self, today: Optional[date] = None) -> int:
        return get_current_week(self.start_date, self.total_weeks, today)
