"""Exceptions raised by planner operations.

Every error is raised before any state is changed, so callers can report it
and carry on with the previous state.
"""

from typing import Any


class PlannerError(Exception):
    """Base class for planner errors surfaced to the user."""


class InsufficientPlayersError(PlannerError):
    """Fewer than four eligible players for a week."""

    def __init__(self, available: int, week: int | None = None):
        self.available = available
        self.week = week
        where = f' for week {week}' if week is not None else ''
        super().__init__(f'Not enough players available{where} ({available}/4)')


class InvalidScoreError(PlannerError):
    """A score that is missing, non-numeric or negative."""

    def __init__(self, value: Any, reason: str):
        self.value = value
        self.reason = reason
        super().__init__(f'Invalid score {value!r}: {reason}')


class DuplicatePlayerError(PlannerError):
    """A player who is already in one of the week's teams."""

    def __init__(self, player: str):
        self.player = player
        super().__init__(f'{player} is already in a team for this week')


class SeasonDataError(PlannerError):
    """Stored season data that breaks the match rules."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__(f'Season data has {len(errors)} error(s)')
