"""Pydantic schemas for JSON data validation."""

from datetime import date

from pydantic import BaseModel, Field, field_validator, model_validator

from .constants import STATUS_AVAILABLE, STATUS_UNAVAILABLE, TEAM_SIZE


def _check_week_keys(v: dict) -> dict:
    for week in v:
        if not str(week).isdigit() or int(week) < 1:
            raise ValueError(f'Invalid week number: {week}')
    return v


class MatchRecord(BaseModel):
    """Teams for one week."""

    team1: list[str] = Field(default_factory=list, max_length=TEAM_SIZE)
    team2: list[str] = Field(default_factory=list, max_length=TEAM_SIZE)

    @model_validator(mode='after')
    def validate_disjoint(self):
        """Ensure no player is in both teams."""
        overlap = set(self.team1) & set(self.team2)
        if overlap:
            raise ValueError(f'Players in both teams: {", ".join(sorted(overlap))}')
        return self

    class Config:
        extra = 'forbid'


class ResultRecord(BaseModel):
    """Final score for one week."""

    team1_score: int = Field(..., ge=0)
    team2_score: int = Field(..., ge=0)

    class Config:
        extra = 'forbid'


class AvailabilityFile(BaseModel):
    """Complete availability.json file structure."""

    availability: dict[str, dict[str, int]] = Field(default_factory=dict)

    @field_validator('availability')
    @classmethod
    def validate_statuses(cls, v):
        """Ensure week keys are week numbers and statuses are 0, 1 or 2."""
        _check_week_keys(v)
        for week, statuses in v.items():
            for player, status in statuses.items():
                if not STATUS_UNAVAILABLE <= status <= STATUS_AVAILABLE:
                    raise ValueError(f'Invalid status {status} for {player} in week {week}')
        return v

    class Config:
        extra = 'forbid'


class MatchesFile(BaseModel):
    """Complete matches.json file structure."""

    matches: dict[str, MatchRecord] = Field(default_factory=dict)

    @field_validator('matches')
    @classmethod
    def validate_weeks(cls, v):
        return _check_week_keys(v)

    class Config:
        extra = 'forbid'


class ResultsFile(BaseModel):
    """Complete results.json file structure."""

    results: dict[str, ResultRecord] = Field(default_factory=dict)

    @field_validator('results')
    @classmethod
    def validate_weeks(cls, v):
        return _check_week_keys(v)

    class Config:
        extra = 'forbid'


class LeagueConfig(BaseModel):
    """Club configuration settings."""

    roster: list[str] = Field(..., min_length=1)
    start_date: date
    total_weeks: int = Field(..., ge=1, le=52)
    match_day: str | None = None
    match_time: str | None = None

    @field_validator('roster')
    @classmethod
    def validate_roster(cls, v):
        """Ensure roster names are non-blank and unique."""
        seen = set()
        for name in v:
            if not name.strip():
                raise ValueError('Roster contains a blank name')
            if name in seen:
                raise ValueError(f'Duplicate roster name: {name}')
            seen.add(name)
        return v

    class Config:
        extra = 'forbid'
