from .models import AvailabilityStatus, Match, MatchResult, PlayerStats
from .errors import (
    PlannerError,
    InsufficientPlayersError,
    InvalidScoreError,
    DuplicatePlayerError,
    SeasonDataError,
)
from .teams import (
    compute_eligible_players,
    compute_match_counts,
    assign_teams,
    move_player,
    swap_players,
    replace_player,
    other_team,
)
from .stats import (
    get_play_count,
    get_win_count,
    compute_player_stats,
    rank_by_wins,
    completed_matches,
)
from .scores import parse_score
from .weeks import get_week_date, format_week_date, get_current_week, next_status
from .planner import PadelPlanner
from .store import SeasonStore
from .validators import validate_match, validate_result, validate_season

__all__ = [
    # Models
    'AvailabilityStatus',
    'Match',
    'MatchResult',
    'PlayerStats',
    # Errors
    'PlannerError',
    'InsufficientPlayersError',
    'InvalidScoreError',
    'DuplicatePlayerError',
    'SeasonDataError',
    # Team assignment
    'compute_eligible_players',
    'compute_match_counts',
    'assign_teams',
    'move_player',
    'swap_players',
    'replace_player',
    'other_team',
    # Statistics
    'get_play_count',
    'get_win_count',
    'compute_player_stats',
    'rank_by_wins',
    'completed_matches',
    'parse_score',
    # Weeks
    'get_week_date',
    'format_week_date',
    'get_current_week',
    'next_status',
    # Season
    'PadelPlanner',
    'SeasonStore',
    # Validation
    'validate_match',
    'validate_result',
    'validate_season',
]
