"""Validation functions for matches, results and whole seasons."""

from typing import Mapping

from .constants import TEAM_IDS, TEAM_SIZE
from .models import Match, MatchResult


def validate_match(week: int, match: Match) -> list[str]:
    """
    Check that a week's teams follow the match rules.

    Checks:
    - At most two players per team
    - No blank player names
    - No player listed twice in a team
    - No player in both teams

    Returns:
        List of validation error messages (empty if valid)
    """
    errors = []

    for team_id in TEAM_IDS:
        team = match.team(team_id)
        if len(team) > TEAM_SIZE:
            errors.append(f'Week {week} {team_id} has {len(team)} players (max {TEAM_SIZE})')

        if any(not player or not player.strip() for player in team):
            errors.append(f'Week {week} {team_id} has a blank player name')

        named = [player for player in team if player and player.strip()]
        duplicates = {player for player in named if named.count(player) > 1}
        if duplicates:
            errors.append(
                f'Week {week} {team_id} lists {", ".join(sorted(duplicates))} more than once'
            )

    overlap = set(match.team1) & set(match.team2)
    overlap.discard('')
    if overlap:
        errors.append(f'Week {week} has players in both teams: {", ".join(sorted(overlap))}')

    return errors


def validate_result(
    week: int,
    result: MatchResult,
    matches: Mapping[int, Match],
) -> tuple[list[str], list[str]]:
    """
    Check a recorded result.

    Returns:
        Tuple of (errors, warnings)
        - errors: negative scores
        - warnings: result with no match for the week, which stats ignore
    """
    errors = []
    warnings = []

    if result.team1_score < 0 or result.team2_score < 0:
        errors.append(
            f'Week {week} has a negative score ({result.team1_score}-{result.team2_score})'
        )

    if week not in matches:
        warnings.append(f'Week {week} has a result but no teams')

    return errors, warnings


def validate_season(
    matches: Mapping[int, Match],
    results: Mapping[int, MatchResult],
) -> tuple[list[str], list[str]]:
    """
    Validate every match and result of a season.

    Returns:
        Tuple of (errors, warnings)
    """
    errors: list[str] = []
    warnings: list[str] = []

    for week in sorted(matches):
        errors.extend(validate_match(week, matches[week]))

    for week in sorted(results):
        result_errors, result_warnings = validate_result(week, results[week], matches)
        errors.extend(result_errors)
        warnings.extend(result_warnings)

    return errors, warnings
