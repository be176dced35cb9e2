"""Play and win statistics derived from match history.

Statistics are always recomputed from the full history; nothing is cached
between calls.
"""

from typing import Iterable, Mapping

from .models import Match, MatchResult, PlayerStats


def get_play_count(player: str, matches: Mapping[int, Match]) -> int:
    """Count the weeks in which ``player`` was in either team."""
    return sum(1 for match in matches.values() if match.has_player(player))


def get_win_count(
    player: str,
    matches: Mapping[int, Match],
    results: Mapping[int, MatchResult],
) -> int:
    """
    Count the matches ``player`` won.

    Only weeks with both a match and a result are considered. Ties credit
    no one.
    """
    wins = 0
    for week, result in results.items():
        match = matches.get(week)
        if match is None:
            continue

        winner = result.winner
        if winner is not None and player in match.team(winner):
            wins += 1

    return wins


def compute_player_stats(
    players: Iterable[str],
    matches: Mapping[int, Match],
    results: Mapping[int, MatchResult],
    total_weeks: int,
) -> list[PlayerStats]:
    """
    Build play/win statistics for each player, in the given order.

    Args:
        players: Players to report on
        matches: Mapping of week -> Match
        results: Mapping of week -> MatchResult
        total_weeks: Number of weeks in the season (for participation)

    Returns:
        List of PlayerStats
    """
    stats = []
    for player in players:
        play_count = get_play_count(player, matches)
        win_count = get_win_count(player, matches, results)
        stats.append(
            PlayerStats(
                name=player,
                play_count=play_count,
                win_count=win_count,
                win_rate=round(win_count / play_count * 100, 1) if play_count else 0.0,
                participation=round(play_count / total_weeks * 100, 1) if total_weeks > 0 else 0.0,
            )
        )
    return stats


def rank_by_wins(stats: list[PlayerStats]) -> list[PlayerStats]:
    """Sort by win count, most wins first. Equal win counts keep their order."""
    return sorted(stats, key=lambda s: s.win_count, reverse=True)


def completed_matches(
    matches: Mapping[int, Match],
    results: Mapping[int, MatchResult],
) -> list[tuple[int, Match, MatchResult]]:
    """
    List weeks that have a result, most recent week first.

    A result without a match is listed with empty teams.
    """
    history = [
        (week, matches.get(week, Match()), result)
        for week, result in results.items()
    ]
    return sorted(history, key=lambda entry: entry[0], reverse=True)
