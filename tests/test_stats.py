"""Unit tests for play and win statistics."""

from padel.models import Match, MatchResult
from padel.stats import (
    completed_matches,
    compute_player_stats,
    get_play_count,
    get_win_count,
    rank_by_wins,
)


def make_history():
    matches = {
        1: Match(team1=['A', 'C'], team2=['B', 'D']),
        2: Match(team1=['A', 'B'], team2=['C', 'E']),
        3: Match(team1=['B', 'E'], team2=['A', 'D']),
    }
    results = {
        1: MatchResult(6, 3),  # team1 wins
        2: MatchResult(2, 6),  # team2 wins
        3: MatchResult(4, 4),  # tie
    }
    return matches, results


class TestPlayCount:
    """Tests for get_play_count."""

    def test_counts_all_weeks(self):
        """Test appearances are counted in either team."""
        matches, _ = make_history()
        assert get_play_count('A', matches) == 3
        assert get_play_count('E', matches) == 2
        assert get_play_count('F', matches) == 0

    def test_empty_history(self):
        """Test no matches means no plays."""
        assert get_play_count('A', {}) == 0


class TestWinCount:
    """Tests for get_win_count."""

    def test_wins_for_both_sides(self):
        """Test team1 and team2 wins are both credited."""
        matches, results = make_history()
        assert get_win_count('A', matches, results) == 1  # week 1
        assert get_win_count('C', matches, results) == 2  # weeks 1 and 2
        assert get_win_count('E', matches, results) == 1  # week 2
        assert get_win_count('B', matches, results) == 0

    def test_tie_credits_no_one(self):
        """Test a tie adds no wins for any player in the match."""
        matches = {1: Match(team1=['A', 'B'], team2=['C', 'D'])}
        results = {1: MatchResult(5, 5)}
        for player in ['A', 'B', 'C', 'D']:
            assert get_win_count(player, matches, results) == 0

    def test_result_without_match_skipped(self):
        """Test a result for a week with no match is ignored."""
        matches = {1: Match(team1=['A', 'B'], team2=['C', 'D'])}
        results = {1: MatchResult(6, 0), 9: MatchResult(6, 0)}
        assert get_win_count('A', matches, results) == 1

    def test_match_without_result_skipped(self):
        """Test unplayed matches give no wins."""
        matches = {1: Match(team1=['A', 'B'], team2=['C', 'D'])}
        assert get_win_count('A', matches, {}) == 0


class TestPlayerStats:
    """Tests for compute_player_stats and ranking."""

    def test_stats_values(self):
        """Test play count, wins, win rate and participation."""
        matches, results = make_history()
        stats = {s.name: s for s in compute_player_stats(['A', 'C', 'F'], matches, results, 10)}

        assert stats['A'].play_count == 3
        assert stats['A'].win_count == 1
        assert stats['A'].win_rate == 33.3
        assert stats['A'].participation == 30.0

        assert stats['C'].win_rate == 100.0
        assert stats['F'].play_count == 0
        assert stats['F'].win_rate == 0.0

    def test_zero_weeks(self):
        """Test participation is 0 when the season has no weeks."""
        stats = compute_player_stats(['A'], {}, {}, 0)
        assert stats[0].participation == 0.0

    def test_rank_by_wins_stable(self):
        """Test ranking puts most wins first and keeps order on ties."""
        matches, results = make_history()
        stats = compute_player_stats(['A', 'B', 'C', 'D', 'E'], matches, results, 19)
        ranked = [s.name for s in rank_by_wins(stats)]
        # C=2, A=1, E=1, B=0, D=0
        assert ranked == ['C', 'A', 'E', 'B', 'D']


class TestCompletedMatches:
    """Tests for completed_matches."""

    def test_newest_first(self):
        """Test history is sorted by week descending."""
        matches, results = make_history()
        weeks = [week for week, _, _ in completed_matches(matches, results)]
        assert weeks == [3, 2, 1]

    def test_unplayed_weeks_excluded(self):
        """Test weeks without a result are left out."""
        matches = {1: Match(['A', 'B'], ['C', 'D']), 2: Match(['A', 'C'], ['B', 'D'])}
        history = completed_matches(matches, {1: MatchResult(6, 2)})
        assert [week for week, _, _ in history] == [1]

    def test_result_without_match_has_empty_teams(self):
        """Test an orphan result is listed with empty teams."""
        history = completed_matches({}, {4: MatchResult(6, 2)})
        week, match, result = history[0]
        assert week == 4
        assert match.team1 == [] and match.team2 == []
        assert result == MatchResult(6, 2)
