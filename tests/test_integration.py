"""Integration tests for storage, configuration, export and the CLI."""

import json
from datetime import date

import openpyxl
import pytest

import padel_planner
from padel.config import (
    clear_config_cache,
    get_config,
    get_roster,
    get_start_date,
    get_total_weeks,
)
from padel.export import export_season_workbook
from padel.models import AvailabilityStatus, Match, MatchResult
from padel.store import SeasonStore
from padel.validators import validate_match, validate_season


@pytest.fixture
def config_path(tmp_path):
    """Write a test league_config.json."""
    path = tmp_path / 'league_config.json'
    with open(path, 'w') as f:
        json.dump(
            {
                'roster': ['A', 'B', 'C', 'D', 'E', 'F'],
                'start_date': '2025-05-21',
                'total_weeks': 19,
                'match_day': 'Wednesday',
                'match_time': '18:30-20:00',
            },
            f,
        )
    clear_config_cache()
    yield path
    clear_config_cache()


@pytest.fixture
def data_dir(tmp_path):
    return tmp_path / 'data'


class TestConfig:
    """Tests for configuration loading."""

    def test_load_config(self, config_path):
        config = get_config(config_path)
        assert config.roster == ['A', 'B', 'C', 'D', 'E', 'F']
        assert config.start_date == date(2025, 5, 21)
        assert config.total_weeks == 19

    def test_duplicate_roster_rejected(self, tmp_path):
        path = tmp_path / 'bad_config.json'
        path.write_text(json.dumps({'roster': ['A', 'A'], 'start_date': '2025-05-21', 'total_weeks': 19}))
        clear_config_cache()
        with pytest.raises(ValueError, match='Duplicate roster name'):
            get_config(path)

    def test_missing_config(self, tmp_path):
        clear_config_cache()
        with pytest.raises(FileNotFoundError):
            get_config(tmp_path / 'missing.json')

    def test_bundled_config_is_valid(self):
        """Test data/league_config.json loads through the accessors."""
        clear_config_cache()
        config = get_config()
        assert len(config.roster) >= 4
        assert get_roster() == config.roster
        assert get_start_date() == config.start_date
        assert get_total_weeks() == config.total_weeks
        clear_config_cache()


class TestSeasonStore:
    """Tests for JSON persistence."""

    def test_missing_files_are_empty(self, data_dir):
        """Test a fresh data directory loads as an empty season."""
        store = SeasonStore(data_dir)
        assert store.load_availability() == {}
        assert store.load_matches() == {}
        assert store.load_results() == {}

    def test_empty_file_is_empty(self, data_dir):
        data_dir.mkdir()
        (data_dir / 'matches.json').write_text('')
        assert SeasonStore(data_dir).load_matches() == {}

    def test_save_and_load(self, data_dir, config_path):
        """Test a season survives a save/load cycle with integer week keys."""
        store = SeasonStore(data_dir)
        planner = store.load_planner(get_config(config_path))
        for player in ['A', 'B', 'C', 'D']:
            planner.set_availability(2, player, AvailabilityStatus.AVAILABLE)
        planner.set_availability(2, 'E', AvailabilityStatus.TENTATIVE)
        planner.create_teams_for_week(2)
        planner.record_result(2, 6, 4)
        store.save_planner(planner)

        reloaded = store.load_planner(get_config(config_path))
        assert reloaded.availability[2]['E'] == AvailabilityStatus.TENTATIVE
        assert reloaded.matches == {2: Match(['A', 'C'], ['B', 'D'])}
        assert reloaded.results == {2: MatchResult(6, 4)}

    def test_week_keys_written_as_strings(self, data_dir):
        store = SeasonStore(data_dir)
        store.save_results({3: MatchResult(6, 2)})
        with open(data_dir / 'results.json') as f:
            data = json.load(f)
        assert data == {'results': {'3': {'team1_score': 6, 'team2_score': 2}}}

    def test_invalid_file_raises(self, data_dir):
        """Test a file with an oversized team is refused."""
        data_dir.mkdir()
        (data_dir / 'matches.json').write_text(
            json.dumps({'matches': {'1': {'team1': ['A', 'B', 'C'], 'team2': []}}})
        )
        with pytest.raises(ValueError, match='Schema validation failed'):
            SeasonStore(data_dir).load_matches()

    def test_negative_stored_score_raises(self, data_dir):
        data_dir.mkdir()
        (data_dir / 'results.json').write_text(
            json.dumps({'results': {'1': {'team1_score': -1, 'team2_score': 2}}})
        )
        with pytest.raises(ValueError):
            SeasonStore(data_dir).load_results()


class TestValidators:
    """Tests for season validation."""

    def test_valid_match(self):
        assert validate_match(1, Match(['A', 'B'], ['C', 'D'])) == []

    def test_player_in_both_teams(self):
        errors = validate_match(1, Match(['A', 'B'], ['B', 'C']))
        assert len(errors) == 1
        assert 'both teams' in errors[0]

    def test_oversized_team(self):
        errors = validate_match(2, Match(['A', 'B', 'C'], []))
        assert errors == ['Week 2 team1 has 3 players (max 2)']

    def test_orphan_result_is_warning(self):
        errors, warnings = validate_season({}, {4: MatchResult(6, 2)})
        assert errors == []
        assert warnings == ['Week 4 has a result but no teams']


class TestExport:
    """Tests for the Excel export."""

    def test_workbook_contents(self, tmp_path, data_dir, config_path):
        planner = SeasonStore(data_dir).load_planner(get_config(config_path))
        for player in ['A', 'B', 'C', 'D']:
            planner.set_availability(1, player, AvailabilityStatus.AVAILABLE)
        planner.create_teams_for_week(1)
        planner.record_result(1, 6, 3)

        path = export_season_workbook(tmp_path / 'out' / 'season.xlsx', planner)

        wb = openpyxl.load_workbook(path)
        schedule = wb['Schedule']
        assert schedule.max_row == 20  # header + 19 weeks
        assert [c.value for c in schedule[2]] == [1, '21 May', 'A & C', 'B & D', '6-3']
        assert schedule['C3'].value is None  # week 2 not planned

        stats = wb['Stats']
        assert stats['A2'].value == 'A'
        assert stats['C2'].value == 1


class TestCli:
    """Tests for the padel_planner command line."""

    def run(self, config_path, data_dir, *args):
        return padel_planner.main(['--config', str(config_path), '--data-dir', str(data_dir), *args])

    def test_full_week(self, config_path, data_dir, capsys):
        for player in ['A', 'B', 'C', 'D']:
            assert self.run(config_path, data_dir, 'availability', '-w', '1', '-p', player, '-s', '2') == 0

        assert self.run(config_path, data_dir, 'teams', '-w', '1') == 0
        assert self.run(config_path, data_dir, 'result', '-w', '1', '6', '2') == 0

        store = SeasonStore(data_dir)
        assert store.load_matches() == {1: Match(['A', 'C'], ['B', 'D'])}
        assert store.load_results() == {1: MatchResult(6, 2)}

        assert self.run(config_path, data_dir, 'history') == 0
        assert 'A & C 6 - 2 B & D' in capsys.readouterr().out

    def test_not_enough_players(self, config_path, data_dir, capsys):
        assert self.run(config_path, data_dir, 'teams', '-w', '1') == 1
        assert 'Not enough players' in capsys.readouterr().out
        assert not (data_dir / 'matches.json').exists()

    def test_guests_fill_match(self, config_path, data_dir):
        self.run(config_path, data_dir, 'availability', '-w', '2', '-p', 'A', '-s', '2')
        assert self.run(config_path, data_dir, 'teams', '-w', '2', '-g', 'X', '-g', 'Y', '-g', 'Z') == 0
        assert SeasonStore(data_dir).load_matches()[2] == Match(['A', 'Y'], ['X', 'Z'])

    def test_invalid_score(self, config_path, data_dir, capsys):
        assert self.run(config_path, data_dir, 'result', '-w', '1', '3', 'x') == 1
        assert 'Invalid score' in capsys.readouterr().out
        assert SeasonStore(data_dir).load_results() == {}

    def test_week_out_of_range(self, config_path, data_dir):
        assert self.run(config_path, data_dir, 'teams', '-w', '40') == 1

    def test_invalid_results_file(self, config_path, data_dir, capsys):
        data_dir.mkdir()
        with open(data_dir / 'results.json', 'w') as f:
            json.dump({'results': {'1': {'team1_score': -1, 'team2_score': 2}}}, f)

        assert self.run(config_path, data_dir, 'stats') == 1
        assert 'Schema validation failed' in capsys.readouterr().out

    def test_malformed_matches_file(self, config_path, data_dir, capsys):
        data_dir.mkdir()
        (data_dir / 'matches.json').write_text('{"matches": {', encoding='utf-8')

        assert self.run(config_path, data_dir, 'history') == 1
        assert 'Invalid JSON' in capsys.readouterr().out

    def test_check_valid_season(self, config_path, data_dir, capsys):
        """A result without teams is only a warning."""
        data_dir.mkdir()
        with open(data_dir / 'results.json', 'w') as f:
            json.dump({'results': {'3': {'team1_score': 6, 'team2_score': 4}}}, f)

        assert self.run(config_path, data_dir, 'check') == 0
        out = capsys.readouterr().out
        assert 'Week 3 has a result but no teams' in out
        assert 'Season data is valid' in out

    def test_check_reports_errors(self, config_path, data_dir, capsys):
        data_dir.mkdir()
        with open(data_dir / 'matches.json', 'w') as f:
            json.dump({'matches': {'2': {'team1': ['A', ' '], 'team2': ['B', 'C']}}}, f)

        assert self.run(config_path, data_dir, 'check') == 1
        out = capsys.readouterr().out
        assert 'Week 2 team1 has a blank player name' in out
        assert 'Season data has 1 error(s)' in out
