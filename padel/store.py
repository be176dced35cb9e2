"""JSON file storage for season data.

A season lives in three independent files under the data directory:
availability.json, matches.json and results.json. Each maps week numbers
(as string keys) to that week's record. A missing file is an empty record.
Writes replace the whole file; the last writer wins.
"""

import logging
from pathlib import Path

from .constants import AVAILABILITY_FILE, MATCHES_FILE, RESULTS_FILE
from .models import Availability, AvailabilityStatus, Match, MatchResult
from .planner import PadelPlanner
from .schemas import (
    AvailabilityFile,
    LeagueConfig,
    MatchesFile,
    MatchRecord,
    ResultRecord,
    ResultsFile,
)
from .utils import load_json_if_present, save_json

logger = logging.getLogger('padel.store')


class SeasonStore:
    """Reads and writes season data in a data directory."""

    def __init__(self, data_dir: Path | str):
        self.data_dir = Path(data_dir)

    @property
    def availability_path(self) -> Path:
        return self.data_dir / AVAILABILITY_FILE

    @property
    def matches_path(self) -> Path:
        return self.data_dir / MATCHES_FILE

    @property
    def results_path(self) -> Path:
        return self.data_dir / RESULTS_FILE

    def load_availability(self) -> Availability:
        data = load_json_if_present(self.availability_path, AvailabilityFile(), AvailabilityFile)
        return {
            int(week): {player: AvailabilityStatus(status) for player, status in statuses.items()}
            for week, statuses in data.availability.items()
        }

    def save_availability(self, availability: Availability) -> None:
        data = AvailabilityFile(
            availability={
                str(week): {player: int(status) for player, status in statuses.items()}
                for week, statuses in sorted(availability.items())
            }
        )
        save_json(self.availability_path, data)

    def load_matches(self) -> dict[int, Match]:
        data = load_json_if_present(self.matches_path, MatchesFile(), MatchesFile)
        return {
            int(week): Match(team1=list(record.team1), team2=list(record.team2))
            for week, record in data.matches.items()
        }

    def save_matches(self, matches: dict[int, Match]) -> None:
        data = MatchesFile(
            matches={
                str(week): MatchRecord(team1=match.team1, team2=match.team2)
                for week, match in sorted(matches.items())
            }
        )
        save_json(self.matches_path, data)

    def load_results(self) -> dict[int, MatchResult]:
        data = load_json_if_present(self.results_path, ResultsFile(), ResultsFile)
        return {
            int(week): MatchResult(record.team1_score, record.team2_score)
            for week, record in data.results.items()
        }

    def save_results(self, results: dict[int, MatchResult]) -> None:
        data = ResultsFile(
            results={
                str(week): ResultRecord(
                    team1_score=result.team1_score, team2_score=result.team2_score
                )
                for week, result in sorted(results.items())
            }
        )
        save_json(self.results_path, data)

    def load_planner(self, config: LeagueConfig) -> PadelPlanner:
        """Build a planner from the configuration and the stored season."""
        planner = PadelPlanner.from_config(
            config,
            availability=self.load_availability(),
            matches=self.load_matches(),
            results=self.load_results(),
        )
        logger.debug(
            f'Loaded {len(planner.matches)} matches and {len(planner.results)} results '
            f'from {self.data_dir}'
        )
        return planner

    def save_planner(self, planner: PadelPlanner) -> None:
        self.save_availability(planner.availability)
        self.save_matches(planner.matches)
        self.save_results(planner.results)
