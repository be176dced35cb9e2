"""Club configuration management."""

from datetime import date
from functools import lru_cache
from pathlib import Path

from .constants import LEAGUE_CONFIG_FILE
from .schemas import LeagueConfig
from .utils import load_json

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / 'data' / LEAGUE_CONFIG_FILE


@lru_cache(maxsize=1)
def get_config(config_path: Path | str = DEFAULT_CONFIG_PATH) -> LeagueConfig:
    """
    Load club configuration from data/league_config.json.

    Configuration is cached after first load.

    Returns:
        LeagueConfig object with validated settings

    Raises:
        FileNotFoundError: If the config file doesn't exist
        ValueError: If the config file has invalid structure

    Example:
        from padel.config import get_config
        config = get_config()
        print(f"Season starts: {config.start_date}")
    """
    return load_json(config_path, schema=LeagueConfig)


def get_roster() -> list[str]:
    """Get the registered players, in roster order."""
    return list(get_config().roster)


def get_start_date() -> date:
    """Get the date of week 1."""
    return get_config().start_date


def get_total_weeks() -> int:
    """Get the number of weeks in the season."""
    return get_config().total_weeks


def clear_config_cache() -> None:
    """
    Clear the configuration cache.

    Use this if the config file is modified during runtime
    and you need to reload it.
    """
    get_config.cache_clear()
