"""JSON file helpers shared by the season store and configuration."""

import json
import logging
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

T = TypeVar('T', bound=BaseModel)
logger = logging.getLogger('padel.utils')


def load_json(
    path: Path | str,
    schema: type[T] | None = None,
) -> Any | T:
    """
    Load a JSON file, optionally validating it against a schema.

    Args:
        path: Path to JSON file
        schema: Optional Pydantic model to validate against

    Returns:
        Parsed JSON, or a schema instance if a schema was given

    Raises:
        FileNotFoundError: If file doesn't exist
        json.JSONDecodeError: If JSON is malformed
        ValueError: If schema validation fails

    Example:
        from padel.schemas import MatchesFile
        matches = load_json('data/matches.json', schema=MatchesFile)
    """
    path = Path(path)

    logger.debug(f'Loading JSON from: {path}')

    if not path.exists():
        logger.error(f'File not found: {path}')
        raise FileNotFoundError(f'File not found: {path}')

    try:
        with open(path, encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        logger.error(f'Invalid JSON in {path}: {e.msg} at position {e.pos}')
        raise json.JSONDecodeError(f'Invalid JSON in {path}: {e.msg}', e.doc, e.pos) from e

    if schema:
        try:
            validated = schema.model_validate(data)
        except ValidationError as e:
            logger.error(f'Schema validation failed for {path}: {e}')
            raise ValueError(f'Schema validation failed for {path}:\n{e}') from e
        logger.debug(f'Schema validation passed for: {path}')
        return validated

    return data


def save_json(
    path: Path | str,
    data: Any,
    indent: int = 2,
) -> None:
    """
    Write data to a JSON file, creating parent directories as needed.

    Pydantic models are dumped with ``model_dump(mode='json')`` first.

    Raises:
        TypeError: If data is not JSON-serializable
        OSError: If file cannot be written
    """
    path = Path(path)

    logger.debug(f'Saving JSON to: {path}')

    path.parent.mkdir(parents=True, exist_ok=True)

    json_data = data.model_dump(mode='json') if isinstance(data, BaseModel) else data

    try:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(json_data, f, indent=indent, ensure_ascii=False)
    except TypeError as e:
        logger.error(f'Data is not JSON-serializable: {e}')
        raise TypeError(f'Data is not JSON-serializable: {e}') from e


def load_json_if_present(
    path: Path | str,
    default: Any = None,
    schema: type[T] | None = None,
) -> Any | T:
    """
    Like load_json, but return ``default`` when the file is missing or empty.

    Malformed or invalid files still raise, so bad data is never silently
    replaced by an empty season.
    """
    path = Path(path)
    if not path.exists() or path.stat().st_size == 0:
        logger.debug(f'No data at {path}, using default')
        return default
    return load_json(path, schema=schema)
