"""Score input parsing."""

import re
from typing import Any

from .errors import InvalidScoreError

_INTEGER_RE = re.compile(r'^[+-]?\d+$')


def parse_score(value: Any) -> int:
    """
    Convert a score entered by a user into a non-negative integer.

    Accepts ints and integer strings (surrounding whitespace allowed).

    Raises:
        InvalidScoreError: If the value is missing, blank, not a whole
            number, or negative
    """
    if value is None:
        raise InvalidScoreError(value, 'score is missing')

    if isinstance(value, bool):
        raise InvalidScoreError(value, 'score must be a number')

    if isinstance(value, float):
        if not value.is_integer():
            raise InvalidScoreError(value, 'score must be a whole number')
        score = int(value)
    elif isinstance(value, int):
        score = value
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            raise InvalidScoreError(value, 'score is missing')
        if not _INTEGER_RE.match(text):
            raise InvalidScoreError(value, 'score must be a whole number')
        score = int(text)
    else:
        raise InvalidScoreError(value, 'score must be a number')

    if score < 0:
        raise InvalidScoreError(value, 'score must not be negative')

    return score
