"""Parsing of operator selections such as ``"2"``, ``"1,3"`` or ``"1-3,5"``.

Indices are 1-based and refer to the list exactly as it was displayed.
"""

from __future__ import annotations

from typing import List, Sequence, TypeVar

from pg_br.core.errors import (
    InvalidRangeError,
    InvalidSelectionError,
    SelectionFormatError,
)

T = TypeVar("T")

FORMAT_HELP = (
    'Invalid selection format. Use numbers separated by commas (e.g., "1,3,5") '
    'or ranges (e.g., "1-3,5").'
)


def _parse_range(token: str, candidate_count: int) -> List[int]:
    parts = [part.strip() for part in token.split("-")]
    if len(parts) != 2 or not all(part.isdecimal() for part in parts):
        raise InvalidRangeError(f"Invalid range: {token}", token=token)
    start, end = int(parts[0]), int(parts[1])
    if start < 1 or end > candidate_count or start > end:
        raise InvalidRangeError(f"Invalid range: {token}", token=token)
    return list(range(start, end + 1))


def parse_selection(text: str, candidate_count: int) -> List[int]:
    """Return the selected 1-based indices in entry order, without duplicates.

    Raises a ``SelectionError`` subclass naming the offending token; nothing
    is selected when any token is invalid. Blank input selects nothing.
    """
    text = text.strip()
    if not text:
        return []

    indices: List[int] = []
    for raw_token in text.split(","):
        token = raw_token.strip()
        if "-" in token:
            indices.extend(_parse_range(token, candidate_count))
        elif token.isdecimal():
            index = int(token)
            if index < 1 or index > candidate_count:
                raise InvalidSelectionError(f"Invalid selection: {token}", token=token)
            indices.append(index)
        else:
            raise SelectionFormatError(FORMAT_HELP, token=token)

    return list(dict.fromkeys(indices))


def parse_single_selection(text: str, candidate_count: int) -> int:
    """Return one 1-based index, as used when restoring a single backup."""
    token = text.strip()
    if not token.isdecimal() or not 1 <= int(token) <= candidate_count:
        raise InvalidSelectionError(
            "Invalid selection. Please enter a valid number.", token=token
        )
    return int(token)


def select_artifacts(text: str, candidates: Sequence[T]) -> List[T]:
    """Map a selection onto *candidates*, the list that was shown to the operator."""
    return [candidates[index - 1] for index in parse_selection(text, len(candidates))]
