"""Substring locator - finds where a pattern occurs inside a larger text.

All lookups report absence as ``None`` (or an empty list), never as an
exception, so callers always branch explicitly on the "not found" case.

Example:
    >>> find_first("Hello World", "world", case_sensitive=False)
    Occurrence(start=6, end=11)
    >>> find_all_starts("ababab", "ab")
    [0, 2, 4]
"""

from __future__ import annotations

from typing import NamedTuple


class Occurrence(NamedTuple):
    """A located match, as the half-open range ``[start, end)``."""

    start: int
    end: int

    def as_range(self) -> range:
        """Return the occurrence as a ``range`` of text positions."""
        return range(self.start, self.end)


def _matches_at(text: str, pattern: str, position: int) -> bool:
    """Case-insensitive comparison of ``pattern`` against ``text`` at ``position``.

    Characters are casefolded one at a time so that every position still
    indexes the original text.
    """
    for offset, char in enumerate(pattern):
        if text[position + offset].casefold() != char.casefold():
            return False
    return True


def find_first(
    text: str,
    pattern: str,
    *,
    case_sensitive: bool = True,
    start: int = 0,
) -> Occurrence | None:
    """Find the first (lowest-start) occurrence of a pattern.

    Args:
        text: The text to search.
        pattern: The substring to look for.
        case_sensitive: If False, compare characters case-insensitively.
        start: Only consider matches starting at or after this position.

    Returns:
        The first Occurrence, or None if the pattern is empty or absent.
    """
    start = max(start, 0)
    if not pattern or start >= len(text):
        return None

    if case_sensitive:
        index = text.find(pattern, start)
        if index == -1:
            return None
        return Occurrence(index, index + len(pattern))

    last_start = len(text) - len(pattern)
    for index in range(start, last_start + 1):
        if _matches_at(text, pattern, index):
            return Occurrence(index, index + len(pattern))
    return None


def find_first_start(
    text: str, pattern: str, *, case_sensitive: bool = True
) -> int | None:
    """Return the start position of the first occurrence, or None."""
    occurrence = find_first(text, pattern, case_sensitive=case_sensitive)
    return occurrence.start if occurrence is not None else None


def find_first_end(text: str, pattern: str, *, case_sensitive: bool = True) -> int | None:
    """Return the position right after the first occurrence, or None.

    Useful for slicing "everything after this marker".
    """
    occurrence = find_first(text, pattern, case_sensitive=case_sensitive)
    return occurrence.end if occurrence is not None else None


def find_all(text: str, pattern: str, *, case_sensitive: bool = True) -> list[Occurrence]:
    """Find every non-overlapping occurrence, left to right.

    After each match the scan resumes at the end of that match. The
    advance-by-one branch for a zero-width match is defensive only:
    ``find_first`` never returns one, since empty patterns are not found.

    Args:
        text: The text to search.
        pattern: The substring to look for.
        case_sensitive: If False, compare characters case-insensitively.

    Returns:
        Occurrences in strictly increasing start order (empty if none).
    """
    occurrences: list[Occurrence] = []
    cursor = 0
    while cursor < len(text):
        occurrence = find_first(
            text, pattern, case_sensitive=case_sensitive, start=cursor
        )
        if occurrence is None:
            break
        occurrences.append(occurrence)
        if occurrence.end > occurrence.start:
            cursor = occurrence.end
        else:
            cursor = occurrence.start + 1
    return occurrences


def find_all_starts(
    text: str, pattern: str, *, case_sensitive: bool = True
) -> list[int]:
    """Return the start positions of all non-overlapping occurrences."""
    return [occ.start for occ in find_all(text, pattern, case_sensitive=case_sensitive)]


def find_all_ranges(
    text: str, pattern: str, *, case_sensitive: bool = True
) -> list[range]:
    """Return all non-overlapping occurrences as ``range`` objects."""
    return [
        occ.as_range() for occ in find_all(text, pattern, case_sensitive=case_sensitive)
    ]


def count_occurrences(text: str, pattern: str, *, case_sensitive: bool = True) -> int:
    """Count non-overlapping occurrences of a pattern."""
    return len(find_all(text, pattern, case_sensitive=case_sensitive))
