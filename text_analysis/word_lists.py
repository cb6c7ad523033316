"""Curated word lists and lookups of their counts in a frequency table."""

from __future__ import annotations

from typing import TYPE_CHECKING

from text_analysis.book import read_file
from text_analysis.frequency import count

if TYPE_CHECKING:
    from collections import Counter
    from collections.abc import Iterable, Mapping, Sequence
    from pathlib import Path

SCARY_WORDS: tuple[str, ...] = (
    "wretched",
    "unfortunate",
    "horrible",
    "darkness",
    "miserable",
    "sad",
    "unhappy",
)

HAPPY_WORDS: tuple[str, ...] = ("happy", "beautiful")

DEFAULT_WORD_LISTS: dict[str, tuple[str, ...]] = {
    "scary": SCARY_WORDS,
    "happy": HAPPY_WORDS,
}


def lookup_words(table: Counter[str], words: Iterable[str]) -> dict[str, int | None]:
    """Look up the count of each queried word.

    Args:
        table: Frequency table to query.
        words: Words of interest. Duplicates are collapsed, order is kept.

    Returns:
        Mapping of each word to its count, or None if it never occurs.
    """
    return {word: count(table, word) for word in words}


def compare_word_lists(
    table: Counter[str],
    lists: Mapping[str, Sequence[str]],
) -> dict[str, dict[str, int | None]]:
    """Run ``lookup_words`` for several named lists against one table."""
    return {name: lookup_words(table, words) for name, words in lists.items()}


def list_total(report: Mapping[str, int | None]) -> int:
    """Sum the counts of the words that were found."""
    return sum(value for value in report.values() if value is not None)


def load_word_list(filepath: str | Path) -> list[str]:
    """Load a word list with one word per line, skipping blank lines."""
    content = read_file(filepath)
    return [line.strip() for line in content.splitlines() if line.strip()]
