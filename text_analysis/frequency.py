"""Word frequency tables built from token sequences.

A frequency table is a ``Counter`` mapping each observed word to how many
times it occurred. Only observed words are ever keys, so lookups here
return ``None`` for absent words instead of the ``0`` that indexing a
``Counter`` would give.
"""

from __future__ import annotations

from collections import Counter
import logging
import multiprocessing as mp
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

_logger = logging.getLogger(__name__)


def build(tokens: Iterable[str]) -> Counter[str]:
    """Count how many times each token occurs.

    Args:
        tokens: Word tokens, in any order.

    Returns:
        Counter mapping each distinct token to its count (always >= 1).
    """
    return Counter(tokens)


def merge_tables(*tables: Counter[str]) -> Counter[str]:
    """Merge partial tables by adding the counts of matching words."""
    merged: Counter[str] = Counter()
    for table in tables:
        merged.update(table)
    return merged


def _partition(tokens: Sequence[str], chunk_size: int) -> list[Sequence[str]]:
    return [tokens[i : i + chunk_size] for i in range(0, len(tokens), chunk_size)]


def build_parallel(
    tokens: Sequence[str],
    *,
    workers: int = 2,
    chunk_size: int | None = None,
) -> Counter[str]:
    """Count tokens in partitions across worker processes, then merge.

    Produces exactly the same table as ``build``; counting is commutative so
    the partitioning never changes the result.

    Args:
        tokens: Word tokens to count.
        workers: Number of worker processes. 1 or less counts in-process.
        chunk_size: Tokens per partition (defaults to an even split).

    Returns:
        Counter with the merged counts.

    Raises:
        ValueError: If chunk_size is given and less than 1.
    """
    if chunk_size is not None and chunk_size < 1:
        msg = "chunk_size must be positive"
        raise ValueError(msg)
    if not tokens:
        return Counter()
    if chunk_size is None:
        chunk_size = max(1, -(-len(tokens) // max(workers, 1)))
    chunks = _partition(tokens, chunk_size)

    if workers <= 1 or len(chunks) == 1:
        return merge_tables(*(build(chunk) for chunk in chunks))

    _logger.info(
        "Counting %d tokens in %d chunks using %d workers",
        len(tokens),
        len(chunks),
        workers,
    )
    with mp.Pool(workers) as pool:
        partials = pool.map(build, chunks)
    return merge_tables(*partials)


def count(table: Counter[str], word: str) -> int | None:
    """Return how often a word occurred, or None if it never did."""
    return table.get(word)


def most_frequent(table: Counter[str]) -> tuple[str, int] | None:
    """Return the word with the highest count, or None for an empty table.

    Ties go to the lexicographically smallest word, so the answer does not
    depend on the order tokens were counted in.
    """
    if not table:
        return None
    return min(table.items(), key=lambda item: (-item[1], item[0]))


def top_words(table: Counter[str], n: int | None = None) -> list[tuple[str, int]]:
    """Return words ordered by count (descending), then alphabetically.

    Args:
        table: Frequency table.
        n: If provided, only return the first n entries.

    Returns:
        List of (word, count) pairs.
    """
    items = sorted(table.items(), key=lambda item: (-item[1], item[0]))
    return items if n is None else items[:n]


def size(table: Counter[str]) -> int:
    """Number of distinct words."""
    return len(table)


def total(table: Counter[str]) -> int:
    """Number of tokens that were counted."""
    return sum(table.values())


def relative_frequency(
    table: Counter[str], word: str, *, per: int = 1000
) -> float | None:
    """Return occurrences of a word per ``per`` tokens, or None if absent.

    Normalizing by the token total makes counts from books of different
    lengths comparable.
    """
    occurrences = count(table, word)
    if occurrences is None:
        return None
    return occurrences / total(table) * per
