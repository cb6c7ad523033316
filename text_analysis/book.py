"""Loading book text, stripping boilerplate and splitting it into words.

Plain-text books (e.g. from Project Gutenberg) wrap the actual content in a
header and footer. The content is delimited by two literal marker lines,
located with the substring locator.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
import re
from typing import TYPE_CHECKING

from text_analysis.locator import find_first, find_first_end

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

_logger = logging.getLogger(__name__)

# Characters the original exercise split on
DEFAULT_DELIMITERS: tuple[str, ...] = (" ", ",", "\n", "\r", "\t")

DEFAULT_ENCODING = "utf-8"
ENCODING_ENV_VAR = "TEXT_ANALYSIS_ENCODING"

DEFAULT_PREVIEW_CHARS = 800


class MarkerNotFoundError(LookupError):
    """A required content boundary marker is missing from the text."""

    def __init__(self, marker: str, kind: str) -> None:
        """Initialize the error.

        Args:
            marker: The marker text that could not be found.
            kind: Which boundary it delimits, "start" or "end".
        """
        super().__init__(f"{kind} marker not found: {marker!r}")
        self.marker = marker
        self.kind = kind


def get_encoding() -> str:
    """Return the text encoding used for reading books."""
    return os.environ.get(ENCODING_ENV_VAR, DEFAULT_ENCODING)


def read_file(filepath: str | Path, *, encoding: str | None = None) -> str:
    """Read text content from a file.

    Args:
        filepath: Path to the file to read.
        encoding: Text encoding; defaults to ``get_encoding()``.

    Returns:
        The text content of the file.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        UnicodeDecodeError: If the file can't be decoded.
    """
    path = Path(filepath)
    text = path.read_text(encoding=encoding or get_encoding())
    _logger.info("Read %d characters from %s", len(text), path)
    return text


def read_files(filepaths: Iterable[str | Path]) -> list[tuple[str, str]]:
    """Read several books, keeping each one separate.

    Returns:
        List of (path, text) pairs in input order.
    """
    return [(str(filepath), read_file(filepath)) for filepath in filepaths]


def gutenberg_markers(title: str) -> tuple[str, str]:
    """Build the Project Gutenberg start/end marker lines for a book title."""
    name = title.strip().upper()
    return (
        f"*** START OF THIS PROJECT GUTENBERG EBOOK {name} ***",
        f"*** END OF THIS PROJECT GUTENBERG EBOOK {name} ***",
    )


def find_content_bounds(
    text: str,
    start_marker: str,
    end_marker: str,
    *,
    case_sensitive: bool = True,
) -> tuple[int, int] | None:
    """Locate the content between two markers.

    The content starts right after the first start marker and ends where the
    first end marker following it begins.

    Returns:
        (start, end) slice positions, or None if either marker is missing.
    """
    content_start = find_first_end(text, start_marker, case_sensitive=case_sensitive)
    if content_start is None:
        return None
    end = find_first(
        text, end_marker, case_sensitive=case_sensitive, start=content_start
    )
    if end is None:
        return None
    return content_start, end.start


def extract_content(
    text: str,
    start_marker: str,
    end_marker: str,
    *,
    case_sensitive: bool = True,
    strip: bool = True,
    fallback_to_full_text: bool = False,
) -> str:
    """Return the book content between the start and end markers.

    Args:
        text: Full text, including header and footer boilerplate.
        start_marker: Literal line that precedes the content.
        end_marker: Literal line that follows the content.
        case_sensitive: If False, match the markers case-insensitively.
        strip: Strip surrounding whitespace from the extracted content.
        fallback_to_full_text: Return the whole text instead of raising when
            a marker is missing.

    Returns:
        The content between the markers.

    Raises:
        MarkerNotFoundError: If a marker is missing and no fallback is allowed.
    """
    bounds = find_content_bounds(
        text, start_marker, end_marker, case_sensitive=case_sensitive
    )
    if bounds is None:
        if find_first(text, start_marker, case_sensitive=case_sensitive) is None:
            missing = MarkerNotFoundError(start_marker, "start")
        else:
            missing = MarkerNotFoundError(end_marker, "end")
        if not fallback_to_full_text:
            raise missing
        _logger.warning("%s; using the whole text as content", missing)
        content = text
    else:
        content_start, content_end = bounds
        content = text[content_start:content_end]

    return content.strip() if strip else content


def tokenize(
    text: str,
    delimiters: Sequence[str] = DEFAULT_DELIMITERS,
    *,
    lowercase: bool = True,
) -> list[str]:
    """Split text into word tokens.

    Args:
        text: Text to split.
        delimiters: Characters (or strings) that separate words.
        lowercase: If True, lowercase every token.

    Returns:
        Non-empty tokens in text order.
    """
    separators = [d for d in delimiters if d]
    if separators:
        # Longest first so multi-character delimiters win over their prefixes
        pattern = "|".join(
            re.escape(d) for d in sorted(separators, key=len, reverse=True)
        )
        tokens = [token for token in re.split(pattern, text) if token]
    else:
        tokens = [text] if text else []

    if lowercase:
        tokens = [token.lower() for token in tokens]
    return tokens


def preview(
    text: str,
    *,
    head: int = DEFAULT_PREVIEW_CHARS,
    tail: int = DEFAULT_PREVIEW_CHARS,
) -> tuple[str, str]:
    """Return the first ``head`` and last ``tail`` characters of a text.

    Handy for spotting where the boilerplate ends before choosing markers.
    """
    return text[: max(head, 0)], text[max(len(text) - max(tail, 0), 0) :]
