"""Tests for text_analysis.book module."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from text_analysis.book import (
    DEFAULT_DELIMITERS,
    ENCODING_ENV_VAR,
    MarkerNotFoundError,
    extract_content,
    find_content_bounds,
    get_encoding,
    gutenberg_markers,
    preview,
    read_file,
    read_files,
    tokenize,
)

if TYPE_CHECKING:
    from pathlib import Path

SAMPLE = "junk *** START *** Chapter 1. The cat sat. *** END *** trailer"


class TestReadFile:
    """Tests for read_file and read_files."""

    def test_read_existing_file(self, tmp_path: Path) -> None:
        """Test reading an existing file."""
        test_file = tmp_path / "book.txt"
        test_file.write_text("Hello world", encoding="utf-8")
        assert read_file(test_file) == "Hello world"

    def test_file_not_found(self) -> None:
        """Test that FileNotFoundError is raised for a missing file."""
        with pytest.raises(FileNotFoundError):
            read_file("/nonexistent/path/book.txt")

    def test_encoding_from_environment(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that the encoding can be configured via environment."""
        test_file = tmp_path / "latin.txt"
        test_file.write_bytes("café".encode("latin-1"))
        monkeypatch.setenv(ENCODING_ENV_VAR, "latin-1")
        assert get_encoding() == "latin-1"
        assert read_file(test_file) == "café"

    def test_default_encoding(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test the default encoding is UTF-8."""
        monkeypatch.delenv(ENCODING_ENV_VAR, raising=False)
        assert get_encoding() == "utf-8"

    def test_undecodable_file(self, tmp_path: Path) -> None:
        """Test that invalid UTF-8 raises UnicodeDecodeError."""
        test_file = tmp_path / "bad.txt"
        test_file.write_bytes(b"\xff\xfe\xfa")
        with pytest.raises(UnicodeDecodeError):
            read_file(test_file, encoding="utf-8")

    def test_read_files_keeps_books_separate(self, tmp_path: Path) -> None:
        """Test reading several files into (path, text) pairs."""
        first = tmp_path / "a.txt"
        second = tmp_path / "b.txt"
        first.write_text("alpha", encoding="utf-8")
        second.write_text("beta", encoding="utf-8")
        result = read_files([first, second])
        assert result == [(str(first), "alpha"), (str(second), "beta")]


class TestGutenbergMarkers:
    """Tests for gutenberg_markers function."""

    def test_builds_marker_lines(self) -> None:
        """Test the Frankenstein marker lines."""
        start, end = gutenberg_markers("Frankenstein")
        assert start == "*** START OF THIS PROJECT GUTENBERG EBOOK FRANKENSTEIN ***"
        assert end == "*** END OF THIS PROJECT GUTENBERG EBOOK FRANKENSTEIN ***"


class TestExtractContent:
    """Tests for extract_content and find_content_bounds."""

    def test_extracts_between_markers(self) -> None:
        """Test extracting the content between the two markers."""
        content = extract_content(SAMPLE, "*** START ***", "*** END ***")
        assert content == "Chapter 1. The cat sat."

    def test_without_strip(self) -> None:
        """Test that surrounding whitespace is kept when strip is False."""
        content = extract_content(SAMPLE, "*** START ***", "*** END ***", strip=False)
        assert content == " Chapter 1. The cat sat. "

    def test_bounds(self) -> None:
        """Test content slice positions."""
        bounds = find_content_bounds(SAMPLE, "*** START ***", "*** END ***")
        assert bounds is not None
        start, end = bounds
        assert SAMPLE[start:end] == " Chapter 1. The cat sat. "

    def test_bounds_missing_marker(self) -> None:
        """Test that missing markers give None bounds."""
        assert find_content_bounds(SAMPLE, "*** BEGIN ***", "*** END ***") is None
        assert find_content_bounds(SAMPLE, "*** START ***", "*** STOP ***") is None

    def test_missing_start_marker(self) -> None:
        """Test that a missing start marker raises MarkerNotFoundError."""
        with pytest.raises(MarkerNotFoundError) as exc_info:
            extract_content(SAMPLE, "*** BEGIN ***", "*** END ***")
        assert exc_info.value.kind == "start"
        assert exc_info.value.marker == "*** BEGIN ***"

    def test_missing_end_marker(self) -> None:
        """Test that a missing end marker raises MarkerNotFoundError."""
        with pytest.raises(MarkerNotFoundError) as exc_info:
            extract_content(SAMPLE, "*** START ***", "*** STOP ***")
        assert exc_info.value.kind == "end"

    def test_end_marker_before_start_marker(self) -> None:
        """Test that an end marker only counts after the start marker."""
        text = "END intro START body END trailer"
        assert extract_content(text, "START", "END") == "body"

    def test_end_marker_only_before_start(self) -> None:
        """Test that an end marker preceding the start is treated as missing."""
        with pytest.raises(MarkerNotFoundError) as exc_info:
            extract_content("END intro START body", "START", "END")
        assert exc_info.value.kind == "end"

    def test_is_lookup_error(self) -> None:
        """Test that MarkerNotFoundError can be caught as LookupError."""
        with pytest.raises(LookupError):
            extract_content("no markers", "START", "END")

    def test_fallback_to_full_text(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test the whole text is used and a warning logged when allowed."""
        with caplog.at_level(logging.WARNING):
            content = extract_content(
                "  no markers here  ",
                "START",
                "END",
                fallback_to_full_text=True,
            )
        assert content == "no markers here"
        assert "start marker not found" in caplog.text

    def test_case_insensitive_markers(self) -> None:
        """Test matching markers case-insensitively."""
        content = extract_content(
            SAMPLE, "*** start ***", "*** end ***", case_sensitive=False
        )
        assert content == "Chapter 1. The cat sat."


class TestTokenize:
    """Tests for tokenize function."""

    def test_default_delimiters(self) -> None:
        """Test splitting on the default delimiters."""
        text = "The cat,sat\non\r\nthe\tmat"
        assert tokenize(text) == ["the", "cat", "sat", "on", "the", "mat"]

    def test_default_delimiters_keep_punctuation(self) -> None:
        """Test that characters outside the delimiter set stay in tokens."""
        assert tokenize("Hello. World!") == ["hello.", "world!"]

    def test_custom_delimiters(self) -> None:
        """Test splitting on space and period."""
        assert tokenize("Chapter 1. The cat sat.", [" ", "."]) == [
            "chapter",
            "1",
            "the",
            "cat",
            "sat",
        ]

    def test_empty_tokens_dropped(self) -> None:
        """Test that consecutive delimiters produce no empty tokens."""
        assert tokenize("  a,, ,b  ") == ["a", "b"]

    def test_case_preserved(self) -> None:
        """Test disabling lowercasing."""
        assert tokenize("Hello World", lowercase=False) == ["Hello", "World"]

    def test_multi_character_delimiter(self) -> None:
        """Test a delimiter longer than one character."""
        assert tokenize("a--b-c", ["--"]) == ["a", "b-c"]

    def test_no_delimiters(self) -> None:
        """Test that without delimiters the whole text is one token."""
        assert tokenize("Hello World", []) == ["hello world"]
        assert tokenize("", []) == []

    def test_empty_text(self) -> None:
        """Test tokenizing an empty string."""
        assert tokenize("") == []

    def test_default_delimiter_set(self) -> None:
        """Test the default delimiter set."""
        assert set(DEFAULT_DELIMITERS) == {" ", ",", "\n", "\r", "\t"}


class TestPreview:
    """Tests for preview function."""

    def test_head_and_tail(self) -> None:
        """Test first and last characters."""
        assert preview("abcdefghij", head=3, tail=2) == ("abc", "ij")

    def test_longer_than_text(self) -> None:
        """Test previews longer than the text return the whole text."""
        assert preview("abc", head=10, tail=10) == ("abc", "abc")

    def test_zero(self) -> None:
        """Test zero-length previews."""
        assert preview("abc", head=0, tail=0) == ("", "")
