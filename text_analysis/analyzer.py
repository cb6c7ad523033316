#!/usr/bin/env python3
"""Book analyzer - strips boilerplate from a book and reports word usage.

Usage:
    # From raw text
    python -m text_analysis.analyzer --text "Hello world hello"

    # A Project Gutenberg book, content between its START/END marker lines
    python -m text_analysis.analyzer --file frankenstein.txt \
        --gutenberg-title Frankenstein

    # Explicit markers, falling back to the whole text if one is missing
    python -m text_analysis.analyzer --file book.txt \
        --start-marker "CHAPTER I" --end-marker "THE END" --allow-missing-markers

    # Compare several books, counts per 1000 words, and plot the word lists
    python -m text_analysis.analyzer --files frankenstein.txt prideandprejudice.txt \
        --relative --plot word_lists.png

    # Own word list instead of the built-in scary/happy lists
    python -m text_analysis.analyzer --file book.txt --words ghost fear \
        --no-default-lists

    # Look at the start and end of the raw text to pick markers
    python -m text_analysis.analyzer --file book.txt --peek 800
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys
from typing import TYPE_CHECKING, NamedTuple

from text_analysis.book import (
    DEFAULT_DELIMITERS,
    MarkerNotFoundError,
    extract_content,
    gutenberg_markers,
    preview,
    read_file,
    read_files,
    tokenize,
)
from text_analysis.frequency import (
    build,
    most_frequent,
    relative_frequency,
    size,
    top_words,
    total,
)
from text_analysis.word_lists import (
    DEFAULT_WORD_LISTS,
    compare_word_lists,
    list_total,
    load_word_list,
)

if TYPE_CHECKING:
    from collections import Counter
    from collections.abc import Mapping, Sequence

_logger = logging.getLogger(__name__)


class BookAnalysis(NamedTuple):
    """Result of analyzing one book."""

    content: str
    tokens: list[str]
    table: Counter[str]


def analyze_book(
    text: str,
    start_marker: str | None = None,
    end_marker: str | None = None,
    *,
    delimiters: Sequence[str] = DEFAULT_DELIMITERS,
    case_sensitive: bool = False,
    fallback_to_full_text: bool = False,
) -> BookAnalysis:
    """Extract a book's content, tokenize it and count the words.

    Args:
        text: Full text of the book.
        start_marker: Line preceding the content (None: no boilerplate).
        end_marker: Line following the content (None: no boilerplate).
        delimiters: Characters that separate words.
        case_sensitive: If False, lowercase all words before counting.
        fallback_to_full_text: Use the whole text if a marker is missing.

    Returns:
        BookAnalysis with the content, its tokens and their frequency table.

    Raises:
        MarkerNotFoundError: If a marker is missing and no fallback is allowed.
        ValueError: If only one of the two markers is given.
    """
    if (start_marker is None) != (end_marker is None):
        msg = "start_marker and end_marker must be given together"
        raise ValueError(msg)

    if start_marker is not None and end_marker is not None:
        content = extract_content(
            text,
            start_marker,
            end_marker,
            fallback_to_full_text=fallback_to_full_text,
        )
    else:
        content = text.strip()

    tokens = tokenize(content, delimiters, lowercase=not case_sensitive)
    table = build(tokens)
    _logger.info("Counted %d tokens, %d distinct words", len(tokens), size(table))
    return BookAnalysis(content=content, tokens=tokens, table=table)


def format_results(
    word_counts: Counter[str],
    *,
    top_n: int | None = None,
) -> str:
    """Format word frequency results as a table.

    Args:
        word_counts: Frequency table.
        top_n: If provided, only show the top N words.

    Returns:
        Formatted string table with results.
    """
    total_words = total(word_counts)

    if total_words == 0:
        return "No words found in input."

    items = top_words(word_counts, top_n)

    max_word_len = max(len(word) for word, _ in items) if items else 4
    max_word_len = max(max_word_len, 4)  # "Word" header

    max_count = max(count for _, count in items) if items else 0
    count_width = max(len(str(max_count)), 5)  # "Count" header

    lines = []
    lines.append(f"Total words: {total_words}")
    lines.append(f"Unique words: {size(word_counts)}")
    top = most_frequent(word_counts)
    if top is not None:
        lines.append(f"Most frequent: {top[0]} ({top[1]})")
    lines.append("")

    header = f"{'Word':<{max_word_len}}  {'Count':>{count_width}}  {'Percentage':>10}"
    lines.append(header)
    lines.append("-" * len(header))

    for word, count in items:
        percentage = (count / total_words) * 100
        lines.append(
            f"{word:<{max_word_len}}  {count:>{count_width}}  {percentage:>9.2f}%"
        )

    return "\n".join(lines)


def format_word_lists(
    word_counts: Counter[str],
    lists: Mapping[str, Sequence[str]],
    *,
    relative: bool = False,
) -> str:
    """Format the counts of curated word lists.

    Args:
        word_counts: Frequency table.
        lists: Word list name -> words of interest.
        relative: Also show occurrences per 1000 words.

    Returns:
        Formatted string, one section per list.
    """
    reports = compare_word_lists(word_counts, lists)
    lines: list[str] = []
    for name, report in reports.items():
        lines.append(f"{name} words (total: {list_total(report)})")
        width = max((len(word) for word in report), default=4)
        for word, count in report.items():
            if count is None:
                lines.append(f"  {word:<{width}}  not found")
                continue
            line = f"  {word:<{width}}  {count}"
            if relative:
                per_thousand = relative_frequency(word_counts, word)
                line += f"  ({per_thousand:.3f} per 1000 words)"
            lines.append(line)
        lines.append("")
    return "\n".join(lines).rstrip()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Analyze word usage in a book.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    input_group = parser.add_mutually_exclusive_group(required=True)
    input_group.add_argument(
        "--text",
        "-t",
        type=str,
        help="Raw text to analyze",
    )
    input_group.add_argument(
        "--file",
        "-f",
        type=str,
        help="Path to a book to analyze",
    )
    input_group.add_argument(
        "--files",
        "-F",
        nargs="+",
        type=str,
        help="Paths to several books, each analyzed separately",
    )

    marker_group = parser.add_mutually_exclusive_group()
    marker_group.add_argument(
        "--gutenberg-title",
        "-g",
        type=str,
        help="Use the Project Gutenberg START/END lines for this title",
    )
    marker_group.add_argument(
        "--start-marker",
        type=str,
        help="Line that precedes the book content",
    )
    parser.add_argument(
        "--end-marker",
        type=str,
        help="Line that follows the book content",
    )
    parser.add_argument(
        "--allow-missing-markers",
        action="store_true",
        help="Analyze the whole text when a marker is missing",
    )

    parser.add_argument(
        "--delimiters",
        "-d",
        type=str,
        default=None,
        help="Characters to split words on (default: space, comma, CR, LF, tab)",
    )
    parser.add_argument(
        "--case-sensitive",
        "-c",
        action="store_true",
        help="Do not lowercase words (default: lowercase)",
    )
    parser.add_argument(
        "--top",
        "-n",
        type=int,
        default=None,
        help="Show only the top N most frequent words",
    )

    parser.add_argument(
        "--words",
        "-w",
        nargs="+",
        type=str,
        help="Extra words to look up",
    )
    parser.add_argument(
        "--words-file",
        "-W",
        type=str,
        help="File with extra words to look up (one per line)",
    )
    parser.add_argument(
        "--no-default-lists",
        action="store_true",
        help="Skip the built-in scary/happy word lists",
    )
    parser.add_argument(
        "--relative",
        "-r",
        action="store_true",
        help="Also show word list counts per 1000 words",
    )

    parser.add_argument(
        "--peek",
        type=int,
        default=None,
        help="Only print the first and last N characters of the raw text",
    )
    parser.add_argument(
        "--plot",
        "-p",
        type=str,
        help="Save a bar chart of the word lists to this PNG file",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=str,
        help="Output file path (default: print to stdout)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser


def _word_lists_from_args(args: argparse.Namespace) -> dict[str, Sequence[str]]:
    lists: dict[str, Sequence[str]] = {}
    if not args.no_default_lists:
        lists.update(DEFAULT_WORD_LISTS)
    custom: list[str] = list(args.words or [])
    if args.words_file:
        custom.extend(load_word_list(args.words_file))
    if custom:
        if not args.case_sensitive:
            custom = [word.lower() for word in custom]
        lists["custom"] = custom
    return lists


def _markers_from_args(args: argparse.Namespace) -> tuple[str | None, str | None]:
    if args.gutenberg_title:
        return gutenberg_markers(args.gutenberg_title)
    return args.start_marker, args.end_marker


def _chart_labels(labels: Sequence[str]) -> dict[str, str]:
    """Chart label per book: its file stem, or the full path if stems repeat."""
    stems = [Path(label).stem for label in labels]
    return {
        label: stem if stems.count(stem) == 1 else label
        for label, stem in zip(labels, stems)
    }


def _format_peek(label: str, text: str, chars: int) -> str:
    head, tail = preview(text, head=chars, tail=chars)
    return "\n".join(
        [
            f"=== {label}: first {len(head)} characters ===",
            head,
            f"=== {label}: last {len(tail)} characters ===",
            tail,
        ]
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the book analyzer.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    if args.gutenberg_title and args.end_marker:
        parser.error("--gutenberg-title cannot be combined with --end-marker")
    start_marker, end_marker = _markers_from_args(args)
    if (start_marker is None) != (end_marker is None):
        parser.error("--start-marker and --end-marker must be used together")
    if args.top is not None and args.top < 1:
        parser.error("--top must be at least 1")

    delimiters = tuple(args.delimiters) if args.delimiters else DEFAULT_DELIMITERS

    try:
        if args.text is not None:
            books = [("text", args.text)]
        elif args.file:
            books = [(args.file, read_file(args.file))]
        else:  # args.files
            books = read_files(args.files)

        if args.peek is not None:
            result = "\n\n".join(
                _format_peek(label, text, args.peek) for label, text in books
            )
        else:
            lists = _word_lists_from_args(args)
            sections: list[str] = []
            reports: dict[str, dict[str, int | None]] = {}
            chart_labels = _chart_labels([label for label, _ in books])
            for label, text in books:
                analysis = analyze_book(
                    text,
                    start_marker,
                    end_marker,
                    delimiters=delimiters,
                    case_sensitive=args.case_sensitive,
                    fallback_to_full_text=args.allow_missing_markers,
                )
                section = [format_results(analysis.table, top_n=args.top)]
                if lists:
                    section.append(
                        format_word_lists(
                            analysis.table, lists, relative=args.relative
                        )
                    )
                body = "\n\n".join(section)
                if len(books) > 1:
                    body = f"=== {label} ===\n{body}"
                sections.append(body)
                for name, report in compare_word_lists(analysis.table, lists).items():
                    key = (
                        name
                        if len(books) == 1
                        else f"{chart_labels[label]}: {name}"
                    )
                    reports[key] = report
            result = "\n\n".join(sections)

            if args.plot:
                # Imported lazily so text-only runs don't load matplotlib
                from text_analysis.chart import create_word_list_chart, save_chart

                fig = create_word_list_chart(reports, title="Word list counts")
                save_chart(fig, args.plot)
                print(f"Chart written to {args.plot}")  # noqa: T201

        if args.output:
            Path(args.output).write_text(result, encoding="utf-8")
            print(f"Output written to {args.output}")  # noqa: T201
        else:
            print(result)  # noqa: T201

    except FileNotFoundError as e:
        print(f"Error: File not found - {e}", file=sys.stderr)  # noqa: T201
        return 1
    except UnicodeDecodeError as e:
        print(f"Error: Could not decode file - {e}", file=sys.stderr)  # noqa: T201
        return 1
    except MarkerNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)  # noqa: T201
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
