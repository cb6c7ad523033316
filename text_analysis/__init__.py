"""Text analysis package for plain-text books.

This package provides tools for:
1. Locating substrings such as boilerplate markers (locator module)
2. Loading books, stripping boilerplate and tokenizing (book module)
3. Counting word frequencies (frequency module)
4. Looking up curated word lists like "scary" and "happy" words (word_lists module)
5. Charting word list counts (chart module)
6. Running the whole pipeline from the command line (analyzer module)

Example usage:
    from text_analysis.analyzer import analyze_book
    from text_analysis.frequency import count
    from text_analysis.word_lists import SCARY_WORDS, lookup_words

    text = "junk *** START *** Chapter 1. The cat sat. *** END *** trailer"
    analysis = analyze_book(
        text,
        "*** START ***",
        "*** END ***",
        delimiters=[" ", "."],
    )
    print(count(analysis.table, "cat"))  # 1
    print(count(analysis.table, "junk"))  # None
    print(lookup_words(analysis.table, SCARY_WORDS))
"""

from __future__ import annotations
