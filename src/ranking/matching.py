"""
Literal term matching helpers for relevance scoring.

Terms are user input and may contain regex metacharacters ("c++", "(draft)").
Every pattern built here goes through re.escape, so a term is always matched
as a literal string.

Whole-word matching does not rely on the regex engine's \\b (which also treats
digits and underscores as word characters). A match is whole-word iff the
characters immediately before and after the span, when present, are not ASCII
letters.
"""

import re
import string
from functools import lru_cache
from typing import Pattern

ASCII_LETTERS = frozenset(string.ascii_letters)


@lru_cache(maxsize=1024)
def literal_pattern(term: str) -> Pattern[str]:
    """Compile a term as a literal (escaped) pattern"""
    return re.compile(re.escape(term))


def _is_letter_at(text: str, index: int) -> bool:
    return 0 <= index < len(text) and text[index] in ASCII_LETTERS


def contains_whole_word(text: str, term: str) -> bool:
    """
    Check whether term occurs in text bounded by non-letters on both sides.

    All occurrences are examined (including overlapping ones), so
    "cats cat" contains the whole word "cat" even though the first
    occurrence is part of "cats".

    Examples:
        >>> contains_whole_word("monsoon diaries", "monsoon")
        True
        >>> contains_whole_word("monsoons", "monsoon")
        False
        >>> contains_whole_word("web3 tips", "web")
        True
    """
    if not term:
        return False

    start = text.find(term)
    while start != -1:
        end = start + len(term)
        if not _is_letter_at(text, start - 1) and not _is_letter_at(text, end):
            return True
        start = text.find(term, start + 1)

    return False


def count_occurrences(text: str, term: str) -> int:
    """Count non-overlapping literal occurrences of term in text"""
    if not term or not text:
        return 0
    return len(literal_pattern(term).findall(text))
