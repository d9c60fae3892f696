from __future__ import annotations
import re
from collections import Counter
from typing import Dict

from .errors import InputTooLongError, InvalidInputError

# Performance guard on the number of letters in a query, not a correctness limit
MAX_INPUT_LENGTH = 9

_NON_LETTER_RE = re.compile(r'[^a-z]')

LetterCount = Dict[str, int]


def normalize_query(raw: str) -> str:
    """Trim and lowercase a raw query. The result is the cache key."""
    return raw.strip().lower()


def strip_letters(normalized: str) -> str:
    return _NON_LETTER_RE.sub('', normalized)


def build_letter_count(raw: str, max_length: int = MAX_INPUT_LENGTH) -> LetterCount:
    letters = strip_letters(normalize_query(raw))
    if not letters:
        raise InvalidInputError("Please enter at least one letter.")
    if len(letters) > max_length:
        raise InputTooLongError(len(letters), max_length)
    return dict(Counter(letters))


def can_form(word: str, letter_count: LetterCount) -> bool:
    """
    True if `word` uses no letter more often than `letter_count` allows.
    Bails out on the first letter that goes over budget.
    """
    seen: Counter = Counter()
    for ch in word:
        seen[ch] += 1
        if seen[ch] > letter_count.get(ch, 0):
            return False
    return True
