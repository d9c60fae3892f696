from __future__ import annotations
from typing import Dict, Iterable, List, Tuple

GroupedResult = Dict[int, List[str]]


def capitalize(word: str) -> str:
    if not word:
        return word
    return word[0].upper() + word[1:]


def organize(words: Iterable[str]) -> Tuple[GroupedResult, int]:
    """
    Group sorted words by length, capitalizing each one.
    Order inside a group follows the input; groups come out by ascending length.
    """
    grouped: GroupedResult = {}
    total = 0
    for word in words:
        grouped.setdefault(len(word), []).append(capitalize(word))
        total += 1
    return {length: grouped[length] for length in sorted(grouped)}, total
