from __future__ import annotations

from typing import List

import regex

from analysis.normalizer import normalize

DEFAULT_MIN_LENGTH = 3


def word_length(word: str) -> int:
    """Length in user-perceived characters (extended grapheme clusters)."""
    return len(regex.findall(r"\X", word))


def is_short_word(word: str, min_length: int = DEFAULT_MIN_LENGTH) -> bool:
    return word_length(word) < min_length


def tokenize(text: str, min_length: int = DEFAULT_MIN_LENGTH) -> List[str]:
    """
    Normalize text and split it into words on whitespace runs.

    Words shorter than ``min_length`` are dropped; the rest keep their order
    of appearance, duplicates included.
    """
    return [w for w in normalize(text).split() if not is_short_word(w, min_length)]
