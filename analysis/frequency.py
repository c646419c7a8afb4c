from __future__ import annotations

from collections import Counter
from typing import Iterable, Sequence

from analysis.models import OccurrenceEntry, Ranking
from analysis.tokenizer import word_length


def aggregate(words: Iterable[str]) -> Ranking:
    """
    Count each distinct word and rank the result.

    Entries are ordered ascending by (count, word) and then reversed as a
    whole, so equal counts come out with the words in descending order:

    >>> aggregate(["a", "b", "x", "c", "x", "a", "x", "z", "z"])
    [OccurrenceEntry(count=3, word='x'), OccurrenceEntry(count=2, word='z'), OccurrenceEntry(count=2, word='a'), OccurrenceEntry(count=1, word='c'), OccurrenceEntry(count=1, word='b')]
    """
    counts = Counter(words)
    entries = sorted(OccurrenceEntry(count, word) for word, count in counts.items())
    entries.reverse()
    return entries


def sum_occurrences(entries: Iterable[OccurrenceEntry]) -> int:
    return sum(e.count for e in entries)


def longest_word_length(entries: Sequence[OccurrenceEntry]) -> int:
    return max((word_length(e.word) for e in entries), default=0)
