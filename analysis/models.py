from typing import List, NamedTuple


class OccurrenceEntry(NamedTuple):
    count: int
    word: str


class Distribution(NamedTuple):
    bar: str
    word: str


# Distinct words, highest count first (ties: word descending)
Ranking = List[OccurrenceEntry]
