from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import List, Sequence

from analysis.frequency import sum_occurrences
from analysis.models import Distribution, OccurrenceEntry

BAR_SCALE = 10


class EmptyPrefixError(ValueError):
    """Raised when a histogram is requested for entries totalling zero."""


def bar_length(count: int, total: int, scale: int = BAR_SCALE) -> int:
    """
    Share of ``total`` scaled to ``scale`` markers, rounded half away from zero.

    The float is converted to Decimal exactly, so values such as 2.5 round
    up instead of following banker's rounding.
    """
    relative = Decimal(count / total * scale)
    return int(relative.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def render_distribution(
    prefix: Sequence[OccurrenceEntry],
    marker: str = "|",
    scale: int = BAR_SCALE,
) -> List[Distribution]:
    """
    Turn ranked entries into bars proportional to their share of the prefix.

    Only the counts in ``prefix`` make up the total, not the whole ranking.
    """
    total = sum_occurrences(prefix)
    if total == 0:
        raise EmptyPrefixError("cannot render a distribution for a zero total")
    return [
        Distribution(marker * bar_length(e.count, total, scale), e.word)
        for e in prefix
    ]
