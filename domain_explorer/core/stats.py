from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, Tuple


@dataclass(frozen=True)
class DomainStats:
    """
    Aggregate counts over a filtered domain list.

    - total: number of domains
    - by_length: (length, count) pairs, ascending by numeric length
    - by_letter: (first character upper-cased, count) pairs, ascending lexicographically
    """
    total: int = 0
    by_length: Tuple[Tuple[int, int], ...] = field(default_factory=tuple)
    by_letter: Tuple[Tuple[str, int], ...] = field(default_factory=tuple)

    def top_letters(self, n: int) -> Tuple[Tuple[str, int], ...]:
        return self.by_letter[:max(n, 0)]


def aggregate(filtered: Iterable[str]) -> DomainStats:
    length_counts: Counter[int] = Counter()
    letter_counts: Counter[str] = Counter()
    total = 0

    for domain in filtered:
        total += 1
        length_counts[len(domain)] += 1
        # empty strings never survive ingestion, skip rather than fail
        if domain:
            letter_counts[domain[0].upper()] += 1

    return DomainStats(
        total=total,
        by_length=tuple(sorted(length_counts.items())),
        by_letter=tuple(sorted(letter_counts.items())),
    )
