from __future__ import annotations

from typing import List, Sequence

from .prng import DPRNG


def bucket_counts(gen: DPRNG, buckets: int, draws: int) -> List[int]:
    """Histogram ``draws`` samples of ``gen.next()`` into equal-width buckets."""
    counts = [0] * buckets
    for _ in range(draws):
        counts[int(gen.next() * buckets)] += 1
    return counts


def chi_square(counts: Sequence[int]) -> float:
    """Pearson chi-square statistic of ``counts`` against a uniform expectation."""
    total = sum(counts)
    if not counts or total == 0:
        raise ValueError("chi-square needs at least one observation")
    expected = total / len(counts)
    return sum((c - expected) ** 2 / expected for c in counts)
