"""Hot / warm / cold classification of lottery numbers.

Counts how often each number of the pool was drawn and labels it by rank:
the most frequent ``hot_fraction`` of the pool is hot, the least frequent
``cold_fraction`` is cold, everything in between is warm. A number that
never appeared is always cold.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

DEFAULT_HOT_FRACTION = 1 / 3
DEFAULT_COLD_FRACTION = 1 / 3


class Temperature(str, Enum):
    HOT = "hot"
    WARM = "warm"
    COLD = "cold"


@dataclass(frozen=True)
class NumberStat:
    number: int
    count: int
    temperature: Temperature


def count_occurrences(draws: Iterable[Iterable[int]], total_numbers: int) -> dict[int, int]:
    """Occurrences of each number 1..total_numbers. Out-of-pool values are skipped."""

    counts: dict[int, int] = {n: 0 for n in range(1, max(0, int(total_numbers)) + 1)}
    for drawn in draws:
        for n in drawn or ():
            n = int(n)
            if n in counts:
                counts[n] += 1
    return counts


def band_sizes(total_numbers: int, hot_fraction: float, cold_fraction: float) -> tuple[int, int]:
    """Number of hot and cold slots for a pool of ``total_numbers``."""

    total = max(0, int(total_numbers))
    # Absorb float error: 60 * (1/3) must floor to 20.
    hot = int(total * float(hot_fraction) + 1e-9)
    cold = int(total * float(cold_fraction) + 1e-9)
    if hot + cold > total:
        cold = total - hot
    return hot, cold


def classify(
    draws: Iterable[Iterable[int]],
    total_numbers: int,
    *,
    hot_fraction: float = DEFAULT_HOT_FRACTION,
    cold_fraction: float = DEFAULT_COLD_FRACTION,
) -> dict[int, NumberStat]:
    """Classify every number of the pool.

    Args:
        draws: drawn-number sets, in any order.
        total_numbers: pool size N; numbers are 1..N.
        hot_fraction: share of the pool (by rank) labelled hot.
        cold_fraction: share of the pool (by rank) labelled cold.

    Returns:
        Mapping number -> NumberStat with exactly N entries, ordered by number.
    """

    counts = count_occurrences(draws, total_numbers)
    hot_size, cold_size = band_sizes(len(counts), hot_fraction, cold_fraction)
    warm_end = len(counts) - cold_size

    # Most frequent first; ties broken by the lower number.
    ranked = sorted(counts.items(), key=lambda kv: (-kv[1], kv[0]))

    temperatures: dict[int, Temperature] = {}
    for rank, (number, count) in enumerate(ranked):
        if count == 0 or rank >= warm_end:
            temperatures[number] = Temperature.COLD
        elif rank < hot_size:
            temperatures[number] = Temperature.HOT
        else:
            temperatures[number] = Temperature.WARM

    return {
        number: NumberStat(number=number, count=count, temperature=temperatures[number])
        for number, count in counts.items()
    }


def numbers_by_temperature(stats: Iterable[NumberStat]) -> dict[Temperature, list[int]]:
    """Group numbers by label, most frequent first inside each group."""

    ordered = sorted(stats, key=lambda s: (-s.count, s.number))
    grouped: dict[Temperature, list[int]] = {t: [] for t in Temperature}
    for stat in ordered:
        grouped[Temperature(stat.temperature)].append(stat.number)
    return grouped
