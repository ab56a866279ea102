"""
Deterministic powerup selection.

Nothing in here draws random numbers. Callers pass the 64 bit value in, so
every peer replaying the same values grants the same items.
"""

from __future__ import annotations

from bisect import bisect_right
from operator import attrgetter, index
from typing import Tuple

from .data_models import (
    DistanceBucket,
    EmptyBucketError,
    ItemKind,
    ModeTable,
    NoMatchingBucketError,
    WeightedEntry,
)

UINT64_LIMIT = 1 << 64


def select_bucket(table: ModeTable, distance: float) -> DistanceBucket:
    """Returns the bucket with the greatest threshold not above ``distance``."""
    for bucket in reversed(table.buckets):
        if distance >= bucket.distance_threshold:
            return bucket
    raise NoMatchingBucketError(
        f"No bucket in '{table.mode_class}' covers distance {distance} "
        f"(thresholds: {list(table.thresholds)})"
    )


def reduce_random(bucket: DistanceBucket, random_value: int) -> int:
    try:
        value = index(random_value)
    except TypeError as exc:
        raise ValueError(f"random_value must be an integer, got {random_value!r}") from exc
    if not 0 <= value < UINT64_LIMIT:
        raise ValueError(f"random_value must fit in an unsigned 64 bit integer, got {value}")

    total = bucket.total
    if total == 0:
        raise EmptyBucketError(
            f"Bucket at distance {bucket.distance_threshold} has no positive weights"
        )
    return value % total


def sample_bucket(bucket: DistanceBucket, random_value: int) -> WeightedEntry:
    reduced = reduce_random(bucket, random_value)
    # First running total above the reduced value.
    position = bisect_right(bucket.entries, reduced, key=attrgetter("weight"))
    return bucket.entries[position]


def sample(table: ModeTable, distance: float, random_value: int) -> WeightedEntry:
    return sample_bucket(select_bucket(table, distance), random_value)


def get_random_powerup(table: ModeTable, distance: float, random_value: int) -> Tuple[ItemKind, int]:
    entry = sample(table, distance, random_value)
    return entry.kind, entry.count
