from __future__ import annotations

import logging
from typing import Iterable, List, Sequence, Tuple

from .data_models import DistanceBucket, ItemKind, ModeTable, PowerupConfigError, WeightedEntry

logger = logging.getLogger(__name__)


def build_bucket(distance_threshold: float, raw_entries: Iterable[WeightedEntry]) -> DistanceBucket:
    """
    Drops empty and NONE entries, then turns raw weights into running totals.

    Input order is kept, so the resulting weights are strictly ascending and
    each entry owns the range ``[previous total, own total)``.
    """
    merged: List[WeightedEntry] = []
    for entry in raw_entries:
        if entry.weight < 1:
            continue
        if entry.kind is ItemKind.NONE:
            continue

        if not merged:
            merged.append(entry)
        else:
            merged.append(entry.merge(merged[-1]))

    bucket = DistanceBucket(distance_threshold=float(distance_threshold), entries=tuple(merged))
    if not bucket.is_samplable:
        logger.warning("Bucket at distance %.1f has no positive weights.", bucket.distance_threshold)
    return bucket


def assemble_table(
    mode_class: str,
    raw_buckets: Sequence[Tuple[float, Sequence[WeightedEntry]]],
) -> ModeTable:
    """Builds every bucket of a weight list, keeping configuration order."""
    buckets: List[DistanceBucket] = []
    for distance, raw_entries in raw_buckets:
        bucket = build_bucket(distance, raw_entries)
        if buckets:
            previous = buckets[-1].distance_threshold
            if bucket.distance_threshold < previous:
                message = (
                    f"Buckets of '{mode_class}' are out of order: "
                    f"{bucket.distance_threshold} listed after {previous}"
                )
                logger.error(message)
                raise PowerupConfigError(message)
            if bucket.distance_threshold == previous:
                logger.warning(
                    "Duplicate distance %.1f in '%s'; the later bucket wins.",
                    previous,
                    mode_class,
                )
        buckets.append(bucket)

    return ModeTable(mode_class=mode_class, buckets=tuple(buckets))
