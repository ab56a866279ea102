from __future__ import annotations

import logging
from typing import List

from .data_models import EXPECTED_NUM_ENTRIES, ItemKind, PowerupConfigError, WeightedEntry

logger = logging.getLogger(__name__)

SINGLE_COUNT = 1
MULTI_COUNT = 3


def parse_row(text: str, count: int) -> List[WeightedEntry]:
    """
    Converts one space separated weight row into entries in catalog order.

    Token ``i`` is assigned to concrete kind ``i + 1``; tokens past the end
    of the catalog are assigned to ``ItemKind.NONE``.
    """
    if count not in (SINGLE_COUNT, MULTI_COUNT):
        raise ValueError(f"Pickup count must be {SINGLE_COUNT} or {MULTI_COUNT}, got {count}")

    entries: List[WeightedEntry] = []
    index = 1
    for token in (text or "").split():
        try:
            weight = int(token)
        except ValueError as exc:
            raise PowerupConfigError(f"Invalid weight '{token}' in row '{text}'") from exc
        entries.append(WeightedEntry(weight=weight, count=count, kind=ItemKind.from_index(index)))
        index += 1
    return entries


def parse_bucket_entries(single: str, multi: str, label: str = "weights") -> List[WeightedEntry]:
    """
    Builds the raw entry list of one distance bucket: single row first,
    then multi row.

    Short rows are padded with empty NONE entries so the bucket can still be
    built. Long rows are reported but kept as they are.
    """
    entries = parse_row(single, SINGLE_COUNT) + parse_row(multi, MULTI_COUNT)

    if len(entries) < EXPECTED_NUM_ENTRIES:
        logger.error(
            "Not enough entries for '%s' (%d of %d), padding with empty entries.",
            label,
            len(entries),
            EXPECTED_NUM_ENTRIES,
        )
        while len(entries) < EXPECTED_NUM_ENTRIES:
            entries.append(WeightedEntry(weight=0, count=0, kind=ItemKind.NONE))
    elif len(entries) > EXPECTED_NUM_ENTRIES:
        logger.error(
            "Too many entries for '%s' (%d of %d).",
            label,
            len(entries),
            EXPECTED_NUM_ENTRIES,
        )

    return entries
