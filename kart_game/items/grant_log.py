from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

import numpy as np

from .data_models import ItemKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GrantRecord:
    tick: int
    distance: float
    random_value: int
    reduced_value: int
    kind: ItemKind
    count: int


class GrantLog:
    def __init__(self) -> None:
        self.records: List[GrantRecord] = []

    def record(self, record: GrantRecord) -> None:
        logger.debug(
            "Tick %d random %d (%d) distance %.2f item %s x%d",
            record.tick,
            record.reduced_value,
            record.random_value,
            record.distance,
            record.kind.value,
            record.count,
        )
        self.records.append(record)

    def export(self) -> Sequence[GrantRecord]:
        return tuple(self.records)

    def clear(self) -> None:
        self.records.clear()

    def counts(self) -> Dict[Tuple[ItemKind, int], int]:
        return dict(Counter((record.kind, record.count) for record in self.records))

    def distance_histogram(self, bin_edges: Sequence[float]) -> np.ndarray:
        """Number of grants whose distance falls in each bin."""
        distances = np.array([record.distance for record in self.records], dtype=float)
        histogram, _ = np.histogram(distances, bins=np.asarray(bin_edges, dtype=float))
        return histogram
