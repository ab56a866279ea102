from __future__ import annotations

import logging
from typing import Optional, Tuple, Union

from .data_models import GameMode, ItemKind, ModeTable, SamplingError, mode_class_for
from .grant_log import GrantLog, GrantRecord
from .registry import PowerupRegistry
from .sampler import reduce_random, sample_bucket, select_bucket

logger = logging.getLogger(__name__)


class RaceItemContext:
    """
    Per race handle on the weight table in effect.

    The table starts unset, is chosen by ``select_mode`` once the race mode
    is known, and is dropped again by ``clear`` at teardown. Several races
    can run side by side, each with its own context.
    """

    def __init__(self, registry: PowerupRegistry, grant_log: Optional[GrantLog] = None) -> None:
        self.registry = registry
        self.grant_log = grant_log
        self.active_table: Optional[ModeTable] = None
        self.mode: Optional[GameMode] = None
        self.tick = 0

    def select_mode(self, mode: Union[GameMode, str]) -> ModeTable:
        if not isinstance(mode, GameMode):
            mode = GameMode.from_str(str(mode))
        table = self.registry.table_for_class(mode_class_for(mode))
        self.mode = mode
        self.active_table = table
        logger.info("Using '%s' powerup weights for %s", table.mode_class, mode.value)
        return table

    def clear(self) -> None:
        self.active_table = None
        self.mode = None
        self.tick = 0

    def advance(self, ticks: int = 1) -> None:
        self.tick += ticks

    def get_random_powerup(self, distance: float, random_value: int) -> Tuple[ItemKind, int]:
        """Picks the powerup for a kart ``distance`` behind the leader."""
        table = self.active_table
        if table is None:
            raise SamplingError("No powerup weights selected for this race")

        bucket = select_bucket(table, distance)
        entry = sample_bucket(bucket, random_value)
        if self.grant_log is not None:
            self.grant_log.record(
                GrantRecord(
                    tick=self.tick,
                    distance=distance,
                    random_value=random_value,
                    reduced_value=reduce_random(bucket, random_value),
                    kind=entry.kind,
                    count=entry.count,
                )
            )
        return entry.kind, entry.count
