from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Sequence, Tuple, Union

import numpy as np


class PowerupConfigError(RuntimeError):
    """Raised when the powerup configuration is inconsistent."""


class SamplingError(RuntimeError):
    """Raised when a powerup cannot be drawn from a table."""


class NoMatchingBucketError(SamplingError):
    pass


class EmptyBucketError(SamplingError):
    pass


class ItemKind(Enum):
    """Powerup catalog. Definition order is the order of the weight rows."""

    NONE = ""
    BUBBLEGUM = "bubblegum"
    CAKE = "cake"
    BOWLING = "bowling"
    ZIPPER = "zipper"
    PLUNGER = "plunger"
    SWITCH = "switch"
    SWATTER = "swatter"
    RUBBER_BALL = "rubber-ball"
    PARACHUTE = "parachute"
    ANCHOR = "anchor"

    @classmethod
    def concrete(cls) -> Tuple["ItemKind", ...]:
        return tuple(kind for kind in cls if kind is not cls.NONE)

    @classmethod
    def from_name(cls, name: str) -> "ItemKind":
        for kind in cls.concrete():
            if kind.value == name:
                return kind
        return cls.NONE

    @classmethod
    def from_index(cls, index: int) -> "ItemKind":
        kinds = cls.concrete()
        if 1 <= index <= len(kinds):
            return kinds[index - 1]
        return cls.NONE


EXPECTED_NUM_ENTRIES = 2 * len(ItemKind.concrete())


class GameMode(Enum):
    """Minor race modes that decide which weight list is active."""

    TIME_TRIAL = "time-trial"
    NORMAL_RACE = "normal-race"
    FOLLOW_LEADER = "follow-leader"
    THREE_STRIKES = "3-strikes"
    FREE_FOR_ALL = "free-for-all"
    CAPTURE_THE_FLAG = "capture-the-flag"
    TUTORIAL = "tutorial"
    EASTER_EGG = "easter-egg"
    OVERWORLD = "overworld"
    CUTSCENE = "cutscene"
    SOCCER = "soccer"

    @classmethod
    def from_str(cls, value: str) -> "GameMode":
        try:
            return cls(value.lower().replace("_", "-"))
        except ValueError as exc:
            raise PowerupConfigError(f"Unknown game mode: {value}") from exc


MODE_CLASSES: Tuple[str, ...] = ("race", "ftl", "battle", "soccer", "tutorial")

_MODE_CLASS_BY_MODE: Dict[GameMode, str] = {
    GameMode.TIME_TRIAL: "race",
    GameMode.NORMAL_RACE: "race",
    GameMode.FOLLOW_LEADER: "ftl",
    GameMode.THREE_STRIKES: "battle",
    GameMode.FREE_FOR_ALL: "battle",
    GameMode.CAPTURE_THE_FLAG: "battle",
    GameMode.TUTORIAL: "tutorial",
    GameMode.EASTER_EGG: "soccer",
    GameMode.OVERWORLD: "soccer",
    GameMode.CUTSCENE: "soccer",
    GameMode.SOCCER: "soccer",
}


def mode_class_for(mode: Union[GameMode, str]) -> str:
    if not isinstance(mode, GameMode):
        mode = GameMode.from_str(str(mode))
    return _MODE_CLASS_BY_MODE[mode]


def weight_list_name(mode_class: str) -> str:
    return f"{mode_class}-weight-list"


@dataclass(frozen=True)
class WeightedEntry:
    """One candidate grant.

    ``weight`` is the raw configured weight until the entry passes through
    :func:`kart_game.items.distribution.build_bucket`, after which it is the
    running total of the bucket up to and including this entry.
    """

    weight: int
    count: int
    kind: ItemKind

    def merge(self, previous: "WeightedEntry") -> "WeightedEntry":
        return WeightedEntry(weight=self.weight + previous.weight, count=self.count, kind=self.kind)


@dataclass(frozen=True)
class DistanceBucket:
    distance_threshold: float
    entries: Tuple[WeightedEntry, ...] = field(default_factory=tuple)

    @property
    def total(self) -> int:
        if not self.entries:
            return 0
        return self.entries[-1].weight

    @property
    def is_samplable(self) -> bool:
        return self.total > 0

    def expected_counts(self) -> Dict[Tuple[ItemKind, int], int]:
        """Own weight of every (kind, count) pair, recovered from the running totals."""
        if not self.entries:
            return {}
        cumulative = np.array([entry.weight for entry in self.entries], dtype=np.uint64)
        own = np.diff(cumulative, prepend=np.uint64(0))
        counts: Dict[Tuple[ItemKind, int], int] = {}
        for entry, weight in zip(self.entries, own):
            key = (entry.kind, entry.count)
            counts[key] = counts.get(key, 0) + int(weight)
        return counts

    def probabilities(self) -> Dict[Tuple[ItemKind, int], float]:
        total = self.total
        if total == 0:
            return {}
        return {key: weight / total for key, weight in self.expected_counts().items()}


@dataclass(frozen=True)
class ModeTable:
    mode_class: str
    buckets: Tuple[DistanceBucket, ...] = field(default_factory=tuple)

    @property
    def thresholds(self) -> Tuple[float, ...]:
        return tuple(bucket.distance_threshold for bucket in self.buckets)


@dataclass(frozen=True)
class ItemDescriptor:
    """Static data for one powerup as declared in the item document."""

    kind: ItemKind
    icon: str
    model: Optional[str] = None
    attributes: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class PowerupDocument:
    items: Dict[ItemKind, ItemDescriptor]
    tables: Dict[str, ModeTable]

    @property
    def mode_classes(self) -> Sequence[str]:
        return tuple(self.tables)
