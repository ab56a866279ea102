"""
Powerup selection for kart races.

Weight rows from the item document are parsed into per distance buckets of
running totals. A kart's distance to the leader picks the bucket, and a
caller supplied 64 bit value picks the item inside it, so every peer that
replays the same values grants the same items.
"""

from .data_models import (  # noqa: F401
    EXPECTED_NUM_ENTRIES,
    MODE_CLASSES,
    DistanceBucket,
    EmptyBucketError,
    GameMode,
    ItemDescriptor,
    ItemKind,
    ModeTable,
    NoMatchingBucketError,
    PowerupConfigError,
    PowerupDocument,
    SamplingError,
    WeightedEntry,
    mode_class_for,
    weight_list_name,
)
from .distribution import assemble_table, build_bucket  # noqa: F401
from .grant_log import GrantLog, GrantRecord  # noqa: F401
from .race_context import RaceItemContext  # noqa: F401
from .registry import PowerupRegistry  # noqa: F401
from .sampler import get_random_powerup, sample, sample_bucket, select_bucket  # noqa: F401
from .weight_rows import parse_bucket_entries, parse_row  # noqa: F401
from .xml_loader import load_powerup_document, parse_powerup_document  # noqa: F401

__all__ = [
    "EXPECTED_NUM_ENTRIES",
    "MODE_CLASSES",
    "DistanceBucket",
    "EmptyBucketError",
    "GameMode",
    "ItemDescriptor",
    "ItemKind",
    "ModeTable",
    "NoMatchingBucketError",
    "PowerupConfigError",
    "PowerupDocument",
    "SamplingError",
    "WeightedEntry",
    "mode_class_for",
    "weight_list_name",
    "assemble_table",
    "build_bucket",
    "GrantLog",
    "GrantRecord",
    "RaceItemContext",
    "PowerupRegistry",
    "get_random_powerup",
    "sample",
    "sample_bucket",
    "select_bucket",
    "parse_bucket_entries",
    "parse_row",
    "load_powerup_document",
    "parse_powerup_document",
]
