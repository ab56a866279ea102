import math
from collections import Counter
from pathlib import Path

import numpy as np
import pytest

from kart_game.items import (
    EmptyBucketError,
    ItemKind,
    NoMatchingBucketError,
    WeightedEntry,
    assemble_table,
    build_bucket,
    get_random_powerup,
    load_powerup_document,
    parse_bucket_entries,
    sample,
    sample_bucket,
    select_bucket,
)

POWERUP_XML = Path(__file__).resolve().parents[1] / "configs" / "powerup.xml"


def _example_bucket():
    return build_bucket(0.0, parse_bucket_entries("10 0 5", "0 0 0"))


def _tiered_table():
    kinds = ItemKind.concrete()
    return assemble_table(
        "race",
        [(threshold, [WeightedEntry(weight=1, count=1, kind=kinds[i])]) for i, threshold in enumerate((0.0, 10.0, 20.0))],
    )


@pytest.mark.parametrize(
    "random_value, expected",
    [
        (0, ItemKind.BUBBLEGUM),
        (9, ItemKind.BUBBLEGUM),
        (10, ItemKind.BOWLING),
        (14, ItemKind.BOWLING),
        (15, ItemKind.BUBBLEGUM),
    ],
)
def test_random_value_picks_owning_entry(random_value, expected):
    entry = sample_bucket(_example_bucket(), random_value)
    assert entry.kind is expected
    assert entry.count == 1


def test_every_random_value_once_reproduces_weights():
    document = load_powerup_document(POWERUP_XML)
    for table in document.tables.values():
        for bucket in table.buckets:
            drawn = Counter()
            for random_value in range(bucket.total):
                entry = sample_bucket(bucket, random_value)
                drawn[(entry.kind, entry.count)] += 1
            assert dict(drawn) == bucket.expected_counts()


def test_bucket_threshold_is_inclusive():
    table = _tiered_table()
    assert select_bucket(table, 10.0).distance_threshold == 10.0
    assert select_bucket(table, 9.99).distance_threshold == 0.0
    assert select_bucket(table, 0.0).distance_threshold == 0.0
    assert select_bucket(table, 500.0).distance_threshold == 20.0
    assert get_random_powerup(table, 10.0, 123) == (ItemKind.CAKE, 1)


def test_distance_below_every_threshold_fails():
    table = _tiered_table()
    with pytest.raises(NoMatchingBucketError):
        select_bucket(table, -0.5)
    with pytest.raises(NoMatchingBucketError):
        sample(table, math.nan, 0)


def test_empty_bucket_fails_loudly():
    table = assemble_table("race", [(0.0, [WeightedEntry(weight=0, count=1, kind=ItemKind.CAKE)])])
    with pytest.raises(EmptyBucketError):
        sample(table, 3.0, 7)


def test_zero_weight_entries_are_never_returned():
    bucket = _example_bucket()
    kinds = {sample_bucket(bucket, value).kind for value in range(bucket.total * 2)}
    assert kinds == {ItemKind.BUBBLEGUM, ItemKind.BOWLING}


def test_sampling_is_deterministic():
    table = load_powerup_document(POWERUP_XML).tables["race"]
    values = [(3.5, 2**63 + 11), (42.0, 987654321), (160.0, 2**64 - 1), (15.0, 0)]
    first = [get_random_powerup(table, distance, value) for distance, value in values]
    second = [get_random_powerup(table, distance, value) for distance, value in values]
    assert first == second


def test_random_value_must_be_unsigned_64_bit():
    bucket = _example_bucket()
    with pytest.raises(ValueError):
        sample_bucket(bucket, -1)
    with pytest.raises(ValueError):
        sample_bucket(bucket, 2**64)
    with pytest.raises(ValueError):
        sample_bucket(bucket, 1.5)
    assert sample_bucket(bucket, np.uint64(10)).kind is ItemKind.BOWLING


def test_tutorial_always_grants_three_bowling_balls():
    table = load_powerup_document(POWERUP_XML).tables["tutorial"]
    for random_value in (0, 1, 99, 2**64 - 1):
        assert get_random_powerup(table, 0.0, random_value) == (ItemKind.BOWLING, 3)
