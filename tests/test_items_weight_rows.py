import logging

import pytest

from kart_game.items import EXPECTED_NUM_ENTRIES, ItemKind, PowerupConfigError, build_bucket
from kart_game.items.weight_rows import MULTI_COUNT, SINGLE_COUNT, parse_bucket_entries, parse_row

FULL_SINGLE = "1 2 3 4 5 6 7 8 9 10"
FULL_MULTI = "0 0 1 0 0 0 0 0 0 0"


def test_row_tokens_follow_catalog_order():
    entries = parse_row(FULL_SINGLE, SINGLE_COUNT)
    assert [entry.kind for entry in entries] == list(ItemKind.concrete())
    assert [entry.weight for entry in entries] == list(range(1, 11))
    assert all(entry.count == 1 for entry in entries)


def test_row_ignores_repeated_whitespace():
    entries = parse_row("  5   0\t7 ", MULTI_COUNT)
    assert [(entry.kind, entry.weight, entry.count) for entry in entries] == [
        (ItemKind.BUBBLEGUM, 5, 3),
        (ItemKind.CAKE, 0, 3),
        (ItemKind.BOWLING, 7, 3),
    ]


def test_row_rejects_non_integer_tokens():
    with pytest.raises(PowerupConfigError):
        parse_row("1 two 3", SINGLE_COUNT)


def test_row_rejects_unknown_pickup_count():
    with pytest.raises(ValueError):
        parse_row(FULL_SINGLE, 2)


def test_tokens_past_catalog_map_to_none():
    entries = parse_row(FULL_SINGLE + " 11", SINGLE_COUNT)
    assert entries[-1].kind is ItemKind.NONE
    assert entries[-1].weight == 11


def test_full_rows_are_single_first_then_multi():
    entries = parse_bucket_entries(FULL_SINGLE, FULL_MULTI)
    assert len(entries) == EXPECTED_NUM_ENTRIES
    assert [entry.count for entry in entries] == [1] * 10 + [3] * 10
    assert entries[10].kind is ItemKind.BUBBLEGUM


def test_short_rows_are_padded_and_reported(caplog):
    with caplog.at_level(logging.ERROR, logger="kart_game.items.weight_rows"):
        entries = parse_bucket_entries("10 0 5", "0 0 0", label="race@0")

    assert len(entries) == EXPECTED_NUM_ENTRIES
    padding = entries[6:]
    assert all(entry.kind is ItemKind.NONE and entry.weight == 0 and entry.count == 0 for entry in padding)
    assert "Not enough entries for 'race@0'" in caplog.text

    bucket = build_bucket(0.0, entries)
    assert [(entry.weight, entry.count, entry.kind) for entry in bucket.entries] == [
        (10, 1, ItemKind.BUBBLEGUM),
        (15, 1, ItemKind.BOWLING),
    ]


def test_long_rows_are_reported_but_kept(caplog):
    with caplog.at_level(logging.ERROR, logger="kart_game.items.weight_rows"):
        entries = parse_bucket_entries(FULL_SINGLE + " 4", FULL_MULTI)

    assert len(entries) == EXPECTED_NUM_ENTRIES + 1
    assert "Too many entries" in caplog.text
    # The extra token lands on NONE, and the multi row still starts at the first kind.
    assert entries[10].kind is ItemKind.NONE
    assert entries[11].kind is ItemKind.BUBBLEGUM
    assert entries[11].count == 3


def test_empty_rows_build_an_empty_bucket(caplog):
    with caplog.at_level(logging.ERROR, logger="kart_game.items.weight_rows"):
        entries = parse_bucket_entries("", "")
    assert len(entries) == EXPECTED_NUM_ENTRIES
    assert build_bucket(0.0, entries).total == 0
