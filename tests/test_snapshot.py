"""Tests for the JSON snapshot envelope."""

import json

import pytest

from range_pool import (
    SNAPSHOT_VERSION,
    InvalidArgument,
    RangePool,
    dumps_snapshot,
    loads_snapshot,
    read_metadata,
)


@pytest.fixture()
def busy_pool() -> RangePool:
    pool = RangePool(300)
    first = pool.create_worker()
    first.advance(40)
    second = pool.create_worker()
    second.advance(10)
    third = pool.create_worker()
    third.dispose()
    return pool


def test_envelope_fields(busy_pool):
    text = dumps_snapshot(busy_pool, metadata={"job": "reindex"})
    envelope = json.loads(text)

    assert envelope["version"] == SNAPSHOT_VERSION
    assert envelope["length"] == 300
    assert envelope["num_workers"] == 3
    assert envelope["workers"] == busy_pool.serialize()["workers"]
    assert envelope["metadata"] == {"job": "reindex"}


def test_loads_restores_equivalent_pool(busy_pool):
    clone = loads_snapshot(dumps_snapshot(busy_pool))
    assert clone.serialize() == busy_pool.serialize()
    assert clone.get_remaining() == busy_pool.get_remaining()

    # The disposed worker is still the first thing handed out
    assert clone.create_worker() is clone.workers[2]


def test_read_metadata(busy_pool):
    assert read_metadata(dumps_snapshot(busy_pool)) == {}
    assert read_metadata(dumps_snapshot(busy_pool, {"attempt": 2})) == {"attempt": 2}


@pytest.mark.parametrize(
    "text",
    [
        "not json",
        "[1, 2, 3]",
        json.dumps({"version": "0.1", "length": 0, "workers": []}),
        json.dumps({"length": 0, "workers": []}),
        json.dumps({"version": SNAPSHOT_VERSION, "workers": []}),
    ],
)
def test_loads_rejects_bad_text(text):
    with pytest.raises(InvalidArgument):
        loads_snapshot(text)


def test_empty_pool_round_trip():
    clone = loads_snapshot(dumps_snapshot(RangePool(0)))
    assert clone.get_length() == 0
    assert clone.workers == ()
    assert clone.has_completed()
