from __future__ import annotations

import pytest

from lawnboss.realtime import ChangeFeed, CollectionStore


class _Loader:
    def __init__(self, rows):
        self.rows = rows
        self.calls = 0

    def __call__(self):
        self.calls += 1
        return [dict(row) for row in self.rows]


def test_start_loads_snapshot():
    feed = ChangeFeed()
    loader = _Loader([{"id": "a", "name": "North"}])

    with CollectionStore(feed, "crews", loader) as store:
        assert store.items == [{"id": "a", "name": "North"}]
        assert store.get("a")["name"] == "North"


def test_pending_events_trigger_one_refresh():
    feed = ChangeFeed()
    loader = _Loader([{"id": "a", "name": "North"}])
    store = CollectionStore(feed, "crews", loader).start()

    loader.rows = [{"id": "a", "name": "North"}, {"id": "b", "name": "South"}]
    feed.publish("crews", "insert", "b")
    feed.publish("crews", "update", "a")
    feed.publish("customers", "insert", "x")

    assert store.process_pending() == 2
    assert loader.calls == 2
    assert [row["id"] for row in store.items] == ["a", "b"]
    assert store.synced_version == 3
    store.close()


def test_stale_snapshot_does_not_overwrite_newer_local_write():
    feed = ChangeFeed()
    loader = _Loader([{"id": "a", "name": "North"}])
    store = CollectionStore(feed, "crews", loader).start()

    feed.publish("crews", "update", "a")
    assert store.apply_local({"id": "a", "name": "North Renamed"}, version=feed.latest_version + 1) is True

    store.refresh()
    assert store.get("a")["name"] == "North Renamed"
    assert store.apply_local({"id": "a", "name": "Older"}, version=1) is False


def test_local_removal_survives_stale_snapshot():
    feed = ChangeFeed()
    loader = _Loader([{"id": "a"}, {"id": "b"}])
    store = CollectionStore(feed, "crews", loader).start()

    store.remove_local("b", version=5)
    store.refresh()

    assert [row["id"] for row in store.items] == ["a"]


def test_loader_failure_is_recorded():
    feed = ChangeFeed()

    def _failing():
        raise RuntimeError("offline")

    store = CollectionStore(feed, "crews", _failing)
    with pytest.raises(RuntimeError):
        store.refresh()
    assert store.error == "offline"
