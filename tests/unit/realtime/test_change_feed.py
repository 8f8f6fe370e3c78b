from __future__ import annotations

import pytest

from lawnboss.models import Crew
from lawnboss.realtime import ChangeFeed


@pytest.fixture
def feed(session_factory):
    change_feed = ChangeFeed()
    change_feed.bind(session_factory)
    yield change_feed
    change_feed.unbind(session_factory)


def test_commit_publishes_insert_update_delete(feed, session_factory):
    received = []
    feed.subscribe("crews", received.append)
    session = session_factory()

    crew = Crew(name="North Crew")
    session.add(crew)
    session.commit()
    crew.status = "inactive"
    session.commit()
    session.delete(crew)
    session.commit()
    session.close()

    assert [(change.event, change.record_id) for change in received] == [
        ("insert", crew.id),
        ("update", crew.id),
        ("delete", crew.id),
    ]
    assert [change.version for change in received] == [1, 2, 3]
    assert feed.latest_version == 3


def test_rollback_publishes_nothing(feed, session_factory):
    session = session_factory()
    session.add(Crew(name="Ghost Crew"))
    session.flush()
    session.rollback()
    session.close()

    assert feed.latest_version == 0
    assert feed.events_since(0) == []


def test_event_type_filter_and_unsubscribe(feed, session_factory):
    inserts = []
    unsubscribe = feed.subscribe("crews", inserts.append, event_type="insert")
    session = session_factory()

    crew = Crew(name="South Crew")
    session.add(crew)
    session.commit()
    crew.description = "Mowing team"
    session.commit()
    unsubscribe()
    session.add(Crew(name="East Crew"))
    session.commit()
    session.close()

    assert [change.event for change in inserts] == ["insert"]
    assert feed.latest_version == 3


def test_events_since_filters_by_version_and_table():
    feed = ChangeFeed()
    feed.publish("crews", "insert", "a")
    feed.publish("customers", "insert", "b")
    feed.publish("crews", "update", "a")

    assert [change.version for change in feed.events_since(1)] == [2, 3]
    assert [change.record_id for change in feed.events_since(0, table="customers")] == ["b"]


def test_listener_errors_do_not_stop_delivery():
    feed = ChangeFeed()
    received = []

    def _broken(change):
        raise RuntimeError("boom")

    feed.subscribe("crews", _broken)
    feed.subscribe("crews", received.append)
    feed.publish("crews", "insert", "a")

    assert len(received) == 1


def test_subscribe_rejects_unknown_event_type():
    with pytest.raises(ValueError):
        ChangeFeed().subscribe("crews", lambda change: None, event_type="truncate")
