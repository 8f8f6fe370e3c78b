"""In-process change feed published from committed SQLAlchemy transactions."""

from __future__ import annotations

import logging
import threading
from collections import deque
from collections.abc import Callable
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import event
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)

ALL_EVENTS = "*"
CHANGE_EVENT_TYPES = ("insert", "update", "delete")

Listener = Callable[["ChangeEvent"], None]


@dataclass(frozen=True)
class ChangeEvent:
    """One committed row change."""

    version: int
    table: str
    event: str
    record_id: str | None
    occurred_at: datetime

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


class ChangeFeed:
    """Versioned broadcast of row changes.

    Changes are collected on flush and published only once the owning
    transaction commits; a rollback discards them. Versions increase by one
    per published event.
    """

    def __init__(self, max_history: int = 1000) -> None:
        self._lock = threading.RLock()
        self._version = 0
        self._history: deque[ChangeEvent] = deque(maxlen=max_history)
        self._listeners: dict[tuple[str, str], list[Listener]] = {}
        self._bound: list[Any] = []
        self._pending_key = f"lawnboss.change_feed.{id(self)}"

    @property
    def latest_version(self) -> int:
        with self._lock:
            return self._version

    def subscribe(self, table: str, listener: Listener, event_type: str = ALL_EVENTS) -> Callable[[], None]:
        """Register ``listener`` for a table and event type; returns the unsubscribe callable."""
        if event_type != ALL_EVENTS and event_type not in CHANGE_EVENT_TYPES:
            raise ValueError(f"Unknown change event type: {event_type}")
        key = (table, event_type)
        with self._lock:
            self._listeners.setdefault(key, []).append(listener)

        def unsubscribe() -> None:
            with self._lock:
                listeners = self._listeners.get(key, [])
                if listener in listeners:
                    listeners.remove(listener)
                if not listeners:
                    self._listeners.pop(key, None)

        return unsubscribe

    def publish(self, table: str, event_type: str, record_id: str | None) -> ChangeEvent:
        with self._lock:
            self._version += 1
            change = ChangeEvent(
                version=self._version,
                table=table,
                event=event_type,
                record_id=record_id,
                occurred_at=datetime.now(timezone.utc),
            )
            self._history.append(change)
            listeners = list(self._listeners.get((table, event_type), ())) + list(
                self._listeners.get((table, ALL_EVENTS), ())
            )

        for listener in listeners:
            try:
                listener(change)
            except Exception:
                logger.exception(
                    "change_feed.listener_failed",
                    extra={"event": "change_feed.listener_failed", "table": table, "change_event": event_type},
                )
        return change

    def events_since(self, version: int = 0, table: str | None = None) -> list[ChangeEvent]:
        with self._lock:
            return [
                change
                for change in self._history
                if change.version > version and (table is None or change.table == table)
            ]

    # Session integration

    def bind(self, target: Any = Session) -> None:
        """Listen for flush/commit/rollback on a Session class, sessionmaker or session."""
        with self._lock:
            if any(bound is target for bound in self._bound):
                return
            self._bound.append(target)
        event.listen(target, "after_flush", self._collect)
        event.listen(target, "after_commit", self._flush_pending)
        event.listen(target, "after_rollback", self._discard_pending)

    def unbind(self, target: Any = Session) -> None:
        with self._lock:
            if not any(bound is target for bound in self._bound):
                return
            self._bound = [bound for bound in self._bound if bound is not target]
        event.remove(target, "after_flush", self._collect)
        event.remove(target, "after_commit", self._flush_pending)
        event.remove(target, "after_rollback", self._discard_pending)

    def _collect(self, session: Session, flush_context: Any) -> None:
        pending: list[tuple[str, str, str | None]] = session.info.setdefault(self._pending_key, [])
        for obj in session.new:
            pending.append(_describe(obj, "insert"))
        for obj in session.dirty:
            if session.is_modified(obj, include_collections=False):
                pending.append(_describe(obj, "update"))
        for obj in session.deleted:
            pending.append(_describe(obj, "delete"))

    def _flush_pending(self, session: Session) -> None:
        pending = session.info.pop(self._pending_key, [])
        seen: set[tuple[str, str, str | None]] = set()
        for change in pending:
            if change in seen:
                continue
            seen.add(change)
            self.publish(*change)

    def _discard_pending(self, session: Session) -> None:
        session.info.pop(self._pending_key, None)


def _describe(obj: Any, event_type: str) -> tuple[str, str, str | None]:
    record_id = getattr(obj, "id", None)
    return obj.__table__.name, event_type, str(record_id) if record_id is not None else None


_change_feed: ChangeFeed | None = None
_feed_lock = threading.Lock()


def get_change_feed() -> ChangeFeed:
    """Process-wide feed bound to every SQLAlchemy session."""
    global _change_feed
    with _feed_lock:
        if _change_feed is None:
            _change_feed = ChangeFeed()
            _change_feed.bind(Session)
        return _change_feed
