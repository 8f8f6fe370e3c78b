"""Client-side collection cache kept fresh by the change feed."""

from __future__ import annotations

import logging
import queue
from collections.abc import Callable
from typing import Any

from lawnboss.realtime.change_feed import ALL_EVENTS, ChangeEvent, ChangeFeed

logger = logging.getLogger(__name__)

Row = dict[str, Any]
Loader = Callable[[], list[Row]]


class CollectionStore:
    """Single-threaded reducer over one table.

    The feed only enqueues events; the owner applies them by calling
    ``process_pending``. Every row carries the feed version it was last
    written at, so a snapshot taken at version V never replaces a row the
    owner applied locally at a version newer than V.
    """

    def __init__(self, feed: ChangeFeed, table: str, loader: Loader, key: str = "id") -> None:
        self.feed = feed
        self.table = table
        self.loader = loader
        self.key = key
        self._rows: dict[Any, Row] = {}
        self._versions: dict[Any, int] = {}
        self._order: list[Any] = []
        self._pending: queue.SimpleQueue[ChangeEvent] = queue.SimpleQueue()
        self._unsubscribe: Callable[[], None] | None = None
        self.synced_version = 0
        self.error: str | None = None

    def start(self) -> "CollectionStore":
        if self._unsubscribe is None:
            self._unsubscribe = self.feed.subscribe(self.table, self._pending.put, ALL_EVENTS)
        self.refresh()
        return self

    def close(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def __enter__(self) -> "CollectionStore":
        return self.start()

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    @property
    def items(self) -> list[Row]:
        return [self._rows[key] for key in self._order if key in self._rows]

    def get(self, record_id: Any) -> Row | None:
        return self._rows.get(record_id)

    def refresh(self) -> None:
        """Reload the collection from ``loader`` and merge it by version."""
        snapshot_version = self.feed.latest_version
        try:
            rows = self.loader()
        except Exception as exc:
            self.error = str(exc)
            logger.warning(
                "collection_store.refresh_failed",
                extra={"event": "collection_store.refresh_failed", "table": self.table, "error": str(exc)},
            )
            raise

        merged: dict[Any, Row] = {}
        versions: dict[Any, int] = {}
        order: list[Any] = []
        for row in rows:
            record_id = row[self.key]
            local_version = self._versions.get(record_id, 0)
            if local_version > snapshot_version:
                versions[record_id] = local_version
                if record_id in self._rows:
                    merged[record_id] = self._rows[record_id]
                    order.append(record_id)
            else:
                order.append(record_id)
                merged[record_id] = row
                versions[record_id] = snapshot_version
        # Local writes the snapshot has not seen yet survive even when absent from it.
        for record_id, version in self._versions.items():
            if record_id in versions or version <= snapshot_version:
                continue
            versions[record_id] = version
            if record_id in self._rows:
                merged[record_id] = self._rows[record_id]
                order.append(record_id)

        self._rows, self._versions, self._order = merged, versions, order
        self.synced_version = max(self.synced_version, snapshot_version)
        self.error = None

    def apply_local(self, row: Row, version: int) -> bool:
        """Write ``row`` if ``version`` is at least as new as the stored one."""
        record_id = row[self.key]
        if version < self._versions.get(record_id, 0):
            return False
        if record_id not in self._rows:
            self._order.insert(0, record_id)
        self._rows[record_id] = row
        self._versions[record_id] = version
        return True

    def remove_local(self, record_id: Any, version: int) -> bool:
        if version < self._versions.get(record_id, 0):
            return False
        self._rows.pop(record_id, None)
        self._versions[record_id] = version
        return True

    def process_pending(self) -> int:
        """Drain queued feed events; refresh once if any is newer than the last sync."""
        drained = 0
        needs_refresh = False
        while True:
            try:
                change = self._pending.get_nowait()
            except queue.Empty:
                break
            drained += 1
            if change.version > self.synced_version:
                needs_refresh = True
        if needs_refresh:
            self.refresh()
        return drained
