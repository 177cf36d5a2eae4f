"""Bounded simulation event log."""

import asyncio
import logging
from collections import deque
from collections.abc import Callable
from datetime import datetime

from cinelock.config import get_settings
from cinelock.models.log import LogEntry, LogKind

settings = get_settings()
logger = logging.getLogger(__name__)


class EventLog:
    """
    Append-only ring of simulation log entries.

    Holds at most `capacity` entries; the oldest entry is dropped first.
    Subscribers receive every entry appended after they subscribed.
    """

    def __init__(
        self,
        capacity: int | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        if capacity is None:
            capacity = settings.LOG_CAPACITY
        self.capacity = capacity
        self._clock = clock
        self._entries: deque[LogEntry] = deque(maxlen=capacity)
        self._subscribers: list[asyncio.Queue[LogEntry]] = []

    def __len__(self) -> int:
        return len(self._entries)

    def append(
        self,
        kind: LogKind,
        message: str,
        query: str | None = None,
    ) -> LogEntry:
        """Append an entry stamped with the current time."""
        entry = LogEntry(
            timestamp=self._clock(),
            kind=kind,
            message=message,
            query=query,
        )
        self._entries.append(entry)
        logger.debug(f"[{kind.value}] {message}")

        for queue in self._subscribers:
            queue.put_nowait(entry)

        return entry

    def snapshot(self) -> list[LogEntry]:
        """Get all entries, oldest first."""
        return list(self._entries)

    def clear(self) -> None:
        self._entries.clear()

    def subscribe(self) -> asyncio.Queue[LogEntry]:
        """Register a queue that receives every new entry."""
        queue: asyncio.Queue[LogEntry] = asyncio.Queue()
        self._subscribers.append(queue)
        return queue

    def unsubscribe(self, queue: asyncio.Queue[LogEntry]) -> None:
        self._subscribers = [q for q in self._subscribers if q is not queue]
