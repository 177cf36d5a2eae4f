"""Domain models."""

from cinelock.models.catalog import Movie, Show
from cinelock.models.lock import (
    AcquireResult,
    AcquireStatus,
    CommitResult,
    CommitStatus,
    LockRequest,
    UserSession,
)
from cinelock.models.log import LogEntry, LogKind
from cinelock.models.seat import Seat, SeatStatus

__all__ = [
    "Movie",
    "Show",
    "Seat",
    "SeatStatus",
    "LogEntry",
    "LogKind",
    "LockRequest",
    "AcquireResult",
    "AcquireStatus",
    "CommitResult",
    "CommitStatus",
    "UserSession",
]
