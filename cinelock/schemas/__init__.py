"""Pydantic schemas for API request/response."""

from cinelock.schemas.catalog import MovieResponse, ShowResponse
from cinelock.schemas.common import ErrorResponse
from cinelock.schemas.lock import (
    AcquireResponse,
    CommitResponse,
    LockCreate,
    LockReleaseRequest,
    ReclaimResponse,
    ReleaseResponse,
)
from cinelock.schemas.log import LogEntryResponse, WSMessage, WSMessageType
from cinelock.schemas.seat import SeatResponse, SeatToggleResponse
from cinelock.schemas.simulation import (
    BookingSummary,
    InsightResponse,
    SimulationSnapshot,
)

__all__ = [
    "ErrorResponse",
    "MovieResponse",
    "ShowResponse",
    "SeatResponse",
    "SeatToggleResponse",
    "LockCreate",
    "LockReleaseRequest",
    "AcquireResponse",
    "CommitResponse",
    "ReleaseResponse",
    "ReclaimResponse",
    "LogEntryResponse",
    "WSMessage",
    "WSMessageType",
    "BookingSummary",
    "InsightResponse",
    "SimulationSnapshot",
]
