"""Lock operation schemas."""

from pydantic import Field

from cinelock.models.lock import AcquireStatus, CommitStatus
from cinelock.schemas.common import BaseSchema


class LockCreate(BaseSchema):
    """Schema for acquiring seat locks."""

    seat_ids: list[str] = Field(..., min_length=1, max_length=80)


class LockReleaseRequest(BaseSchema):
    """Schema for releasing seat locks."""

    seat_ids: list[str] = Field(..., min_length=1)


class AcquireResponse(BaseSchema):
    """Schema for an acquire outcome."""

    status: AcquireStatus
    requester_id: str
    seat_ids: list[str]
    conflicting_ids: list[str] = []


class CommitResponse(BaseSchema):
    """Schema for a commit outcome."""

    status: CommitStatus
    requester_id: str
    seat_ids: list[str] = []


class ReleaseResponse(BaseSchema):
    """Schema for released seats."""

    released_ids: list[str]


class ReclaimResponse(BaseSchema):
    """Schema for a reclaim pass."""

    reclaimed: int
