"""Lock request and outcome models."""

import enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cinelock.exceptions import EmptyLockRequestError


class LockRequest(BaseModel):
    """Requester identity and the seats it wants, acquired as one unit."""

    model_config = ConfigDict(frozen=True)

    requester_id: str
    seat_ids: tuple[str, ...]

    @field_validator("seat_ids", mode="before")
    @classmethod
    def _dedupe(cls, value):
        return tuple(dict.fromkeys(value))

    @classmethod
    def build(cls, requester_id: str, seat_ids) -> "LockRequest":
        """Build a request, rejecting an empty seat list."""
        if not seat_ids:
            raise EmptyLockRequestError("A lock request needs at least one seat")
        return cls(requester_id=requester_id, seat_ids=seat_ids)


class AcquireStatus(str, enum.Enum):
    """Outcome of an acquire call."""

    LOCKED = "LOCKED"
    CONFLICT = "CONFLICT"


class AcquireResult(BaseModel):
    """Result of an acquire call."""

    status: AcquireStatus
    requester_id: str
    seat_ids: list[str]
    conflicting_ids: list[str] = Field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return self.status == AcquireStatus.LOCKED


class CommitStatus(str, enum.Enum):
    """Outcome of a commit call."""

    BOOKED = "BOOKED"
    NOOP = "NOOP"


class CommitResult(BaseModel):
    """Result of a commit call."""

    status: CommitStatus
    requester_id: str
    seat_ids: list[str] = Field(default_factory=list)


class UserSession(BaseModel):
    """Stable identity of the primary actor."""

    model_config = ConfigDict(frozen=True)

    user_id: str
    user_name: str
