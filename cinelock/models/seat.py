"""Seat model."""

import enum
from datetime import datetime, timedelta

from pydantic import BaseModel, Field, model_validator


class SeatStatus(str, enum.Enum):
    """Seat status enum."""

    AVAILABLE = "AVAILABLE"
    LOCKED = "LOCKED"
    BOOKED = "BOOKED"


class Seat(BaseModel):
    """
    A single seat of a show's inventory.

    Owner and lock time are set together with the LOCKED status and
    cleared together when the seat leaves it. Use the transition methods
    rather than assigning the fields one by one.
    """

    id: str = Field(frozen=True)
    row: str = Field(frozen=True)
    number: int = Field(frozen=True)
    status: SeatStatus = SeatStatus.AVAILABLE
    locked_by: str | None = None
    locked_at: datetime | None = None

    @model_validator(mode="after")
    def _check_lock_fields(self) -> "Seat":
        has_owner = self.locked_by is not None
        has_time = self.locked_at is not None
        if (self.status == SeatStatus.LOCKED) != (has_owner and has_time):
            raise ValueError("locked_by and locked_at must be set iff status is LOCKED")
        if has_owner != has_time:
            raise ValueError("locked_by and locked_at must be set together")
        return self

    @property
    def is_available(self) -> bool:
        return self.status == SeatStatus.AVAILABLE

    def lock(self, owner: str, at: datetime) -> None:
        self.status = SeatStatus.LOCKED
        self.locked_by = owner
        self.locked_at = at

    def book(self) -> None:
        self.status = SeatStatus.BOOKED
        self.locked_by = None
        self.locked_at = None

    def release(self) -> None:
        self.status = SeatStatus.AVAILABLE
        self.locked_by = None
        self.locked_at = None

    def is_expired(self, now: datetime, lock_duration: timedelta) -> bool:
        """Return True if the seat is locked for longer than lock_duration."""
        if self.status != SeatStatus.LOCKED or self.locked_at is None:
            return False
        return now - self.locked_at > lock_duration
