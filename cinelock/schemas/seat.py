"""Seat schemas."""

from datetime import datetime

from cinelock.models.seat import SeatStatus
from cinelock.schemas.common import BaseSchema


class SeatResponse(BaseSchema):
    """Schema for seat response."""

    id: str
    row: str
    number: int
    status: SeatStatus
    locked_by: str | None = None
    locked_at: datetime | None = None


class SeatToggleResponse(BaseSchema):
    """Schema for a selection toggle."""

    seat_id: str
    selected: bool
    selected_seat_ids: list[str]
