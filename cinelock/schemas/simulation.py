"""Simulation schemas."""

from cinelock.schemas.catalog import MovieResponse, ShowResponse
from cinelock.schemas.common import BaseSchema
from cinelock.schemas.log import LogEntryResponse
from cinelock.schemas.seat import SeatResponse


class SessionResponse(BaseSchema):
    """Schema for the primary user session."""

    user_id: str
    user_name: str


class BookingSummary(BaseSchema):
    """Booking summary of the primary user."""

    selected_count: int
    locked_count: int
    subtotal: int
    processing: bool


class InsightResponse(BaseSchema):
    """Latest advisory text."""

    insight: str
    loading: bool


class SimulationSnapshot(BaseSchema):
    """Read-only view of the simulation."""

    movie: MovieResponse
    show: ShowResponse
    session: SessionResponse
    seats: list[SeatResponse]
    selected_seat_ids: list[str]
    logs: list[LogEntryResponse]
    insight: str
    insight_loading: bool
    summary: BookingSummary
