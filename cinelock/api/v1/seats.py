"""Seats API endpoints."""

from fastapi import APIRouter, HTTPException, status

from cinelock.api.v1.dependencies import SimulationDep
from cinelock.exceptions import UnknownSeatError
from cinelock.models.seat import SeatStatus
from cinelock.schemas.seat import SeatResponse, SeatToggleResponse

router = APIRouter()


@router.get(
    "",
    response_model=list[SeatResponse],
    summary="Get seats of the current show",
)
async def get_seats(
    simulation: SimulationDep,
    seat_status: SeatStatus | None = None,
) -> list[SeatResponse]:
    """Get a snapshot of all seats, optionally filtered by status."""
    seats = simulation.inventory.snapshot()
    if seat_status:
        seats = [s for s in seats if s.status == seat_status]
    return [SeatResponse.model_validate(s) for s in seats]


@router.get(
    "/{seat_id}",
    response_model=SeatResponse,
    summary="Get seat details",
)
async def get_seat(
    seat_id: str,
    simulation: SimulationDep,
) -> SeatResponse:
    """Get seat details by ID."""
    try:
        seat = simulation.inventory.get(seat_id)
    except UnknownSeatError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Seat not found",
        )
    return SeatResponse.model_validate(seat.model_copy())


@router.post(
    "/{seat_id}/toggle",
    response_model=SeatToggleResponse,
    summary="Toggle seat selection",
)
async def toggle_seat(
    seat_id: str,
    simulation: SimulationDep,
) -> SeatToggleResponse:
    """Add or remove a seat from the primary user's selection."""
    try:
        selected = simulation.toggle_seat(seat_id)
    except UnknownSeatError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Seat not found",
        )
    return SeatToggleResponse(
        seat_id=seat_id,
        selected=selected,
        selected_seat_ids=list(simulation.primary.selection),
    )
