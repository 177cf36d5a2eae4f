"""Simulation API endpoints."""

from fastapi import APIRouter, HTTPException, status

from cinelock.api.v1.dependencies import SimulationDep
from cinelock.exceptions import ActorBusyError
from cinelock.models.lock import AcquireStatus
from cinelock.schemas.lock import AcquireResponse, CommitResponse
from cinelock.schemas.log import LogEntryResponse
from cinelock.schemas.simulation import InsightResponse, SimulationSnapshot

router = APIRouter()


@router.get(
    "/snapshot",
    response_model=SimulationSnapshot,
    summary="Get simulation snapshot",
)
async def get_snapshot(simulation: SimulationDep) -> SimulationSnapshot:
    """Get seats, selection, logs, insight and booking summary in one call."""
    return SimulationSnapshot.model_validate(
        simulation.snapshot(), from_attributes=True
    )


@router.post(
    "/lock",
    response_model=AcquireResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Lock the selected seats",
)
async def lock_selection(simulation: SimulationDep) -> AcquireResponse:
    """
    Lock the seats selected by the primary user (7 minutes).

    The selection is cleared whether the lock succeeds or conflicts.
    """
    if not simulation.primary.selection:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No seats selected",
        )

    try:
        result = await simulation.lock_selection()
    except ActorBusyError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e),
        )

    if result is None or result.status == AcquireStatus.CONFLICT:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail={
                "message": "Some seats are already locked or booked",
                "conflicting_ids": result.conflicting_ids if result else [],
            },
        )

    return AcquireResponse.model_validate(result)


@router.post(
    "/checkout",
    response_model=CommitResponse,
    summary="Confirm and pay",
)
async def checkout(simulation: SimulationDep) -> CommitResponse:
    """Book every seat the primary user holds."""
    try:
        result = await simulation.checkout()
    except ActorBusyError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e),
        )
    return CommitResponse.model_validate(result)


@router.post(
    "/bot",
    response_model=AcquireResponse | None,
    summary="Spawn a concurrent bot",
)
async def spawn_bot(simulation: SimulationDep) -> AcquireResponse | None:
    """
    Let a bot user try to lock two random available seats.

    Returns null when fewer than two seats are available.
    """
    result = await simulation.spawn_bot()
    if result is None:
        return None
    return AcquireResponse.model_validate(result)


@router.post(
    "/deadlock",
    response_model=list[LogEntryResponse],
    summary="Force a deadlock event",
)
async def force_deadlock(simulation: SimulationDep) -> list[LogEntryResponse]:
    """Play the scripted deadlock detection and rollback narrative."""
    entries = await simulation.run_deadlock()
    return [LogEntryResponse.model_validate(e) for e in entries]


@router.get(
    "/insight",
    response_model=InsightResponse,
    summary="Get latest insight",
)
async def get_insight(simulation: SimulationDep) -> InsightResponse:
    """Get the latest advisory explanation."""
    return InsightResponse(
        insight=simulation.insight.text,
        loading=simulation.insight.loading,
    )
