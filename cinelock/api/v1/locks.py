"""Lock manager API endpoints."""

from fastapi import APIRouter, HTTPException, status

from cinelock.api.v1.dependencies import CurrentUser, SimulationDep
from cinelock.exceptions import EmptyLockRequestError, UnknownSeatError
from cinelock.models.lock import AcquireStatus
from cinelock.schemas.lock import (
    AcquireResponse,
    CommitResponse,
    LockCreate,
    LockReleaseRequest,
    ReclaimResponse,
    ReleaseResponse,
)

router = APIRouter()


@router.post(
    "",
    response_model=AcquireResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Lock seats",
)
async def acquire_locks(
    lock_data: LockCreate,
    current_user: CurrentUser,
    simulation: SimulationDep,
) -> AcquireResponse:
    """
    Lock all requested seats for the current user, or none of them.

    Fails with 409 if any requested seat is already locked or booked,
    including seats the user already holds.
    """
    try:
        result = await simulation.lock_manager.acquire(current_user, lock_data.seat_ids)
    except UnknownSeatError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except EmptyLockRequestError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        )

    if result.status == AcquireStatus.CONFLICT:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail={
                "message": "Some seats are already locked or booked",
                "conflicting_ids": result.conflicting_ids,
            },
        )

    return AcquireResponse.model_validate(result)


@router.post(
    "/commit",
    response_model=CommitResponse,
    summary="Commit held locks",
)
async def commit_locks(
    current_user: CurrentUser,
    simulation: SimulationDep,
) -> CommitResponse:
    """
    Book every seat the current user holds.

    Returns status NOOP when the user holds no locks.
    """
    result = await simulation.lock_manager.commit(current_user)
    return CommitResponse.model_validate(result)


@router.post(
    "/release",
    response_model=ReleaseResponse,
    summary="Release seat locks",
)
async def release_locks(
    release_data: LockReleaseRequest,
    simulation: SimulationDep,
) -> ReleaseResponse:
    """Return locked seats to AVAILABLE regardless of owner."""
    try:
        released = await simulation.lock_manager.release(release_data.seat_ids)
    except UnknownSeatError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    return ReleaseResponse(released_ids=released)


@router.post(
    "/reclaim",
    response_model=ReclaimResponse,
    summary="Reclaim expired locks now",
)
async def reclaim_locks(simulation: SimulationDep) -> ReclaimResponse:
    """Run one expiry pass immediately instead of waiting for the scheduler."""
    reclaimed = await simulation.scheduler.tick()
    return ReclaimResponse(reclaimed=reclaimed)
