"""Log API endpoints."""

from fastapi import APIRouter, Query

from cinelock.api.v1.dependencies import SimulationDep
from cinelock.models.log import LogKind
from cinelock.schemas.log import LogEntryResponse

router = APIRouter()


@router.get(
    "",
    response_model=list[LogEntryResponse],
    summary="Get simulation log",
)
async def get_logs(
    simulation: SimulationDep,
    kind: LogKind | None = None,
    limit: int | None = Query(None, ge=1),
) -> list[LogEntryResponse]:
    """Get the most recent log entries, oldest first."""
    entries = simulation.event_log.snapshot()
    if kind:
        entries = [e for e in entries if e.kind == kind]
    if limit:
        entries = entries[-limit:]
    return [LogEntryResponse.model_validate(e) for e in entries]
