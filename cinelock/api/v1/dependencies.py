"""API dependencies."""

from typing import Annotated

from fastapi import Depends, Header, HTTPException, status

from cinelock.services.simulation import Simulation, get_simulation


async def get_current_user_id(
    x_user_id: Annotated[str | None, Header()] = None,
) -> str:
    """
    Get requester identity from header.
    The simulation trusts the header; there is no authentication.
    """
    if not x_user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="X-User-ID header is required",
        )
    return x_user_id


CurrentUser = Annotated[str, Depends(get_current_user_id)]
SimulationDep = Annotated[Simulation, Depends(get_simulation)]
