"""Catalog API endpoints."""

from fastapi import APIRouter, HTTPException, status

from cinelock.api.v1.dependencies import SimulationDep
from cinelock.exceptions import CatalogNotFoundError
from cinelock.schemas.catalog import MovieResponse, ShowResponse

router = APIRouter()


@router.get(
    "/movies",
    response_model=list[MovieResponse],
    summary="List movies",
)
async def list_movies(simulation: SimulationDep) -> list[MovieResponse]:
    """List all movies in the catalog."""
    return [MovieResponse.model_validate(m) for m in simulation.catalog.list_movies()]


@router.get(
    "/shows",
    response_model=list[ShowResponse],
    summary="List shows",
)
async def list_shows(
    simulation: SimulationDep,
    movie_id: str | None = None,
) -> list[ShowResponse]:
    """List shows, optionally for a single movie."""
    try:
        shows = simulation.catalog.list_shows(movie_id)
    except CatalogNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    return [ShowResponse.model_validate(s) for s in shows]


@router.post(
    "/movies/{movie_id}/select",
    response_model=ShowResponse,
    summary="Select a movie",
)
async def select_movie(
    movie_id: str,
    simulation: SimulationDep,
) -> ShowResponse:
    """
    Select a movie and switch to its first show.

    The seat inventory is rebuilt; all locks and bookings are reset.
    """
    try:
        show = await simulation.select_movie(movie_id)
    except CatalogNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    return ShowResponse.model_validate(show)


@router.post(
    "/shows/{show_id}/select",
    response_model=ShowResponse,
    summary="Select a show",
)
async def select_show(
    show_id: str,
    simulation: SimulationDep,
) -> ShowResponse:
    """
    Select a show.

    The seat inventory is rebuilt; all locks and bookings are reset.
    """
    try:
        show = await simulation.select_show(show_id)
    except CatalogNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    return ShowResponse.model_validate(show)
