"""API v1 routers package."""

from cinelock.api.v1.catalog import router as catalog_router
from cinelock.api.v1.locks import router as locks_router
from cinelock.api.v1.logs import router as logs_router
from cinelock.api.v1.seats import router as seats_router
from cinelock.api.v1.simulations import router as simulations_router

__all__ = [
    "catalog_router",
    "seats_router",
    "locks_router",
    "simulations_router",
    "logs_router",
]
