"""API v1 main router."""

from fastapi import APIRouter

from cinelock.api.v1.catalog import router as catalog_router
from cinelock.api.v1.locks import router as locks_router
from cinelock.api.v1.logs import router as logs_router
from cinelock.api.v1.seats import router as seats_router
from cinelock.api.v1.simulations import router as simulations_router
from cinelock.api.v1.websocket import router as websocket_router

router = APIRouter(prefix="/v1")

router.include_router(catalog_router, prefix="/catalog", tags=["Catalog"])
router.include_router(seats_router, prefix="/seats", tags=["Seats"])
router.include_router(locks_router, prefix="/locks", tags=["Locks"])
router.include_router(simulations_router, prefix="/simulations", tags=["Simulations"])
router.include_router(logs_router, prefix="/logs", tags=["Logs"])
router.include_router(websocket_router, prefix="/ws", tags=["WebSocket"])
