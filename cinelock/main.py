"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from cinelock.api.v1.dependencies import SimulationDep
from cinelock.api.v1.router import router as v1_router
from cinelock.config import get_settings
from cinelock.schemas.common import ErrorResponse
from cinelock.services.simulation import get_simulation, shutdown_simulation


# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    logger.info("Starting CineLock Simulation API...")

    simulation = await get_simulation()
    await simulation.start()

    yield

    # Shutdown
    logger.info("Shutting down CineLock Simulation API...")
    await shutdown_simulation()


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="""
## CineLock Simulation API

A movie seat booking simulation showing how a backend keeps concurrent
users from double-booking a seat.

### Seat lifecycle
- **AVAILABLE** seats can be locked
- **LOCKED** seats belong to one user for 7 minutes, then expire
- **BOOKED** seats are final

### Mechanisms
- **Pessimistic Locking**: a lock request takes all seats or none
- **Conflict Detection**: any locked or booked seat fails the whole request
- **Scheduled Expiry**: a background task reclaims stale locks every 5 seconds
- **Bounded Log**: the last 50 state transitions, also streamed over WebSocket

### Simulation controls
1. Pick a movie and show
2. Toggle seats and lock them for the main user
3. Spawn concurrent bots or force a deadlock narrative
4. Confirm and pay to book the locked seats

### Requesters
The raw `/locks` endpoints take the requester from the `X-User-ID` header.
        """,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include API routers
    app.include_router(v1_router, prefix="/api")

    # Health check endpoint
    @app.get("/health", tags=["Health"])
    async def health_check(simulation: SimulationDep):
        """Health check endpoint."""
        return {
            "status": "healthy",
            "version": settings.APP_VERSION,
            "show_id": simulation.show.id,
            "scheduler_running": simulation.scheduler.running,
        }

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Handle uncaught exceptions."""
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        error = ErrorResponse(
            error="Internal Server Error",
            detail=str(exc) if settings.DEBUG else None,
        )
        return JSONResponse(
            status_code=500,
            content=error.model_dump(mode="json"),
        )

    return app


# Create application instance
app = create_app()


def run():
    """Run the application with uvicorn."""
    uvicorn.run(
        "cinelock.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
    )


if __name__ == "__main__":
    run()
