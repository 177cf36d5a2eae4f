"""
Seat lock simulation for the selected show.

Owns the current inventory and its lock manager, the expiry scheduler,
the event log, the primary user's selection and the insight board, and
exposes the user-facing actions of the simulation.
"""

import logging
import random
from collections.abc import Callable
from datetime import datetime
from typing import Any

from cinelock.config import Settings, get_settings
from cinelock.exceptions import CatalogNotFoundError
from cinelock.models.catalog import Movie, Show
from cinelock.models.lock import (
    AcquireResult,
    AcquireStatus,
    CommitResult,
    CommitStatus,
    UserSession,
)
from cinelock.models.log import LogEntry, LogKind
from cinelock.services.actors import BotActor, PrimaryActor
from cinelock.services.catalog import CatalogService
from cinelock.services.deadlock import deadlock_script, narrate
from cinelock.services.event_log import EventLog
from cinelock.services.insight import InsightBoard, InsightService
from cinelock.services.inventory import SeatInventory
from cinelock.services.lock_manager import LockManager
from cinelock.tasks import ExpiryScheduler

logger = logging.getLogger(__name__)

# Scenarios sent to the insight service after notable transitions
INSIGHT_LOCKED = "A user initiates a booking, triggering a row-level lock in the DB."
INSIGHT_CONFLICT = "Pessimistic locking prevents a double-booking conflict."
INSIGHT_BOOKED = (
    "Payment success triggers status update to BOOKED and a database COMMIT."
)
INSIGHT_BOT = "Concurrent access is handled using transaction management."
INSIGHT_DEADLOCK = (
    "A deadlock occurs when two transactions hold locks and wait for each other. "
    "The database detects this and rolls back one."
)


class Simulation:
    """Single-show seat lock simulation."""

    def __init__(
        self,
        settings: Settings | None = None,
        catalog: CatalogService | None = None,
        insight_service: InsightService | None = None,
        clock: Callable[[], datetime] = datetime.now,
        rng: random.Random | None = None,
    ):
        self.settings = settings or get_settings()
        self.catalog = catalog or CatalogService()
        self._clock = clock

        self.event_log = EventLog(capacity=self.settings.LOG_CAPACITY, clock=clock)
        self.insight = InsightBoard(
            insight_service
            or InsightService(
                api_key=self.settings.GEMINI_API_KEY,
                model=self.settings.GEMINI_MODEL,
                base_url=self.settings.GEMINI_BASE_URL,
                timeout_seconds=self.settings.INSIGHT_TIMEOUT_SECONDS,
            )
        )
        self.primary = PrimaryActor(
            UserSession(
                user_id=self.settings.PRIMARY_USER_ID,
                user_name=self.settings.PRIMARY_USER_NAME,
            )
        )
        self.bot = BotActor(
            rng=rng,
            network_delay_ms=self.settings.BOT_NETWORK_DELAY_MS,
        )

        self.show: Show = self.catalog.default_show()
        self.movie: Movie = self.catalog.get_movie(self.show.movie_id)
        self.inventory, self.lock_manager = self._build_inventory(self.show)
        self.scheduler = ExpiryScheduler(
            self.lock_manager,
            self.event_log,
            interval_seconds=self.settings.EXPIRY_SCAN_INTERVAL_SECONDS,
            clock=clock,
        )

    def _build_inventory(self, show: Show) -> tuple[SeatInventory, LockManager]:
        inventory = SeatInventory.initialize(
            show,
            rows=self.settings.seat_rows,
            seats_per_row=self.settings.SEATS_PER_ROW,
        )
        manager = LockManager(
            inventory,
            self.event_log,
            lock_duration=self.settings.lock_duration,
            acquire_latency_ms=self.settings.ACQUIRE_LATENCY_MS,
            commit_latency_ms=self.settings.COMMIT_LATENCY_MS,
            clock=self._clock,
        )
        self.event_log.append(
            LogKind.INFO, f"Initialized seat inventory for {show.theater}."
        )
        return inventory, manager

    async def start(self) -> None:
        """Start the expiry scheduler."""
        self.scheduler.start()
        logger.info(f"Simulation started for show {self.show.id}")

    async def stop(self) -> None:
        await self.scheduler.stop()
        await self.insight.close()
        logger.info("Simulation stopped")

    async def select_show(self, show_id: str) -> Show:
        """
        Switch to another show.

        The inventory is rebuilt from scratch; locks and bookings of the
        previous show are discarded together with the user's selection.
        Operations still in flight finish against the old inventory.
        """
        show = self.catalog.get_show(show_id)
        self.movie = self.catalog.get_movie(show.movie_id)
        self.show = show
        self.primary.clear()
        self.inventory, self.lock_manager = self._build_inventory(show)

        if self.scheduler.running:
            await self.scheduler.restart(self.lock_manager)
        else:
            self.scheduler.manager = self.lock_manager

        logger.info(f"Selected show {show.id} ({show.theater} {show.time})")
        return show

    async def select_movie(self, movie_id: str) -> Show:
        """Switch to the first show of a movie."""
        shows = self.catalog.list_shows(movie_id)
        if not shows:
            raise CatalogNotFoundError(f"Movie {movie_id} has no shows")
        return await self.select_show(shows[0].id)

    def toggle_seat(self, seat_id: str) -> bool:
        """
        Toggle a seat in the primary user's selection.

        Raises:
            UnknownSeatError: If the seat is not part of the current show
        """
        self.inventory.get(seat_id)
        return self.primary.toggle(seat_id)

    async def lock_selection(self) -> AcquireResult | None:
        result = await self.primary.lock_selection(self.lock_manager)
        if result is None:
            return None

        if result.status == AcquireStatus.LOCKED:
            self.insight.annotate(INSIGHT_LOCKED)
        else:
            self.insight.annotate(INSIGHT_CONFLICT)
        return result

    async def checkout(self) -> CommitResult:
        result = await self.primary.checkout(self.lock_manager)
        if result.status == CommitStatus.BOOKED:
            self.insight.annotate(INSIGHT_BOOKED)
        return result

    async def spawn_bot(self) -> AcquireResult | None:
        result = await self.bot.spawn(self.lock_manager)
        if result is None:
            return None

        if result.status == AcquireStatus.LOCKED:
            self.insight.annotate(INSIGHT_BOT)
        else:
            self.insight.annotate(INSIGHT_CONFLICT)
        return result

    async def run_deadlock(self) -> list[LogEntry]:
        """Play the deadlock narrative into the event log."""
        steps = deadlock_script(
            detection_delay_ms=self.settings.DEADLOCK_DETECTION_DELAY_MS,
            retry_delay_ms=self.settings.DEADLOCK_RETRY_DELAY_MS,
        )

        entries = []
        async for step in narrate(steps):
            entries.append(self.event_log.append(step.kind, step.message, step.query))
            if step.kind == LogKind.DEADLOCK:
                self.insight.annotate(INSIGHT_DEADLOCK)
        return entries

    def summary(self) -> dict[str, Any]:
        """Booking summary of the primary user."""
        selected = len(self.primary.selection)
        locked = len(self.lock_manager.held_by(self.primary.user_id))
        return {
            "selected_count": selected,
            "locked_count": locked,
            "subtotal": (selected + locked) * self.show.price,
            "processing": self.primary.processing,
        }

    def snapshot(self) -> dict[str, Any]:
        """Read-only view of the whole simulation."""
        return {
            "movie": self.movie,
            "show": self.show,
            "session": self.primary.session,
            "seats": self.inventory.snapshot(),
            "selected_seat_ids": list(self.primary.selection),
            "logs": self.event_log.snapshot(),
            "insight": self.insight.text,
            "insight_loading": self.insight.loading,
            "summary": self.summary(),
        }


# Global instance
_simulation: Simulation | None = None


async def get_simulation() -> Simulation:
    """Get the simulation instance."""
    global _simulation
    if _simulation is None:
        _simulation = Simulation()
    return _simulation


async def shutdown_simulation() -> None:
    """Shutdown the simulation."""
    global _simulation
    if _simulation is not None:
        await _simulation.stop()
        _simulation = None
