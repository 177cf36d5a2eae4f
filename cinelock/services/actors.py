"""Simulated actors driving the lock manager."""

import asyncio
import logging
import random
from collections.abc import Sequence

from ulid import ULID

from cinelock.config import get_settings
from cinelock.exceptions import ActorBusyError
from cinelock.models.lock import AcquireResult, CommitResult, UserSession
from cinelock.models.log import LogKind
from cinelock.services.lock_manager import LockManager

settings = get_settings()
logger = logging.getLogger(__name__)

BOT_SEAT_COUNT = 2


def pick_bot_seats(
    available_ids: Sequence[str],
    rng: random.Random,
    count: int = BOT_SEAT_COUNT,
) -> list[str] | None:
    """
    Pick `count` seat ids uniformly at random from the available ones.

    Returns None when fewer than `count` seats are available.
    """
    if len(available_ids) < count:
        return None
    return rng.sample(list(available_ids), count)


def new_bot_id() -> str:
    """Generate an ephemeral identity for one bot session."""
    return f"u-bot-{str(ULID())[-5:].lower()}"


class PrimaryActor:
    """
    The end user: a local seat selection plus lock and checkout actions.

    The selection is not part of the inventory; it only becomes a lock
    request when lock_selection() is called. One operation at a time.
    """

    def __init__(self, session: UserSession):
        self.session = session
        self.selection: list[str] = []
        self.processing = False

    @property
    def user_id(self) -> str:
        return self.session.user_id

    def toggle(self, seat_id: str) -> bool:
        """Add or remove a seat from the selection. Returns True if now selected."""
        if seat_id in self.selection:
            self.selection.remove(seat_id)
            return False
        self.selection.append(seat_id)
        return True

    def clear(self) -> None:
        self.selection.clear()

    def _begin(self) -> None:
        if self.processing:
            raise ActorBusyError(f"{self.user_id} already has an operation in flight")
        self.processing = True

    async def lock_selection(self, manager: LockManager) -> AcquireResult | None:
        """
        Acquire the selected seats, then clear the selection.

        Returns None without touching the manager if nothing is selected.
        """
        if not self.selection:
            return None

        self._begin()
        try:
            return await manager.acquire(self.user_id, list(self.selection))
        finally:
            self.clear()
            self.processing = False

    async def checkout(self, manager: LockManager) -> CommitResult:
        """Commit every seat this user holds."""
        self._begin()
        try:
            return await manager.commit(self.user_id)
        finally:
            self.processing = False


class BotActor:
    """Competing user grabbing random free seats under a fresh identity."""

    def __init__(
        self,
        rng: random.Random | None = None,
        network_delay_ms: int | None = None,
    ):
        self.rng = rng or random.Random()
        self.network_delay_ms = (
            network_delay_ms
            if network_delay_ms is not None
            else settings.BOT_NETWORK_DELAY_MS
        )

    async def spawn(self, manager: LockManager) -> AcquireResult | None:
        """
        Run one bot session against the manager.

        Skips silently and returns None when fewer than two seats are
        available.
        """
        available_ids = [seat.id for seat in manager.inventory.available()]
        target_ids = pick_bot_seats(available_ids, self.rng)
        if target_ids is None:
            logger.debug("Bot skipped: not enough available seats")
            return None

        bot_id = new_bot_id()
        manager.event_log.append(
            LogKind.INFO,
            f"Simulating concurrent bot user access ({bot_id})...",
        )

        # The network delay stands in for the acquire latency
        await asyncio.sleep(self.network_delay_ms / 1000)
        return await manager.acquire(bot_id, target_ids, latency_ms=0)
