"""Background tasks for the seat lock simulation."""

import asyncio
import logging
from collections.abc import Callable
from datetime import datetime

from cinelock.config import get_settings
from cinelock.models.log import LogKind
from cinelock.services.event_log import EventLog
from cinelock.services.lock_manager import LockManager

settings = get_settings()
logger = logging.getLogger(__name__)


class ExpiryScheduler:
    """
    Periodic reclaim of expired seat locks.

    Runs a single loop task: sleep for the interval, then run one tick.
    A tick always finishes before the next sleep starts, so two reclaim
    passes never overlap. The scheduler only holds a reference to the
    LockManager and never touches seats itself.
    """

    def __init__(
        self,
        manager: LockManager,
        event_log: EventLog,
        interval_seconds: float | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.manager = manager
        self.event_log = event_log
        self.interval_seconds = (
            interval_seconds
            if interval_seconds is not None
            else settings.EXPIRY_SCAN_INTERVAL_SECONDS
        )
        self._clock = clock
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def tick(self) -> int:
        """Run one reclaim pass and log it when anything was released."""
        expired_count = await self.manager.reclaim_expired(self._clock())

        if expired_count > 0:
            self.event_log.append(
                LogKind.INFO,
                f"Scheduled task: Released {expired_count} expired locks.",
                "UPDATE seats SET status = 'AVAILABLE', locked_by = NULL, "
                "locked_at = NULL WHERE status = 'LOCKED' AND locked_at < :cutoff;",
            )
            logger.info(f"Reclaimed {expired_count} expired seat locks")

        return expired_count

    async def _run(self) -> None:
        logger.info(
            f"Starting lock expiry scheduler for {self.manager.inventory.show.theater}"
        )

        while True:
            await asyncio.sleep(self.interval_seconds)
            try:
                await self.tick()
            except Exception as e:
                logger.error(f"Error in lock expiry tick: {e}", exc_info=True)

    def start(self) -> None:
        """Start the scheduler loop if it is not running."""
        if self.running:
            return
        self._task = asyncio.create_task(self._run())

    async def stop(self) -> None:
        """Stop the scheduler loop."""
        if self._task is None:
            return

        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        logger.info("Lock expiry scheduler stopped")

    async def restart(self, manager: LockManager) -> None:
        """Stop the loop and start it again against a new lock manager."""
        await self.stop()
        self.manager = manager
        self.start()
