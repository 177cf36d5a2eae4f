"""Lock manager enforcing the seat lock lifecycle."""

import asyncio
import logging
from collections.abc import Callable, Iterable
from datetime import datetime, timedelta

from cinelock.config import get_settings
from cinelock.models.lock import (
    AcquireResult,
    AcquireStatus,
    CommitResult,
    CommitStatus,
    LockRequest,
)
from cinelock.models.log import LogKind
from cinelock.models.seat import SeatStatus
from cinelock.services.event_log import EventLog
from cinelock.services.inventory import SeatInventory

settings = get_settings()
logger = logging.getLogger(__name__)


def _quoted(seat_ids: Iterable[str]) -> str:
    return ",".join(f"'{seat_id}'" for seat_id in seat_ids)


class LockManager:
    """
    Acquire, commit and release operations over one seat inventory.

    Every mutation runs under a single inventory mutex and contains no
    await once the mutex is held, so a conflict check and the writes
    that follow it are never interleaved with another operation.
    Simulated latency is always spent before taking the mutex.
    """

    def __init__(
        self,
        inventory: SeatInventory,
        event_log: EventLog,
        lock_duration: timedelta | None = None,
        acquire_latency_ms: int | None = None,
        commit_latency_ms: int | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.inventory = inventory
        self.event_log = event_log
        self.lock_duration = (
            lock_duration if lock_duration is not None else settings.lock_duration
        )
        self.acquire_latency_ms = (
            acquire_latency_ms
            if acquire_latency_ms is not None
            else settings.ACQUIRE_LATENCY_MS
        )
        self.commit_latency_ms = (
            commit_latency_ms
            if commit_latency_ms is not None
            else settings.COMMIT_LATENCY_MS
        )
        self._clock = clock
        self._mutex = asyncio.Lock()

    @property
    def lock_minutes(self) -> int:
        return int(self.lock_duration.total_seconds() // 60)

    def held_by(self, requester_id: str) -> list[str]:
        """Get ids of seats currently locked by the requester."""
        return [seat.id for seat in self.inventory.locked_by(requester_id)]

    async def acquire(
        self,
        requester_id: str,
        seat_ids: Iterable[str],
        latency_ms: int | None = None,
    ) -> AcquireResult:
        """
        Lock all requested seats for the requester, or none of them.

        Any requested seat that is not AVAILABLE makes the whole request
        fail with a CONFLICT, including seats the requester already holds.
        `latency_ms` overrides the manager's acquire latency for callers
        that already waited out their own delay.

        Raises:
            EmptyLockRequestError: If no seat ids are given
            UnknownSeatError: If a seat id is not in the inventory
        """
        request = LockRequest.build(requester_id, list(seat_ids))
        # Validate ids before spending the latency
        self.inventory.find(request.seat_ids)

        self.event_log.append(
            LogKind.INFO,
            f"Initiating transaction for user {request.requester_id}...",
        )
        if latency_ms is None:
            latency_ms = self.acquire_latency_ms
        await asyncio.sleep(latency_ms / 1000)

        async with self._mutex:
            return self._acquire_now(request)

    def _acquire_now(self, request: LockRequest) -> AcquireResult:
        ids = list(request.seat_ids)
        self.event_log.append(
            LogKind.DB_LOCK,
            f"Attempting Pessimistic Lock on seats: {', '.join(ids)}",
            f"SELECT * FROM seats WHERE id IN ({_quoted(ids)}) FOR UPDATE;",
        )

        seats = self.inventory.find(ids)
        conflicts = [seat.id for seat in seats if seat.status != SeatStatus.AVAILABLE]

        if conflicts:
            self.event_log.append(
                LogKind.ERROR,
                "Transaction failed: Some seats are already locked or booked.",
                "ROLLBACK;",
            )
            logger.info(
                f"Lock conflict for {request.requester_id} on {', '.join(conflicts)}"
            )
            return AcquireResult(
                status=AcquireStatus.CONFLICT,
                requester_id=request.requester_id,
                seat_ids=ids,
                conflicting_ids=conflicts,
            )

        now = self._clock()
        for seat in seats:
            seat.lock(request.requester_id, now)

        self.event_log.append(
            LogKind.SUCCESS,
            f"Seats locked for {self.lock_minutes} minutes. Awaiting payment...",
            "COMMIT;",
        )
        return AcquireResult(
            status=AcquireStatus.LOCKED,
            requester_id=request.requester_id,
            seat_ids=ids,
        )

    async def commit(self, requester_id: str) -> CommitResult:
        """
        Book every seat currently locked by the requester.

        A requester holding no locks gets a NOOP and nothing is logged.
        """
        if not self.held_by(requester_id):
            return CommitResult(status=CommitStatus.NOOP, requester_id=requester_id)

        self.event_log.append(LogKind.INFO, "Payment gateway processing...")
        await asyncio.sleep(self.commit_latency_ms / 1000)

        async with self._mutex:
            seats = self.inventory.locked_by(requester_id)
            if not seats:
                # Locks expired while the payment was settling
                return CommitResult(
                    status=CommitStatus.NOOP, requester_id=requester_id
                )

            for seat in seats:
                seat.book()

            self.event_log.append(
                LogKind.SUCCESS,
                "Payment successful. Transaction committed.",
                f"UPDATE seats SET status = 'BOOKED' WHERE locked_by = '{requester_id}';",
            )
            return CommitResult(
                status=CommitStatus.BOOKED,
                requester_id=requester_id,
                seat_ids=[seat.id for seat in seats],
            )

    async def release(self, seat_ids: Iterable[str]) -> list[str]:
        """
        Return locked seats to AVAILABLE regardless of their owner.

        BOOKED seats are terminal and are left untouched.

        Returns:
            Ids of the seats that were released

        Raises:
            UnknownSeatError: If a seat id is not in the inventory
        """
        ids = list(dict.fromkeys(seat_ids))
        if not ids:
            return []

        async with self._mutex:
            seats = [
                seat
                for seat in self.inventory.find(ids)
                if seat.status == SeatStatus.LOCKED
            ]
            if not seats:
                return []

            ids = [seat.id for seat in seats]
            for seat in seats:
                seat.release()

            self.event_log.append(
                LogKind.INFO,
                f"Released locks on seats: {', '.join(ids)}",
                "UPDATE seats SET status = 'AVAILABLE', locked_by = NULL, "
                f"locked_at = NULL WHERE id IN ({_quoted(ids)});",
            )
            return ids

    async def reclaim_expired(self, now: datetime | None = None) -> int:
        """
        Release every lock held longer than the lock duration.

        Returns:
            Number of seats reclaimed
        """
        if now is None:
            now = self._clock()

        async with self._mutex:
            expired = [
                seat
                for seat in self.inventory.locked()
                if seat.is_expired(now, self.lock_duration)
            ]
            for seat in expired:
                seat.release()
            return len(expired)
