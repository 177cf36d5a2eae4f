"""Scripted deadlock detection and rollback narrative."""

import asyncio
from collections.abc import AsyncIterator, Awaitable, Callable, Sequence

from pydantic import BaseModel, ConfigDict

from cinelock.config import get_settings
from cinelock.models.log import LogKind

settings = get_settings()


class ScriptStep(BaseModel):
    """One line of a scripted narrative, emitted after `delay_ms`."""

    model_config = ConfigDict(frozen=True)

    delay_ms: int = 0
    kind: LogKind
    message: str
    query: str | None = None


def deadlock_script(
    detection_delay_ms: int | None = None,
    retry_delay_ms: int | None = None,
) -> list[ScriptStep]:
    """Build the textbook two-transaction deadlock story."""
    if detection_delay_ms is None:
        detection_delay_ms = settings.DEADLOCK_DETECTION_DELAY_MS
    if retry_delay_ms is None:
        retry_delay_ms = settings.DEADLOCK_RETRY_DELAY_MS

    return [
        ScriptStep(
            kind=LogKind.DEADLOCK,
            message=(
                "Forcing Deadlock Scenario: User A locks S1 -> User B locks S2 "
                "-> User A requests S2 -> User B requests S1"
            ),
        ),
        ScriptStep(
            delay_ms=detection_delay_ms,
            kind=LogKind.ERROR,
            message=(
                "Deadlock detected! Database engine kills Transaction B. "
                "Transaction A retries."
            ),
            query="ROLLBACK TO SAVEPOINT;",
        ),
        ScriptStep(kind=LogKind.INFO, message="Retrying Transaction A..."),
        ScriptStep(
            delay_ms=retry_delay_ms,
            kind=LogKind.SUCCESS,
            message="Transaction A recovered and completed.",
        ),
    ]


async def narrate(
    steps: Sequence[ScriptStep],
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> AsyncIterator[ScriptStep]:
    """Yield each step once its delay has passed."""
    for step in steps:
        if step.delay_ms:
            await sleep(step.delay_ms / 1000)
        yield step
