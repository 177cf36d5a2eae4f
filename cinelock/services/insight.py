"""Insight advisory service backed by the Gemini API."""

import asyncio
import logging

import httpx

from cinelock.config import get_settings
from cinelock.exceptions import AdvisoryUnavailableError

settings = get_settings()
logger = logging.getLogger(__name__)

FALLBACK_INSIGHT = (
    "The system is currently handling high-concurrency transactions. "
    "Ensure ACID compliance."
)
EMPTY_INSIGHT = "Insight unavailable."
WELCOME_INSIGHT = (
    "Welcome to CineLock. Select a movie to begin the concurrent booking simulation."
)

PROMPT_TEMPLATE = (
    'As an expert Backend Engineer, explain the technical mechanism for the '
    'following movie booking scenario: "{scenario}". '
    "Focus on transactional boundaries, Pessimistic Locking (SELECT FOR UPDATE), "
    "Deadlock prevention, and scheduled tasks for lock release. "
    "Keep the explanation concise (max 3 sentences) and highly technical."
)


class InsightService:
    """
    Client for the advisory text generator.

    explain() never raises: any failure is logged and replaced by a
    fixed fallback text.
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        base_url: str | None = None,
        timeout_seconds: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key if api_key is not None else settings.GEMINI_API_KEY
        self.model = model or settings.GEMINI_MODEL
        self.base_url = (base_url or settings.GEMINI_BASE_URL).rstrip("/")
        self.timeout_seconds = (
            timeout_seconds
            if timeout_seconds is not None
            else settings.INSIGHT_TIMEOUT_SECONDS
        )
        self._transport = transport

    async def explain(self, scenario: str) -> str:
        """Get a short technical explanation of a booking scenario."""
        try:
            return await self._generate(scenario)
        except AdvisoryUnavailableError as e:
            logger.error(f"Insight service error: {e}")
            return FALLBACK_INSIGHT

    async def _generate(self, scenario: str) -> str:
        if not self.api_key:
            raise AdvisoryUnavailableError("No Gemini API key configured")

        payload = {
            "contents": [
                {"parts": [{"text": PROMPT_TEMPLATE.format(scenario=scenario)}]}
            ]
        }

        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout_seconds,
                transport=self._transport,
            ) as client:
                response = await client.post(
                    f"/models/{self.model}:generateContent",
                    params={"key": self.api_key},
                    json=payload,
                )
                response.raise_for_status()
                data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            raise AdvisoryUnavailableError(str(e)) from e

        try:
            parts = data["candidates"][0]["content"]["parts"]
            texts = [part.get("text", "") for part in parts]
        except (KeyError, IndexError, TypeError, AttributeError) as e:
            raise AdvisoryUnavailableError(f"Malformed response: {e}") from e

        if not all(isinstance(text, str) for text in texts):
            raise AdvisoryUnavailableError("Malformed response: non-text part")

        text = "".join(texts).strip()
        return text or EMPTY_INSIGHT


class InsightBoard:
    """
    Latest advisory text shown next to the simulation.

    Explanations are requested as background tasks so a slow or failing
    advisory service never delays a lock operation. When several are in
    flight the most recently requested one wins.
    """

    def __init__(self, service: InsightService | None = None):
        self.service = service or InsightService()
        self.text = WELCOME_INSIGHT
        self._tasks: set[asyncio.Task] = set()
        self._generation = 0

    @property
    def loading(self) -> bool:
        return any(not task.done() for task in self._tasks)

    def annotate(self, scenario: str) -> asyncio.Task:
        """Request an explanation for the scenario in the background."""
        self._generation += 1
        task = asyncio.create_task(self._update(scenario, self._generation))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def _update(self, scenario: str, generation: int) -> None:
        text = await self.service.explain(scenario)
        if generation == self._generation:
            self.text = text

    async def wait(self) -> None:
        """Wait for all pending explanations."""
        if self._tasks:
            await asyncio.gather(*list(self._tasks))

    async def close(self) -> None:
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        self._tasks.clear()
