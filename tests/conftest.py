"""Shared fixtures for the CineLock tests."""

import random
from datetime import datetime, timedelta

import pytest

from cinelock.config import Settings
from cinelock.models.catalog import Show
from cinelock.services.catalog import CatalogService
from cinelock.services.event_log import EventLog
from cinelock.services.insight import InsightService
from cinelock.services.inventory import SeatInventory
from cinelock.services.lock_manager import LockManager
from cinelock.services.simulation import Simulation

T0 = datetime(2024, 5, 1, 14, 0, 0)


class FakeClock:
    """Manually advanced clock."""

    def __init__(self, start: datetime = T0):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now += timedelta(**kwargs)
        return self.now


class StubInsightService(InsightService):
    """Insight service that answers locally and records scenarios."""

    def __init__(self):
        super().__init__(api_key="")
        self.scenarios: list[str] = []

    async def explain(self, scenario: str) -> str:
        self.scenarios.append(scenario)
        return f"insight: {scenario}"


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        ACQUIRE_LATENCY_MS=0,
        COMMIT_LATENCY_MS=0,
        BOT_NETWORK_DELAY_MS=0,
        DEADLOCK_DETECTION_DELAY_MS=0,
        DEADLOCK_RETRY_DELAY_MS=0,
        EXPIRY_SCAN_INTERVAL_SECONDS=0.01,
        GEMINI_API_KEY="",
    )


@pytest.fixture
def catalog() -> CatalogService:
    return CatalogService()


@pytest.fixture
def show(catalog) -> Show:
    return catalog.get_show("s1")


@pytest.fixture
def event_log(clock) -> EventLog:
    return EventLog(capacity=50, clock=clock)


@pytest.fixture
def inventory(show) -> SeatInventory:
    return SeatInventory.initialize(show, rows=list("ABCDEFGH"), seats_per_row=10)


@pytest.fixture
def manager(inventory, event_log, clock) -> LockManager:
    return LockManager(
        inventory,
        event_log,
        lock_duration=timedelta(minutes=7),
        acquire_latency_ms=0,
        commit_latency_ms=0,
        clock=clock,
    )


@pytest.fixture
def insight_service() -> StubInsightService:
    return StubInsightService()


@pytest.fixture
def simulation(test_settings, catalog, insight_service, clock) -> Simulation:
    return Simulation(
        settings=test_settings,
        catalog=catalog,
        insight_service=insight_service,
        clock=clock,
        rng=random.Random(7),
    )
