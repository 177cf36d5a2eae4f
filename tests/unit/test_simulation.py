"""
Unit tests for Simulation

Tests show selection, user actions, insight annotations and snapshots.
"""

import pytest

from cinelock.exceptions import CatalogNotFoundError, UnknownSeatError
from cinelock.models.catalog import Movie
from cinelock.models.lock import AcquireStatus, CommitStatus
from cinelock.models.log import LogKind
from cinelock.models.seat import SeatStatus
from cinelock.services.catalog import MOVIES, CatalogService
from cinelock.services.simulation import (
    INSIGHT_BOOKED,
    INSIGHT_BOT,
    INSIGHT_CONFLICT,
    INSIGHT_DEADLOCK,
    INSIGHT_LOCKED,
    Simulation,
)


class TestShowSelection:
    @pytest.mark.asyncio
    async def test_starts_on_first_show(self, simulation):
        assert simulation.show.id == "s1"
        assert simulation.movie.id == "m1"
        assert len(simulation.inventory) == 80
        assert simulation.event_log.snapshot()[0].message == (
            "Initialized seat inventory for IMAX screen 1."
        )

    @pytest.mark.asyncio
    async def test_select_show_resets_inventory(self, simulation):
        simulation.toggle_seat("A1")
        await simulation.lock_selection()
        simulation.toggle_seat("B1")
        old_inventory = simulation.inventory

        show = await simulation.select_show("s3")

        assert show.id == "s3"
        assert simulation.movie.id == "m2"
        assert simulation.inventory is not old_inventory
        assert simulation.lock_manager.inventory is simulation.inventory
        assert simulation.scheduler.manager is simulation.lock_manager
        assert all(s.status == SeatStatus.AVAILABLE for s in simulation.inventory)
        assert simulation.primary.selection == []
        assert simulation.event_log.snapshot()[-1].message == (
            "Initialized seat inventory for Screen 4."
        )

    @pytest.mark.asyncio
    async def test_select_show_restarts_running_scheduler(self, simulation):
        await simulation.start()
        try:
            await simulation.select_show("s2")
            assert simulation.scheduler.running
            assert simulation.scheduler.manager is simulation.lock_manager
        finally:
            await simulation.stop()

        assert not simulation.scheduler.running

    @pytest.mark.asyncio
    async def test_select_movie_picks_its_first_show(self, simulation):
        show = await simulation.select_movie("m3")

        assert show.id == "s4"
        assert simulation.show.price == 14

    @pytest.mark.asyncio
    async def test_select_movie_without_shows(self, test_settings, insight_service):
        unscheduled = Movie(
            id="m9",
            title="Unscheduled",
            genre="Drama",
            duration="1h 40m",
            image="",
            rating="7.0",
        )
        catalog = CatalogService(movies=[*MOVIES, unscheduled])
        simulation = Simulation(
            settings=test_settings,
            catalog=catalog,
            insight_service=insight_service,
        )

        with pytest.raises(CatalogNotFoundError):
            await simulation.select_movie("m9")
        assert simulation.show.id == "s1"

    @pytest.mark.asyncio
    async def test_unknown_show(self, simulation):
        with pytest.raises(CatalogNotFoundError):
            await simulation.select_show("s9")


class TestUserActions:
    @pytest.mark.asyncio
    async def test_toggle_unknown_seat(self, simulation):
        with pytest.raises(UnknownSeatError):
            simulation.toggle_seat("Z1")

    @pytest.mark.asyncio
    async def test_lock_then_checkout(self, simulation, insight_service):
        simulation.toggle_seat("C3")
        simulation.toggle_seat("C4")

        locked = await simulation.lock_selection()
        booked = await simulation.checkout()
        await simulation.insight.wait()

        assert locked.status == AcquireStatus.LOCKED
        assert booked.status == CommitStatus.BOOKED
        assert simulation.inventory.get("C3").status == SeatStatus.BOOKED
        assert insight_service.scenarios == [INSIGHT_LOCKED, INSIGHT_BOOKED]
        assert simulation.insight.text == f"insight: {INSIGHT_BOOKED}"

    @pytest.mark.asyncio
    async def test_conflict_is_annotated(self, simulation, insight_service):
        await simulation.lock_manager.acquire("other", ["A1"])
        simulation.toggle_seat("A1")

        result = await simulation.lock_selection()
        await simulation.insight.wait()

        assert result.status == AcquireStatus.CONFLICT
        assert insight_service.scenarios == [INSIGHT_CONFLICT]

    @pytest.mark.asyncio
    async def test_empty_actions_do_not_annotate(self, simulation, insight_service):
        assert await simulation.lock_selection() is None
        result = await simulation.checkout()
        await simulation.insight.wait()

        assert result.status == CommitStatus.NOOP
        assert insight_service.scenarios == []

    @pytest.mark.asyncio
    async def test_spawn_bot(self, simulation, insight_service):
        result = await simulation.spawn_bot()
        await simulation.insight.wait()

        assert result.status == AcquireStatus.LOCKED
        assert insight_service.scenarios == [INSIGHT_BOT]
        assert len(simulation.inventory.locked()) == 2

    @pytest.mark.asyncio
    async def test_run_deadlock_leaves_seats_alone(self, simulation, insight_service):
        before = simulation.inventory.snapshot()

        entries = await simulation.run_deadlock()
        await simulation.insight.wait()

        assert [e.kind for e in entries] == [
            LogKind.DEADLOCK,
            LogKind.ERROR,
            LogKind.INFO,
            LogKind.SUCCESS,
        ]
        assert simulation.event_log.snapshot()[-4:] == entries
        assert simulation.inventory.snapshot() == before
        assert insight_service.scenarios == [INSIGHT_DEADLOCK]


class TestSnapshot:
    @pytest.mark.asyncio
    async def test_summary_counts_selection_and_locks(self, simulation):
        simulation.toggle_seat("A1")
        simulation.toggle_seat("A2")
        await simulation.lock_selection()
        simulation.toggle_seat("B1")

        summary = simulation.summary()

        assert summary == {
            "selected_count": 1,
            "locked_count": 2,
            "subtotal": 3 * 15,
            "processing": False,
        }

    @pytest.mark.asyncio
    async def test_snapshot_contents(self, simulation):
        simulation.toggle_seat("H10")

        snapshot = simulation.snapshot()

        assert snapshot["show"].id == "s1"
        assert snapshot["session"].user_id == "u-current"
        assert len(snapshot["seats"]) == 80
        assert snapshot["selected_seat_ids"] == ["H10"]
        assert snapshot["logs"] == simulation.event_log.snapshot()
        assert snapshot["insight"] == simulation.insight.text
