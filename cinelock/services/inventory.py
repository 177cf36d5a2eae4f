"""Seat inventory."""

from collections.abc import Iterable, Iterator

from cinelock.config import get_settings
from cinelock.exceptions import UnknownSeatError
from cinelock.models.catalog import Show
from cinelock.models.seat import Seat, SeatStatus

settings = get_settings()


class SeatInventory:
    """
    Ordered collection of the seats of one show, keyed by seat id.

    Read helpers return the live Seat objects; only the LockManager
    owning this inventory calls their transition methods. Use
    snapshot() to hand seats to anything outside that boundary.
    """

    def __init__(self, show: Show, seats: Iterable[Seat]):
        self.show = show
        self._seats: dict[str, Seat] = {seat.id: seat for seat in seats}

    @classmethod
    def initialize(
        cls,
        show: Show,
        rows: list[str] | None = None,
        seats_per_row: int | None = None,
    ) -> "SeatInventory":
        """Build one AVAILABLE seat per row and number, row-major."""
        if rows is None:
            rows = settings.seat_rows
        if seats_per_row is None:
            seats_per_row = settings.SEATS_PER_ROW

        seats = [
            Seat(id=f"{row}{number}", row=row, number=number)
            for row in rows
            for number in range(1, seats_per_row + 1)
        ]
        return cls(show, seats)

    def __len__(self) -> int:
        return len(self._seats)

    def __iter__(self) -> Iterator[Seat]:
        return iter(self._seats.values())

    def __contains__(self, seat_id: object) -> bool:
        return seat_id in self._seats

    def get(self, seat_id: str) -> Seat:
        """Get a seat by id."""
        try:
            return self._seats[seat_id]
        except KeyError:
            raise UnknownSeatError([seat_id]) from None

    def find(self, seat_ids: Iterable[str]) -> list[Seat]:
        """
        Get seats for the given ids, in the order given.

        Raises:
            UnknownSeatError: If any id is not part of this inventory
        """
        seat_ids = list(seat_ids)
        missing = [seat_id for seat_id in seat_ids if seat_id not in self._seats]
        if missing:
            raise UnknownSeatError(missing)
        return [self._seats[seat_id] for seat_id in seat_ids]

    def with_status(self, status: SeatStatus) -> list[Seat]:
        return [seat for seat in self._seats.values() if seat.status == status]

    def available(self) -> list[Seat]:
        return self.with_status(SeatStatus.AVAILABLE)

    def locked(self) -> list[Seat]:
        return self.with_status(SeatStatus.LOCKED)

    def locked_by(self, owner: str) -> list[Seat]:
        return [seat for seat in self.locked() if seat.locked_by == owner]

    def snapshot(self) -> list[Seat]:
        """Get detached copies of all seats."""
        return [seat.model_copy() for seat in self._seats.values()]

    def counts(self) -> dict[str, int]:
        """Get the number of seats per status."""
        counts = {status.value: 0 for status in SeatStatus}
        for seat in self._seats.values():
            counts[seat.status.value] += 1
        return counts
