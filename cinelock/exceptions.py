"""Domain exceptions for the seat lock simulation."""


class CineLockError(Exception):
    """
    Base exception for all domain-level errors
    inside the seat lock simulation.
    """


class UnknownSeatError(CineLockError):
    """
    Raised when a seat id does not belong to the current inventory.
    """

    def __init__(self, seat_ids: list[str]):
        self.seat_ids = seat_ids
        super().__init__(f"Unknown seats: {', '.join(seat_ids)}")


class EmptyLockRequestError(CineLockError, ValueError):
    """Raised when a lock request names no seats."""


class CatalogNotFoundError(CineLockError):
    """Raised when a movie or show id is not in the catalog."""


class ActorBusyError(CineLockError):
    """Raised when the primary actor already has an operation in flight."""


class AdvisoryUnavailableError(CineLockError):
    """Raised when the insight service cannot produce an explanation."""
