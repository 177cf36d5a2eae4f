"""
Unit tests for the domain exceptions
"""

import pytest

from cinelock import exceptions
from cinelock.exceptions import (
    ActorBusyError,
    AdvisoryUnavailableError,
    CatalogNotFoundError,
    CineLockError,
    EmptyLockRequestError,
    UnknownSeatError,
)


class TestExceptions:
    @pytest.mark.unit
    def test_module_is_documented(self):
        assert exceptions.__doc__

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "error_cls",
        [
            UnknownSeatError,
            EmptyLockRequestError,
            CatalogNotFoundError,
            ActorBusyError,
            AdvisoryUnavailableError,
        ],
    )
    def test_all_errors_share_base(self, error_cls):
        assert issubclass(error_cls, CineLockError)

    @pytest.mark.unit
    def test_empty_request_is_value_error(self):
        assert issubclass(EmptyLockRequestError, ValueError)

    @pytest.mark.unit
    def test_unknown_seat_error_lists_ids(self):
        error = UnknownSeatError(["X1", "Y2"])

        assert error.seat_ids == ["X1", "Y2"]
        assert str(error) == "Unknown seats: X1, Y2"
