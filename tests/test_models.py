import dataclasses
from datetime import date

import pytest

from officerev.models import ErrorResponse, Reservation


def test_error_response_to_dict_uses_error_key():
    assert ErrorResponse("boom").to_dict() == {"error": "boom"}


def test_error_response_equality():
    assert ErrorResponse("x") == ErrorResponse("x")
    assert ErrorResponse("x") != ErrorResponse("y")


def test_reservation_end_date_defaults_to_none():
    reservation = Reservation(3, 100.0, date(2020, 1, 1))
    assert reservation.end_date is None


def test_reservation_is_frozen():
    reservation = Reservation(3, 100.0, date(2020, 1, 1))
    with pytest.raises(dataclasses.FrozenInstanceError):
        reservation.capacity = 4
    assert reservation.capacity == 3


def test_reservation_fields_round_trip():
    reservation = Reservation(7, 250.5, date(2021, 2, 3), date(2021, 4, 5))
    assert dataclasses.astuple(reservation) == (
        7,
        250.5,
        date(2021, 2, 3),
        date(2021, 4, 5),
    )