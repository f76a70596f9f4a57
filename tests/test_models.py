"""Tests for the Bicycle and Reservation models."""

from datetime import date, datetime

import pytest
from pydantic import ValidationError

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from rental.models import (
    Bicycle,
    BicycleCategory,
    BicycleDraft,
    Reservation,
    ReservationStatus,
    StatusChange,
)


def _reservation_data(**overrides) -> dict:
    data = {
        "id": "r1",
        "customer_name": "Sara Benali",
        "phone_number": "0612345678",
        "duration": 2,
        "reservation_date": "2024-05-01",
        "bicycle_category": "City",
        "status": "Pending",
    }
    data.update(overrides)
    return data


class TestReservation:
    def test_basic_fields(self):
        r = Reservation(**_reservation_data())
        assert r.bicycle_category is BicycleCategory.CITY
        assert r.status is ReservationStatus.PENDING
        assert r.reservation_date == "2024-05-01"

    def test_status_defaults_to_pending(self):
        data = _reservation_data()
        del data["status"]
        assert Reservation(**data).status is ReservationStatus.PENDING

    def test_date_object_is_canonicalized(self):
        r = Reservation(**_reservation_data(reservation_date=date(2024, 5, 1)))
        assert r.reservation_date == "2024-05-01"

    def test_datetime_keeps_calendar_day(self):
        r = Reservation(**_reservation_data(reservation_date=datetime(2024, 5, 1, 23, 10)))
        assert r.reservation_date == "2024-05-01"

    @pytest.mark.parametrize("raw", ["2024-5-1", "01/05/2024", "20240501", "2024-02-30", ""])
    def test_non_canonical_date_rejected(self, raw):
        with pytest.raises(ValidationError):
            Reservation(**_reservation_data(reservation_date=raw))

    def test_unknown_status_rejected(self):
        with pytest.raises(ValidationError):
            Reservation(**_reservation_data(status="Cancelled"))

    def test_unknown_category_rejected(self):
        with pytest.raises(ValidationError):
            Reservation(**_reservation_data(bicycle_category="Tandem"))

    def test_duration_must_be_positive(self):
        with pytest.raises(ValidationError):
            Reservation(**_reservation_data(duration=0))

    def test_frozen(self):
        r = Reservation(**_reservation_data())
        with pytest.raises(ValidationError):
            r.status = ReservationStatus.CONFIRMED

    def test_json_dump_uses_enum_values(self):
        data = Reservation(**_reservation_data()).model_dump(mode="json")
        assert data["status"] == "Pending"
        assert data["bicycle_category"] == "City"


class TestBicycle:
    def test_price_must_not_be_negative(self):
        with pytest.raises(ValidationError):
            Bicycle(id="b1", name="Elops", price=-1, category="City")

    def test_zero_price_allowed(self):
        assert Bicycle(id="b1", name="Demo", price=0, category="VTT").price == 0


class TestBicycleDraft:
    def test_defaults_to_city(self):
        assert BicycleDraft(name="Elops", price=25).category is BicycleCategory.CITY

    @pytest.mark.parametrize("name", ["", "   "])
    def test_blank_name_rejected(self, name):
        with pytest.raises(ValidationError):
            BicycleDraft(name=name, price=25)

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError):
            BicycleDraft(name="Elops", price=-5)

    def test_numeric_string_price_coerced(self):
        assert BicycleDraft(name="Elops", price="32.5").price == 32.5


class TestStatusChange:
    def test_parses_status(self):
        assert StatusChange(status="Confirmed").status is ReservationStatus.CONFIRMED

    def test_rejects_unknown(self):
        with pytest.raises(ValidationError):
            StatusChange(status="Done")
