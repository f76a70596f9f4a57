"""Pydantic model for a customer reservation."""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum

from pydantic import BaseModel, Field, field_validator

from .bicycle import BicycleCategory


class ReservationStatus(str, Enum):
    PENDING = "Pending"
    CONFIRMED = "Confirmed"
    ANNULLED = "Annulled"


class Reservation(BaseModel):
    """A booking tying a customer to a bicycle category, day and duration.

    ``bicycle_category`` is a copy taken at booking time, not a reference
    into the fleet, so removing a bicycle never affects reservations.
    ``reservation_date`` is always stored as ``YYYY-MM-DD`` so that date
    filtering can compare strings directly.
    """

    id: str
    customer_name: str
    phone_number: str
    duration: float = Field(gt=0)  # hours
    reservation_date: str  # YYYY-MM-DD
    bicycle_category: BicycleCategory
    status: ReservationStatus = ReservationStatus.PENDING

    model_config = {"frozen": True}

    @field_validator("reservation_date", mode="before")
    @classmethod
    def _canonical_date(cls, value: object) -> str:
        if isinstance(value, datetime):
            return value.date().isoformat()
        if isinstance(value, date):
            return value.isoformat()
        if not isinstance(value, str):
            raise ValueError("reservation_date must be a date or YYYY-MM-DD string")
        try:
            parsed = date.fromisoformat(value)
        except ValueError:
            raise ValueError(f"Invalid reservation_date: {value!r}") from None
        if parsed.isoformat() != value:
            raise ValueError(f"reservation_date must be YYYY-MM-DD, got {value!r}")
        return value


class StatusChange(BaseModel):
    """Request body for a reservation status change."""

    status: ReservationStatus
