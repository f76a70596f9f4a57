"""Data models for the rental layer."""

from .bicycle import Bicycle, BicycleCategory, BicycleDraft
from .reservation import Reservation, ReservationStatus, StatusChange

__all__ = [
    "Bicycle",
    "BicycleCategory",
    "BicycleDraft",
    "Reservation",
    "ReservationStatus",
    "StatusChange",
]
