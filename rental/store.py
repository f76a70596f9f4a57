"""In-memory store for the fleet and the reservation list.

``RentalStore`` is the single writer for both collections.  Records are
immutable; every edit swaps in a replacement at the same list position, so
snapshots handed out earlier never change underneath their holder.
"""

from __future__ import annotations

import logging
import secrets
from pathlib import Path
from typing import Iterable

from pydantic import BaseModel

from rental.filters import FilterSpec, filter_reservations
from rental.models import (
    Bicycle,
    BicycleCategory,
    BicycleDraft,
    Reservation,
    ReservationStatus,
)
from rental.seed import DEFAULT_SEED_PATH, check_unique_ids, load_seed
from rental.transitions import transition

log = logging.getLogger("rental.store")


class NotFoundError(LookupError):
    """Raised when a bicycle or reservation id is not in the store."""


class FleetStats(BaseModel):
    total: int
    by_category: dict[BicycleCategory, int]


def redact_phone(value: str) -> str:
    """Mask a phone number for logging, showing only the last 2 digits."""
    if not value or len(value) <= 4:
        return "***"
    return "***" + value[-2:]


def _new_bicycle_id() -> str:
    return "b" + secrets.token_hex(6)


class RentalStore:
    """Owns the bicycles and reservations shown by the admin dashboard.

    Typical use::

        store = RentalStore.from_seed()
        store.set_reservation_status("r1", ReservationStatus.CONFIRMED)
        visible = store.filter_reservations(FilterSpec(search_text="sa"))
    """

    def __init__(
        self,
        bicycles: Iterable[Bicycle] = (),
        reservations: Iterable[Reservation] = (),
    ) -> None:
        self._bicycles: list[Bicycle] = list(bicycles)
        self._reservations: list[Reservation] = list(reservations)
        check_unique_ids("bicycle", [b.id for b in self._bicycles])
        check_unique_ids("reservation", [r.id for r in self._reservations])

    @classmethod
    def from_seed(cls, path: str | Path = DEFAULT_SEED_PATH) -> "RentalStore":
        bicycles, reservations = load_seed(path)
        log.info(
            "Store seeded from %s: %d bicycles, %d reservations",
            path, len(bicycles), len(reservations),
        )
        return cls(bicycles, reservations)

    # ── Fleet ─────────────────────────────────────────────────────

    def bicycles(self) -> list[Bicycle]:
        return list(self._bicycles)

    def get_bicycle(self, bicycle_id: str) -> Bicycle:
        return self._bicycles[self._bicycle_index(bicycle_id)]

    def add_bicycle(self, draft: BicycleDraft) -> Bicycle:
        """Append a new bicycle under a freshly generated id."""
        existing = {b.id for b in self._bicycles}
        bicycle_id = _new_bicycle_id()
        while bicycle_id in existing:
            bicycle_id = _new_bicycle_id()

        bicycle = Bicycle(id=bicycle_id, **draft.model_dump())
        self._bicycles.append(bicycle)
        log.info("Bicycle added: %s (%s, %s)", bicycle.id, bicycle.name, bicycle.category.value)
        return bicycle

    def update_bicycle(self, bicycle_id: str, draft: BicycleDraft) -> Bicycle:
        """Replace a bicycle's editable fields, keeping its id and position."""
        idx = self._bicycle_index(bicycle_id)
        updated = Bicycle(id=bicycle_id, **draft.model_dump())
        self._bicycles[idx] = updated
        log.info("Bicycle updated: %s", bicycle_id)
        return updated

    def delete_bicycle(self, bicycle_id: str) -> None:
        # Reservations hold a category copy, so nothing cascades.
        idx = self._bicycle_index(bicycle_id)
        del self._bicycles[idx]
        log.info("Bicycle deleted: %s", bicycle_id)

    def fleet_stats(self) -> FleetStats:
        counts = {category: 0 for category in BicycleCategory}
        for bicycle in self._bicycles:
            counts[bicycle.category] += 1
        return FleetStats(total=len(self._bicycles), by_category=counts)

    # ── Reservations ──────────────────────────────────────────────

    def reservations(self) -> list[Reservation]:
        return list(self._reservations)

    def get_reservation(self, reservation_id: str) -> Reservation:
        return self._reservations[self._reservation_index(reservation_id)]

    def filter_reservations(self, spec: FilterSpec) -> list[Reservation]:
        return filter_reservations(self._reservations, spec)

    def set_reservation_status(
        self, reservation_id: str, status: ReservationStatus | str
    ) -> Reservation:
        """Apply a status transition and store the resulting record."""
        idx = self._reservation_index(reservation_id)
        previous = self._reservations[idx]
        updated = transition(previous, status)
        self._reservations[idx] = updated
        log.info(
            "Reservation %s (%s): %s -> %s",
            reservation_id,
            redact_phone(previous.phone_number),
            previous.status.value,
            updated.status.value,
        )
        return updated

    # ── Helpers ───────────────────────────────────────────────────

    def _bicycle_index(self, bicycle_id: str) -> int:
        for idx, bicycle in enumerate(self._bicycles):
            if bicycle.id == bicycle_id:
                return idx
        raise NotFoundError(f"Bicycle {bicycle_id} not found")

    def _reservation_index(self, reservation_id: str) -> int:
        for idx, reservation in enumerate(self._reservations):
            if reservation.id == reservation_id:
                return idx
        raise NotFoundError(f"Reservation {reservation_id} not found")
