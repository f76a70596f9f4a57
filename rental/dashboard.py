"""Summary figures for the dashboard landing page."""

from __future__ import annotations

from typing import Sequence

from pydantic import BaseModel

from rental.models import Bicycle, Reservation, ReservationStatus


class DashboardSummary(BaseModel):
    total_reservations: int
    pending_count: int
    confirmed_count: int
    annulled_count: int
    fleet_size: int
    recent_reservations: list[Reservation]


def summarize(
    bicycles: Sequence[Bicycle],
    reservations: Sequence[Reservation],
    recent_limit: int = 5,
) -> DashboardSummary:
    """Count reservations per status and take the first ``recent_limit``.

    "Recent" follows list order, which is the order reservations were
    loaded into the store.
    """
    def count(status: ReservationStatus) -> int:
        return sum(1 for r in reservations if r.status == status)

    return DashboardSummary(
        total_reservations=len(reservations),
        pending_count=count(ReservationStatus.PENDING),
        confirmed_count=count(ReservationStatus.CONFIRMED),
        annulled_count=count(ReservationStatus.ANNULLED),
        fleet_size=len(bicycles),
        recent_reservations=list(reservations[: max(recent_limit, 0)]),
    )
