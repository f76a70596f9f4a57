"""Reservation status transitions.

``transition`` is deliberately permissive: any status may move to any
status, including itself.  Which transitions the admin UI actually offers
is a separate policy (``is_transition_offered`` / ``offered_actions``) that
callers apply before exposing an action.
"""

from __future__ import annotations

from dataclasses import dataclass

from rental.models import Reservation, ReservationStatus


@dataclass(frozen=True)
class Action:
    """A status change the UI presents as a button."""

    label: str
    target: ReservationStatus


# Display order matches the reservation table: Confirm, then Annul.
ACTIONS: tuple[Action, ...] = (
    Action(label="Confirm", target=ReservationStatus.CONFIRMED),
    Action(label="Annul", target=ReservationStatus.ANNULLED),
)


def transition(
    reservation: Reservation, target: ReservationStatus | str
) -> Reservation:
    """Return a copy of ``reservation`` with its status set to ``target``."""
    return reservation.model_copy(update={"status": ReservationStatus(target)})


def is_transition_offered(
    current: ReservationStatus, target: ReservationStatus
) -> bool:
    """Whether the UI should offer moving from ``current`` to ``target``.

    Confirm is hidden on confirmed reservations and Annul on annulled ones.
    There is no action back to Pending.
    """
    return target != current and any(a.target == target for a in ACTIONS)


def offered_actions(current: ReservationStatus) -> list[Action]:
    return [a for a in ACTIONS if is_transition_offered(current, a.target)]
