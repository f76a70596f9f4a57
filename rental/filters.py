"""Reservation search and filtering.

A ``FilterSpec`` combines four independent constraints (search text,
status, bicycle category, calendar day).  ``filter_reservations`` keeps
the reservations that satisfy every active constraint, in their original
order.

Status and category constraints are either ``ANY`` or ``Exactly(value)``::

    spec = FilterSpec(status=Exactly(ReservationStatus.CONFIRMED))
    confirmed = filter_reservations(store.reservations(), spec)

Query strings from the HTTP layer go through ``parse_constraint``, which is
the only place the ``"all"`` keyword is understood.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Generic, Iterable, TypeVar, Union

from rental.models import BicycleCategory, Reservation, ReservationStatus

E = TypeVar("E", bound=Enum)

ALL_KEYWORD = "all"


class _AnyValue:
    """Constraint that matches every value."""

    _instance: "_AnyValue | None" = None

    def __new__(cls) -> "_AnyValue":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def matches(self, value: object) -> bool:
        return True

    def __repr__(self) -> str:
        return "ANY"


ANY = _AnyValue()


@dataclass(frozen=True)
class Exactly(Generic[E]):
    """Constraint that matches one exact enum value."""

    value: E

    def matches(self, value: object) -> bool:
        return value == self.value


Constraint = Union[_AnyValue, Exactly[E]]


@dataclass(frozen=True)
class FilterSpec:
    """Filter bar state: every field defaults to "no constraint"."""

    search_text: str = ""
    status: Constraint[ReservationStatus] = ANY
    category: Constraint[BicycleCategory] = ANY
    date: date | None = None

    @property
    def is_active(self) -> bool:
        """True when at least one constraint narrows the result."""
        return bool(
            self.search_text
            or self.status is not ANY
            or self.category is not ANY
            or self.date is not None
        )


def _day_string(day: date) -> str:
    if isinstance(day, datetime):
        day = day.date()
    return day.isoformat()


def matches_search(reservation: Reservation, search_text: str) -> bool:
    """Name match ignores case; phone match is a literal substring test."""
    return (
        search_text.lower() in reservation.customer_name.lower()
        or search_text in reservation.phone_number
    )


def filter_reservations(
    reservations: Iterable[Reservation], spec: FilterSpec
) -> list[Reservation]:
    """Return the reservations matching every constraint of ``spec``.

    The result is a new list in input order; the input is not modified.
    """
    day = _day_string(spec.date) if spec.date is not None else None
    return [
        r
        for r in reservations
        if matches_search(r, spec.search_text)
        and spec.status.matches(r.status)
        and spec.category.matches(r.bicycle_category)
        and (day is None or r.reservation_date == day)
    ]


def parse_constraint(raw: str | None, enum_cls: type[E]) -> Constraint[E]:
    """Translate a query-string value into a constraint.

    ``None``, ``""`` and ``"all"`` mean no constraint.  Raises ValueError for
    values outside ``enum_cls``.
    """
    if raw is None or raw == "" or raw == ALL_KEYWORD:
        return ANY
    try:
        return Exactly(enum_cls(raw))
    except ValueError:
        allowed = ", ".join([ALL_KEYWORD] + [m.value for m in enum_cls])
        raise ValueError(
            f"Invalid {enum_cls.__name__} filter {raw!r}; expected one of: {allowed}"
        ) from None
