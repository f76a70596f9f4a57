"""FastAPI application: admin HTTP API for the bicycle rental dashboard.

Endpoints:

  GET    /health                          Health check
  GET    /api/dashboard                   Reservation counts, fleet size, recent bookings
  GET    /api/bicycles                    Fleet inventory
  GET    /api/bicycles/stats              Fleet size per category
  POST   /api/bicycles                    Add a bicycle              (admin)
  PUT    /api/bicycles/{bicycle_id}       Edit a bicycle             (admin)
  DELETE /api/bicycles/{bicycle_id}       Remove a bicycle           (admin)
  GET    /api/reservations                Filtered reservation list
  GET    /api/reservations/{id}           One reservation
  POST   /api/reservations/{id}/status    Change a reservation status (admin)

The reservation list accepts ``search``, ``status``, ``category`` and
``date`` query parameters.  ``status`` and ``category`` take ``all`` to mean
no constraint; ``date`` is ``YYYY-MM-DD``.  Each returned reservation carries
the actions the UI should offer for its current status.
"""

from __future__ import annotations

# Load .env into os.environ before settings are read.
from dotenv import load_dotenv
load_dotenv()

import logging
import time
from datetime import date

from fastapi import Depends, FastAPI, status
from fastapi.responses import JSONResponse

from rental.auth import require_admin
from rental.config import settings
from rental.dashboard import summarize
from rental.filters import FilterSpec, parse_constraint
from rental.models import (
    BicycleCategory,
    BicycleDraft,
    Reservation,
    ReservationStatus,
    StatusChange,
)
from rental.store import NotFoundError, RentalStore
from rental.transitions import offered_actions

logging.basicConfig(
    level=settings.logging_level(),
    format="%(asctime)s %(name)-20s %(levelname)-7s %(message)s",
)

log = logging.getLogger("rental.app")

_START_TIME = time.time()


def create_app(store: RentalStore | None = None) -> FastAPI:
    """Create and configure the FastAPI application around one store."""
    for warning in settings.validate_startup():
        log.warning(warning)

    if store is None:
        store = RentalStore.from_seed(settings.seed_path)

    app = FastAPI(
        title=settings.app_name,
        description="Fleet inventory, reservation filtering and status management",
        version="0.1.0",
    )

    # ── Health check ───────────────────────────────────────────

    @app.get("/health")
    async def health() -> JSONResponse:
        uptime = round(time.time() - _START_TIME, 1)
        return JSONResponse({"status": "ok", "uptime": uptime})

    # ── Dashboard ──────────────────────────────────────────────

    @app.get("/api/dashboard")
    async def dashboard():
        """Summary cards and the recent reservations table."""
        summary = summarize(
            store.bicycles(),
            store.reservations(),
            recent_limit=settings.recent_reservations_limit,
        )
        return JSONResponse(summary.model_dump(mode="json"))

    # ── Fleet ──────────────────────────────────────────────────

    @app.get("/api/bicycles")
    async def list_bicycles():
        bicycles = store.bicycles()
        return JSONResponse({
            "bicycles": [b.model_dump(mode="json") for b in bicycles],
            "count": len(bicycles),
            "currency": settings.currency,
        })

    @app.get("/api/bicycles/stats")
    async def bicycle_stats():
        return JSONResponse(store.fleet_stats().model_dump(mode="json"))

    @app.post("/api/bicycles", dependencies=[Depends(require_admin("add bicycle"))])
    async def add_bicycle(draft: BicycleDraft):
        bicycle = store.add_bicycle(draft)
        return JSONResponse(bicycle.model_dump(mode="json"), status_code=status.HTTP_201_CREATED)

    @app.put("/api/bicycles/{bicycle_id}", dependencies=[Depends(require_admin("edit bicycle"))])
    async def update_bicycle(bicycle_id: str, draft: BicycleDraft):
        try:
            bicycle = store.update_bicycle(bicycle_id, draft)
        except NotFoundError as e:
            return JSONResponse({"error": str(e)}, status_code=404)
        return JSONResponse(bicycle.model_dump(mode="json"))

    @app.delete("/api/bicycles/{bicycle_id}", dependencies=[Depends(require_admin("delete bicycle"))])
    async def delete_bicycle(bicycle_id: str):
        try:
            store.delete_bicycle(bicycle_id)
        except NotFoundError as e:
            return JSONResponse({"error": str(e)}, status_code=404)
        return JSONResponse({"deleted": bicycle_id})

    # ── Reservations ───────────────────────────────────────────

    @app.get("/api/reservations")
    async def list_reservations(
        search: str = "",
        status: str = "all",
        category: str = "all",
        date: str | None = None,
    ):
        """Reservations matching every given filter, in stored order."""
        try:
            spec = FilterSpec(
                search_text=search,
                status=parse_constraint(status, ReservationStatus),
                category=parse_constraint(category, BicycleCategory),
                date=_parse_day(date),
            )
        except ValueError as e:
            return JSONResponse({"error": str(e)}, status_code=400)

        reservations = store.filter_reservations(spec)
        return JSONResponse({
            "reservations": [_reservation_row(r) for r in reservations],
            "count": len(reservations),
            "filtered": spec.is_active,
        })

    @app.get("/api/reservations/{reservation_id}")
    async def get_reservation(reservation_id: str):
        try:
            reservation = store.get_reservation(reservation_id)
        except NotFoundError as e:
            return JSONResponse({"error": str(e)}, status_code=404)
        return JSONResponse(_reservation_row(reservation))

    @app.post(
        "/api/reservations/{reservation_id}/status",
        dependencies=[Depends(require_admin("change reservation status"))],
    )
    async def change_reservation_status(reservation_id: str, change: StatusChange):
        """Set a reservation's status.  Any status may be set from any status."""
        try:
            reservation = store.set_reservation_status(reservation_id, change.status)
        except NotFoundError as e:
            return JSONResponse({"error": str(e)}, status_code=404)
        return JSONResponse(_reservation_row(reservation))

    return app


# ── Helper functions ──────────────────────────────────────────────

def _parse_day(raw: str | None) -> date | None:
    """Parse a ``YYYY-MM-DD`` query value; empty means no date filter."""
    if not raw:
        return None
    try:
        day = date.fromisoformat(raw)
    except ValueError:
        day = None
    if day is None or day.isoformat() != raw:
        raise ValueError(f"Invalid date filter {raw!r}; expected YYYY-MM-DD")
    return day


def _reservation_row(reservation: Reservation) -> dict:
    row = reservation.model_dump(mode="json")
    row["actions"] = [
        {"label": a.label, "status": a.target.value}
        for a in offered_actions(reservation.status)
    ]
    return row


# ── Module-level app instance for uvicorn ──────────────────────

app = create_app()


if __name__ == "__main__":
    import uvicorn

    log_config = uvicorn.config.LOGGING_CONFIG
    log_config["formatters"]["default"]["fmt"] = (
        "%(asctime)s %(name)-12s %(levelname)-8s %(message)s"
    )

    uvicorn.run(
        "rental.app:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_config=log_config,
    )
