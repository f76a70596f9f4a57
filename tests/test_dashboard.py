"""Tests for the dashboard summary."""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from rental.dashboard import summarize
from rental.models import ReservationStatus
from rental.seed import load_seed
from rental.store import RentalStore


class TestSummarize:
    def test_seed_counts(self):
        bicycles, reservations = load_seed()
        summary = summarize(bicycles, reservations)
        assert summary.total_reservations == 8
        assert summary.pending_count == 4
        assert summary.confirmed_count == 3
        assert summary.annulled_count == 1
        assert summary.fleet_size == 8

    def test_recent_are_first_in_list_order(self):
        bicycles, reservations = load_seed()
        summary = summarize(bicycles, reservations)
        assert [r.id for r in summary.recent_reservations] == ["r1", "r2", "r3", "r4", "r5"]

    def test_recent_limit(self):
        bicycles, reservations = load_seed()
        assert summarize(bicycles, reservations, recent_limit=2).recent_reservations == reservations[:2]
        assert summarize(bicycles, reservations, recent_limit=0).recent_reservations == []

    def test_empty(self):
        summary = summarize([], [])
        assert summary.total_reservations == 0
        assert summary.fleet_size == 0
        assert summary.recent_reservations == []

    def test_reflects_store_changes(self):
        store = RentalStore.from_seed()
        store.set_reservation_status("r1", ReservationStatus.CONFIRMED)
        summary = summarize(store.bicycles(), store.reservations())
        assert summary.pending_count == 3
        assert summary.confirmed_count == 4
