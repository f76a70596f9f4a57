"""Tests for the seed data loader."""

import json

import pytest
from pydantic import ValidationError

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from rental.models import BicycleCategory
from rental.seed import DEFAULT_SEED_PATH, load_seed


def _write(tmp_path, data) -> str:
    path = tmp_path / "seed.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


class TestBundledSeed:
    def test_loads(self):
        bicycles, reservations = load_seed()
        assert len(bicycles) == 8
        assert len(reservations) == 8

    def test_default_path_exists(self):
        assert DEFAULT_SEED_PATH.is_file()

    def test_every_category_present(self):
        bicycles, _ = load_seed()
        assert {b.category for b in bicycles} == set(BicycleCategory)

    def test_dates_are_canonical(self):
        _, reservations = load_seed()
        for r in reservations:
            assert len(r.reservation_date) == 10
            assert r.reservation_date[4] == "-" and r.reservation_date[7] == "-"


class TestLoadSeed:
    def test_missing_lists_default_empty(self, tmp_path):
        bicycles, reservations = load_seed(_write(tmp_path, {}))
        assert bicycles == []
        assert reservations == []

    def test_duplicate_bicycle_ids(self, tmp_path):
        bike = {"id": "b1", "name": "Elops", "price": 25, "category": "City"}
        with pytest.raises(ValueError, match="Duplicate bicycle id"):
            load_seed(_write(tmp_path, {"bicycles": [bike, bike]}))

    def test_duplicate_reservation_ids(self, tmp_path):
        res = {
            "id": "r1", "customer_name": "Sara", "phone_number": "0600",
            "duration": 1, "reservation_date": "2024-05-01",
            "bicycle_category": "City", "status": "Pending",
        }
        with pytest.raises(ValueError, match="Duplicate reservation id"):
            load_seed(_write(tmp_path, {"reservations": [res, res]}))

    def test_malformed_record(self, tmp_path):
        bad = {"id": "b1", "name": "Elops", "price": 25, "category": "Tandem"}
        with pytest.raises(ValidationError):
            load_seed(_write(tmp_path, {"bicycles": [bad]}))

    def test_top_level_must_be_object(self, tmp_path):
        with pytest.raises(ValueError, match="JSON object"):
            load_seed(_write(tmp_path, []))
