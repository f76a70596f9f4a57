"""Load the static fleet and reservation seed data.

Usage:
    python -m rental.seed [path/to/seed.json]

Prints a short summary of the seed file, or the validation error.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from rental.models import Bicycle, Reservation

DEFAULT_SEED_PATH = Path(__file__).parent / "data" / "seed.json"


def load_seed(path: str | Path = DEFAULT_SEED_PATH) -> tuple[list[Bicycle], list[Reservation]]:
    """Read a seed JSON file into bicycles and reservations.

    The file holds one object with ``bicycles`` and ``reservations`` lists.
    Either list may be missing.  Raises ValidationError for malformed
    records and ValueError for duplicate ids.
    """
    path = Path(path)
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Seed file {path} must contain a JSON object")

    bicycles = [Bicycle(**item) for item in data.get("bicycles", [])]
    reservations = [Reservation(**item) for item in data.get("reservations", [])]

    check_unique_ids("bicycle", [b.id for b in bicycles])
    check_unique_ids("reservation", [r.id for r in reservations])
    return bicycles, reservations


def check_unique_ids(kind: str, ids: list[str]) -> None:
    """Raise ValueError naming the first repeated id."""
    seen: set[str] = set()
    for item_id in ids:
        if item_id in seen:
            raise ValueError(f"Duplicate {kind} id: {item_id}")
        seen.add(item_id)


def main():
    parser = argparse.ArgumentParser(
        description="Validate a rental seed file",
        prog="python -m rental.seed",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=str(DEFAULT_SEED_PATH),
        help="Seed JSON file (default: bundled sample data)",
    )
    args = parser.parse_args()

    try:
        bicycles, reservations = load_seed(args.path)
    except (OSError, ValueError) as e:
        print(f"Invalid seed file {args.path}: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"{len(bicycles)} bicycles, {len(reservations)} reservations in {args.path}")


if __name__ == "__main__":
    main()
