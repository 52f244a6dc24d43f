"""Deterministic employee-of-the-day selection.

sha256 of the ISO date picks an index into the id-ordered catalog, so every
process resolves the same target for the same day without storing it.
"""

import hashlib
from datetime import date

from daily_guess.domain.catalog import EmployeeCatalog
from daily_guess.errors import NoEntitiesAvailable
from daily_guess.models.game_models import Employee


def day_index(day: date, size: int) -> int:
    """Map a calendar date onto [0, size)."""
    digest = hashlib.sha256(day.isoformat().encode("utf-8")).digest()
    seed = int.from_bytes(digest[:8], byteorder="big")
    return seed % size


def select_target(catalog: EmployeeCatalog, day: date) -> str:
    """Return the id of the target employee for ``day``.

    Raises:
        NoEntitiesAvailable: the catalog is empty
    """
    if len(catalog) == 0:
        raise NoEntitiesAvailable(f"No employees available for {day.isoformat()}")
    return catalog[day_index(day, len(catalog))].id


def target_for(catalog: EmployeeCatalog, day: date) -> Employee:
    return catalog.get(select_target(catalog, day))
