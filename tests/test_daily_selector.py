"""Tests for deterministic target selection."""

import random
from datetime import date, timedelta

import pytest

from daily_guess.domain.catalog import EmployeeCatalog
from daily_guess.domain.daily_selector import day_index, select_target, target_for
from daily_guess.errors import InvalidCatalog, NoEntitiesAvailable

from conftest import DAY, make_employee


class TestSelectTarget:
    def test_same_day_same_target(self, catalog):
        assert select_target(catalog, DAY) == select_target(catalog, DAY)

    def test_independent_of_provider_order(self, employees):
        shuffled = list(employees)
        random.Random(7).shuffle(shuffled)
        assert select_target(EmployeeCatalog(employees), DAY) == select_target(
            EmployeeCatalog(shuffled), DAY
        )

    def test_target_is_in_catalog(self, catalog):
        for offset in range(30):
            day = DAY + timedelta(days=offset)
            assert catalog.get(select_target(catalog, day)) is not None

    def test_target_for_returns_employee(self, catalog):
        employee = target_for(catalog, DAY)
        assert employee.id == select_target(catalog, DAY)

    def test_empty_catalog_fails(self):
        with pytest.raises(NoEntitiesAvailable):
            select_target(EmployeeCatalog([]), DAY)

    def test_rotates_over_days(self, catalog):
        targets = {select_target(catalog, DAY + timedelta(days=offset)) for offset in range(60)}
        assert len(targets) > 1


class TestDayIndex:
    def test_in_range(self):
        for offset in range(100):
            assert 0 <= day_index(date(2024, 1, 1) + timedelta(days=offset), 7) < 7

    def test_stable_value(self):
        assert day_index(DAY, 1000) == day_index(date.fromisoformat("2025-03-14"), 1000)


class TestCatalog:
    def test_sorted_by_id(self, employees):
        catalog = EmployeeCatalog(reversed(employees))
        assert catalog.ids == sorted(employee.id for employee in employees)

    def test_duplicate_ids_rejected(self):
        with pytest.raises(InvalidCatalog):
            EmployeeCatalog([make_employee("x"), make_employee("x", name="Other")])

    def test_find_by_name_is_case_insensitive(self, catalog):
        assert catalog.find_by_name("ingrid solberg").id == "e1"
        assert catalog.find_by_name("Nobody") is None

    def test_resolve_prefers_id(self, catalog):
        assert catalog.resolve("e3").name == "Jonas Berg"
        assert catalog.resolve("Jonas Berg").id == "e3"
