"""Immutable, id-ordered roster snapshot for one day."""

from typing import Iterable, Iterator, List

from daily_guess.errors import InvalidCatalog
from daily_guess.models.game_models import Employee


class EmployeeCatalog:
    def __init__(self, employees: Iterable[Employee]):
        ordered = sorted(employees, key=lambda employee: employee.id)
        by_id = {}
        for employee in ordered:
            if employee.id in by_id:
                raise InvalidCatalog(f"Duplicate employee id in catalog: {employee.id}")
            by_id[employee.id] = employee
        self._employees: List[Employee] = ordered
        self._by_id = by_id

    def __len__(self) -> int:
        return len(self._employees)

    def __iter__(self) -> Iterator[Employee]:
        return iter(self._employees)

    def __getitem__(self, index: int) -> Employee:
        return self._employees[index]

    @property
    def ids(self) -> List[str]:
        return [employee.id for employee in self._employees]

    def get(self, employee_id: str) -> Employee | None:
        return self._by_id.get(employee_id)

    def find_by_name(self, name: str) -> Employee | None:
        """Case-insensitive exact match on the display name."""
        wanted = name.strip().lower()
        for employee in self._employees:
            if employee.name.lower() == wanted:
                return employee
        return None

    def resolve(self, id_or_name: str) -> Employee | None:
        return self.get(id_or_name) or self.find_by_name(id_or_name)
