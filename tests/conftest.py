from datetime import date

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from daily_guess.domain.catalog import EmployeeCatalog
from daily_guess.models.game_models import Employee

DAY = date(2025, 3, 14)


def make_employee(employee_id: str, **overrides) -> Employee:
    fields = {
        "id": employee_id,
        "name": f"Employee {employee_id}",
        "department": "Technology",
        "office": "Oslo",
        "teams": ["Technology"],
        "age": 30,
        "supervisor": "Marte Lund",
    }
    fields.update(overrides)
    return Employee(**fields)


@pytest.fixture
def employees():
    return [
        make_employee("e1", name="Ingrid Solberg", teams=["Technology", "Platform"], age=34),
        make_employee("e2", name="Henrik Dahl", department="Management", teams=["Leadership"], age=46, supervisor="-"),
        make_employee("e3", name="Jonas Berg", department="Experience", office="Bergen", teams=["Design"], age=29),
        make_employee("e4", name="Lars Moen", department="Product", office="Trondheim", teams=["Product", "Platform"], age="-"),
        make_employee("e5", name="Ida Strand", department="People", teams=[], age=27),
        make_employee("e6", name="Mats Eide", office="Bergen", teams=["Technology", "Platform"], age=36),
        make_employee("e7", name="Thea Lie", department="Experience", teams=["Design"], age=25),
        make_employee("e8", name="Ola Hansen", department="Business Design", teams=[], age=44),
    ]


@pytest.fixture
def catalog(employees):
    return EmployeeCatalog(employees)


@pytest.fixture
def session_factory(tmp_path):
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'leaderboard.sqlite3'}", poolclass=NullPool
    )
    return async_sessionmaker(class_=AsyncSession, expire_on_commit=False, bind=engine)


@pytest.fixture
def broken_session_factory(tmp_path):
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'dir' / 'leaderboard.sqlite3'}",
        poolclass=NullPool,
    )
    return async_sessionmaker(class_=AsyncSession, expire_on_commit=False, bind=engine)
