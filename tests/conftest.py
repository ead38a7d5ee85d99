"""
Pytest configuration and shared fixtures.
"""

from typing import Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from employee_api.app.api.deps import get_employee_repository
from employee_api.app.core.config import settings
from employee_api.app.core.db import init_db
from employee_api.app.core.exceptions import EmployeeAlreadyExistsError
from employee_api.app.main import create_app
from employee_api.app.repositories.employee_repository import (
    EmployeeRepository,
    SQLiteEmployeeRepository,
)
from employee_api.app.schemas.employee import Employee


class InMemoryEmployeeRepository(EmployeeRepository):
    """Dict-backed store with the same contract as the SQLite repository.

    Values are copied on the way in and on the way out.
    """

    def __init__(self) -> None:
        self._rows: Dict[int, Employee] = {}
        self._next_id = 1

    def find_by_id(self, employee_id: int) -> Optional[Employee]:
        row = self._rows.get(employee_id)
        return row.model_copy() if row is not None else None

    def find_by_email(self, email: str) -> Optional[Employee]:
        for row in self._rows.values():
            if row.email == email:
                return row.model_copy()
        return None

    def find_by_name(self, first_name: str, last_name: str) -> Optional[Employee]:
        for row in self._rows.values():
            if row.first_name == first_name and row.last_name == last_name:
                return row.model_copy()
        return None

    def find_all(self) -> List[Employee]:
        return [row.model_copy() for row in self._rows.values()]

    def save(self, employee: Employee) -> Employee:
        for row in self._rows.values():
            if row.email == employee.email and row.id != employee.id:
                raise EmployeeAlreadyExistsError(employee.email)
        if employee.id is None:
            stored = employee.model_copy(update={"id": self._next_id})
        else:
            stored = employee.model_copy()
        self._next_id = max(self._next_id, stored.id + 1)
        self._rows[stored.id] = stored
        return stored.model_copy()

    def delete_by_id(self, employee_id: int) -> None:
        self._rows.pop(employee_id, None)

    def count(self) -> int:
        return len(self._rows)


@pytest.fixture
def employee() -> Employee:
    """An unsaved employee."""
    return Employee(
        first_name="Ramesh",
        last_name="Fadatare",
        email="ramesh.fadatare@gmail.com",
    )


@pytest.fixture
def employee_payload() -> Dict[str, str]:
    """JSON body for creating the sample employee."""
    return {
        "firstName": "Ramesh",
        "lastName": "Fadatare",
        "email": "ramesh.fadatare@gmail.com",
    }


@pytest.fixture
def db_path(tmp_path) -> str:
    """Path to an initialised, empty SQLite database."""
    path = str(tmp_path / "employees.db")
    init_db(path)
    return path


@pytest.fixture
def sqlite_repository(db_path) -> SQLiteEmployeeRepository:
    return SQLiteEmployeeRepository(db_path)


@pytest.fixture
def fake_repository() -> InMemoryEmployeeRepository:
    return InMemoryEmployeeRepository()


@pytest.fixture
def api_client(fake_repository):
    """Client for an app whose store is the in-memory fake."""
    app = create_app()
    app.dependency_overrides[get_employee_repository] = lambda: fake_repository
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def integration_client(tmp_path, monkeypatch):
    """Client for the full app against a temporary SQLite database.

    The client is entered as a context manager so the startup hook
    creates the schema.
    """
    monkeypatch.setattr(settings, "database_url", str(tmp_path / "integration.db"))
    app = create_app()
    with TestClient(app) as client:
        yield client
