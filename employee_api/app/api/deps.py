"""
FastAPI dependencies.

``get_employee_repository`` builds the SQLite repository for the
configured database and ``get_employee_service`` wraps it in an
``EmployeeService``.  Tests replace either one through
``app.dependency_overrides``.
"""

from fastapi import Depends

from employee_api.app.core.db import get_database_path
from employee_api.app.repositories.employee_repository import (
    EmployeeRepository,
    SQLiteEmployeeRepository,
)
from employee_api.app.services.employee_service import EmployeeService


def get_employee_repository() -> EmployeeRepository:
    return SQLiteEmployeeRepository(get_database_path())


def get_employee_service(
    repository: EmployeeRepository = Depends(get_employee_repository),
) -> EmployeeService:
    return EmployeeService(repository)
