"""
Business logic for employees.

The only business rule is that an email address identifies at most
one employee: ``save_employee`` refuses to create a second employee
with an email already on file.  Every other operation delegates to
the repository unchanged.
"""

import logging
from typing import List, Optional

from employee_api.app.core.exceptions import EmployeeAlreadyExistsError
from employee_api.app.repositories.employee_repository import EmployeeRepository
from employee_api.app.schemas.employee import Employee

logger = logging.getLogger(__name__)


class EmployeeService:
    """Service for creating, reading, updating and deleting employees."""

    def __init__(self, repository: EmployeeRepository) -> None:
        self.repository = repository

    async def save_employee(self, employee: Employee) -> Employee:
        """Create a new employee.

        Raises ``EmployeeAlreadyExistsError`` without writing anything
        if another employee already uses ``employee.email``.
        """
        existing = self.repository.find_by_email(employee.email)
        if existing is not None:
            logger.warning("Employee with email %s already exists (id=%s)", employee.email, existing.id)
            raise EmployeeAlreadyExistsError(employee.email)
        saved = self.repository.save(employee)
        logger.info("Created employee %s", saved.id)
        return saved

    async def get_all_employees(self) -> List[Employee]:
        return self.repository.find_all()

    async def get_employee_by_id(self, employee_id: int) -> Optional[Employee]:
        return self.repository.find_by_id(employee_id)

    async def update_employee(self, employee: Employee) -> Employee:
        """Persist ``employee`` as given.

        The caller is responsible for setting ``id`` and every field;
        nothing is merged here.
        """
        updated = self.repository.save(employee)
        logger.info("Updated employee %s", updated.id)
        return updated

    async def delete_employee(self, employee_id: int) -> None:
        """Delete an employee.  Deleting a missing id is not an error."""
        self.repository.delete_by_id(employee_id)
        logger.info("Deleted employee %s", employee_id)
