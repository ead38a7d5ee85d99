"""
Tests for EmployeeService with a mocked repository.
"""

from unittest.mock import create_autospec

import pytest

from employee_api.app.core.exceptions import EmployeeAlreadyExistsError
from employee_api.app.repositories.employee_repository import EmployeeRepository
from employee_api.app.schemas.employee import Employee
from employee_api.app.services.employee_service import EmployeeService


@pytest.fixture
def repository():
    return create_autospec(EmployeeRepository, instance=True)


@pytest.fixture
def service(repository) -> EmployeeService:
    return EmployeeService(repository)


@pytest.fixture
def stored_employee() -> Employee:
    return Employee(id=1, first_name="Ramesh", last_name="Fadatare", email="ramesh.fadatare@gmail.com")


@pytest.mark.asyncio
async def test_save_employee_returns_saved(service, repository, employee, stored_employee):
    repository.find_by_email.return_value = None
    repository.save.return_value = stored_employee

    saved = await service.save_employee(employee)

    assert saved == stored_employee
    repository.find_by_email.assert_called_once_with(employee.email)
    repository.save.assert_called_once_with(employee)


@pytest.mark.asyncio
async def test_save_employee_with_existing_email_raises(service, repository, employee, stored_employee):
    repository.find_by_email.return_value = stored_employee

    with pytest.raises(EmployeeAlreadyExistsError) as exc_info:
        await service.save_employee(employee)

    assert exc_info.value.email == employee.email
    repository.save.assert_not_called()


@pytest.mark.asyncio
async def test_get_all_employees(service, repository, stored_employee):
    other = Employee(id=2, first_name="Tony", last_name="Stark", email="tony.stark@gmail.com")
    repository.find_all.return_value = [stored_employee, other]

    employees = await service.get_all_employees()

    assert employees == [stored_employee, other]


@pytest.mark.asyncio
async def test_get_all_employees_empty(service, repository):
    repository.find_all.return_value = []

    assert await service.get_all_employees() == []


@pytest.mark.asyncio
async def test_get_employee_by_id(service, repository, stored_employee):
    repository.find_by_id.return_value = stored_employee

    found = await service.get_employee_by_id(1)

    assert found.id == 1
    repository.find_by_id.assert_called_once_with(1)


@pytest.mark.asyncio
async def test_get_employee_by_id_missing(service, repository):
    repository.find_by_id.return_value = None

    assert await service.get_employee_by_id(99) is None


@pytest.mark.asyncio
async def test_update_employee_delegates_to_save(service, repository, stored_employee):
    changed = stored_employee.model_copy(update={"first_name": "Ram"})
    repository.save.return_value = changed

    updated = await service.update_employee(changed)

    assert updated.first_name == "Ram"
    repository.save.assert_called_once_with(changed)
    repository.find_by_email.assert_not_called()


@pytest.mark.asyncio
async def test_delete_employee(service, repository):
    await service.delete_employee(1)

    repository.delete_by_id.assert_called_once_with(1)


class TestWithInMemoryStore:
    """Service behaviour against a working store."""

    @pytest.fixture
    def service(self, fake_repository) -> EmployeeService:
        return EmployeeService(fake_repository)

    @pytest.mark.asyncio
    async def test_saved_employee_can_be_read_back(self, service, employee):
        saved = await service.save_employee(employee)

        found = await service.get_employee_by_id(saved.id)

        assert found == saved
        assert (found.first_name, found.last_name, found.email) == (
            employee.first_name,
            employee.last_name,
            employee.email,
        )

    @pytest.mark.asyncio
    async def test_duplicate_email_leaves_store_unchanged(self, service, fake_repository, employee):
        await service.save_employee(employee)

        with pytest.raises(EmployeeAlreadyExistsError):
            await service.save_employee(employee.model_copy(update={"first_name": "Someone"}))

        assert fake_repository.count() == 1

    @pytest.mark.asyncio
    async def test_update_replaces_fields_and_keeps_id(self, service, employee):
        saved = await service.save_employee(employee)

        await service.update_employee(
            Employee(id=saved.id, first_name="Ram", last_name="Jadvah", email="ram@gmail.com")
        )

        found = await service.get_employee_by_id(saved.id)
        assert found == Employee(id=saved.id, first_name="Ram", last_name="Jadvah", email="ram@gmail.com")

    @pytest.mark.asyncio
    async def test_delete_is_idempotent(self, service, employee):
        saved = await service.save_employee(employee)

        await service.delete_employee(saved.id)
        await service.delete_employee(saved.id)
        await service.delete_employee(12345)

        assert await service.get_employee_by_id(saved.id) is None
        assert await service.get_employee_by_id(12345) is None
