"""
Employee endpoints.

These routes expose a CRUD API for employees under
``/api/employees``.  Lookups of a missing id answer 404 with an empty
body.  Creating an employee with an email that is already on file
raises ``EmployeeAlreadyExistsError``, which the application turns
into a 409 response.  Deletes always succeed, whether or not the
employee existed.
"""

from typing import List, Union

from fastapi import APIRouter, Depends, Path, Response, status
from fastapi.responses import PlainTextResponse

from employee_api.app.api.deps import get_employee_service
from employee_api.app.core.db import SQLITE_MAX_INTEGER, SQLITE_MIN_INTEGER
from employee_api.app.schemas.employee import Employee, EmployeeCreate, EmployeeUpdate
from employee_api.app.services.employee_service import EmployeeService

router = APIRouter()

DELETE_CONFIRMATION = "Employee deleted successfully"

# Ids outside the store's integer range get a 422.
MIN_EMPLOYEE_ID = SQLITE_MIN_INTEGER
MAX_EMPLOYEE_ID = SQLITE_MAX_INTEGER

_NOT_FOUND = {404: {"description": "Employee not found (empty body)"}}
_CONFLICT = {409: {"description": "Another employee already uses this email"}}


@router.post(
    "",
    response_model=Employee,
    status_code=status.HTTP_201_CREATED,
    responses=_CONFLICT,
)
async def create_employee(
    employee_in: EmployeeCreate,
    service: EmployeeService = Depends(get_employee_service),
) -> Employee:
    """Create a new employee and return it with its assigned id."""
    employee = Employee(
        first_name=employee_in.first_name,
        last_name=employee_in.last_name,
        email=employee_in.email,
    )
    return await service.save_employee(employee)


@router.get("", response_model=List[Employee])
async def list_employees(
    service: EmployeeService = Depends(get_employee_service),
) -> List[Employee]:
    """Return every employee; an empty list if there are none."""
    return await service.get_all_employees()


@router.get("/{employee_id}", response_model=Employee, responses=_NOT_FOUND)
async def get_employee(
    employee_id: int = Path(..., ge=MIN_EMPLOYEE_ID, le=MAX_EMPLOYEE_ID),
    service: EmployeeService = Depends(get_employee_service),
) -> Union[Employee, Response]:
    """Retrieve a single employee by id."""
    employee = await service.get_employee_by_id(employee_id)
    if employee is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return employee


@router.put(
    "/{employee_id}",
    response_model=Employee,
    responses={**_NOT_FOUND, **_CONFLICT},
)
async def update_employee(
    employee_in: EmployeeUpdate,
    employee_id: int = Path(..., ge=MIN_EMPLOYEE_ID, le=MAX_EMPLOYEE_ID),
    service: EmployeeService = Depends(get_employee_service),
) -> Union[Employee, Response]:
    """Replace the names and email of an existing employee.

    The employee is looked up by the path id; any id in the request
    body is ignored.
    """
    saved = await service.get_employee_by_id(employee_id)
    if saved is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    updated = saved.model_copy(
        update={
            "first_name": employee_in.first_name,
            "last_name": employee_in.last_name,
            "email": employee_in.email,
        }
    )
    return await service.update_employee(updated)


@router.delete("/{employee_id}", response_class=PlainTextResponse)
async def delete_employee(
    employee_id: int = Path(..., ge=MIN_EMPLOYEE_ID, le=MAX_EMPLOYEE_ID),
    service: EmployeeService = Depends(get_employee_service),
) -> str:
    """Delete an employee.  Always answers 200."""
    await service.delete_employee(employee_id)
    return DELETE_CONFIRMATION
