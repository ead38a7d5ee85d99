"""
Pydantic models for employee data.

Attributes use snake_case in Python while the JSON representation
uses camelCase keys (``firstName``, ``lastName``).  Both spellings are
accepted on input; responses are always rendered with the camelCase
aliases.
"""

from typing import Optional

from pydantic import BaseModel, Field


class EmployeeBase(BaseModel):
    first_name: str = Field(..., alias="firstName", examples=["Ramesh"])
    last_name: str = Field(..., alias="lastName", examples=["Fadatare"])
    email: str = Field(..., examples=["ramesh.fadatare@gmail.com"])

    model_config = {
        "populate_by_name": True,
    }


class EmployeeCreate(EmployeeBase):
    """Schema for creating an employee.

    An ``id`` may be present in the payload but is ignored: the store
    always assigns a fresh identifier on create.
    """

    id: Optional[int] = Field(None, description="Ignored; assigned by the store")


class EmployeeUpdate(EmployeeBase):
    """Schema for replacing an employee's names and email.

    The identifier in the URL path is authoritative; an ``id`` in the
    body is ignored.
    """

    id: Optional[int] = Field(None, description="Ignored; the path id is used")


class Employee(EmployeeBase):
    """An employee record, stored or about to be stored.

    ``id`` is ``None`` until the record has been saved.
    """

    id: Optional[int] = None

    model_config = {
        "populate_by_name": True,
        "from_attributes": True,
    }
