"""
Pydantic schemas for employee data.

JSON bodies use camelCase keys (``firstName``, ``lastName``); the
snake_case field names are accepted on input as well.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from employee_api.app.models.employee import Employee


class EmployeeBase(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    first_name: str = Field(..., examples=["John"])
    last_name: str = Field(..., examples=["Doe"])
    email: str = Field(..., examples=["john.doe@example.com"])


class EmployeeCreate(EmployeeBase):
    """Schema for creating or replacing an employee.

    An ``id`` sent by the client is ignored: on create the database
    assigns it, on update the id from the URL path is used.
    """

    id: Optional[int] = None

    def to_employee(self, employee_id: Optional[int] = None) -> Employee:
        return Employee(
            id=employee_id,
            first_name=self.first_name,
            last_name=self.last_name,
            email=self.email,
        )


class EmployeeRead(EmployeeBase):
    """Schema for reading an employee from the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int


class Message(BaseModel):
    """Plain acknowledgement body."""

    message: str
