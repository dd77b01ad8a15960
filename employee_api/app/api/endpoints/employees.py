"""
Employee endpoints.

These routes expose a CRUD API for employees.  The handlers translate
between JSON payloads and the domain model and map service outcomes to
status codes:

* a duplicate email on create answers ``409 Conflict``;
* an unknown id on read or update answers ``404 Not Found``;
* delete always answers ``200 OK``, whether or not the id existed.

Handlers are plain functions: FastAPI runs them in its threadpool so
the blocking SQLite calls do not stall the event loop.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from employee_api.app.api.dependencies import get_employee_service
from employee_api.app.core.exceptions import EmployeeAlreadyExistsError
from employee_api.app.schemas.employee import EmployeeCreate, EmployeeRead, Message
from employee_api.app.services.employee_service import EmployeeService

router = APIRouter()


@router.post("", response_model=EmployeeRead, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=EmployeeRead, status_code=status.HTTP_201_CREATED, include_in_schema=False)
def create_employee(
    employee_in: EmployeeCreate,
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeRead:
    """Create a new employee.

    Returns HTTP 409 if another employee already uses the email.
    """
    try:
        employee = service.save_employee(employee_in.to_employee())
    except EmployeeAlreadyExistsError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return EmployeeRead.model_validate(employee)


@router.get("", response_model=List[EmployeeRead])
@router.get("/", response_model=List[EmployeeRead], include_in_schema=False)
def list_employees(
    service: EmployeeService = Depends(get_employee_service),
) -> List[EmployeeRead]:
    """Return all employees in insertion order."""
    return [EmployeeRead.model_validate(e) for e in service.get_all_employees()]


@router.get("/{employee_id}", response_model=EmployeeRead)
def get_employee(
    employee_id: int,
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeRead:
    """Retrieve a single employee by ID.

    Returns HTTP 404 if the employee is not found.
    """
    employee = service.get_employee_by_id(employee_id)
    if employee is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Employee not found")
    return EmployeeRead.model_validate(employee)


@router.put("/{employee_id}", response_model=EmployeeRead)
def update_employee(
    employee_id: int,
    employee_in: EmployeeCreate,
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeRead:
    """Replace the fields of an existing employee.

    The id is taken from the path; an id in the body is ignored.
    Returns HTTP 404 if the employee does not exist, so an update
    never creates a record.
    """
    if service.get_employee_by_id(employee_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Employee not found")
    employee = service.update_employee(employee_in.to_employee(employee_id))
    return EmployeeRead.model_validate(employee)


@router.delete("/{employee_id}", response_model=Message)
def delete_employee(
    employee_id: int,
    service: EmployeeService = Depends(get_employee_service),
) -> Message:
    """Delete an employee by ID.

    Deleting an unknown id is not an error.
    """
    service.delete_employee(employee_id)
    return Message(message="Employee deleted successfully!")
