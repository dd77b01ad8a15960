"""
API dependencies.

Provides dependency injection for services used by the endpoints.
Tests replace ``get_employee_service`` through
``app.dependency_overrides`` to point the API at another repository.
"""

from fastapi import Depends

from employee_api.app.repositories.employee_repository import (
    EmployeeRepository,
    SQLiteEmployeeRepository,
)
from employee_api.app.services.employee_service import EmployeeService


def get_employee_repository() -> EmployeeRepository:
    """Return a repository bound to the configured database file."""
    return SQLiteEmployeeRepository()


def get_employee_service(
    repository: EmployeeRepository = Depends(get_employee_repository),
) -> EmployeeService:
    return EmployeeService(repository)
