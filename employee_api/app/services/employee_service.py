"""
Business logic for employees.

``EmployeeService`` sits between the HTTP handlers and the
repository.  Its single rule is that an employee can only be created
when no other employee already uses the same email address; every
other operation passes straight through to the repository.
"""

import logging
from typing import List, Optional

from employee_api.app.core.exceptions import EmployeeAlreadyExistsError
from employee_api.app.models.employee import Employee
from employee_api.app.repositories.employee_repository import EmployeeRepository


logger = logging.getLogger(__name__)


class EmployeeService:
    """Service for managing employees."""

    def __init__(self, repository: EmployeeRepository) -> None:
        self.repository = repository

    def save_employee(self, employee: Employee) -> Employee:
        """Create a new employee.

        Raises ``EmployeeAlreadyExistsError`` without touching storage
        if the email is already in use.
        """
        existing = self.repository.find_by_email(employee.email)
        if existing is not None:
            logger.warning("Rejected employee with duplicate email %s", employee.email)
            raise EmployeeAlreadyExistsError(employee.email)
        saved = self.repository.save(employee)
        logger.info("Created employee %s: %s", saved.id, saved)
        return saved

    def get_all_employees(self) -> List[Employee]:
        return self.repository.find_all()

    def get_employee_by_id(self, employee_id: int) -> Optional[Employee]:
        """Return the employee or ``None`` when no such id is stored."""
        return self.repository.find_by_id(employee_id)

    def update_employee(self, employee: Employee) -> Employee:
        """Persist changes to an employee whose ``id`` is already set.

        Neither the existence of the id nor the uniqueness of the new
        email is checked here: the repository upserts by id and the
        database rejects a duplicate email.
        """
        updated = self.repository.save(employee)
        logger.info("Updated employee %s", updated.id)
        return updated

    def delete_employee(self, employee_id: int) -> None:
        self.repository.delete_by_id(employee_id)
        logger.info("Deleted employee %s", employee_id)
