"""
Domain exceptions raised by the service layer.

Absence of a record is not an error here: lookups return ``None`` and
the caller decides whether that is a "not found" condition.
"""


class EmployeeApiError(Exception):
    """Base class for errors raised by the Employee API services."""
    pass


class ConflictError(EmployeeApiError):
    """A uniqueness rule would be violated by the requested change."""
    pass


class EmployeeAlreadyExistsError(ConflictError):
    """Raised when an employee with the same email is already stored."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(f"Employee already exist with given email:{email}")
