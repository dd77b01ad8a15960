"""
Service layer abstraction.

Each service encapsulates business logic for a domain and receives
its repository through the constructor, so API handlers never talk
to storage directly.
"""

from .employee_service import EmployeeService

__all__ = ["EmployeeService"]
