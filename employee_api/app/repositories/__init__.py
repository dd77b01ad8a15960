"""
Data access layer.

Repositories hide SQL behind a small interface so the services can be
exercised against any implementation (including mocks in tests).
"""

from .employee_repository import EmployeeRepository, SQLiteEmployeeRepository

__all__ = ["EmployeeRepository", "SQLiteEmployeeRepository"]
