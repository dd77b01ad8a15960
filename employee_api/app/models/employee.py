"""
Domain model for employees.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Employee:
    """
    Represents a single employee record.

    Attributes:
        first_name: Given name.
        last_name: Family name.
        email: Contact address; unique across all employees.
        id: Database primary key (None for records not yet saved).
    """
    first_name: str
    last_name: str
    email: str
    id: Optional[int] = None

    def __str__(self) -> str:
        return f"{self.first_name} {self.last_name} <{self.email}>"
