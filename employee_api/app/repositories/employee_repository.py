"""
Data access layer for employee records.

``EmployeeRepository`` is the storage interface used by
``EmployeeService``; ``SQLiteEmployeeRepository`` implements it on top
of the ``employees`` table created by ``core.db.init_db``.

All queries use parameterized statements.  Each call opens its own
connection and commits before returning, so every operation is atomic
on its own and no state is shared between requests.
"""

import logging
import sqlite3
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from employee_api.app.core.db import get_connection
from employee_api.app.models.employee import Employee


logger = logging.getLogger(__name__)


class EmployeeRepository(ABC):
    """Storage interface for employees."""

    @abstractmethod
    def save(self, employee: Employee) -> Employee:
        """Insert ``employee`` or, when its ``id`` is set, upsert it by id."""
        pass

    def save_all(self, employees: Iterable[Employee]) -> List[Employee]:
        """Save each employee in order and return the persisted records."""
        return [self.save(employee) for employee in employees]

    @abstractmethod
    def find_all(self) -> List[Employee]:
        pass

    @abstractmethod
    def find_by_id(self, employee_id: int) -> Optional[Employee]:
        pass

    @abstractmethod
    def find_by_email(self, email: str) -> Optional[Employee]:
        pass

    def exists_by_id(self, employee_id: int) -> bool:
        return self.find_by_id(employee_id) is not None

    @abstractmethod
    def count(self) -> int:
        pass

    @abstractmethod
    def delete_by_id(self, employee_id: int) -> None:
        """Remove the employee; does nothing if it does not exist."""
        pass

    @abstractmethod
    def delete_all(self) -> None:
        pass


class SQLiteEmployeeRepository(EmployeeRepository):
    """Employee repository backed by a SQLite database file.

    ``db_path`` defaults to the path configured in ``settings``.
    """

    def __init__(self, db_path: Optional[str] = None) -> None:
        self.db_path = db_path

    def _connect(self) -> sqlite3.Connection:
        return get_connection(self.db_path)

    def save(self, employee: Employee) -> Employee:
        conn = self._connect()
        try:
            cursor = conn.cursor()
            if employee.id is None:
                cursor.execute(
                    "INSERT INTO employees (first_name, last_name, email) VALUES (?, ?, ?)",
                    (employee.first_name, employee.last_name, employee.email),
                )
                employee_id = cursor.lastrowid
            else:
                cursor.execute(
                    """
                    INSERT INTO employees (id, first_name, last_name, email)
                    VALUES (?, ?, ?, ?)
                    ON CONFLICT(id) DO UPDATE SET
                        first_name = excluded.first_name,
                        last_name = excluded.last_name,
                        email = excluded.email
                    """,
                    (employee.id, employee.first_name, employee.last_name, employee.email),
                )
                employee_id = employee.id
            conn.commit()
            logger.debug("Saved employee %s", employee_id)
            row = cursor.execute(
                "SELECT id, first_name, last_name, email FROM employees WHERE id = ?",
                (employee_id,),
            ).fetchone()
            return self._row_to_employee(row)
        except sqlite3.Error:
            conn.rollback()
            raise
        finally:
            conn.close()

    def find_all(self) -> List[Employee]:
        conn = self._connect()
        try:
            rows = conn.execute(
                "SELECT id, first_name, last_name, email FROM employees ORDER BY id ASC"
            ).fetchall()
            return [self._row_to_employee(row) for row in rows]
        finally:
            conn.close()

    def find_by_id(self, employee_id: int) -> Optional[Employee]:
        conn = self._connect()
        try:
            row = conn.execute(
                "SELECT id, first_name, last_name, email FROM employees WHERE id = ?",
                (employee_id,),
            ).fetchone()
            if not row:
                return None
            return self._row_to_employee(row)
        finally:
            conn.close()

    def find_by_email(self, email: str) -> Optional[Employee]:
        conn = self._connect()
        try:
            row = conn.execute(
                "SELECT id, first_name, last_name, email FROM employees WHERE email = ?",
                (email,),
            ).fetchone()
            if not row:
                return None
            return self._row_to_employee(row)
        finally:
            conn.close()

    def exists_by_id(self, employee_id: int) -> bool:
        conn = self._connect()
        try:
            row = conn.execute(
                "SELECT 1 FROM employees WHERE id = ?",
                (employee_id,),
            ).fetchone()
            return row is not None
        finally:
            conn.close()

    def count(self) -> int:
        conn = self._connect()
        try:
            row = conn.execute("SELECT COUNT(*) AS count FROM employees").fetchone()
            return row["count"]
        finally:
            conn.close()

    def delete_by_id(self, employee_id: int) -> None:
        conn = self._connect()
        try:
            cursor = conn.cursor()
            cursor.execute("DELETE FROM employees WHERE id = ?", (employee_id,))
            conn.commit()
            if cursor.rowcount:
                logger.debug("Deleted employee %s", employee_id)
        finally:
            conn.close()

    def delete_all(self) -> None:
        conn = self._connect()
        try:
            conn.execute("DELETE FROM employees")
            conn.commit()
        finally:
            conn.close()

    @staticmethod
    def _row_to_employee(row: sqlite3.Row) -> Employee:
        """Convert a database row to an ``Employee`` instance."""
        return Employee(
            id=row["id"],
            first_name=row["first_name"],
            last_name=row["last_name"],
            email=row["email"],
        )
