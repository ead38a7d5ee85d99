"""
Employee repositories.

``EmployeeRepository`` is the contract the service layer relies on.
``SQLiteEmployeeRepository`` implements it on top of the ``employees``
table created by ``core.db.init_db``.  Every method opens its own
connection and closes it before returning, so a repository instance
holds no state besides the database path.

All queries use parameterized statements.
"""

from __future__ import annotations

import logging
import sqlite3
from abc import ABC, abstractmethod
from typing import List, Optional

from employee_api.app.core.db import SQLITE_MAX_INTEGER, SQLITE_MIN_INTEGER, get_connection
from employee_api.app.core.exceptions import EmployeeAlreadyExistsError
from employee_api.app.schemas.employee import Employee

logger = logging.getLogger(__name__)


def _storable_id(employee_id: int) -> bool:
    """Ids outside SQLite's integer range cannot exist in the table."""
    return SQLITE_MIN_INTEGER <= employee_id <= SQLITE_MAX_INTEGER


class EmployeeRepository(ABC):
    """Storage contract for employee records."""

    @abstractmethod
    def find_by_id(self, employee_id: int) -> Optional[Employee]:
        """Return the employee with ``employee_id`` or ``None``."""

    @abstractmethod
    def find_by_email(self, email: str) -> Optional[Employee]:
        """Return the employee whose email matches exactly, or ``None``."""

    @abstractmethod
    def find_by_name(self, first_name: str, last_name: str) -> Optional[Employee]:
        """Return an employee matching both names exactly, or ``None``."""

    @abstractmethod
    def find_all(self) -> List[Employee]:
        """Return every stored employee."""

    @abstractmethod
    def save(self, employee: Employee) -> Employee:
        """Insert or overwrite an employee.

        Without an ``id`` a new row is inserted and the returned copy
        carries the assigned identifier.  With an ``id`` the row's
        names and email are overwritten.  Raises
        ``EmployeeAlreadyExistsError`` if the email belongs to another
        stored employee.
        """

    @abstractmethod
    def delete_by_id(self, employee_id: int) -> None:
        """Remove the employee if present; missing ids are ignored."""

    @abstractmethod
    def count(self) -> int:
        """Return the number of stored employees."""


class SQLiteEmployeeRepository(EmployeeRepository):
    """``EmployeeRepository`` backed by the SQLite ``employees`` table."""

    def __init__(self, db_path: Optional[str] = None) -> None:
        self.db_path = db_path

    def find_by_id(self, employee_id: int) -> Optional[Employee]:
        if not _storable_id(employee_id):
            return None
        return self._fetch_one("SELECT * FROM employees WHERE id = ?", (employee_id,))

    def find_by_email(self, email: str) -> Optional[Employee]:
        return self._fetch_one("SELECT * FROM employees WHERE email = ?", (email,))

    def find_by_name(self, first_name: str, last_name: str) -> Optional[Employee]:
        return self._fetch_one(
            "SELECT * FROM employees WHERE first_name = ? AND last_name = ? ORDER BY id LIMIT 1",
            (first_name, last_name),
        )

    def find_all(self) -> List[Employee]:
        conn = get_connection(self.db_path)
        try:
            rows = conn.execute("SELECT * FROM employees ORDER BY id").fetchall()
            return [self._row_to_employee(row) for row in rows]
        finally:
            conn.close()

    def save(self, employee: Employee) -> Employee:
        conn = get_connection(self.db_path)
        try:
            cursor = conn.cursor()
            if employee.id is None:
                cursor.execute(
                    "INSERT INTO employees (first_name, last_name, email) VALUES (?, ?, ?)",
                    (employee.first_name, employee.last_name, employee.email),
                )
                employee_id = cursor.lastrowid
            else:
                # Upsert: an unknown id is inserted as given.  A clash on
                # email with another row still raises IntegrityError.
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
        except sqlite3.IntegrityError as exc:
            conn.rollback()
            logger.warning("Rejected write for email %s: %s", employee.email, exc)
            raise EmployeeAlreadyExistsError(employee.email) from exc
        finally:
            conn.close()
        logger.debug("Saved employee row %s", employee_id)
        return employee.model_copy(update={"id": employee_id})

    def delete_by_id(self, employee_id: int) -> None:
        if not _storable_id(employee_id):
            return
        conn = get_connection(self.db_path)
        try:
            cursor = conn.execute("DELETE FROM employees WHERE id = ?", (employee_id,))
            conn.commit()
            logger.debug("Deleted %s row(s) for employee %s", cursor.rowcount, employee_id)
        finally:
            conn.close()

    def count(self) -> int:
        conn = get_connection(self.db_path)
        try:
            row = conn.execute("SELECT COUNT(*) AS count FROM employees").fetchone()
            return row["count"]
        finally:
            conn.close()

    def _fetch_one(self, query: str, params: tuple) -> Optional[Employee]:
        conn = get_connection(self.db_path)
        try:
            row = conn.execute(query, params).fetchone()
            if not row:
                return None
            return self._row_to_employee(row)
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
