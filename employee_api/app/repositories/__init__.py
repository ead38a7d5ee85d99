"""
Data access layer.

Repositories translate between stored rows and ``Employee`` values.
Services depend on the abstract ``EmployeeRepository`` so the store can
be swapped (for example with an in‑memory fake in tests).
"""

from .employee_repository import EmployeeRepository, SQLiteEmployeeRepository

__all__ = ["EmployeeRepository", "SQLiteEmployeeRepository"]
