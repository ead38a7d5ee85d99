"""
Exception types shared by the repository, service and API layers.
"""


class EmployeeAPIError(Exception):
    """Base class for application errors."""


class EmployeeAlreadyExistsError(EmployeeAPIError):
    """An employee with the given email is already stored.

    Raised by ``EmployeeService.save_employee`` before writing and by
    the SQLite repository when the ``UNIQUE`` constraint on ``email``
    rejects a write.  The API maps it to HTTP 409.
    """

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(f"Employee already exists with given email: {email}")
