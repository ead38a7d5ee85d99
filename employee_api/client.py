"""Employee API client.

A thin wrapper around the ``/api/employees`` endpoints using the
``requests`` library.  Every high‑level method returns a tuple
``(data, error)``:

* on success ``data`` holds the parsed response (an employee dict, a
  list of employee dicts or the delete confirmation text) and
  ``error`` is ``None``;
* on failure ``data`` is ``None`` and ``error`` is a dict with the
  keys ``status_code`` and ``message``.

Example::

    client = EmployeeAPIClient(base_url="http://localhost:8000")
    employee, error = client.create_employee("Ramesh", "Fadatare", "ramesh@example.com")
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

EMPLOYEES_PATH = "/api/employees"

Result = Tuple[Optional[Any], Optional[Dict[str, Any]]]


class EmployeeAPIClient:
    """Client for the employee CRUD endpoints."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:8000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per‑request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(self, method: str, path: str, *, json_body: Any | None = None) -> Result:
        """Perform an HTTP request and normalise the outcome.

        JSON responses are decoded; other non‑empty bodies are returned
        as text.  Empty bodies yield ``None``.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = self._error_message(exc.response) or str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

        if not response.content:
            return None, None
        content_type = response.headers.get("Content-Type", "")
        if content_type.startswith("application/json"):
            return response.json(), None
        return response.text, None

    @staticmethod
    def _error_message(response: Optional[requests.Response]) -> str:
        if response is None or not response.content:
            return ""
        try:
            body = response.json()
        except ValueError:
            return response.text
        if isinstance(body, dict):
            return str(body.get("detail") or body.get("message") or body)
        return str(body)

    # ------------------------------------------------------------------
    # Employee operations
    # ------------------------------------------------------------------
    def create_employee(self, first_name: str, last_name: str, email: str) -> Result:
        """Create an employee.  A duplicate email yields a 409 error."""
        payload = {"firstName": first_name, "lastName": last_name, "email": email}
        return self._request("POST", EMPLOYEES_PATH, json_body=payload)

    def list_employees(self) -> Tuple[Optional[List[Dict[str, Any]]], Optional[Dict[str, Any]]]:
        """Retrieve all employees.

        On error ``data`` is ``None`` like every other method, so an
        empty list always means the service has no employees.
        """
        data, error = self._request("GET", EMPLOYEES_PATH)
        if error:
            return None, error
        return data or [], None

    def get_employee(self, employee_id: int) -> Result:
        return self._request("GET", f"{EMPLOYEES_PATH}/{employee_id}")

    def update_employee(self, employee_id: int, first_name: str, last_name: str, email: str) -> Result:
        payload = {"firstName": first_name, "lastName": last_name, "email": email}
        return self._request("PUT", f"{EMPLOYEES_PATH}/{employee_id}", json_body=payload)

    def delete_employee(self, employee_id: int) -> Result:
        """Delete an employee; ``data`` is the confirmation text."""
        return self._request("DELETE", f"{EMPLOYEES_PATH}/{employee_id}")
