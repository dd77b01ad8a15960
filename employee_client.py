"""Employee API client.

This module defines a simple client wrapper around the REST API served
by ``employee_api``.  The client uses the ``requests`` library
internally to make HTTP calls and exposes one method per operation:

* :meth:`list_employees` – return all employees.
* :meth:`get_employee` – fetch a single employee by its identifier.
* :meth:`create_employee` – create a new employee.
* :meth:`update_employee` – replace the fields of an existing employee.
* :meth:`delete_employee` – delete an employee.

Every method returns a tuple ``(data, error)``.  On success ``error`` is
``None``; on failure ``data`` is empty and ``error`` is a dictionary
with the keys ``status_code`` and ``message``.  The client never raises
for HTTP or transport errors, so callers can branch on ``error`` (for
example ``error["status_code"] == 409`` for a duplicate email).

The client supports optional authentication via an API key which will
be sent in the ``Authorization`` header.  To enable this behaviour,
initialise the client with ``api_key='<your token>'``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class EmployeeApiClient:
    """Client for interacting with the employee API."""

    def __init__(
        self,
        *,
        base_url: str,
        prefix: str = "/api",
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8000``.
            prefix: Path prefix the API is mounted under.
            api_key: Optional API key.  If set, an ``Authorization``
                header with the value ``Bearer <api_key>`` will be
                included in all requests.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/") + prefix.rstrip("/")
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to the API prefix (e.g. ``/employees``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)`` as described in the module docstring.
        """
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    message = self._error_message(exc.response.json())
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    @staticmethod
    def _error_message(body: Any) -> str:
        """Reduce a JSON error body to a single string.

        FastAPI answers validation failures with
        ``{"detail": [{"msg": ...}, ...]}`` and other errors with a string
        ``detail``.  Bodies of any other shape are rendered as is.
        """
        if not isinstance(body, dict):
            return "" if body is None else str(body)
        detail = body.get("detail") or body.get("message")
        if not detail:
            return str(body)
        if isinstance(detail, list):
            return "; ".join(
                str(item.get("msg", item)) if isinstance(item, dict) else str(item)
                for item in detail
            )
        return str(detail)

    # ------------------------------------------------------------------
    # Employee operations
    # ------------------------------------------------------------------
    def list_employees(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all employees."""
        data, error = self._request("GET", "/employees")
        if error:
            return [], error
        if isinstance(data, list):
            return data, None
        return [], None

    def get_employee(self, employee_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a single employee; a missing one yields a 404 error."""
        return self._request("GET", f"/employees/{employee_id}")

    def create_employee(
        self, first_name: str, last_name: str, email: str
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create an employee and return it with its assigned ``id``."""
        payload = {"firstName": first_name, "lastName": last_name, "email": email}
        return self._request("POST", "/employees", json_body=payload)

    def update_employee(
        self, employee_id: int, first_name: str, last_name: str, email: str
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        payload = {"firstName": first_name, "lastName": last_name, "email": email}
        return self._request("PUT", f"/employees/{employee_id}", json_body=payload)

    def delete_employee(self, employee_id: int) -> Tuple[bool, Optional[Error]]:
        """Delete an employee.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._request("DELETE", f"/employees/{employee_id}")
        if error:
            return False, error
        return True, None
