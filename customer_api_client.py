"""Customer API client.

This module defines a small client wrapper around the Customer REST API.
The client uses the ``requests`` library internally to make HTTP calls
and exposes one method per operation:

* :meth:`CustomerAPI.list_customers` – return every customer.
* :meth:`CustomerAPI.get_customer` – fetch a single customer by id.
* :meth:`CustomerAPI.create_customer` – create a customer and return its id.
* :meth:`CustomerAPI.update_customer` – replace a customer's fields.
* :meth:`CustomerAPI.delete_customer` – remove a customer.

Every method returns a tuple ``(data, error)``.  On success ``error`` is
``None``; on failure ``data`` is empty and ``error`` is a dictionary with
the keys ``status_code`` and ``message``.

The service answers reads with ``302 Found`` and reports an e-mail that
is already registered with ``208 Already Reported``.  The client never
follows redirects, treats 302 as a successful read and 208 as an error.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

BASE_PATH = "/customer"

Error = Dict[str, Any]


class CustomerAPI:
    """Client for interacting with the Customer API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8080``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for the server before giving up.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(
        self,
        method: str,
        path: str,
        *,
        expected: Iterable[int],
        json_body: Any | None = None,
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/customer``).
            expected: Status codes that count as success.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.  ``data`` contains the parsed JSON
            response on success (``None`` for an empty body).
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
                allow_redirects=False,
            )
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

        if response.status_code not in expected:
            message = response.text or response.reason or f"HTTP {response.status_code}"
            logger.error("API request failed (%s): %s", response.status_code, message)
            return None, {"status_code": response.status_code, "message": message}
        if response.content:
            return response.json(), None
        return None, None

    # ------------------------------------------------------------------
    # Customer operations
    # ------------------------------------------------------------------
    def list_customers(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all customers.

        Returns:
            A tuple ``(customers, error)``.  ``customers`` is empty on
            failure.
        """
        data, error = self._request("GET", BASE_PATH, expected=(302,))
        if error:
            return [], error
        return data or [], None

    def get_customer(self, customer_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a single customer by ID."""
        return self._request("GET", f"{BASE_PATH}/{customer_id}", expected=(302,))

    def create_customer(
        self, first_name: str, last_name: str, email: str
    ) -> Tuple[Optional[str], Optional[Error]]:
        """Create a customer.

        Returns:
            A tuple ``(customer_id, error)``.  An e-mail that is already
            registered yields an error with ``status_code`` 208.
        """
        payload = {"firstName": first_name, "lastName": last_name, "email": email}
        return self._request("POST", BASE_PATH, expected=(201,), json_body=payload)

    def update_customer(
        self, customer_id: Any, first_name: str, last_name: str, email: str
    ) -> Tuple[bool, Optional[Error]]:
        """Replace the name and e-mail of an existing customer.

        Returns:
            A tuple ``(success, error)``.
        """
        payload = {
            "id": str(customer_id),
            "firstName": first_name,
            "lastName": last_name,
            "email": email,
        }
        _, error = self._request("PUT", BASE_PATH, expected=(200,), json_body=payload)
        return error is None, error

    def delete_customer(self, customer_id: Any) -> Tuple[bool, Optional[Error]]:
        """Delete a customer.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._request("DELETE", f"{BASE_PATH}/{customer_id}", expected=(200,))
        return error is None, error
