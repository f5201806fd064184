"""Command API client.

This module defines a simple client wrapper around the Command REST
API.  The client uses the ``requests`` library internally to make HTTP
calls and exposes one method per operation:

* :meth:`list_commands` – return all stored commands.
* :meth:`get_command` – fetch a single command by its identifier.
* :meth:`create_command` – store a new command.
* :meth:`update_command` – replace an existing command.
* :meth:`delete_command` – remove a command.

Every method returns a ``(data, error)`` tuple.  On success ``error`` is
``None``; on failure ``data`` is empty and ``error`` is a dictionary
with the keys ``status_code`` and ``message``.

The client supports optional authentication via an API key which will
be sent in the ``Authorization`` header.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class CommandAPI:
    """Client for the Command API."""

    def __init__(
        self,
        *,
        base_url: str,
        prefix: str = "/api/v1",
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:8000``.
            prefix: Path prefix the API is mounted under.
            api_key: Optional API key.  If set, an ``Authorization``
                header with the value ``Bearer <api_key>`` will be
                included in all requests.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/") + "/" + prefix.strip("/")
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
            path: Path relative to the API prefix (e.g. ``/commands``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.  ``data`` is the parsed JSON body,
            or ``None`` when the response has no content.
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
                    err_json = exc.response.json()
                    if isinstance(err_json, dict):
                        message = err_json.get("detail") or str(err_json)
                    else:
                        message = str(err_json)
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
    def _payload(how_to: str, platform: str, command_line: str) -> Dict[str, Any]:
        return {"howTo": how_to, "platform": platform, "commandLine": command_line}

    # ------------------------------------------------------------------
    # Command operations
    # ------------------------------------------------------------------
    def list_commands(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all commands.

        Returns:
            A tuple ``(commands, error)``.  ``commands`` is empty on failure.
        """
        data, error = self._request("GET", "/commands")
        if error:
            return [], error
        return data or [], None

    def get_command(self, command_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/commands/{command_id}")

    def create_command(
        self, how_to: str, platform: str, command_line: str
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a command and return the stored record including its id."""
        return self._request("POST", "/commands", json_body=self._payload(how_to, platform, command_line))

    def update_command(
        self, command_id: int, how_to: str, platform: str, command_line: str
    ) -> Tuple[bool, Optional[Error]]:
        """Replace all fields of an existing command.

        Returns:
            A tuple ``(success, error)``.
        """
        body = self._payload(how_to, platform, command_line)
        body["id"] = command_id
        _, error = self._request("PUT", f"/commands/{command_id}", json_body=body)
        return error is None, error

    def delete_command(self, command_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Delete a command and return the removed record."""
        return self._request("DELETE", f"/commands/{command_id}")
