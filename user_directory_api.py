"""User directory API client.

This module defines a small client wrapper around the user directory
REST API.  It uses the ``requests`` library internally and exposes one
method per endpoint:

* :meth:`UserDirectoryAPI.health_check` – call ``GET /user``.
* :meth:`UserDirectoryAPI.list_users` – fetch every user.
* :meth:`UserDirectoryAPI.create_user` – create a user from a name.
* :meth:`UserDirectoryAPI.update_user` – rename an existing user.
* :meth:`UserDirectoryAPI.delete_user` – remove a user.

Every method returns a ``(data, error)`` tuple instead of raising.
``error`` is ``None`` on success; otherwise it is a dictionary with
the keys ``status_code`` and ``message``, where ``message`` is the
server's ``error`` field when the server produced one.

The base URL is resolved by :func:`resolve_api_base_url` from the
following environment variables:

``USER_DIRECTORY_API_URL``
    Explicit base URL.  Always wins when set.

``USER_DIRECTORY_ENV``
    ``development`` (default) or ``production``.  Development talks
    to ``http://localhost:8080``.

``USER_DIRECTORY_ORIGIN``
    Origin of the deployed service, used in production when no
    explicit URL is given.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Mapping, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

DEVELOPMENT_BASE_URL = "http://localhost:8080"
USERS_PATH = "/api/users"
HEALTH_CHECK_PATH = "/user"

ApiError = Dict[str, Any]


def resolve_api_base_url(mode: Optional[str] = None, env: Optional[Mapping[str, str]] = None) -> str:
    """Return the API base URL for the given build mode.

    Args:
        mode: ``"development"`` or ``"production"``.  Defaults to the
            ``USER_DIRECTORY_ENV`` variable, then ``"development"``.
        env: Mapping to read variables from.  Defaults to ``os.environ``.
    Raises:
        RuntimeError: In production when neither an explicit URL nor
            a deployed origin is configured.
    """
    env = os.environ if env is None else env
    mode = (mode or env.get("USER_DIRECTORY_ENV") or "development").lower()
    override = env.get("USER_DIRECTORY_API_URL")
    if override:
        base_url = override
    elif mode == "development":
        base_url = DEVELOPMENT_BASE_URL
    else:
        base_url = env.get("USER_DIRECTORY_ORIGIN", "")
        if not base_url:
            raise RuntimeError(
                "Missing USER_DIRECTORY_API_URL or USER_DIRECTORY_ORIGIN environment variable for production"
            )
    base_url = base_url.rstrip("/")
    logger.info("API configuration (%s): %s", mode, base_url)
    return base_url


class UserDirectoryAPI:
    """Client for interacting with the user directory API."""

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
            timeout: Per‑request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[ApiError]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/api/users``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.  ``data`` contains the parsed JSON
            response on success.  On failure ``data`` is ``None`` and
            ``error`` describes the issue.
        """
        url = f"{self.base_url}{path}"
        headers = {"Content-Type": "application/json"}
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
                    message = err_json.get("error") or err_json.get("detail") or str(err_json)
                except (ValueError, AttributeError):
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("%s %s failed (%s): %s", method, path, status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("%s %s failed: %s", method, path, exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def health_check(self) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Check that the service answers.  ``data`` is ``{"op": "Success"}`` when reachable."""
        data, error = self._request("GET", HEALTH_CHECK_PATH)
        if not error:
            logger.info("Health check passed: %s", data)
        return data, error

    def list_users(self) -> Tuple[List[Dict[str, Any]], Optional[ApiError]]:
        """Retrieve all users.

        Returns:
            A tuple ``(users, error)``.  ``users`` is empty on failure.
        """
        data, error = self._request("GET", USERS_PATH)
        if error:
            return [], error
        if not isinstance(data, list):
            return [], {"status_code": None, "message": "Unexpected response from server"}
        logger.info("Fetched %d users", len(data))
        return data, None

    def create_user(self, name: str) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Create a user.

        Returns:
            A tuple ``(user, error)`` where ``user`` is the record as
            stored by the server, including its assigned id.
        """
        data, error = self._request("POST", USERS_PATH, json_body={"name": name})
        if error:
            return None, error
        logger.info("Created user: %s", data)
        return data, None

    def update_user(self, user_id: Any, name: str) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Rename a user.

        Returns:
            A tuple ``(user, error)`` with the updated record.
        """
        data, error = self._request("PUT", f"{USERS_PATH}/{user_id}", json_body={"name": name})
        if error:
            return None, error
        logger.info("Updated user %s: %s", user_id, data)
        return data, None

    def delete_user(self, user_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Delete a user.

        Returns:
            A tuple ``(result, error)`` where ``result`` holds the
            confirmation ``message`` and the deleted ``user``.
        """
        data, error = self._request("DELETE", f"{USERS_PATH}/{user_id}")
        if error:
            return None, error
        logger.info("Deleted user %s", user_id)
        return data, None
