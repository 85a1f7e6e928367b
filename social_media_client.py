"""Social media API client.

This module defines a simple client wrapper around the REST API served
by ``social_media_api``.  The client uses the ``requests`` library
internally to make HTTP calls and exposes one method per endpoint:

* :meth:`register` – create an account.
* :meth:`login` – check credentials and fetch the account.
* :meth:`post_message` – post a message as an account.
* :meth:`list_messages` – fetch every message.
* :meth:`get_message` – fetch a single message by its identifier.
* :meth:`update_message` – replace the text of a message.
* :meth:`delete_message` – delete a message.
* :meth:`list_account_messages` – fetch the messages of one account.

Every method returns a tuple ``(data, error)``.  On success ``error`` is
``None``; on failure ``data`` is ``None`` (or an empty list for listing
calls) and ``error`` is a dictionary with ``status_code`` and
``message`` keys.  The API answers lookups of missing messages with an
empty body, which the client reports as ``(None, None)``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class SocialMediaAPI:
    """Client for interacting with the social media API."""

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
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
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
            method: HTTP method (``GET``, ``POST``, ``PATCH``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/messages``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.  ``data`` is the parsed JSON body
            or ``None`` when the body is empty.
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
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    body = exc.response.json()
                    message = body.get("detail") or "" if isinstance(body, dict) else str(body)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _list(self, path: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", path)
        if error:
            return [], error
        return (data if isinstance(data, list) else []), None

    # ------------------------------------------------------------------
    # Account operations
    # ------------------------------------------------------------------
    def register(self, username: str, password: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create an account; a 400 error carries the rejected rule's message."""
        return self._request("POST", "/register", json_body={"username": username, "password": password})

    def login(self, username: str, password: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Check credentials.  Wrong credentials come back as a 401 error."""
        return self._request("POST", "/login", json_body={"username": username, "password": password})

    def list_account_messages(self, account_id: int) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list(f"/accounts/{account_id}/messages")

    # ------------------------------------------------------------------
    # Message operations
    # ------------------------------------------------------------------
    def post_message(
        self,
        account_id: int,
        text: str,
        posted_at: Optional[int] = None,
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Post ``text`` as ``account_id``.

        ``posted_at`` is an optional epoch timestamp; the server stamps
        the current time when it is omitted.
        """
        payload: Dict[str, Any] = {"posted_by": account_id, "message_text": text}
        if posted_at is not None:
            payload["time_posted_epoch"] = posted_at
        return self._request("POST", "/messages", json_body=payload)

    def list_messages(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/messages")

    def get_message(self, message_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/messages/{message_id}")

    def update_message(self, message_id: int, text: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("PATCH", f"/messages/{message_id}", json_body={"message_text": text})

    def delete_message(self, message_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Delete a message.  ``(None, None)`` means it did not exist."""
        return self._request("DELETE", f"/messages/{message_id}")
