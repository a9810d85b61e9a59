"""Events API client.

This module defines a small client wrapper around the remote events
REST API.  It can parse an ``openapi.json`` file if available to
discover the path used to create events.  If the specification file is
not present or cannot be parsed, the client falls back to the
conventional ``POST /events`` endpoint.  The client uses the
``requests`` library internally to make HTTP calls.

Failures are never raised to the caller.  Every operation returns a
tuple ``(data, error)`` where ``error`` is ``None`` on success or a
dictionary with the keys ``status_code``, ``message`` and
``structured``.  ``structured`` is ``True`` only when the server
answered with a JSON body carrying a human readable message; transport
failures (connection refused, DNS errors, timeouts) and error responses
without such a body are reported with ``structured=False``.

The client supports optional authentication via an API key which will
be sent in the ``Authorization`` header.  To enable this behaviour,
initialise the client with ``api_key='<your token>'``.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)


@dataclass
class ApiEndpoint:
    """Represents a discovered API endpoint.

    Attributes:
        path: The URI template, e.g. ``/events`` or ``/events/{id}``.
        method: The HTTP method in upper case (``GET``, ``POST``, etc.).
        operation_id: Optional identifier for the operation.
    """

    path: str
    method: str
    operation_id: Optional[str] = None


DEFAULT_CREATE_ENDPOINT = ApiEndpoint(path="/events", method="POST")


class EventsAPI:
    """Client for creating events on the remote API."""

    def __init__(
        self,
        *,
        base_url: str,
        openapi_path: Optional[str] = None,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``https://example.com``.
            openapi_path: Optional path to an OpenAPI JSON file.  If
                provided and readable, the event creation path will be
                inferred from it.
            api_key: Optional API key.  If set, an ``Authorization``
                header with the value ``Bearer <api_key>`` will be
                included in all requests.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Optional request timeout in seconds.  ``None``
                leaves the decision to ``requests``.
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout
        self.spec: Dict[str, Any] = {}
        self.endpoints: List[ApiEndpoint] = []
        if openapi_path and os.path.exists(openapi_path):
            try:
                with open(openapi_path, "r", encoding="utf-8") as f:
                    self.spec = json.load(f)
                self._discover_endpoints()
            except (OSError, ValueError) as e:
                logger.warning(
                    "Failed to load or parse OpenAPI specification %s: %s. Falling back to defaults.",
                    openapi_path,
                    e,
                )

    # ------------------------------------------------------------------
    # OpenAPI discovery
    # ------------------------------------------------------------------
    def _discover_endpoints(self) -> None:
        """Record every operation tagged ``events`` in the loaded document."""
        paths = self.spec.get("paths", {})
        for path, methods in paths.items():
            if not isinstance(methods, dict):
                continue
            for method_lower, op in methods.items():
                if not isinstance(op, dict):
                    continue
                tags = [str(t).lower() for t in op.get("tags", [])]
                if "events" in tags:
                    self.endpoints.append(
                        ApiEndpoint(
                            path=path,
                            method=method_lower.upper(),
                            operation_id=op.get("operationId"),
                        )
                    )

    def _create_endpoint(self) -> ApiEndpoint:
        """Return the first discovered ``POST`` collection endpoint or the default."""
        for ep in self.endpoints:
            if ep.method == "POST" and "{" not in ep.path:
                return ep
        return DEFAULT_CREATE_ENDPOINT

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Dict[str, Any]]]:
        """Perform an HTTP request to the API.

        Returns:
            A tuple ``(data, error)``.  ``data`` contains the parsed JSON
            response on success (``None`` for an empty or non JSON body)
            and ``error`` is ``None``.  On failure ``data`` is ``None``
            and ``error`` describes the issue.
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
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = _extract_error_message(exc.response)
            if message:
                logger.error("API request failed (%s): %s", status, message)
                return None, {"status_code": status, "message": message, "structured": True}
            logger.error("API request failed (%s): %s", status, exc)
            return None, {"status_code": status, "message": str(exc), "structured": False}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc), "structured": False}
        if not response.content:
            return None, None
        try:
            return response.json(), None
        except ValueError:
            logger.warning("Response from %s is not JSON; ignoring body", url)
            return None, None

    # ------------------------------------------------------------------
    # Event operations
    # ------------------------------------------------------------------
    def create_event(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Create an event.

        Args:
            payload: JSON body describing the event (``title``,
                ``location``, ``description``, ``date``, ``organizerId``).
        Returns:
            A tuple ``(event, error)``.
        """
        ep = self._create_endpoint()
        logger.info("Creating event '%s' via %s %s", payload.get("title"), ep.method, ep.path)
        return self._request(ep.method, ep.path, json_body=payload)


def _extract_error_message(response: Optional[requests.Response]) -> Optional[str]:
    """Return the human readable message of an error body, if any.

    The ``message`` key is preferred; FastAPI style ``detail`` is
    accepted as well.  A list of strings (NestJS validation errors) is
    joined with ``", "``.  Lists of objects, such as FastAPI validation
    errors, and non JSON bodies yield ``None``.
    """
    if response is None:
        return None
    try:
        body = response.json()
    except ValueError:
        return None
    if not isinstance(body, dict):
        return None
    for key in ("message", "detail"):
        value = body.get(key)
        if isinstance(value, str) and value:
            return value
        if isinstance(value, list) and value and all(isinstance(v, str) for v in value):
            return ", ".join(value)
    return None
