"""Exceptions raised by the Outseta client."""

from __future__ import annotations

from typing import Any

import httpx


class OutsetaError(Exception):
    """Base class for all client errors."""


class UnauthenticatedError(OutsetaError):
    """A request needed credentials that the client does not have."""


class RequestAlreadySentError(OutsetaError):
    """A request builder was executed more than once."""


class OutsetaHTTPError(OutsetaError):
    """The API answered with a status the calling method does not handle.

    The raw response is kept so callers can inspect the status and body.
    """

    def __init__(self, response: httpx.Response, message: str, *, data: Any | None = None):
        super().__init__(message)
        self.response = response
        self.status = response.status_code
        self.data = data

    @property
    def status_code(self) -> int:
        return self.status

    @classmethod
    def from_response(cls, response: httpx.Response) -> OutsetaHTTPError:
        message, parsed = _parse_error_message(response)
        return cls(response, message, data=parsed)


def _parse_error_message(response: httpx.Response) -> tuple[str, Any | None]:
    parsed: Any | None = None
    message = f"HTTP {response.status_code}"
    try:
        parsed = response.json()
        if isinstance(parsed, dict):
            if isinstance(parsed.get("ErrorMessage"), str):
                message = f"{message}: {parsed['ErrorMessage']}"
            elif isinstance(parsed.get("Message"), str):
                message = f"{message}: {parsed['Message']}"
            elif isinstance(parsed.get("error_description"), str):
                message = f"{message}: {parsed['error_description']}"
    except ValueError:
        parsed = None

    if parsed is None and response.text:
        text = response.text
        snippet = text if len(text) <= 500 else text[:500] + "..."
        message = f"{message}: {snippet}"

    return message, parsed


__all__ = [
    "OutsetaError",
    "UnauthenticatedError",
    "RequestAlreadySentError",
    "OutsetaHTTPError",
]
