"""Server and user credentials used to build the Authorization header."""

from __future__ import annotations

import abc
from dataclasses import dataclass

from .errors import UnauthenticatedError

SERVER_CREDENTIALS_MISSING = (
    "The Outseta client was not initialized with API keys. "
    "Pass api_key=... and secret_key=... (or set OUTSETA_API_KEY and OUTSETA_SECRET_KEY) "
    "to make server-authenticated requests."
)
USER_CREDENTIALS_MISSING = (
    "The Outseta client doesn't have a user token. "
    "Pass access_token=..., or call client.user.login() or client.user.impersonate() first."
)


class Credentials(abc.ABC):
    """Something that can produce an Authorization header value."""

    @abc.abstractmethod
    def is_ready(self) -> bool:
        """Return True when the header can be built."""
        ...

    @property
    @abc.abstractmethod
    def authorization_header(self) -> str:
        """Header value; raises UnauthenticatedError when not ready."""
        ...


@dataclass
class ServerCredentials(Credentials):
    """API key pair for server-side requests."""

    api_key: str | None = None
    secret_key: str | None = None

    def is_ready(self) -> bool:
        return bool(self.api_key) and bool(self.secret_key)

    @property
    def authorization_header(self) -> str:
        if not self.is_ready():
            raise UnauthenticatedError(SERVER_CREDENTIALS_MISSING)
        return f"Outseta {self.api_key}:{self.secret_key}"


@dataclass
class UserCredentials(Credentials):
    """Bearer token for a logged in (or impersonated) user.

    ``access_token`` is overwritten in place by ``User.login`` and
    ``User.impersonate``, so every request built afterwards picks it up.
    """

    access_token: str | None = None

    def is_ready(self) -> bool:
        return bool(self.access_token)

    @property
    def authorization_header(self) -> str:
        if not self.is_ready():
            raise UnauthenticatedError(USER_CREDENTIALS_MISSING)
        return f"bearer {self.access_token}"


__all__ = ["Credentials", "ServerCredentials", "UserCredentials"]
