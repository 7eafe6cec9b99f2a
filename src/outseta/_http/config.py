"""HTTP configuration for the Outseta API client."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..credentials import ServerCredentials, UserCredentials

if TYPE_CHECKING:
    from .transport import AsyncTransport

DEFAULT_TIMEOUT = 60.0
API_BASE_URL_TEMPLATE = "https://{subdomain}.outseta.com/api/v1/"


def build_base_url(subdomain: str) -> str:
    return API_BASE_URL_TEMPLATE.format(subdomain=subdomain)


def require_subdomain(subdomain: str | None) -> str:
    """Resolve subdomain from argument or environment, raising if not found."""
    resolved = subdomain or os.getenv("OUTSETA_SUBDOMAIN")
    if not resolved:
        raise RuntimeError(
            "Missing Outseta subdomain. Pass subdomain=... or set OUTSETA_SUBDOMAIN."
        )
    return resolved


@dataclass(frozen=True)
class ClientContext:
    """Base URL and credentials shared by every request a client builds.

    The credential objects are held by reference: updating
    ``user_auth.access_token`` affects all requests built afterwards.
    """

    base_url: str
    user_auth: UserCredentials
    server_auth: ServerCredentials
    transport: AsyncTransport

    def __post_init__(self) -> None:
        if not self.base_url.endswith("/"):
            object.__setattr__(self, "base_url", self.base_url + "/")


__all__ = [
    "ClientContext",
    "DEFAULT_TIMEOUT",
    "API_BASE_URL_TEMPLATE",
    "build_base_url",
    "require_subdomain",
]
