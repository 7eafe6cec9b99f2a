"""Shared HTTP infrastructure for the Outseta API client."""

from .clients import create_base_async_client
from .config import (
    API_BASE_URL_TEMPLATE,
    DEFAULT_TIMEOUT,
    ClientContext,
    build_base_url,
    require_subdomain,
)
from .request import Method, Request
from .transport import AsyncTransport, QueryParams

__all__ = [
    "API_BASE_URL_TEMPLATE",
    "DEFAULT_TIMEOUT",
    "ClientContext",
    "build_base_url",
    "require_subdomain",
    "create_base_async_client",
    "AsyncTransport",
    "QueryParams",
    "Request",
    "Method",
]
