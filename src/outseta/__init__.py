"""Python client for the Outseta REST API."""

from .client import OutsetaClient
from .credentials import Credentials, ServerCredentials, UserCredentials
from .errors import (
    OutsetaError,
    OutsetaHTTPError,
    RequestAlreadySentError,
    UnauthenticatedError,
)
from .models import ListResponse, LoginResponse, ValidationError

__all__ = [
    "OutsetaClient",
    "Credentials",
    "ServerCredentials",
    "UserCredentials",
    "OutsetaError",
    "OutsetaHTTPError",
    "RequestAlreadySentError",
    "UnauthenticatedError",
    "ListResponse",
    "LoginResponse",
    "ValidationError",
]
