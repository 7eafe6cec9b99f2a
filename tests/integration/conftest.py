"""Fixtures for tests that send requests through a mocked Outseta API."""

from collections.abc import Generator
from typing import Any

import pytest
import respx


@pytest.fixture
def api_mock(base_url: str) -> Generator[respx.MockRouter, None, None]:
    """Mock router rooted at the test account's API base URL."""
    with respx.mock(base_url=base_url, assert_all_called=False) as mock:
        yield mock


@pytest.fixture
def server_client_kwargs(
    mock_env_clear: None, subdomain: str, api_key: str, secret_key: str
) -> dict[str, Any]:
    return {"subdomain": subdomain, "api_key": api_key, "secret_key": secret_key}


@pytest.fixture
def user_client_kwargs(mock_env_clear: None, subdomain: str, access_token: str) -> dict[str, Any]:
    return {"subdomain": subdomain, "access_token": access_token}


@pytest.fixture
def empty_page() -> dict[str, Any]:
    return {"metadata": {"limit": 100, "offset": 0, "total": 0}, "items": []}


@pytest.fixture
def validation_envelope() -> dict[str, Any]:
    return {
        "ErrorMessage": "A validation error has occurred",
        "EntityValidationErrors": [
            {
                "Entity": None,
                "TypeName": "Person",
                "ValidationErrors": [
                    {
                        "ErrorCode": "outsetaError",
                        "ErrorMessage": "Email is required",
                        "PropertyName": "Email",
                    }
                ],
            }
        ],
    }
