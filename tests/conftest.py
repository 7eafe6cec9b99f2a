"""Shared fixtures for all tests."""

from collections.abc import AsyncGenerator, Callable, Generator

import pytest
import pytest_asyncio

from outseta._http import AsyncTransport, ClientContext, create_base_async_client
from outseta.credentials import ServerCredentials, UserCredentials


@pytest.fixture
def mock_env_clear(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Clear all Outseta-related environment variables for testing.

    This ensures tests don't accidentally use real credentials from the environment.
    """
    env_vars_to_clear = [
        "OUTSETA_SUBDOMAIN",
        "OUTSETA_ACCESS_TOKEN",
        "OUTSETA_API_KEY",
        "OUTSETA_SECRET_KEY",
        "DEBUG",
    ]
    for var in env_vars_to_clear:
        monkeypatch.delenv(var, raising=False)
    yield


@pytest.fixture
def subdomain() -> str:
    return "acme"


@pytest.fixture
def base_url(subdomain: str) -> str:
    return f"https://{subdomain}.outseta.com/api/v1/"


@pytest.fixture
def api_key() -> str:
    return "test_api_key"


@pytest.fixture
def secret_key() -> str:
    return "test_secret_key"


@pytest.fixture
def access_token() -> str:
    return "test_access_token_123456789"


@pytest_asyncio.fixture
async def make_context(base_url: str) -> AsyncGenerator[Callable[..., ClientContext], None]:
    """Factory for a ClientContext with the given credentials (all absent by default).

    Every context built during a test shares one transport, closed at teardown.
    """
    transport = AsyncTransport(create_base_async_client())

    def _make(
        *,
        access_token: str | None = None,
        api_key: str | None = None,
        secret_key: str | None = None,
    ) -> ClientContext:
        return ClientContext(
            base_url=base_url,
            user_auth=UserCredentials(access_token),
            server_auth=ServerCredentials(api_key, secret_key),
            transport=transport,
        )

    yield _make
    await transport.aclose()
