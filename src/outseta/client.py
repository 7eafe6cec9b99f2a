from __future__ import annotations

import os

import httpx

from ._http import (
    AsyncTransport,
    ClientContext,
    build_base_url,
    create_base_async_client,
    require_subdomain,
)
from .billing import Billing
from .credentials import ServerCredentials, UserCredentials
from .crm import Crm
from .marketing import Marketing
from .support import Support
from .user import User


class OutsetaClient:
    """Async client for the Outseta REST API.

    Use API keys for server-side calls, an access token (or ``user.login``)
    for calls made on behalf of a user, or both:

    ```python
    async with OutsetaClient(subdomain="acme", api_key="...", secret_key="...") as outseta:
        plans = await outseta.billing.plans.get_all()
    ```

    Any argument left out is read from ``OUTSETA_SUBDOMAIN``,
    ``OUTSETA_ACCESS_TOKEN``, ``OUTSETA_API_KEY`` or ``OUTSETA_SECRET_KEY``.
    A client passed in through ``client`` is used as-is and never closed here.
    """

    def __init__(
        self,
        *,
        subdomain: str | None = None,
        access_token: str | None = None,
        api_key: str | None = None,
        secret_key: str | None = None,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        resolved_subdomain = require_subdomain(subdomain)

        self.user_auth = UserCredentials(access_token or os.getenv("OUTSETA_ACCESS_TOKEN"))
        self.server_auth = ServerCredentials(
            api_key or os.getenv("OUTSETA_API_KEY"),
            secret_key or os.getenv("OUTSETA_SECRET_KEY"),
        )

        if client is None:
            transport = AsyncTransport(create_base_async_client(timeout))
        else:
            transport = AsyncTransport(client, owns_client=False)
        self._transport = transport

        self.context = ClientContext(
            base_url=build_base_url(resolved_subdomain),
            user_auth=self.user_auth,
            server_auth=self.server_auth,
            transport=transport,
        )

        self.billing = Billing(self.context)
        self.crm = Crm(self.context)
        self.marketing = Marketing(self.context)
        self.support = Support(self.context)
        self.user = User(self.context)

    async def aclose(self) -> None:
        await self._transport.aclose()

    async def __aenter__(self) -> OutsetaClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.aclose()


__all__ = ["OutsetaClient"]
