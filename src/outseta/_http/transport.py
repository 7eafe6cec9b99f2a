"""Async HTTP transport."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

import httpx

QueryParams = Sequence[tuple[str, str]]


class AsyncTransport:
    """Sends fully built requests through an httpx.AsyncClient.

    The transport closes the client on ``aclose()`` only when it owns it.
    """

    def __init__(self, client: httpx.AsyncClient, *, owns_client: bool = True) -> None:
        self._client = client
        self._owns_client = owns_client

    @property
    def client(self) -> httpx.AsyncClient:
        return self._client

    async def send(
        self,
        method: str,
        url: str,
        *,
        params: QueryParams | None = None,
        content: str | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> httpx.Response:
        """Send one request and return the response, whatever its status."""
        return await self._client.request(
            method,
            url,
            params=list(params) if params else None,
            content=content,
            headers=dict(headers) if headers else None,
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()


__all__ = ["AsyncTransport", "QueryParams"]
