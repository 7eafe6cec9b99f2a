"""Chainable builder for a single Outseta API request."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal

import httpx

from ..errors import RequestAlreadySentError
from ..utils import debug, dump_json
from .config import ClientContext

Method = Literal["GET", "POST", "PUT", "PATCH", "DELETE"]


class Request:
    """Accumulates headers, query parameters and a JSON body, then sends once.

    ```python
    response = await (
        Request(context, "billing/subscriptions")
        .authenticate_as_server()
        .with_params({"limit": "10"})
        .get()
    )
    ```

    The terminal verbs return the raw ``httpx.Response`` whatever its status;
    interpreting it is left to the caller.
    """

    def __init__(self, context: ClientContext, endpoint: str) -> None:
        self._context = context
        self._url = context.base_url + endpoint.lstrip("/")
        self._headers: dict[str, str] = {"Content-Type": "application/json"}
        self._params: list[tuple[str, str]] = []
        self._body: dict[str, Any] | None = None
        self._method: Method | None = None

    @property
    def url(self) -> str:
        return self._url

    @property
    def headers(self) -> dict[str, str]:
        return dict(self._headers)

    @property
    def params(self) -> list[tuple[str, str]]:
        return list(self._params)

    @property
    def body(self) -> str | None:
        """The serialized JSON body, or None when no body was set."""
        if self._body is None:
            return None
        return dump_json(self._body)

    @property
    def method(self) -> Method | None:
        """The verb used to send this request, once it has been sent."""
        return self._method

    def authenticate_as_user(self) -> Request:
        self._headers["Authorization"] = self._context.user_auth.authorization_header
        return self

    def authenticate_as_server(self) -> Request:
        self._headers["Authorization"] = self._context.server_auth.authorization_header
        return self

    def authenticate_as_user_preferred(self) -> Request:
        """Use the user token if there is one, else the API keys, else nothing."""
        if self._context.user_auth.is_ready():
            return self.authenticate_as_user()
        if self._context.server_auth.is_ready():
            return self.authenticate_as_server()
        return self

    def authenticate_as_server_preferred(self) -> Request:
        """Use the API keys if there are any, else the user token, else nothing."""
        if self._context.server_auth.is_ready():
            return self.authenticate_as_server()
        if self._context.user_auth.is_ready():
            return self.authenticate_as_user()
        return self

    def with_params(self, params: Mapping[str, str]) -> Request:
        # Appended, not replaced: the same key may be sent several times.
        for key, value in params.items():
            self._params.append((key, value))
        return self

    def with_body(self, body: Mapping[str, Any]) -> Request:
        """Set the JSON body, shallow-merging over any body already set."""
        if self._body is None:
            self._body = dict(body)
        else:
            self._body = {**self._body, **body}
        return self

    def with_content_type(self, content_type: str) -> Request:
        self._headers["Content-Type"] = content_type
        return self

    async def get(self) -> httpx.Response:
        return await self._execute("GET")

    async def post(self) -> httpx.Response:
        return await self._execute("POST")

    async def put(self) -> httpx.Response:
        return await self._execute("PUT")

    async def patch(self) -> httpx.Response:
        return await self._execute("PATCH")

    async def delete(self) -> httpx.Response:
        return await self._execute("DELETE")

    async def _execute(self, method: Method) -> httpx.Response:
        if self._method is not None:
            raise RequestAlreadySentError(
                f"Request to {self._url} was already sent with {self._method}"
            )
        self._method = method

        debug(f"{method} {self._url}")
        response = await self._context.transport.send(
            method,
            self._url,
            params=self._params,
            content=self.body,
            headers=self._headers,
        )
        debug(f"{method} {self._url} -> {response.status_code}")
        return response


__all__ = ["Request", "Method"]
