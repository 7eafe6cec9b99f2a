"""User namespace: login, impersonation, profile and password."""

from __future__ import annotations

from typing import Any

from .._core import BaseResource
from .._http import ClientContext, Request
from ..models import LoginResponse
from .password import Password
from .profile import Profile

CLIENT_ID = "outseta_auth_widget"


def _token_body(username: str, password: str) -> dict[str, Any]:
    return {
        "username": username,
        "password": password,
        "grant_type": "password",
        "client_id": CLIENT_ID,
    }


class User(BaseResource):
    """Authenticate end users and manage the logged in user's account.

    A successful ``login`` or ``impersonate`` stores the returned token on
    the client, so later user-authenticated calls use it.
    """

    def __init__(self, context: ClientContext) -> None:
        super().__init__(context)
        self.profile = Profile(context)
        self.password = Password(context)

    async def login(self, username: str, password: str) -> LoginResponse:
        """Exchange a username and password for an access token."""
        request = self._request("tokens").with_body(_token_body(username, password))
        return await self._issue_token(request)

    async def impersonate(self, username: str) -> LoginResponse:
        """Get a token for any user, using the API keys instead of a password."""
        request = (
            self._request("tokens").authenticate_as_server().with_body(_token_body(username, ""))
        )
        return await self._issue_token(request)

    async def _issue_token(self, request: Request) -> LoginResponse:
        response = await request.post()
        token = self._parse(response, LoginResponse)
        self._context.user_auth.access_token = token.access_token
        return token


__all__ = ["User", "Profile", "Password"]
