from __future__ import annotations

from .._core import BaseResource
from ..models import Person, ProfileUpdate, ValidationError


class Profile(BaseResource):
    """The profile of the currently authenticated user."""

    async def get(self) -> Person:
        response = await self._request("profile").authenticate_as_user().get()
        return self._parse(response, Person)

    async def update(self, profile: ProfileUpdate) -> Person | ValidationError:
        response = await (
            self._request("profile").authenticate_as_user().with_body(profile).put()
        )
        return self._parse_or_invalid(response, Person)


__all__ = ["Profile"]
