from __future__ import annotations

from .._core import BaseResource
from ..models import ValidationError


class Password(BaseResource):
    async def update(self, existing_password: str, new_password: str) -> ValidationError | None:
        """Change the current user's password."""
        response = await (
            self._request("profile/password")
            .authenticate_as_user()
            .with_body({"ExistingPassword": existing_password, "NewPassword": new_password})
            .put()
        )
        return self._parse_or_invalid(response, None)


__all__ = ["Password"]
