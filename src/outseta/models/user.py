from __future__ import annotations

from pydantic import BaseModel


class LoginResponse(BaseModel):
    """Token issued by ``POST tokens``."""

    access_token: str
    expires_in: int | None = None
    token_type: str | None = None
