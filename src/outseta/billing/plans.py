"""Billing plans (public, no authentication)."""

from __future__ import annotations

from .._core import BaseResource, _paging_params
from ..models import ListResponse, Plan


class Plans(BaseResource):
    async def get_all(
        self, *, limit: int | None = None, offset: int | None = None
    ) -> ListResponse[Plan]:
        """List the plans offered on the sign up page."""
        response = await (
            self._request("billing/plans").with_params(_paging_params(limit, offset)).get()
        )
        return self._parse(response, ListResponse[Plan])


__all__ = ["Plans"]
