"""Billing plan families (public, no authentication)."""

from __future__ import annotations

from .._core import BaseResource, _paging_params
from ..models import ListResponse, PlanFamily


class PlanFamilies(BaseResource):
    async def get_all(
        self, *, limit: int | None = None, offset: int | None = None
    ) -> ListResponse[PlanFamily]:
        response = await (
            self._request("billing/planfamilies")
            .with_params(_paging_params(limit, offset))
            .get()
        )
        return self._parse(response, ListResponse[PlanFamily])


__all__ = ["PlanFamilies"]
