from __future__ import annotations

from urllib.parse import quote

from .._core import BaseResource, _paging_params
from ..models import Deal, DealAdd, DealUpdate, ListResponse, ValidationError

DEFAULT_FIELDS = "*"


class Deals(BaseResource):
    async def get_all(
        self,
        *,
        limit: int | None = None,
        offset: int | None = None,
        fields: str | None = None,
        deal_pipeline_stage_uid: str | None = None,
    ) -> ListResponse[Deal]:
        """List deals, optionally only those in one pipeline stage."""
        request = (
            self._request("crm/deals")
            .with_params(self._fields(fields, DEFAULT_FIELDS))
            .authenticate_as_server()
        )
        request.with_params(_paging_params(limit, offset))
        if deal_pipeline_stage_uid:
            request.with_params({"DealPipelineStage.Uid": deal_pipeline_stage_uid})
        response = await request.get()
        return self._parse(response, ListResponse[Deal])

    async def get(self, uid: str, *, fields: str | None = None) -> Deal:
        response = await (
            self._request(f"crm/deals/{quote(uid, safe='')}")
            .with_params(self._fields(fields, DEFAULT_FIELDS))
            .authenticate_as_server()
            .get()
        )
        return self._parse(response, Deal)

    async def add(self, deal: DealAdd, *, fields: str | None = None) -> Deal | ValidationError:
        response = await (
            self._request("crm/deals")
            .with_params(self._fields(fields, DEFAULT_FIELDS))
            .authenticate_as_server()
            .with_body(deal)
            .post()
        )
        return self._parse_or_invalid(response, Deal)

    async def update(
        self, deal: DealUpdate, *, fields: str | None = None
    ) -> Deal | ValidationError:
        response = await (
            self._request(f"crm/deals/{quote(deal['Uid'], safe='')}")
            .with_params(self._fields(fields, DEFAULT_FIELDS))
            .authenticate_as_server()
            .with_body(deal)
            .put()
        )
        return self._parse_or_invalid(response, Deal)

    async def delete(self, uid: str) -> None:
        response = await (
            self._request(f"crm/deals/{quote(uid, safe='')}").authenticate_as_server().delete()
        )
        self._expect_ok(response)


__all__ = ["Deals"]
