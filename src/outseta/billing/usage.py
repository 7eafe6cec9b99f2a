"""Usage records for metered add-ons."""

from __future__ import annotations

from .._core import BaseResource, _paging_params
from ..models import ListResponse, UsageAdd, UsageItem, ValidationError

DEFAULT_FIELDS = ",".join(
    [
        "*",
        "Invoice.Uid",
        "SubscriptionAddOn.*",
        "SubscriptionAddOn.Subscription.Uid",
        "SubscriptionAddOn.Subscription.Account.Uid",
        "SubscriptionAddOn.AddOn.Uid",
    ]
)


class Usage(BaseResource):
    async def get_all(
        self,
        *,
        limit: int | None = None,
        offset: int | None = None,
        fields: str | None = None,
        account_uid: str | None = None,
    ) -> ListResponse[UsageItem]:
        request = (
            self._request("billing/usage")
            .with_params(self._fields(fields, DEFAULT_FIELDS))
            .authenticate_as_server()
        )
        request.with_params(_paging_params(limit, offset))
        if account_uid:
            request.with_params({"SubscriptionAddOn.Subscription.Account.Uid": account_uid})
        response = await request.get()
        return self._parse(response, ListResponse[UsageItem])

    async def add(
        self, usage: UsageAdd, *, fields: str | None = None
    ) -> UsageItem | ValidationError:
        """Record usage against a usage-based subscription add-on."""
        response = await (
            self._request("billing/usage")
            .authenticate_as_server()
            .with_params(self._fields(fields, DEFAULT_FIELDS))
            .with_body(usage)
            .post()
        )
        return self._parse_or_invalid(response, UsageItem)


__all__ = ["Usage", "DEFAULT_FIELDS"]
