"""Subscriptions: first-time sign up, plan changes and charge previews."""

from __future__ import annotations

from urllib.parse import quote

from .._core import BaseResource, _paging_params
from ..models import (
    ChargeSummary,
    ListResponse,
    Subscription,
    SubscriptionAdd,
    SubscriptionUpdate,
    SubscriptionUpgradeRequired,
    ValidationError,
)

DEFAULT_FIELDS = "*,Account.Uid,Plan.Uid"


class Subscriptions(BaseResource):
    """Server-authenticated subscription endpoints."""

    async def get_all(
        self,
        *,
        limit: int | None = None,
        offset: int | None = None,
        fields: str | None = None,
        account_uid: str | None = None,
    ) -> ListResponse[Subscription]:
        """List subscriptions, optionally only those of one account.

        ``fields`` overrides the default projection
        (``*,Account.Uid,Plan.Uid``).
        """
        request = self._request("billing/subscriptions").authenticate_as_server()
        if account_uid:
            request.with_params({"Account.Uid": account_uid})
        request.with_params(_paging_params(limit, offset))
        request.with_params(self._fields(fields, DEFAULT_FIELDS))
        response = await request.get()
        return self._parse(response, ListResponse[Subscription])

    async def get(self, uid: str, *, fields: str | None = None) -> Subscription:
        response = await (
            self._request(f"billing/subscriptions/{quote(uid, safe='')}")
            .authenticate_as_server()
            .with_params(self._fields(fields, DEFAULT_FIELDS))
            .get()
        )
        return self._parse(response, Subscription)

    async def add(self, subscription: SubscriptionAdd) -> Subscription | ValidationError:
        """Add a subscription to an account that has never had one."""
        response = await (
            self._request("billing/subscriptions/firsttimesubscription")
            .authenticate_as_server()
            .with_body(subscription)
            .put()
        )
        return self._parse_or_invalid(response, Subscription)

    async def preview_add(
        self, subscription: SubscriptionAdd
    ) -> ChargeSummary | ValidationError:
        """Compute what ``add`` would charge without creating anything."""
        response = await (
            self._request("billing/subscriptions/compute-charge-summary")
            .authenticate_as_server()
            .with_body(subscription)
            .post()
        )
        return self._parse_or_invalid(response, ChargeSummary)

    async def update(self, subscription: SubscriptionUpdate) -> Subscription | ValidationError:
        """Change the plan or add-ons of an existing subscription."""
        uid = quote(subscription["Uid"], safe="")
        response = await (
            self._request(f"billing/subscriptions/{uid}/changesubscription")
            .authenticate_as_server()
            .with_body(subscription)
            .put()
        )
        return self._parse_or_invalid(response, Subscription)

    async def preview_update(
        self, subscription: SubscriptionUpdate
    ) -> ChargeSummary | ValidationError:
        uid = quote(subscription["Uid"], safe="")
        response = await (
            self._request(f"billing/subscriptions/{uid}/changesubscriptionpreview")
            .authenticate_as_server()
            .with_body(subscription)
            .put()
        )
        return self._parse_or_invalid(response, ChargeSummary)

    async def set_subscription_upgrade_required(
        self, subscription: SubscriptionUpgradeRequired
    ) -> Subscription | ValidationError:
        """Flag (or unflag) a subscription as needing a plan upgrade."""
        uid = quote(subscription["Uid"], safe="")
        response = await (
            self._request(f"billing/subscriptions/{uid}/setsubscriptionupgraderequired")
            .authenticate_as_server()
            .with_body(subscription)
            .put()
        )
        return self._parse_or_invalid(response, Subscription)

    async def change_trial_to_subscribed(self, uid: str) -> ValidationError | None:
        """End a trial and start billing the subscription."""
        response = await (
            self._request(f"billing/subscriptions/{quote(uid, safe='')}/changetrialtosubscribed")
            .authenticate_as_server()
            .put()
        )
        return self._parse_or_invalid(response, None)


__all__ = ["Subscriptions", "DEFAULT_FIELDS"]
