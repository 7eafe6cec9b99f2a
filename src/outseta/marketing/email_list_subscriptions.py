"""Subscribers of marketing email lists."""

from __future__ import annotations

from urllib.parse import quote

from .._core import BaseResource, _paging_params
from ..models import (
    EmailListPerson,
    EmailListSubscriptionAdd,
    EmailListSubscriptionDelete,
    ListResponse,
    ValidationError,
)

DEFAULT_FIELDS = "*"


class EmailListSubscriptions(BaseResource):
    async def get_all(
        self,
        list_uid: str,
        *,
        limit: int | None = None,
        offset: int | None = None,
        fields: str | None = None,
    ) -> ListResponse[EmailListPerson]:
        request = (
            self._request(f"email/lists/{quote(list_uid, safe='')}/subscriptions")
            .with_params(self._fields(fields, DEFAULT_FIELDS))
            # The endpoint fails without an explicit ordering.
            .with_params({"orderBy": "SubscribedDate"})
            .authenticate_as_server()
        )
        request.with_params(_paging_params(limit, offset))
        response = await request.get()
        return self._parse(response, ListResponse[EmailListPerson])

    async def add(
        self, subscription: EmailListSubscriptionAdd, *, fields: str | None = None
    ) -> ValidationError | None:
        """Subscribe a person, existing (by uid) or new (by email), to a list."""
        list_uid = quote(subscription["EmailList"]["Uid"], safe="")
        response = await (
            self._request(f"email/lists/{list_uid}/subscriptions")
            .with_params(self._fields(fields, DEFAULT_FIELDS))
            .authenticate_as_server()
            .with_body(subscription)
            .post()
        )
        return self._parse_or_invalid(response, None)

    async def delete(self, subscription: EmailListSubscriptionDelete) -> None:
        list_uid = quote(subscription["EmailList"]["Uid"], safe="")
        person_uid = quote(subscription["Person"]["Uid"], safe="")
        response = await (
            self._request(f"email/lists/{list_uid}/subscriptions/{person_uid}")
            .authenticate_as_server()
            .delete()
        )
        self._expect_ok(response)


__all__ = ["EmailListSubscriptions"]
