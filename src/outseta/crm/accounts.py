"""CRM accounts, including cancellation and trial management."""

from __future__ import annotations

from datetime import date, datetime
from urllib.parse import quote

from .._core import BaseResource, _paging_params
from ..models import (
    Account,
    AccountAdd,
    AccountCancellation,
    AccountStage,
    AccountUpdate,
    ListResponse,
    ValidationError,
)

DEFAULT_FIELDS = "*,PersonAccount.*,PersonAccount.Person.Uid"


class Accounts(BaseResource):
    """Server-authenticated account endpoints.

    Reads and writes always request the account with its people
    (``*,PersonAccount.*,PersonAccount.Person.Uid``).
    """

    async def get_all(
        self,
        *,
        limit: int | None = None,
        offset: int | None = None,
        account_stage: AccountStage | int | None = None,
    ) -> ListResponse[Account]:
        request = (
            self._request("crm/accounts")
            .authenticate_as_server()
            .with_params({"fields": DEFAULT_FIELDS})
        )
        request.with_params(_paging_params(limit, offset))
        if account_stage:
            request.with_params({"AccountStage": str(int(account_stage))})
        response = await request.get()
        return self._parse(response, ListResponse[Account])

    async def get(self, uid: str) -> Account:
        response = await (
            self._request(f"crm/accounts/{quote(uid, safe='')}")
            .authenticate_as_server()
            .with_params({"fields": DEFAULT_FIELDS})
            .get()
        )
        return self._parse(response, Account)

    async def add(self, account: AccountAdd) -> Account | ValidationError:
        response = await (
            self._request("crm/accounts")
            .authenticate_as_server()
            .with_body(account)
            .with_params({"fields": DEFAULT_FIELDS})
            .post()
        )
        return self._parse_or_invalid(response, Account)

    async def update(self, account: AccountUpdate) -> Account | ValidationError:
        response = await (
            self._request(f"crm/accounts/{quote(account['Uid'], safe='')}")
            .authenticate_as_server()
            .with_body(account)
            .with_params({"fields": DEFAULT_FIELDS})
            .put()
        )
        return self._parse_or_invalid(response, Account)

    async def cancel(self, cancellation: AccountCancellation) -> ValidationError | None:
        """Cancel the account's subscription at the end of the current term."""
        uid = quote(cancellation["Account"]["Uid"], safe="")
        response = await (
            self._request(f"crm/accounts/cancellation/{uid}")
            .authenticate_as_server()
            .with_body(cancellation)
            .put()
        )
        return self._parse_or_invalid(response, None)

    async def delete(self, uid: str) -> None:
        response = await (
            self._request(f"crm/accounts/{quote(uid, safe='')}").authenticate_as_server().delete()
        )
        self._expect_ok(response)

    async def expire_current_subscription(self, uid: str) -> ValidationError | None:
        """End the current subscription immediately."""
        response = await (
            self._request(f"crm/accounts/{quote(uid, safe='')}/expire-current-subscription")
            .authenticate_as_server()
            .put()
        )
        return self._parse_or_invalid(response, None)

    async def extend_trial(self, uid: str, to_date: datetime | date) -> ValidationError | None:
        """Move the end of the account's trial to ``to_date``."""
        response = await (
            self._request(f"crm/accounts/{quote(uid, safe='')}/extend-trial")
            .authenticate_as_server()
            .with_body({"ToDate": to_date})
            .put()
        )
        return self._parse_or_invalid(response, None)

    async def remove_cancellation(self, uid: str) -> ValidationError | None:
        """Undo a pending cancellation."""
        response = await (
            self._request(f"crm/accounts/{quote(uid, safe='')}/remove-cancellation")
            .authenticate_as_server()
            .put()
        )
        return self._parse_or_invalid(response, None)


__all__ = ["Accounts", "DEFAULT_FIELDS"]
