from __future__ import annotations

from urllib.parse import quote

from .._core import BaseResource
from ..models import ListResponse, Transaction


class Transactions(BaseResource):
    async def get_all(self, account_uid: str) -> ListResponse[Transaction]:
        """List every billing transaction of an account."""
        response = await (
            self._request(f"billing/transactions/{quote(account_uid, safe='')}")
            .authenticate_as_server()
            .get()
        )
        return self._parse(response, ListResponse[Transaction])


__all__ = ["Transactions"]
