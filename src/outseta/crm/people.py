from __future__ import annotations

from urllib.parse import quote

from .._core import BaseResource, _paging_params
from ..models import ListResponse, Person, PersonAdd, PersonUpdate, ValidationError


class People(BaseResource):
    async def get_all(
        self, *, limit: int | None = None, offset: int | None = None
    ) -> ListResponse[Person]:
        response = await (
            self._request("crm/people")
            .authenticate_as_server()
            .with_params(_paging_params(limit, offset))
            .get()
        )
        return self._parse(response, ListResponse[Person])

    async def get(self, uid: str) -> Person:
        response = await (
            self._request(f"crm/people/{quote(uid, safe='')}").authenticate_as_server().get()
        )
        return self._parse(response, Person)

    async def add(self, person: PersonAdd) -> Person | ValidationError:
        response = await (
            self._request("crm/people").authenticate_as_server().with_body(person).post()
        )
        return self._parse_or_invalid(response, Person)

    async def update(self, person: PersonUpdate) -> Person | ValidationError:
        response = await (
            self._request(f"crm/people/{quote(person['Uid'], safe='')}")
            .authenticate_as_server()
            .with_body(person)
            .put()
        )
        return self._parse_or_invalid(response, Person)

    async def delete(self, uid: str) -> None:
        response = await (
            self._request(f"crm/people/{quote(uid, safe='')}").authenticate_as_server().delete()
        )
        self._expect_ok(response)


__all__ = ["People"]
