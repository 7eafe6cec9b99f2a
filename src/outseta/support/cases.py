"""Support cases and their replies."""

from __future__ import annotations

from urllib.parse import quote

from .._core import BaseResource, _paging_params
from ..models import (
    Case,
    CaseAdd,
    CaseHistory,
    ClientReply,
    ListResponse,
    SupportReply,
    ValidationError,
)

DEFAULT_FIELDS = "*"


class Cases(BaseResource):
    async def get_all(
        self,
        *,
        limit: int | None = None,
        offset: int | None = None,
        fields: str | None = None,
        from_person_uid: str | None = None,
        from_person_email: str | None = None,
    ) -> ListResponse[Case]:
        """List cases, optionally filtered by the person who opened them.

        When both are given, ``from_person_uid`` is used and
        ``from_person_email`` is ignored.
        """
        request = (
            self._request("support/cases")
            .with_params(self._fields(fields, DEFAULT_FIELDS))
            .authenticate_as_server()
        )
        request.with_params(_paging_params(limit, offset))
        if from_person_uid:
            request.with_params({"FromPerson.Uid": from_person_uid})
        elif from_person_email:
            request.with_params({"FromPerson.Email": from_person_email})
        response = await request.get()
        return self._parse(response, ListResponse[Case])

    async def add(
        self,
        case: CaseAdd,
        *,
        fields: str | None = None,
        send_auto_responder: bool | None = None,
    ) -> Case | ValidationError:
        request = (
            self._request("support/cases")
            .with_params(self._fields(fields, DEFAULT_FIELDS))
            .authenticate_as_server()
            .with_body(case)
        )
        if send_auto_responder is not None:
            request.with_params({"sendAutoResponder": "true" if send_auto_responder else "false"})
        response = await request.post()
        return self._parse_or_invalid(response, Case)

    async def add_reply_from_agent(self, reply: SupportReply) -> None:
        case_uid = quote(reply["Case"]["Uid"], safe="")
        response = await (
            self._request(f"support/cases/{case_uid}/replies")
            .authenticate_as_server()
            .with_body(reply)
            .post()
        )
        self._expect_ok(response)

    async def add_reply_from_client(self, reply: ClientReply) -> CaseHistory:
        """Post the client's reply; the comment travels in the URL path."""
        case_uid = quote(reply["Case"]["Uid"], safe="")
        comment = quote(reply["Comment"], safe="")
        response = await (
            self._request(f"support/cases/{case_uid}/clientresponse/{comment}")
            .authenticate_as_server()
            .post()
        )
        return self._parse(response, CaseHistory)


__all__ = ["Cases"]
