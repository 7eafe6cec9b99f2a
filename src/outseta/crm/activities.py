"""Activity timeline entries on accounts, people and deals."""

from __future__ import annotations

from .._core import BaseResource, _paging_params
from ..models import Activity, ActivityAdd, ActivityType, EntityType, ListResponse, ValidationError

DEFAULT_FIELDS = "*"


class Activities(BaseResource):
    async def get_all(
        self,
        *,
        limit: int | None = None,
        offset: int | None = None,
        fields: str | None = None,
        activity_type: ActivityType | int | None = None,
        entity_type: EntityType | int | None = None,
        entity_uid: str | None = None,
    ) -> ListResponse[Activity]:
        request = (
            self._request("activities")
            .with_params(self._fields(fields, DEFAULT_FIELDS))
            .authenticate_as_server()
        )
        request.with_params(_paging_params(limit, offset))
        if activity_type:
            request.with_params({"ActivityType": str(int(activity_type))})
        if entity_type:
            request.with_params({"EntityType": str(int(entity_type))})
        if entity_uid:
            request.with_params({"EntityUid": entity_uid})
        response = await request.get()
        return self._parse(response, ListResponse[Activity])

    async def add(
        self, activity: ActivityAdd, *, fields: str | None = None
    ) -> Activity | ValidationError:
        """Add a custom activity to an entity's timeline."""
        response = await (
            self._request("activities/customactivity")
            .authenticate_as_server()
            .with_params(self._fields(fields, DEFAULT_FIELDS))
            .with_body(activity)
            .post()
        )
        return self._parse_or_invalid(response, Activity)


__all__ = ["Activities"]
