from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_pascal


class OutsetaModel(BaseModel):
    """Base for API entities.

    Outseta uses PascalCase keys; attributes are snake_case. Every field is
    optional and unknown keys are kept, because the ``fields`` query
    parameter changes which keys the API returns.
    """

    model_config = ConfigDict(
        alias_generator=to_pascal,
        populate_by_name=True,
        extra="allow",
    )
