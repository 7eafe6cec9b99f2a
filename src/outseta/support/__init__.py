"""Support namespace: cases."""

from __future__ import annotations

from .._http import ClientContext
from .cases import Cases


class Support:
    def __init__(self, context: ClientContext) -> None:
        self.cases = Cases(context)


__all__ = ["Support", "Cases"]
