"""Marketing namespace: email list subscriptions."""

from __future__ import annotations

from .._http import ClientContext
from .email_list_subscriptions import EmailListSubscriptions


class Marketing:
    def __init__(self, context: ClientContext) -> None:
        self.email_list_subscriptions = EmailListSubscriptions(context)


__all__ = ["Marketing", "EmailListSubscriptions"]
