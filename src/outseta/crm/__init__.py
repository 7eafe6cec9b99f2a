"""CRM namespace: accounts, activities, deals and people."""

from __future__ import annotations

from .._http import ClientContext
from .accounts import Accounts
from .activities import Activities
from .deals import Deals
from .people import People


class Crm:
    def __init__(self, context: ClientContext) -> None:
        self.accounts = Accounts(context)
        self.activities = Activities(context)
        self.deals = Deals(context)
        self.people = People(context)


__all__ = ["Crm", "Accounts", "Activities", "Deals", "People"]
