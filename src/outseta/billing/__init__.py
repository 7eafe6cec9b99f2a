"""Billing namespace: plans, subscriptions, invoices, transactions and usage."""

from __future__ import annotations

from .._http import ClientContext
from .invoices import Invoices
from .plan_families import PlanFamilies
from .plans import Plans
from .subscriptions import Subscriptions
from .transactions import Transactions
from .usage import Usage


class Billing:
    def __init__(self, context: ClientContext) -> None:
        self.plans = Plans(context)
        self.plan_families = PlanFamilies(context)
        self.subscriptions = Subscriptions(context)
        self.invoices = Invoices(context)
        self.transactions = Transactions(context)
        self.usage = Usage(context)


__all__ = [
    "Billing",
    "Invoices",
    "PlanFamilies",
    "Plans",
    "Subscriptions",
    "Transactions",
    "Usage",
]
