from __future__ import annotations

from enum import IntEnum


class AccountStage(IntEnum):
    DEMO = 1
    TRIALING = 2
    SUBSCRIBING = 3
    CANCELLING = 4
    EXPIRED = 5
    TRIAL_EXPIRED = 6
    PAST_DUE = 7


class BillingRenewalTerm(IntEnum):
    MONTHLY = 1
    ANNUALLY = 2


class EntityType(IntEnum):
    ACCOUNT = 1
    PERSON = 2
    DEAL = 3


class ActivityType(IntEnum):
    CUSTOM = 100


class CaseSource(IntEnum):
    WEBSITE = 1
    EMAIL = 2
    FACEBOOK = 3
    TWITTER = 4
    CHAT = 5


__all__ = [
    "AccountStage",
    "BillingRenewalTerm",
    "EntityType",
    "ActivityType",
    "CaseSource",
]
