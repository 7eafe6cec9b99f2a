"""Request bodies accepted by resource methods.

Keys are sent to the API as-is, so they use Outseta's PascalCase names.
Only the keys each endpoint requires are declared required; any other
entity field may be included.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, TypedDict

from . import enums


class UidRef(TypedDict):
    """Reference to an existing entity by uid."""

    Uid: str


class EmailRef(TypedDict):
    Email: str


# Billing


class _SubscriptionAddRequired(TypedDict):
    Account: UidRef
    Plan: UidRef
    BillingRenewalTerm: enums.BillingRenewalTerm | int


class SubscriptionAdd(_SubscriptionAddRequired, total=False):
    Quantity: int
    StartDate: datetime
    SubscriptionAddOns: list[dict[str, Any]]


class _SubscriptionUpdateRequired(TypedDict):
    Uid: str
    SubscriptionAddOns: list[dict[str, Any]]


class SubscriptionUpdate(_SubscriptionUpdateRequired, total=False):
    Account: UidRef
    Plan: UidRef
    BillingRenewalTerm: enums.BillingRenewalTerm | int
    Quantity: int
    StartDate: datetime


class _SubscriptionUpgradeRequiredRequired(TypedDict):
    Uid: str
    IsPlanUpgradeRequired: bool


class SubscriptionUpgradeRequired(_SubscriptionUpgradeRequiredRequired, total=False):
    PlanUpgradeRequiredMessage: str


class _InvoiceLineItemAddRequired(TypedDict):
    Amount: float
    Description: str


class InvoiceLineItemAdd(_InvoiceLineItemAddRequired, total=False):
    Quantity: float
    Rate: float
    UnitOfMeasure: str


class _InvoiceAddRequired(TypedDict):
    Subscription: UidRef
    InvoiceDate: datetime
    InvoiceLineItems: list[InvoiceLineItemAdd]


class InvoiceAdd(_InvoiceAddRequired, total=False):
    Number: int


class UsageAdd(TypedDict):
    Amount: float
    SubscriptionAddOn: UidRef
    UsageDate: datetime


# CRM


class _AccountAddRequired(TypedDict):
    Name: str
    AccountStage: enums.AccountStage | int


class AccountAdd(_AccountAddRequired, total=False):
    PersonAccount: list[dict[str, Any]]
    BillingAddress: dict[str, Any]
    MailingAddress: dict[str, Any]
    Subscriptions: list[dict[str, Any]]


class _AccountUpdateRequired(TypedDict):
    Uid: str


class AccountUpdate(_AccountUpdateRequired, total=False):
    Name: str
    AccountStage: enums.AccountStage | int
    BillingAddress: dict[str, Any]
    MailingAddress: dict[str, Any]


class _AccountCancellationRequired(TypedDict):
    Account: UidRef


class AccountCancellation(_AccountCancellationRequired, total=False):
    CancelationReason: str
    Comment: str


class _ActivityAddRequired(TypedDict):
    Title: str
    Description: str
    EntityType: enums.EntityType | int
    EntityUid: str


class ActivityAdd(_ActivityAddRequired, total=False):
    ActivityData: str
    ActivityDateTime: datetime


class _DealAddRequired(TypedDict):
    Name: str
    DealPipelineStage: UidRef


class DealAdd(_DealAddRequired, total=False):
    Amount: float
    DueDate: datetime
    Weight: int
    Account: UidRef
    DealPeople: list[dict[str, Any]]


class _DealUpdateRequired(TypedDict):
    Uid: str


class DealUpdate(_DealUpdateRequired, total=False):
    Name: str
    Amount: float
    DueDate: datetime
    Weight: int
    DealPipelineStage: UidRef


class _PersonAddRequired(TypedDict):
    Email: str


class PersonAdd(_PersonAddRequired, total=False):
    FirstName: str
    LastName: str
    PhoneMobile: str
    PhoneWork: str
    Title: str
    MailingAddress: dict[str, Any]
    PersonAccount: list[dict[str, Any]]


class _PersonUpdateRequired(TypedDict):
    Uid: str


class PersonUpdate(_PersonUpdateRequired, total=False):
    Email: str
    FirstName: str
    LastName: str
    PhoneMobile: str
    PhoneWork: str
    Title: str
    MailingAddress: dict[str, Any]


# Marketing


class _EmailListSubscriptionAddRequired(TypedDict):
    EmailList: UidRef
    Person: UidRef | EmailRef


class EmailListSubscriptionAdd(_EmailListSubscriptionAddRequired, total=False):
    SendWelcomeEmail: bool


class EmailListSubscriptionDelete(TypedDict):
    EmailList: UidRef
    Person: UidRef


# Support


class _CaseAddRequired(TypedDict):
    FromPerson: UidRef | EmailRef
    Subject: str
    Body: str
    Source: enums.CaseSource | int


class CaseAdd(_CaseAddRequired, total=False):
    AssignedToPersonClientIdentifier: str


class SupportReply(TypedDict):
    AgentName: str
    Case: UidRef
    Comment: str


class ClientReply(TypedDict):
    Case: UidRef
    Comment: str


# User


class _ProfileUpdateRequired(TypedDict):
    Uid: str


class ProfileUpdate(_ProfileUpdateRequired, total=False):
    Email: str
    FirstName: str
    LastName: str
    PhoneMobile: str
    PhoneWork: str
    Title: str
    MailingAddress: dict[str, Any]


__all__ = [
    "UidRef",
    "EmailRef",
    "SubscriptionAdd",
    "SubscriptionUpdate",
    "SubscriptionUpgradeRequired",
    "InvoiceLineItemAdd",
    "InvoiceAdd",
    "UsageAdd",
    "AccountAdd",
    "AccountUpdate",
    "AccountCancellation",
    "ActivityAdd",
    "DealAdd",
    "DealUpdate",
    "PersonAdd",
    "PersonUpdate",
    "EmailListSubscriptionAdd",
    "EmailListSubscriptionDelete",
    "CaseAdd",
    "SupportReply",
    "ClientReply",
    "ProfileUpdate",
]
