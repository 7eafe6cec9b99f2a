"""Typed models for Outseta API requests and responses."""

from .entities import (
    Account,
    Activity,
    AddOn,
    Address,
    Case,
    CaseHistory,
    ChargeSummary,
    Deal,
    DealPerson,
    DealPipeline,
    DealPipelineStage,
    EmailList,
    EmailListPerson,
    Invoice,
    InvoiceDisplayItem,
    InvoiceLineItem,
    Person,
    PersonAccount,
    Plan,
    PlanAddOn,
    PlanFamily,
    Subscription,
    SubscriptionAddOn,
    Transaction,
    UsageItem,
)
from .enums import AccountStage, ActivityType, BillingRenewalTerm, CaseSource, EntityType
from .payloads import (
    AccountAdd,
    AccountCancellation,
    AccountUpdate,
    ActivityAdd,
    CaseAdd,
    ClientReply,
    DealAdd,
    DealUpdate,
    EmailListSubscriptionAdd,
    EmailListSubscriptionDelete,
    EmailRef,
    InvoiceAdd,
    InvoiceLineItemAdd,
    PersonAdd,
    PersonUpdate,
    ProfileUpdate,
    SubscriptionAdd,
    SubscriptionUpdate,
    SubscriptionUpgradeRequired,
    SupportReply,
    UidRef,
    UsageAdd,
)
from .user import LoginResponse
from .wrappers import EntityValidationError, ErrorDetail, ListResponse, Metadata, ValidationError

__all__ = [
    # Entities
    "Account",
    "Activity",
    "AddOn",
    "Address",
    "Case",
    "CaseHistory",
    "ChargeSummary",
    "Deal",
    "DealPerson",
    "DealPipeline",
    "DealPipelineStage",
    "EmailList",
    "EmailListPerson",
    "Invoice",
    "InvoiceDisplayItem",
    "InvoiceLineItem",
    "Person",
    "PersonAccount",
    "Plan",
    "PlanAddOn",
    "PlanFamily",
    "Subscription",
    "SubscriptionAddOn",
    "Transaction",
    "UsageItem",
    # Enums
    "AccountStage",
    "ActivityType",
    "BillingRenewalTerm",
    "CaseSource",
    "EntityType",
    # Request bodies
    "AccountAdd",
    "AccountCancellation",
    "AccountUpdate",
    "ActivityAdd",
    "CaseAdd",
    "ClientReply",
    "DealAdd",
    "DealUpdate",
    "EmailListSubscriptionAdd",
    "EmailListSubscriptionDelete",
    "EmailRef",
    "InvoiceAdd",
    "InvoiceLineItemAdd",
    "PersonAdd",
    "PersonUpdate",
    "ProfileUpdate",
    "SubscriptionAdd",
    "SubscriptionUpdate",
    "SubscriptionUpgradeRequired",
    "SupportReply",
    "UidRef",
    "UsageAdd",
    # Envelopes
    "EntityValidationError",
    "ErrorDetail",
    "ListResponse",
    "Metadata",
    "ValidationError",
    "LoginResponse",
]
