"""Response models for Outseta entities.

Dates are left as the ISO-8601 strings the API sends.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field

from ._base import OutsetaModel

# =============================================================================
# Shared
# =============================================================================


class Address(OutsetaModel):
    address_line1: str | None = None
    address_line2: str | None = None
    address_line3: str | None = None
    city: str | None = None
    state: str | None = None
    postal_code: str | None = None
    country: str | None = None
    uid: str | None = None
    created: str | None = None
    updated: str | None = None


# =============================================================================
# CRM
# =============================================================================


class Person(OutsetaModel):
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    profile_image_s3_url: str | None = Field(default=None, alias="ProfileImageS3Url")
    mailing_address: Address | None = None
    password_must_change: bool | None = None
    phone_mobile: str | None = None
    phone_work: str | None = None
    title: str | None = None
    timezone: Any | None = None
    language: Any | None = None
    ip_address: Any | None = Field(default=None, alias="IPAddress")
    referer: Any | None = None
    user_agent: Any | None = None
    last_login_date_time: str | None = None
    oauth_google_profile_id: Any | None = Field(default=None, alias="OAuthGoogleProfileId")
    person_account: list[PersonAccount] | None = None
    deal_people: list[DealPerson] | None = None
    account: Account | None = None
    full_name: str | None = None
    oauth_integration_status: int | None = Field(default=None, alias="OAuthIntegrationStatus")
    user_agent_platform_browser: str | None = None
    uid: str | None = None
    created: str | None = None
    updated: str | None = None


class PersonAccount(OutsetaModel):
    person: Person | None = None
    account: Account | None = None
    is_primary: bool | None = None
    uid: str | None = None
    created: str | None = None
    updated: str | None = None


class Account(OutsetaModel):
    name: str | None = None
    client_identifier: Any | None = None
    is_demo: bool | None = None
    billing_address: Address | None = None
    mailing_address: Address | None = None
    account_stage: int | None = None
    payment_information: Any | None = None
    person_account: list[PersonAccount] | None = None
    subscriptions: list[Subscription] | None = None
    deals: list[Deal] | None = None
    last_login_date_time: str | None = None
    account_specific_page_url1: str | None = None
    account_specific_page_url2: str | None = None
    account_specific_page_url3: str | None = None
    account_specific_page_url4: str | None = None
    account_specific_page_url5: str | None = None
    reward_ful_referral_id: Any | None = None
    has_logged_in: bool | None = None
    account_stage_label: str | None = None
    domain_name: Any | None = None
    latest_subscription: Subscription | None = None
    current_subscription: Subscription | None = None
    primary_contact: Person | None = None
    primary_subscription: Subscription | None = None
    recaptcha_token: Any | None = None
    lifetime_revenue: float | None = None
    uid: str | None = None
    created: str | None = None
    updated: str | None = None


class Activity(OutsetaModel):
    title: str | None = None
    description: str | None = None
    activity_data: str | None = None
    activity_date_time: str | None = None
    activity_type: int | None = None
    entity_type: int | None = None
    entity_uid: str | None = None
    uid: str | None = None
    created: str | None = None
    updated: str | None = None


class DealPipeline(OutsetaModel):
    name: str | None = None
    deal_pipeline_stages: list[DealPipelineStage] | None = None
    uid: str | None = None
    created: str | None = None
    updated: str | None = None


class DealPipelineStage(OutsetaModel):
    weight: int | None = None
    name: str | None = None
    deal_pipeline: DealPipeline | None = None
    deals: list[Deal] | None = None
    uid: str | None = None
    created: str | None = None
    updated: str | None = None


class DealPerson(OutsetaModel):
    person: Person | None = None
    deal: Deal | None = None
    uid: str | None = None
    created: str | None = None
    updated: str | None = None


class Deal(OutsetaModel):
    name: str | None = None
    amount: float | None = None
    due_date: str | None = None
    assigned_to_person_client_identifier: str | None = None
    weight: int | None = None
    deal_pipeline_stage: DealPipelineStage | None = None
    account: Account | None = None
    deal_people: list[DealPerson] | None = None
    contacts: str | None = None
    owner: Person | None = None
    uid: str | None = None
    created: str | None = None
    updated: str | None = None


# =============================================================================
# Billing
# =============================================================================


class PlanAddOn(OutsetaModel):
    plan: Plan | None = None
    add_on: AddOn | None = None
    is_user_selectable: bool | None = None
    uid: str | None = None
    created: str | None = None
    updated: str | None = None


class PlanFamily(OutsetaModel):
    name: str | None = None
    is_active: bool | None = None
    plans: list[Plan] | None = None
    uid: str | None = None
    created: str | None = None
    updated: str | None = None


class Plan(OutsetaModel):
    name: str | None = None
    description: str | None = None
    plan_family: PlanFamily | None = None
    is_quantity_editable: bool | None = None
    minimum_quantity: int | None = None
    monthly_rate: float | None = None
    annual_rate: float | None = None
    setup_fee: float | None = None
    is_taxable: bool | None = None
    is_active: bool | None = None
    trial_period_days: int | None = None
    unit_of_measure: str | None = None
    plan_add_ons: list[PlanAddOn] | None = None
    number_of_subscriptions: int | None = None
    uid: str | None = None
    created: str | None = None
    updated: str | None = None


class AddOn(OutsetaModel):
    name: str | None = None
    billing_add_on_type: int | None = None
    is_quantity_editable: bool | None = None
    minimum_quantity: int | None = None
    monthly_rate: float | None = None
    annual_rate: float | None = None
    setup_fee: float | None = None
    unit_of_measure: str | None = None
    is_taxable: bool | None = None
    is_billed_during_trial: bool | None = None
    plan_add_ons: list[PlanAddOn] | None = None
    uid: str | None = None
    created: str | None = None
    updated: str | None = None


class SubscriptionAddOn(OutsetaModel):
    billing_renewal_term: int | None = None
    subscription: Subscription | None = None
    add_on: AddOn | None = None
    quantity: Any | None = None
    start_date: str | None = None
    end_date: str | None = None
    renewal_date: str | None = None
    new_required_quantity: Any | None = None
    uid: str | None = None
    created: str | None = None
    updated: str | None = None


class Subscription(OutsetaModel):
    plan: Plan | None = None
    billing_renewal_term: int | None = None
    account: Account | None = None
    subscription_add_ons: list[SubscriptionAddOn] | None = None
    quantity: Any | None = None
    start_date: str | None = None
    end_date: str | None = None
    renewal_date: str | None = None
    new_required_quantity: Any | None = None
    is_plan_upgrade_required: bool | None = None
    plan_upgrade_required_message: str | None = None
    discount_coupon_subscriptions: list[Any] | None = None
    uid: str | None = None
    created: str | None = None
    updated: str | None = None


class InvoiceDisplayItem(OutsetaModel):
    date: str | None = None
    type: str | None = None
    description: str | None = None
    amount: float | None = None
    tax: float | None = None
    total: float | None = None


class ChargeSummary(OutsetaModel):
    number: int | None = None
    invoice_date: str | None = None
    subtotal: float | None = None
    tax: float | None = None
    paid: float | None = None
    invoice_display_items: list[InvoiceDisplayItem] | None = None
    total: float | None = None
    balance: float | None = None


class InvoiceLineItem(OutsetaModel):
    start_date: str | None = None
    end_date: str | None = None
    description: str | None = None
    unit_of_measure: str | None = None
    quantity: float | None = None
    rate: float | None = None
    amount: float | None = None
    tax: float | None = None
    invoice: Invoice | None = None
    line_item_type: int | None = None
    line_item_entity_uid: str | None = None
    uid: str | None = None
    created: str | None = None
    updated: str | None = None


class Invoice(OutsetaModel):
    invoice_date: str | None = None
    number: int | None = None
    billing_invoice_status: int | None = None
    subscription: Subscription | None = None
    amount: float | None = None
    amount_outstanding: float | None = None
    invoice_line_items: list[InvoiceLineItem] | None = None
    is_user_generated: bool | None = None
    uid: str | None = None
    created: str | None = None
    updated: str | None = None


class Transaction(OutsetaModel):
    transaction_date: str | None = None
    billing_transaction_type: int | None = None
    account: Account | None = None
    invoice: Invoice | None = None
    amount: float | None = None
    is_electronic_transaction: bool | None = None
    uid: str | None = None
    created: str | None = None
    updated: str | None = None


class UsageItem(OutsetaModel):
    usage_date: str | None = None
    invoice: Invoice | None = None
    subscription_add_on: SubscriptionAddOn | None = None
    amount: float | None = None
    uid: str | None = None
    created: str | None = None
    updated: str | None = None


# =============================================================================
# Marketing
# =============================================================================


class EmailList(OutsetaModel):
    name: str | None = None
    welcome_subject: str | None = None
    welcome_body: str | None = None
    welcome_from_name: str | None = None
    welcome_from_email: str | None = None
    email_list_person: list[EmailListPerson] | None = None
    count_subscriptions_active: int | None = None
    count_subscriptions_bounce: int | None = None
    count_subscriptions_spam: int | None = None
    count_subscriptions_unsubscribed: int | None = None
    uid: str | None = None
    created: str | None = None
    updated: str | None = None


class EmailListPerson(OutsetaModel):
    email_list: EmailList | None = None
    person: Person | None = None
    email_list_subscriber_status: int | None = None
    subscribed_date: str | None = None
    confirmed_date: str | None = None
    unsubscribed_date: str | None = None
    cleaned_date: str | None = None
    welcome_email_deliver_date_time: str | None = None
    welcome_email_open_date_time: str | None = None
    unsubscribe_reason: str | None = None
    unsubscribe_reason_other: str | None = None
    recaptcha_token: str | None = None
    recaptcha_site_key: str | None = None
    send_welcome_email: bool | None = None
    source: str | None = None
    uid: str | None = None
    created: str | None = None
    updated: str | None = None


# =============================================================================
# Support
# =============================================================================


class CaseHistory(OutsetaModel):
    history_date_time: str | None = None
    case: Case | None = None
    agent_name: str | None = None
    comment: str | None = None
    type: int | None = None
    seen_date_time: str | None = None
    click_date_time: str | None = None
    person_email: Any | None = None
    new_uvi: Any | None = None
    uid: str | None = None
    created: str | None = None
    updated: str | None = None


class Case(OutsetaModel):
    submitted_date_time: str | None = None
    from_person: Person | None = None
    assigned_to_person_client_identifier: str | None = None
    subject: str | None = None
    body: str | None = None
    user_agent: str | None = None
    status: int | None = None
    source: int | None = None
    case_histories: list[CaseHistory] | None = None
    is_online: bool | None = None
    last_case_history: CaseHistory | None = None
    participants: str | None = None
    recaptcha_token: str | None = None
    uid: str | None = None
    created: str | None = None
    updated: str | None = None


for _model in (
    Person,
    PersonAccount,
    Account,
    DealPipeline,
    DealPipelineStage,
    DealPerson,
    Deal,
    PlanAddOn,
    PlanFamily,
    Plan,
    AddOn,
    SubscriptionAddOn,
    Subscription,
    InvoiceLineItem,
    Invoice,
    Transaction,
    UsageItem,
    EmailList,
    EmailListPerson,
    CaseHistory,
    Case,
):
    _model.model_rebuild()


__all__ = [
    "Address",
    "Person",
    "PersonAccount",
    "Account",
    "Activity",
    "DealPipeline",
    "DealPipelineStage",
    "DealPerson",
    "Deal",
    "PlanAddOn",
    "PlanFamily",
    "Plan",
    "AddOn",
    "SubscriptionAddOn",
    "Subscription",
    "InvoiceDisplayItem",
    "ChargeSummary",
    "InvoiceLineItem",
    "Invoice",
    "Transaction",
    "UsageItem",
    "EmailList",
    "EmailListPerson",
    "CaseHistory",
    "Case",
]
