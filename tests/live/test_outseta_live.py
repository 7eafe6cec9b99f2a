"""
Live API tests against a real Outseta account.

These tests only read data. They require OUTSETA_SUBDOMAIN, OUTSETA_API_KEY
and OUTSETA_SECRET_KEY, either exported or in a .env file.

Run with: pytest tests/live -v
"""

import os

import pytest
from dotenv import load_dotenv

from outseta import OutsetaClient
from outseta.models import Account, ListResponse, Plan

load_dotenv()


def has_outseta_credentials() -> bool:
    """Check if Outseta API credentials are available."""
    return bool(
        os.getenv("OUTSETA_SUBDOMAIN")
        and os.getenv("OUTSETA_API_KEY")
        and os.getenv("OUTSETA_SECRET_KEY")
    )


requires_outseta_credentials = pytest.mark.skipif(
    not has_outseta_credentials(),
    reason="Requires OUTSETA_SUBDOMAIN, OUTSETA_API_KEY and OUTSETA_SECRET_KEY",
)


@requires_outseta_credentials
@pytest.mark.live
class TestOutsetaLive:
    @pytest.mark.asyncio
    async def test_list_plans(self):
        async with OutsetaClient() as client:
            plans = await client.billing.plans.get_all(limit=5)

        assert isinstance(plans, ListResponse)
        assert plans.metadata.limit == 5
        assert all(isinstance(plan, Plan) for plan in plans.items)

    @pytest.mark.asyncio
    async def test_list_and_fetch_account(self):
        async with OutsetaClient() as client:
            accounts = await client.crm.accounts.get_all(limit=1)
            if not accounts.items:
                pytest.skip("Account has no CRM accounts to fetch")

            uid = accounts.items[0].uid
            assert uid is not None
            account = await client.crm.accounts.get(uid)

        assert isinstance(account, Account)
        assert account.uid == uid

    @pytest.mark.asyncio
    async def test_list_subscriptions_projection(self):
        async with OutsetaClient() as client:
            subscriptions = await client.billing.subscriptions.get_all(limit=3)

        for subscription in subscriptions.items:
            if subscription.plan is not None:
                assert subscription.plan.uid is not None
