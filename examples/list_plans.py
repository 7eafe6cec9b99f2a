#!/usr/bin/env python3
"""
List the plans offered on an Outseta account.

Plans are public, so only the subdomain is needed.

Requirements:
- OUTSETA_SUBDOMAIN environment variable set (or in .env)

Usage:
    python examples/list_plans.py
"""

import asyncio
import os

from dotenv import load_dotenv

from outseta import OutsetaClient

load_dotenv()


async def main() -> None:
    print("💳 Outseta Billing - Plans")
    print("=" * 50)

    if not os.getenv("OUTSETA_SUBDOMAIN"):
        print("❌ Error: OUTSETA_SUBDOMAIN environment variable is required")
        return

    async with OutsetaClient() as client:
        families = await client.billing.plan_families.get_all()
        plans = await client.billing.plans.get_all()

    print(f"📦 {families.metadata.total} plan families, {plans.metadata.total} plans")
    for plan in plans.items:
        family = plan.plan_family.name if plan.plan_family else "-"
        print(f"  • {plan.name} [{family}] monthly={plan.monthly_rate} annual={plan.annual_rate}")


if __name__ == "__main__":
    asyncio.run(main())
