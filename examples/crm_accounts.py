#!/usr/bin/env python3
"""
Server-side CRM example: create a person, attach a custom activity, list
subscribing accounts, then clean up.

Requirements:
- OUTSETA_SUBDOMAIN, OUTSETA_API_KEY and OUTSETA_SECRET_KEY set (or in .env)

Usage:
    python examples/crm_accounts.py
"""

import asyncio
import os
import uuid

from dotenv import load_dotenv

from outseta import OutsetaClient, ValidationError
from outseta.models import AccountStage, EntityType

load_dotenv()


async def main() -> None:
    print("👥 Outseta CRM - Accounts and people")
    print("=" * 50)

    if not (os.getenv("OUTSETA_API_KEY") and os.getenv("OUTSETA_SECRET_KEY")):
        print("❌ Error: OUTSETA_API_KEY and OUTSETA_SECRET_KEY are required")
        return

    async with OutsetaClient() as client:
        accounts = await client.crm.accounts.get_all(
            limit=10, account_stage=AccountStage.SUBSCRIBING
        )
        print(f"📋 {accounts.metadata.total} subscribing accounts")
        for account in accounts.items:
            print(f"  • {account.name} ({account.uid})")

        email = f"example-{uuid.uuid4().hex[:8]}@example.com"
        person = await client.crm.people.add({"Email": email, "FirstName": "Example"})
        if isinstance(person, ValidationError):
            print(f"❌ Could not create person: {person.error_message}")
            for entity in person.entity_validation_errors:
                for detail in entity.validation_errors:
                    print(f"   {detail.property_name}: {detail.error_message}")
            return
        assert person.uid is not None
        print(f"✅ Created person {email} ({person.uid})")

        activity = await client.crm.activities.add(
            {
                "Title": "Example activity",
                "Description": "Created by examples/crm_accounts.py",
                "EntityType": EntityType.PERSON,
                "EntityUid": person.uid,
            }
        )
        if not isinstance(activity, ValidationError):
            print(f"📝 Added activity {activity.uid}")

        await client.crm.people.delete(person.uid)
        print("🗑️  Deleted person")


if __name__ == "__main__":
    asyncio.run(main())
