#!/usr/bin/env python3
"""
Log in as an end user and read their profile.

Requirements:
- OUTSETA_SUBDOMAIN set (or in .env)
- OUTSETA_USERNAME and OUTSETA_PASSWORD for the user to log in as

Usage:
    python examples/user_profile.py
"""

import asyncio
import os

from dotenv import load_dotenv

from outseta import OutsetaClient, OutsetaHTTPError

load_dotenv()


async def main() -> None:
    print("🔐 Outseta User - Login and profile")
    print("=" * 50)

    username = os.getenv("OUTSETA_USERNAME")
    password = os.getenv("OUTSETA_PASSWORD")
    if not (username and password):
        print("❌ Error: OUTSETA_USERNAME and OUTSETA_PASSWORD are required")
        return

    async with OutsetaClient() as client:
        try:
            token = await client.user.login(username, password)
        except OutsetaHTTPError as e:
            print(f"❌ Login failed: {e}")
            return
        print(f"✅ Logged in, token expires in {token.expires_in}s")

        profile = await client.user.profile.get()
        print(f"👤 {profile.full_name} <{profile.email}>")
        if profile.person_account:
            for membership in profile.person_account:
                name = membership.account.name if membership.account else "?"
                primary = " (primary)" if membership.is_primary else ""
                print(f"   member of {name}{primary}")


if __name__ == "__main__":
    asyncio.run(main())
