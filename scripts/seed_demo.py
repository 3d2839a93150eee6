#!/usr/bin/env python3
"""
One-off script to load the demo farm into the database.

Usage (inside the API container):
    python scripts/seed_demo.py

Log in afterwards as demo / password123. Running it twice is harmless.
"""
import asyncio
import logging
import sys

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s: %(message)s",
    stream=sys.stdout,
)

from farmstead.db.session import AsyncSessionLocal
from farmstead.services.demo_data import seed_demo_data
from farmstead.storage import DatabaseStorage


async def main() -> None:
    print("Seeding demo farm...\n")
    async with AsyncSessionLocal() as db:
        user = await seed_demo_data(DatabaseStorage(db))
    print(f"\nDemo user ready (id={user.id}).")


if __name__ == "__main__":
    asyncio.run(main())
