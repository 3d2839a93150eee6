#!/usr/bin/env python3
"""
One-off script to re-derive task statuses outside the worker schedule.

Usage (inside the API container):
    python scripts/run_status_refresh.py
"""
import asyncio
import logging
import sys

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s: %(message)s",
    stream=sys.stdout,
)

from farmstead.worker import refresh_task_statuses


async def main() -> None:
    print("Refreshing task statuses...\n")
    changed = await refresh_task_statuses(ctx={})
    print(f"\nDone — {changed} tasks changed.")


if __name__ == "__main__":
    asyncio.run(main())
