#!/usr/bin/env python3
"""
Example: Fetch and display account balances.

Prerequisites:
- Set BITFLYER_KEY and BITFLYER_SECRET environment variables (or a .env file)
- Install the package in development mode: pip install -e .

Usage:
    python examples/account_info.py
"""

import asyncio
import logging

from bitflyer_client import BitflyerClient, BitflyerError

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


async def main():
    async with BitflyerClient.from_env() as client:
        try:
            balances = await client.get_balance()
        except BitflyerError as e:
            logger.error(f"Failed to fetch balances: {e}")
            return

        print("\n💰 ACCOUNT BALANCES")
        print("-" * 50)
        for balance in balances:
            print(
                f"   {balance.currency_code:<6} "
                f"amount={balance.amount:>16,.8f}  available={balance.available:>16,.8f}"
            )


if __name__ == "__main__":
    asyncio.run(main())
