#!/usr/bin/env python3
"""
Example: Place a BUY limit order for BTC_JPY.

This example demonstrates how to:
1. Create an authenticated client from a YAML config file
2. Place a BUY limit order (expiry and time-in-force use the defaults)
3. Handle exchange rejections

Prerequisites:
- Copy config.example.yml to config.yml and fill in credentials
- Install the package in development mode: pip install -e .

Usage:
    python examples/limit_order_example.py
"""

import asyncio
import logging
from decimal import Decimal
from pathlib import Path

from bitflyer_client import (
    BitflyerClient,
    ChildOrderType,
    ExchangeError,
    Order,
    OrderSide,
    RequestError,
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

CONFIG_PATH = Path(__file__).parent.parent / "config.yml"


async def main():
    """Place a far-from-market BUY limit order."""
    order = Order(
        product_code="BTC_JPY",
        child_order_type=ChildOrderType.LIMIT,
        side=OrderSide.BUY,
        price=Decimal("1000000"),
        size=Decimal("0.001"),
    )

    async with BitflyerClient.from_config(CONFIG_PATH) as client:
        try:
            result = await client.new_order(order, timeout=10.0)
        except ExchangeError as e:
            logger.error(f"Order rejected by exchange: {e}")
            return
        except RequestError as e:
            logger.error(f"Could not reach exchange: {e}")
            return

        logger.info(
            f"Order accepted: id={result.child_order_acceptance_id} "
            f"expires_in={result.minute_to_expire}min tif={result.time_in_force}"
        )


if __name__ == "__main__":
    asyncio.run(main())
