"""
Order Book and Ticker Example

This example demonstrates:
- Fetching the BTC_JPY order book
- Displaying best bid/ask prices and sizes
- Fetching the ticker snapshot

The board and ticker endpoints are public, but the client signs every
request, so any non-empty key/secret pair works here.
"""

import asyncio
import sys
from pathlib import Path
from decimal import Decimal

# Add parent directory to path to import bitflyer_client
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from bitflyer_client import create_bitflyer_client, BitflyerError


def format_level(price: Decimal, size: Decimal) -> str:
    """Format a single order book level for display."""
    return f"   Price: ¥{price:>14,.0f}  |  Size: {size:>10,.4f}"


async def display_order_book(depth: int = 5):
    """Fetch and display the order book."""
    print("\n📊 Fetching Order Book...\n")

    async with create_bitflyer_client("public", "public") as client:
        try:
            order_book = await client.get_order_book()
        except BitflyerError as e:
            print(f"❌ Failed to fetch order book: {e}")
            return

        if not order_book.bids or not order_book.asks:
            print("⚠️  Order book is empty")
            return

        # Levels are shown in the order the exchange returned them
        print("=" * 70)
        print(f"   Mid Price: ¥{order_book.mid_price:,.0f}")
        print("=" * 70)

        print(f"\n🔴 FIRST {min(depth, len(order_book.asks))} ASKS:")
        for ask in order_book.asks[:depth]:
            print(format_level(ask.price, ask.size))

        print(f"\n🟢 FIRST {min(depth, len(order_book.bids))} BIDS:")
        for bid in order_book.bids[:depth]:
            print(format_level(bid.price, bid.size))

        total_bid_size = sum(bid.size for bid in order_book.bids)
        total_ask_size = sum(ask.size for ask in order_book.asks)
        print(f"\n📊 Total bid size: {total_bid_size:,.4f}  |  Total ask size: {total_ask_size:,.4f}")

        ticker = await client.get_ticker()
        print(f"\n💡 TICKER ({ticker.product_code} @ {ticker.timestamp}):")
        print(f"   Best Bid: ¥{ticker.best_bid:,.0f} ({ticker.best_bid_size})")
        print(f"   Best Ask: ¥{ticker.best_ask:,.0f} ({ticker.best_ask_size})")
        print(f"   LTP:      ¥{ticker.ltp:,.0f}")
        print(f"   Volume:   {ticker.volume:,.2f}")


if __name__ == "__main__":
    asyncio.run(display_order_book())
