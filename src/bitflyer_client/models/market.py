"""
Market-related models for bitFlyer client.

Immutable data structures for order book and ticker snapshots.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, Tuple

from ..utils import require_object, to_decimal, to_int, to_str


@dataclass(frozen=True)
class AskBid:
    """Single order book level."""
    price: Decimal
    size: Decimal

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AskBid":
        data = require_object(data)
        return cls(price=to_decimal(data["price"]), size=to_decimal(data["size"]))


@dataclass(frozen=True)
class OrderBook:
    """
    Market depth snapshot.

    Bids and asks keep the order the exchange sent them in.
    """
    mid_price: Decimal
    bids: Tuple[AskBid, ...]
    asks: Tuple[AskBid, ...]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "OrderBook":
        """Create OrderBook from a decoded getboard payload."""
        data = require_object(data)
        bids = data["bids"]
        asks = data["asks"]
        if not isinstance(bids, list) or not isinstance(asks, list):
            raise TypeError("bids and asks must be JSON arrays")

        return cls(
            mid_price=to_decimal(data["mid_price"]),
            bids=tuple(AskBid.from_dict(level) for level in bids),
            asks=tuple(AskBid.from_dict(level) for level in asks),
        )


@dataclass(frozen=True)
class Ticker:
    """Ticker data structure."""
    product_code: str
    timestamp: str
    tick_id: int
    best_bid: Decimal
    best_ask: Decimal
    best_bid_size: Decimal
    best_ask_size: Decimal
    total_bid_depth: Decimal
    total_ask_depth: Decimal
    ltp: Decimal  # last traded price
    volume: Decimal
    volume_by_product: Decimal

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Ticker":
        """Create Ticker from a decoded getticker payload."""
        data = require_object(data)
        return cls(
            product_code=to_str(data["product_code"]),
            timestamp=to_str(data["timestamp"]),
            tick_id=to_int(data["tick_id"]),
            best_bid=to_decimal(data["best_bid"]),
            best_ask=to_decimal(data["best_ask"]),
            best_bid_size=to_decimal(data["best_bid_size"]),
            best_ask_size=to_decimal(data["best_ask_size"]),
            total_bid_depth=to_decimal(data["total_bid_depth"]),
            total_ask_depth=to_decimal(data["total_ask_depth"]),
            ltp=to_decimal(data["ltp"]),
            volume=to_decimal(data["volume"]),
            volume_by_product=to_decimal(data["volume_by_product"]),
        )
