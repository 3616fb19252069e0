"""
Data models for bitFlyer client.

This package contains all data structures used throughout the bitFlyer client,
following the state-first principle with immutable data structures.
"""

from .config import ConnectionConfig
from .orders import Order, OrderSide, ChildOrderType
from .account import Balance, AssetBalance
from .market import AskBid, OrderBook, Ticker

__all__ = [
    # Configuration
    "ConnectionConfig",
    # Orders
    "Order",
    "OrderSide",
    "ChildOrderType",
    # Account
    "Balance",
    "AssetBalance",
    # Market
    "AskBid",
    "OrderBook",
    "Ticker",
]
