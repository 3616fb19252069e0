"""
bitFlyer Client - Python client for the bitFlyer Lightning API.

This package provides a small asyncio client for bitFlyer's REST API
with HMAC-SHA256 request signing on every call.
"""

from .client import BitflyerClient, create_bitflyer_client
from .auth import ApiCredentials, BitflyerSigner, SignedHeaders, compute_signature
from .http_client import (
    BitflyerError,
    RequestError,
    DecodeError,
    ExchangeError,
)
from .models import (
    # Configuration
    ConnectionConfig,
    # Orders
    Order,
    OrderSide,
    ChildOrderType,
    # Account
    Balance,
    AssetBalance,
    # Market
    AskBid,
    OrderBook,
    Ticker,
)

__all__ = [
    # Main Client
    "BitflyerClient",
    "create_bitflyer_client",
    # Signing
    "ApiCredentials",
    "BitflyerSigner",
    "SignedHeaders",
    "compute_signature",
    # Errors
    "BitflyerError",
    "RequestError",
    "DecodeError",
    "ExchangeError",
    # Models
    "ConnectionConfig",
    "Order",
    "OrderSide",
    "ChildOrderType",
    "Balance",
    "AssetBalance",
    "AskBid",
    "OrderBook",
    "Ticker",
]
