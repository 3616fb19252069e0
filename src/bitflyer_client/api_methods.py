"""
API method implementations for bitFlyer client.

Each method builds the request path and body, executes one signed round
trip through HttpClient and decodes the payload into a typed model.
"""

import logging
from typing import Any, Callable, List, Optional, TypeVar

from aiohttp import ClientSession

from .constants import (
    BALANCE_ENDPOINT,
    BOARD_ENDPOINT,
    SEND_CHILD_ORDER_ENDPOINT,
    TICKER_ENDPOINT,
)
from .http_client import DecodeError, HttpClient
from .models.account import AssetBalance, Balance
from .models.market import OrderBook, Ticker
from .models.orders import Order
from .utils import dumps_json

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _decode(payload: Any, parser: Callable[[Any], T], what: str) -> T:
    """Run a model parser, turning shape mismatches into DecodeError."""
    try:
        return parser(payload)
    except KeyError as e:
        raise DecodeError(f"Invalid {what} payload: missing field {e}", response_data=payload) from e
    except (TypeError, ValueError) as e:
        raise DecodeError(f"Invalid {what} payload: {e}", response_data=payload) from e


def _parse_balances(payload: Any) -> AssetBalance:
    if not isinstance(payload, list):
        raise TypeError(f"Expected a JSON array, got {type(payload).__name__}")
    return [Balance.from_dict(item) for item in payload]


def serialize_order(order: Order) -> bytes:
    """Serialize an order into the compact JSON body that is signed and sent."""
    return dumps_json(order.to_request_dict()).encode("utf-8")


class APIMethods:
    """Container for all API method implementations."""

    def __init__(self, http_client: HttpClient):
        """Initialize API methods with HTTP client."""
        self._http_client = http_client

    async def get_order_book(
        self, session: ClientSession, timeout: Optional[float] = None
    ) -> OrderBook:
        """Get order book."""
        response = await self._http_client.request(
            session, "GET", BOARD_ENDPOINT, timeout=timeout
        )
        return _decode(response, OrderBook.from_dict, "order book")

    async def get_balance(
        self, session: ClientSession, timeout: Optional[float] = None
    ) -> List[Balance]:
        """Get account asset balances."""
        response = await self._http_client.request(
            session, "GET", BALANCE_ENDPOINT, timeout=timeout
        )
        return _decode(response, _parse_balances, "balance")

    async def get_ticker(
        self, session: ClientSession, timeout: Optional[float] = None
    ) -> Ticker:
        """Get ticker."""
        response = await self._http_client.request(
            session, "GET", TICKER_ENDPOINT, timeout=timeout
        )
        return _decode(response, Ticker.from_dict, "ticker")

    async def new_order(
        self,
        session: ClientSession,
        order: Order,
        timeout: Optional[float] = None,
    ) -> Order:
        """
        Send a new child order.

        Expiry and time-in-force defaults are applied only where the caller
        left them unset. The decoded response is merged onto the submitted
        order.

        Raises:
            ExchangeError: If the exchange reports an error message; the
                check is made by HttpClient for every payload
        """
        order = order.with_defaults()
        body = serialize_order(order)

        response = await self._http_client.request(
            session, "POST", SEND_CHILD_ORDER_ENDPOINT, body=body, timeout=timeout
        )
        result = _decode(response, order.merge_response, "order")

        logger.debug(f"Child order accepted: {result.child_order_acceptance_id}")
        return result
