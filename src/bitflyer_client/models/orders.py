"""
Order-related models for bitFlyer client.

Immutable data structures for child order submission.
"""

from dataclasses import dataclass, replace
from decimal import Decimal
from enum import Enum
from typing import Any, Callable, Dict

from ..constants import DEFAULT_MINUTE_TO_EXPIRE, DEFAULT_TIME_IN_FORCE
from ..utils import require_object, to_decimal, to_int, to_str


class OrderSide(str, Enum):
    """Order side enumeration."""
    BUY = "BUY"
    SELL = "SELL"


class ChildOrderType(str, Enum):
    """Child order type enumeration."""
    LIMIT = "LIMIT"
    MARKET = "MARKET"


# Fields accepted by the sendchildorder endpoint
REQUEST_FIELDS = (
    "product_code",
    "child_order_type",
    "side",
    "price",
    "size",
    "minute_to_expire",
    "time_in_force",
)

_FIELD_PARSERS: Dict[str, Callable[[Any], Any]] = {
    "child_order_acceptance_id": to_str,
    "product_code": to_str,
    "child_order_type": to_str,
    "side": to_str,
    "price": to_decimal,
    "size": to_decimal,
    "minute_to_expire": to_int,
    "time_in_force": to_str,
    "status": to_int,
    "error_message": to_str,
}


@dataclass(frozen=True)
class Order:
    """
    Child order request and response data structure.

    The same record is used for submission and for the exchange's reply:
    the response fields are merged onto the submitted order.

    Attributes:
        product_code: Product to trade (e.g. "BTC_JPY")
        child_order_type: "LIMIT" or "MARKET"
        side: "BUY" or "SELL"
        price: Limit price, coerced to a finite Decimal (ignored by the
            exchange for MARKET orders)
        size: Order quantity, coerced to a finite Decimal
        minute_to_expire: Expiry in minutes, 0 means use the default
        time_in_force: "GTC", "IOC" or "FOK", empty means use the default
        child_order_acceptance_id: Acceptance ID assigned by the exchange
        status: Status code returned by the exchange on failure
        error_message: Error message returned by the exchange on failure
    """
    product_code: str
    child_order_type: str
    side: str
    price: Decimal
    size: Decimal
    minute_to_expire: int = 0
    time_in_force: str = ""
    child_order_acceptance_id: str = ""
    status: int = 0
    error_message: str = ""

    def __post_init__(self):
        # Frozen, so coerce in place; rejects NaN and Infinity
        for name in ("price", "size"):
            object.__setattr__(self, name, to_decimal(getattr(self, name)))

    def with_defaults(self) -> "Order":
        """Return a copy with expiry and time-in-force defaults applied where unset."""
        order = self
        if order.minute_to_expire <= 0:
            order = replace(order, minute_to_expire=DEFAULT_MINUTE_TO_EXPIRE)
        if not order.time_in_force:
            order = replace(order, time_in_force=DEFAULT_TIME_IN_FORCE)
        return order

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary using exchange field names."""
        return {
            "child_order_acceptance_id": self.child_order_acceptance_id,
            "product_code": self.product_code,
            "child_order_type": self.child_order_type,
            "side": self.side,
            "price": self.price,
            "size": self.size,
            "minute_to_expire": self.minute_to_expire,
            "time_in_force": self.time_in_force,
            "status": self.status,
            "error_message": self.error_message,
        }

    def to_request_dict(self) -> Dict[str, Any]:
        """Convert to the request body accepted by sendchildorder."""
        data = self.to_dict()
        return {key: data[key] for key in REQUEST_FIELDS}

    def merge_response(self, data: Dict[str, Any]) -> "Order":
        """
        Overlay fields from a decoded response onto this order.

        Fields missing from the response (or null) keep their submitted values;
        unknown fields are ignored.

        Raises:
            TypeError, ValueError: If a known field has the wrong JSON type
        """
        data = require_object(data)
        updates = {
            name: parse(data[name])
            for name, parse in _FIELD_PARSERS.items()
            if data.get(name) is not None
        }
        return replace(self, **updates)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Order":
        """Create Order from dictionary using exchange field names."""
        data = require_object(data)
        order = cls(
            product_code=to_str(data["product_code"]),
            child_order_type=to_str(data["child_order_type"]),
            side=to_str(data["side"]),
            price=to_decimal(data["price"]),
            size=to_decimal(data["size"]),
        )
        return order.merge_response(data)
