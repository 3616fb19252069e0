"""
Account-related models for bitFlyer client.

Immutable data structures for account balances.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, List

from ..utils import require_object, to_decimal, to_str


@dataclass(frozen=True)
class Balance:
    """Balance of a single currency."""
    currency_code: str
    amount: Decimal
    available: Decimal

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Balance":
        data = require_object(data)
        return cls(
            currency_code=to_str(data["currency_code"]),
            amount=to_decimal(data["amount"]),
            available=to_decimal(data["available"]),
        )


# One record per currency, in the order returned by the exchange
AssetBalance = List[Balance]
