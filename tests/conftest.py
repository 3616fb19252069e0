# -*- coding: utf-8 -*-
"""
Shared fixtures and utilities for testing bitFlyer client.
"""

import json
import pytest
import aiohttp
from decimal import Decimal
from unittest.mock import Mock, AsyncMock, MagicMock
from typing import Dict, Any, List

from bitflyer_client import create_bitflyer_client
from bitflyer_client.models import ConnectionConfig, Order


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests (deselect with '-m \"not integration\"')"
    )


def pytest_collection_modifyitems(config, items):
    """Automatically skip integration tests if not explicitly requested."""
    if config.getoption("-m") and "integration" in config.getoption("-m"):
        return

    skip_integration = pytest.mark.skip(reason="Integration tests skipped by default. Run with -m integration to enable.")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)


# Mock data fixtures
@pytest.fixture
def order_book_response_data() -> Dict[str, Any]:
    """Mock getboard response data."""
    return {
        "mid_price": 33320,
        "bids": [
            {"price": 30000, "size": 0.1},
            {"price": 25570, "size": 3},
            {"price": 28000, "size": 0.5},
        ],
        "asks": [
            {"price": 36640, "size": 5},
            {"price": 36700, "size": 1.2},
        ],
    }


@pytest.fixture
def ticker_response_data() -> Dict[str, Any]:
    """Mock getticker response data."""
    return {
        "product_code": "BTC_JPY",
        "timestamp": "2015-07-08T02:50:59.97",
        "tick_id": 3579,
        "best_bid": 30000,
        "best_ask": 36640,
        "best_bid_size": 0.1,
        "best_ask_size": 5,
        "total_bid_depth": 15.13,
        "total_ask_depth": 20,
        "ltp": 31690,
        "volume": 16819.26,
        "volume_by_product": 6819.26,
    }


@pytest.fixture
def balance_response_data() -> List[Dict[str, Any]]:
    """Mock getbalance response data."""
    return [
        {"currency_code": "JPY", "amount": 1024078, "available": 508000},
        {"currency_code": "BTC", "amount": 10.24, "available": 4.12},
        {"currency_code": "ETH", "amount": 20.48, "available": 16.38},
    ]


@pytest.fixture
def order_response_data() -> Dict[str, Any]:
    """Mock sendchildorder success response data."""
    return {"child_order_acceptance_id": "JRF20150707-050237-639234"}


@pytest.fixture
def sample_order() -> Order:
    """Limit order with expiry and time-in-force left unset."""
    return Order(
        product_code="BTC_JPY",
        child_order_type="LIMIT",
        side="BUY",
        price=Decimal("30000"),
        size=Decimal("0.1"),
    )


@pytest.fixture
def connection_config() -> ConnectionConfig:
    """Connection config with test credentials."""
    return ConnectionConfig(api_key="test_key", api_secret="test_secret")


@pytest.fixture
def mock_client_session():
    """Mock aiohttp ClientSession."""
    session = Mock(spec=aiohttp.ClientSession)
    session.request = Mock()
    session.close = AsyncMock()
    session.closed = False
    return session


@pytest.fixture
def respond(mock_client_session):
    """Make the mock session answer every request with the given payload."""
    def _respond(payload: Any = None, status: int = 200, raw: bytes = None):
        response = Mock()
        response.status = status
        if raw is None:
            raw = json.dumps(payload).encode("utf-8")
        response.read = AsyncMock(return_value=raw)

        request_context = MagicMock()
        request_context.__aenter__ = AsyncMock(return_value=response)
        request_context.__aexit__ = AsyncMock(return_value=False)
        mock_client_session.request.return_value = request_context
        return response

    return _respond


@pytest.fixture
def client(mock_client_session):
    """bitFlyer client wired to the mock session."""
    return create_bitflyer_client(
        api_key="test_key",
        api_secret="test_secret",
        session=mock_client_session,
    )
