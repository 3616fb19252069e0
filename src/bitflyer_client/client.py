"""
bitFlyer Client - Main orchestration module.

This module provides the BitflyerClient class that coordinates
all client functionality:
- Data models are immutable structures in models/
- Signing is handled by auth.py
- HTTP operations are handled by http_client.py
- Session management is handled by session_manager.py
- API methods are implemented in api_methods.py
"""

import os
import logging
from pathlib import Path
from typing import Optional, Union

import aiohttp
import yaml
from dotenv import load_dotenv

from .api_methods import APIMethods
from .constants import DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from .http_client import HttpClient
from .models import AssetBalance, ConnectionConfig, Order, OrderBook, Ticker
from .session_manager import SessionManager

load_dotenv()
logger = logging.getLogger(__name__)


class BitflyerClient:
    """
    Main bitFlyer Lightning client.

    Every public method performs exactly one signed HTTP round trip and
    returns an immutable result. Calls may be issued concurrently; they
    share only the credentials and the HTTP session.
    """

    def __init__(
        self,
        config: ConnectionConfig,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        """
        Initialize bitFlyer client with configuration.

        Args:
            config: Connection configuration with credentials
            session: Optional externally owned aiohttp session
        """
        self._config = config
        self._session_manager = SessionManager(config, session)
        self._http_client = HttpClient(config)
        self._api_methods = APIMethods(self._http_client)
        self._closed = False

    @classmethod
    def from_env(cls) -> "BitflyerClient":
        """Create client from environment variables.

        Reads BITFLYER_KEY and BITFLYER_SECRET, plus the optional
        BITFLYER_TIMEOUT and BITFLYER_BASE_URL.

        Raises:
            ValueError: If the key or secret is missing
        """
        config = ConnectionConfig(
            api_key=os.getenv("BITFLYER_KEY", ""),
            api_secret=os.getenv("BITFLYER_SECRET", ""),
            base_url=os.getenv("BITFLYER_BASE_URL", DEFAULT_BASE_URL),
            timeout=float(os.getenv("BITFLYER_TIMEOUT", str(DEFAULT_TIMEOUT))),
        )
        return cls(config)

    @classmethod
    def from_config(cls, config_path: Union[str, Path]) -> "BitflyerClient":
        """Create client from the ``bitflyer`` section of a YAML config file.

        Raises:
            FileNotFoundError: If the config file does not exist
            ValueError: If the ``bitflyer`` section is missing
        """
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path, 'r') as f:
            config = yaml.safe_load(f) or {}

        section = config.get("bitflyer")
        if not isinstance(section, dict):
            raise ValueError(f"Missing 'bitflyer' section in {config_path}")

        return cls(ConnectionConfig(
            api_key=str(section.get("api_key", "")),
            api_secret=str(section.get("api_secret", "")),
            base_url=section.get("base_url", DEFAULT_BASE_URL),
            timeout=float(section.get("timeout", DEFAULT_TIMEOUT)),
        ))

    # Market methods
    async def get_order_book(self, timeout: Optional[float] = None) -> OrderBook:
        """Get order book."""
        return await self._execute(self._api_methods.get_order_book, timeout=timeout)

    async def get_ticker(self, timeout: Optional[float] = None) -> Ticker:
        """Get ticker."""
        return await self._execute(self._api_methods.get_ticker, timeout=timeout)

    # Account methods
    async def get_balance(self, timeout: Optional[float] = None) -> AssetBalance:
        """Get account asset balances."""
        return await self._execute(self._api_methods.get_balance, timeout=timeout)

    # Order methods
    async def new_order(self, order: Order, timeout: Optional[float] = None) -> Order:
        """
        Send a new child order.

        If minute_to_expire is not positive it defaults to 525600 (one year);
        an empty time_in_force defaults to "GTC".

        Returns:
            The submitted order with the exchange response merged onto it

        Raises:
            RequestError: On transport failure
            DecodeError: On malformed response
            ExchangeError: If the exchange rejects the order
        """
        return await self._execute(self._api_methods.new_order, order, timeout=timeout)

    async def close(self) -> None:
        """Close client and cleanup resources."""
        if not self._closed:
            await self._session_manager.close_session()
            self._closed = True
            logger.info("bitFlyer client closed")

    @property
    def closed(self) -> bool:
        return self._closed

    async def _execute(self, api_method, *args, **kwargs):
        """Execute API method on the shared session."""
        if self._closed:
            raise RuntimeError("Client is closed")

        session = await self._session_manager.create_session()
        return await api_method(session, *args, **kwargs)

    # Context manager support
    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()


def create_bitflyer_client(
    api_key: str,
    api_secret: str,
    base_url: str = DEFAULT_BASE_URL,
    timeout: float = DEFAULT_TIMEOUT,
    session: Optional[aiohttp.ClientSession] = None,
) -> BitflyerClient:
    """
    Factory function to create bitFlyer client with common configuration.

    Args:
        api_key: API key for authentication
        api_secret: API secret for authentication
        base_url: Base URL for API endpoints
        timeout: Default request timeout in seconds
        session: Optional externally owned aiohttp session

    Returns:
        Configured BitflyerClient instance
    """
    config = ConnectionConfig(
        api_key=api_key,
        api_secret=api_secret,
        base_url=base_url,
        timeout=timeout,
    )

    return BitflyerClient(config, session=session)
