"""
Session management for bitFlyer client.

Handles connection lifecycle, session creation, and resource cleanup.
The session is shared by every call made through one client and is safe
for concurrent use.
"""

import aiohttp
from typing import Optional

from .models.config import ConnectionConfig


class SessionManager:
    """Manages HTTP session lifecycle for bitFlyer client."""

    def __init__(
        self,
        config: ConnectionConfig,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        """
        Initialize session manager with configuration.

        Args:
            config: Connection configuration
            session: Externally owned session to use instead of creating one.
                It is never closed by this manager.
        """
        self._config = config
        self._session: Optional[aiohttp.ClientSession] = session
        self._owns_session = session is None

    async def create_session(self) -> aiohttp.ClientSession:
        """Create and configure HTTP session."""
        if not self._owns_session:
            return self._session

        if self._session is not None and not self._session.closed:
            return self._session

        # Default pool size: requests are signed before a connection is
        # acquired, so a tight per-host cap would age their timestamps
        connector = aiohttp.TCPConnector(
            ttl_dns_cache=300,
            use_dns_cache=True,
        )

        timeout = aiohttp.ClientTimeout(total=self._config.timeout)

        headers = {
            "User-Agent": "bitflyer-client/1.0",
            "Accept": "application/json",
        }

        self._session = aiohttp.ClientSession(
            connector=connector,
            timeout=timeout,
            headers=headers,
        )

        return self._session

    async def close_session(self) -> None:
        """Close HTTP session and cleanup resources."""
        if not self._owns_session:
            return
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None

    @property
    def session(self) -> Optional[aiohttp.ClientSession]:
        """Get current session without creating one."""
        return self._session

    @property
    def owns_session(self) -> bool:
        """Whether the session was created (and will be closed) by this manager."""
        return self._owns_session
