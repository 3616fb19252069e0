"""
HTTP client for bitFlyer Lightning API.

Handles request signing, execution and response processing. Each call is a
single round trip: there is no retry and no response caching.
"""

import asyncio
import json
import logging
import time
from decimal import Decimal
from typing import Any, Dict, Optional

import aiohttp
from aiohttp import ClientSession

from .auth import ApiCredentials, BitflyerSigner
from .models.config import ConnectionConfig

logger = logging.getLogger(__name__)


class HttpClient:
    """HTTP client specialized for bitFlyer API interactions."""

    def __init__(
        self,
        config: ConnectionConfig,
        signer: Optional[BitflyerSigner] = None,
    ):
        """Initialize HTTP client with configuration."""
        self._config = config
        self._signer = signer or BitflyerSigner(
            ApiCredentials(api_key=config.api_key, api_secret=config.api_secret)
        )

    async def request(
        self,
        session: ClientSession,
        method: str,
        endpoint: str,
        body: bytes = b"",
        headers: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None,
    ) -> Any:
        """
        Execute a signed HTTP request and return the decoded JSON payload.

        The timestamp is taken when the request is handed to the session. If
        the connection pool is exhausted, the request waits for a free slot
        after signing, so a long wait can push it past the exchange's
        timestamp tolerance. JSON floats are decoded as Decimal.

        Args:
            session: aiohttp session used to send the request
            method: HTTP method (GET, POST)
            endpoint: Request path relative to the base URL
            body: Serialized request body, signed exactly as sent
            headers: Additional headers; authentication headers take precedence
            timeout: Per-request deadline in seconds, overrides the session default

        Raises:
            RequestError: On connection, timeout or body-read failure
            DecodeError: If the response body is not valid JSON
            ExchangeError: If the payload carries an error message or the
                HTTP status indicates failure
        """
        method = method.upper()
        url = f"{self._config.base_url}{endpoint}"

        request_kwargs: Dict[str, Any] = {"method": method, "url": url}
        if body:
            request_kwargs["data"] = body
        if timeout is not None:
            request_kwargs["timeout"] = aiohttp.ClientTimeout(total=timeout)

        request_headers = self._prepare_headers(headers)
        # Signed last: the exchange rejects stale timestamps
        request_headers.update(self._signer.get_auth_headers(method, endpoint, body))
        request_kwargs["headers"] = request_headers

        start_time = time.monotonic()
        try:
            async with session.request(**request_kwargs) as response:
                status = response.status
                raw = await response.read()
        except asyncio.TimeoutError as e:
            raise RequestError(
                f"Request timed out: {method} {endpoint}"
            ) from e
        except aiohttp.ClientError as e:
            raise RequestError(
                f"Could not execute request: {method} {endpoint} ({e})"
            ) from e

        duration_ms = (time.monotonic() - start_time) * 1000
        logger.debug(f"{method} {endpoint} -> {status} ({duration_ms:.1f} ms)")

        return self._process_response(status, raw)

    def _prepare_headers(self, custom_headers: Optional[Dict[str, str]]) -> Dict[str, str]:
        """Prepare request headers."""
        headers = {}
        if custom_headers:
            headers.update(custom_headers)
        return headers

    def _process_response(self, status: int, raw: bytes) -> Any:
        """Decode response body and surface exchange-level failures."""
        if not raw:
            if status >= 400:
                raise ExchangeError(f"HTTP {status}: empty response", status_code=status)
            raise DecodeError("Empty response body", status_code=status)

        try:
            data = json.loads(raw, parse_float=Decimal)
        except ValueError as e:
            raise DecodeError(
                f"Invalid JSON response (Status {status}): {raw[:200]!r}",
                status_code=status,
            ) from e

        # Business failures arrive as a JSON error_message, often with status 200
        if isinstance(data, dict) and data.get("error_message"):
            raise ExchangeError(
                str(data["error_message"]),
                status_code=status,
                response_data=data,
            )

        if status >= 400:
            raise ExchangeError(
                f"HTTP {status}: {data}",
                status_code=status,
                response_data=data,
            )

        return data


class BitflyerError(Exception):
    """Base exception for bitFlyer client errors."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_data: Optional[Any] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response_data = response_data


class RequestError(BitflyerError):
    """Transport-level failure: connection, timeout or body read."""
    pass


class DecodeError(BitflyerError):
    """Response body is not valid JSON or does not match the expected shape."""
    pass


class ExchangeError(BitflyerError):
    """The exchange rejected the request inside an otherwise delivered response."""
    pass
