"""
Authentication and signing utilities for bitFlyer Lightning API
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Union
import hashlib
import hmac
import time

from .constants import (
    CONTENT_TYPE_JSON,
    HEADER_ACCESS_KEY,
    HEADER_ACCESS_SIGN,
    HEADER_ACCESS_TIMESTAMP,
)


@dataclass(frozen=True)
class ApiCredentials:
    """Container for API credentials"""
    api_key: str
    api_secret: str = field(repr=False)


@dataclass(frozen=True)
class SignedHeaders:
    """Per-request authentication material."""
    timestamp: str
    signature: str

    def as_dict(self, api_key: str) -> Dict[str, str]:
        """Render the authentication headers for a request."""
        return {
            "Content-Type": CONTENT_TYPE_JSON,
            HEADER_ACCESS_KEY: api_key,
            HEADER_ACCESS_TIMESTAMP: self.timestamp,
            HEADER_ACCESS_SIGN: self.signature,
        }


def _to_bytes(body: Union[str, bytes, None]) -> bytes:
    if body is None:
        return b""
    if isinstance(body, bytes):
        return body
    return body.encode("utf-8")


def compute_signature(
    timestamp: str,
    method: str,
    path: str,
    body: Union[str, bytes, None],
    secret: str,
) -> str:
    """
    Generate HMAC-SHA256 signature for a bitFlyer request.

    The signed message is the plain concatenation of timestamp, method,
    path and body, with no separators.

    Args:
        timestamp: Unix time in seconds as a decimal string
        method: HTTP method (GET, POST)
        path: Request path including the leading slash, excluding host
        body: Raw request body, empty for bodiless requests. Bytes are
            signed as-is, without decoding.
        secret: API secret

    Returns:
        Lowercase hex-encoded HMAC-SHA256 signature
    """
    message = f"{timestamp}{method}{path}".encode("utf-8") + _to_bytes(body)
    return hmac.new(
        secret.encode("utf-8"),
        message,
        hashlib.sha256
    ).hexdigest()


class BitflyerSigner:
    """
    Handles request signing for bitFlyer Lightning API authentication.

    Every request carries its own timestamp and signature; nothing is cached
    between requests.
    """

    def __init__(self, credentials: ApiCredentials):
        """
        Initialize the signer with API credentials.

        Args:
            credentials: API credentials containing key and secret
        """
        self.credentials = credentials

    def sign(
        self,
        method: str,
        path: str,
        body: Union[str, bytes, None] = "",
        timestamp: Optional[str] = None,
    ) -> SignedHeaders:
        """
        Compute timestamp and signature for one request.

        Args:
            method: HTTP method
            path: Request path
            body: Serialized request body
            timestamp: Explicit timestamp, defaults to the current unix time

        Returns:
            SignedHeaders for this request
        """
        if timestamp is None:
            timestamp = str(int(time.time()))

        signature = compute_signature(
            timestamp, method.upper(), path, body, self.credentials.api_secret
        )
        return SignedHeaders(timestamp=timestamp, signature=signature)

    def get_auth_headers(
        self,
        method: str,
        path: str,
        body: Union[str, bytes, None] = "",
    ) -> Dict[str, str]:
        """
        Get authentication headers for API requests.

        Returns:
            Dictionary containing Content-Type, ACCESS-KEY, ACCESS-TIMESTAMP
            and ACCESS-SIGN
        """
        return self.sign(method, path, body).as_dict(self.credentials.api_key)
