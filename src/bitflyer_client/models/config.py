"""
Configuration models for bitFlyer client.

Immutable configuration structures following state-first design.
"""

from dataclasses import dataclass, field

from ..constants import DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from ..utils import validate_url


@dataclass(frozen=True)
class ConnectionConfig:
    """Configuration for bitFlyer client connection."""
    api_key: str
    api_secret: str = field(repr=False)
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self):
        """Validate configuration after initialization."""
        if not self.api_key:
            raise ValueError("API key cannot be empty")
        if not self.api_secret:
            raise ValueError("API secret cannot be empty")
        if self.timeout <= 0:
            raise ValueError(f"Timeout must be positive, got {self.timeout}")
        if not validate_url(self.base_url):
            raise ValueError("Base URL must be a valid HTTP/HTTPS URL")
