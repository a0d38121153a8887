r"""Configuration dataclass and defaults for the network clients.

This module provides configuration constants and a dataclass-based
configuration object for the ``JsonClient`` and ``AsyncJsonClient``
classes.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_HEADERS",
    "DEFAULT_MAX_ATTEMPTS",
    "DEFAULT_TIMEOUT",
    "DEFAULT_USER_AGENT",
    "LOG_TAG",
    "PROPAGATE_FAILURES",
    "RETRYABLE_FAILURES",
    "ClientConfig",
]

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

import httpx

from netclient.core.validation import validate_max_attempts

if TYPE_CHECKING:
    from netclient.backoff import BaseBackoffStrategy
    from netclient.retry.classifier import FailureKind


# Default timeout in seconds for HTTP requests
DEFAULT_TIMEOUT = 10.0

# Total attempts including the first one: 1 initial attempt + 1 retry
DEFAULT_MAX_ATTEMPTS = 2

DEFAULT_USER_AGENT = "netclient"

# Headers sent with every request unless overridden
DEFAULT_HEADERS = MappingProxyType(
    {"accept": "application/json", "Content-Type": "application/json"}
)

# Stamp in front of each record written to the client logger
LOG_TAG = "[NETWORK CLIENT]:"

# Failures that trigger a re-issue of the same request
# 429: Too Many Requests - Rate limiting
# 5xx: Server errors
# Timeouts, network errors (refused connection, DNS, TLS) and protocol errors
RETRYABLE_FAILURES: tuple[FailureKind, ...] = (
    429,
    range(500, 600),
    httpx.TimeoutException,
    httpx.NetworkError,
    httpx.ProtocolError,
)

# Failures that stop the retry loop immediately, checked before RETRYABLE_FAILURES
# 414: URI Too Long
# 405: Method Not Allowed
PROPAGATE_FAILURES: tuple[FailureKind, ...] = (414, 405)


@dataclass
class ClientConfig:
    """Configuration for the retry behavior of a client.

    Note:
        The timeout and TLS verification settings are NOT included in
        this config as they are used directly by the httpx transport.

    Args:
        max_attempts: Total number of attempts, including the first one.
            Must be >= 1.
        retryable_failures: Failure kinds that trigger a retry.
        propagate_failures: Failure kinds that stop the retry loop
            immediately. They are checked before ``retryable_failures``.
        backoff: Optional backoff strategy. If ``None``, a request is
            re-issued without waiting.

    Example:
        ```pycon
        >>> from netclient.core.config import ClientConfig
        >>> config = ClientConfig()
        >>> config.max_attempts
        2
        >>> config.merge(max_attempts=5).max_attempts
        5
        >>> config.max_attempts
        2

        ```
    """

    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    retryable_failures: tuple[FailureKind, ...] = field(default_factory=lambda: RETRYABLE_FAILURES)
    propagate_failures: tuple[FailureKind, ...] = field(default_factory=lambda: PROPAGATE_FAILURES)
    backoff: BaseBackoffStrategy | None = None

    def __post_init__(self) -> None:
        validate_max_attempts(self.max_attempts)
        self.retryable_failures = tuple(self.retryable_failures)
        self.propagate_failures = tuple(self.propagate_failures)

    def merge(self, **overrides: Any) -> ClientConfig:
        """Create a new config with specified parameters overridden.

        Only non-None override values are applied.

        Args:
            **overrides: Keyword arguments for parameters to override.

        Returns:
            A new ClientConfig instance with overrides applied.
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary format.

        Returns:
            Dictionary with the retry configuration parameters.

        Example:
            ```pycon
            >>> from netclient.core.config import ClientConfig
            >>> ClientConfig(max_attempts=3).to_dict()["max_attempts"]
            3

            ```
        """
        return {
            "max_attempts": self.max_attempts,
            "retryable_failures": self.retryable_failures,
            "propagate_failures": self.propagate_failures,
            "backoff": self.backoff,
        }
