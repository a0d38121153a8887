r"""Core shared logic for the sync and async JSON clients.

This package contains the configuration, the validation helpers, the
path/query normalizer and the header/authentication composer.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_MAX_ATTEMPTS",
    "DEFAULT_TIMEOUT",
    "PROPAGATE_FAILURES",
    "RETRYABLE_FAILURES",
    "ClientConfig",
    "build_target",
    "compose_headers",
    "normalize_path",
    "validate_max_attempts",
    "validate_timeout",
]

from netclient.core.config import (
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_TIMEOUT,
    PROPAGATE_FAILURES,
    RETRYABLE_FAILURES,
    ClientConfig,
)
from netclient.core.headers import compose_headers
from netclient.core.path import build_target, normalize_path
from netclient.core.validation import validate_max_attempts, validate_timeout
