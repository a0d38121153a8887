r"""netclient - Resilient JSON HTTP client bound to a single endpoint.

A client is configured once with the URI of a remote host; its verb
methods then target paths on that host. Requests carry JSON headers and
the configured authentication, transient failures are retried a bounded
number of times, and response bodies are decoded as JSON when possible.

Key Features:
    - GET/POST/PATCH/PUT/DELETE returning ``Response(code, body)``
    - Basic, Bearer, or custom token authentication
    - Configurable retryable and propagate-immediately failure kinds
      (transport errors, status codes, status ranges)
    - HTTP-level failures returned as data, transport failures raised
    - Optional backoff between attempts
    - Sync and async clients

Example:
    ```pycon
    >>> from netclient import JsonClient
    >>> github = JsonClient("https://api.github.com", max_attempts=3)
    >>> response = github.get("/emojis")  # doctest: +SKIP
    >>> response.code  # doctest: +SKIP
    200

    ```
"""

from __future__ import annotations

__all__ = [
    "AsyncJsonClient",
    "ClientConfig",
    "ExhaustedRetries",
    "HttpVerb",
    "JsonClient",
    "NetworkClientError",
    "PropagatedFailure",
    "Response",
    "UnsupportedOperationError",
    "__version__",
]

from importlib.metadata import PackageNotFoundError, version

from netclient.client import JsonClient
from netclient.client_async import AsyncJsonClient
from netclient.core.config import ClientConfig
from netclient.exceptions import (
    ExhaustedRetries,
    NetworkClientError,
    PropagatedFailure,
    UnsupportedOperationError,
)
from netclient.response import Response
from netclient.verbs import HttpVerb

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
