r"""Exceptions raised by the network clients.

HTTP-level failures (4xx/5xx) are never raised: they are returned as
``Response`` values. Only transport-level failures and unsupported
operations cross the client boundary as exceptions.
"""

from __future__ import annotations

__all__ = [
    "ExhaustedRetries",
    "NetworkClientError",
    "PropagatedFailure",
    "UnsupportedOperationError",
]

from typing import Any


class NetworkClientError(Exception):
    r"""Base class of all the errors raised by the network clients.

    Args:
        message: A human-readable description of the failure.
        method: The HTTP method of the failed request, if any.
        url: The target URL of the failed request, if any.
        cause: The original exception that caused this error, if any.

    Example:
        ```pycon
        >>> from netclient.exceptions import NetworkClientError
        >>> error = NetworkClientError("boom", method="GET", url="https://api.example.com/")
        >>> error.method
        'GET'
        >>> str(error)
        'boom'

        ```
    """

    def __init__(
        self,
        message: str,
        *,
        method: str | None = None,
        url: str | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.method = method
        self.url = url
        self.cause = cause


class PropagatedFailure(NetworkClientError):
    r"""Raised when a transport error must not be retried.

    The error is either classified as propagate-immediately or not
    classified at all. The original transport error is available as
    ``cause`` and is chained as ``__cause__``.
    """


class ExhaustedRetries(NetworkClientError):
    r"""Raised when a retryable transport error persists after the last
    attempt.

    Args:
        message: A human-readable description of the failure.
        attempts: The number of attempts that were made.
        **kwargs: See ``NetworkClientError``.
    """

    def __init__(self, message: str, *, attempts: int, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.attempts = attempts


class UnsupportedOperationError(NetworkClientError, NotImplementedError):
    r"""Raised by the HTML and form operations, which are not supported.

    Args:
        operation: The name of the unsupported operation.

    Example:
        ```pycon
        >>> from netclient.exceptions import UnsupportedOperationError
        >>> str(UnsupportedOperationError("get_html"))
        "operation 'get_html' is not supported: only JSON requests are"

        ```
    """

    def __init__(self, operation: str) -> None:
        super().__init__(f"operation {operation!r} is not supported: only JSON requests are")
        self.operation = operation
