r"""Synchronous retry executor for HTTP requests.

This module provides the RetryExecutor class that drives the bounded
retry loop of a single request.
"""

from __future__ import annotations

__all__ = ["RetryExecutor"]

import logging
import time
from typing import TYPE_CHECKING, Any

import httpx

from netclient.core.config import DEFAULT_MAX_ATTEMPTS
from netclient.core.validation import validate_max_attempts
from netclient.retry.executor_core import handle_response, handle_transport_error

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from netclient.backoff import BaseBackoffStrategy
    from netclient.retry.classifier import FailureClassifier


class RetryExecutor:
    """Executes HTTP requests with a bounded retry loop.

    The loop is sequential: one attempt is issued, inspected, and the
    identical request is re-issued while the outcome is retryable and
    attempts remain.

    - A transport error classified as retryable is re-issued, and the
      last one is raised as ``ExhaustedRetries``.
    - A transport error classified as propagate, or not classified, is
      raised immediately as ``PropagatedFailure``.
    - A response with a retryable status is re-issued, and the last one
      is returned as is.
    - Any other response is returned as is.

    Args:
        classifier: The failure classifier.
        max_attempts: Total number of attempts, including the first one.
        logger: The sink of the log events.
        backoff: Optional backoff strategy. If ``None``, the request is
            re-issued without waiting.

    Example:
        ```pycon
        >>> import httpx
        >>> from netclient.retry import FailureClassifier, RetryExecutor
        >>> executor = RetryExecutor(FailureClassifier(retryable=(503,)), max_attempts=3)
        >>> with httpx.Client() as client:  # doctest: +SKIP
        ...     response = executor.execute("GET", "https://api.example.com/", client.request)
        ...

        ```
    """

    def __init__(
        self,
        classifier: FailureClassifier,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        logger: logging.Logger | logging.LoggerAdapter | None = None,
        backoff: BaseBackoffStrategy | None = None,
    ) -> None:
        validate_max_attempts(max_attempts)
        self.classifier = classifier
        self.max_attempts = max_attempts
        self.logger = logger or logging.getLogger("netclient")
        self.backoff = backoff

    def execute(
        self,
        method: str,
        url: str,
        request_func: Callable[..., httpx.Response],
        **kwargs: Any,
    ) -> httpx.Response:
        """Execute the request until it succeeds, fails for good, or the
        attempts run out.

        Args:
            method: The HTTP method name (e.g. "GET", "POST").
            url: The target URL.
            request_func: The function making one attempt. It is called
                as ``request_func(method=method, url=url, **kwargs)``.
            **kwargs: Additional keyword arguments passed to request_func.

        Returns:
            The response of the last attempt.

        Raises:
            PropagatedFailure: If a transport error must not be retried.
            ExhaustedRetries: If a retryable transport error persists
                after the last attempt.
        """
        remaining = self.max_attempts
        delays = self.backoff.delays(self.max_attempts) if self.backoff is not None else None
        while True:
            attempt = self.max_attempts - remaining + 1
            try:
                response = request_func(method=method, url=url, **kwargs)
            except httpx.RequestError as exc:
                remaining -= 1
                handle_transport_error(
                    exc,
                    classifier=self.classifier,
                    logger=self.logger,
                    method=method,
                    url=url,
                    attempt=attempt,
                    remaining=remaining,
                )
            else:
                retry = handle_response(
                    response,
                    classifier=self.classifier,
                    logger=self.logger,
                    method=method,
                    url=url,
                    attempt=attempt,
                    max_attempts=self.max_attempts,
                )
                if not retry:
                    return response
                remaining -= 1
                if remaining == 0:
                    return response
            self._wait(attempt, delays)

    def _wait(self, attempt: int, delays: Iterator[float] | None) -> None:
        if delays is None:
            return
        delay = next(delays)
        self.logger.debug(f"waiting {delay:.2f}s before attempt {attempt + 1}")
        time.sleep(delay)
