r"""Shared core logic for the retry executors.

This module provides the decision steps used by both the synchronous
and asynchronous retry loops: what to log and whether to re-issue the
request, raise, or hand the response back.
"""

from __future__ import annotations

__all__ = ["handle_response", "handle_transport_error"]

from typing import TYPE_CHECKING

from netclient.core.config import LOG_TAG
from netclient.exceptions import ExhaustedRetries, PropagatedFailure
from netclient.retry.classifier import Decision

if TYPE_CHECKING:
    import logging

    import httpx

    from netclient.retry.classifier import FailureClassifier


def handle_transport_error(
    exc: httpx.RequestError,
    *,
    classifier: FailureClassifier,
    logger: logging.Logger | logging.LoggerAdapter,
    method: str,
    url: str,
    attempt: int,
    remaining: int,
) -> None:
    """Handle a transport error raised by one attempt.

    The function returns only when the request must be re-issued.

    Args:
        exc: The transport error.
        classifier: The failure classifier.
        logger: The sink of the log events.
        method: The HTTP method name, used in messages.
        url: The target URL, used in messages.
        attempt: The 1-indexed number of the failed attempt.
        remaining: The number of attempts left after this one.

    Raises:
        PropagatedFailure: If the error is classified as propagate or is
            not classified at all.
        ExhaustedRetries: If the error is retryable but no attempt is
            left.
    """
    error_type = type(exc).__name__
    decision = classifier.classify_exception(exc)
    if decision is Decision.RETRY:
        if remaining > 0:
            logger.warning(
                f"{LOG_TAG} {method} {url} failed with {error_type}: {exc} "
                f"(attempt {attempt}/{attempt + remaining}), retrying"
            )
            return
        logger.error(f"{LOG_TAG} {method} {url} failed after {attempt} attempts: {exc}")
        raise ExhaustedRetries(
            f"{method} request to {url} failed after {attempt} attempts: {exc}",
            attempts=attempt,
            method=method,
            url=url,
            cause=exc,
        ) from exc

    reason = "propagated" if decision is Decision.PROPAGATE else "unclassified"
    logger.error(f"{LOG_TAG} {method} {url} request failed ({reason} {error_type}): {exc}")
    raise PropagatedFailure(
        f"{method} request to {url} failed with {error_type}: {exc}",
        method=method,
        url=url,
        cause=exc,
    ) from exc


def handle_response(
    response: httpx.Response,
    *,
    classifier: FailureClassifier,
    logger: logging.Logger | logging.LoggerAdapter,
    method: str,
    url: str,
    attempt: int,
    max_attempts: int,
) -> bool:
    """Handle the response of one attempt.

    Status failures are never raised: the response is either handed
    back to the caller or the request is re-issued.

    Args:
        response: The response of the attempt.
        classifier: The failure classifier.
        logger: The sink of the log events.
        method: The HTTP method name, used in messages.
        url: The target URL, used in messages.
        attempt: The 1-indexed number of the attempt.
        max_attempts: Total number of attempts.

    Returns:
        ``True`` if the response status is retryable, ``False`` if the
        response must be returned as is.
    """
    status_code = response.status_code
    decision = classifier.classify_response(response)
    if decision is Decision.PROPAGATE:
        logger.error(
            f"{LOG_TAG} {method} {url} responded with status {status_code}, returning it as is"
        )
        return False
    if decision is Decision.RETRY:
        logger.warning(
            f"{LOG_TAG} {method} {url} responded with retryable status {status_code} "
            f"(attempt {attempt}/{max_attempts}), retrying"
        )
        return True
    if not response.is_success:
        logger.warning(
            f"{LOG_TAG} endpoint responded with non-success {status_code} code. "
            f"Response: {response.text}"
        )
    return False
