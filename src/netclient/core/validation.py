r"""Checks run on the client arguments before any request is sent."""

from __future__ import annotations

__all__ = ["validate_max_attempts", "validate_timeout"]

import httpx

TIMEOUT_FIELDS = ("connect", "read", "write", "pool")


def validate_timeout(timeout: float | httpx.Timeout) -> None:
    r"""Check that a transport timeout is positive.

    A number is the timeout of every phase. For an ``httpx.Timeout``,
    every phase that is set must be positive and ``None`` disables the
    timeout of its phase.

    Raises:
        ValueError: If a timeout is <= 0.

    Example:
        ```pycon
        >>> import httpx
        >>> from netclient.core.validation import validate_timeout
        >>> validate_timeout(10.0)
        >>> validate_timeout(httpx.Timeout(5.0, pool=None))
        >>> validate_timeout(httpx.Timeout(5.0, connect=0))
        Traceback (most recent call last):
        ...
        ValueError: connect timeout must be > 0, got 0

        ```
    """
    if not isinstance(timeout, httpx.Timeout):
        if timeout <= 0:
            msg = f"timeout must be > 0, got {timeout}"
            raise ValueError(msg)
        return
    for field in TIMEOUT_FIELDS:
        value = getattr(timeout, field)
        if value is not None and value <= 0:
            msg = f"{field} timeout must be > 0, got {value}"
            raise ValueError(msg)


def validate_max_attempts(max_attempts: int) -> None:
    r"""Check that the total number of attempts is an integer >= 1.

    Raises:
        TypeError: If ``max_attempts`` is not an integer.
        ValueError: If ``max_attempts`` is lower than 1.
    """
    if isinstance(max_attempts, bool) or not isinstance(max_attempts, int):
        msg = f"max_attempts must be an integer, got {max_attempts!r}"
        raise TypeError(msg)
    if max_attempts < 1:
        msg = f"max_attempts must be >= 1, got {max_attempts}"
        raise ValueError(msg)
