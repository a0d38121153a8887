r"""Geometrically growing wait between two attempts."""

from __future__ import annotations

__all__ = ["ExponentialBackoff"]

from dataclasses import dataclass

from netclient.backoff.base import BaseBackoffStrategy


@dataclass(frozen=True)
class ExponentialBackoff(BaseBackoffStrategy):
    r"""Wait ``base_delay * multiplier ** retry`` seconds, optionally
    capped at ``max_delay``.

    Args:
        base_delay: The wait before the first retry, >= 0.
        multiplier: The growth factor between two retries, >= 1.
        max_delay: Optional upper bound of a single wait, > 0.

    Example:
        ```pycon
        >>> from netclient.backoff import ExponentialBackoff
        >>> backoff = ExponentialBackoff(base_delay=0.5, max_delay=3.0)
        >>> [backoff.calculate(retry) for retry in range(4)]
        [0.5, 1.0, 2.0, 3.0]
        >>> list(ExponentialBackoff(base_delay=1.0, multiplier=3.0).delays(3))
        [1.0, 3.0]

        ```
    """

    base_delay: float = 0.3
    multiplier: float = 2.0
    max_delay: float | None = None

    def __post_init__(self) -> None:
        if self.base_delay < 0:
            msg = f"base_delay must be >= 0, got {self.base_delay}"
            raise ValueError(msg)
        if self.multiplier < 1:
            msg = f"multiplier must be >= 1, got {self.multiplier}"
            raise ValueError(msg)
        if self.max_delay is not None and self.max_delay <= 0:
            msg = f"max_delay must be > 0, got {self.max_delay}"
            raise ValueError(msg)

    def calculate(self, retry: int) -> float:
        delay = self.base_delay * self.multiplier**retry
        if self.max_delay is None:
            return delay
        return min(delay, self.max_delay)
