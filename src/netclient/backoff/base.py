r"""Interface of the wait schedules used between two attempts."""

from __future__ import annotations

__all__ = ["BaseBackoffStrategy"]

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator


class BaseBackoffStrategy(ABC):
    r"""Schedule of the waits between the attempts of one request.

    Retries are numbered from 0: retry 0 precedes the second attempt.
    A client without a strategy re-issues requests immediately.
    """

    @abstractmethod
    def calculate(self, retry: int) -> float:
        r"""Return the number of seconds to wait before ``retry``."""

    def delays(self, max_attempts: int) -> Iterator[float]:
        r"""Yield the waits of a request allowed ``max_attempts``
        attempts.

        Example:
            ```pycon
            >>> from netclient.backoff import ExponentialBackoff
            >>> list(ExponentialBackoff(base_delay=1.0).delays(4))
            [1.0, 2.0, 4.0]

            ```
        """
        for retry in range(max_attempts - 1):
            yield self.calculate(retry)
