r"""Fixed wait between two attempts."""

from __future__ import annotations

__all__ = ["ConstantBackoff"]

from dataclasses import dataclass

from netclient.backoff.base import BaseBackoffStrategy


@dataclass(frozen=True)
class ConstantBackoff(BaseBackoffStrategy):
    r"""Wait ``delay`` seconds before every retry.

    Example:
        ```pycon
        >>> from netclient.backoff import ConstantBackoff
        >>> list(ConstantBackoff(delay=0.5).delays(3))
        [0.5, 0.5]

        ```
    """

    delay: float = 1.0

    def __post_init__(self) -> None:
        if self.delay < 0:
            msg = f"delay must be >= 0, got {self.delay}"
            raise ValueError(msg)

    def calculate(self, retry: int) -> float:  # noqa: ARG002
        return self.delay
