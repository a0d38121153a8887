r"""Failure classification for the retry loop.

A failure kind is an exception class (matched with ``isinstance``
against transport errors), an ``int`` status code, or a ``range`` of
status codes (matched against responses). A ``FailureClassifier`` owns
two ordered lists of kinds and maps any failure to a ``Decision``.
"""

from __future__ import annotations

__all__ = ["Decision", "FailureClassifier", "FailureKind", "matches_failure"]

import enum
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    import httpx

logger: logging.Logger = logging.getLogger(__name__)

FailureKind = Union[type[BaseException], int, range]


class Decision(enum.Enum):
    r"""Outcome of the classification of a failure."""

    PROPAGATE = "propagate"
    RETRY = "retry"
    NONE = "none"


def matches_failure(kind: FailureKind, failure: BaseException | int) -> bool:
    r"""Indicate if ``failure`` belongs to the failure ``kind``.

    Args:
        kind: The failure kind.
        failure: A transport error, or the status code of a response.

    Returns:
        ``True`` if the failure matches the kind, otherwise ``False``.

    Example:
        ```pycon
        >>> import httpx
        >>> from netclient.retry.classifier import matches_failure
        >>> matches_failure(range(500, 600), 503)
        True
        >>> matches_failure(429, 503)
        False
        >>> matches_failure(httpx.TimeoutException, httpx.ReadTimeout("slow"))
        True

        ```
    """
    if isinstance(failure, BaseException):
        return isinstance(kind, type) and isinstance(failure, kind)
    if isinstance(kind, range):
        return failure in kind
    return not isinstance(kind, type) and kind == failure


@dataclass(frozen=True)
class FailureClassifier:
    r"""Classify transport errors and responses as propagate, retry or
    neither.

    The propagate list is consulted before the retryable list. A kind
    listed in both makes retry unreachable for it: the overlap is
    reported with a warning but not rejected.

    Args:
        retryable: The failure kinds that trigger a retry.
        propagate: The failure kinds that stop the retry loop.

    Example:
        ```pycon
        >>> from netclient.retry.classifier import FailureClassifier
        >>> classifier = FailureClassifier(retryable=(429, range(500, 600)), propagate=(405,))
        >>> classifier.classify_status(503)
        <Decision.RETRY: 'retry'>
        >>> classifier.classify_status(405)
        <Decision.PROPAGATE: 'propagate'>
        >>> classifier.classify_status(404)
        <Decision.NONE: 'none'>

        ```
    """

    retryable: tuple[FailureKind, ...] = ()
    propagate: tuple[FailureKind, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "retryable", tuple(self.retryable))
        object.__setattr__(self, "propagate", tuple(self.propagate))
        overlap = self.overlap()
        if overlap:
            logger.warning(
                f"failure kinds {overlap!r} are both retryable and propagated: "
                "they will never be retried"
            )

    def overlap(self) -> tuple[FailureKind, ...]:
        r"""Return the failure kinds listed in both lists."""
        return tuple(kind for kind in self.retryable if kind in self.propagate)

    def classify(self, failure: BaseException | int) -> Decision:
        r"""Classify a transport error or a status code.

        Args:
            failure: A transport error, or the status code of a response.

        Returns:
            The decision for the failure.
        """
        if any(matches_failure(kind, failure) for kind in self.propagate):
            return Decision.PROPAGATE
        if any(matches_failure(kind, failure) for kind in self.retryable):
            return Decision.RETRY
        return Decision.NONE

    def classify_exception(self, exc: BaseException) -> Decision:
        r"""Classify a transport error."""
        return self.classify(exc)

    def classify_status(self, status_code: int) -> Decision:
        r"""Classify a response status code."""
        return self.classify(status_code)

    def classify_response(self, response: httpx.Response) -> Decision:
        r"""Classify a response by its status code."""
        return self.classify(response.status_code)
