r"""Retry package: failure classification and bounded retry loops.

Public API:
    - FailureClassifier: Two ordered lists of failure kinds and a pure
      classification function
    - Decision: Outcome of a classification
    - RetryExecutor: Synchronous retry executor
    - AsyncRetryExecutor: Asynchronous retry executor
"""

from __future__ import annotations

__all__ = [
    "AsyncRetryExecutor",
    "Decision",
    "FailureClassifier",
    "FailureKind",
    "RetryExecutor",
]

from netclient.retry.classifier import Decision, FailureClassifier, FailureKind
from netclient.retry.executor import RetryExecutor
from netclient.retry.executor_async import AsyncRetryExecutor
