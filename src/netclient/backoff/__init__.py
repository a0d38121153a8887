r"""Backoff strategies for the delay between two attempts."""

from __future__ import annotations

__all__ = ["BaseBackoffStrategy", "ConstantBackoff", "ExponentialBackoff"]

from netclient.backoff.base import BaseBackoffStrategy
from netclient.backoff.constant import ConstantBackoff
from netclient.backoff.exponential import ExponentialBackoff
