r"""Unit tests for ConstantBackoff strategy."""

from __future__ import annotations

import pytest

from netclient.backoff import BaseBackoffStrategy, ConstantBackoff


def test_constant_backoff_is_strategy() -> None:
    """Test that ConstantBackoff implements the strategy interface."""
    assert isinstance(ConstantBackoff(), BaseBackoffStrategy)


def test_constant_backoff_same_delay() -> None:
    """Test that every retry waits the same delay."""
    backoff = ConstantBackoff(delay=2.5)
    assert [backoff.calculate(retry) for retry in (0, 1, 10, 100)] == [2.5, 2.5, 2.5, 2.5]


def test_constant_backoff_default_delay() -> None:
    """Test the default delay."""
    assert ConstantBackoff().delay == 1.0


def test_constant_backoff_zero_delay() -> None:
    """Test that a zero delay is accepted."""
    assert ConstantBackoff(delay=0.0).calculate(3) == 0.0


def test_constant_backoff_negative_delay() -> None:
    """Test that a negative delay is rejected."""
    with pytest.raises(ValueError, match=r"delay must be >= 0, got -1.0"):
        ConstantBackoff(delay=-1.0)


def test_constant_backoff_repr() -> None:
    assert repr(ConstantBackoff(delay=0.5)) == "ConstantBackoff(delay=0.5)"


def test_constant_backoff_delays() -> None:
    """Test the schedule of a request allowed four attempts."""
    assert list(ConstantBackoff(delay=0.2).delays(4)) == [0.2, 0.2, 0.2]


def test_constant_backoff_delays_single_attempt() -> None:
    assert list(ConstantBackoff().delays(1)) == []


def test_constant_backoff_is_immutable() -> None:
    backoff = ConstantBackoff()
    with pytest.raises(AttributeError):
        backoff.delay = 2.0  # type: ignore[misc]
