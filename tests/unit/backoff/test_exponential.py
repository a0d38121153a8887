r"""Unit tests for ExponentialBackoff strategy."""

from __future__ import annotations

import pytest

from netclient.backoff import BaseBackoffStrategy, ExponentialBackoff


def test_exponential_backoff_is_strategy() -> None:
    assert isinstance(ExponentialBackoff(), BaseBackoffStrategy)


def test_exponential_backoff_doubles() -> None:
    """Test that the delay doubles after every retry."""
    backoff = ExponentialBackoff(base_delay=0.5)
    assert [backoff.calculate(retry) for retry in range(4)] == [0.5, 1.0, 2.0, 4.0]


def test_exponential_backoff_defaults() -> None:
    backoff = ExponentialBackoff()
    assert backoff.base_delay == 0.3
    assert backoff.multiplier == 2.0
    assert backoff.max_delay is None


def test_exponential_backoff_multiplier() -> None:
    """Test a custom growth factor."""
    backoff = ExponentialBackoff(base_delay=1.0, multiplier=3.0)
    assert [backoff.calculate(retry) for retry in range(3)] == [1.0, 3.0, 9.0]


def test_exponential_backoff_multiplier_one_is_constant() -> None:
    assert list(ExponentialBackoff(base_delay=0.5, multiplier=1.0).delays(4)) == [0.5, 0.5, 0.5]


def test_exponential_backoff_max_delay() -> None:
    """Test that the delay is capped."""
    backoff = ExponentialBackoff(base_delay=1.0, max_delay=5.0)
    assert backoff.calculate(2) == 4.0
    assert backoff.calculate(10) == 5.0


def test_exponential_backoff_delays() -> None:
    """Test the schedule of a request allowed four attempts."""
    assert list(ExponentialBackoff(base_delay=1.0, max_delay=3.0).delays(4)) == [1.0, 2.0, 3.0]


def test_exponential_backoff_negative_base_delay() -> None:
    """Test that a negative base delay is rejected."""
    with pytest.raises(ValueError, match=r"base_delay must be >= 0"):
        ExponentialBackoff(base_delay=-0.1)


def test_exponential_backoff_multiplier_lower_than_one() -> None:
    with pytest.raises(ValueError, match=r"multiplier must be >= 1, got 0.5"):
        ExponentialBackoff(multiplier=0.5)


@pytest.mark.parametrize("max_delay", [0.0, -1.0])
def test_exponential_backoff_non_positive_max_delay(max_delay: float) -> None:
    """Test that a non-positive cap is rejected."""
    with pytest.raises(ValueError, match=r"max_delay must be > 0"):
        ExponentialBackoff(max_delay=max_delay)


def test_exponential_backoff_repr() -> None:
    assert (
        repr(ExponentialBackoff(base_delay=0.5))
        == "ExponentialBackoff(base_delay=0.5, multiplier=2.0, max_delay=None)"
    )


def test_exponential_backoff_equality() -> None:
    assert ExponentialBackoff(base_delay=0.5) == ExponentialBackoff(base_delay=0.5)
    assert ExponentialBackoff(base_delay=0.5) != ExponentialBackoff(base_delay=0.6)
