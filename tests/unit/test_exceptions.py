from __future__ import annotations

import httpx
import pytest

from netclient.exceptions import (
    ExhaustedRetries,
    NetworkClientError,
    PropagatedFailure,
    UnsupportedOperationError,
)


def test_network_client_error_attributes() -> None:
    """Test the attributes of the base error."""
    cause = httpx.ConnectError("refused")
    error = NetworkClientError("boom", method="GET", url="https://api.example.com/", cause=cause)
    assert str(error) == "boom"
    assert error.message == "boom"
    assert error.method == "GET"
    assert error.url == "https://api.example.com/"
    assert error.cause is cause


def test_network_client_error_defaults() -> None:
    error = NetworkClientError("boom")
    assert error.method is None
    assert error.url is None
    assert error.cause is None


@pytest.mark.parametrize("error_cls", [PropagatedFailure, ExhaustedRetries])
def test_failure_errors_are_network_client_errors(error_cls: type[Exception]) -> None:
    """Test the error hierarchy."""
    assert issubclass(error_cls, NetworkClientError)


def test_exhausted_retries_attempts() -> None:
    """Test that ExhaustedRetries records the number of attempts."""
    error = ExhaustedRetries("failed", attempts=3, method="POST")
    assert error.attempts == 3
    assert error.method == "POST"


def test_unsupported_operation_error() -> None:
    """Test that the unsupported operation is named."""
    error = UnsupportedOperationError("post_form")
    assert error.operation == "post_form"
    assert "post_form" in str(error)
    assert isinstance(error, NotImplementedError)
    assert isinstance(error, NetworkClientError)
