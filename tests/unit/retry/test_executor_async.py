r"""Unit tests for the asynchronous retry executor."""

from __future__ import annotations

from unittest.mock import AsyncMock, Mock, call

import httpx
import pytest

from netclient.backoff import ConstantBackoff
from netclient.core.config import PROPAGATE_FAILURES, RETRYABLE_FAILURES
from netclient.exceptions import ExhaustedRetries, PropagatedFailure
from netclient.retry import AsyncRetryExecutor, FailureClassifier
from tests.helpers import retry_messages

TEST_URL = "https://api.example.com/data"
CLASSIFIER = FailureClassifier(retryable=RETRYABLE_FAILURES, propagate=PROPAGATE_FAILURES)


########################################
#     Tests for AsyncRetryExecutor     #
########################################


@pytest.mark.asyncio
async def test_async_execute_success(mock_asleep: Mock, mock_logger: Mock) -> None:
    """Test that a success response is returned after one attempt."""
    request_func = AsyncMock(return_value=httpx.Response(200))

    result = await AsyncRetryExecutor(CLASSIFIER, logger=mock_logger).execute(
        "GET", TEST_URL, request_func
    )

    assert result.status_code == 200
    request_func.assert_awaited_once_with(method="GET", url=TEST_URL)
    mock_asleep.assert_not_called()


@pytest.mark.asyncio
async def test_async_execute_retryable_status_exhausted(
    mock_asleep: Mock, caplog: pytest.LogCaptureFixture
) -> None:
    """Test that the last retryable response is returned."""
    request_func = AsyncMock(return_value=httpx.Response(503))

    result = await AsyncRetryExecutor(CLASSIFIER, max_attempts=4).execute(
        "GET", TEST_URL, request_func
    )

    assert result.status_code == 503
    assert request_func.await_count == 4
    assert len(retry_messages(caplog.records)) == 4
    mock_asleep.assert_not_called()


@pytest.mark.asyncio
async def test_async_execute_retryable_error_exhausted(
    mock_asleep: Mock, caplog: pytest.LogCaptureFixture
) -> None:
    """Test that a persisting retryable error is raised after the last
    attempt."""
    request_func = AsyncMock(side_effect=httpx.ConnectTimeout("slow"))

    with pytest.raises(ExhaustedRetries):
        await AsyncRetryExecutor(CLASSIFIER, max_attempts=3).execute(
            "GET", TEST_URL, request_func
        )

    assert request_func.await_count == 3
    assert len(retry_messages(caplog.records)) == 2


@pytest.mark.asyncio
async def test_async_execute_propagate_error(mock_asleep: Mock, mock_logger: Mock) -> None:
    """Test that an unclassified transport error fails fast."""
    request_func = AsyncMock(side_effect=httpx.UnsupportedProtocol("gopher"))

    with pytest.raises(PropagatedFailure):
        await AsyncRetryExecutor(CLASSIFIER, max_attempts=3, logger=mock_logger).execute(
            "GET", TEST_URL, request_func
        )

    request_func.assert_awaited_once()


@pytest.mark.asyncio
async def test_async_execute_propagate_status(mock_asleep: Mock, mock_logger: Mock) -> None:
    """Test that a propagated status is returned without retry."""
    request_func = AsyncMock(return_value=httpx.Response(405))

    result = await AsyncRetryExecutor(CLASSIFIER, max_attempts=3, logger=mock_logger).execute(
        "DELETE", TEST_URL, request_func
    )

    assert result.status_code == 405
    request_func.assert_awaited_once()
    mock_logger.warning.assert_not_called()
    assert "retrying" not in mock_logger.error.call_args.args[0]


@pytest.mark.asyncio
async def test_async_execute_backoff(mock_asleep: Mock, mock_logger: Mock) -> None:
    """Test that asyncio.sleep is awaited between attempts."""
    request_func = AsyncMock(side_effect=[httpx.Response(500), httpx.Response(200)])

    result = await AsyncRetryExecutor(
        CLASSIFIER, logger=mock_logger, backoff=ConstantBackoff(delay=2.0)
    ).execute("GET", TEST_URL, request_func)

    assert result.status_code == 200
    assert mock_asleep.call_args_list == [call(2.0)]
