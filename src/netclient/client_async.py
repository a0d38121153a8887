r"""Asynchronous JSON client bound to a single endpoint.

This module provides ``AsyncJsonClient``, a thin async twin of
``JsonClient`` built on ``httpx.AsyncClient``.
"""

from __future__ import annotations

__all__ = ["AsyncJsonClient"]

from typing import TYPE_CHECKING, Any

import httpx

from netclient.core.client_logic import BaseJsonClient
from netclient.core.config import DEFAULT_TIMEOUT
from netclient.core.validation import validate_timeout
from netclient.response import Response, materialize_response
from netclient.retry import AsyncRetryExecutor
from netclient.verbs import HttpVerb

if TYPE_CHECKING:
    from collections.abc import Mapping
    from types import TracebackType
    from typing import Self

    from netclient.core.path import Params


class AsyncJsonClient(BaseJsonClient):
    r"""Asynchronous JSON client targeting the paths of one endpoint.

    It offers the same verbs, setters and error surface as
    ``JsonClient``; the verb methods are coroutines.

    Args:
        endpoint: The absolute URI of the remote host.
        client: Optional httpx.AsyncClient instance to use for requests.
            If ``None``, a new client is created with ``timeout`` and
            ``verify``.
        timeout: Maximum seconds to wait for the server response.
            Only used if client is None. Must be > 0.
        verify: Whether TLS certificates are verified. Only used if
            client is None.
        **kwargs: See ``BaseJsonClient``.

    Example:
        ```pycon
        >>> import asyncio
        >>> from netclient import AsyncJsonClient
        >>> async def main():
        ...     async with AsyncJsonClient("https://api.github.com") as github:
        ...         return await github.get("/emojis")
        ...
        >>> asyncio.run(main())  # doctest: +SKIP

        ```
    """

    def __init__(
        self,
        endpoint: str,
        *,
        client: httpx.AsyncClient | None = None,
        timeout: float | httpx.Timeout = DEFAULT_TIMEOUT,
        verify: bool = True,
        **kwargs: Any,
    ) -> None:
        super().__init__(endpoint, **kwargs)
        validate_timeout(timeout)
        self._owns_client = client is None
        self._client: httpx.AsyncClient = client or httpx.AsyncClient(
            timeout=timeout, verify=verify
        )

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        r"""Close the underlying httpx client if this instance created
        it."""
        if self._owns_client:
            await self._client.aclose()

    async def get(
        self,
        path: str | None = None,
        params: Params | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Response:
        r"""Perform a GET request on ``path``. See ``JsonClient.get``."""
        return await self.request(HttpVerb.GET, path, params, headers)

    async def post(
        self,
        path: str | None = None,
        params: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> Response:
        r"""Perform a POST request on ``path``. See ``JsonClient.post``."""
        return await self.request(HttpVerb.POST, path, params, headers)

    async def patch(
        self,
        path: str | None = None,
        params: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> Response:
        return await self.request(HttpVerb.PATCH, path, params, headers)

    async def put(
        self,
        path: str | None = None,
        params: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> Response:
        return await self.request(HttpVerb.PUT, path, params, headers)

    async def delete(
        self,
        path: str | None = None,
        params: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> Response:
        return await self.request(HttpVerb.DELETE, path, params, headers)

    async def request(
        self,
        verb: HttpVerb,
        path: str | None = None,
        params: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> Response:
        r"""Send a request with automatic retry logic.

        Raises:
            PropagatedFailure: If a transport error must not be retried.
            ExhaustedRetries: If a retryable transport error persists
                after the last attempt.
        """
        prepared = self._prepare(verb, path, params, headers)
        executor = AsyncRetryExecutor(
            self._classifier,
            max_attempts=self._config.max_attempts,
            logger=self._logger,
            backoff=self._config.backoff,
        )
        response = await executor.execute(
            prepared.method, prepared.url, self._client.request, **prepared.to_kwargs()
        )
        return materialize_response(response, logger=self._logger)
