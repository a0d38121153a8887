r"""Synchronous JSON client bound to a single endpoint.

This module provides the ``JsonClient`` class: the composition of path
normalization, header and authentication composition, the retry loop
and response materialization behind five verb methods.
"""

from __future__ import annotations

__all__ = ["JsonClient"]

from typing import TYPE_CHECKING, Any

import httpx

from netclient.core.client_logic import BaseJsonClient
from netclient.core.config import DEFAULT_TIMEOUT
from netclient.core.validation import validate_timeout
from netclient.response import Response, materialize_response
from netclient.retry import RetryExecutor
from netclient.verbs import HttpVerb

if TYPE_CHECKING:
    from collections.abc import Mapping
    from types import TracebackType
    from typing import Self

    from netclient.core.path import Params


class JsonClient(BaseJsonClient):
    r"""Synchronous JSON client targeting the paths of one endpoint.

    Every verb method returns a ``Response`` holding the status code and
    the body decoded as JSON. HTTP-level failures (4xx/5xx) are returned,
    not raised: check ``response.code``. Transport-level failures raise
    ``PropagatedFailure`` or ``ExhaustedRetries``.

    The underlying ``httpx.Client`` keeps one connection configuration for
    the lifetime of the instance. When ``client`` is provided, the caller
    owns it and ``close()`` leaves it open.

    Args:
        endpoint: The absolute URI of the remote host. Only the scheme,
            host and port are kept.
        client: Optional httpx.Client instance to use for requests.
            If ``None``, a new client is created with ``timeout`` and
            ``verify``.
        timeout: Maximum seconds to wait for the server response.
            Only used if client is None. Must be > 0.
        verify: Whether TLS certificates are verified. Only used if
            client is None.
        **kwargs: See ``BaseJsonClient`` (config, max_attempts, tries,
            headers, username, password, user_agent, logger).

    Example:
        ```pycon
        >>> from netclient import JsonClient
        >>> with JsonClient("https://api.github.com") as github:  # doctest: +SKIP
        ...     response = github.get("/emojis")
        ...
        >>> response.code  # doctest: +SKIP
        200

        ```
    """

    def __init__(
        self,
        endpoint: str,
        *,
        client: httpx.Client | None = None,
        timeout: float | httpx.Timeout = DEFAULT_TIMEOUT,
        verify: bool = True,
        **kwargs: Any,
    ) -> None:
        super().__init__(endpoint, **kwargs)
        validate_timeout(timeout)
        self._owns_client = client is None
        self._client: httpx.Client = client or httpx.Client(timeout=timeout, verify=verify)

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        r"""Close the underlying httpx client if this instance created
        it."""
        if self._owns_client:
            self._client.close()

    def get(
        self,
        path: str | None = None,
        params: Params | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Response:
        r"""Perform a GET request on ``path``.

        Args:
            path: The path on the endpoint. Any shape is normalized.
            params: Query parameters, as a mapping or ``(key, value)``
                pairs, form-encoded in insertion order.
            headers: Per-call headers, overriding the client headers.

        Returns:
            The status code and the decoded body.

        Example:
            ```pycon
            >>> from netclient import JsonClient
            >>> client = JsonClient("https://api.example.com")
            >>> response = client.get("search", params={"q": "python"})  # doctest: +SKIP

            ```
        """
        return self.request(HttpVerb.GET, path, params, headers)

    def post(
        self,
        path: str | None = None,
        params: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> Response:
        r"""Perform a POST request on ``path``.

        Args:
            path: The path on the endpoint.
            params: The request body. Strings and bytes are sent as is,
                anything else is encoded as JSON.
            headers: Per-call headers.

        Returns:
            The status code and the decoded body.
        """
        return self.request(HttpVerb.POST, path, params, headers)

    def patch(
        self,
        path: str | None = None,
        params: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> Response:
        r"""Perform a PATCH request on ``path``. See ``post``."""
        return self.request(HttpVerb.PATCH, path, params, headers)

    def put(
        self,
        path: str | None = None,
        params: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> Response:
        r"""Perform a PUT request on ``path``. See ``post``."""
        return self.request(HttpVerb.PUT, path, params, headers)

    def delete(
        self,
        path: str | None = None,
        params: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> Response:
        r"""Perform a DELETE request on ``path``. See ``post``."""
        return self.request(HttpVerb.DELETE, path, params, headers)

    def request(
        self,
        verb: HttpVerb,
        path: str | None = None,
        params: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> Response:
        r"""Send a request with automatic retry logic.

        Args:
            verb: The HTTP verb.
            path: The path on the endpoint.
            params: Query parameters for GET, request body otherwise.
            headers: Per-call headers.

        Returns:
            The status code and the decoded body.

        Raises:
            PropagatedFailure: If a transport error must not be retried.
            ExhaustedRetries: If a retryable transport error persists
                after the last attempt.
        """
        prepared = self._prepare(verb, path, params, headers)
        executor = RetryExecutor(
            self._classifier,
            max_attempts=self._config.max_attempts,
            logger=self._logger,
            backoff=self._config.backoff,
        )
        response = executor.execute(
            prepared.method, prepared.url, self._client.request, **prepared.to_kwargs()
        )
        return materialize_response(response, logger=self._logger)
