r"""Shared client logic for both sync and async JSON clients.

This module provides the state and request preparation shared by
``JsonClient`` and ``AsyncJsonClient``: headers, authentication,
logger, user agent and failure classification.

The mutable state of a client is not synchronized. Sharing one client
instance between threads or tasks that call setters and verbs
concurrently requires external synchronization.
"""

from __future__ import annotations

__all__ = ["BaseJsonClient", "PreparedRequest", "encode_body"]

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, NoReturn

from netclient.core.config import DEFAULT_HEADERS, DEFAULT_USER_AGENT, ClientConfig
from netclient.core.endpoint import parse_endpoint
from netclient.core.headers import basic_auth, compose_headers, merge_headers
from netclient.core.path import build_target, normalize_path
from netclient.exceptions import UnsupportedOperationError
from netclient.retry.classifier import FailureClassifier

if TYPE_CHECKING:
    import httpx

    from netclient.core.path import Params
    from netclient.retry.classifier import FailureKind
    from netclient.verbs import HttpVerb


@dataclass(frozen=True)
class PreparedRequest:
    r"""Everything the transport needs to send one request.

    Attributes:
        method: The HTTP method name.
        url: The absolute target URL, query string included.
        headers: The composed headers.
        content: The request body, if any.
        auth: The Basic credentials, if any.
    """

    method: str
    url: str
    headers: dict[str, str]
    content: str | bytes | None = None
    auth: httpx.BasicAuth | None = None

    def to_kwargs(self) -> dict[str, Any]:
        r"""Return the keyword arguments of ``httpx.Client.request``
        other than the method and the URL."""
        kwargs: dict[str, Any] = {"headers": self.headers}
        if self.content is not None:
            kwargs["content"] = self.content
        if self.auth is not None:
            kwargs["auth"] = self.auth
        return kwargs


def encode_body(params: Any) -> str | bytes | None:
    r"""Encode the parameters of a body-carrying verb.

    Strings and bytes are sent verbatim, empty parameters send no body
    and anything else is encoded as JSON.

    Example:
        ```pycon
        >>> from netclient.core.client_logic import encode_body
        >>> encode_body({"name": "octocat"})
        '{"name": "octocat"}'
        >>> encode_body('{"raw": true}')
        '{"raw": true}'
        >>> encode_body({}) is None
        True

        ```
    """
    if isinstance(params, (str, bytes)):
        return params
    if params is None or (isinstance(params, (Mapping, list, tuple)) and not params):
        return None
    if isinstance(params, Mapping):
        params = dict(params)
    return json.dumps(params)


class BaseJsonClient:
    r"""State and request preparation shared by the JSON clients.

    Args:
        endpoint: The absolute URI of the remote host. Only the scheme,
            host and port are kept.
        config: Optional ClientConfig instance for retry configuration.
            If ``None``, a default ClientConfig is used.
        max_attempts: Total number of attempts, overriding
            ``config.max_attempts`` when provided.
        tries: Alias of ``max_attempts``.
        headers: Headers sent with every request, merged over the JSON
            defaults.
        username: The Basic authentication username.
        password: The Basic authentication password.
        user_agent: The ``User-Agent`` header value. A ``User-Agent``
            entry in ``headers`` takes precedence.
        logger: The sink of the log events. Defaults to the
            ``netclient`` logger.
    """

    def __init__(
        self,
        endpoint: str,
        *,
        config: ClientConfig | None = None,
        max_attempts: int | None = None,
        tries: int | None = None,
        headers: Mapping[str, str] | None = None,
        username: str | None = "",
        password: str | None = "",
        user_agent: str | None = DEFAULT_USER_AGENT,
        logger: logging.Logger | logging.LoggerAdapter | None = None,
    ) -> None:
        self._endpoint = parse_endpoint(endpoint)
        self._config = (config or ClientConfig()).merge(
            max_attempts=max_attempts if max_attempts is not None else tries
        )
        self._classifier = self._build_classifier()
        self._default_headers = merge_headers(DEFAULT_HEADERS, headers)
        self._user_agent = ""
        self._bearer_token = ""
        self._auth_token_header = ""
        self.set_basic_auth(username, password)
        self.set_logger(logger)
        header_agent = next(
            (value for name, value in (headers or {}).items() if name.lower() == "user-agent"),
            None,
        )
        self.set_user_agent(header_agent or user_agent or "")

    @property
    def endpoint(self) -> str:
        r"""The origin targeted by the client."""
        return self._endpoint

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def max_attempts(self) -> int:
        return self._config.max_attempts

    @property
    def classifier(self) -> FailureClassifier:
        return self._classifier

    @property
    def default_headers(self) -> dict[str, str]:
        r"""A copy of the headers sent with every request."""
        return dict(self._default_headers)

    @property
    def username(self) -> str:
        return self._username

    @property
    def password(self) -> str:
        return self._password

    @property
    def user_agent(self) -> str:
        return self._user_agent

    @property
    def bearer_token(self) -> str:
        return self._bearer_token

    @property
    def auth_token_header(self) -> str:
        return self._auth_token_header

    @property
    def logger(self) -> logging.Logger | logging.LoggerAdapter:
        return self._logger

    @property
    def retryable_failures(self) -> tuple[FailureKind, ...]:
        r"""The failure kinds that trigger a retry."""
        return self._config.retryable_failures

    @retryable_failures.setter
    def retryable_failures(self, kinds: tuple[FailureKind, ...]) -> None:
        self._config = self._config.merge(retryable_failures=tuple(kinds))
        self._classifier = self._build_classifier()

    @property
    def propagate_failures(self) -> tuple[FailureKind, ...]:
        r"""The failure kinds that stop the retry loop. They take
        priority over ``retryable_failures``."""
        return self._config.propagate_failures

    @propagate_failures.setter
    def propagate_failures(self, kinds: tuple[FailureKind, ...]) -> None:
        self._config = self._config.merge(propagate_failures=tuple(kinds))
        self._classifier = self._build_classifier()

    def set_logger(self, logger: logging.Logger | logging.LoggerAdapter | None = None) -> None:
        r"""Replace the sink of the log events.

        Args:
            logger: The new logger. If ``None``, the ``netclient``
                logger is used.
        """
        self._logger = logger or logging.getLogger("netclient")

    def set_user_agent(self, user_agent: str) -> str:
        r"""Set the ``User-Agent`` header sent with every subsequent
        request.

        Args:
            user_agent: The header value. An empty value removes the
                header.

        Returns:
            The newly assigned user agent.
        """
        self._user_agent = user_agent
        self._default_headers = merge_headers(
            self._default_headers, {"User-Agent": user_agent}
        )
        if not user_agent:
            del self._default_headers["User-Agent"]
        return self._user_agent

    def set_basic_auth(self, username: str | None, password: str | None) -> None:
        r"""Set the Basic authentication credentials.

        Basic authentication is skipped only when both values are empty.
        """
        self._username = username or ""
        self._password = password or ""

    def set_bearer_auth(self, token: str = "") -> str:
        r"""Set the bearer token sent in the ``Authorization`` header.

        Args:
            token: The bearer token. An empty value unsets it.

        Returns:
            The newly assigned token.
        """
        self._bearer_token = token or ""
        return self._bearer_token

    def set_token_auth(self, header_value: str = "") -> str:
        r"""Set a custom ``Authorization`` header value.

        It takes precedence over the bearer token when both are set.

        Args:
            header_value: The full header value (e.g. ``Token token=123``).
                An empty value unsets it.

        Returns:
            The newly assigned header value.
        """
        self._auth_token_header = header_value or ""
        return self._auth_token_header

    def get_html(self, path: str | None = None, **kwargs: Any) -> NoReturn:  # noqa: ARG002
        raise UnsupportedOperationError("get_html")

    def post_form(self, path: str | None = None, **kwargs: Any) -> NoReturn:  # noqa: ARG002
        raise UnsupportedOperationError("post_form")

    def put_form(self, path: str | None = None, **kwargs: Any) -> NoReturn:  # noqa: ARG002
        raise UnsupportedOperationError("put_form")

    def _build_classifier(self) -> FailureClassifier:
        return FailureClassifier(
            retryable=self._config.retryable_failures,
            propagate=self._config.propagate_failures,
        )

    def _prepare(
        self,
        verb: HttpVerb,
        path: str | None,
        params: Params | str | bytes | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> PreparedRequest:
        if verb.has_body:
            target, content = normalize_path(path), encode_body(params)
        else:
            target, content = build_target(path, params), None
        return PreparedRequest(
            method=verb.method,
            url=self._endpoint + target,
            headers=compose_headers(
                self._default_headers,
                headers,
                bearer_token=self._bearer_token,
                custom_auth_header_value=self._auth_token_header,
            ),
            content=content,
            auth=basic_auth(self._username, self._password),
        )
