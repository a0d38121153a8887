r"""Response value returned by the clients and its materialization.

The body is decoded as JSON when possible. A body that is not valid
JSON is logged and kept as raw text: decoding never raises.
"""

from __future__ import annotations

__all__ = ["Response", "materialize", "materialize_response"]

import json
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from netclient.core.config import LOG_TAG

if TYPE_CHECKING:
    import httpx


def _reject_constant(name: str) -> Any:
    msg = f"invalid JSON constant {name!r}"
    raise ValueError(msg)


@dataclass(frozen=True)
class Response:
    r"""Status code and body of an HTTP response.

    Attributes:
        code: The HTTP status code.
        body: The body decoded as JSON, the raw text if it is not valid
            JSON, or ``None`` if the body is empty.

    Example:
        ```pycon
        >>> from netclient.response import Response
        >>> response = Response(code=200, body={"id": 1})
        >>> response.ok
        True
        >>> Response(code=404, body=None).ok
        False

        ```
    """

    code: int
    body: Any = None

    @property
    def ok(self) -> bool:
        r"""Indicate if the status code is in the 2xx range."""
        return 200 <= self.code < 300


def materialize(
    status_code: int,
    body: str | None,
    logger: logging.Logger | logging.LoggerAdapter | None = None,
) -> Response:
    r"""Convert a raw status and body into a ``Response``.

    Args:
        status_code: The HTTP status code.
        body: The raw body text.
        logger: The sink of the parse failure warning. Defaults to the
            package logger.

    Returns:
        The materialized response.

    Example:
        ```pycon
        >>> from netclient.response import materialize
        >>> materialize(200, '{"name": "octocat"}')
        Response(code=200, body={'name': 'octocat'})
        >>> materialize(204, "")
        Response(code=204, body=None)

        ```
    """
    if not body:
        return Response(code=int(status_code), body=None)
    try:
        decoded = json.loads(body, parse_constant=_reject_constant)
    except ValueError as exc:
        (logger or logging.getLogger("netclient")).warning(
            f"{LOG_TAG} Parsing response body as JSON failed! Returning raw body. "
            f"Details: {exc}"
        )
        return Response(code=int(status_code), body=body)
    return Response(code=int(status_code), body=decoded)


def materialize_response(
    response: httpx.Response,
    logger: logging.Logger | logging.LoggerAdapter | None = None,
) -> Response:
    r"""Convert an httpx response into a ``Response``.

    Args:
        response: The transport response.
        logger: The sink of the parse failure warning.

    Returns:
        The materialized response.
    """
    return materialize(response.status_code, response.text, logger=logger)
