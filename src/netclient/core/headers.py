r"""Header merging and authentication injection.

Header names are compared case-insensitively, as HTTP does, but the
casing supplied by the winning source is kept.
"""

from __future__ import annotations

__all__ = ["authorization_value", "basic_auth", "compose_headers", "merge_headers"]

from typing import TYPE_CHECKING

import httpx

from netclient.core.config import DEFAULT_HEADERS

if TYPE_CHECKING:
    from collections.abc import Mapping

AUTHORIZATION = "Authorization"


def merge_headers(*sources: Mapping[str, str] | None) -> dict[str, str]:
    r"""Merge header mappings, later sources winning on collision.

    Args:
        *sources: The header mappings to merge, lowest precedence first.
            ``None`` entries are skipped.

    Returns:
        A new dictionary with the merged headers.

    Example:
        ```pycon
        >>> from netclient.core.headers import merge_headers
        >>> merge_headers({"accept": "application/json"}, {"Accept": "text/plain"})
        {'Accept': 'text/plain'}

        ```
    """
    merged: dict[str, str] = {}
    for source in sources:
        for name, value in (source or {}).items():
            for existing in [key for key in merged if key.lower() == name.lower()]:
                del merged[existing]
            merged[name] = value
    return merged


def authorization_value(bearer_token: str = "", custom_auth_header_value: str = "") -> str:
    r"""Return the ``Authorization`` header value for the token settings.

    The custom header value wins over the bearer token when both are
    set. An empty string means no header must be injected.

    Example:
        ```pycon
        >>> from netclient.core.headers import authorization_value
        >>> authorization_value(bearer_token="abc")
        'Bearer abc'
        >>> authorization_value(bearer_token="abc", custom_auth_header_value="Token token=1")
        'Token token=1'

        ```
    """
    if custom_auth_header_value:
        return custom_auth_header_value
    if bearer_token:
        return f"Bearer {bearer_token}"
    return ""


def compose_headers(
    default_headers: Mapping[str, str] | None = None,
    headers: Mapping[str, str] | None = None,
    *,
    bearer_token: str = "",
    custom_auth_header_value: str = "",
) -> dict[str, str]:
    r"""Compose the headers of an outgoing request.

    The merge order is: built-in JSON defaults, then the client-level
    ``default_headers`` (``User-Agent`` included), then the token
    ``Authorization`` header, then the per-call ``headers``. At most one
    ``Authorization`` value is injected, and an explicit per-call
    ``Authorization`` header is preserved.

    Args:
        default_headers: The headers configured on the client.
        headers: The per-call headers.
        bearer_token: The bearer token, empty when unset.
        custom_auth_header_value: The verbatim ``Authorization`` value,
            empty when unset.

    Returns:
        The final header set. The inputs are not mutated.

    Example:
        ```pycon
        >>> from netclient.core.headers import compose_headers
        >>> compose_headers({"User-Agent": "demo"}, {"X-Id": "1"}, bearer_token="t")
        {'accept': 'application/json', 'Content-Type': 'application/json', 'User-Agent': 'demo', 'Authorization': 'Bearer t', 'X-Id': '1'}

        ```
    """
    value = authorization_value(bearer_token, custom_auth_header_value)
    auth_headers = {AUTHORIZATION: value} if value else None
    return merge_headers(DEFAULT_HEADERS, default_headers, auth_headers, headers)


def basic_auth(username: str, password: str) -> httpx.BasicAuth | None:
    r"""Return the transport-level Basic credentials.

    Basic authentication is skipped only when both the username and the
    password are empty.

    Example:
        ```pycon
        >>> import httpx
        >>> from netclient.core.headers import basic_auth
        >>> basic_auth("", "") is None
        True
        >>> isinstance(basic_auth("", "secret"), httpx.BasicAuth)
        True

        ```
    """
    if not username and not password:
        return None
    return httpx.BasicAuth(username, password)
