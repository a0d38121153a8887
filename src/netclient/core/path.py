r"""Path and query normalization.

Any path shape is coerced into a canonical absolute path; nothing is
ever rejected. Only the query string is encoded here: request bodies
are the client's concern.
"""

from __future__ import annotations

__all__ = ["Params", "build_target", "encode_query", "normalize_path"]

from collections.abc import Iterable, Mapping
from typing import Any
from urllib.parse import urlencode

Params = Mapping[Any, Any] | Iterable[tuple[Any, Any]]


def normalize_path(path: str | None) -> str:
    r"""Return the canonical absolute form of ``path``.

    ``None``, empty and whitespace-only paths become ``"/"``. Incidental
    whitespace is trimmed and a leading ``/`` is prepended when missing.

    Args:
        path: The user-supplied path.

    Returns:
        The canonical absolute path.

    Example:
        ```pycon
        >>> from netclient.core.path import normalize_path
        >>> normalize_path(None)
        '/'
        >>> normalize_path("  users/42 ")
        '/users/42'
        >>> normalize_path("/emojis")
        '/emojis'

        ```
    """
    path = (path or "").strip()
    if not path.startswith("/"):
        path = "/" + path
    return path


def encode_query(params: Params | None) -> str:
    r"""Form-encode ``params`` as an ``application/x-www-form-urlencoded``
    query string.

    Keys are coerced to strings and the insertion order of the input is
    preserved. Sequence values (other than strings) expand to repeated
    keys.

    Args:
        params: A mapping or an iterable of ``(key, value)`` pairs.

    Returns:
        The encoded query string, without the leading ``?``. An empty
        string is returned when there are no parameters.

    Example:
        ```pycon
        >>> from netclient.core.path import encode_query
        >>> encode_query({"q": "hello world", 1: "x"})
        'q=hello+world&1=x'
        >>> encode_query([("tag", "a"), ("tag", "b")])
        'tag=a&tag=b'

        ```
    """
    if not params:
        return ""
    pairs = params.items() if isinstance(params, Mapping) else params
    return urlencode([(str(key), value) for key, value in pairs], doseq=True)


def build_target(path: str | None, params: Params | None = None) -> str:
    r"""Build the canonical path, with its query string when ``params``
    is not empty.

    Args:
        path: The user-supplied path.
        params: Optional query parameters.

    Returns:
        The canonical path and query.

    Example:
        ```pycon
        >>> from netclient.core.path import build_target
        >>> build_target("search", {"q": "python", "page": 2})
        '/search?q=python&page=2'
        >>> build_target("/x", {})
        '/x'

        ```
    """
    path = normalize_path(path)
    query = encode_query(params)
    if not query:
        return path
    return f"{path}?{query}"
