r"""Endpoint parsing for the transport layer."""

from __future__ import annotations

__all__ = ["parse_endpoint"]

import httpx

SUPPORTED_SCHEMES = ("http", "https")


def parse_endpoint(endpoint: str) -> str:
    """Reduce an absolute URI to its origin.

    Only the scheme, host and port are kept; any path, query or
    fragment is discarded.

    Args:
        endpoint: The absolute URI of the remote host.

    Returns:
        The origin, without a trailing slash.

    Raises:
        ValueError: If the endpoint is not an absolute http(s) URI.

    Example:
        ```pycon
        >>> from netclient.core.endpoint import parse_endpoint
        >>> parse_endpoint("https://api.github.com/emojis?page=1")
        'https://api.github.com'
        >>> parse_endpoint("http://localhost:8080")
        'http://localhost:8080'

        ```
    """
    try:
        url = httpx.URL(endpoint)
    except httpx.InvalidURL as exc:
        msg = f"endpoint must be an absolute http(s) URI, got {endpoint!r}"
        raise ValueError(msg) from exc
    if url.scheme not in SUPPORTED_SCHEMES or not url.host:
        msg = f"endpoint must be an absolute http(s) URI, got {endpoint!r}"
        raise ValueError(msg)
    return f"{url.scheme}://{url.netloc.decode('ascii')}"
