r"""HTTP verbs supported by the clients."""

from __future__ import annotations

__all__ = ["HttpVerb"]

import enum


class HttpVerb(enum.Enum):
    r"""The closed set of verbs of the JSON clients.

    Each verb carries its HTTP method name and whether its parameters
    travel in the request body (``True``) or in the query string
    (``False``).

    Example:
        ```pycon
        >>> from netclient.verbs import HttpVerb
        >>> HttpVerb.GET.method, HttpVerb.GET.has_body
        ('GET', False)
        >>> HttpVerb.PATCH.has_body
        True

        ```
    """

    GET = ("GET", False)
    POST = ("POST", True)
    PATCH = ("PATCH", True)
    PUT = ("PUT", True)
    DELETE = ("DELETE", True)

    def __init__(self, method: str, has_body: bool) -> None:
        self.method = method
        self.has_body = has_body
