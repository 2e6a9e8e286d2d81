"""Query string hash (QSH) computation for Atlassian Connect JWT.

The QSH binds a token to one request. It is the SHA-256 hex digest of the
canonical request string ``METHOD&path&query`` described at
https://developer.atlassian.com/cloud/bitbucket/query-string-hash/
"""

import hashlib
from collections import defaultdict
from collections.abc import Iterable, Mapping
from typing import Any
from urllib.parse import parse_qsl, quote, urlsplit

from .utils.urls import base_path as url_base_path

# Query parameter carrying the token itself; never part of its own hash
JWT_PARAMETER = "jwt"

QueryInput = str | Mapping[str, Any] | Iterable[tuple[str, str]] | None


def percent_encode(value: str) -> str:
    """Percent-encode a query component the way Atlassian expects.

    Only RFC 3986 unreserved characters are left as they are. Everything
    else, including space and ``*``, is encoded with uppercase hex digits.

    Args:
        value: The decoded component

    Returns:
        The encoded component
    """
    return quote(value, safe="", encoding="utf-8")


def canonical_method(method: str | None) -> str:
    """Return the HTTP method in upper case."""
    return (method or "").upper()


def canonical_path(path: str | None, base_path: str = "") -> str:
    """Return the canonical path of a request.

    Args:
        path: The request path as sent (may be empty)
        base_path: Path prefix of the product base URL, e.g. ``/wiki``

    Returns:
        The path relative to the base path, always starting with ``/``,
        with every ``&`` replaced by ``%26``
    """
    path = path or "/"
    prefix = base_path.rstrip("/")
    if prefix and (path == prefix or path.startswith(prefix + "/")):
        path = path[len(prefix) :]

    if not path.startswith("/"):
        path = "/" + path

    return path.replace("&", "%26")


def _query_pairs(query: QueryInput) -> list[tuple[str, str]]:
    if not query:
        return []
    if isinstance(query, str):
        return parse_qsl(query.lstrip("?"), keep_blank_values=True)
    if isinstance(query, Mapping):
        pairs = []
        for name, value in query.items():
            if isinstance(value, list | tuple):
                pairs.extend((name, str(item)) for item in value)
            elif value is not None:
                pairs.append((name, str(value)))
        return pairs
    return [(name, str(value)) for name, value in query]


def canonical_query_string(query: QueryInput) -> str:
    """Return the canonical query string of a request.

    A raw query string is percent-decoded first (``+`` meaning space), while
    mappings and pair sequences are taken as already decoded. The ``jwt``
    parameter is dropped, values of repeated parameters are sorted and joined
    with ``,`` and parameters are sorted by name.

    Args:
        query: Raw query string, mapping of name to value(s), or sequence
            of ``(name, value)`` pairs

    Returns:
        The canonical query string, empty when no parameter remains
    """
    grouped: dict[str, list[str]] = defaultdict(list)
    for name, value in _query_pairs(query):
        if name == JWT_PARAMETER:
            continue
        grouped[percent_encode(name)].append(percent_encode(value))

    return "&".join(
        f"{name}={','.join(sorted(values))}"
        for name, values in sorted(grouped.items())
    )


def canonical_request(
    method: str | None,
    path: str | None,
    query: QueryInput = None,
    base_path: str = "",
) -> str:
    """Build the canonical request string ``METHOD&path&query``.

    Args:
        method: HTTP method
        path: Request path as sent
        query: Query parameters, see :func:`canonical_query_string`
        base_path: Path prefix of the product base URL

    Returns:
        The canonical request string
    """
    return "&".join(
        [
            canonical_method(method),
            canonical_path(path, base_path),
            canonical_query_string(query),
        ]
    )


def compute_qsh(
    method: str | None,
    path: str | None,
    query: QueryInput = None,
    base_path: str = "",
) -> str:
    """Compute the query string hash of a request.

    Args:
        method: HTTP method
        path: Request path as sent
        query: Query parameters, see :func:`canonical_query_string`
        base_path: Path prefix of the product base URL

    Returns:
        Lowercase hex SHA-256 digest of the canonical request string
    """
    canonical = canonical_request(method, path, query, base_path)
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()


def request_qsh(request: Any, base_url: str = "") -> str:
    """Compute the query string hash of a prepared request.

    Args:
        request: Anything with ``method`` and ``url`` attributes, typically a
            ``requests.PreparedRequest``
        base_url: Product base URL whose path is stripped from the request path

    Returns:
        Lowercase hex SHA-256 digest
    """
    parts = urlsplit(request.url or "")
    return compute_qsh(
        request.method, parts.path, parts.query, url_base_path(base_url)
    )
