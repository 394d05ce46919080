"""Query-string encoding for request URLs.

Everything here is a pure function with no module state, so it can be used
without a :class:`~restcore.client.RestClient`::

    >>> render_url("https://example.com/node", {"q": "a b", "tags": ["x", "y"]})
    'https://example.com/node?q=a%20b&tags[]=x&tags[]=y'

Keys and values are percent-encoded with the RFC 3986 unreserved set left
alone (``A-Z a-z 0-9 - . _ ~``). Spaces always come out as ``%20``, never
``+``, and ``~`` is never escaped.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Union
from urllib.parse import quote

_ARRAY_SUFFIX = "[]"


def _scalar_text(value: Any) -> Union[str, bytes]:
    """Text form of a single query value. Bytes are left for quote() as is."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, bytes):
        return value
    return str(value)


def rfc3986_encode(value: Any) -> str:
    """Percent-encode *value* for use as a query key or value.

    Args:
        value: A scalar. ``None`` encodes to ``""`` and booleans to ``"1"``/``"0"``.

    Returns:
        The encoded text. Reserved characters are escaped, ``~`` is kept
        literal and a space becomes ``%20``.
    """
    encoded = quote(_scalar_text(value), safe="")
    # quote() already keeps "~" on current interpreters; older ones escaped it.
    return encoded.replace("%7E", "~")


def _pairs(params: Mapping[str, Any]):
    for key, value in params.items():
        if isinstance(value, (list, tuple)):
            name = rfc3986_encode(key) + _ARRAY_SUFFIX
            for item in value:
                yield f"{name}={rfc3986_encode(item)}"
        else:
            yield f"{rfc3986_encode(key)}={rfc3986_encode(value)}"


def build_query(params: Mapping[str, Any]) -> str:
    """Encode *params* as a query string, preserving insertion order.

    Sequence values (``list`` or ``tuple``) expand to one ``key[]=value``
    pair per element, in element order.

    Args:
        params: Mapping of key to scalar or sequence of scalars.

    Returns:
        The ``&``-joined query string without a leading ``?``.
    """
    return "&".join(_pairs(params))


def render_url(url: str, params: Mapping[str, Any] | None = None) -> str:
    """Append the encoded *params* to *url*.

    Args:
        url: The base URL. Returned untouched when *params* is empty.
        params: Query parameters.

    Returns:
        The final URL.
    """
    if not params:
        return url
    query = build_query(params)
    if not query:
        return url
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{query}"
