"""Transport backed by :mod:`httpx`.

:class:`HTTPXTransport` opens a fresh :class:`httpx.Client` for every call
inside a ``with`` block, so the connection is closed on every exit path and
no state is shared between calls. The :class:`httpx.Response` is rendered
back into the raw ``status line / headers / CRLFCRLF / body`` blob the
interpreter expects.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from restcore.models import TransportConfig, TransportResult
from restcore.transport.base import Transport

logger = logging.getLogger(__name__)

_CRLF = b"\r\n"


def parse_header_lines(lines: list[str]) -> list[tuple[str, str]]:
    """Split ``"Name: Value"`` lines, dropping lines with an empty value.

    Args:
        lines: Header lines from a :class:`~restcore.models.Request`.

    Returns:
        ``(name, value)`` pairs to send, in order.
    """
    pairs: list[tuple[str, str]] = []
    for line in lines:
        name, _, value = line.partition(":")
        name, value = name.strip(), value.strip()
        if name and value:
            pairs.append((name, value))
    return pairs


def render_raw_response(response: httpx.Response) -> bytes:
    """Serialize an :class:`httpx.Response` back into raw HTTP framing.

    Args:
        response: A fully read response.

    Returns:
        Status line, header lines, a blank line, then the body bytes.
    """
    status_line = f"{response.http_version} {response.status_code} {response.reason_phrase}"
    lines = [status_line.encode("ascii", errors="replace")]
    for name, value in response.headers.multi_items():
        lines.append(f"{name}: {value}".encode("iso-8859-1", errors="replace"))
    return _CRLF.join(lines) + _CRLF + _CRLF + response.content


class HTTPXTransport(Transport):
    """Send requests with :class:`httpx.Client`.

    Args:
        timeout: Request timeout in seconds.
        verify_ssl: Verify TLS certificates.
        follow_redirects: Follow 3xx responses.
        transport: Optional :class:`httpx.BaseTransport` handed to the
            client, e.g. :class:`httpx.MockTransport` in tests.

    Per-request ``options`` may override ``timeout`` and ``verify``.
    """

    def __init__(
        self,
        timeout: float = 30.0,
        verify_ssl: bool = True,
        follow_redirects: bool = False,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._timeout = timeout
        self._verify_ssl = verify_ssl
        self._follow_redirects = follow_redirects
        self._transport = transport

    @classmethod
    def from_config(cls, config: TransportConfig) -> HTTPXTransport:
        """Build a transport from a :class:`~restcore.models.TransportConfig`."""
        return cls(
            timeout=config.timeout,
            verify_ssl=config.verify_ssl,
            follow_redirects=config.follow_redirects,
        )

    def send(
        self,
        method: str,
        url: str,
        headers: list[str],
        body: Optional[bytes] = None,
        options: Optional[dict[str, Any]] = None,
    ) -> TransportResult:
        options = options or {}
        client_kwargs: dict[str, Any] = {
            "timeout": options.get("timeout", self._timeout),
            "verify": options.get("verify", self._verify_ssl),
            "follow_redirects": self._follow_redirects,
        }
        if self._transport is not None:
            client_kwargs["transport"] = self._transport

        # UnicodeEncodeError: httpx only accepts ASCII header values.
        try:
            with httpx.Client(**client_kwargs) as client:
                response = client.request(
                    method,
                    url,
                    headers=parse_header_lines(headers),
                    content=body,
                )
                raw = render_raw_response(response)
        except (httpx.HTTPError, httpx.InvalidURL, UnicodeEncodeError) as exc:
            logger.debug("Transport error for %s %s: %s", method, url, exc)
            return TransportResult(raw=None, error=str(exc) or type(exc).__name__)

        return TransportResult(raw=raw)
