"""Turn a raw HTTP response blob into a :class:`~restcore.models.Response`.

The transport hands back the whole response as one blob: status line,
header lines, a blank line, then the body. :func:`interpret_response` splits
it, reads the status line, collects server diagnostics, and peels off any
``100 Continue`` frames that precede the real response.

Server diagnostics travel in headers named ``X-<Platform>-Assertion-<N>``
(Drupal's ``X-Drupal-Assertion-0`` for instance). Their values are
URL-encoded payloads coming from the network, so :func:`decode_diagnostic`
only ever URL-decodes them and parses JSON. Nothing is unpickled or
evaluated.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any, Union
from urllib.parse import unquote_plus

from restcore.exceptions import InterpretationError
from restcore.models import Response

logger = logging.getLogger(__name__)

HEADER_BODY_SEPARATOR = b"\r\n\r\n"

MAX_CONTINUE_FRAMES = 8
"""How many nested ``100 Continue`` frames are peeled before giving up."""

_STATUS_LINE = re.compile(r"^HTTP/\d(?:\.\d)?\s+(\d{3})(?:\s+(.*))?$")
_DIAGNOSTIC_HEADER = re.compile(r"^X-[A-Za-z0-9_]+-Assertion-\d+$", re.IGNORECASE)


def decode_diagnostic(value: str) -> Any:
    """Decode one diagnostic header value.

    The value is URL-decoded (``+`` counts as a space). If the result is valid
    JSON the parsed object is returned, otherwise the decoded text. JSON
    nested too deeply to parse also comes back as text.

    Args:
        value: The raw header value.

    Returns:
        A JSON value or a string.
    """
    text = unquote_plus(value)
    try:
        return json.loads(text)
    except (ValueError, RecursionError):
        return text


def _parse_header_lines(lines: list[str]) -> list[tuple[str, str]]:
    headers: list[tuple[str, str]] = []
    for line in lines:
        if ":" not in line:
            continue
        name, value = line.split(":", 1)
        headers.append((name.strip(), value.strip()))
    return headers


def _interpret_frame(frame: bytes, raw: Union[bytes, str]) -> tuple[Response, bytes]:
    """Interpret one status frame; also return the body for continue peeling."""
    head, separator, body = frame.partition(HEADER_BODY_SEPARATOR)
    if not separator:
        raise InterpretationError(
            "Malformed response: no blank line between headers and body", raw=raw
        )

    raw_headers = head.decode("iso-8859-1")
    lines = raw_headers.replace("\r\n", "\n").split("\n")
    headers = _parse_header_lines(lines[1:])

    diagnostics = tuple(
        decode_diagnostic(value)
        for name, value in headers
        if _DIAGNOSTIC_HEADER.match(name)
    )

    status_code = None
    status_message = None
    match = _STATUS_LINE.match(lines[0].strip())
    if match:
        status_code = int(match.group(1).strip())
        status_message = (match.group(2) or "").strip()

    response = Response(
        status_code=status_code,
        status_message=status_message,
        raw_headers=raw_headers,
        headers=tuple(headers),
        body=body,
        diagnostics=diagnostics,
    )
    return response, body


def interpret_response(raw: Union[bytes, str]) -> Response:
    """Interpret a complete raw HTTP response.

    A ``100 Continue`` status line means the body is itself a full response;
    that frame is dropped and the body is interpreted in its place, up to
    :data:`MAX_CONTINUE_FRAMES` times.

    Args:
        raw: Status line, headers, ``CRLFCRLF`` and body. A ``str`` is
            encoded as UTF-8 first.

    Returns:
        The interpreted response. ``status_code`` is ``None`` when the first
        line is not an HTTP status line.

    Raises:
        InterpretationError: If a frame has no header/body separator or
            there are too many continue frames.
    """
    data = raw.encode("utf-8") if isinstance(raw, str) else raw
    frame = data
    for _ in range(MAX_CONTINUE_FRAMES + 1):
        response, body = _interpret_frame(frame, raw)
        if response.status_code != 100:
            return response
        logger.debug("Skipping 100 Continue frame")
        frame = body
    raise InterpretationError(
        f"Malformed response: more than {MAX_CONTINUE_FRAMES} '100 Continue' frames",
        raw=raw,
    )
