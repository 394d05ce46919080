"""Shared test fixtures for restcore.

Provides a recording transport that returns canned raw responses, helpers
for building raw HTTP response blobs, and automatic reset of the global
output manager between tests.
"""

from __future__ import annotations

from typing import Any, Optional

import pytest

from restcore.models import TransportResult
from restcore.output import reset_output
from restcore.transport.base import Transport


# ---------------------------------------------------------------------------
# Auto-reset global output state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_output_between_tests() -> None:
    """Reset the global OutputManager after every test.

    The OutputManager caches references to sys.stdout/sys.stderr. When
    Typer's CliRunner swaps those streams out for a test the cached
    references go stale, so a fresh manager is forced on next use.
    """
    yield
    reset_output()


# ---------------------------------------------------------------------------
# Raw response helpers
# ---------------------------------------------------------------------------


def build_raw(
    status: str = "200 OK",
    headers: Optional[list[str]] = None,
    body: bytes = b"",
    version: str = "HTTP/1.1",
) -> bytes:
    """Assemble a raw HTTP response blob."""
    lines = [f"{version} {status}", *(headers or [])]
    return ("\r\n".join(lines) + "\r\n\r\n").encode("iso-8859-1") + body


class RecordingTransport(Transport):
    """Transport that records every call and returns a canned result."""

    def __init__(self, raw: Optional[bytes] = None, error: Optional[str] = None) -> None:
        self.result = TransportResult(raw=raw, error=error)
        self.calls: list[dict[str, Any]] = []

    def send(self, method, url, headers, body=None, options=None) -> TransportResult:
        self.calls.append(
            {
                "method": method,
                "url": url,
                "headers": list(headers),
                "body": body,
                "options": options,
            }
        )
        return self.result

    @property
    def last(self) -> dict[str, Any]:
        return self.calls[-1]


@pytest.fixture
def raw_response():
    """Factory assembling raw HTTP response blobs (see :func:`build_raw`)."""
    return build_raw


@pytest.fixture
def make_transport():
    """Factory for :class:`RecordingTransport` instances."""
    return RecordingTransport


@pytest.fixture
def ok_transport() -> RecordingTransport:
    """A transport that answers ``200 OK`` with a small JSON body."""
    return RecordingTransport(
        raw=build_raw(headers=["Content-Type: application/json"], body=b'{"a": 1}')
    )


@pytest.fixture
def cli_runner():
    """Typer CLI test runner."""
    from typer.testing import CliRunner

    return CliRunner()
