"""Abstract base class for transports.

A :class:`Transport` does the network I/O for one request and hands back the
complete raw response -- status line, header lines, a blank line, then the
body -- as a single blob wrapped in a
:class:`~restcore.models.TransportResult`. When no response could be
obtained it returns ``raw=None`` and a human-readable ``error`` instead of
raising.

Header lines arrive verbatim as ``"Name: Value"`` strings. A line with an
empty value (``"Expect:"``) means the header must not be sent at all.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional

from restcore.models import TransportResult


class Transport(ABC):
    """Base class for the component that talks to the network."""

    @abstractmethod
    def send(
        self,
        method: str,
        url: str,
        headers: list[str],
        body: Optional[bytes] = None,
        options: Optional[dict[str, Any]] = None,
    ) -> TransportResult:
        """Perform one HTTP round trip.

        Args:
            method: HTTP method.
            url: Fully rendered URL, query string included.
            headers: ``"Name: Value"`` lines.
            body: Serialized request body, if any.
            options: Per-request overrides understood by this transport.

        Returns:
            The raw response, or an error description.
        """
        ...
