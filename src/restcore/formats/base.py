"""Abstract base class for serialization formats.

A :class:`Format` converts between application data and the bytes that go
over the wire, and names the MIME type of those bytes. The
:class:`~restcore.client.RestClient` uses the configured format in both
directions: request bodies are serialized through it (and tagged with its
``Content-Type``), and 200 response bodies are deserialized through it.

Formats must be stateless. One instance is shared by every call a client
makes.

See Also:
    :func:`restcore.formats.get_format` for looking formats up by name.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class Format(ABC):
    """Base class for serialization formats.

    Subclasses provide :attr:`name`, :attr:`mime_type`, :meth:`serialize`
    and :meth:`deserialize`.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier used in config files (e.g. ``"json"``)."""
        ...

    @property
    @abstractmethod
    def mime_type(self) -> str:
        """MIME type sent as ``Content-Type`` for serialized bodies."""
        ...

    @abstractmethod
    def serialize(self, data: Any) -> bytes:
        """Encode *data* for a request body.

        Args:
            data: Application data.

        Returns:
            The encoded bytes.
        """
        ...

    @abstractmethod
    def deserialize(self, payload: bytes) -> Any:
        """Decode a response body.

        Args:
            payload: The raw body bytes.

        Returns:
            The decoded application data.

        Raises:
            Exception: Whatever the underlying decoder raises on malformed
                input. The client wraps it in a
                :class:`~restcore.exceptions.DeserializationError`.
        """
        ...
