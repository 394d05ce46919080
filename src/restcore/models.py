"""Canonical Pydantic models shared across all restcore modules.

The models fall into two groups:

**Pipeline models** -- the values that flow through a single request:
    :class:`HTTPMethod`, :class:`Request`, :class:`Response`, and
    :class:`TransportResult`.

**Configuration models** -- loaded from a JSON/YAML file by
:func:`~restcore.config.load_config`:
    :class:`AuthConfig`, :class:`TransportConfig`, and :class:`ClientConfig`.

A :class:`Request` is deliberately mutable: request mutators and
authenticators edit it in place during one
:meth:`~restcore.client.RestClient.execute` call. A :class:`Response` is
frozen once the interpreter has built it.
"""

from __future__ import annotations

import enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from restcore.encoding import render_url


# --- Pipeline models ---


class HTTPMethod(str, enum.Enum):
    """HTTP methods supported by the client."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


_BODY_METHODS = (HTTPMethod.POST, HTTPMethod.PUT)


def _header_name(line: str) -> str:
    return line.split(":", 1)[0].strip().lower()


class Request(BaseModel):
    """An outgoing HTTP request.

    Headers are kept as an ordered list of ``"Name: Value"`` lines, which is
    how they are handed to the transport. A line with an empty value (e.g.
    ``"Expect:"``) tells the transport to suppress that header entirely.

    Example::

        request = Request(method="GET", url="https://example.com/node",
                          params={"page": 2})
        request.set_header("Accept", "application/json")
        request.render_url()  # 'https://example.com/node?page=2'
    """

    method: HTTPMethod
    url: str
    params: dict[str, Any] = Field(default_factory=dict)
    headers: list[str] = Field(default_factory=list)
    body: Any = None
    options: dict[str, Any] = Field(
        default_factory=dict,
        description="Transport-specific overrides for this call (e.g. timeout, verify)",
    )

    @model_validator(mode="after")
    def _body_only_for_post_put(self) -> Request:
        if self.body is not None and self.method not in _BODY_METHODS:
            raise ValueError(f"{self.method.value} requests cannot carry a body")
        return self

    def render_url(self) -> str:
        """Return the URL with the encoded query string appended."""
        return render_url(self.url, self.params)

    def get_header(self, name: str) -> Optional[str]:
        """Return the value of the first header called *name* (case-insensitive)."""
        wanted = name.lower()
        for line in self.headers:
            if _header_name(line) == wanted:
                return line.split(":", 1)[1].strip() if ":" in line else ""
        return None

    def remove_header(self, name: str) -> None:
        """Drop every header line called *name* (case-insensitive)."""
        wanted = name.lower()
        self.headers = [line for line in self.headers if _header_name(line) != wanted]

    def set_header(self, name: str, value: Any) -> None:
        """Replace any existing *name* header with ``name: value``."""
        self.remove_header(name)
        text = str(value)
        self.headers.append(f"{name}: {text}" if text else f"{name}:")


class Response(BaseModel):
    """An interpreted HTTP response.

    Built by :func:`~restcore.interpreter.interpret_response` and frozen from
    then on. ``status_code`` and ``status_message`` are ``None`` when the
    header block had no recognisable status line.

    Attributes:
        status_code: Numeric status from the status line.
        status_message: Reason phrase from the status line.
        raw_headers: The header block as received, status line included.
        headers: Parsed ``(name, value)`` pairs in received order.
        body: The body bytes.
        diagnostics: Decoded payloads of ``X-<Platform>-Assertion-<N>`` headers.
    """

    model_config = ConfigDict(frozen=True)

    status_code: Optional[int] = None
    status_message: Optional[str] = None
    raw_headers: str = ""
    headers: tuple[tuple[str, str], ...] = ()
    body: bytes = b""
    diagnostics: tuple[Any, ...] = ()

    def get_header(self, name: str) -> Optional[str]:
        """Return the first header value called *name* (case-insensitive)."""
        wanted = name.lower()
        for key, value in self.headers:
            if key.lower() == wanted:
                return value
        return None

    @property
    def text(self) -> str:
        """The body decoded as UTF-8, with undecodable bytes replaced."""
        return self.body.decode("utf-8", errors="replace")


class TransportResult(BaseModel):
    """What a transport hands back: a raw response, an error, or both."""

    model_config = ConfigDict(frozen=True)

    raw: Optional[bytes] = None
    error: Optional[str] = None


# --- Configuration models ---


class AuthConfig(BaseModel):
    """Authentication section of a :class:`ClientConfig`.

    Example::

        AuthConfig(type="api_key", location="query", name="api_key",
                   source="env:MY_API_KEY")
    """

    type: str = Field(description="Auth type: basic, bearer, api_key")
    source: str = Field(
        description="Credential source: env:VAR, file:/path, value:literal"
    )
    location: str = Field(
        default="header", description="Where an api_key goes: header or query"
    )
    name: Optional[str] = Field(
        default=None, description="Header or query parameter name for api_key auth"
    )


class TransportConfig(BaseModel):
    """Settings for the default :class:`~restcore.transport.HTTPXTransport`."""

    timeout: float = Field(default=30.0, description="Request timeout in seconds")
    verify_ssl: bool = Field(default=True, description="Verify SSL certificates")
    follow_redirects: bool = Field(default=False, description="Follow 3xx responses")


class ClientConfig(BaseModel):
    """Everything needed to build a :class:`~restcore.client.RestClient`.

    See Also:
        :meth:`~restcore.client.RestClient.from_config`
    """

    format: Optional[str] = Field(
        default="json", description="Serialization format: json, pickle, or null for raw bodies"
    )
    headers: list[str] = Field(
        default_factory=list, description="Static 'Name: Value' headers added to every request"
    )
    log_requests: bool = Field(
        default=False, description="Log every outgoing request at INFO level"
    )
    auth: Optional[AuthConfig] = None
    transport: TransportConfig = Field(default_factory=TransportConfig)
