"""REST client: request pipeline and outcome classification.

:class:`RestClient` runs every request through the same pipeline:

1. **Mutator** -- the configured :class:`~restcore.mutators.RequestMutator`
   edits the request.
2. **Authenticator** -- the configured :class:`~restcore.auth.Authenticator`
   adds credentials.
3. **Body preparation** -- the body is serialized through the configured
   :class:`~restcore.formats.Format` (or turned into text), and
   ``Content-Type``, ``Content-Length`` and an empty ``Expect`` header are set.
4. **Dispatch** -- the :class:`~restcore.transport.Transport` returns the raw
   response blob.
5. **Interpretation** -- :func:`~restcore.interpreter.interpret_response`
   builds a :class:`~restcore.models.Response`.
6. **Classification** -- a 200 body is returned (deserialized when a format
   is configured); anything else is raised as a typed error.

Example::

    from restcore.client import RestClient
    from restcore.formats import JSONFormat

    client = RestClient(format=JSONFormat())
    node = client.get("https://example.com/node/1", {"_format": "json"})
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from restcore.auth.base import Authenticator
from restcore.auth.manager import create_authenticator
from restcore.exceptions import (
    ApplicationError,
    ConfigurationError,
    DeserializationError,
    HTTPError,
    TransportError,
)
from restcore.formats import Format, get_format
from restcore.interpreter import interpret_response
from restcore.models import ClientConfig, HTTPMethod, Request, Response
from restcore.mutators import ChainMutator, HeaderMutator, LoggingMutator, RequestMutator
from restcore.transport import HTTPXTransport, Transport

logger = logging.getLogger(__name__)

NO_STATUS_MESSAGE = "No usable status line in response"


def _require(value: Any, interface: type, role: str) -> None:
    """Reject *value* unless it is ``None`` or implements *interface*."""
    if value is not None and not isinstance(value, interface):
        raise ConfigurationError(
            f"{role} must implement {interface.__name__}, got {type(value).__name__}"
        )


def _diagnostic_text(diagnostic: Any) -> str:
    """One line of an application error message."""
    if isinstance(diagnostic, str):
        return diagnostic
    if isinstance(diagnostic, dict) and "message" in diagnostic:
        return str(diagnostic["message"])
    if isinstance(diagnostic, list) and diagnostic and isinstance(diagnostic[0], str):
        return diagnostic[0]
    return str(diagnostic)


class RestClient:
    """Synchronous REST client with pluggable format, auth and mutation.

    All collaborators are fixed at construction and only read afterwards, so
    one client can serve any number of sequential calls.

    Args:
        format: Serialization format for request and 200 response bodies.
            When ``None`` bodies are sent as text and returned as raw bytes.
        authenticator: Adds credentials to every request.
        mutator: Edits every request before authentication.
        transport: Performs the network I/O. Defaults to
            :class:`~restcore.transport.HTTPXTransport`.

    Raises:
        ConfigurationError: If a collaborator does not implement its
            interface.
    """

    def __init__(
        self,
        format: Optional[Format] = None,
        authenticator: Optional[Authenticator] = None,
        mutator: Optional[RequestMutator] = None,
        transport: Optional[Transport] = None,
    ) -> None:
        _require(format, Format, "format")
        _require(authenticator, Authenticator, "authenticator")
        _require(mutator, RequestMutator, "mutator")
        _require(transport, Transport, "transport")
        self._format = format
        self._authenticator = authenticator
        self._mutator = mutator
        self._transport = transport or HTTPXTransport()

    @classmethod
    def from_config(
        cls,
        config: ClientConfig,
        transport: Optional[Transport] = None,
    ) -> RestClient:
        """Build a client from a :class:`~restcore.models.ClientConfig`.

        Args:
            config: Format name, static headers, logging flag, auth and
                transport settings.
            transport: Overrides the transport built from ``config.transport``.

        Returns:
            A ready client.

        Raises:
            ConfigurationError: If the format or auth type is unknown, or a
                credential cannot be resolved.
        """
        mutators: list[RequestMutator] = []
        if config.headers:
            mutators.append(HeaderMutator(config.headers))
        if config.log_requests:
            mutators.append(LoggingMutator())

        mutator: Optional[RequestMutator] = None
        if len(mutators) == 1:
            mutator = mutators[0]
        elif mutators:
            mutator = ChainMutator(mutators)

        return cls(
            format=get_format(config.format),
            authenticator=create_authenticator(config.auth) if config.auth else None,
            mutator=mutator,
            transport=transport or HTTPXTransport.from_config(config.transport),
        )

    @property
    def format(self) -> Optional[Format]:
        """The configured serialization format."""
        return self._format

    # ------------------------------------------------------------------ #
    # Public request methods
    # ------------------------------------------------------------------ #

    def get(self, url: str, params: Optional[dict[str, Any]] = None) -> Any:
        """Send a GET request and return the decoded body."""
        return self.execute(Request(method=HTTPMethod.GET, url=url, params=params or {}))

    def post(self, url: str, body: Any = None, params: Optional[dict[str, Any]] = None) -> Any:
        """Send a POST request with *body* and return the decoded body."""
        return self.execute(
            Request(method=HTTPMethod.POST, url=url, params=params or {}, body=body)
        )

    def put(self, url: str, body: Any = None, params: Optional[dict[str, Any]] = None) -> Any:
        """Send a PUT request with *body* and return the decoded body."""
        return self.execute(
            Request(method=HTTPMethod.PUT, url=url, params=params or {}, body=body)
        )

    def delete(self, url: str, params: Optional[dict[str, Any]] = None) -> Any:
        """Send a DELETE request and return the decoded body."""
        return self.execute(Request(method=HTTPMethod.DELETE, url=url, params=params or {}))

    def execute(self, request: Request) -> Any:
        """Run *request* through the full pipeline.

        The request is edited in place by the mutator and authenticator.

        Args:
            request: The request to send.

        Returns:
            For a 200 response, the body deserialized through the configured
            format, or the raw body bytes when no format is configured.

        Raises:
            TransportError: No response was obtained.
            InterpretationError: The raw response was malformed.
            DeserializationError: A 200 body could not be decoded.
            ApplicationError: A non-200 response carried diagnostics.
            HTTPError: Any other non-200 response.
        """
        if self._mutator is not None:
            self._mutator.alter_request(request)
        if self._authenticator is not None:
            self._authenticator.authenticate(request)

        payload = self._prepare_body(request)
        url = request.render_url()
        logger.debug("%s %s", request.method.value, url)

        result = self._transport.send(
            request.method.value, url, list(request.headers), payload, dict(request.options)
        )

        if not result.raw and result.error:
            raise TransportError(result.error)

        response = interpret_response(result.raw or b"")
        logger.debug("%s %s -> %s", request.method.value, url, response.status_code)
        return self._classify(response)

    # ------------------------------------------------------------------ #
    # Private helpers
    # ------------------------------------------------------------------ #

    def _prepare_body(self, request: Request) -> Optional[bytes]:
        """Serialize the request body and set the framing headers.

        Raises:
            ConfigurationError: If a hook put a body on a GET or DELETE request.
        """
        # The interpreter peels 100 Continue frames itself.
        request.set_header("Expect", "")
        if request.body is None:
            return None
        if request.method not in (HTTPMethod.POST, HTTPMethod.PUT):
            raise ConfigurationError(
                f"{request.method.value} requests cannot carry a body (set by a request hook)"
            )

        if self._format is not None:
            request.set_header("Content-Type", self._format.mime_type)
            payload = self._format.serialize(request.body)
        elif isinstance(request.body, bytes):
            payload = request.body
        else:
            payload = str(request.body).encode("utf-8")

        request.set_header("Content-Length", len(payload))
        return payload

    def _classify(self, response: Response) -> Any:
        """Return the 200 body or raise the matching error."""
        if response.status_code == 200:
            if self._format is None:
                return response.body
            try:
                return self._format.deserialize(response.body)
            except Exception as exc:
                raise DeserializationError(
                    f"Cannot decode response body as {self._format.name}: {exc}",
                    status_code=response.status_code,
                    response=response,
                ) from exc

        if response.diagnostics:
            message = "\n".join(_diagnostic_text(d) for d in response.diagnostics)
            raise ApplicationError(
                message, status_code=response.status_code, response=response
            )

        if response.status_code is None:
            message = NO_STATUS_MESSAGE
        else:
            message = response.status_message or f"HTTP {response.status_code}"
        raise HTTPError(
            message,
            status_code=response.status_code,
            response=response,
        )
