"""Exception hierarchy for restcore.

All exceptions inherit from :class:`RestcoreError`, which carries an
``exit_code`` attribute mapped to a constant from :mod:`restcore.exit_codes`.
The CLI entry point catches ``RestcoreError`` and exits with the matching
code; library callers catch the specific subclasses.

Subclass hierarchy::

    RestcoreError (exit 1)
    +-- ConfigurationError      (exit 2)
    +-- InterpretationError     (exit 7)
    +-- TransportError          (exit 6)
    +-- ResponseError           (exit 1)
        +-- DeserializationError    (exit 8)
        +-- ApplicationError        (exit 9)
        +-- HTTPError               (exit 5)

Errors deriving from :class:`ResponseError` carry the interpreted
:class:`~restcore.models.Response`. The response model is frozen, and the
:attr:`ResponseError.response` property hands out a deep copy, so nothing a
caller does with it can reach back into the error.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Union

from restcore.exit_codes import (
    EXIT_APPLICATION_ERROR,
    EXIT_CONFIGURATION_ERROR,
    EXIT_DESERIALIZATION_ERROR,
    EXIT_GENERIC_FAILURE,
    EXIT_HTTP_ERROR,
    EXIT_INTERPRETATION_ERROR,
    EXIT_TRANSPORT_ERROR,
)

if TYPE_CHECKING:
    from restcore.models import Response


class RestcoreError(Exception):
    """Base exception for all restcore errors.

    Args:
        message: Human-readable error description.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class ConfigurationError(RestcoreError):
    """Raised when a client collaborator, config file, or credential source is invalid.

    Always raised while a client is being built, never mid-request.
    """

    exit_code = EXIT_CONFIGURATION_ERROR


class InterpretationError(RestcoreError):
    """Raised when a raw response cannot be split into a header block and a body.

    Args:
        message: Description of what was wrong with the response.
        raw: The raw response exactly as the transport returned it.
    """

    exit_code = EXIT_INTERPRETATION_ERROR

    def __init__(self, message: str, raw: Union[bytes, str, None] = None):
        super().__init__(message)
        self.raw = raw


class TransportError(RestcoreError):
    """Raised when the transport produced no response and reported an error.

    Args:
        error: The transport's own error text.
    """

    exit_code = EXIT_TRANSPORT_ERROR

    def __init__(self, error: str):
        super().__init__(f"Transport failure: {error}")
        self.error = error


class ResponseError(RestcoreError):
    """Base class for failures that carry an interpreted response.

    Args:
        message: Human-readable error description.
        status_code: HTTP status code of the response, if one was parsed.
        response: The interpreted response.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response: Optional[Response] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self._response = response

    @property
    def response(self) -> Optional[Response]:
        """A copy of the response that triggered this error."""
        if self._response is None:
            return None
        return self._response.model_copy(deep=True)


class DeserializationError(ResponseError):
    """Raised when the configured format cannot decode a 200 response body.

    The underlying parse failure is chained as ``__cause__``.
    """

    exit_code = EXIT_DESERIALIZATION_ERROR


class ApplicationError(ResponseError):
    """Raised for a non-200 response carrying server diagnostics.

    The message is the diagnostic texts joined by newlines.
    """

    exit_code = EXIT_APPLICATION_ERROR


class HTTPError(ResponseError):
    """Raised for a non-200 response without diagnostics.

    The message is the status line's reason phrase.
    """

    exit_code = EXIT_HTTP_ERROR
