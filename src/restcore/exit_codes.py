"""Numeric process exit codes following `clig.dev <https://clig.dev/>`_ conventions.

Each constant maps to one failure class of the request/response pipeline and
is referenced by the corresponding :class:`~restcore.exceptions.RestcoreError`
subclass. Shell wrappers can inspect the exit code of the ``restcore`` CLI to
tell a transport failure from an HTTP error without parsing stderr.

Example::

    $ restcore get https://example.com/missing
    $ echo $?
    5   # EXIT_HTTP_ERROR -- the server answered with a non-200 status
"""

EXIT_SUCCESS = 0
"""The request completed with HTTP 200."""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred."""

EXIT_CONFIGURATION_ERROR = 2
"""A collaborator, config file, or credential source was invalid."""

EXIT_HTTP_ERROR = 5
"""The server answered with a non-200 status and no diagnostics."""

EXIT_TRANSPORT_ERROR = 6
"""No response was obtained (timeout, DNS failure, connection refused)."""

EXIT_INTERPRETATION_ERROR = 7
"""The raw response could not be split into headers and body."""

EXIT_DESERIALIZATION_ERROR = 8
"""A 200 response body could not be decoded by the configured format."""

EXIT_APPLICATION_ERROR = 9
"""The server answered with a non-200 status and embedded diagnostics."""
