"""Built-in request mutators.

* :class:`HeaderMutator` -- adds a fixed set of header lines.
* :class:`LoggingMutator` -- logs each outgoing request.
* :class:`ChainMutator` -- runs several mutators in order, so a client that
  accepts a single mutator can still use many.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from restcore.exceptions import ConfigurationError
from restcore.models import Request
from restcore.mutators.base import RequestMutator

logger = logging.getLogger(__name__)


class HeaderMutator(RequestMutator):
    """Set static ``"Name: Value"`` headers on every request.

    An existing header with the same name is replaced.

    Args:
        headers: Header lines such as ``"Accept: application/json"``.

    Raises:
        ConfigurationError: If a line has no ``:`` separator.
    """

    def __init__(self, headers: Iterable[str]) -> None:
        self._headers: list[tuple[str, str]] = []
        for line in headers:
            if ":" not in line:
                raise ConfigurationError(
                    f"Invalid header '{line}': expected 'Name: Value'"
                )
            name, value = line.split(":", 1)
            self._headers.append((name.strip(), value.strip()))

    def alter_request(self, request: Request) -> None:
        for name, value in self._headers:
            request.set_header(name, value)


class LoggingMutator(RequestMutator):
    """Log the method and rendered URL of each request.

    Args:
        level: Logging level used for the record.
        log: Logger to write to. Defaults to this module's logger.
    """

    def __init__(self, level: int = logging.INFO, log: logging.Logger | None = None) -> None:
        self._level = level
        self._logger = log or logger

    def alter_request(self, request: Request) -> None:
        self._logger.log(self._level, "%s %s", request.method.value, request.render_url())
        for line in request.headers:
            self._logger.debug("  %s", line)


class ChainMutator(RequestMutator):
    """Apply several mutators in registration order.

    Each mutator sees the request as left by the previous one.

    Raises:
        ConfigurationError: If any element is not a :class:`RequestMutator`.
    """

    def __init__(self, mutators: Iterable[RequestMutator]) -> None:
        self._mutators = list(mutators)
        for mutator in self._mutators:
            if not isinstance(mutator, RequestMutator):
                raise ConfigurationError(
                    f"{type(mutator).__name__} does not implement RequestMutator"
                )

    def __len__(self) -> int:
        return len(self._mutators)

    def alter_request(self, request: Request) -> None:
        for mutator in self._mutators:
            mutator.alter_request(request)
