"""API key authentication in a header or a query parameter."""

from __future__ import annotations

from typing import Optional

from restcore.auth.base import Authenticator
from restcore.exceptions import ConfigurationError
from restcore.models import Request

_DEFAULT_NAMES = {"header": "X-API-Key", "query": "api_key"}


class APIKeyAuthenticator(Authenticator):
    """Place an API key in a request header or query parameter.

    Args:
        key: The API key value.
        location: ``"header"`` or ``"query"``.
        name: Header or parameter name. Defaults to ``X-API-Key`` for
            headers and ``api_key`` for query parameters.

    Raises:
        ConfigurationError: If *location* is not supported.
    """

    def __init__(self, key: str, location: str = "header", name: Optional[str] = None) -> None:
        if location not in _DEFAULT_NAMES:
            raise ConfigurationError(
                f"Invalid location '{location}': must be 'header' or 'query'"
            )
        self._key = key
        self._location = location
        self._name = name or _DEFAULT_NAMES[location]

    @property
    def auth_type(self) -> str:
        return "api_key"

    def authenticate(self, request: Request) -> None:
        if self._location == "header":
            request.set_header(self._name, self._key)
        else:
            request.params[self._name] = self._key
