"""Bearer token authentication.

No token exchange or refresh happens here; the token is used as given.
"""

from __future__ import annotations

from restcore.auth.base import Authenticator
from restcore.exceptions import ConfigurationError
from restcore.models import Request


class BearerAuthenticator(Authenticator):
    """Send ``Authorization: Bearer <token>`` on every request."""

    def __init__(self, token: str) -> None:
        if not token:
            raise ConfigurationError("Bearer auth requires a non-empty token")
        self._token = token

    @property
    def auth_type(self) -> str:
        return "bearer"

    def authenticate(self, request: Request) -> None:
        request.set_header("Authorization", f"Bearer {self._token}")
