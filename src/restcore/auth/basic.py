"""HTTP Basic authentication.

Sends ``Authorization: Basic <base64(username:password)>`` per :rfc:`7617`.
"""

from __future__ import annotations

import base64

from restcore.auth.base import Authenticator
from restcore.exceptions import ConfigurationError
from restcore.models import Request


class BasicAuthenticator(Authenticator):
    """Authenticate with a username and password.

    Args:
        username: Account name. Must not contain a colon.
        password: Account password.

    Raises:
        ConfigurationError: If *username* contains a colon.
    """

    def __init__(self, username: str, password: str) -> None:
        if ":" in username:
            raise ConfigurationError("Basic auth username must not contain ':'")
        raw = f"{username}:{password}"
        self._encoded = base64.b64encode(raw.encode("utf-8")).decode("ascii")

    @classmethod
    def from_credential(cls, credential: str) -> BasicAuthenticator:
        """Build from a ``"username:password"`` string.

        Raises:
            ConfigurationError: If the colon separator is missing.
        """
        if ":" not in credential:
            raise ConfigurationError(
                "Basic auth credential must be in 'username:password' format "
                "(colon separator is required)"
            )
        username, password = credential.split(":", 1)
        return cls(username, password)

    @property
    def auth_type(self) -> str:
        return "basic"

    def authenticate(self, request: Request) -> None:
        request.set_header("Authorization", f"Basic {self._encoded}")
