"""Build authenticators from :class:`~restcore.models.AuthConfig`.

The :class:`AuthManager` maps auth-type strings (``"basic"``, ``"bearer"``,
``"api_key"``) to factories that turn an :class:`~restcore.models.AuthConfig`
into a ready :class:`~restcore.auth.base.Authenticator`. Credentials are
resolved while the authenticator is built, so a missing environment variable
or unreadable key file surfaces as a
:class:`~restcore.exceptions.ConfigurationError` before any request is sent.

For most use cases, call :func:`create_authenticator`.
"""

from __future__ import annotations

from typing import Callable

from restcore.auth.api_key import APIKeyAuthenticator
from restcore.auth.base import Authenticator
from restcore.auth.basic import BasicAuthenticator
from restcore.auth.bearer import BearerAuthenticator
from restcore.config import resolve_credential
from restcore.exceptions import ConfigurationError
from restcore.models import AuthConfig

AuthFactory = Callable[[AuthConfig, str], Authenticator]


class AuthManager:
    """Registry of authenticator factories keyed by auth type.

    Example::

        manager = AuthManager()
        manager.register("bearer", lambda cfg, cred: BearerAuthenticator(cred))
        authenticator = manager.create(AuthConfig(type="bearer", source="env:TOKEN"))
    """

    def __init__(self) -> None:
        self._factories: dict[str, AuthFactory] = {}

    def register(self, auth_type: str, factory: AuthFactory) -> None:
        """Register *factory* for *auth_type*, replacing any previous one.

        Args:
            auth_type: The identifier used in ``AuthConfig.type``.
            factory: Called with the config and the resolved credential.
        """
        self._factories[auth_type] = factory

    @property
    def auth_types(self) -> list[str]:
        """Registered auth types, sorted."""
        return sorted(self._factories)

    def create(self, auth_config: AuthConfig) -> Authenticator:
        """Resolve the credential and build the matching authenticator.

        Args:
            auth_config: The auth section of a client config.

        Returns:
            A configured :class:`~restcore.auth.base.Authenticator`.

        Raises:
            ConfigurationError: If the type is unknown or the credential
                cannot be resolved.
        """
        factory = self._factories.get(auth_config.type)
        if factory is None:
            available = ", ".join(self.auth_types) or "(none)"
            raise ConfigurationError(
                f"No authenticator registered for type '{auth_config.type}'. "
                f"Available types: {available}"
            )
        credential = resolve_credential(auth_config.source)
        return factory(auth_config, credential)


def create_default_manager() -> AuthManager:
    """Return an :class:`AuthManager` with every built-in authenticator registered."""
    manager = AuthManager()
    manager.register("basic", lambda cfg, cred: BasicAuthenticator.from_credential(cred))
    manager.register("bearer", lambda cfg, cred: BearerAuthenticator(cred))
    manager.register(
        "api_key",
        lambda cfg, cred: APIKeyAuthenticator(cred, location=cfg.location, name=cfg.name),
    )
    return manager


def create_authenticator(auth_config: AuthConfig) -> Authenticator:
    """Build an authenticator for *auth_config* using the built-in types."""
    return create_default_manager().create(auth_config)
