"""Pluggable request authentication.

- :class:`Authenticator` -- abstract base class for strategies.
- :class:`BasicAuthenticator`, :class:`BearerAuthenticator`,
  :class:`APIKeyAuthenticator` -- built-in strategies.
- :class:`AuthManager` / :func:`create_authenticator` -- build an
  authenticator from an :class:`~restcore.models.AuthConfig`.

Typical usage::

    from restcore.auth import BearerAuthenticator
    from restcore.client import RestClient

    client = RestClient(authenticator=BearerAuthenticator("tok123"))
"""

from restcore.auth.api_key import APIKeyAuthenticator
from restcore.auth.base import Authenticator
from restcore.auth.basic import BasicAuthenticator
from restcore.auth.bearer import BearerAuthenticator
from restcore.auth.manager import AuthManager, create_authenticator, create_default_manager

__all__ = [
    "Authenticator",
    "APIKeyAuthenticator",
    "BasicAuthenticator",
    "BearerAuthenticator",
    "AuthManager",
    "create_authenticator",
    "create_default_manager",
]
