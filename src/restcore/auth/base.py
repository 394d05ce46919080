"""Abstract base class for request authenticators.

An :class:`Authenticator` receives the mutable
:class:`~restcore.models.Request` right before it is dispatched and adds
whatever credentials the API expects -- usually a header, sometimes a query
parameter. It runs exactly once per request, after any configured
:class:`~restcore.mutators.RequestMutator`.

To implement a new strategy, subclass :class:`Authenticator`, set
:attr:`~Authenticator.auth_type`, and implement
:meth:`~Authenticator.authenticate`.

See Also:
    :mod:`restcore.auth.manager` for building authenticators from config.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from restcore.models import Request


class Authenticator(ABC):
    """Base class for authentication strategies.

    Credentials are handed to the constructor already resolved, so
    :meth:`authenticate` never does I/O and never fails on missing secrets.
    """

    @property
    @abstractmethod
    def auth_type(self) -> str:
        """Return the auth type identifier this authenticator implements.

        Returns:
            A lowercase string such as ``"basic"`` or ``"api_key"``.
        """
        ...

    @abstractmethod
    def authenticate(self, request: Request) -> None:
        """Add credentials to *request* in place.

        Args:
            request: The outgoing request. Headers and params may be edited.
        """
        ...
