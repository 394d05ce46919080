"""Abstract base class for request mutators.

A :class:`RequestMutator` is a pre-flight hook: it receives the mutable
:class:`~restcore.models.Request` before authentication and dispatch and may
change any field -- add headers, sign the request, rewrite the URL, or just
log it. The client invokes it exactly once per request.

Example::

    class TraceMutator(RequestMutator):
        def alter_request(self, request):
            request.set_header("X-Trace-Id", new_trace_id())
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from restcore.models import Request


class RequestMutator(ABC):
    """Base class for pre-flight request edits."""

    @abstractmethod
    def alter_request(self, request: Request) -> None:
        """Edit *request* in place.

        Args:
            request: The outgoing request.
        """
        ...
