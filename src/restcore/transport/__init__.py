"""Network transports.

:class:`Transport` is the interface the client dispatches through;
:class:`HTTPXTransport` is the default implementation.
"""

from restcore.transport.base import Transport
from restcore.transport.httpx_transport import HTTPXTransport

__all__ = ["Transport", "HTTPXTransport"]
