"""restcore -- a small, extensible REST client core.

restcore builds an HTTP request from structured parameters, runs it through
optional mutation and authentication hooks, sends it over a transport, and
interprets the raw response -- including ``100 Continue`` frames and
server diagnostics carried in ``X-<Platform>-Assertion-<N>`` headers --
before decoding the body through a pluggable serialization format.

Typical usage::

    from restcore import RestClient
    from restcore.auth import BearerAuthenticator
    from restcore.formats import JSONFormat

    client = RestClient(format=JSONFormat(), authenticator=BearerAuthenticator("tok"))
    article = client.get("https://example.com/node/1", {"_format": "json"})

Modules:
    client: The request pipeline and outcome classification.
    interpreter: Raw response parsing.
    encoding: Query-string encoding.
    models: Pydantic models shared across the package.
    formats, auth, mutators, transport: Pluggable collaborators.
    config: Config files, environment overrides, credential sources.
    exceptions: Exception hierarchy with exit-code mapping.
    app: The ``restcore`` command-line interface.
"""

__version__ = "0.1.0"

from restcore.client import RestClient  # noqa: E402
from restcore.models import HTTPMethod, Request, Response  # noqa: E402

__all__ = ["RestClient", "HTTPMethod", "Request", "Response", "__version__"]
