"""Native Python serialization format backed by :mod:`pickle`.

Unpickling runs arbitrary code embedded in the payload. Only point a client
using this format at servers you control.
"""

from __future__ import annotations

import pickle
from typing import Any

from restcore.formats.base import Format


class PickleFormat(Format):
    """Exchange bodies as pickled Python objects."""

    def __init__(self, protocol: int = pickle.HIGHEST_PROTOCOL) -> None:
        self._protocol = protocol

    @property
    def name(self) -> str:
        return "pickle"

    @property
    def mime_type(self) -> str:
        return "application/vnd.python.pickle"

    def serialize(self, data: Any) -> bytes:
        return pickle.dumps(data, protocol=self._protocol)

    def deserialize(self, payload: bytes) -> Any:
        return pickle.loads(payload)  # noqa: S301
