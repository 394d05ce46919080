"""JSON serialization format."""

from __future__ import annotations

import json
from typing import Any

from restcore.formats.base import Format


class JSONFormat(Format):
    """Exchange bodies as UTF-8 JSON (``application/json``)."""

    @property
    def name(self) -> str:
        return "json"

    @property
    def mime_type(self) -> str:
        return "application/json"

    def serialize(self, data: Any) -> bytes:
        return json.dumps(data, ensure_ascii=False).encode("utf-8")

    def deserialize(self, payload: bytes) -> Any:
        return json.loads(payload.decode("utf-8"))
