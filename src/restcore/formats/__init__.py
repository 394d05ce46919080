"""Pluggable serialization formats.

- :class:`Format` -- abstract base every format extends.
- :class:`JSONFormat` -- ``application/json``.
- :class:`PickleFormat` -- native Python serialization.
- :func:`get_format` -- build a built-in format from its config name.

Typical usage::

    from restcore.formats import get_format

    fmt = get_format("json")
    fmt.serialize({"title": "Hello"})  # b'{"title": "Hello"}'
"""

from __future__ import annotations

from typing import Optional

from restcore.exceptions import ConfigurationError
from restcore.formats.base import Format
from restcore.formats.json_format import JSONFormat
from restcore.formats.pickle_format import PickleFormat

_BUILTIN_FORMATS: dict[str, type[Format]] = {
    "json": JSONFormat,
    "pickle": PickleFormat,
}


def available_formats() -> list[str]:
    """Return the names accepted by :func:`get_format`, sorted."""
    return sorted(_BUILTIN_FORMATS)


def get_format(name: Optional[str]) -> Optional[Format]:
    """Instantiate the built-in format called *name*.

    Args:
        name: ``"json"``, ``"pickle"``, or ``None``/``"none"`` for raw bodies.

    Returns:
        A new :class:`Format`, or ``None`` when raw bodies were requested.

    Raises:
        ConfigurationError: If *name* is not a known format.
    """
    if name is None or name.lower() in ("", "none", "raw"):
        return None
    format_cls = _BUILTIN_FORMATS.get(name.lower())
    if format_cls is None:
        available = ", ".join(available_formats())
        raise ConfigurationError(
            f"Unknown format '{name}'. Available formats: {available}"
        )
    return format_cls()


__all__ = [
    "Format",
    "JSONFormat",
    "PickleFormat",
    "available_formats",
    "get_format",
]
