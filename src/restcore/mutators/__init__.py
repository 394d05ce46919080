"""Pre-flight request mutation hooks.

See :class:`RequestMutator` for the interface and
:mod:`restcore.mutators.builtin` for the ready-made implementations.
"""

from restcore.mutators.base import RequestMutator
from restcore.mutators.builtin import ChainMutator, HeaderMutator, LoggingMutator

__all__ = ["RequestMutator", "ChainMutator", "HeaderMutator", "LoggingMutator"]
