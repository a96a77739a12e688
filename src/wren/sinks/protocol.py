"""Error sink protocol.

A sink is whatever paints and removes error indicators. The engine only
issues commands to it::

    class ConsoleSink:
        def set_error(self, field, message): print(f"{field}: {message}")
        def clear_error(self, field): print(f"{field}: ok")
        def set_scope_error(self, scope): ...
        def clear_scope_error(self, scope): ...

No base class required. The engine checks the shape, not the lineage.

Every command must be idempotent: repeating ``clear_error`` on a clear
field, or ``set_error`` with the message already shown, changes nothing.
"""

from collections.abc import Hashable
from typing import Protocol

from wren._internal.types import FieldRef


class ErrorSink(Protocol):
    """Protocol for wren error sinks."""

    def set_error(self, field: FieldRef, message: str) -> None: ...

    def clear_error(self, field: FieldRef) -> None: ...

    def set_scope_error(self, scope: Hashable) -> None: ...

    def clear_scope_error(self, scope: Hashable) -> None: ...
