"""In-memory error sink.

Tracks what a real UI would currently show and logs every command it
receives. ``changes`` records only commands that altered what is shown,
which makes idempotence observable::

    sink = RecordingSink()
    sink.clear_error("zip")  # nothing was shown: no change
    sink.set_error("zip", "Incorrect Format")
    sink.set_error("zip", "Incorrect Format")
    assert len(sink.commands) == 3
    assert len(sink.changes) == 1
"""

from collections.abc import Hashable
from typing import Any

from wren._internal.types import FieldRef

type Command = tuple[Any, ...]


class RecordingSink:
    """Error sink that keeps its display state in memory."""

    __slots__ = ("_messages", "_scopes", "changes", "commands")

    def __init__(self) -> None:
        self.commands: list[Command] = []
        self.changes: list[Command] = []
        # field -> message currently shown
        self._messages: dict[FieldRef, str] = {}
        self._scopes: set[Hashable] = set()

    def set_error(self, field: FieldRef, message: str) -> None:
        command = ("set_error", field, message)
        self.commands.append(command)
        if self._messages.get(field) == message:
            return
        self._messages[field] = message
        self.changes.append(command)

    def clear_error(self, field: FieldRef) -> None:
        command = ("clear_error", field)
        self.commands.append(command)
        if self._messages.pop(field, None) is None:
            return
        self.changes.append(command)

    def set_scope_error(self, scope: Hashable) -> None:
        command = ("set_scope_error", scope)
        self.commands.append(command)
        if scope in self._scopes:
            return
        self._scopes.add(scope)
        self.changes.append(command)

    def clear_scope_error(self, scope: Hashable) -> None:
        command = ("clear_scope_error", scope)
        self.commands.append(command)
        if scope not in self._scopes:
            return
        self._scopes.discard(scope)
        self.changes.append(command)

    # -- inspection --

    def message_for(self, field: FieldRef) -> str | None:
        """The message currently shown for *field*, or None."""
        return self._messages.get(field)

    def has_error(self, field: FieldRef) -> bool:
        return field in self._messages

    def scope_has_error(self, scope: Hashable) -> bool:
        return scope in self._scopes

    @property
    def errors(self) -> dict[FieldRef, str]:
        """Snapshot of every message currently shown."""
        return dict(self._messages)

    def reset_log(self) -> None:
        """Forget logged commands and changes; keep the display state."""
        self.commands.clear()
        self.changes.clear()
