"""Field and scope error state.

``FormErrorState`` holds one boolean per field for a single form instance.
Scope-level error state is never stored: ``scope_in_error()`` and
``other_errors_exist()`` recompute it from the per-field flags on every
call, so it cannot drift from them.

The field inventory belongs to the host. Pass an ``inventory`` callable to
``FormErrorState`` to enumerate the fields of a scope; without one the
state enumerates every field it has seen validated.
"""

from collections.abc import Hashable, Iterable
from typing import Protocol

from wren._internal.types import FieldRef, Inventory


class ScopeHost(Protocol):
    """Read-only queries the scope tracker needs from the host."""

    def fields_in_scope(self, scope: Hashable) -> Iterable[FieldRef]: ...

    def is_field_in_error(self, field: FieldRef) -> bool: ...


def other_errors_exist(host: ScopeHost, scope: Hashable, excluding: FieldRef) -> bool:
    """True if any field in *scope* other than *excluding* is in error.

    *excluding* is skipped even when its own flag has not been updated
    yet, so callers may ask before or after clearing themselves. This is
    a pure query and never mutates state.
    """
    count = 0
    for field in host.fields_in_scope(scope):
        if field == excluding:
            continue
        if host.is_field_in_error(field):
            count += 1
    return count > 0


class FormErrorState:
    """Per-form field error flags.

    Create one per form instance; nothing is shared between forms.
    Flags are created on a field's first validation and only ever flipped
    afterwards.
    """

    __slots__ = ("_errors", "_inventory")

    def __init__(self, inventory: Inventory | None = None) -> None:
        self._inventory = inventory
        # field -> currently in error
        self._errors: dict[FieldRef, bool] = {}

    def mark(self, field: FieldRef, in_error: bool) -> None:
        """Record the latest verdict for *field*. Last write wins."""
        self._errors[field] = in_error

    def is_field_in_error(self, field: FieldRef) -> bool:
        return self._errors.get(field, False)

    def fields_in_scope(self, scope: Hashable) -> Iterable[FieldRef]:
        if self._inventory is not None:
            return tuple(self._inventory(scope))
        return tuple(self._errors)

    def errored_fields(self, scope: Hashable) -> tuple[FieldRef, ...]:
        """Fields of *scope* currently in error, in inventory order."""
        return tuple(f for f in self.fields_in_scope(scope) if self.is_field_in_error(f))

    def scope_in_error(self, scope: Hashable) -> bool:
        """Derived scope flag: at least one field of *scope* is in error."""
        return any(self.is_field_in_error(f) for f in self.fields_in_scope(scope))

    def __repr__(self) -> str:
        errored = sorted(repr(f) for f, flag in self._errors.items() if flag)
        return f"FormErrorState(errored=[{', '.join(errored)}])"
