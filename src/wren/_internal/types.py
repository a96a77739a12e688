"""Shared type aliases used across wren modules."""

from collections.abc import Callable, Hashable, Iterable

# Opaque, hashable identity of one input. Never inspected by the engine.
type FieldRef = Hashable

# Host-supplied reader for a field's current value
type ValueSource = Callable[[FieldRef], str]

# Host-supplied enumeration of the fields in a scope
type Inventory = Callable[[Hashable], Iterable[FieldRef]]
