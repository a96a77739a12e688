"""Test utilities for code built on wren.

Provides the in-memory sink and error-state assertions::

    from wren.testing import RecordingSink, assert_field_error
"""

from wren.sinks.memory import RecordingSink
from wren.testing.assertions import (
    assert_field_clear,
    assert_field_error,
    assert_no_changes,
    assert_scope_clear,
    assert_scope_error,
)

__all__ = [
    "RecordingSink",
    "assert_field_clear",
    "assert_field_error",
    "assert_no_changes",
    "assert_scope_clear",
    "assert_scope_error",
]
