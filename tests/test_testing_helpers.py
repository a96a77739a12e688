"""Tests for wren.testing — error-state assertion helpers."""

import pytest

from wren.testing import (
    RecordingSink,
    assert_field_clear,
    assert_field_error,
    assert_no_changes,
    assert_scope_clear,
    assert_scope_error,
)


def _sink_with_error() -> RecordingSink:
    sink = RecordingSink()
    sink.set_error("zip", "Incorrect Format")
    sink.set_scope_error("signup")
    return sink


class TestFieldAssertions:
    def test_field_error_passes(self) -> None:
        sink = _sink_with_error()
        assert_field_error(sink, "zip")
        assert_field_error(sink, "zip", "Incorrect Format")

    def test_field_error_wrong_message(self) -> None:
        sink = _sink_with_error()
        with pytest.raises(AssertionError, match="Incorrect Format"):
            assert_field_error(sink, "zip", "This field is required")

    def test_field_error_missing(self) -> None:
        with pytest.raises(AssertionError, match="none is shown"):
            assert_field_error(RecordingSink(), "zip")

    def test_field_clear(self) -> None:
        assert_field_clear(RecordingSink(), "zip")
        with pytest.raises(AssertionError, match="to be clear"):
            assert_field_clear(_sink_with_error(), "zip")


class TestScopeAssertions:
    def test_scope_error(self) -> None:
        assert_scope_error(_sink_with_error(), "signup")
        with pytest.raises(AssertionError):
            assert_scope_error(RecordingSink(), "signup")

    def test_scope_clear(self) -> None:
        assert_scope_clear(RecordingSink(), "signup")
        with pytest.raises(AssertionError):
            assert_scope_clear(_sink_with_error(), "signup")


class TestNoChanges:
    def test_after_reset(self) -> None:
        sink = _sink_with_error()
        sink.reset_log()
        sink.set_error("zip", "Incorrect Format")
        assert_no_changes(sink)

    def test_with_changes(self) -> None:
        with pytest.raises(AssertionError, match="Expected no display changes"):
            assert_no_changes(_sink_with_error())
