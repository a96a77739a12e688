"""Tests for wren.validation.field — verdicts to error-state commands."""

import logging

import pytest

from wren.errors import RuleContractError
from wren.sinks import RecordingSink
from wren.testing import (
    assert_field_clear,
    assert_field_error,
    assert_no_changes,
    assert_scope_clear,
    assert_scope_error,
)
from wren.validation import Check, FieldValidator, FormErrorState, NoMessage, SingleMessage


def _make() -> tuple[FieldValidator, RecordingSink]:
    sink = RecordingSink()
    return FieldValidator(sink, FormErrorState(), scope="signup"), sink


class TestPassing:
    def test_returns_true_and_clears(self) -> None:
        validator, sink = _make()
        assert validator.validate_field("zip", [True, True], SingleMessage("bad")) is True
        assert validator.state.is_field_in_error("zip") is False
        assert sink.commands == [("clear_error", "zip"), ("clear_scope_error", "signup")]

    def test_empty_rules_pass(self) -> None:
        validator, _sink = _make()
        assert validator.validate_field("zip", [], SingleMessage("bad")) is True


class TestFailing:
    def test_single_message(self) -> None:
        validator, sink = _make()
        assert validator.validate_field("zip", [True, False], SingleMessage("Incorrect Format")) is False
        assert validator.state.is_field_in_error("zip") is True
        assert_field_error(sink, "zip", "Incorrect Format")
        assert_scope_error(sink, "signup")

    def test_no_message_records_state_only(self) -> None:
        validator, sink = _make()
        assert validator.validate_field("zip", [False], NoMessage()) is False
        assert validator.state.is_field_in_error("zip") is True
        assert validator.state.scope_in_error("signup") is True
        assert sink.commands == []

    def test_new_message_replaces_old(self) -> None:
        validator, sink = _make()
        validator.validate_field("zip", [False], SingleMessage("first"))
        validator.validate_field("zip", [False], SingleMessage("second"))
        assert_field_error(sink, "zip", "second")

    def test_short_circuit_skips_later_entries(self) -> None:
        validator, sink = _make()
        assert validator.validate_field("zip", [False, "junk"], SingleMessage("bad")) is False  # type: ignore[list-item]
        assert_field_error(sink, "zip", "bad")


class TestOrdering:
    def test_no_side_effects_before_verdict(self) -> None:
        validator, sink = _make()
        validator.validate_field("zip", [False], SingleMessage("bad"))
        sink.reset_log()

        with pytest.raises(RuleContractError):
            validator.validate_field("zip", [True, None], SingleMessage("bad"))  # type: ignore[list-item]

        assert sink.commands == []
        assert validator.state.is_field_in_error("zip") is True

    def test_bad_policy_rejected(self) -> None:
        validator, sink = _make()
        with pytest.raises(RuleContractError, match="policy"):
            validator.validate_field("zip", [False], "Incorrect Format")  # type: ignore[arg-type]
        assert sink.commands == []


class TestIdempotence:
    def test_repeated_failure(self) -> None:
        validator, sink = _make()
        validator.validate_field("zip", [False], SingleMessage("bad"))
        sink.reset_log()

        validator.validate_field("zip", [False], SingleMessage("bad"))

        assert_no_changes(sink)
        assert validator.state.is_field_in_error("zip") is True

    def test_repeated_success(self) -> None:
        validator, sink = _make()
        validator.validate_field("zip", [True], SingleMessage("bad"))
        sink.reset_log()

        validator.validate_field("zip", [True], SingleMessage("bad"))

        assert_no_changes(sink)
        assert validator.state.is_field_in_error("zip") is False


class TestScopeReconciliation:
    def test_last_error_keeps_scope_until_cleared(self) -> None:
        validator, sink = _make()
        validator.validate_field("a", [False], SingleMessage("A is wrong"))
        validator.validate_field("b", [False], SingleMessage("B is wrong"))
        assert_scope_error(sink, "signup")

        validator.validate_field("a", [True], SingleMessage("A is wrong"))
        assert_field_clear(sink, "a")
        assert_scope_error(sink, "signup")

        validator.validate_field("b", [True], SingleMessage("B is wrong"))
        assert_field_clear(sink, "b")
        assert_scope_clear(sink, "signup")

    def test_silent_error_keeps_scope(self) -> None:
        validator, sink = _make()
        validator.validate_field("a", [False], SingleMessage("A is wrong"))
        validator.validate_field("b", [False], NoMessage())

        validator.validate_field("a", [True], SingleMessage("A is wrong"))

        assert_scope_error(sink, "signup")


class TestChecks:
    def test_first_failing_stage_reports(self) -> None:
        validator, sink = _make()
        checks = [
            Check((True, True), "Incorrect Format"),
            Check((False,), "This field is required"),
        ]
        assert validator.validate_checks("zip", checks) is False
        assert_field_error(sink, "zip", "This field is required")

    def test_earlier_stage_wins(self) -> None:
        validator, sink = _make()
        checks = [Check((False,), "Incorrect Format"), Check((False,), "This field is required")]
        validator.validate_checks("zip", checks)
        assert_field_error(sink, "zip", "Incorrect Format")

    def test_all_pass(self) -> None:
        validator, sink = _make()
        validator.validate_field("zip", [False], SingleMessage("bad"))
        assert validator.validate_checks("zip", [Check((True,), "bad")]) is True
        assert_field_clear(sink, "zip")

    def test_no_checks(self) -> None:
        validator, _sink = _make()
        assert validator.validate_checks("zip", []) is True

    def test_generator_results_fail_the_stage(self) -> None:
        validator, sink = _make()
        check = Check((ok for ok in (True, False)), "Incorrect Format")
        assert check.results == (True, False)
        assert validator.validate_checks("zip", [check]) is False
        assert_field_error(sink, "zip", "Incorrect Format")
        assert validator.state.is_field_in_error("zip") is True


class TestRecover:
    def test_recover_clears_field_and_scope(self) -> None:
        validator, sink = _make()
        validator.validate_field("zip", [False], SingleMessage("bad"))
        validator.recover("zip")
        assert validator.state.is_field_in_error("zip") is False
        assert_field_clear(sink, "zip")
        assert_scope_clear(sink, "signup")

    def test_recover_with_sibling_error(self) -> None:
        validator, sink = _make()
        validator.validate_field("zip", [False], SingleMessage("bad"))
        validator.validate_field("phone", [False], SingleMessage("bad"))
        validator.recover("zip")
        assert_scope_error(sink, "signup")


class TestLogging:
    def test_verdict_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        validator, _sink = _make()
        with caplog.at_level(logging.DEBUG, logger="wren.validation"):
            validator.validate_field("zip", [False], SingleMessage("bad"))
        assert "failed" in caplog.text
