"""Tests for wren.validation.evaluator — combining rule results."""

import pytest

from wren.errors import RuleContractError
from wren.validation import evaluate

SEQUENCES = [
    [],
    [True],
    [False],
    [True, True, True],
    [True, False, True],
    [False, False],
    [True, True, False],
]


class TestShortCircuit:
    def test_empty_is_true(self) -> None:
        assert evaluate([]) is True

    def test_all_true(self) -> None:
        assert evaluate([True, True]) is True

    def test_first_false_fails(self) -> None:
        assert evaluate([True, False, True]) is False

    def test_later_entries_not_consulted(self) -> None:
        # The malformed entry sits after the first failure and is never read
        assert evaluate([True, False, "junk"]) is False  # type: ignore[list-item]

    def test_accepts_tuple(self) -> None:
        assert evaluate((True, True)) is True

    @pytest.mark.parametrize("results", SEQUENCES)
    def test_matches_all(self, results: list[bool]) -> None:
        assert evaluate(results, short_circuit=True) is all(results)


class TestAggregated:
    @pytest.mark.parametrize("results", SEQUENCES)
    def test_matches_all(self, results: list[bool]) -> None:
        assert evaluate(results, short_circuit=False) is all(results)

    def test_checks_every_entry(self) -> None:
        with pytest.raises(RuleContractError):
            evaluate([False, "junk"], short_circuit=False)  # type: ignore[list-item]


class TestRaw:
    def test_returns_every_outcome(self) -> None:
        assert evaluate([True, False, True], short_circuit=False, raw=True) == (True, False, True)

    def test_empty(self) -> None:
        assert evaluate([], short_circuit=False, raw=True) == ()

    def test_combined_with_short_circuit_rejected(self) -> None:
        with pytest.raises(RuleContractError, match="mutually exclusive"):
            evaluate([True], raw=True)


class TestContract:
    def test_int_rejected(self) -> None:
        with pytest.raises(RuleContractError, match="index 0"):
            evaluate([1])  # type: ignore[list-item]

    def test_none_rejected(self) -> None:
        with pytest.raises(RuleContractError):
            evaluate([True, None])  # type: ignore[list-item]

    def test_contract_error_is_type_error(self) -> None:
        with pytest.raises(TypeError):
            evaluate(["yes"])  # type: ignore[list-item]
