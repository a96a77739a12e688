"""Rule evaluator — combine already-computed rule results.

The evaluator never calls predicates. Callers compute each rule's boolean
first and hand over the ordered results; this module only decides how they
combine::

    evaluate([True, False, True])                      # False, stops at index 1
    evaluate([True, False, True], short_circuit=False) # False, all(results)
    evaluate([True, False, True], short_circuit=False, raw=True)
    # (True, False, True): per-rule outcomes for a checklist UI
"""

from collections.abc import Sequence

from wren.errors import RuleContractError


def evaluate(
    results: Sequence[bool],
    *,
    short_circuit: bool = True,
    raw: bool = False,
) -> bool | tuple[bool, ...]:
    """Combine ordered rule results.

    Args:
        results: Rule outcomes in evaluation order. Every entry must be a
            ``bool``.
        short_circuit: Stop at the first ``False`` and report failure
            without consulting later entries.
        raw: Return the full per-rule tuple instead of one boolean. Only
            valid with ``short_circuit=False``; the two modes are mutually
            exclusive.

    Returns:
        ``True`` when every rule passed (vacuously for an empty sequence),
        ``False`` otherwise, or the unmodified tuple in raw mode.

    Raises:
        RuleContractError: ``raw`` combined with ``short_circuit``, or a
            non-``bool`` entry.
    """
    if raw and short_circuit:
        msg = "raw=True requires short_circuit=False; the modes are mutually exclusive"
        raise RuleContractError(msg)

    if raw:
        outcomes = tuple(results)
        for index, outcome in enumerate(outcomes):
            _check_outcome(index, outcome)
        return outcomes

    passed = True
    for index, outcome in enumerate(results):
        _check_outcome(index, outcome)
        if outcome is False:
            if short_circuit:
                return False
            passed = False
    return passed


def _check_outcome(index: int, outcome: object) -> None:
    if not isinstance(outcome, bool):
        msg = f"Rule result at index {index} must be bool, got {type(outcome).__name__}"
        raise RuleContractError(msg)
