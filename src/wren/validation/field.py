"""Field validator — turn a rule verdict into error-state commands.

The field validator is the only place field error state changes and the
only place messages are chosen. It never touches UI elements: it receives
rule results for an opaque field identity and emits commands to an
``ErrorSink``.
"""

import logging
from collections.abc import Hashable, Sequence

from wren._internal.types import FieldRef
from wren.errors import RuleContractError
from wren.sinks.protocol import ErrorSink
from wren.validation.evaluator import evaluate
from wren.validation.policy import Check, ErrorPolicy, NoMessage, SingleMessage
from wren.validation.scope import FormErrorState, other_errors_exist

logger = logging.getLogger("wren.validation")


class FieldValidator:
    """Bind rule results to field and scope error state for one form.

    Usage::

        state = FormErrorState()
        validator = FieldValidator(sink, state, scope="signup")
        validator.validate_field("zip", [zip_ok], SingleMessage("Incorrect Format"))
    """

    __slots__ = ("_scope", "_sink", "_state")

    def __init__(
        self,
        sink: ErrorSink,
        state: FormErrorState | None = None,
        scope: Hashable = "form",
    ) -> None:
        self._sink = sink
        self._state = state if state is not None else FormErrorState()
        self._scope = scope

    @property
    def sink(self) -> ErrorSink:
        return self._sink

    @property
    def state(self) -> FormErrorState:
        return self._state

    @property
    def scope(self) -> Hashable:
        return self._scope

    def validate_field(
        self,
        field: FieldRef,
        rules: Sequence[bool],
        policy: ErrorPolicy,
    ) -> bool:
        """Evaluate *rules* with short-circuit and apply the verdict.

        Passing clears the field and, when no sibling is still in error,
        the scope. Failing records the error and, under ``SingleMessage``,
        shows the message. Side effects start only once the verdict is
        final.
        """
        if not isinstance(policy, SingleMessage | NoMessage):
            msg = f"policy must be SingleMessage or NoMessage, got {type(policy).__name__}"
            raise RuleContractError(msg)

        passed = evaluate(rules, short_circuit=True)
        return self._apply(field, passed, policy)

    def validate_checks(self, field: FieldRef, checks: Sequence[Check]) -> bool:
        """Run composite stages in order; the first failing stage reports.

        Each stage is itself evaluated with short-circuit. When every stage
        passes the field is validated against the empty rule set, which is
        vacuously satisfied.
        """
        for check in checks:
            if not evaluate(check.results, short_circuit=True):
                return self._apply(field, False, check.policy)
        return self._apply(field, True, NoMessage())

    def recover(self, field: FieldRef) -> None:
        """Clear *field* unconditionally (the user re-entered it)."""
        logger.debug("field %r recovered", field)
        self._clear(field)

    # -- internals --

    def _apply(self, field: FieldRef, passed: bool, policy: ErrorPolicy) -> bool:
        logger.debug("field %r %s", field, "passed" if passed else "failed")
        if passed:
            self._clear(field)
        else:
            self._fail(field, policy)
        return passed

    def _clear(self, field: FieldRef) -> None:
        self._state.mark(field, False)
        self._sink.clear_error(field)

        if other_errors_exist(self._state, self._scope, field):
            logger.debug("scope %r still has errors", self._scope)
            return
        self._sink.clear_scope_error(self._scope)

    def _fail(self, field: FieldRef, policy: ErrorPolicy) -> None:
        self._state.mark(field, True)

        match policy:
            case SingleMessage(message=message):
                self._sink.set_error(field, message)
                self._sink.set_scope_error(self._scope)
            case NoMessage():
                logger.debug("field %r in error without a message", field)
