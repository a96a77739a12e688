"""Composite validators — pre-built rule sets for common form fields.

``FormValidator`` is the per-form entry point a host adapter calls from
its blur / focus handlers. Each composite reads the current value of every
field it needs, computes its predicate results in order, and hands them to
the ``FieldValidator``::

    form = FormValidator(values, sink, scope="signup")

    form.validate_zip("zip", required=True)
    form.validate_password("password", "user_id")
    form.validate_confirm("password", "password_confirm")
    form.recover("zip")  # user clicked back into the field

Format and presence are separate stages. With ``error_on_blank=False`` an
empty value passes every format rule; the optional ``required`` stage is
what rejects it, with its own message.
"""

from collections.abc import Hashable, Iterable, Mapping

from wren._internal.types import FieldRef, ValueSource
from wren.config import ValidatorConfig
from wren.errors import RuleContractError
from wren.sinks.protocol import ErrorSink
from wren.validation.evaluator import evaluate
from wren.validation.field import FieldValidator
from wren.validation.policy import Check, SingleMessage
from wren.validation.predicates import (
    contains_lowercase,
    contains_number,
    contains_only_alphanumeric,
    contains_only_numeric,
    contains_uppercase,
    does_not_contain_value,
    email_valid,
    field_not_empty,
    fields_match,
    length_valid,
    not_empty_if_any_fields_not_empty,
    phone_valid,
    ssn_valid,
)
from wren.validation.result import Checklist
from wren.validation.scope import FormErrorState


class FormValidator:
    """Composite validators bound to one form instance.

    Args:
        values: Where current field values come from. Either a callable
            ``field -> str`` or a mapping; a mapping is read on every call,
            so later edits to it are seen. A field missing from a mapping
            reads as blank.
        sink: Receives ``set_error`` / ``clear_error`` and scope commands.
        config: Message copy and length policy.
        state: Field error flags; a fresh ``FormErrorState`` by default.
        scope: Identity of the form, passed to scope-level sink commands.
    """

    __slots__ = ("_config", "_read", "_validator")

    def __init__(
        self,
        values: ValueSource | Mapping[FieldRef, str],
        sink: ErrorSink,
        *,
        config: ValidatorConfig | None = None,
        state: FormErrorState | None = None,
        scope: Hashable = "form",
    ) -> None:
        if isinstance(values, Mapping):
            mapping = values
            self._read: ValueSource = lambda field: mapping.get(field, "")
        else:
            self._read = values
        self._config = config or ValidatorConfig()
        self._validator = FieldValidator(sink, state, scope)

    @property
    def config(self) -> ValidatorConfig:
        return self._config

    @property
    def validator(self) -> FieldValidator:
        return self._validator

    @property
    def state(self) -> FormErrorState:
        return self._validator.state

    def scope_in_error(self) -> bool:
        """Recomputed: does any field of this form currently carry an error."""
        return self._validator.state.scope_in_error(self._validator.scope)

    def recover(self, field: FieldRef) -> None:
        """Clear *field*'s error when the user re-enters it."""
        self._validator.recover(field)

    # -- presence --

    def validate_required(self, field: FieldRef, message: str | None = None) -> bool:
        value = self._value(field)
        return self._validator.validate_field(
            field,
            (field_not_empty(value),),
            SingleMessage(message or self._config.messages.required),
        )

    def validate_required_if_siblings_filled(
        self,
        field: FieldRef,
        siblings: Iterable[FieldRef],
        message: str | None = None,
    ) -> bool:
        """Require *field* once any of *siblings* has a value.

        *field* may appear in *siblings*; it is left out of the check.
        """
        value = self._value(field)
        return self._validator.validate_field(
            field,
            (self._required_if_siblings(field, value, siblings),),
            SingleMessage(message or self._config.messages.required_group),
        )

    # -- formats --

    def validate_zip(
        self,
        field: FieldRef,
        *,
        error_on_blank: bool = False,
        required: bool = False,
        message: str | None = None,
    ) -> bool:
        value = self._value(field)
        checks = [self._zip_check(value, error_on_blank, message)]
        if required:
            checks.append(self._required_check(value))
        return self._validator.validate_checks(field, checks)

    def validate_zip_group(
        self,
        field: FieldRef,
        siblings: Iterable[FieldRef],
        message: str | None = None,
    ) -> bool:
        """Zip format, then required once any address sibling is filled."""
        value = self._value(field)
        checks = [
            self._zip_check(value, False, message),
            Check(
                (self._required_if_siblings(field, value, siblings),),
                self._config.messages.required_group,
            ),
        ]
        return self._validator.validate_checks(field, checks)

    def validate_phone(
        self,
        field: FieldRef,
        *,
        error_on_blank: bool = False,
        required: bool = False,
        message: str | None = None,
    ) -> bool:
        value = self._value(field)
        checks = [
            Check(
                (phone_valid(value, error_on_blank),),
                message or self._config.messages.incorrect_format,
            ),
        ]
        if required:
            checks.append(self._required_check(value))
        return self._validator.validate_checks(field, checks)

    def validate_email(
        self,
        field: FieldRef,
        *,
        error_on_blank: bool = False,
        required: bool = False,
        message: str | None = None,
    ) -> bool:
        value = self._value(field)
        checks = [
            Check(
                (email_valid(value, error_on_blank),),
                message or self._config.messages.incorrect_format,
            ),
        ]
        if required:
            checks.append(self._required_check(value))
        return self._validator.validate_checks(field, checks)

    def validate_ssn(
        self,
        field: FieldRef,
        *,
        error_on_blank: bool = False,
        message: str | None = None,
    ) -> bool:
        value = self._value(field)
        return self._validator.validate_field(
            field,
            (ssn_valid(value, error_on_blank),),
            SingleMessage(message or self._config.messages.ssn_format),
        )

    def validate_company_id(
        self,
        field: FieldRef,
        *,
        error_on_blank: bool = False,
        message: str | None = None,
    ) -> bool:
        value = self._value(field)
        size = self._config.company_id_length
        return self._validator.validate_field(
            field,
            (
                length_valid(value, size, size, error_on_blank),
                contains_only_alphanumeric(value),
            ),
            SingleMessage(message or self._config.messages.incorrect_format),
        )

    # -- linked fields --

    def validate_password(
        self,
        field: FieldRef,
        user_id_field: FieldRef,
        message: str | None = None,
    ) -> bool:
        """Length, upper, lower, digit, and must not contain the user id."""
        rules = self._password_rules(field, user_id_field)
        return self._validator.validate_field(
            field,
            tuple(ok for _label, ok in rules),
            SingleMessage(message or self._config.messages.password),
        )

    def password_checklist(self, field: FieldRef, user_id_field: FieldRef) -> Checklist:
        """Every password rule's outcome, for a requirements popup.

        Runs the rules in raw mode and leaves error state untouched.
        """
        rules = self._password_rules(field, user_id_field)
        outcomes = evaluate([ok for _label, ok in rules], short_circuit=False, raw=True)
        return Checklist(items=tuple(zip((label for label, _ok in rules), outcomes, strict=True)))

    def validate_security_answer(
        self,
        field: FieldRef,
        linked_field: FieldRef,
        *,
        error_on_blank: bool = False,
        message: str | None = None,
    ) -> bool:
        """Answer length bounds, and the answer must not contain the question."""
        value = self._value(field)
        linked = self._value(linked_field)
        cfg = self._config
        return self._validator.validate_field(
            field,
            (
                length_valid(value, cfg.security_min_length, cfg.security_max_length, error_on_blank),
                does_not_contain_value(linked, value, error_on_blank),
            ),
            SingleMessage(message or cfg.messages.security_answer),
        )

    def validate_confirm(
        self,
        primary_field: FieldRef,
        confirm_field: FieldRef,
        *,
        error_on_blank: bool = False,
        message: str | None = None,
    ) -> bool:
        """Both fields hold the same value; the error lands on *confirm_field*."""
        primary = self._value(primary_field)
        confirm = self._value(confirm_field)
        return self._validator.validate_field(
            confirm_field,
            (fields_match(primary, confirm, error_on_blank),),
            SingleMessage(message or self._config.messages.confirm_mismatch),
        )

    # -- internals --

    def _value(self, field: FieldRef) -> str:
        value = self._read(field)
        if not isinstance(value, str):
            msg = f"Value of field {field!r} must be str, got {type(value).__name__}"
            raise RuleContractError(msg)
        return value

    def _required_check(self, value: str) -> Check:
        return Check((field_not_empty(value),), self._config.messages.required)

    def _zip_check(self, value: str, error_on_blank: bool, message: str | None) -> Check:
        size = self._config.zip_length
        return Check(
            (contains_only_numeric(value), length_valid(value, size, size, error_on_blank)),
            message or self._config.messages.incorrect_format,
        )

    def _required_if_siblings(
        self,
        field: FieldRef,
        value: str,
        siblings: Iterable[FieldRef],
    ) -> bool:
        sibling_values = [self._value(s) for s in siblings if s != field]
        return not_empty_if_any_fields_not_empty(value, sibling_values)

    def _password_rules(self, field: FieldRef, user_id_field: FieldRef) -> list[tuple[str, bool]]:
        value = self._value(field)
        user_id = self._value(user_id_field)
        low = self._config.password_min_length
        high = self._config.password_max_length
        return [
            (f"{low} to {high} characters", length_valid(value, low, high, fail_on_blank=True)),
            ("An uppercase letter", contains_uppercase(value)),
            ("A lowercase letter", contains_lowercase(value)),
            ("A number", contains_number(value)),
            ("Does not contain your user ID", does_not_contain_value(user_id, value)),
        ]
