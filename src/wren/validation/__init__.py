"""Field validation — rule composition and error-state reconciliation.

Usage::

    from wren.validation import FormValidator
    from wren.sinks import RecordingSink

    values = {"zip": "", "phone": "555-123-4567"}
    form = FormValidator(values, RecordingSink(), scope="signup")

    form.validate_zip("zip", required=True)  # False: "This field is required"
    form.validate_phone("phone")             # True
    form.scope_in_error()                    # True, zip is still in error

Lower layers are usable on their own::

    from wren.validation import FieldValidator, SingleMessage, evaluate

    evaluate([True, False])  # False
    validator.validate_field("zip", [zip_ok], SingleMessage("Incorrect Format"))
"""

from wren.validation.composites import FormValidator
from wren.validation.evaluator import evaluate
from wren.validation.field import FieldValidator
from wren.validation.formatting import numeric_only
from wren.validation.policy import Check, ErrorPolicy, NoMessage, SingleMessage
from wren.validation.result import Checklist
from wren.validation.scope import FormErrorState, ScopeHost, other_errors_exist

__all__ = [
    "Check",
    "Checklist",
    "ErrorPolicy",
    "FieldValidator",
    "FormErrorState",
    "FormValidator",
    "NoMessage",
    "ScopeHost",
    "SingleMessage",
    "evaluate",
    "numeric_only",
    "other_errors_exist",
]
