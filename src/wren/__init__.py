"""Wren — field validation and error-state reconciliation for web forms.

Composes boolean rule results into one verdict per field, shows or clears
that field's message, and keeps the form-level error indicator in step with
the fields that are still wrong.

Basic usage::

    from wren import FormValidator, RecordingSink

    values = {"email": "someone@", "zip": "12345"}
    form = FormValidator(values, RecordingSink(), scope="signup")

    form.validate_email("email", required=True)  # False, shows "Incorrect Format"
    form.validate_zip("zip")                     # True

Rendering htmx fragments instead::

    from wren import HtmlErrorSink
    sink = HtmlErrorSink()
    ...
    html = sink.drain()
"""

__version__ = "0.1.0"
__all__ = [
    "Check",
    "Checklist",
    "ConfigurationError",
    "ErrorSink",
    "FieldValidator",
    "FormErrorState",
    "FormValidator",
    "HtmlErrorSink",
    "Messages",
    "NoMessage",
    "RecordingSink",
    "RuleContractError",
    "SingleMessage",
    "ValidatorConfig",
    "WrenError",
    "evaluate",
    "other_errors_exist",
]

# name -> module that defines it
_LAZY_IMPORTS: dict[str, str] = {
    "Check": "wren.validation.policy",
    "Checklist": "wren.validation.result",
    "ConfigurationError": "wren.errors",
    "ErrorSink": "wren.sinks.protocol",
    "FieldValidator": "wren.validation.field",
    "FormErrorState": "wren.validation.scope",
    "FormValidator": "wren.validation.composites",
    "HtmlErrorSink": "wren.sinks.html",
    "Messages": "wren.config",
    "NoMessage": "wren.validation.policy",
    "RecordingSink": "wren.sinks.memory",
    "RuleContractError": "wren.errors",
    "SingleMessage": "wren.validation.policy",
    "ValidatorConfig": "wren.config",
    "WrenError": "wren.errors",
    "evaluate": "wren.validation.evaluator",
    "other_errors_exist": "wren.validation.scope",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wren`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
