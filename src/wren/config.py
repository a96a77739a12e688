"""Validator configuration.

ValidatorConfig is a frozen dataclass — immutable after creation, one per
form (or shared across forms; it holds no state).
"""

from dataclasses import dataclass, field

from wren.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class Messages:
    """User-facing error copy for the composite validators."""

    required: str = "This field is required"
    incorrect_format: str = "Incorrect Format"
    required_group: str = "Required to complete address"
    ssn_format: str = "You entered the incorrect format"
    password: str = "Password does not meet the requirements"
    security_answer: str = "Answer must be 4 to 512 characters and not repeat the question"
    confirm_mismatch: str = "Fields do not match"


@dataclass(frozen=True, slots=True)
class ValidatorConfig:
    """Validation policy. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ValidatorConfig(password_min_length=12)
    """

    messages: Messages = field(default_factory=Messages)

    # Fixed-width formats
    zip_length: int = 5
    company_id_length: int = 4

    # Free-text bounds
    password_min_length: int = 8
    password_max_length: int = 128
    security_min_length: int = 4
    security_max_length: int = 512

    # HTML sink
    autoescape: bool = True
    message_class: str = "messages error messages-inline"
    scope_error_class: str = "form-error-state"
    message_id_suffix: str = "-message"
    status_id_suffix: str = "-status"

    def __post_init__(self) -> None:
        for name in ("zip_length", "company_id_length"):
            if getattr(self, name) < 1:
                msg = f"{name} must be positive, got {getattr(self, name)}"
                raise ConfigurationError(msg)
        bounds = (
            ("password", self.password_min_length, self.password_max_length),
            ("security", self.security_min_length, self.security_max_length),
        )
        for label, low, high in bounds:
            if low < 0 or low > high:
                msg = f"{label} length bounds are inconsistent: min={low}, max={high}"
                raise ConfigurationError(msg)
