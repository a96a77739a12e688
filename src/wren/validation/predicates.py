"""Built-in predicates for wren rule sets.

Each predicate is a pure function over raw string values::

    def predicate(value: str, *params) -> bool:
        '''Return True when the value satisfies the rule.'''

Predicates never touch error state and never raise for ``str`` input.
An empty string is special only when the caller passes an explicit
``error_on_blank`` / ``fail_on_blank`` flag — format checks with the flag
off pass blank values so presence can be enforced by a separate
``field_not_empty`` rule.
"""

import re
from collections.abc import Iterable

# ---------------------------------------------------------------------------
# Presence
# ---------------------------------------------------------------------------

_NOT_EMPTY_MAX = 999_999


def field_not_empty(value: str) -> bool:
    """Value has at least one character."""
    return length_valid(value, 1, _NOT_EMPTY_MAX, fail_on_blank=True)


def all_fields_empty(values: Iterable[str]) -> bool:
    """Every value in *values* is blank."""
    return not any(field_not_empty(value) for value in values)


def not_empty_if_any_fields_not_empty(value: str, sibling_values: Iterable[str]) -> bool:
    """Fail when a sibling has been filled in but *value* is still blank.

    The caller is responsible for leaving the field's own value out of
    *sibling_values*.
    """
    if all_fields_empty(sibling_values):
        return True
    return field_not_empty(value)


def fields_match(first: str, second: str, fail_on_blank: bool = True) -> bool:
    """Both values are identical.

    With ``fail_on_blank=False`` a blank value on either side is not
    compared, so a half-filled confirmation pair is not flagged yet.
    """
    if not fail_on_blank and (not first or not second):
        return True
    return first == second


# ---------------------------------------------------------------------------
# Length
# ---------------------------------------------------------------------------


def length_valid(
    value: str,
    min_length: int | None = None,
    max_length: int | None = None,
    fail_on_blank: bool = False,
) -> bool:
    """Length of *value* is within ``[min_length, max_length]``.

    Either bound may be ``None``. With no bounds at all every value passes;
    a blank value passes unless *fail_on_blank* is set.
    """
    if min_length is None and max_length is None:
        return True
    if not fail_on_blank and len(value) == 0:
        return True
    if min_length is not None and len(value) < min_length:
        return False
    if max_length is not None and len(value) > max_length:
        return False
    return True


# ---------------------------------------------------------------------------
# Format
# ---------------------------------------------------------------------------

_SSN_RE = re.compile(r"[0-9]{3}-?[0-9]{2}-?[0-9]{4}")
_PHONE_RE = re.compile(r"[0-9]{3}-?[0-9]{3}-?[0-9]{4}")

# Structural check only: local part, then dot-separated DNS labels
_EMAIL_RE = re.compile(
    r"[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+"
    r"@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*"
)


def ssn_valid(value: str, error_on_blank: bool = False) -> bool:
    """Value is a social security number: ``123-45-6789`` or ``123456789``."""
    if not value and not error_on_blank:
        return True
    if 0 < len(value) < 9:
        return False
    return _SSN_RE.fullmatch(value) is not None


def email_valid(value: str, error_on_blank: bool = False) -> bool:
    """Value looks like an email address (structure, not deliverability)."""
    if not value and not error_on_blank:
        return True
    return _EMAIL_RE.fullmatch(value) is not None


def phone_valid(value: str, error_on_blank: bool = False) -> bool:
    """Value is a ten-digit phone number that is not one digit repeated.

    Accepts ``555-123-4567`` and ``5551234567``; rejects ``111-111-1111``.
    """
    if not value and not error_on_blank:
        return True
    if _PHONE_RE.fullmatch(value) is None:
        return False
    digits = value.replace("-", "")
    return len(digits) == 10 and len(set(digits)) > 1


# ---------------------------------------------------------------------------
# Content
# ---------------------------------------------------------------------------

_TRIPLE_RE = re.compile(r"(.)\1\1")
_SPECIAL_RE = re.compile(r"[0-9!@?]")
_UPPER_RE = re.compile(r"[A-Z]")
_LOWER_RE = re.compile(r"[a-z]")
_DIGIT_RE = re.compile(r"[0-9]")
_NOT_ALNUM_RE = re.compile(r"[^0-9a-zA-Z]")
_NOT_DIGIT_RE = re.compile(r"[^0-9]")


def does_not_contain_double_characters(value: str) -> bool:
    """No character appears three or more times in a row (``aaa``)."""
    return _TRIPLE_RE.search(value) is None


def does_not_contain_value(needle: str, haystack: str, error_on_blank: bool = False) -> bool:
    """*haystack* does not contain *needle*.

    Direction matters: ``does_not_contain_value(user_id, password)`` asks
    whether the password contains the user id, not the reverse. A blank
    needle passes unless *error_on_blank* is set.
    """
    if not needle and not error_on_blank:
        return True
    return needle not in haystack


def contains_special_characters(value: str) -> bool:
    """At least one digit or one of ``!@?``."""
    return _SPECIAL_RE.search(value) is not None


def contains_uppercase(value: str) -> bool:
    return _UPPER_RE.search(value) is not None


def contains_lowercase(value: str) -> bool:
    return _LOWER_RE.search(value) is not None


def contains_number(value: str) -> bool:
    return _DIGIT_RE.search(value) is not None


def contains_only_alphanumeric(value: str) -> bool:
    """Only ASCII letters and digits (blank passes)."""
    return _NOT_ALNUM_RE.search(value) is None


def contains_only_numeric(value: str) -> bool:
    """Only ASCII digits (blank passes)."""
    return _NOT_DIGIT_RE.search(value) is None


def contains_at_least_one_alpha(value: str) -> bool:
    return contains_uppercase(value) or contains_lowercase(value)


def contains_lower_and_uppercase(value: str) -> bool:
    return contains_uppercase(value) and contains_lowercase(value)
