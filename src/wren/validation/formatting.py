"""As-you-type value formatting.

Unlike predicates, these rewrite a value instead of judging it. A host
adapter applies them on keystroke before the value is validated on blur.
"""

import re

_NON_DIGIT_RE = re.compile(r"[^0-9]")


def numeric_only(value: str) -> str:
    """Drop every character that is not an ASCII digit: ``"123-45 6789"`` → ``"123456789"``."""
    return _NON_DIGIT_RE.sub("", value)
