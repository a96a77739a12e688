"""Checklist — immutable per-rule outcomes for requirement popups."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Checklist:
    """Labelled outcome of every rule in a rule set, in order.

    Built from raw-mode evaluation, so no rule is skipped. The checklist
    is falsy when any rule failed::

        checklist = form.password_checklist("password", "user_id")
        for label, ok in checklist.items:
            ...
        if not checklist:
            print(checklist.failed)

    A checklist never carries or changes error state.
    """

    items: tuple[tuple[str, bool], ...]

    @property
    def passed(self) -> tuple[str, ...]:
        """Labels of the rules that passed."""
        return tuple(label for label, ok in self.items if ok)

    @property
    def failed(self) -> tuple[str, ...]:
        """Labels of the rules that failed."""
        return tuple(label for label, ok in self.items if not ok)

    @property
    def is_valid(self) -> bool:
        """True if every rule passed."""
        return all(ok for _label, ok in self.items)

    def __bool__(self) -> bool:
        """Falsy when any rule failed — enables ``if not checklist:``."""
        return self.is_valid
