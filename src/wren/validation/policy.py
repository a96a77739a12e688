"""Error policies — what a failing rule set reports.

A policy is a tagged variant, never a ``bool | str`` overload::

    SingleMessage("Incorrect Format")  # show one fixed message on failure
    NoMessage()                        # record error state, show nothing

``Check`` binds an ordered rule set to the message reported when it is
the first stage of a composite to fail.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SingleMessage:
    """Report one fixed message whenever the rule set fails."""

    message: str


@dataclass(frozen=True, slots=True)
class NoMessage:
    """Track error state without displaying any text.

    Used for rule groups that only drive downstream logic.
    """


type ErrorPolicy = SingleMessage | NoMessage


@dataclass(frozen=True, slots=True)
class Check:
    """One stage of a composite validator: rule results plus their message.

    ``results`` is frozen to a tuple, so a generator can be passed and the
    stage evaluated more than once.
    """

    results: tuple[bool, ...]
    message: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "results", tuple(self.results))

    @property
    def policy(self) -> SingleMessage:
        return SingleMessage(self.message)
