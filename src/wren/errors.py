"""Wren exception hierarchy.

Validation failures are never raised; they are booleans consumed by the
field validator. These exceptions cover misuse of the engine itself.
"""


class WrenError(Exception):
    """Base for all wren-specific errors."""


class ConfigurationError(WrenError):
    """Raised when validator configuration is invalid.

    Typically raised by ``ValidatorConfig.__post_init__`` at construction.
    """


class RuleContractError(WrenError, TypeError):
    """A caller broke the engine's input contract.

    Raised for a non-``str`` field value, a non-``bool`` rule result, or
    ``raw=True`` combined with ``short_circuit=True``. These are programming
    errors and are never coerced.
    """
