"""Exception hierarchy for weighted-selector.

All exceptions derive from WeightedSelectorError, enabling broad catch
patterns at the application boundary while allowing fine-grained handling
internally.
"""


class WeightedSelectorError(Exception):
    """Base exception for all weighted-selector errors."""


class SelectorBuildError(WeightedSelectorError):
    """A selector could not be built.

    Raised when ``build()`` is called with no accumulated items, or when the
    weights sum to zero so no valid cumulative distribution exists.
    """


class SelectorNotBuiltError(WeightedSelectorError):
    """Selection was attempted on a stale dynamic selector.

    Raised when ``select_random_item()`` is called after ``add()``,
    ``remove()`` or ``clear()`` without a subsequent ``build()``.
    """


class InvalidWeightError(WeightedSelectorError, ValueError):
    """A weight is negative, NaN or infinite."""


class ConfigValidationError(WeightedSelectorError):
    """Configuration override validation failed.

    Raised when overrides contain unknown keys or values that fail type
    validation.
    """
