# Utility Functions
#
# Common utilities used across the gyroscope models.
#
# Submodules:
#   - validation: Input checking, sanity tests

from .validation import (
    require_positive,
    require_non_negative,
    require_finite,
    require_fraction,
)

__all__ = [
    "require_positive",
    "require_non_negative",
    "require_finite",
    "require_fraction",
]
