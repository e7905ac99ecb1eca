"""
Input checking for the phase-shift models.

All checks accept scalars or numpy arrays and raise ValueError naming the
offending parameter.
"""

import numpy as np


def require_positive(value, name: str):
    """Raise ValueError unless every element of ``value`` is > 0."""
    arr = np.asarray(value, dtype=float)
    if not np.all(np.isfinite(arr)) or np.any(arr <= 0):
        raise ValueError(f"{name} must be positive and finite, got {value!r}")
    return value


def require_non_negative(value, name: str):
    """Raise ValueError unless every element of ``value`` is >= 0."""
    arr = np.asarray(value, dtype=float)
    if not np.all(np.isfinite(arr)) or np.any(arr < 0):
        raise ValueError(f"{name} must be non-negative and finite, got {value!r}")
    return value


def require_finite(value, name: str):
    """Raise ValueError if ``value`` contains NaN or inf."""
    if not np.all(np.isfinite(np.asarray(value, dtype=float))):
        raise ValueError(f"{name} must be finite, got {value!r}")
    return value


def require_fraction(value, name: str):
    """Raise ValueError unless 0 < value <= 1 (e.g. fringe contrast)."""
    arr = np.asarray(value, dtype=float)
    if np.any(arr <= 0) or np.any(arr > 1):
        raise ValueError(f"{name} must lie in (0, 1], got {value!r}")
    return value


__all__ = [
    "require_positive",
    "require_non_negative",
    "require_finite",
    "require_fraction",
]
