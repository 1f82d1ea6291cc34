# MIT License (see LICENSE)
"""
Low-level numeric helpers and the operand assertion facility.

Every public operation of Vec2/Mat22 that accepts an externally supplied
operand is checked through `ensure()`. With assertions enabled (the default)
an invalid operand is dumped to the module logger and rejected with
InvalidOperandError. Setting PHYSICS_MATH_ASSERTIONS=0 skips the checks
entirely; results for invalid operands are then unspecified.
"""
from __future__ import annotations
import logging
import os
from typing import Any

import numpy as np

from .constants import ASSERTIONS_ENV

logger = logging.getLogger(__name__)


class InvalidOperandError(ValueError):
    """Raised when an invalid vector or matrix is passed to an operation."""


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array.

    Used by the array interop helpers so tuples, lists and arrays of any
    numeric dtype are accepted.
    """
    return np.array(x, dtype=np.float64)


def is_finite(value: Any) -> bool:
    """True if value is a real number that is neither NaN nor infinite."""
    if isinstance(value, bool) or not isinstance(value, (int, float, np.floating, np.integer)):
        return False
    try:
        return bool(np.isfinite(float(value)))
    except (OverflowError, TypeError):
        # int too large for a float
        return False


def assertions_enabled() -> bool:
    """Check if operand validation is enabled via environment variable."""
    return os.environ.get(ASSERTIONS_ENV, "1") != "0"


def ensure(valid: bool, obj: Any, kind: str) -> None:
    """
    Reject an operand that failed its validity predicate.

    Args:
        valid: Result of the type's is_valid() predicate for obj.
        obj: The operand, dumped to the log on failure.
        kind: Type name used in the error message ("Vec2", "Mat22").

    Raises:
        InvalidOperandError: If valid is False.
    """
    if valid:
        return
    logger.debug("invalid %s operand: %r", kind, obj)
    raise InvalidOperandError(f"Invalid {kind}: {obj!r}")
