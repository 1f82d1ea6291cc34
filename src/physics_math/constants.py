# MIT License (see LICENSE)
"""
Numeric constants and configuration names shared by the math types.
"""
from __future__ import annotations

# Default absolute tolerance for approximate comparisons (is_close).
EPSILON: float = 1e-9

# Environment switch for operand validation. "1" (default) validates every
# externally supplied operand; "0" skips the checks for release builds.
ASSERTIONS_ENV: str = "PHYSICS_MATH_ASSERTIONS"
