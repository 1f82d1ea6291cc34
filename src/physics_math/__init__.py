# MIT License (see LICENSE)
"""
physics_math - 2x2 matrix and 2D vector types for a rigid-body engine.

This package provides the small fixed-size linear algebra used by body
rotations and by the effective-mass systems of point constraints.

Main entry points:
    - Mat22: Column-major 2x2 matrix with inverse, solve and products.
    - Vec2: Mutable 2D vector used for matrix columns.
    - InvalidOperandError: Raised for invalid operands while assertions
      are enabled (PHYSICS_MATH_ASSERTIONS, default "1").

Example:
    from physics_math import Mat22, Vec2

    K = Mat22.from_scalars(2.0, 0.0, 0.0, 2.0)
    impulse = K.solve(Vec2(4.0, 6.0))   # -> Vec2(2.0, 3.0)
"""
from .mat22 import Mat22
from .vec2 import Vec2
from .util import InvalidOperandError
from .constants import EPSILON

__all__ = [
    # Types
    "Mat22",
    "Vec2",
    # Errors
    "InvalidOperandError",
    # Constants
    "EPSILON",
]
