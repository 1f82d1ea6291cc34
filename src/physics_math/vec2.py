# MIT License (see LICENSE)
"""
Mutable 2D vector used as the column type of Mat22.

Vec2 is a small value object with float components. Unlike the engine's
bare numpy arrays it supports in-place `set` so a matrix can overwrite its
columns without reallocating them. Use `to_array()` / `Vec2.from_array()`
to move between Vec2 and numpy.
"""
from __future__ import annotations
from dataclasses import dataclass

import numpy as np

from .constants import EPSILON
from .util import assertions_enabled, ensure, f64, is_finite


@dataclass
class Vec2:
    """
    2D vector with float64 components.

    Attributes:
        x: First component.
        y: Second component.
    """
    x: float = 0.0
    y: float = 0.0

    def __post_init__(self) -> None:
        """Store components as plain floats."""
        self.x = float(self.x)
        self.y = float(self.y)

    # -------------------------------------------------------------------------
    # Validity
    # -------------------------------------------------------------------------

    @staticmethod
    def is_valid(o) -> bool:
        """True if o is a Vec2 with finite components."""
        return isinstance(o, Vec2) and is_finite(o.x) and is_finite(o.y)

    @staticmethod
    def check(o) -> None:
        """Raise InvalidOperandError if o is not a valid Vec2 (assertions enabled)."""
        if assertions_enabled():
            ensure(Vec2.is_valid(o), o, "Vec2")

    # -------------------------------------------------------------------------
    # In-place mutation
    # -------------------------------------------------------------------------

    def set(self, x: float, y: float) -> Vec2:
        self.x = float(x)
        self.y = float(y)
        return self

    def set_from(self, v: Vec2) -> Vec2:
        """Copy the components of v into this vector."""
        self.x = float(v.x)
        self.y = float(v.y)
        return self

    def set_zero(self) -> Vec2:
        self.x = 0.0
        self.y = 0.0
        return self

    def clone(self) -> Vec2:
        return Vec2(self.x, self.y)

    # -------------------------------------------------------------------------
    # Arithmetic (always returns a new vector)
    # -------------------------------------------------------------------------

    @staticmethod
    def dot(a: Vec2, b: Vec2) -> float:
        return a.x * b.x + a.y * b.y

    @staticmethod
    def add(a: Vec2, b: Vec2) -> Vec2:
        return Vec2(a.x + b.x, a.y + b.y)

    @staticmethod
    def abs(v: Vec2) -> Vec2:
        """Component-wise absolute value."""
        return Vec2(abs(v.x), abs(v.y))

    def __add__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2.add(self, other)

    def __sub__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __mul__(self, scalar: float) -> Vec2:
        if not isinstance(scalar, (int, float, np.floating, np.integer)):
            return NotImplemented
        return Vec2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> Vec2:
        return self.__mul__(scalar)

    def __abs__(self) -> Vec2:
        return Vec2.abs(self)

    def is_close(self, other: Vec2, tol: float = EPSILON) -> bool:
        """Component-wise comparison with absolute tolerance tol; other must be a valid Vec2."""
        Vec2.check(other)
        return abs(self.x - other.x) <= tol and abs(self.y - other.y) <= tol

    # -------------------------------------------------------------------------
    # numpy interop
    # -------------------------------------------------------------------------

    def to_array(self) -> np.ndarray:
        """Return the components as a float64 array of shape (2,)."""
        return np.array([self.x, self.y], dtype=np.float64)

    @staticmethod
    def from_array(arr) -> Vec2:
        """
        Build a Vec2 from any array-like of shape (2,).

        Raises:
            ValueError: If arr does not hold exactly two components.
        """
        a = f64(arr)
        if a.shape != (2,):
            raise ValueError(f"Vec2 requires shape (2,), got {a.shape}")
        return Vec2(a[0], a[1])
