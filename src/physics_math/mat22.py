# MIT License (see LICENSE)
"""
2-by-2 matrix stored in column-major order.

Mat22 holds two column vectors:

    | ex.x  ey.x |
    | ex.y  ey.y |

It is the type behind body rotations and the small effective-mass systems
of point constraints (K·λ = -C). Solving such a system with `solve()` is
cheaper than building the inverse when the matrix is only used once.

Singular matrices are not an error: `get_inverse()` and `solve()` replace
the reciprocal of a zero determinant with 0, producing a zero result. Use
`is_invertible()` to detect that case beforehand.

Example:
    R = Mat22.from_angle(np.pi / 2)
    Mat22.mul_vec(R, Vec2(1, 0))      # -> Vec2(~0, 1)
    Mat22.mul_t_vec(R, Vec2(0, 1))    # -> Vec2(1, ~0), inverse rotation
"""
from __future__ import annotations
import json
from dataclasses import dataclass, field

import numpy as np

from .constants import EPSILON
from .util import assertions_enabled, ensure, f64
from .vec2 import Vec2


@dataclass
class Mat22:
    """
    A 2-by-2 matrix as two columns.

    Attributes:
        ex: First column (a, c).
        ey: Second column (b, d).

    Note:
        Columns passed to the constructor are copied, never aliased.
    """
    ex: Vec2 = field(default_factory=Vec2)
    ey: Vec2 = field(default_factory=Vec2)

    def __post_init__(self) -> None:
        self.ex = Vec2(self.ex.x, self.ex.y)
        self.ey = Vec2(self.ey.x, self.ey.y)

    # =========================================================================
    # Factories
    # =========================================================================

    @classmethod
    def from_scalars(cls, a: float, b: float, c: float, d: float) -> Mat22:
        """Matrix with rows (a, b) and (c, d), i.e. ex = (a, c), ey = (b, d)."""
        return cls(Vec2(a, c), Vec2(b, d))

    @classmethod
    def from_columns(cls, ex: Vec2, ey: Vec2) -> Mat22:
        return cls(ex, ey)

    @classmethod
    def identity(cls) -> Mat22:
        return cls(Vec2(1.0, 0.0), Vec2(0.0, 1.0))

    @classmethod
    def zero(cls) -> Mat22:
        return cls()

    @classmethod
    def from_angle(cls, angle: float) -> Mat22:
        """
        Rotation matrix for a counterclockwise angle in radians.

        Maps body-local points to world orientation:
          p_world = R · p_local,  R = [[c, -s], [s, c]]
        """
        c, s = float(np.cos(angle)), float(np.sin(angle))
        return cls(Vec2(c, s), Vec2(-s, c))

    @classmethod
    def from_array(cls, arr) -> Mat22:
        """
        Build a matrix from an array-like of shape (2, 2) in math layout.

        arr[:, 0] becomes ex and arr[:, 1] becomes ey.

        Raises:
            ValueError: If arr is not 2x2.
        """
        m = f64(arr)
        if m.shape != (2, 2):
            raise ValueError(f"Mat22 requires shape (2, 2), got {m.shape}")
        return cls(Vec2(m[0, 0], m[1, 0]), Vec2(m[0, 1], m[1, 1]))

    def to_array(self) -> np.ndarray:
        """Return the matrix as a float64 array of shape (2, 2) in math layout."""
        return np.array(
            [[self.ex.x, self.ey.x],
             [self.ex.y, self.ey.y]],
            dtype=np.float64,
        )

    # =========================================================================
    # Validity
    # =========================================================================

    @staticmethod
    def is_valid(o) -> bool:
        """True if o is a Mat22 whose columns are both valid vectors."""
        return isinstance(o, Mat22) and Vec2.is_valid(o.ex) and Vec2.is_valid(o.ey)

    @staticmethod
    def check(o) -> None:
        """Raise InvalidOperandError if o is not a valid Mat22 (assertions enabled)."""
        if assertions_enabled():
            ensure(Mat22.is_valid(o), o, "Mat22")

    # =========================================================================
    # In-place setters
    # =========================================================================

    def set_from_scalars(self, a: float, b: float, c: float, d: float) -> None:
        self.ex.set(a, c)
        self.ey.set(b, d)

    def set_from_columns(self, ex: Vec2, ey: Vec2) -> None:
        Vec2.check(ex)
        Vec2.check(ey)
        self.ex.set_from(ex)
        self.ey.set_from(ey)

    def set_from_matrix(self, m: Mat22) -> None:
        Mat22.check(m)
        self.ex.set_from(m.ex)
        self.ey.set_from(m.ey)

    def set_identity(self) -> None:
        self.ex.x = 1.0
        self.ey.x = 0.0
        self.ex.y = 0.0
        self.ey.y = 1.0

    def set_zero(self) -> None:
        self.ex.x = 0.0
        self.ey.x = 0.0
        self.ex.y = 0.0
        self.ey.y = 0.0

    # =========================================================================
    # Inverse and linear solve
    # =========================================================================

    def determinant(self) -> float:
        return self.ex.x * self.ey.y - self.ey.x * self.ex.y

    def is_invertible(self, eps: float = 0.0) -> bool:
        """
        True if |det| > eps.

        With the default eps=0 this is exactly the condition under which
        get_inverse()/solve() produce a meaningful result. Pass a positive
        eps to also reject nearly singular matrices.
        """
        return abs(self.determinant()) > eps

    def _inv_det(self) -> float:
        # Zero determinant keeps a zero reciprocal (no division, no error).
        det = self.determinant()
        if det != 0.0:
            det = 1.0 / det
        return det

    def get_inverse(self) -> Mat22:
        """
        Return the inverse as adjugate / determinant.

        A singular matrix yields the zero matrix.
        """
        a, b = self.ex.x, self.ey.x
        c, d = self.ex.y, self.ey.y
        det = self._inv_det()
        return Mat22(
            Vec2(det * d, -det * c),
            Vec2(-det * b, det * a),
        )

    def solve(self, v: Vec2) -> Vec2:
        """
        Solve A · x = v for x by Cramer's rule.

        More efficient than computing the inverse in one-shot cases. A
        singular matrix yields the zero vector.
        """
        Vec2.check(v)
        a, b = self.ex.x, self.ey.x
        c, d = self.ex.y, self.ey.y
        det = self._inv_det()
        return Vec2(
            det * (d * v.x - b * v.y),
            det * (a * v.y - c * v.x),
        )

    # =========================================================================
    # Products
    # =========================================================================

    @staticmethod
    def mul_vec(mx: Mat22, v: Vec2) -> Vec2:
        """
        Multiply a matrix times a vector.

        If a rotation matrix is provided, then this transforms the vector
        from one frame to another.
        """
        Mat22.check(mx)
        Vec2.check(v)
        return Vec2(
            mx.ex.x * v.x + mx.ey.x * v.y,
            mx.ex.y * v.x + mx.ey.y * v.y,
        )

    @staticmethod
    def mul_mat(mx: Mat22, m: Mat22) -> Mat22:
        """Matrix product mx · m (apply m first, then mx)."""
        Mat22.check(m)
        return Mat22(Mat22.mul_vec(mx, m.ex), Mat22.mul_vec(mx, m.ey))

    @staticmethod
    def mul_t_vec(mx: Mat22, v: Vec2) -> Vec2:
        """
        Multiply a matrix transpose times a vector.

        If a rotation matrix is provided, then this transforms the vector
        from one frame to another (inverse transform).
        """
        Mat22.check(mx)
        Vec2.check(v)
        return Vec2(Vec2.dot(v, mx.ex), Vec2.dot(v, mx.ey))

    @staticmethod
    def mul_t_mat(mx: Mat22, m: Mat22) -> Mat22:
        """Transpose product mx^T · m."""
        Mat22.check(mx)
        Mat22.check(m)
        c1 = Vec2(Vec2.dot(mx.ex, m.ex), Vec2.dot(mx.ey, m.ex))
        c2 = Vec2(Vec2.dot(mx.ex, m.ey), Vec2.dot(mx.ey, m.ey))
        return Mat22(c1, c2)

    def __matmul__(self, other):
        if isinstance(other, Vec2):
            return Mat22.mul_vec(self, other)
        if isinstance(other, Mat22):
            return Mat22.mul_mat(self, other)
        return NotImplemented

    # =========================================================================
    # Element-wise
    # =========================================================================

    @staticmethod
    def abs(mx: Mat22) -> Mat22:
        Mat22.check(mx)
        return Mat22(Vec2.abs(mx.ex), Vec2.abs(mx.ey))

    @staticmethod
    def add(mx1: Mat22, mx2: Mat22) -> Mat22:
        """Element-wise sum, column by column."""
        Mat22.check(mx1)
        Mat22.check(mx2)
        return Mat22(Vec2.add(mx1.ex, mx2.ex), Vec2.add(mx1.ey, mx2.ey))

    def __abs__(self) -> Mat22:
        return Mat22.abs(self)

    def __add__(self, other: Mat22) -> Mat22:
        if not isinstance(other, Mat22):
            return NotImplemented
        return Mat22.add(self, other)

    def is_close(self, other: Mat22, tol: float = EPSILON) -> bool:
        """Column-wise comparison with absolute tolerance tol; other must be a valid Mat22."""
        Mat22.check(other)
        return self.ex.is_close(other.ex, tol) and self.ey.is_close(other.ey, tol)

    def __str__(self) -> str:
        return json.dumps({
            "ex": {"x": self.ex.x, "y": self.ex.y},
            "ey": {"x": self.ey.x, "y": self.ey.y},
        })
