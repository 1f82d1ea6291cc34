import logging

import numpy as np
import pytest
from physics_math import Mat22, Vec2, InvalidOperandError
from physics_math.util import assertions_enabled, is_finite


@pytest.fixture
def bad_matrix():
    return Mat22.from_scalars(np.nan, 0.0, 0.0, 1.0)


def test_assertions_enabled_by_default(monkeypatch):
    monkeypatch.delenv("PHYSICS_MATH_ASSERTIONS", raising=False)
    assert assertions_enabled()
    monkeypatch.setenv("PHYSICS_MATH_ASSERTIONS", "0")
    assert not assertions_enabled()


def test_is_finite():
    assert is_finite(1.0)
    assert is_finite(3)
    assert is_finite(np.float64(2.5))
    assert not is_finite(np.inf)
    assert not is_finite(np.nan)
    assert not is_finite(True)
    assert not is_finite("1.0")


def test_is_valid(bad_matrix):
    assert Mat22.is_valid(Mat22.identity())
    assert not Mat22.is_valid(bad_matrix)
    assert not Mat22.is_valid(Mat22.from_scalars(1.0, np.inf, 0.0, 1.0))
    assert not Mat22.is_valid(Vec2(1.0, 0.0))
    assert not Mat22.is_valid(None)


@pytest.mark.parametrize("op", [
    lambda m: Mat22.abs(m),
    lambda m: Mat22.add(m, Mat22.identity()),
    lambda m: Mat22.add(Mat22.identity(), m),
    lambda m: Mat22.mul_vec(m, Vec2(1.0, 0.0)),
    lambda m: Mat22.mul_mat(Mat22.identity(), m),
    lambda m: Mat22.mul_t_vec(m, Vec2(1.0, 0.0)),
    lambda m: Mat22.mul_t_mat(Mat22.identity(), m),
    lambda m: Mat22().set_from_matrix(m),
])
def test_invalid_matrix_operand_raises(bad_matrix, op):
    with pytest.raises(InvalidOperandError):
        op(bad_matrix)


def test_invalid_vector_operand_raises():
    M = Mat22.identity()
    bad = Vec2(0.0, np.nan)
    with pytest.raises(InvalidOperandError):
        M.solve(bad)
    with pytest.raises(InvalidOperandError):
        Mat22.mul_vec(M, bad)
    with pytest.raises(InvalidOperandError):
        Mat22.mul_t_vec(M, bad)
    with pytest.raises(InvalidOperandError):
        M.set_from_columns(bad, Vec2(1.0, 1.0))
    with pytest.raises(InvalidOperandError):
        M.set_from_columns(Vec2(1.0, 1.0), bad)
    # Rejected setters leave the receiver untouched
    assert M == Mat22.identity()


def test_wrong_operand_type_raises():
    """A matrix where a vector is expected (and vice versa) is rejected."""
    M = Mat22.identity()
    with pytest.raises(InvalidOperandError):
        Mat22.mul_vec(M, M)
    with pytest.raises(InvalidOperandError):
        Mat22.mul_mat(M, Vec2(1.0, 0.0))
    with pytest.raises(InvalidOperandError):
        M.set_from_matrix((1.0, 0.0, 0.0, 1.0))


def test_failed_check_logs_diagnostic(bad_matrix, caplog):
    with caplog.at_level(logging.DEBUG, logger="physics_math.util"):
        with pytest.raises(InvalidOperandError, match="Invalid Mat22"):
            Mat22.abs(bad_matrix)
    assert "invalid Mat22 operand" in caplog.text


def test_checks_skipped_when_disabled(bad_matrix, monkeypatch):
    """Release configuration: no validation, NaN simply propagates."""
    monkeypatch.setenv("PHYSICS_MATH_ASSERTIONS", "0")
    out = Mat22.abs(bad_matrix)
    assert np.isnan(out.ex.x)

    v = Mat22.identity().solve(Vec2(np.nan, 1.0))
    assert np.isnan(v.x)


def test_singular_is_not_a_contract_violation():
    M = Mat22.from_scalars(1.0, 2.0, 2.0, 4.0)
    assert Mat22.is_valid(M)
    assert M.get_inverse() == Mat22.zero()


def test_oversized_int_component_is_invalid():
    """An int too large for a float is not a finite component."""
    assert not is_finite(10**400)

    m = Mat22.identity()
    m.ex.x = 10**400
    assert not Mat22.is_valid(m)
    with pytest.raises(InvalidOperandError):
        Mat22.check(m)
    with pytest.raises(InvalidOperandError):
        Mat22.mul_vec(m, Vec2(1.0, 0.0))


def test_set_from_coerces_to_float():
    src = Vec2(1.0, 2.0)
    src.x = 3
    dst = Vec2().set_from(src)
    assert isinstance(dst.x, float)
    assert dst == Vec2(3.0, 2.0)


def test_is_close_rejects_wrong_type():
    with pytest.raises(InvalidOperandError):
        Vec2(1.0, 0.0).is_close((1.0, 0.0))
    with pytest.raises(InvalidOperandError):
        Mat22.identity().is_close(Vec2(1.0, 0.0))
