import math

import pytest

from lajolla.vector import (
    Vector2,
    Vector3,
    average,
    build_basis,
    cross,
    distance,
    distance_squared,
    dot,
    elementwise_max,
    has_nan,
    is_finite,
    length,
    length_squared,
    max_component,
    normalize,
)


def test_add_then_subtract_round_trip():
    v = Vector3(1.5, -2.0, 3.25)
    w = Vector3(0.5, 4.0, -1.0)
    result = (v + w) - w
    assert list(result) == pytest.approx([1.5, -2.0, 3.25], abs=1e-9)


def test_negation_matches_scaling_by_minus_one():
    v = Vector3(1.0, -2.0, 3.0)
    assert -v == v * -1.0
    assert -v == -1.0 * v


def test_scalar_on_either_side():
    v = Vector3(1.0, 2.0, 3.0)
    assert 2.0 * v == v * 2.0
    assert 1.0 - v == -(v - 1.0)
    assert 1.0 + v == v + 1.0


def test_division_inverse_of_multiplication():
    v = Vector3(1.0, 2.0, 3.0)
    scaled_back = (v * 4.0) / 4.0
    assert list(scaled_back) == pytest.approx([1.0, 2.0, 3.0], abs=1e-9)
    divided_back = (v * v) / v
    assert list(divided_back) == pytest.approx([1.0, 2.0, 3.0], abs=1e-9)


def test_indexing_and_iteration():
    v = Vector3(1.0, 2.0, 3.0)
    assert [v[0], v[1], v[2]] == list(v)
    with pytest.raises(IndexError):
        v[3]


def test_vector2_operations():
    a = Vector2(1.0, 2.0)
    b = Vector2(3.0, 5.0)
    assert (a + b) - b == a
    assert (a * 3.0) / 3.0 == a
    assert 2.0 * a == a * 2.0
    assert 1.0 - a == -(a - 1.0)


def test_dot_and_cross_of_axes():
    ex = Vector3(1.0, 0.0, 0.0)
    ey = Vector3(0.0, 1.0, 0.0)
    ez = Vector3(0.0, 0.0, 1.0)
    assert dot(ex, ey) == 0.0
    assert cross(ex, ey) == ez
    assert cross(ey, ex) == -ez


def test_cross_is_orthogonal():
    a = Vector3(0.3, 0.4, 0.5)
    b = Vector3(-1.0, 2.0, 0.7)
    c = cross(a, b)
    assert dot(c, a) == pytest.approx(0.0, abs=1e-12)
    assert dot(c, b) == pytest.approx(0.0, abs=1e-12)


def test_distance_relations():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(-1.0, 0.5, 2.0)
    assert distance(a, b) == pytest.approx(distance(b, a))
    assert distance(a, b) ** 2 == pytest.approx(distance_squared(a, b))
    assert length(a) ** 2 == pytest.approx(length_squared(a))


def test_normalize_gives_unit_length():
    v = normalize(Vector3(0.3, 0.4, 0.5))
    assert length(v) == pytest.approx(1.0)


def test_normalize_zero_vector_is_zero():
    assert normalize(Vector3(0.0, 0.0, 0.0)) == Vector3(0.0, 0.0, 0.0)


def test_average_and_max():
    v = Vector3(1.0, 5.0, 3.0)
    assert max_component(v) == 5.0
    assert average(Vector3(2.0, 2.0, 2.0)) == pytest.approx(2.0)


def test_elementwise_max():
    a = Vector3(1.0, 5.0, -3.0)
    b = Vector3(2.0, 4.0, -4.0)
    assert elementwise_max(a, b) == Vector3(2.0, 5.0, -3.0)


def test_has_nan():
    assert has_nan(Vector3(0.0, math.nan, 1.0))
    assert not has_nan(Vector3(0.0, 1.0, 2.0))
    assert has_nan(Vector2(math.nan, 0.0))


def test_is_finite_is_true_when_any_component_finite():
    assert is_finite(Vector3(math.inf, math.inf, 1.0))
    assert not is_finite(Vector3(math.inf, -math.inf, math.nan))
    assert not is_finite(Vector2(math.inf, math.inf))


def test_string_form():
    assert str(Vector3(1.0, 2.0, 3.0)) == "(1, 2, 3)"
    assert str(Vector2(0.5, -1.0)) == "(0.5, -1)"


@pytest.mark.parametrize(
    "n",
    [
        Vector3(0.0, 0.0, 1.0),
        Vector3(0.0, 0.0, -1.0),
        normalize(Vector3(0.3, 0.4, 0.5)),
        normalize(Vector3(-0.7, 0.1, -0.2)),
    ],
)
def test_build_basis_is_orthonormal(n):
    t, b = build_basis(n)
    assert length(t) == pytest.approx(1.0)
    assert length(b) == pytest.approx(1.0)
    assert dot(t, b) == pytest.approx(0.0, abs=1e-9)
    assert dot(t, n) == pytest.approx(0.0, abs=1e-9)
    assert dot(b, n) == pytest.approx(0.0, abs=1e-9)