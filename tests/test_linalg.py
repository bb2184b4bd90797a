import math

import numpy as np
import pytest

from cubeworld.linalg import (
    format_vec,
    identity,
    look_at,
    normalize,
    perspective,
    rotate,
    transform_point,
    translate,
    vec3,
    vec4,
    vector_less_than,
    vectors_equal,
)


def test_vec_constructors():
    assert np.array_equal(vec3(1, 2, 3), np.array([1.0, 2.0, 3.0]))
    assert np.array_equal(vec4(1, 2, 3, 4), np.array([1.0, 2.0, 3.0, 4.0]))


def test_identity_is_new_each_time():
    a = identity()
    a[0, 0] = 5
    assert np.array_equal(identity(), np.eye(4))


def test_normalize_unit_length_same_direction():
    v = vec3(3, -4, 12)
    n = normalize(v)
    assert math.isclose(np.linalg.norm(n), 1.0)
    assert np.allclose(np.cross(n, v), 0.0)
    assert np.dot(n, v) > 0


def test_translate_moves_points():
    t = vec3(1.5, -2, 7)
    p = vec3(4, 5, 6)
    assert np.allclose(transform_point(translate(identity(), t), p), p + t)


def test_rotate_inverse_is_identity():
    axis = vec3(1, 2, 3)
    m = rotate(identity(), 0.7, axis) @ rotate(identity(), -0.7, axis)
    assert np.allclose(m, np.eye(4))


def test_rotate_is_orthonormal_and_keeps_axis():
    axis = vec3(1, 1, 0)
    r = rotate(identity(), 1.1, axis)
    assert np.allclose(r[:3, :3] @ r[:3, :3].T, np.eye(3))
    assert np.allclose(transform_point(r, axis), axis)


def test_rotate_normalizes_axis():
    assert np.allclose(
        rotate(identity(), 0.3, vec3(0, 0, 2)), rotate(identity(), 0.3, vec3(0, 0, 1))
    )


def test_rotate_quarter_turn_about_z():
    r = rotate(identity(), math.pi / 2, vec3(0, 0, 1))
    assert np.allclose(transform_point(r, vec3(1, 0, 0)), vec3(0, 1, 0))


def test_rotate_composes_with_existing_matrix():
    m = translate(identity(), vec3(1, 2, 3))
    r = rotate(m, 0.5, vec3(0, 1, 0))
    assert np.allclose(r, m @ rotate(identity(), 0.5, vec3(0, 1, 0)))


def test_look_at_maps_eye_to_origin_and_center_forward():
    eye = vec3(1, 2, 9)
    center = vec3(1, 2, 4)
    view = look_at(eye, center, vec3(0, 1, 0))
    assert np.allclose(transform_point(view, eye), 0.0)
    dist = np.linalg.norm(center - eye)
    assert np.allclose(transform_point(view, center), vec3(0, 0, -dist))


def test_perspective_maps_near_and_far_planes():
    near, far = 0.01, 1000.0
    p = perspective(math.pi / 3, 1.5, near, far)
    a = p @ vec4(0, 0, -near, 1)
    b = p @ vec4(0, 0, -far, 1)
    assert math.isclose(a[2] / a[3], -1.0, abs_tol=1e-9)
    assert math.isclose(b[2] / b[3], 1.0, abs_tol=1e-6)


def test_perspective_rejects_zero_aspect():
    with pytest.raises(ValueError):
        perspective(1.0, 0.0, 0.1, 10.0)


def test_format_vec():
    assert format_vec(vec3(1, 2, 3)) == "(1.0000000000,2.0000000000,3.0000000000)"


def test_vectors_equal_within_epsilon():
    assert vectors_equal(vec3(1, 2, 3), vec3(1.00005, 2, 3))
    assert not vectors_equal(vec3(1, 2, 3), vec3(1.001, 2, 3))


def test_vector_less_than():
    assert vector_less_than(vec3(1, 0, 0), vec3(2, 0, 0))
    assert not vector_less_than(vec3(2, 0, 0), vec3(1, 0, 0))
    assert vector_less_than(vec3(1, 0, 5), vec3(1, 1, 0))
    assert vector_less_than(vec3(1, 1, 0), vec3(1.00001, 1, 1))


def test_vector_less_than_equal_is_false_both_ways():
    a = vec3(1, 2, 3)
    b = vec3(1.00001, 2, 3)
    assert not vector_less_than(a, b)
    assert not vector_less_than(b, a)