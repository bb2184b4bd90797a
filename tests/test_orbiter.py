import math

import numpy as np

from cubeworld.linalg import identity, rotate, transform_point, vec3
from cubeworld.orbiter import Orbiter


ORIGIN = vec3(0, 0, 0)


def test_orbit_zero_elapsed_is_translation():
    offset = vec3(5, 0, 1)
    o = Orbiter(1.0, offset, vec3(0, 1, 0))
    assert np.allclose(transform_point(o.orbit(0.0), ORIGIN), offset)


def test_orbit_matches_rotation_of_offset():
    offset = vec3(3, 0, 0)
    axis = vec3(0, 0, 1)
    o = Orbiter(0.8, offset, axis)
    expected = transform_point(rotate(identity(), 0.8 * 0.5, axis), offset)
    assert np.allclose(transform_point(o.orbit(0.5), ORIGIN), expected)


def test_orbit_accumulates():
    offset = vec3(2, 0, 0)
    axis = vec3(0, 1, 0)
    a = Orbiter(1.2, offset, axis)
    b = Orbiter(1.2, offset, axis)
    a.orbit(0.25)
    assert np.allclose(a.orbit(0.25), b.orbit(0.5))


def test_orbit_keeps_radius():
    offset = vec3(1, 2, 2)
    o = Orbiter(math.pi / 5, offset, vec3(0, 1, 0))
    for _ in range(4):
        p = transform_point(o.orbit(1.0), ORIGIN)
        assert math.isclose(np.linalg.norm(p), np.linalg.norm(offset))


def test_set_translate_to_and_speed_attributes():
    o = Orbiter(1.0, vec3(1, 0, 0), vec3(0, 1, 0))
    o.radians_per_second = 0.0
    new_offset = vec3(0, 0, 4)
    o.set_translate_to(new_offset)
    assert np.allclose(transform_point(o.orbit(10.0), ORIGIN), new_offset)


def test_about_axis_can_change():
    o = Orbiter(1.0, vec3(1, 0, 0), vec3(0, 1, 0))
    o.about_axis = vec3(1, 0, 0)
    # Rotating about the offset's own axis leaves the point in place.
    assert np.allclose(transform_point(o.orbit(1.0), ORIGIN), vec3(1, 0, 0))