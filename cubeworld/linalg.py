"""Vector and 4x4 matrix helpers for column-vector transforms.

Matrices are 4x4 numpy arrays used as ``m @ v`` on column vectors, so
``a @ b`` applies ``b`` first. Angles are in radians.
"""

from __future__ import annotations

import math

import numpy as np

EPSILON = 0.0001


def vec3(x: float, y: float, z: float) -> np.ndarray:
    """Return a 3-component vector."""
    return np.array([x, y, z], dtype=float)


def vec4(x: float, y: float, z: float, w: float) -> np.ndarray:
    """Return a 4-component vector."""
    return np.array([x, y, z, w], dtype=float)


def identity() -> np.ndarray:
    """Return a new 4x4 identity matrix."""
    return np.identity(4, dtype=float)


def normalize(v: np.ndarray) -> np.ndarray:
    """Return v scaled to unit length; a zero vector yields NaNs."""
    v = np.asarray(v, dtype=float)
    with np.errstate(invalid="ignore", divide="ignore"):
        return v / np.linalg.norm(v)


def translate(m: np.ndarray, v: np.ndarray) -> np.ndarray:
    """Return m followed by a translation by v (m @ T(v))."""
    t = identity()
    t[:3, 3] = np.asarray(v, dtype=float)[:3]
    return np.asarray(m, dtype=float) @ t


def rotate(m: np.ndarray, angle: float, axis: np.ndarray) -> np.ndarray:
    """Return m @ R, R rotating by angle about the normalised axis."""
    x, y, z = normalize(np.asarray(axis, dtype=float)[:3])
    c = math.cos(angle)
    s = math.sin(angle)
    t = 1.0 - c
    r = identity()
    r[:3, :3] = [
        [t * x * x + c, t * x * y - s * z, t * x * z + s * y],
        [t * x * y + s * z, t * y * y + c, t * y * z - s * x],
        [t * x * z - s * y, t * y * z + s * x, t * z * z + c],
    ]
    return np.asarray(m, dtype=float) @ r


def look_at(eye: np.ndarray, center: np.ndarray, up: np.ndarray) -> np.ndarray:
    """Return a right-handed view matrix looking from eye towards center."""
    eye = np.asarray(eye, dtype=float)
    f = normalize(np.asarray(center, dtype=float) - eye)
    s = normalize(np.cross(f, np.asarray(up, dtype=float)))
    u = np.cross(s, f)
    result = identity()
    result[0, :3] = s
    result[1, :3] = u
    result[2, :3] = -f
    result[0, 3] = -np.dot(s, eye)
    result[1, 3] = -np.dot(u, eye)
    result[2, 3] = np.dot(f, eye)
    return result


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Return a right-handed perspective projection with depth in [-1, 1]."""
    if aspect == 0:
        raise ValueError("aspect must be non-zero")
    if far == near:
        raise ValueError("near and far must differ")
    tan_half = math.tan(fovy / 2.0)
    result = np.zeros((4, 4), dtype=float)
    result[0, 0] = 1.0 / (aspect * tan_half)
    result[1, 1] = 1.0 / tan_half
    result[2, 2] = -(far + near) / (far - near)
    result[2, 3] = -(2.0 * far * near) / (far - near)
    result[3, 2] = -1.0
    return result


def transform_point(m: np.ndarray, v: np.ndarray) -> np.ndarray:
    """Apply m to the point v (w = 1) and return the first three components."""
    p = np.append(np.asarray(v, dtype=float)[:3], 1.0)
    return (np.asarray(m, dtype=float) @ p)[:3]


def format_vec(vec: np.ndarray) -> str:
    """Format a 3-vector as (x,y,z) with ten decimal places."""
    x, y, z = (float(c) for c in np.asarray(vec)[:3])
    return f"({x:.10f},{y:.10f},{z:.10f})"


def vectors_equal(v1: np.ndarray, v2: np.ndarray) -> bool:
    """Whether every component of v1 and v2 differs by less than EPSILON."""
    diff = np.abs(np.asarray(v1, dtype=float)[:3] - np.asarray(v2, dtype=float)[:3])
    return bool(np.all(diff < EPSILON))


def vector_less_than(v1: np.ndarray, v2: np.ndarray) -> bool:
    """Lexicographic ordering of 3-vectors with an EPSILON tolerance."""
    for a, b in zip(np.asarray(v1, dtype=float)[:3], np.asarray(v2, dtype=float)[:3]):
        if abs(a - b) > EPSILON:
            return bool(a < b)
    return False