"""Base class for visible objects in the world and normal generation."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any

import numpy as np

from cubeworld.errors import GLError
from cubeworld.linalg import EPSILON, identity, normalize, vec3, vec4
from cubeworld.materials import Material

_CHUNK = 256


class Triangle:
    """Three clockwise vertices with a face normal and a tangent."""

    def __init__(self, v0=None, v1=None, v2=None) -> None:
        self.vertices = [
            np.zeros(3) if v is None else np.array(v, dtype=float)[:3]
            for v in (v0, v1, v2)
        ]
        self._face_normal = np.zeros(3)

    def set_vertices(self, v0, v1, v2) -> None:
        """Replace the three vertices."""
        self.vertices = [np.array(v, dtype=float)[:3] for v in (v0, v1, v2)]

    def compute_normal(self) -> None:
        """Calculate the face normal from the current vertices."""
        v0, v1, v2 = self.vertices
        self._face_normal = normalize(np.cross(v0 - v2, v0 - v1))

    def face_normal(self) -> np.ndarray:
        """The last computed face normal."""
        return self._face_normal.copy()

    def tangent(self) -> np.ndarray:
        """A vector tangent to the face."""
        v0, v1, v2 = self.vertices
        if abs(v1[0]) < 0.0001 and abs(v1[2]) < 0.0001:
            return vec3(1.0, 0.0, 0.0) if v1[1] > 0 else vec3(-1.0, 0.0, 0.0)
        if v2[1] > v1[1]:
            return v1 - v0
        return v2 - v0


def _accumulate(verts: np.ndarray, slot_values: np.ndarray) -> np.ndarray:
    """Sum slot_values over every vertex slot matching each vertex."""
    bad = np.isnan(slot_values).any(axis=1)
    clean = np.where(bad[:, None], 0.0, slot_values)
    result = np.empty_like(verts)
    for start in range(0, len(verts), _CHUNK):
        block = verts[start:start + _CHUNK]
        match = np.all(np.abs(block[:, None, :] - verts[None, :, :]) <= EPSILON, axis=2)
        sums = match.astype(float) @ clean
        if bad.any():
            sums[match[:, bad].any(axis=1)] = np.nan
        result[start:start + _CHUNK] = sums
    with np.errstate(invalid="ignore", divide="ignore"):
        return result / np.linalg.norm(result, axis=1, keepdims=True)


class WorldObject(ABC):
    """A visible object in the world built from triangles."""

    def __init__(self, name: str, program: Any, matrix_stack: Any) -> None:
        self.name = name
        self.program = program
        self.matrix_stack = matrix_stack
        self.model = identity()
        self.vao = program.generate_vertex_array_object()
        self.vertices: list[np.ndarray] = []
        self.vertex_normals: list[np.ndarray] = []
        self.vertex_tangents: list[np.ndarray] = []
        self.colors: list[np.ndarray] = []
        self.material: Material | None = None

    def set_colors(self, colors: Iterable, minimum: int = 1) -> None:
        """Use exactly minimum colors: pad with the last, drop extras, white if none."""
        given = [np.array(c, dtype=float) for c in colors]
        if not given:
            self.colors = [vec4(1.0, 1.0, 1.0, 1.0) for _ in range(minimum)]
            return
        padding = [given[-1].copy() for _ in range(max(0, minimum - len(given)))]
        self.colors = (given + padding)[:minimum]

    def compute_vertex_normals(self) -> None:
        """Give each vertex the normalised sum of the normals of faces touching it."""
        if len(self.vertices) % 3:
            raise GLError("The number of vertices must be a multiple of three.")
        if not self.vertices:
            self.vertex_normals = []
            self.vertex_tangents = []
            return

        verts = np.asarray(self.vertices, dtype=float).reshape(-1, 3)
        normals = []
        tangents = []
        for v0, v1, v2 in verts.reshape(-1, 3, 3):
            triangle = Triangle(v0, v1, v2)
            triangle.compute_normal()
            normals.append(triangle.face_normal())
            tangents.append(triangle.tangent())

        slot_normals = np.repeat(np.asarray(normals), 3, axis=0)
        slot_tangents = np.repeat(np.asarray(tangents), 3, axis=0)
        self.vertex_normals = list(_accumulate(verts, slot_normals))
        self.vertex_tangents = list(_accumulate(verts, slot_tangents))

    @abstractmethod
    def draw(self, elapsed: float) -> None:
        """Draw the object; elapsed is the seconds since the last pulse."""