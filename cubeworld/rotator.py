"""Rotation about any number of axes, applied last-in first."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from cubeworld import linalg


@dataclass
class _Rotation:
    radians: float
    about_axis: np.ndarray
    rotation: np.ndarray = field(default_factory=linalg.identity)


class Rotator:
    """Accumulates rotations about several axes over time."""

    def __init__(self) -> None:
        self._rotations: list[_Rotation] = []

    def add_rotation(self, radians_per_second: float, about_axis: np.ndarray) -> None:
        """Add a rotation; it is applied after those added before it."""
        axis = np.asarray(about_axis, dtype=float).copy()
        self._rotations.append(_Rotation(radians_per_second, axis))

    def rotate(self, elapsed: float) -> np.ndarray:
        """Advance every rotation by elapsed seconds and return the combined matrix."""
        final = linalg.identity()
        for rot in reversed(self._rotations):
            rot.rotation = linalg.rotate(
                rot.rotation, rot.radians * elapsed, rot.about_axis
            )
            final = final @ rot.rotation
        return final