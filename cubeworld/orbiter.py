"""Something that orbits a point, like a planet or moon."""

from __future__ import annotations

import numpy as np

from cubeworld.linalg import identity, rotate, translate


class Orbiter:
    """Accumulates a rotation about an axis applied after a fixed translation."""

    def __init__(
        self, radians_per_second: float, translate_to: np.ndarray, about_axis: np.ndarray
    ) -> None:
        self.radians_per_second = radians_per_second
        self.about_axis = np.asarray(about_axis, dtype=float).copy()
        self._translation = identity()
        self._rotation = identity()
        self.set_translate_to(translate_to)

    def set_translate_to(self, translate_to: np.ndarray) -> None:
        """Set the offset applied before rotating; its length is the radius."""
        self._translation = translate(identity(), translate_to)

    def orbit(self, elapsed: float) -> np.ndarray:
        """Advance the orbit by elapsed seconds and return rotation @ translation."""
        self._rotation = rotate(
            self._rotation, self.radians_per_second * elapsed, self.about_axis
        )
        return self._rotation @ self._translation