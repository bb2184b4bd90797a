"""A first-person camera in the world."""

from __future__ import annotations

import numpy as np

from cubeworld.linalg import identity, look_at, normalize, rotate, transform_point, vec3

MOVE_DELTA = 12.75
YAW_DELTA = -0.425
PITCH_DELTA = -0.425


class Camera:
    """Camera with a location and a left-handed U/V/N frame.

    It starts at 9 on the Z axis, looking down negative Z.
    """

    def __init__(self) -> None:
        self.location = vec3(0.0, 0.0, 9.0)
        self.u = vec3(1.0, 0.0, 0.0)
        self.v = vec3(0.0, 1.0, 0.0)
        self.n = vec3(0.0, 0.0, -1.0)
        self._view = identity()
        self.look()

    def look(self) -> None:
        """Recompute the view matrix from the location and frame."""
        target = self.location + normalize(self.n) * 3.0
        self._view = look_at(self.location, target, self.v)

    def _move(self, direction: np.ndarray, amount: float) -> None:
        self.location = self.location + normalize(direction) * amount
        self.look()

    def move_forward(self, elapsed: float) -> None:
        """Move along the look direction."""
        self._move(self.n, MOVE_DELTA * elapsed)

    def move_backward(self, elapsed: float) -> None:
        """Move against the look direction."""
        self._move(self.n, -MOVE_DELTA * elapsed)

    def move_up(self, elapsed: float) -> None:
        """Move along the up direction."""
        self._move(self.v, MOVE_DELTA * elapsed)

    def move_down(self, elapsed: float) -> None:
        """Move against the up direction."""
        self._move(self.v, -MOVE_DELTA * elapsed)

    def strafe_left(self, elapsed: float) -> None:
        """Move against the right direction."""
        self._move(self.u, -MOVE_DELTA * elapsed)

    def strafe_right(self, elapsed: float) -> None:
        """Move along the right direction."""
        self._move(self.u, MOVE_DELTA * elapsed)

    def pitch(self, elapsed: float, delta_y: int) -> None:
        """Rotate the up and look directions about the right axis."""
        rotation = rotate(identity(), delta_y * PITCH_DELTA * elapsed, self.u)
        self.v = transform_point(rotation, self.v)
        self.n = transform_point(rotation, self.n)
        self.look()

    def yaw(self, elapsed: float, delta_x: int) -> None:
        """Rotate the right and look directions about the up axis."""
        rotation = rotate(identity(), delta_x * YAW_DELTA * elapsed, self.v)
        self.u = transform_point(rotation, self.u)
        self.n = transform_point(rotation, self.n)
        self.look()

    def view(self) -> np.ndarray:
        """Return a copy of the current view matrix."""
        return self._view.copy()

    def set_location(self, location: np.ndarray) -> None:
        """Set the camera's position; the view is refreshed on the next look."""
        self.location = np.asarray(location, dtype=float).copy()