"""The world: a named collection of objects with a camera and matrix stack."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from cubeworld.camera import Camera
from cubeworld.errors import GLError
from cubeworld.matrix_stack import MatrixStack
from cubeworld.observable import Observable
from cubeworld.world_object import WorldObject


class World(Observable):
    """Holds every WorldObject along with the shader program, camera and matrices.

    Objects are kept in insertion order and may be looked up by position or
    by their unique name.
    """

    def __init__(self, program: Any) -> None:
        self.program = program
        self.camera = Camera()
        self.matrix_stack = MatrixStack()
        self._objects: list[WorldObject] = []
        self._by_name: dict[str, int] = {}

    def add_world_object(self, world_obj: WorldObject) -> WorldObject:
        """Add world_obj, whose name must be unique, and return it."""
        if world_obj.name in self._by_name:
            raise GLError("WorldObject names must be unique.")
        self._by_name[world_obj.name] = len(self._objects)
        self._objects.append(world_obj)
        return world_obj

    def __getitem__(self, key: int | str) -> WorldObject:
        if isinstance(key, str):
            index = self._by_name.get(key)
            if index is None:
                raise GLError("Index out of bounds.  Invalid WorldObject name.")
            return self._objects[index]
        if key < 0 or key >= len(self._objects):
            raise GLError("Index out of bounds.")
        return self._objects[key]

    def __len__(self) -> int:
        return len(self._objects)

    def __iter__(self) -> Iterator[WorldObject]:
        return iter(list(self._objects))

    def draw(self, elapsed: float) -> None:
        """Draw every object in insertion order."""
        for world_obj in self:
            world_obj.draw(elapsed)