"""Separate model, view and projection matrix stacks."""

from __future__ import annotations

import numpy as np

from cubeworld.linalg import identity


class MatrixStack:
    """Model, view and projection stacks, each starting with an identity."""

    def __init__(self) -> None:
        self._model = [identity()]
        self._view = [identity()]
        self._projection = [identity()]

    @staticmethod
    def _top(stack: list[np.ndarray]) -> np.ndarray:
        if not stack:
            raise IndexError("matrix stack is empty")
        return stack[-1]

    @staticmethod
    def _pop(stack: list[np.ndarray]) -> None:
        if not stack:
            raise IndexError("matrix stack is empty")
        stack.pop()

    def push_model(self) -> None:
        """Push a copy of the top model matrix."""
        self._model.append(self._top(self._model).copy())

    def push_view(self) -> None:
        """Push a copy of the top view matrix."""
        self._view.append(self._top(self._view).copy())

    def push_projection(self) -> None:
        """Push a copy of the top projection matrix."""
        self._projection.append(self._top(self._projection).copy())

    def pop_model(self) -> None:
        """Pop the top model matrix."""
        self._pop(self._model)

    def pop_view(self) -> None:
        """Pop the top view matrix."""
        self._pop(self._view)

    def pop_projection(self) -> None:
        """Pop the top projection matrix."""
        self._pop(self._projection)

    def top_model(self) -> np.ndarray:
        """The top model matrix; modify it in place to change the stack."""
        return self._top(self._model)

    def top_view(self) -> np.ndarray:
        """The top view matrix; modify it in place to change the stack."""
        return self._top(self._view)

    def top_projection(self) -> np.ndarray:
        """The top projection matrix; modify it in place to change the stack."""
        return self._top(self._projection)