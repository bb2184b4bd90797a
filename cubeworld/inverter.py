"""Toggle between two values."""

from __future__ import annotations

from typing import Generic, TypeVar

import numpy as np

T = TypeVar("T")


class Inverter(Generic[T]):
    """Maps val to inverse and anything else to val."""

    def __init__(self, val: T, inverse: T) -> None:
        self.val = val
        self.inverse = inverse

    def __call__(self, ele: T) -> T:
        if isinstance(ele, np.ndarray) or isinstance(self.val, np.ndarray):
            equal = np.array_equal(ele, self.val)
        else:
            equal = ele == self.val
        return self.inverse if equal else self.val