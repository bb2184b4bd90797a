"""Light sources described by their ambient, diffuse and specular terms."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


def _as_vector(value: object) -> np.ndarray:
    return np.array(value, dtype=float)


@dataclass(eq=False)
class Light:
    """A basic light with ambient, diffuse and specular RGBA terms."""

    ambient: np.ndarray
    diffuse: np.ndarray
    specular: np.ndarray

    def __post_init__(self) -> None:
        self.ambient = _as_vector(self.ambient)
        self.diffuse = _as_vector(self.diffuse)
        self.specular = _as_vector(self.specular)


@dataclass(eq=False)
class DistanceLight(Light):
    """A light infinitely far away, shining in a fixed direction."""

    direction: np.ndarray

    def __post_init__(self) -> None:
        super().__post_init__()
        self.direction = _as_vector(self.direction)


@dataclass(eq=False)
class PositionalLight(Light):
    """A light at a position whose strength falls off with distance."""

    constant_attenuation: float
    linear_attenuation: float
    quadratic_attenuation: float
    position: np.ndarray

    def __post_init__(self) -> None:
        super().__post_init__()
        self.constant_attenuation = float(self.constant_attenuation)
        self.linear_attenuation = float(self.linear_attenuation)
        self.quadratic_attenuation = float(self.quadratic_attenuation)
        self.position = _as_vector(self.position)