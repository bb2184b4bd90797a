"""Surface materials describing how objects react to light."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(eq=False)
class Material:
    """Lighting properties of a surface."""

    name: str
    ambient: np.ndarray
    diffuse: np.ndarray
    specular: np.ndarray
    shininess: float

    def __post_init__(self) -> None:
        self.ambient = np.array(self.ambient, dtype=float)
        self.diffuse = np.array(self.diffuse, dtype=float)
        self.specular = np.array(self.specular, dtype=float)
        self.shininess = float(self.shininess)


class BlackPlastic(Material):
    """A basic black plastic."""

    def __init__(self) -> None:
        super().__init__(
            "BlackPlastic",
            (0.0, 0.0, 0.0, 1.0),
            (0.01, 0.01, 0.01, 1.0),
            (0.5, 0.5, 0.5, 1.0),
            32.0,
        )


class Brass(Material):
    """A basic brass."""

    def __init__(self) -> None:
        super().__init__(
            "Brass",
            (0.3294, 0.2235, 0.02745, 1.0),
            (0.7804, 0.5686, 0.1137, 1.0),
            (0.9922, 0.9412, 0.8078, 1.0),
            27.9,
        )


class Chrome(Material):
    """A shiny chrome."""

    def __init__(self) -> None:
        super().__init__(
            "Chrome",
            (0.25, 0.25, 0.25, 1.0),
            (0.4, 0.4, 0.4, 1.0),
            (0.999, 0.999, 0.999, 1.0),
            200.0,
        )


class Gold(Material):
    """A basic gold."""

    def __init__(self) -> None:
        super().__init__(
            "Gold",
            (0.2473, 0.1995, 0.0745, 1.0),
            (0.7516, 0.6065, 0.2265, 1.0),
            (0.6283, 0.5559, 0.3661, 1.0),
            51.20,
        )


class GrayPlastic(Material):
    """A basic gray plastic."""

    def __init__(self) -> None:
        super().__init__(
            "GrayPlastic",
            (0.03, 0.03, 0.03, 1.0),
            (0.05, 0.05, 0.05, 1.0),
            (0.2, 0.2, 0.2, 1.0),
            32.0,
        )


class Pearl(Material):
    """A pearly surface."""

    def __init__(self) -> None:
        super().__init__(
            "Pearl",
            (0.25, 0.20725, 0.20725, 1.0),
            (1.0, 0.829, 0.829, 1.0),
            (0.296648, 0.296648, 0.296648, 1.0),
            32.0,
        )


class WhitePlastic(Material):
    """A basic white plastic."""

    def __init__(self) -> None:
        super().__init__(
            "WhitePlastic",
            (0.33, 0.33, 0.33, 1.0),
            (0.88, 0.88, 0.88, 1.0),
            (0.7, 0.7, 0.7, 1.0),
            32.0,
        )