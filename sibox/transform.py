"""Position, rotation and scale of an object in 3D space."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

Vector3 = tuple[float, float, float]


def _vector(values: Sequence[float]) -> Vector3:
    x, y, z = values
    return (float(x), float(y), float(z))


def _add(a: Sequence[float], b: Sequence[float]) -> Vector3:
    return _vector([p + q for p, q in zip(a, b, strict=True)])


def _mul(a: Sequence[float], b: Sequence[float]) -> Vector3:
    return _vector([p * q for p, q in zip(a, b, strict=True)])


@dataclass
class Transform:
    """Position, rotation and scale, each a 3-component vector."""

    position: Vector3 = (0.0, 0.0, 0.0)
    rotation: Vector3 = (0.0, 0.0, 0.0)
    scale: Vector3 = (1.0, 1.0, 1.0)

    def __post_init__(self) -> None:
        self.position = _vector(self.position)
        self.rotation = _vector(self.rotation)
        self.scale = _vector(self.scale)

    def translate(self, translation: Sequence[float]) -> None:
        self.position = _add(self.position, translation)

    def rotate(self, rotation: Sequence[float]) -> None:
        self.rotation = _add(self.rotation, rotation)

    def add_scale(self, scale: Sequence[float]) -> None:
        self.scale = _add(self.scale, scale)

    def scale_by(self, scale: Sequence[float]) -> None:
        self.scale = _mul(self.scale, scale)