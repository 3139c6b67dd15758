"""A 3D point that also carries the index of the laser ring it came from."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

_MAX_RING = 0xFFFF


@dataclass
class RichPoint:
    """A point with coordinates and a ring index (an unsigned 16-bit value)."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    ring: int = 0

    def __post_init__(self) -> None:
        self.x = float(self.x)
        self.y = float(self.y)
        self.z = float(self.z)
        self.ring = int(self.ring)
        if not 0 <= self.ring <= _MAX_RING:
            raise ValueError(f"ring must be within 0..{_MAX_RING}, got {self.ring}")

    @classmethod
    def from_vector(cls, vector, ring: int = 0) -> RichPoint:
        x, y, z = (float(v) for v in vector)
        return cls(x, y, z, ring)

    def as_vector(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=float)

    def dist_to_sensor_2d(self) -> float:
        return math.hypot(self.x, self.y)

    def dist_to_sensor_3d(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)