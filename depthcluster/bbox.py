"""Axis-aligned bounding boxes of point clouds."""

from __future__ import annotations

import numpy as np

from depthcluster.cloud import Cloud
from depthcluster.pose import Pose

_FLOAT_MAX = float(np.finfo(np.float32).max)
_FLOAT_LOWEST = float(np.finfo(np.float32).min)


class BoundingBox:
    """An axis-aligned box given by its minimum and maximum corners.

    A box whose extent is not positive along every axis is degenerate: its
    scale and center are zero and its volume is ``WRONG_VOLUME``.
    """

    WRONG_VOLUME = -1.0

    def __init__(self, min_point=None, max_point=None) -> None:
        self._min_point = (
            np.full(3, _FLOAT_MAX) if min_point is None else np.array(min_point, dtype=float)
        )
        self._max_point = (
            np.full(3, _FLOAT_LOWEST) if max_point is None else np.array(max_point, dtype=float)
        )
        if self._min_point.shape != (3,) or self._max_point.shape != (3,):
            raise ValueError("corners must be three-dimensional")
        self._update()

    @classmethod
    def from_cloud(cls, cloud: Cloud) -> BoundingBox:
        min_point = np.full(3, _FLOAT_MAX)
        max_point = np.full(3, _FLOAT_LOWEST)
        for point in cloud:
            vector = point.as_vector()
            min_point = np.minimum(min_point, vector)
            max_point = np.maximum(max_point, vector)
        return cls(min_point, max_point)

    @property
    def min_point(self) -> np.ndarray:
        return self._min_point.copy()

    @property
    def max_point(self) -> np.ndarray:
        return self._max_point.copy()

    @property
    def center(self) -> np.ndarray:
        return self._center.copy()

    @property
    def scale(self) -> np.ndarray:
        return self._scale.copy()

    @property
    def volume(self) -> float:
        return self._volume

    def intersect(self, other: BoundingBox) -> BoundingBox:
        """The box covering the overlap of this box and ``other``."""
        return BoundingBox(
            np.maximum(self._min_point, other._min_point),
            np.minimum(self._max_point, other._max_point),
        )

    def intersects(self, other: BoundingBox) -> bool:
        return self.intersect(other).volume > 0.0

    def move_by(self, pose: Pose) -> None:
        """Move both corners by ``pose`` and re-sort them into min and max."""
        moved_min = pose.transform_point(self._min_point)
        moved_max = pose.transform_point(self._max_point)
        self._min_point = np.minimum(moved_min, moved_max)
        self._max_point = np.maximum(moved_min, moved_max)
        self._update()

    def _update(self) -> None:
        scale = self._max_point - self._min_point
        if np.any(scale <= 0.0):
            self._scale = np.zeros(3)
            self._center = np.zeros(3)
            self._volume = self.WRONG_VOLUME
            return
        self._scale = scale
        self._center = 0.5 * (self._min_point + self._max_point)
        self._volume = float(np.prod(scale))

    def __repr__(self) -> str:
        return (
            f"BoundingBox(min={self._min_point.tolist()}, "
            f"max={self._max_point.tolist()})"
        )