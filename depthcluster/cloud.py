"""A collection of rich points together with the pose they were recorded at."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Iterator

from depthcluster.pose import Pose
from depthcluster.rich_point import RichPoint


class Cloud:
    """An ordered list of points with a world pose and a sensor pose."""

    def __init__(
        self,
        points: Iterable[RichPoint] | None = None,
        pose: Pose | None = None,
        sensor_pose: Pose | None = None,
    ) -> None:
        self.points: list[RichPoint] = [] if points is None else list(points)
        self.pose: Pose = Pose() if pose is None else pose
        self.sensor_pose: Pose = Pose() if sensor_pose is None else sensor_pose

    def append(self, point: RichPoint) -> None:
        self.points.append(point)

    def copy(self) -> Cloud:
        """A deep copy: points and poses are not shared with the original."""
        return Cloud(
            (dataclasses.replace(point) for point in self.points),
            self.pose.copy(),
            self.sensor_pose.copy(),
        )

    def transform_in_place(self, pose: Pose) -> None:
        """Move every point by ``pose``, keeping its ring index."""
        for point in self.points:
            point.x, point.y, point.z = (
                float(v) for v in pose.transform_point(point.as_vector())
            )

    def transform(self, pose: Pose) -> Cloud:
        """Return a moved copy of this cloud, leaving this one untouched."""
        moved = self.copy()
        moved.transform_in_place(pose)
        return moved

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[RichPoint]:
        return iter(self.points)

    def __getitem__(self, index: int) -> RichPoint:
        return self.points[index]

    def __repr__(self) -> str:
        return f"Cloud({len(self.points)} points, pose={self.pose!r})"