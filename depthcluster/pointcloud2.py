"""Conversion of packed point cloud messages and odometry into clouds and poses."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass
from collections.abc import Sequence

import numpy as np

from depthcluster.cloud import Cloud
from depthcluster.pose import Pose
from depthcluster.rich_point import RichPoint

_X, _Y, _Z, _RING = 0, 1, 2, 4
_FLOAT = struct.Struct("<f")
_UINT16 = struct.Struct("<H")


@dataclass(frozen=True)
class PointField:
    """Description of one field inside each packed point."""

    name: str
    offset: int
    datatype: int = 7
    count: int = 1


def cloud_from_point_cloud2(
    fields: Sequence[PointField], data, point_step: int
) -> Cloud:
    """Unpack a scanner point buffer into a cloud.

    The first three fields hold the float32 coordinates and the fifth field
    the uint16 ring index; all values are little-endian.
    """
    if len(fields) <= _RING:
        raise ValueError(f"expected at least {_RING + 1} fields, got {len(fields)}")
    if point_step <= 0:
        raise ValueError("point_step must be positive")
    buffer = memoryview(bytes(data))
    x_off, y_off, z_off = (fields[i].offset for i in (_X, _Y, _Z))
    ring_off = fields[_RING].offset
    cloud = Cloud()
    try:
        for start in range(0, len(buffer), point_step):
            (x,) = _FLOAT.unpack_from(buffer, start + x_off)
            (y,) = _FLOAT.unpack_from(buffer, start + y_off)
            (z,) = _FLOAT.unpack_from(buffer, start + z_off)
            (ring,) = _UINT16.unpack_from(buffer, start + ring_off)
            cloud.append(RichPoint(x, y, z, ring))
    except struct.error as error:
        raise ValueError(f"point data is truncated: {error}") from error
    return cloud


def pose_from_odometry(position, orientation) -> Pose:
    """A pose from a position ``(x, y, z)`` and a quaternion ``(x, y, z, w)``."""
    px, py, pz = (float(v) for v in position)
    qx, qy, qz, qw = (float(v) for v in orientation)
    norm = math.sqrt(qx * qx + qy * qy + qz * qz + qw * qw)
    if norm == 0.0:
        raise ValueError("orientation quaternion must not be zero")
    qx, qy, qz, qw = qx / norm, qy / norm, qz / norm, qw / norm
    rotation = np.array(
        [
            [1 - 2 * (qy * qy + qz * qz), 2 * (qx * qy - qz * qw), 2 * (qx * qz + qy * qw)],
            [2 * (qx * qy + qz * qw), 1 - 2 * (qx * qx + qz * qz), 2 * (qy * qz - qx * qw)],
            [2 * (qx * qz - qy * qw), 2 * (qy * qz + qx * qw), 1 - 2 * (qx * qx + qy * qy)],
        ]
    )
    matrix = np.eye(4)
    matrix[:3, :3] = rotation
    matrix[:3, 3] = (px, py, pz)
    return Pose.from_matrix(matrix)