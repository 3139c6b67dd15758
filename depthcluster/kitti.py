"""Readers for KITTI-style lidar data: raw scans, text scans and depth PNGs."""

from __future__ import annotations

import logging
import os

import numpy as np
from PIL import Image

from depthcluster.cloud import Cloud
from depthcluster.rich_point import RichPoint

logger = logging.getLogger(__name__)

# Per-ring depth corrections for the 64-beam scanner, in meters.
MOOSMAN_CORRECTIONS: tuple[float, ...] = (
    0.02587499999999987, -0.0061250000000001581, 0.031874999999999876,
    0.001874999999999849, 0.029874999999999874, -0.1961250000000001,
    0.049874999999999892, -0.034125000000000183, 0.0038749999999998508,
    0.0058749999999998526, 0.035874999999999879, -0.064124999999999988,
    0.035874999999999879, 0.001874999999999849, -0.024125000000000174,
    -0.062124999999999986, 0.039874999999999883, -0.020125000000000171,
    0.075874999999999915, -0.024125000000000174, -0.0041250000000001563,
    -0.058124999999999982, -0.032125000000000181, -0.058124999999999982,
    0.021874999999999867, -0.032125000000000181, 0.059874999999999901,
    -0.04412499999999997, 0.075874999999999915, -0.0041250000000001563,
    0.021874999999999867, 0.0058749999999998526, -0.036125000000000185,
    -0.022125000000000172, -0.0041250000000001563, -0.058124999999999982,
    -0.026125000000000176, -0.030125000000000179, 0.045874999999999888,
    0.035874999999999879, -0.026125000000000176, 0.041874999999999885,
    -0.086125000000000007, -0.060124999999999984, 0.031874999999999876,
    -0.010125000000000162, -0.024125000000000174, -0.048124999999999973,
    -0.038125000000000187, 0.039874999999999883, -0.026125000000000176,
    0.037874999999999881, -0.020125000000000171, 0.051874999999999893,
    -0.014125000000000165, 0.019874999999999865, -0.0021250000000001545,
    0.027874999999999872, 0.0058749999999998526, 0.021874999999999867,
    0.023874999999999869, 0.085874999999999702, 0.085874999999999702,
    0.11587499999999995,
)

# Depth PNGs store distances scaled by this factor.
DEPTH_PNG_SCALE = 500.0

# Pixels closer than this hold no measurement and are left untouched.
_MIN_VALID_DEPTH = 0.001

_VALUES_PER_RECORD = 4

_GRAY_MODES = frozenset({"L", "I", "F", "I;16", "I;16L", "I;16B", "I;16N"})


def read_kitti_cloud(path: str | os.PathLike) -> Cloud:
    """Read a binary scan of little-endian float32 ``x y z intensity`` records.

    Intensity is ignored; a trailing incomplete record is dropped.
    """
    data = np.fromfile(os.fspath(path), dtype="<f4")
    usable = len(data) - len(data) % _VALUES_PER_RECORD
    records = data[:usable].reshape(-1, _VALUES_PER_RECORD)
    return Cloud(RichPoint(float(x), float(y), float(z)) for x, y, z, _ in records)


def read_kitti_cloud_txt(path: str | os.PathLike) -> Cloud:
    """Read a text scan with one ``x y z intensity`` line per point.

    Lines that do not split into exactly four space-separated fields are
    skipped.
    """
    logger.info("Reading cloud from %s.", os.fspath(path))
    cloud = Cloud()
    with open(path, encoding="utf-8") as stream:
        for line in stream:
            fields = line.rstrip("\n").split(" ")
            if len(fields) != _VALUES_PER_RECORD:
                logger.error("format of line is wrong: %r", line)
                continue
            x, y, z = (float(value) for value in fields[:3])
            cloud.append(RichPoint(x, y, z))
    return cloud


def fix_kitti_depth(image) -> np.ndarray:
    """Return a copy of a depth image with the per-ring corrections applied.

    Row ``r`` has ``MOOSMAN_CORRECTIONS[r]`` subtracted from every pixel that
    holds a measurement.
    """
    depth = np.array(image, dtype=np.float32)
    if depth.ndim != 2:
        raise ValueError(f"expected a 2D depth image, got shape {depth.shape}")
    rows = depth.shape[0]
    if rows > len(MOOSMAN_CORRECTIONS):
        raise ValueError(
            f"depth image has {rows} rows, corrections exist for "
            f"{len(MOOSMAN_CORRECTIONS)}"
        )
    corrections = np.asarray(MOOSMAN_CORRECTIONS[:rows], dtype=np.float32)[:, None]
    measured = depth >= _MIN_VALID_DEPTH
    return np.where(measured, depth - corrections, depth).astype(np.float32)


def mat_from_depth_png(path: str | os.PathLike) -> np.ndarray:
    """Load a depth PNG as a corrected float32 image in meters."""
    with Image.open(path) as img:
        if img.mode not in _GRAY_MODES:
            img = img.convert("L")
        raw = np.array(img)
    depth = raw.astype(np.float32) / np.float32(DEPTH_PNG_SCALE)
    return fix_kitti_depth(depth)