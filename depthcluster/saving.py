"""Writers that store clouds and clusters as binary PCD files."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

import numpy as np

from depthcluster.cloud import Cloud

logger = logging.getLogger(__name__)

_LEADING_ZEROS = 6

_PCD_DTYPE = np.dtype(
    [("x", "<f4"), ("y", "<f4"), ("z", "<f4"), ("label", "<u4")]
)


def with_leading_zeros(num: int) -> str:
    """The decimal form of ``num`` padded with zeros to six characters."""
    return str(num).rjust(_LEADING_ZEROS, "0")


def write_pcd_binary(path: str | os.PathLike, cloud: Cloud) -> None:
    """Write ``cloud`` as a binary PCD file with fields ``x y z label``.

    The ring index of each point is stored as its label.
    """
    points = list(cloud)
    if not points:
        raise ValueError("input point cloud has no data")
    count = len(points)
    header = (
        "# .PCD v0.7 - Point Cloud Data file format\n"
        "VERSION 0.7\n"
        "FIELDS x y z label\n"
        "SIZE 4 4 4 4\n"
        "TYPE F F F U\n"
        "COUNT 1 1 1 1\n"
        f"WIDTH {count}\n"
        "HEIGHT 1\n"
        "VIEWPOINT 0 0 0 1 0 0 0\n"
        f"POINTS {count}\n"
        "DATA binary\n"
    )
    records = np.array(
        [(p.x, p.y, p.z, p.ring) for p in points], dtype=_PCD_DTYPE
    )
    with open(path, "wb") as stream:
        stream.write(header.encode("ascii"))
        stream.write(records.tobytes())


class VectorCloudSaver:
    """Saves every ``save_every``-th set of clusters into its own folder.

    Folders are named ``<prefix>_<NNNNNN>`` after the count of received sets;
    an already existing folder is left alone.
    """

    def __init__(self, prefix: str, save_every: int = 1) -> None:
        if save_every < 1:
            raise ValueError("save_every must be at least 1")
        self._prefix = prefix
        self._save_every = save_every
        self._folder_counter = 0

    def on_new_object_received(
        self, clouds: Mapping[int, Cloud], sender_id: int
    ) -> Path | None:
        """Store the clusters if this set is due; return the folder written."""
        index = self._folder_counter
        self._folder_counter += 1
        if index % self._save_every > 0:
            return None
        folder = Path(f"{self._prefix}_{with_leading_zeros(index)}")
        logger.info("saving clusters to '%s'", folder)
        try:
            folder.mkdir()
        except FileExistsError:
            return None
        for cloud_index, cloud in enumerate(clouds.values()):
            name = f"cloud_{with_leading_zeros(cloud_index)}.pcd"
            write_pcd_binary(folder / name, cloud)
        return folder


class CloudSaver:
    """Saves each received cloud to ``<prefix>_<n>.pcd`` with a running count."""

    def __init__(self, prefix: str) -> None:
        self._prefix = prefix
        self._counter = 0

    def on_new_object_received(self, cloud: Cloud, sender_id: int) -> Path:
        path = Path(f"{self._prefix}_{self._counter}.pcd")
        self._counter += 1
        write_pcd_binary(path, cloud)
        return path