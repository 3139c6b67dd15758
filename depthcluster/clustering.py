"""Euclidean clustering of point clouds into separate objects."""

from __future__ import annotations

import dataclasses
import logging

import numpy as np
from scipy.spatial import cKDTree

from depthcluster.cloud import Cloud
from depthcluster.timer import Timer

logger = logging.getLogger(__name__)


def euclidean_clusters(
    cloud: Cloud,
    tolerance: float = 0.2,
    min_cluster_size: int = 100,
    max_cluster_size: int = 25000,
) -> list[list[int]]:
    """Group point indices whose points are linked by gaps no wider than ``tolerance``.

    Clusters with fewer than ``min_cluster_size`` or more than
    ``max_cluster_size`` points are dropped. The result is ordered from the
    largest cluster to the smallest; indices inside a cluster are ascending.
    """
    if tolerance < 0:
        raise ValueError("cluster tolerance must not be negative")
    if min_cluster_size > max_cluster_size:
        raise ValueError("min_cluster_size must not exceed max_cluster_size")
    points = np.array([(p.x, p.y, p.z) for p in cloud], dtype=float).reshape(-1, 3)
    if len(points) == 0:
        return []
    tree = cKDTree(points)
    processed = np.zeros(len(points), dtype=bool)
    clusters: list[list[int]] = []
    for seed in range(len(points)):
        if processed[seed]:
            continue
        processed[seed] = True
        queue = [seed]
        position = 0
        while position < len(queue):
            for neighbor in tree.query_ball_point(points[queue[position]], tolerance):
                if not processed[neighbor]:
                    processed[neighbor] = True
                    queue.append(neighbor)
            position += 1
        if min_cluster_size <= len(queue) <= max_cluster_size:
            clusters.append(sorted(int(index) for index in queue))
    clusters.sort(key=len, reverse=True)
    return clusters


class EuclideanClusterer:
    """Splits every ``skip``-th received cloud into clusters by point distance.

    Clouds that are skipped produce an empty mapping.
    """

    def __init__(
        self,
        cluster_tolerance: float = 0.2,
        min_cluster_size: int = 100,
        max_cluster_size: int = 25000,
        skip: int = 10,
    ) -> None:
        if skip < 1:
            raise ValueError("skip must be at least 1")
        self.cluster_tolerance = cluster_tolerance
        self.min_cluster_size = min_cluster_size
        self.max_cluster_size = max_cluster_size
        self.skip = skip
        self._counter = 0

    def process(self, cloud: Cloud) -> dict[int, Cloud]:
        """Cluster ``cloud`` if it is due, mapping cluster number to its points."""
        index = self._counter
        self._counter += 1
        if index % self.skip != 0:
            return {}
        timer = Timer()
        indices = euclidean_clusters(
            cloud,
            self.cluster_tolerance,
            self.min_cluster_size,
            self.max_cluster_size,
        )
        logger.info("euclidean based labeling took: %d us", timer.measure())
        return {
            number: Cloud(
                (dataclasses.replace(cloud[i]) for i in members),
                pose=cloud.pose.copy(),
            )
            for number, members in enumerate(indices)
        }