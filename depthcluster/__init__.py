"""Point clouds, poses, KITTI readers, Euclidean clustering and PCD output for LiDAR scans."""

__version__ = "0.1.0"