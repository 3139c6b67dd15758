[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "depthcluster"
version = "0.1.0"
description = "Point clouds, poses, KITTI readers, Euclidean clustering and PCD output for 3D LiDAR scans"
requires-python = ">=3.10"
keywords = ["lidar", "point cloud", "clustering", "kitti", "velodyne", "pcd"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Image Recognition",
]
dependencies = [
    "numpy",
    "scipy",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["depthcluster"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
