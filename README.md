# depthcluster

Building blocks for working with 3D LiDAR scans: angles, rigid poses,
point clouds whose points carry a laser ring index, axis-aligned bounding
boxes, readers for KITTI scans and depth images, Euclidean clustering of a
cloud into objects, and output of clouds as binary PCD files.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `depthcluster.radians` | `Radians`, and the `rad()` and `deg()` constructors |
| `depthcluster.rich_point` | `RichPoint`: a point with `x`, `y`, `z` and a `ring` index (0..65535) |
| `depthcluster.pose` | `Pose`: a 4×4 rigid transform with a likelihood and planar helpers |
| `depthcluster.cloud` | `Cloud`: a list of points with a `pose` and a `sensor_pose` |
| `depthcluster.bbox` | `BoundingBox`: axis-aligned boxes, intersection, volume, moving by a pose |
| `depthcluster.timer` | `Timer` and `Units` for measuring elapsed time |
| `depthcluster.folder_reader` | `FolderReader`, `Order` and `num_from_string` |
| `depthcluster.kitti` | `read_kitti_cloud`, `read_kitti_cloud_txt`, `fix_kitti_depth`, `mat_from_depth_png` |
| `depthcluster.saving` | `write_pcd_binary`, `CloudSaver`, `VectorCloudSaver`, `with_leading_zeros` |
| `depthcluster.clustering` | `euclidean_clusters` and `EuclideanClusterer` |
| `depthcluster.pointcloud2` | `PointField`, `cloud_from_point_cloud2`, `pose_from_odometry` |

## Examples

Read a binary KITTI scan, cluster it and save the clusters:

```python
from depthcluster.kitti import read_kitti_cloud
from depthcluster.clustering import EuclideanClusterer
from depthcluster.saving import VectorCloudSaver

cloud = read_kitti_cloud("scan_000000.bin")

clusterer = EuclideanClusterer(
    cluster_tolerance=0.2, min_cluster_size=100, max_cluster_size=25000, skip=1
)
clusters = clusterer.process(cloud)  # {cluster number: Cloud}, largest first

saver = VectorCloudSaver("clusters", save_every=1)
folder = saver.on_new_object_received(clusters, sender_id=0)
# writes clusters_000000/cloud_000000.pcd, cloud_000001.pcd, ...
```

`EuclideanClusterer.process` only clusters every `skip`-th cloud it is
given; for the others it returns an empty dict. `VectorCloudSaver` likewise
stores only every `save_every`-th set and returns `None` for the rest, or
when the target folder already exists.

Angles:

```python
from depthcluster.radians import deg, rad

right_angle = deg(90)
right_angle.value          # radians
(deg(370)).normalized()    # shifted into [0, 360] degrees
```

Poses move points and whole clouds:

```python
from depthcluster.pose import Pose

shifted = cloud.transform(Pose(1.0, 0.0, 0.0))   # a moved copy
cloud.transform_in_place(Pose(0.0, 0.0, 0.5))    # rotate about z in place
```

Files in a folder, ordered by the last number in their names:

```python
from depthcluster.folder_reader import FolderReader, Order

reader = FolderReader("scans", ending_with=".bin", order=Order.SORTED)
path = reader.next_file_path()   # None once every path has been returned
```

`FolderReader` raises `FileNotFoundError` when the folder does not exist.

Depth PNGs are loaded as float32 images in meters (pixel value / 500),
with a per-row correction subtracted from every pixel of at least 0.001:

```python
from depthcluster.kitti import mat_from_depth_png

depth = mat_from_depth_png("depth_000000.png")
```

Packed scanner buffers, as found in PointCloud2-style messages, are
unpacked with `cloud_from_point_cloud2`: fields 0–2 hold little-endian
float32 coordinates and field 4 a uint16 ring index.
`pose_from_odometry(position, orientation)` builds a `Pose` from a position
and an `(x, y, z, w)` quaternion.

## What this package does not do

- It has no range-image projection of clouds and no image-based labeling
  or ground removal; clustering is by point distance only.
- It does not subscribe to live sensor streams; it decodes buffers and
  odometry values that are handed to it.
- It has no viewer or other display of clouds.
- It reads PCD files only in the sense of writing them: there is no PCD
  reader.
- It has no command-line tool.