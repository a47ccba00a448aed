# depthcluster

Building blocks for working with range-sensor point clouds:

- angles (`depthcluster.radians`)
- rigid poses (`depthcluster.pose`)
- points that carry a laser ring index (`depthcluster.rich_point`)
- clouds of such points (`depthcluster.cloud`)
- axis-aligned bounding boxes (`depthcluster.bbox`)
- folder listing sorted by file number (`depthcluster.folder_reader`)
- KITTI scan and depth-image readers (`depthcluster.velodyne`)
- Euclidean clustering (`depthcluster.euclidean_clusterer`)
- binary PCD writing and reading (`depthcluster.cloud_saver`)
- a small stopwatch (`depthcluster.timer`)

## Installation

From a checkout of the project:

```
pip install .
```

To run the test suite, install the `test` extra and run pytest:

```
pip install ".[test]"
pytest
```

## Angles

```python
from depthcluster.radians import Radians, deg, rad

right = deg(90)
print(right.to_degrees())                 # 90.0
print((deg(2) + deg(2)).to_degrees())     # 4.0
print(Radians.from_degrees(370).normalized(deg(0), deg(360)).to_degrees())  # ~10.0
```

`Radians` is immutable. It supports `+`, `-`, unary `-`, `abs()`, multiplication
by a number, and division. Dividing by a number gives an angle. Dividing by an
angle gives a ratio. `<` and `>` treat angles that differ by less than
single-precision epsilon as equal. `floor()` rounds down to whole degrees. A bare
`Radians()` is a zero angle with `valid` set to `False`.

## Poses

```python
import math
from depthcluster.pose import Pose

origin = Pose(1, 0, 0)
target = Pose(2, 1, math.pi / 2)
local = target.in_local_frame_of(origin)
print(local.x, local.y, local.theta)        # 1.0 1.0 1.5707...

moved = Pose(0, 2, 0).transform_point([1.0, 1.0, 1.0])   # array([1., 3., 1.])
vec = Pose.from_vector6([1, 2, 3, 0.1, 0.2, 0.3]).to_vector6()
```

A `Pose` holds a 4x4 homogeneous `matrix`. The properties `x`, `y`, `z` and
`theta` (rotation about z) can be read and written. `likelihood` must lie in
[0, 1]; setting it outside that range raises `ValueError`.

Other methods:

- `from_matrix` builds a pose from any 4x4 matrix.
- `set_pitch`, `set_roll` and `set_yaw` overwrite the matching rotation entries.
- Unary `-` gives a pose with the translation negated and no rotation.

## Points and clouds

```python
from depthcluster.rich_point import RichPoint
from depthcluster.cloud import Cloud
from depthcluster.pose import Pose

cloud = Cloud()
cloud.append(RichPoint(1, 1, 1, ring=3))
shifted = cloud.transform(Pose(1, 0, 0))
print(shifted[0].x, len(shifted))           # 2.0 1
```

A `Cloud` is indexable and iterable. It carries a `pose` and a `sensor_pose`.
`copy()` copies points and poses deeply.

`transform_in_place` moves every point, keeps the rings, and drops any
projection. `transform` returns a moved copy.

A cloud can hold a projection set with `set_projection`. This can be any object
whose `at(row, col)` returns a cell with a `points` list of indices into the
cloud. `points_projected_to_pixel(row, col)` then returns the matching points,
or an empty list when there is no projection.

## Bounding boxes

```python
from depthcluster.bbox import Bbox

box = Bbox.from_cloud(cloud)
other = Bbox([0, 0, 0], [1, 1, 1])
if box.intersects(other):
    print(box.intersect(other).volume)
```

A box whose extent is not positive on every axis has zero `scale` and `center`.
Its `volume` is `Bbox.WRONG_VOLUME` (-1.0). `move_by(pose)` transforms both
corners and re-sorts them per axis.

## Reading data

```python
from depthcluster.folder_reader import FolderReader, Order
from depthcluster.velodyne import read_kitti_cloud, mat_from_depth_png

reader = FolderReader("scans", ".bin", order=Order.SORTED)
for path in reader:
    cloud = read_kitti_cloud(path)
```

`FolderReader` keeps files whose names start with `starting_with` (empty by
default) and end with `ending_with`. With `Order.SORTED` it sorts them by the
last number in the path (`num_from_string`). If the folder does not exist it
raises `FileNotFoundError`. `next_file_path()` returns paths one at a time and
then `None`. `all_paths` lists them all.

`read_kitti_cloud` reads little-endian float32 `x y z intensity` records and
ignores the intensity. `read_kitti_cloud_txt` reads one space-separated
`x y z intensity` line per point and skips malformed lines.

`mat_from_depth_png` loads a 16-bit depth PNG, divides it by 500 to get metres,
and applies `fix_kitti_depth`. That function subtracts a per-row range
correction (`MOOSMAN_CORRECTIONS`, up to 64 rows) from every pixel that is not
empty.

## Clustering and saving

```python
from depthcluster.euclidean_clusterer import EuclideanClusterer
from depthcluster.cloud_saver import VectorCloudSaver

clusterer = EuclideanClusterer(cluster_tolerance=0.2, min_cluster_size=100,
                               max_cluster_size=25000, skip=1)
clusterer.add_client(VectorCloudSaver("clusters"))
clusterer.on_new_object_received(cloud, sender_id=0)
```

`extract_euclidean_clusters(points, tolerance, min_size, max_size)` groups
points that are linked by chains of neighbours no farther apart than
`tolerance`. It returns the point indices of each cluster whose size is within
the limits, largest cluster first.

`EuclideanClusterer` clusters only every `skip`-th cloud it receives; `skip`
defaults to 10. For the other clouds it sends an empty mapping. Each client gets
`on_new_object_received(clusters, clusterer.id)`, where `clusters` maps a
cluster index to a `Cloud`.

`VectorCloudSaver(prefix, save_every)` writes every `save_every`-th mapping into
a new folder `<prefix>_NNNNNN`, with one file `cloud_NNNNNN.pcd` per cluster. It
returns the folder it wrote, or `None` when the call was skipped or the folder
already existed. `CloudSaver(prefix)` writes each received cloud to
`<prefix>_<n>.pcd`.

`write_pcd_binary` stores the fields x, y, z and label, with the ring stored as
the label. `read_pcd_binary` reads a binary PCD file back into a `Cloud`.
`with_leading_zeros` pads a number to six digits.

## Timing

```python
from depthcluster.timer import Timer, Units

timer = Timer()
...
print(timer.measure())             # microseconds since start, then restarts
print(timer.measure(Units.MILLI))
```

## What this package does not do

- It does not receive data from live sensors or message buses. Clouds come from
  files or from your own code.
- It does not build range-image projections, and it has no image-based or
  angle-based labelling. A projection object has to be supplied through
  `Cloud.set_projection`.
- It has no viewer or other display, and no command-line program.