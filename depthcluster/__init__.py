"""Angles, poses, point clouds, bounding boxes, Euclidean clustering and KITTI/PCD I/O."""

__version__ = "0.1.0"
__all__ = [
    "bbox",
    "cloud",
    "cloud_saver",
    "euclidean_clusterer",
    "folder_reader",
    "pose",
    "radians",
    "rich_point",
    "timer",
    "velodyne",
]