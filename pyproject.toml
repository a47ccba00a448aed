[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "depthcluster"
version = "0.1.0"
description = "Point clouds, poses, bounding boxes, Euclidean clustering and KITTI/PCD I/O for range-sensor data"
requires-python = ">=3.10"
keywords = ["lidar", "point-cloud", "clustering", "kitti", "velodyne", "pcd"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Image Processing",
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
addopts = "-ra"
