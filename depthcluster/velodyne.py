"""Readers for KITTI style Velodyne scans and depth images."""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np
from PIL import Image

from depthcluster.cloud import Cloud
from depthcluster.rich_point import RichPoint

_log = logging.getLogger(__name__)

# Whole-millimetre part of the per-ring range correction of an HDL-64 scanner,
# ring 0 first. Every ring shares an extra bias of 0.875 mm.
_RING_OFFSETS_MM: tuple[int, ...] = (
    25, -7, 31, 1, 29, -197, 49, -35, 3, 5,
    35, -65, 35, 1, -25, -63, 39, -21, 75, -25,
    -5, -59, -33, -59, 21, -33, 59, -45, 75, -5,
    21, 5, -37, -23, -5, -59, -27, -31, 45, 35,
    -27, 41, -87, -61, 31, -11, -25, -49, -39, 39,
    -27, 37, -21, 51, -15, 19, -3, 27, 5, 21,
    23, 85, 85, 115,
)
_RING_BIAS_MM = 0.875

# Per-ring range corrections, in meters.
MOOSMAN_CORRECTIONS: tuple[float, ...] = tuple(
    (offset + _RING_BIAS_MM) / 1000.0 for offset in _RING_OFFSETS_MM
)

# Depth PNGs store distances scaled by this factor.
_PNG_DEPTH_SCALE = 500.0

# Pixels closer than this are treated as empty and left uncorrected.
_MIN_VALID_DEPTH = np.float32(0.001)


def read_kitti_cloud(path: str | Path) -> Cloud:
    """Read a binary scan of little-endian float32 (x, y, z, intensity) records.

    Intensity is ignored and an incomplete trailing record is dropped.
    """
    data = np.fromfile(path, dtype="<f4")
    usable = len(data) - len(data) % 4
    records = data[:usable].reshape(-1, 4)
    return Cloud(RichPoint(float(x), float(y), float(z)) for x, y, z, _ in records)


def read_kitti_cloud_txt(path: str | Path) -> Cloud:
    """Read a text scan with one ``x y z intensity`` line per point.

    Lines that do not have exactly four space separated fields are skipped.
    """
    _log.info("Reading cloud from %s.", path)
    cloud = Cloud()
    with open(path, encoding="utf-8") as stream:
        for line in stream:
            fields = line.rstrip("\n").split(" ")
            if len(fields) != 4:
                _log.error("malformed line skipped: %r", line)
                continue
            x, y, z = (float(value) for value in fields[:3])
            cloud.append(RichPoint(x, y, z))
    return cloud


def fix_kitti_depth(image) -> np.ndarray:
    """Return a float32 copy of a depth image with per-row range corrections."""
    fixed = np.array(image, dtype=np.float32)
    if fixed.ndim != 2:
        raise ValueError(f"expected a single channel image, got shape {fixed.shape}")
    rows = fixed.shape[0]
    if rows > len(MOOSMAN_CORRECTIONS):
        raise ValueError(
            f"image has {rows} rows, corrections exist for "
            f"{len(MOOSMAN_CORRECTIONS)}"
        )
    corrections = np.asarray(MOOSMAN_CORRECTIONS[:rows], dtype=np.float32)[:, None]
    empty = fixed < _MIN_VALID_DEPTH
    return np.where(empty, fixed, fixed - corrections).astype(np.float32)


def mat_from_depth_png(path: str | Path) -> np.ndarray:
    """Load a 16-bit depth PNG as corrected distances in meters."""
    with Image.open(path) as picture:
        depth = np.asarray(picture, dtype=np.float32)
    return fix_kitti_depth(depth / np.float32(_PNG_DEPTH_SCALE))