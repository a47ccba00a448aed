"""Clients that store received clouds as binary PCD files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping

import numpy as np

from depthcluster.cloud import Cloud
from depthcluster.rich_point import RichPoint

_log = logging.getLogger(__name__)

_LEADING_ZEROS = 6

_XYZL = np.dtype([("x", "<f4"), ("y", "<f4"), ("z", "<f4"), ("label", "<u4")])

_TYPE_CODES = {"F": "f", "U": "u", "I": "i"}


def with_leading_zeros(num: int) -> str:
    """Pad the decimal form of ``num`` with zeros to six characters."""
    text = str(num)
    return "0" * (_LEADING_ZEROS - len(text)) + text


def write_pcd_binary(path: str | Path, cloud: Cloud) -> None:
    """Write ``cloud`` as a binary PCD file with fields x, y, z and label (ring)."""
    records = np.zeros(len(cloud), dtype=_XYZL)
    if len(cloud):
        records["x"] = [point.x for point in cloud]
        records["y"] = [point.y for point in cloud]
        records["z"] = [point.z for point in cloud]
        records["label"] = [point.ring for point in cloud]
    count = len(cloud)
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
    with open(path, "wb") as stream:
        stream.write(header.encode("ascii"))
        stream.write(records.tobytes())


def _record_dtype(header: dict[str, list[str]]) -> np.dtype:
    fields = header.get("FIELDS")
    sizes = header.get("SIZE")
    types = header.get("TYPE")
    if not fields or not sizes or not types:
        raise ValueError("PCD header lacks FIELDS, SIZE or TYPE")
    counts = header.get("COUNT", ["1"] * len(fields))
    if not len(fields) == len(sizes) == len(types) == len(counts):
        raise ValueError("PCD header field descriptions differ in length")
    layout = []
    for position, (name, size, kind, count) in enumerate(
        zip(fields, sizes, types, counts)
    ):
        if kind not in _TYPE_CODES:
            raise ValueError(f"unknown PCD field type {kind!r}")
        code = f"<{_TYPE_CODES[kind]}{size}"
        label = f"_pad{position}" if name == "_" else name
        layout.append((label, code, (int(count),)) if int(count) > 1 else (label, code))
    return np.dtype(layout)


def read_pcd_binary(path: str | Path) -> Cloud:
    """Read the x, y, z and label fields of a binary PCD file into a cloud."""
    header: dict[str, list[str]] = {}
    with open(path, "rb") as stream:
        while True:
            line = stream.readline()
            if not line:
                raise ValueError("PCD header has no DATA line")
            text = line.decode("ascii").strip()
            if not text or text.startswith("#"):
                continue
            key, _, value = text.partition(" ")
            header[key.upper()] = value.split()
            if key.upper() == "DATA":
                break
        payload = stream.read()
    if header["DATA"] != ["binary"]:
        raise ValueError(f"unsupported PCD data format {' '.join(header['DATA'])!r}")
    dtype = _record_dtype(header)
    missing = {"x", "y", "z"} - set(dtype.names)
    if missing:
        raise ValueError(f"PCD file lacks fields {sorted(missing)}")
    if "POINTS" in header:
        count = int(header["POINTS"][0])
    else:
        count = int(header["WIDTH"][0]) * int(header["HEIGHT"][0])
    records = np.frombuffer(payload, dtype=dtype, count=count)
    labels = records["label"] if "label" in dtype.names else np.zeros(count, dtype=int)
    return Cloud(
        RichPoint(float(x), float(y), float(z), int(label))
        for x, y, z, label in zip(records["x"], records["y"], records["z"], labels)
    )


class VectorCloudSaver:
    """Saves every ``save_every``-th mapping of clusters into a new folder."""

    def __init__(self, prefix: str, save_every: int = 1):
        if save_every < 1:
            raise ValueError(f"save_every must be at least 1, got {save_every}")
        self._prefix = prefix
        self._save_every = save_every
        self._folder_counter = 0

    def on_new_object_received(
        self, clouds: Mapping[int, Cloud], sender_id: int
    ) -> Path | None:
        """Write the clusters to ``<prefix>_NNNNNN/cloud_NNNNNN.pcd``.

        Returns the folder written to, or None if this call was skipped or
        the folder already existed.
        """
        index = self._folder_counter
        self._folder_counter += 1
        if index % self._save_every > 0:
            return None
        folder = Path(f"{self._prefix}_{with_leading_zeros(index)}")
        _log.info("saving clusters to '%s'", folder)
        try:
            folder.mkdir()
        except FileExistsError:
            return None
        for number, cloud in enumerate(clouds.values()):
            write_pcd_binary(folder / f"cloud_{with_leading_zeros(number)}.pcd", cloud)
        return folder


class CloudSaver:
    """Saves each received cloud to ``<prefix>_<n>.pcd``."""

    def __init__(self, prefix: str):
        self._prefix = prefix
        self._counter = 0

    def on_new_object_received(self, cloud: Cloud, sender_id: int) -> Path:
        path = Path(f"{self._prefix}_{self._counter}.pcd")
        self._counter += 1
        write_pcd_binary(path, cloud)
        return path