"""List the files of a folder, optionally sorted by the number in their names."""

from __future__ import annotations

import logging
import re
from enum import Enum
from pathlib import Path
from typing import Iterator

_log = logging.getLogger(__name__)

_NUMBER = re.compile(r"[0-9]+")


class Order(Enum):
    SORTED = "sorted"
    UNDEFINED = "undefined"


def num_from_string(text: str) -> int:
    """Return the last run of digits in ``text`` as an integer, or 0 if none."""
    numbers = _NUMBER.findall(text)
    return int(numbers[-1]) if numbers else 0


def numeric_string_compare(first: str, second: str) -> bool:
    """True if the number in ``first`` is smaller than the number in ``second``."""
    return num_from_string(first) < num_from_string(second)


class FolderReader:
    """Collects the paths of files in a folder that match a prefix and a suffix."""

    def __init__(
        self,
        folder_path: str | Path,
        ending_with: str,
        starting_with: str = "",
        order: Order = Order.UNDEFINED,
    ):
        folder = Path(folder_path)
        if not folder.exists():
            raise FileNotFoundError(f"no such folder: {folder}")
        self._paths: list[str] = []
        self._next = 0
        if folder.is_dir():
            _log.info("Getting file paths from folder: %s", folder)
            self._paths = [
                str(entry)
                for entry in folder.iterdir()
                if entry.name.startswith(starting_with)
                and entry.name.endswith(ending_with)
            ]
            if order is Order.SORTED:
                self._paths.sort(key=num_from_string)
            _log.info(
                "There are %d '%s' files in the folder.", len(self._paths), ending_with
            )

    @property
    def all_paths(self) -> list[str]:
        return list(self._paths)

    def next_file_path(self) -> str | None:
        """Return the next stored path, or None once all were handed out."""
        if self._next < len(self._paths):
            path = self._paths[self._next]
            self._next += 1
            return path
        _log.info("There are no more paths stored.")
        return None

    def __iter__(self) -> Iterator[str]:
        while self._next < len(self._paths):
            path = self._paths[self._next]
            self._next += 1
            yield path