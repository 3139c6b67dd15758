"""Listing of data files in a folder, optionally in numeric order."""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Iterator
from enum import Enum

logger = logging.getLogger(__name__)

_NUMBER = re.compile(r"\d+")


def num_from_string(text: str) -> int:
    """The last run of digits in ``text`` as an integer, or 0 if there is none."""
    numbers = _NUMBER.findall(text)
    return int(numbers[-1]) if numbers else 0


class Order(Enum):
    SORTED = "sorted"
    UNDEFINED = "undefined"


class FolderReader:
    """Collects the paths of files in a folder that match a prefix and suffix.

    With ``Order.SORTED`` the paths are ordered by the last number in them.
    """

    def __init__(
        self,
        folder_path: str | os.PathLike,
        ending_with: str,
        starting_with: str = "",
        order: Order = Order.UNDEFINED,
    ) -> None:
        folder = os.fspath(folder_path)
        self._paths: list[str] = []
        self._position = 0
        if not os.path.exists(folder):
            raise FileNotFoundError(f"no such folder: {folder}")
        if not os.path.isdir(folder):
            return
        logger.info("Getting file paths from folder: %s", folder)
        with os.scandir(folder) as entries:
            for entry in entries:
                name = entry.name
                if name.startswith(starting_with) and name.endswith(ending_with):
                    self._paths.append(os.path.join(folder, name))
        if order is Order.SORTED:
            self._paths.sort(key=num_from_string)
        logger.info(
            "There are %d '%s' files in the folder.", len(self._paths), ending_with
        )

    @property
    def paths(self) -> list[str]:
        """All matching paths."""
        return list(self._paths)

    def next_file_path(self) -> str | None:
        """The next stored path, or ``None`` once all have been returned."""
        if self._position < len(self._paths):
            path = self._paths[self._position]
            self._position += 1
            return path
        logger.info("There are no more paths stored.")
        return None

    def __iter__(self) -> Iterator[str]:
        return iter(self._paths)

    def __len__(self) -> int:
        return len(self._paths)