"""A stack of filesystems searched in order."""

import itertools
from typing import BinaryIO

from .fsbase import Entry, FileSystemBackend, NotExistError, PathInput


class ListFileSystem(FileSystemBackend):
    """Searches each pushed filesystem in turn; earlier ones take priority."""

    def __init__(self) -> None:
        self._filesystems: list[FileSystemBackend] = []

    def push(self, fs: FileSystemBackend) -> None:
        """Add a filesystem with lower priority than those already present."""
        self._filesystems.append(fs)

    def read_file(self, path: PathInput) -> BinaryIO:
        for fs in self._filesystems:
            try:
                return fs.read_file(path)
            except NotExistError:
                continue
        raise NotExistError()

    def read_dir(self, path: PathInput) -> list[Entry]:
        entries: list[Entry] = []
        missing = 0
        for fs in self._filesystems:
            try:
                entries.extend(fs.read_dir(path))
            except NotExistError:
                missing += 1
        if missing == len(self._filesystems):
            raise NotExistError()
        # Only consecutive duplicates are dropped.
        return [entry for entry, _ in itertools.groupby(entries)]