"""Game files read straight from a directory on disk."""

from pathlib import Path, PurePosixPath
from typing import BinaryIO

from .fsbase import Entry, FileSystemBackend, NotExistError, PathInput, _as_path


class HostFileSystem(FileSystemBackend):
    """Files below a root directory of the host filesystem."""

    def __init__(self, root_path: PathInput) -> None:
        self._root = Path(root_path)

    @property
    def root_path(self) -> Path:
        return self._root

    def read_file(self, path: PathInput) -> BinaryIO:
        full = self._root / _as_path(path)
        if not full.exists():
            raise NotExistError()
        return full.open("rb")

    def read_dir(self, path: PathInput) -> list[Entry]:
        full = self._root / _as_path(path)
        if not full.exists():
            raise NotExistError()
        return [
            Entry(PurePosixPath(child.relative_to(self._root).as_posix()), child.is_file())
            for child in full.iterdir()
        ]