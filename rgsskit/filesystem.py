"""The game filesystem: an optional archive over the game directory."""

from typing import BinaryIO

from .archive import ArchiveFileSystem
from .fsbase import PathInput
from .hostfs import HostFileSystem
from .listfs import ListFileSystem
from .pathcache import PathCacheFileSystem


class FileSystem:
    """Reads game files case-insensitively, preferring the archive when one is given."""

    def __init__(self, root_path: PathInput, archive_path: PathInput | None = None) -> None:
        host = HostFileSystem(root_path)
        layers = ListFileSystem()
        if archive_path is not None:
            layers.push(ArchiveFileSystem(host.read_file(archive_path)))
        layers.push(host)
        self._fs = PathCacheFileSystem(layers)

    def read_file(self, path: PathInput) -> BinaryIO:
        """Open a game file for binary reading."""
        return self._fs.read_file(path)