"""Case- and extension-insensitive path lookup over another filesystem."""

from collections.abc import Iterator
from pathlib import PurePosixPath
from typing import BinaryIO

from .fsbase import Entry, FileSystemBackend, NotExistError, PathInput, _as_path


def _desensitized(path: PathInput) -> PurePosixPath:
    lowered = PurePosixPath(str(_as_path(path)).lower())
    name = lowered.name
    dot = name.rfind(".")
    if dot > 0 and name != "..":
        return lowered.with_name(name[:dot])
    return lowered


class PathCacheFileSystem(FileSystemBackend):
    """Resolves paths regardless of letter case and file extension."""

    def __init__(self, fs: FileSystemBackend) -> None:
        self._fs = fs
        self._cache: dict[PurePosixPath, PurePosixPath] = {}
        self.regen_cache()

    def _walk(self, path: PurePosixPath) -> Iterator[PurePosixPath]:
        for entry in self._fs.read_dir(path):
            yield entry.path
            if not entry.is_file:
                yield from self._walk(entry.path)

    def regen_cache(self) -> None:
        """Rebuild the lookup table from the wrapped filesystem."""
        self._cache.clear()
        for path in self._walk(PurePosixPath("")):
            self._cache[_desensitized(path)] = path

    def desensitize(self, path: PathInput) -> PurePosixPath | None:
        """Return the real path matching path, or None if there is none."""
        return self._cache.get(_desensitized(path))

    def _resolve(self, path: PathInput) -> PurePosixPath:
        real = self.desensitize(path)
        if real is None:
            raise NotExistError()
        return real

    def read_file(self, path: PathInput) -> BinaryIO:
        return self._fs.read_file(self._resolve(path))

    def read_dir(self, path: PathInput) -> list[Entry]:
        return self._fs.read_dir(self._resolve(path))