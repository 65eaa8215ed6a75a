"""Read-only access to encrypted RGSSAD game archives."""

import io
import itertools
import struct
import threading
from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import BinaryIO

from .fsbase import (
    Entry,
    FileSystemBackend,
    FileSystemError,
    InvalidHeaderError,
    NotExistError,
    PathInput,
    _as_path,
)

_MAGIC = 0xDEADCAFE
_HEADER = b"RGSSAD\0"
_MASK = 0xFFFFFFFF
_U32 = struct.Struct("<I")


@dataclass(frozen=True, slots=True)
class _ArchiveEntry:
    offset: int
    size: int
    start_magic: int


Files = dict[PurePosixPath, _ArchiveEntry]
Directories = dict[PurePosixPath, dict[str, None]]


def _advance(magic: int) -> int:
    return (magic * 7 + 3) & _MASK


def _read_exact(file: BinaryIO, size: int) -> bytes:
    data = file.read(size)
    if len(data) != size:
        raise FileSystemError("IO Error unexpected end of archive data")
    return data


def _read_u32_xor(file: BinaryIO, key: int) -> int:
    (value,) = _U32.unpack(_read_exact(file, _U32.size))
    return value ^ key


def _decode_name(raw: bytes) -> PurePosixPath:
    try:
        text = raw.replace(b"\\", b"/").decode("utf-8")
    except UnicodeDecodeError as error:
        raise FileSystemError(f"UTF-8 Error {error}") from error
    return PurePosixPath(text)


def _decrypt(data: bytes, magic: int) -> bytes:
    keystream = bytearray()
    while len(keystream) < len(data):
        keystream += magic.to_bytes(4, "little")
        magic = _advance(magic)
    length = len(data)
    mixed = int.from_bytes(data, "little") ^ int.from_bytes(keystream[:length], "little")
    return mixed.to_bytes(length, "little")


def _process_path(directories: Directories, path: PurePosixPath) -> None:
    for child, parent in itertools.pairwise([path, *path.parents]):
        directories.setdefault(parent, {})[child.name] = None


def _read_header(file: BinaryIO) -> int:
    header = file.read(8)
    if len(header) != 8 or not header.startswith(_HEADER):
        raise InvalidHeaderError()
    return header[7]


def _read_rmxp(file: BinaryIO) -> tuple[Files, Directories]:
    files: Files = {}
    directories: Directories = {}
    magic = _MAGIC

    while True:
        key, magic = magic, _advance(magic)
        try:
            name_len = _read_u32_xor(file, key)
        except (FileSystemError, OSError):
            break

        name = bytearray()
        for byte in _read_exact(file, name_len):
            name.append(byte ^ (magic & 0xFF))
            magic = _advance(magic)
        path = _decode_name(bytes(name))
        _process_path(directories, path)

        key, magic = magic, _advance(magic)
        size = _read_u32_xor(file, key)
        entry = _ArchiveEntry(offset=file.tell(), size=size, start_magic=magic)
        files[path] = entry
        file.seek(entry.offset + entry.size)

    return files, directories


def _read_vxa(file: BinaryIO) -> tuple[Files, Directories]:
    files: Files = {}
    directories: Directories = {}

    (base,) = _U32.unpack(_read_exact(file, _U32.size))
    base_magic = (base * 9 + 3) & _MASK
    name_key = base_magic.to_bytes(4, "little")

    while True:
        try:
            offset = _read_u32_xor(file, base_magic)
        except (FileSystemError, OSError):
            break
        if offset == 0:
            break

        size = _read_u32_xor(file, base_magic)
        magic = _read_u32_xor(file, base_magic)
        name_len = _read_u32_xor(file, base_magic)

        raw = _read_exact(file, name_len)
        name = bytes(byte ^ key for byte, key in zip(raw, itertools.cycle(name_key)))
        path = _decode_name(name)
        _process_path(directories, path)

        files[path] = _ArchiveEntry(offset=offset, size=size, start_magic=magic)

    return files, directories


class ArchiveFileSystem(FileSystemBackend):
    """Files stored in an RGSSAD archive (versions 1 and 2, or 3)."""

    def __init__(self, file: BinaryIO) -> None:
        version = _read_header(file)
        if version in (1, 2):
            self._files, self._directories = _read_rmxp(file)
        elif version == 3:
            self._files, self._directories = _read_vxa(file)
        else:
            raise InvalidHeaderError()
        self._archive = file
        self._lock = threading.Lock()

    def read_file(self, path: PathInput) -> BinaryIO:
        entry = self._files.get(_as_path(path))
        if entry is None:
            raise NotExistError()
        with self._lock:
            self._archive.seek(entry.offset)
            data = _read_exact(self._archive, entry.size)
        return io.BytesIO(_decrypt(data, entry.start_magic))

    def read_dir(self, path: PathInput) -> list[Entry]:
        directory_path = _as_path(path)
        directory = self._directories.get(directory_path)
        if directory is None:
            raise NotExistError()
        entries = []
        for name in directory:
            child = directory_path / name
            entries.append(Entry(child, child in self._files))
        return entries