"""Errors, directory entries and the interface shared by all filesystem layers."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from os import PathLike
from pathlib import PurePosixPath
from typing import BinaryIO

PathInput = str | PathLike[str]


class FileSystemError(Exception):
    """Base class for errors raised while reading game files."""


class NotExistError(FileSystemError):
    """The requested file or directory is not present."""

    def __init__(self, message: str = "File or directory does not exist") -> None:
        super().__init__(message)


class InvalidHeaderError(FileSystemError):
    """An archive did not start with a recognised header."""

    def __init__(self, message: str = "Archive header is incorrect") -> None:
        super().__init__(message)


@dataclass(frozen=True, slots=True)
class Entry:
    """One item of a directory listing, with its path relative to the filesystem root."""

    path: PurePosixPath
    is_file: bool


def _as_path(path: PathInput) -> PurePosixPath:
    """Normalise any accepted path value to a relative POSIX-style path."""
    return PurePosixPath(path)


class FileSystemBackend(ABC):
    """A source of game files that can be layered with others."""

    @abstractmethod
    def read_file(self, path: PathInput) -> BinaryIO:
        """Open the file at path for binary reading; raise NotExistError if absent."""

    @abstractmethod
    def read_dir(self, path: PathInput) -> list[Entry]:
        """List the directory at path; raise NotExistError if absent."""