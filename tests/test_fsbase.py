import io
from pathlib import PurePosixPath

import pytest

from rgsskit.fsbase import (
    Entry,
    FileSystemBackend,
    FileSystemError,
    InvalidHeaderError,
    NotExistError,
)


class _SingleFile(FileSystemBackend):
    def read_file(self, path):
        if PurePosixPath(path) != PurePosixPath("only.bin"):
            raise NotExistError()
        return io.BytesIO(b"content")

    def read_dir(self, path):
        if PurePosixPath(path) != PurePosixPath("."):
            raise NotExistError()
        return [Entry(PurePosixPath("only.bin"), True)]


def test_not_exist_message_and_hierarchy():
    error = NotExistError()
    assert isinstance(error, FileSystemError)
    assert str(error) == "File or directory does not exist"


def test_invalid_header_message_and_hierarchy():
    error = InvalidHeaderError()
    assert isinstance(error, FileSystemError)
    assert str(error) == "Archive header is incorrect"


def test_entries_compare_and_hash_by_value():
    first = Entry(PurePosixPath("Data/Map.rxdata"), True)
    second = Entry(PurePosixPath("Data/Map.rxdata"), True)
    assert first == second
    assert len({first, second}) == 1
    assert first != Entry(PurePosixPath("Data/Map.rxdata"), False)


def test_backend_cannot_be_instantiated_without_methods():
    with pytest.raises(TypeError):
        FileSystemBackend()


def test_concrete_backend_reads_and_lists():
    backend = _SingleFile()
    assert backend.read_file("only.bin").read() == b"content"
    assert backend.read_dir("") == [Entry(PurePosixPath("only.bin"), True)]
    with pytest.raises(NotExistError):
        backend.read_file("missing.bin")