import io
from pathlib import PurePosixPath

import pytest

from rgsskit.fsbase import Entry, FileSystemBackend, NotExistError
from rgsskit.pathcache import PathCacheFileSystem


class TreeFS(FileSystemBackend):
    def __init__(self, files):
        self.files = {PurePosixPath(k): v for k, v in files.items()}

    def read_file(self, path):
        try:
            return io.BytesIO(self.files[PurePosixPath(path)])
        except KeyError:
            raise NotExistError() from None

    def read_dir(self, path):
        prefix = PurePosixPath(path).parts
        children = {}
        for file in self.files:
            if file.parts[: len(prefix)] == prefix and len(file.parts) > len(prefix):
                child = PurePosixPath(*file.parts[: len(prefix) + 1])
                children[child] = child in self.files
        if not children and prefix:
            raise NotExistError()
        return [Entry(child, is_file) for child, is_file in children.items()]


@pytest.fixture
def tree():
    return TreeFS(
        {
            "Data/Map001.rxdata": b"map",
            "Graphics/Titles/Title.png": b"png",
        }
    )


def test_desensitize_ignores_case_and_extension(tree):
    fs = PathCacheFileSystem(tree)
    expected = PurePosixPath("Data/Map001.rxdata")
    assert fs.desensitize("data/map001") == expected
    assert fs.desensitize("DATA/MAP001.RXDATA") == expected
    assert fs.desensitize("Graphics/Titles/title.jpg") == PurePosixPath("Graphics/Titles/Title.png")


def test_desensitize_directories(tree):
    fs = PathCacheFileSystem(tree)
    assert fs.desensitize("graphics/titles") == PurePosixPath("Graphics/Titles")


def test_desensitize_unknown_is_none(tree):
    assert PathCacheFileSystem(tree).desensitize("audio/bgm") is None


def test_read_file_through_cache(tree):
    fs = PathCacheFileSystem(tree)
    assert fs.read_file("data/map001").read() == b"map"


def test_read_dir_through_cache(tree):
    fs = PathCacheFileSystem(tree)
    assert fs.read_dir("GRAPHICS/titles") == [
        Entry(PurePosixPath("Graphics/Titles/Title.png"), True)
    ]


def test_root_is_not_cached(tree):
    with pytest.raises(NotExistError):
        PathCacheFileSystem(tree).read_dir("")


def test_missing_paths_raise(tree):
    fs = PathCacheFileSystem(tree)
    with pytest.raises(NotExistError):
        fs.read_file("data/map002")
    with pytest.raises(NotExistError):
        fs.read_dir("audio")


def test_regen_cache_picks_up_new_files(tree):
    fs = PathCacheFileSystem(tree)
    tree.files[PurePosixPath("Audio/SE/Click.ogg")] = b"ogg"
    assert fs.desensitize("audio/se/click") is None
    fs.regen_cache()
    assert fs.read_file("audio/se/click").read() == b"ogg"