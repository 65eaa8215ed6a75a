"""Plain game data types: colours, tones, rectangles and tables."""

import itertools
import operator
import struct
from dataclasses import dataclass
from typing import ClassVar, Iterable, Self

_FOUR_DOUBLES = struct.Struct("<4d")
_TABLE_HEADER = struct.Struct("<5I")
_I16_MIN = -(2**15)
_I16_MAX = 2**15 - 1


@dataclass
class Color:
    """An RGBA colour with components in the 0-255 range."""

    red: float
    green: float
    blue: float
    alpha: float = 255.0

    WHITE: ClassVar["Color"]
    BLACK: ClassVar["Color"]
    GREY: ClassVar["Color"]
    TRANSPARENT: ClassVar["Color"]

    def __post_init__(self) -> None:
        self.red = float(self.red)
        self.green = float(self.green)
        self.blue = float(self.blue)
        self.alpha = float(self.alpha)

    def dump(self) -> bytes:
        """Serialise to 32 bytes: red, blue, green, alpha as little-endian doubles."""
        return _FOUR_DOUBLES.pack(self.red, self.blue, self.green, self.alpha)

    @classmethod
    def load(cls, data: bytes) -> Self:
        """Inverse of dump."""
        if len(data) != _FOUR_DOUBLES.size:
            raise ValueError(f"colour data must be {_FOUR_DOUBLES.size} bytes, got {len(data)}")
        red, blue, green, alpha = _FOUR_DOUBLES.unpack(data)
        return cls(red, green, blue, alpha)


Color.WHITE = Color(255.0, 255.0, 255.0, 255.0)
Color.BLACK = Color(0.0, 0.0, 0.0, 255.0)
Color.GREY = Color(0.0, 0.0, 0.0, 128.0)
Color.TRANSPARENT = Color(0.0, 0.0, 0.0, 0.0)


@dataclass
class Tone:
    """A colour tone adjustment with a grey component."""

    red: float
    green: float
    blue: float
    gray: float = 255.0

    def __post_init__(self) -> None:
        self.red = float(self.red)
        self.green = float(self.green)
        self.blue = float(self.blue)
        self.gray = float(self.gray)

    def dump(self) -> bytes:
        """Serialise to 32 bytes: red, blue, green, gray as little-endian doubles."""
        return _FOUR_DOUBLES.pack(self.red, self.blue, self.green, self.gray)

    @classmethod
    def load(cls, data: bytes) -> Self:
        """Inverse of dump."""
        if len(data) != _FOUR_DOUBLES.size:
            raise ValueError(f"tone data must be {_FOUR_DOUBLES.size} bytes, got {len(data)}")
        red, blue, green, gray = _FOUR_DOUBLES.unpack(data)
        return cls(red, green, blue, gray)


def _check_extent(name: str, value: int) -> int:
    value = operator.index(value)
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


@dataclass
class Rect:
    """An axis-aligned rectangle with a signed origin and unsigned extent."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def __post_init__(self) -> None:
        self.x = operator.index(self.x)
        self.y = operator.index(self.y)
        self.width = _check_extent("width", self.width)
        self.height = _check_extent("height", self.height)

    def set(self, x: int, y: int, width: int, height: int) -> None:
        """Replace all four values at once."""
        replacement = Rect(x, y, width, height)
        self.x, self.y = replacement.x, replacement.y
        self.width, self.height = replacement.width, replacement.height

    def empty(self) -> None:
        """Reset every value to zero."""
        self.set(0, 0, 0, 0)


def _check_value(value: int) -> int:
    value = operator.index(value)
    if not _I16_MIN <= value <= _I16_MAX:
        raise ValueError(f"table values must fit in 16 bits, got {value}")
    return value


class Table:
    """A three-dimensional array of signed 16-bit integers."""

    __slots__ = ("_xsize", "_ysize", "_zsize", "_data")
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, xsize: int, ysize: int = 0, zsize: int = 0) -> None:
        self._xsize = _check_extent("xsize", xsize)
        self._ysize = _check_extent("ysize", ysize)
        self._zsize = _check_extent("zsize", zsize)
        self._data = [0] * (self._xsize * self._ysize * self._zsize)

    @classmethod
    def from_data(cls, xsize: int, ysize: int, zsize: int, data: Iterable[int]) -> Self:
        """Build a table from existing values laid out x-fastest."""
        table = cls(xsize, ysize, zsize)
        values = [_check_value(value) for value in data]
        if len(values) != len(table._data):
            raise ValueError(
                f"expected {len(table._data)} values for a {xsize}x{ysize}x{zsize} table, "
                f"got {len(values)}"
            )
        table._data = values
        return table

    @property
    def xsize(self) -> int:
        return self._xsize

    @property
    def ysize(self) -> int:
        return self._ysize

    @property
    def zsize(self) -> int:
        return self._zsize

    @property
    def data(self) -> tuple[int, ...]:
        return tuple(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def _flat_index(self, index: int | tuple[int, ...]) -> int:
        coords = index if isinstance(index, tuple) else (index,)
        if not 1 <= len(coords) <= 3:
            raise TypeError(f"table index takes 1 to 3 coordinates, got {len(coords)}")
        coords = tuple(operator.index(c) for c in coords)
        sizes = (self._xsize, self._ysize, self._zsize)
        for axis, value, size in zip("xyz", coords, sizes):
            if not 0 <= value < size:
                raise IndexError(f"{axis} index {value} out of range for size {size}")
        x, y, z = coords + (0,) * (3 - len(coords))
        flat = x + y * self._xsize + z * self._xsize * self._ysize
        if flat >= len(self._data):
            raise IndexError(f"index {index} out of range for table of {len(self._data)} values")
        return flat

    def __getitem__(self, index: int | tuple[int, ...]) -> int:
        return self._data[self._flat_index(index)]

    def __setitem__(self, index: int | tuple[int, ...], value: int) -> None:
        self._data[self._flat_index(index)] = _check_value(value)

    def resize(self, xsize: int, ysize: int, zsize: int) -> None:
        """Change the dimensions, keeping the values in the overlapping region."""
        xsize = _check_extent("xsize", xsize)
        ysize = _check_extent("ysize", ysize)
        zsize = _check_extent("zsize", zsize)
        new_data = [0] * (xsize * ysize * zsize)
        overlap = itertools.product(
            range(min(self._zsize, zsize)),
            range(min(self._ysize, ysize)),
            range(min(self._xsize, xsize)),
        )
        for z, y, x in overlap:
            new_data[xsize * ysize * z + xsize * y + x] = self[x, y, z]
        self._xsize, self._ysize, self._zsize = xsize, ysize, zsize
        self._data = new_data

    def dump(self) -> bytes:
        """Serialise as a little-endian header of five u32s followed by i16 values."""
        dimensions = 1 + (self._ysize > 0) + (self._zsize > 0)
        header = _TABLE_HEADER.pack(
            dimensions, self._xsize, self._ysize, self._zsize, len(self._data)
        )
        return header + struct.pack(f"<{len(self._data)}h", *self._data)

    @classmethod
    def load(cls, data: bytes) -> Self:
        """Inverse of dump."""
        if len(data) < _TABLE_HEADER.size:
            raise ValueError("table data is shorter than its header")
        _, xsize, ysize, zsize, length = _TABLE_HEADER.unpack_from(data)
        body = data[_TABLE_HEADER.size:]
        if len(body) % 2:
            raise ValueError("table body has an odd number of bytes")
        values = struct.unpack(f"<{len(body) // 2}h", body)
        if length != len(values):
            raise ValueError(f"table header declares {length} values, body holds {len(values)}")
        return cls.from_data(xsize, ysize, zsize, values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Table):
            return NotImplemented
        return (self._xsize, self._ysize, self._zsize, self._data) == (
            other._xsize,
            other._ysize,
            other._zsize,
            other._data,
        )

    def __repr__(self) -> str:
        return f"Table(xsize={self._xsize}, ysize={self._ysize}, zsize={self._zsize})"