"""Generational storage for game objects, addressed by stable keys."""

from dataclasses import dataclass, field
from typing import Generic, Iterator, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Key:
    """Handle to a value in an Arena; stale once the value is removed."""

    index: int
    version: int


@dataclass(slots=True)
class _Slot:
    version: int
    value: object = None

    @property
    def occupied(self) -> bool:
        return self.version % 2 == 1


class Arena(Generic[T]):
    """Map from generated keys to values, reusing freed slots safely."""

    def __init__(self) -> None:
        self._slots: list[_Slot] = []
        self._free: list[int] = []
        self._len = 0

    def insert(self, value: T) -> Key:
        """Store a value and return its new key."""
        if self._free:
            index = self._free.pop()
            slot = self._slots[index]
            slot.version += 1
            slot.value = value
        else:
            index = len(self._slots)
            slot = _Slot(1, value)
            self._slots.append(slot)
        self._len += 1
        return Key(index, slot.version)

    def _find(self, key: object) -> _Slot | None:
        if not isinstance(key, Key) or not 0 <= key.index < len(self._slots):
            return None
        slot = self._slots[key.index]
        if slot.occupied and slot.version == key.version:
            return slot
        return None

    def remove(self, key: Key) -> T | None:
        """Remove and return the value for key, or None if it is not present."""
        slot = self._find(key)
        if slot is None:
            return None
        value = slot.value
        slot.value = None
        slot.version += 1
        self._free.append(key.index)
        self._len -= 1
        return value  # type: ignore[return-value]

    def get(self, key: Key) -> T | None:
        """Return the value for key, or None if it is not present."""
        slot = self._find(key)
        return None if slot is None else slot.value  # type: ignore[return-value]

    def __getitem__(self, key: Key) -> T:
        slot = self._find(key)
        if slot is None:
            raise KeyError(key)
        return slot.value  # type: ignore[return-value]

    def __setitem__(self, key: Key, value: T) -> None:
        slot = self._find(key)
        if slot is None:
            raise KeyError(key)
        slot.value = value

    def __contains__(self, key: object) -> bool:
        return self._find(key) is not None

    def __len__(self) -> int:
        return self._len

    def __iter__(self) -> Iterator[Key]:
        for index, slot in enumerate(self._slots):
            if slot.occupied:
                yield Key(index, slot.version)

    def values(self) -> Iterator[T]:
        return (self[key] for key in self)

    def items(self) -> Iterator[tuple[Key, T]]:
        return ((key, self[key]) for key in self)


@dataclass
class Arenas:
    """One arena per kind of shared game object."""

    fonts: Arena = field(default_factory=Arena)
    colors: Arena = field(default_factory=Arena)
    tones: Arena = field(default_factory=Arena)
    rects: Arena = field(default_factory=Arena)
    tables: Arena = field(default_factory=Arena)
    bitmaps: Arena = field(default_factory=Arena)
    viewports: Arena = field(default_factory=Arena)
    windows: Arena = field(default_factory=Arena)
    sprites: Arena = field(default_factory=Arena)