"""Draw ordering of scene objects by z value and creation order."""

import bisect
import enum
import itertools
import operator
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field, replace
from typing import Self

from .arena import Key

_creation_counter = itertools.count()


@dataclass(frozen=True, order=True, slots=True)
class Z:
    """A z value; ties are broken by creation order, older first."""

    value: int
    created: int = field(default_factory=lambda: next(_creation_counter))

    @classmethod
    def new(cls, value: int) -> Self:
        return cls(operator.index(value))

    def update_value(self, value: int) -> Self:
        """Return a copy with a new value but the same creation order."""
        return replace(self, value=operator.index(value))


class DrawableKind(enum.Enum):
    VIEWPORT = "viewport"
    WINDOW = "window"


@dataclass(frozen=True, slots=True)
class Drawable:
    """Reference to an object that can be drawn."""

    kind: DrawableKind
    key: Key


class ZList:
    """Drawables kept sorted by their Z."""

    def __init__(self) -> None:
        self._order: list[Z] = []
        self._items: dict[Z, Drawable] = {}

    def insert(self, z: Z, value: Drawable) -> None:
        if z in self._items:
            raise ValueError(f"{z} is already in the list")
        bisect.insort(self._order, z)
        self._items[z] = value

    def re_insert(self, old_z: Z, new_z: Z) -> None:
        """Move the drawable stored under old_z to new_z."""
        value = self.remove(old_z)
        if value is None:
            raise KeyError(f"invalid z {old_z}")
        self.insert(new_z, value)

    def get(self, z: Z) -> Drawable | None:
        return self._items.get(z)

    def remove(self, z: Z) -> Drawable | None:
        value = self._items.pop(z, None)
        if value is not None:
            del self._order[bisect.bisect_left(self._order, z)]
        return value

    def __iter__(self) -> Iterator[tuple[Z, Drawable]]:
        return iter([(z, self._items[z]) for z in self._order])

    def __len__(self) -> int:
        return len(self._order)

    def __contains__(self, z: object) -> bool:
        return z in self._items

    def retain(self, predicate: Callable[[Z, Drawable], bool]) -> None:
        """Keep only the pairs for which predicate returns true."""
        kept = [(z, value) for z, value in self if predicate(z, value)]
        self._order = [z for z, _ in kept]
        self._items = dict(kept)