"""Font settings and the default font."""

from dataclasses import dataclass, replace
from typing import Any, Self

from .arena import Arenas, Key
from .data import Color

DEFAULT_FONT_NAME = "Arial"
DEFAULT_FONT_SIZE = 22


@dataclass
class Font:
    """Text style; colours are stored in the arenas and referenced by key."""

    names: list[str]
    size: int
    bold: bool
    italic: bool
    color: Key
    shadow: bool
    outline: Key
    out_color: Key

    @classmethod
    def default(cls, arenas: Arenas) -> Self:
        """The font used when a script sets nothing else."""
        return cls(
            names=[DEFAULT_FONT_NAME],
            size=DEFAULT_FONT_SIZE,
            bold=False,
            italic=False,
            color=arenas.colors.insert(replace(Color.WHITE)),
            shadow=False,
            outline=arenas.colors.insert(replace(Color.WHITE)),
            out_color=arenas.colors.insert(replace(Color.GREY)),
        )


def collect_names(value: Any) -> list[str]:
    """Turn a font name or a sequence of names into a list; anything else gives none."""
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple)):
        for item in value:
            if not isinstance(item, str):
                raise TypeError(f"font names must be strings, not {type(item).__name__}")
        return list(value)
    return []