"""Scene objects (viewports, sprites, windows) and their draw ordering."""

from dataclasses import dataclass, field, replace
from typing import Self

from .arena import Arenas, Key
from .data import Color, Rect, Tone
from .zorder import Drawable, DrawableKind, Z, ZList

SCREEN_WIDTH = 640
SCREEN_HEIGHT = 480


def _blank_tone() -> Tone:
    return Tone(0.0, 0.0, 0.0, 0.0)


def _blank_color() -> Color:
    return Color(0.0, 0.0, 0.0, 0.0)


@dataclass
class Viewport:
    """A clipped region of the screen that holds its own drawables."""

    z: Z
    rect: Key
    tone: Key
    color: Key
    z_list: ZList = field(default_factory=ZList)

    @classmethod
    def create(cls, rect: Rect, arenas: Arenas) -> Self:
        """Build a viewport covering rect, storing its properties in arenas."""
        return cls(
            z=Z.new(0),
            rect=arenas.rects.insert(replace(rect)),
            tone=arenas.tones.insert(_blank_tone()),
            color=arenas.colors.insert(_blank_color()),
        )

    @classmethod
    def create_global(cls, arenas: Arenas) -> Self:
        """Build the viewport that covers the whole screen."""
        return cls.create(Rect(0, 0, SCREEN_WIDTH, SCREEN_HEIGHT), arenas)


@dataclass
class Sprite:
    """A drawable image with a source rectangle and a tone."""

    src_rect: Key
    tone: Key

    @classmethod
    def create(cls, arenas: Arenas) -> Self:
        return cls(
            src_rect=arenas.rects.insert(Rect()),
            tone=arenas.tones.insert(_blank_tone()),
        )


@dataclass
class Window:
    """A framed window with a cursor rectangle."""

    rect: Key
    cursor_rect: Key

    @classmethod
    def create(cls, arenas: Arenas) -> Self:
        return cls(
            rect=arenas.rects.insert(Rect()),
            cursor_rect=arenas.rects.insert(Rect()),
        )


class Scene:
    """The global viewport and the viewports drawn inside it."""

    def __init__(self, arenas: Arenas) -> None:
        self.arenas = arenas
        self.global_viewport: Key = arenas.viewports.insert(Viewport.create_global(arenas))

    @property
    def _root(self) -> Viewport:
        return self.arenas.viewports[self.global_viewport]

    def add_viewport(self, rect: Rect) -> Key:
        """Create a viewport over rect, register it for drawing and return its key."""
        viewport = Viewport.create(rect, self.arenas)
        key = self.arenas.viewports.insert(viewport)
        self._root.z_list.insert(viewport.z, Drawable(DrawableKind.VIEWPORT, key))
        return key

    def viewport_z(self, key: Key) -> int:
        return self.arenas.viewports[key].z.value

    def set_viewport_z(self, key: Key, z: int) -> None:
        """Change a viewport's z value, keeping its place among equal values."""
        viewport = self.arenas.viewports[key]
        old_z = viewport.z
        new_z = old_z.update_value(z)
        self._root.z_list.re_insert(old_z, new_z)
        viewport.z = new_z

    def draw_order(self) -> list[Drawable]:
        """Drawables of the global viewport, back to front."""
        return [drawable for _, drawable in self._root.z_list]