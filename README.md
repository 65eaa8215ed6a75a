# rgsskit

Building blocks for running games written against the RGSS scripting
interface (the runtime used by classic RPG Maker titles), in plain Python
with no third-party dependencies.

## What is in the box

- **`rgsskit.config`** – `Config` with `FilesystemConfig`, `GraphicsConfig`
  and `BehaviourConfig` sections. Missing keys fall back to defaults
  (`game_dir = "."`, `vsync = true`, `force_downlevel = false`,
  `abort_on_panic = false`); a value of the wrong type raises `ValueError`.
  Read it with `Config.from_toml(text)` or `Config.load(path)`; `load`
  returns the defaults when the file cannot be read
  (the default path is `sapphire_config.toml`).
- **`rgsskit.data`** – the value types `Color`, `Tone`, `Rect` and `Table`.
  `Color` and `Tone` dump to and load from 32 bytes of little-endian
  doubles (`dump()` / `load(data)`); `Color` has `WHITE`, `BLACK`, `GREY`
  and `TRANSPARENT`. `Rect` has `set(...)` and `empty()`. `Table` is a grid
  of signed 16-bit integers, indexed with one, two or three coordinates,
  resizable in place with `resize`, and dumped as a five-`u32` header
  followed by the values.
- **`rgsskit.arena`** – `Arena`, a generational store that hands out `Key`
  values (stale keys no longer resolve after removal), and `Arenas`, one
  arena per object kind.
- **File systems** – `HostFileSystem` (`rgsskit.hostfs`) reads from a
  directory, `ArchiveFileSystem` (`rgsskit.archive`) reads encrypted
  `RGSSAD` archives (versions 1, 2 and 3), `ListFileSystem`
  (`rgsskit.listfs`) searches several backends in order, and
  `PathCacheFileSystem` (`rgsskit.pathcache`) makes lookups ignore letter
  case and file extensions. `FileSystem` (`rgsskit.filesystem`) wires these
  together for a game directory and an optional archive. Failures raise
  `NotExistError` or `InvalidHeaderError`, both subclasses of
  `FileSystemError` (`rgsskit.fsbase`, which also defines `Entry` and the
  `FileSystemBackend` interface).
- **`rgsskit.zorder`** – `Z`, `Drawable`, `DrawableKind` and `ZList`, a
  draw list ordered by z value and then by creation order.
- **`rgsskit.scene`** – `Viewport`, `Sprite`, `Window` and a `Scene` that
  owns a screen-sized global viewport and keeps added viewports in draw
  order.
- **`rgsskit.fonts`** – `Font.default(arenas)` (Arial, size 22, white) and
  `collect_names` for font-name arguments.
- **`rgsskit.events`** – `EventLoop.create()` returns a connected
  `EventLoop` (the window side) and `Events` (the game side). Window events
  go one way, `UserEvent.EXIT_EVENT_LOOP` requests the other; once the loop
  is closed, `Events.send` raises `EventLoopClosed`.

## Examples

Reading a configuration file:

```python
from rgsskit.config import Config

config = Config.from_toml("""
[fs]
game_dir = "games/demo"

[graphics]
vsync = false
""")
assert config.fs.game_dir == "games/demo"
assert config.behaviour.abort_on_panic is False
```

Working with tables and their saved form:

```python
from rgsskit.data import Table

table = Table(4, 3, 2)
table[1, 2, 1] = 42
restored = Table.load(table.dump())
assert restored[1, 2, 1] == 42

table.resize(8, 8, 1)
```

Reading game files, from an archive first and then from disk, without
caring about letter case or file extensions:

```python
from rgsskit.filesystem import FileSystem

fs = FileSystem("path/to/game", "Game.rgssad")
with fs.read_file("data/scripts") as f:
    raw = f.read()
```

Keeping things in draw order:

```python
from rgsskit.arena import Arenas
from rgsskit.data import Rect
from rgsskit.scene import Scene

scene = Scene(Arenas())
back = scene.add_viewport(Rect(0, 0, 640, 480))
front = scene.add_viewport(Rect(0, 0, 320, 240))
scene.set_viewport_z(front, -10)
order = scene.draw_order()   # front first, then back
```

Passing events between the window and the game:

```python
from rgsskit.events import EventLoop, UserEvent, WindowEvent, WindowEventKind

loop, events = EventLoop.create()
loop.window_event(WindowEvent(WindowEventKind.CLOSE_REQUESTED))
received = list(events.iter())

events.send(UserEvent.EXIT_EVENT_LOOP)
loop.process_user_events()
assert loop.exiting
loop.close()
```

## What it does not do

rgsskit holds the data and bookkeeping of a game runtime, not the runtime
itself. It opens no window, draws nothing, plays no sound, reads no
keyboard state and has no key-code table, runs no game scripts, and comes
with no command to start a game.

## Requirements

Python 3.11 or newer. The test suite uses pytest and is available through
the `test` extra.