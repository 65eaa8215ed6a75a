"""Event queue shared between the window event loop and the game thread."""

import enum
import queue
import threading
import weakref
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, Self


class WindowEventKind(enum.Enum):
    CLOSE_REQUESTED = enum.auto()
    DESTROYED = enum.auto()
    RESIZED = enum.auto()
    MOVED = enum.auto()
    FOCUSED = enum.auto()
    KEYBOARD_INPUT = enum.auto()
    REDRAW_REQUESTED = enum.auto()
    OTHER = enum.auto()


@dataclass(frozen=True, slots=True)
class WindowEvent:
    """Something that happened to the game window."""

    kind: WindowEventKind
    payload: Any = None


@dataclass(frozen=True, slots=True)
class Exiting:
    """The event loop is shutting down."""


Event = WindowEvent | Exiting


class UserEvent(enum.Enum):
    """Requests sent from the game thread to the event loop."""

    EXIT_EVENT_LOOP = enum.auto()


class EventLoopClosed(Exception):
    """The event loop has ended and can no longer receive requests."""

    def __init__(self, event: UserEvent) -> None:
        super().__init__(f"event loop is closed; could not deliver {event}")
        self.event = event


class _Channel:
    def __init__(self) -> None:
        self.queue: queue.SimpleQueue[Event] = queue.SimpleQueue()


class _Proxy:
    def __init__(self) -> None:
        self._queue: queue.SimpleQueue[UserEvent] = queue.SimpleQueue()
        self._lock = threading.Lock()
        self._closed = False

    def send(self, event: UserEvent) -> None:
        with self._lock:
            if self._closed:
                raise EventLoopClosed(event)
            self._queue.put(event)

    def close(self) -> None:
        with self._lock:
            self._closed = True

    def drain(self) -> Iterator[UserEvent]:
        while True:
            try:
                yield self._queue.get_nowait()
            except queue.Empty:
                return


class EventLoop:
    """The window side: forwards window events and reacts to user requests."""

    def __init__(self, channel: _Channel, proxy: _Proxy) -> None:
        # Only a weak reference: once the receiving side is gone, sends fail.
        self._channel = weakref.ref(channel)
        self._proxy = proxy
        self._resumed = False
        self._exiting = False
        self._closed = False

    @classmethod
    def create(cls) -> tuple[Self, "Events"]:
        """Create a connected event loop and receiving end."""
        channel = _Channel()
        proxy = _Proxy()
        return cls(channel, proxy), Events(channel, proxy)

    @property
    def exiting(self) -> bool:
        return self._exiting

    @property
    def closed(self) -> bool:
        return self._closed

    def resume(self, on_first_resume: Callable[[Self], None]) -> None:
        """Signal that the loop is running; the callback runs on the first call only."""
        if not self._resumed:
            self._resumed = True
            on_first_resume(self)

    def _send(self, event: Event) -> bool:
        channel = self._channel()
        if channel is None:
            return False
        channel.queue.put(event)
        return True

    def window_event(self, event: WindowEvent) -> None:
        """Forward a window event; exit if nobody is listening any more."""
        if not self._send(event) and not self._exiting:
            self.exit()

    def process_user_events(self) -> None:
        """Handle every request sent from the game thread."""
        for event in self._proxy.drain():
            if event is UserEvent.EXIT_EVENT_LOOP:
                self.exit()

    def exit(self) -> None:
        """Ask the loop to stop."""
        self._exiting = True

    def close(self) -> None:
        """Finish the loop: refuse further requests and announce Exiting."""
        if self._closed:
            return
        self._closed = True
        self._exiting = True
        self._proxy.close()
        self._send(Exiting())


class Events:
    """The game side: receives events and sends requests to the loop."""

    def __init__(self, channel: _Channel, proxy: _Proxy) -> None:
        self._channel = channel
        self._proxy = proxy

    def iter(self) -> Iterator[Event]:
        """Yield the events received so far without waiting for more."""
        while True:
            try:
                yield self._channel.queue.get_nowait()
            except queue.Empty:
                return

    def send(self, event: UserEvent) -> None:
        """Send a request to the loop; raise EventLoopClosed if it has ended."""
        self._proxy.send(event)