"""Keyboard and terminal events, and the source that produces them.

Keys read by `readchar` arrive as raw strings (escape sequences for named
keys). They are normalized into the small immutable key types below before
anything else in feedboat sees them. Raw input that has no normalized form
is dropped.
"""

import queue
import signal
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Optional, Union

import readchar

from feedboat.utils.debug import debug_events, log_error
from feedboat.utils.exceptions import EventSourceClosed


class NamedKey(Enum):
    """Non-character keys."""

    BACKSPACE = "backspace"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    HOME = "home"
    END = "end"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    DELETE = "delete"
    INSERT = "insert"
    ESC = "esc"


@dataclass(frozen=True)
class Char:
    """A character key. Enter is Char("\\n")."""

    char: str


@dataclass(frozen=True)
class Named:
    name: NamedKey


@dataclass(frozen=True)
class Function:
    """Function key F<index>."""

    index: int


@dataclass(frozen=True)
class Alt:
    key: "Key"


@dataclass(frozen=True)
class Ctrl:
    key: "Key"


Key = Union[Char, Named, Function, Alt, Ctrl]

ENTER = Char("\n")
BACKSPACE = Named(NamedKey.BACKSPACE)
LEFT = Named(NamedKey.LEFT)
RIGHT = Named(NamedKey.RIGHT)
UP = Named(NamedKey.UP)
DOWN = Named(NamedKey.DOWN)
HOME = Named(NamedKey.HOME)
END = Named(NamedKey.END)
PAGE_UP = Named(NamedKey.PAGE_UP)
PAGE_DOWN = Named(NamedKey.PAGE_DOWN)
DELETE = Named(NamedKey.DELETE)
INSERT = Named(NamedKey.INSERT)
ESC = Named(NamedKey.ESC)


def ctrl(char: str) -> Ctrl:
    """Ctrl+<char> chord."""
    return Ctrl(Char(char))


@dataclass(frozen=True)
class KeyEvent:
    """User pressed a key."""

    key: Key


@dataclass(frozen=True)
class ResizeEvent:
    """Terminal changed size (SIGWINCH)."""


Event = Union[KeyEvent, ResizeEvent]


# Raw readchar sequences -> normalized keys
_RAW_KEYS: dict[str, Key] = {
    readchar.key.UP: UP,
    readchar.key.DOWN: DOWN,
    readchar.key.LEFT: LEFT,
    readchar.key.RIGHT: RIGHT,
    readchar.key.HOME: HOME,
    readchar.key.END: END,
    readchar.key.PAGE_UP: PAGE_UP,
    readchar.key.PAGE_DOWN: PAGE_DOWN,
    readchar.key.DELETE: DELETE,
    readchar.key.INSERT: INSERT,
    readchar.key.BACKSPACE: BACKSPACE,
    "\x08": BACKSPACE,
    "\x1b": ESC,
    "\r": ENTER,
    "\n": ENTER,
    "\t": Char("\t"),
    # Alternate encodings some terminals send for Home/End
    "\x1b[1~": HOME,
    "\x1b[4~": END,
    "\x1bOH": HOME,
    "\x1bOF": END,
}
for _index in range(1, 13):
    _RAW_KEYS[getattr(readchar.key, f"F{_index}")] = Function(_index)


def normalize_key(raw: str) -> Optional[Key]:
    """Translate a raw key string from readchar into a Key.

    Returns None for input that has no normalized form (unknown escape
    sequences, empty strings).
    """
    if not raw:
        return None
    if raw in _RAW_KEYS:
        return _RAW_KEYS[raw]

    if len(raw) == 1:
        code = ord(raw)
        # Control characters 0x01-0x1a are Ctrl+a..Ctrl+z
        if 1 <= code <= 26:
            return ctrl(chr(code + ord("a") - 1))
        if code < 32 or code == 127:
            return None
        return Char(raw)

    # ESC followed by a single key is how terminals report Alt+<key>
    if raw[0] == "\x1b" and len(raw) == 2:
        inner = normalize_key(raw[1])
        return Alt(inner) if inner is not None else None

    return None


Emit = Callable[[Event], None]
Producer = Callable[[Emit], None]


def read_keys(emit: Emit) -> None:
    """Producer: read keys from the terminal until stdin goes away."""
    while True:
        try:
            raw = readchar.readkey()
        except KeyboardInterrupt:
            # readchar raises on Ctrl+C instead of returning it
            emit(KeyEvent(ctrl("c")))
            continue
        except (EOFError, OSError) as e:
            debug_events("Keyboard reader stopped", error=repr(e))
            return

        if raw == "":
            # Closed stdin reads as an empty string
            debug_events("Keyboard reader reached end of input")
            return

        key = normalize_key(raw)
        if key is None:
            debug_events("Dropped unmapped key", raw=repr(raw))
            continue
        emit(KeyEvent(key))


def block_resize_signal() -> bool:
    """Block SIGWINCH so only the resize watcher thread receives it.

    Must be called from the main thread before any producer thread starts,
    since threads inherit the signal mask. Returns False where the platform
    has no SIGWINCH.
    """
    if not hasattr(signal, "SIGWINCH") or not hasattr(signal, "pthread_sigmask"):
        return False
    signal.pthread_sigmask(signal.SIG_BLOCK, {signal.SIGWINCH})
    return True


def unblock_resize_signal() -> None:
    if hasattr(signal, "SIGWINCH") and hasattr(signal, "pthread_sigmask"):
        signal.pthread_sigmask(signal.SIG_UNBLOCK, {signal.SIGWINCH})


def watch_resize(emit: Emit) -> None:
    """Producer: report every SIGWINCH as a ResizeEvent."""
    if not hasattr(signal, "SIGWINCH") or not hasattr(signal, "sigwait"):
        # Nothing to watch; park forever so the source stays open
        threading.Event().wait()
        return
    while True:
        signal.sigwait({signal.SIGWINCH})
        emit(ResizeEvent())


_CLOSED = object()


class EventsSource:
    """Watcher for keypresses and signals.

    Each producer runs in its own daemon thread and hands events to a single
    ordered queue. `next()` blocks until an event is available. Producers are
    expected to run for the lifetime of the dashboard, so as soon as one of
    them exits the source is closed and `next()` raises EventSourceClosed.
    """

    def __init__(self, producers: Optional[Iterable[tuple[str, Producer]]] = None):
        self._queue: queue.Queue = queue.Queue()
        self._closed_by: Optional[str] = None
        if producers is None:
            block_resize_signal()
            producers = [("keyboard", read_keys), ("resize", watch_resize)]

        self._threads = []
        for name, producer in producers:
            thread = threading.Thread(
                target=self._run,
                args=(name, producer),
                name=f"feedboat-{name}",
                daemon=True,
            )
            self._threads.append(thread)
            thread.start()

    def _run(self, name: str, producer: Producer) -> None:
        try:
            producer(self._queue.put)
        except Exception as e:
            log_error("events", f"Producer {name} crashed", e)
        finally:
            self._queue.put((_CLOSED, name))

    @property
    def closed(self) -> bool:
        return self._closed_by is not None

    def next(self) -> Event:
        """Get the next event (blocking).

        Raises:
            EventSourceClosed: Once any producer has stopped.
        """
        if self._closed_by is not None:
            raise EventSourceClosed(
                f"Event source closed ({self._closed_by} stopped)", self._closed_by
            )

        item = self._queue.get()
        if isinstance(item, tuple) and item and item[0] is _CLOSED:
            self._closed_by = item[1]
            debug_events("Event source closed", producer=self._closed_by)
            raise EventSourceClosed(
                f"Event source closed ({self._closed_by} stopped)", self._closed_by
            )
        return item
