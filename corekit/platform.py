"""Input identifiers, timing, file-system helpers and simple threading primitives."""

from __future__ import annotations

import os
import threading
import time
from enum import IntEnum
from typing import Any, Callable, Iterator, Optional

_FREQUENCY = 1_000_000_000


class Key(IntEnum):
    """Platform-independent key codes."""

    UNKNOWN = 0
    SPACE = 1
    APOSTROPHE = 2
    COMMA = 3
    MINUS = 4
    PERIOD = 5
    SLASH = 6
    K0 = 7
    K1 = 8
    K2 = 9
    K3 = 10
    K4 = 11
    K5 = 12
    K6 = 13
    K7 = 14
    K8 = 15
    K9 = 16
    SEMICOLON = 17
    EQUAL = 18
    A = 19
    B = 20
    C = 21
    D = 22
    E = 23
    F = 24
    G = 25
    H = 26
    I = 27  # noqa: E741
    J = 28
    K = 29
    L = 30
    M = 31
    N = 32
    O = 33  # noqa: E741
    P = 34
    Q = 35
    R = 36
    S = 37
    T = 38
    U = 39
    V = 40
    W = 41
    X = 42
    Y = 43
    Z = 44
    BACKSLASH = 45
    GRAVE_ACCENT = 46
    ESCAPE = 47
    RETURN = 48
    TAB = 49
    BACKSPACE = 50
    INSERT = 51
    DELETE = 52
    RIGHT = 53
    LEFT = 54
    DOWN = 55
    UP = 56
    PAGE_UP = 57
    PAGE_DOWN = 58
    HOME = 59
    END = 60
    F1 = 61
    F2 = 62
    F3 = 63
    F4 = 64
    F5 = 65
    F6 = 66
    F7 = 67
    F8 = 68
    F9 = 69
    F10 = 70
    F11 = 71
    F12 = 72
    SHIFT = 73
    CONTROL = 74
    ALT = 75
    SUPER = 76
    MENU = 77


# Extra room is reserved for keys that may have multiple binds.
KEY_COUNT = Key.MENU + 32


class MouseButton(IntEnum):
    LEFT = 0
    MIDDLE = 1
    RIGHT = 2


MOUSE_BTN_COUNT = len(MouseButton)


class Cursor(IntEnum):
    POINTER = 0
    HAND = 1
    RESIZE = 2
    MOVE = 3


def get_frequency() -> int:
    """Ticks per second of :func:`get_time`."""
    return _FREQUENCY


def get_time() -> int:
    """Monotonic time in nanoseconds."""
    return time.monotonic_ns()


def get_root_dir() -> str:
    return "C:/" if os.name == "nt" else "/"


def iter_dir(dir_name: str) -> Iterator[str]:
    """Iterate the full paths of the entries of ``dir_name``.

    Raises OSError at once if the directory cannot be opened.
    """
    names = os.listdir(dir_name)
    prefix = dir_name if dir_name.endswith("/") else dir_name + "/"
    return (prefix + name for name in names if name not in (".", ".."))


def file_exists(name: str) -> bool:
    return os.path.exists(name)


def file_is_regular(name: str) -> bool:
    return os.path.isfile(name)


def file_is_dir(name: str) -> bool:
    return os.path.isdir(name)


def file_mod_time(name: str) -> int:
    """Modification time in whole seconds, or 0 if the file cannot be read."""
    try:
        return int(os.stat(name).st_mtime)
    except OSError:
        return 0


def get_file_name(path: str) -> str:
    """The part of ``path`` after its last separator.

    A separator in the very first position is not treated as one.
    """
    idx = max(path.rfind("/"), path.rfind("\\"))
    return path[idx + 1:] if idx >= 1 else path


def get_file_extension(name: str) -> str:
    """Everything after the first dot of ``name``, or an empty string."""
    return name.partition(".")[2]


def get_file_path(name: str) -> str:
    """Absolute directory containing ``name``, with a trailing separator."""
    resolved = os.path.realpath(name, strict=True)
    idx = resolved.rfind(os.sep)
    return resolved[:idx + 1] if idx >= 0 else resolved[:1]


class Worker:
    """A re-runnable background thread that calls ``worker(self)``."""

    def __init__(self, worker: Callable[[Worker], Any]) -> None:
        self.worker = worker
        self.data: Any = None
        self._thread: Optional[threading.Thread] = None
        self._working = False

    def _run(self) -> None:
        try:
            self.worker(self)
        finally:
            self._working = False

    def execute(self) -> None:
        """Start the worker; raises RuntimeError if it is already running."""
        if self._working:
            raise RuntimeError("thread already active")
        self._working = True
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()

    def join(self) -> None:
        if self._thread is None:
            return
        self._thread.join()
        self._thread = None

    def active(self) -> bool:
        return self._working


class Mutex:
    """A lock guarding an optional piece of shared data."""

    def __init__(self, data: Any = None) -> None:
        self.data = data
        self._lock = threading.Lock()

    def lock(self) -> None:
        self._lock.acquire()

    def unlock(self) -> None:
        self._lock.release()

    def __enter__(self) -> Mutex:
        self.lock()
        return self

    def __exit__(self, *args: Any) -> None:
        self.unlock()