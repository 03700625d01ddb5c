"""Terminal-wide operations: raw mode, size, screens, scrolling and clearing."""

from __future__ import annotations

import enum
import os
import subprocess
import sys
import threading
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Iterator, Optional

from ansiterm.command import Command, csi

try:
    import termios
except ImportError:  # pragma: no cover - platforms without termios
    termios = None  # type: ignore[assignment]

__all__ = [
    "is_raw_mode_enabled",
    "enable_raw_mode",
    "disable_raw_mode",
    "size",
    "ClearType",
    "DisableLineWrap",
    "EnableLineWrap",
    "EnterAlternateScreen",
    "LeaveAlternateScreen",
    "ScrollUp",
    "ScrollDown",
    "Clear",
    "SetSize",
    "SetTitle",
]

# The terminal attributes in effect before raw mode was enabled, or None
# when raw mode is not enabled.
_mode_prior_raw: Optional[list[Any]] = None
_mode_lock = threading.Lock()


def _require_termios() -> None:
    if termios is None:
        raise OSError("terminal attributes are not supported on this platform")


@contextmanager
def _tty_fd() -> Iterator[int]:
    """Yield a file descriptor of the controlling terminal."""
    stdin = sys.stdin
    try:
        if stdin is not None and stdin.isatty():
            yield stdin.fileno()
            return
    except (AttributeError, ValueError, OSError):
        pass
    fd = os.open("/dev/tty", os.O_RDWR)
    try:
        yield fd
    finally:
        os.close(fd)


def _make_raw(attrs: list[Any]) -> list[Any]:
    """Return a copy of ``attrs`` switched to raw (non-canonical) mode."""
    iflag, oflag, cflag, lflag, ispeed, ospeed, cc = attrs
    iflag &= ~(
        termios.IGNBRK
        | termios.BRKINT
        | termios.PARMRK
        | termios.ISTRIP
        | termios.INLCR
        | termios.IGNCR
        | termios.ICRNL
        | termios.IXON
    )
    oflag &= ~termios.OPOST
    lflag &= ~(
        termios.ECHO | termios.ECHONL | termios.ICANON | termios.ISIG | termios.IEXTEN
    )
    cflag &= ~(termios.CSIZE | termios.PARENB)
    cflag |= termios.CS8
    cc = list(cc)
    cc[termios.VMIN] = 1
    cc[termios.VTIME] = 0
    return [iflag, oflag, cflag, lflag, ispeed, ospeed, cc]


def is_raw_mode_enabled() -> bool:
    """Return whether raw mode has been enabled by this module."""
    with _mode_lock:
        return _mode_prior_raw is not None


def enable_raw_mode() -> None:
    """Enable raw mode; does nothing if it is already enabled."""
    global _mode_prior_raw
    _require_termios()
    with _mode_lock:
        if _mode_prior_raw is not None:
            return
        with _tty_fd() as fd:
            original = termios.tcgetattr(fd)
            termios.tcsetattr(fd, termios.TCSANOW, _make_raw(original))
        # Remember the original mode only once the switch succeeded.
        _mode_prior_raw = original


def disable_raw_mode() -> None:
    """Restore the terminal mode in effect before raw mode was enabled."""
    global _mode_prior_raw
    with _mode_lock:
        if _mode_prior_raw is None:
            return
        _require_termios()
        with _tty_fd() as fd:
            termios.tcsetattr(fd, termios.TCSANOW, _mode_prior_raw)
        _mode_prior_raw = None


def _tput_value(arg: str) -> Optional[int]:
    """Run ``tput <arg>`` and read its output as a positive number."""
    try:
        result = subprocess.run(["tput", arg], capture_output=True, check=False)
    except OSError:
        return None
    output = result.stdout or b""
    if isinstance(output, str):
        output = output.encode()
    digits = "".join(chr(b) for b in output if 0x30 <= b <= 0x39)
    value = int(digits) if digits else 0
    return value if value > 0 else None


def _tput_size() -> Optional[tuple[int, int]]:
    columns = _tput_value("cols")
    rows = _tput_value("lines")
    if columns is None or rows is None:
        return None
    return columns, rows


def size() -> tuple[int, int]:
    """Return the terminal size as ``(columns, rows)``."""
    try:
        tty_fd: Optional[int] = os.open("/dev/tty", os.O_RDONLY)
    except OSError:
        tty_fd = None
    fd = tty_fd if tty_fd is not None else 1
    try:
        terminal_size = os.get_terminal_size(fd)
        return terminal_size.columns, terminal_size.lines
    except OSError as error:
        fallback = _tput_size()
        if fallback is None:
            raise OSError(f"unable to determine the terminal size: {error}") from error
        return fallback
    finally:
        if tty_fd is not None:
            os.close(tty_fd)


class ClearType(enum.Enum):
    """Which cells a ``Clear`` command clears."""

    ALL = "all"
    PURGE = "purge"
    FROM_CURSOR_DOWN = "from_cursor_down"
    FROM_CURSOR_UP = "from_cursor_up"
    CURRENT_LINE = "current_line"
    UNTIL_NEW_LINE = "until_new_line"


_CLEAR_SEQUENCES = {
    ClearType.ALL: "2J",
    ClearType.PURGE: "3J",
    ClearType.FROM_CURSOR_DOWN: "J",
    ClearType.FROM_CURSOR_UP: "1J",
    ClearType.CURRENT_LINE: "2K",
    ClearType.UNTIL_NEW_LINE: "K",
}


@dataclass(frozen=True)
class DisableLineWrap(Command):
    """Disable line wrapping."""

    def write_ansi(self) -> str:
        return csi("?7l")


@dataclass(frozen=True)
class EnableLineWrap(Command):
    """Enable line wrapping."""

    def write_ansi(self) -> str:
        return csi("?7h")


@dataclass(frozen=True)
class EnterAlternateScreen(Command):
    """Switch to the alternate screen."""

    def write_ansi(self) -> str:
        return csi("?1049h")


@dataclass(frozen=True)
class LeaveAlternateScreen(Command):
    """Switch back to the main screen."""

    def write_ansi(self) -> str:
        return csi("?1049l")


@dataclass(frozen=True)
class ScrollUp(Command):
    """Scroll the screen up by the given number of rows."""

    rows: int

    def write_ansi(self) -> str:
        return csi(self.rows, "S") if self.rows != 0 else ""


@dataclass(frozen=True)
class ScrollDown(Command):
    """Scroll the screen down by the given number of rows."""

    rows: int

    def write_ansi(self) -> str:
        return csi(self.rows, "T") if self.rows != 0 else ""


@dataclass(frozen=True)
class Clear(Command):
    """Clear part or all of the screen."""

    clear_type: ClearType

    def write_ansi(self) -> str:
        return csi(_CLEAR_SEQUENCES[self.clear_type])


@dataclass(frozen=True)
class SetSize(Command):
    """Set the terminal size to ``columns`` by ``rows``."""

    columns: int
    rows: int

    def write_ansi(self) -> str:
        return csi(f"8;{self.rows};{self.columns}t")


@dataclass(frozen=True)
class SetTitle(Command):
    """Set the terminal window title."""

    title: Any

    def write_ansi(self) -> str:
        return f"\x1b]0;{self.title}\x07"