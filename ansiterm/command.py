"""Terminal commands and the helpers that write them to a stream."""

from __future__ import annotations

import io
from abc import ABC, abstractmethod
from typing import IO, Any, TypeVar

__all__ = ["Command", "csi", "queue", "execute"]

_CSI = "\x1b["

_W = TypeVar("_W", bound=IO[Any])


def csi(*args: object) -> str:
    """Return a control sequence: ``ESC [`` followed by the given parts."""
    return _CSI + "".join(str(part) for part in args)


class Command(ABC):
    """An action on the terminal, expressed as an ANSI escape sequence."""

    @abstractmethod
    def write_ansi(self) -> str:
        """Return the ANSI text that performs this command."""

    def __str__(self) -> str:
        return self.write_ansi()


def _is_binary(writer: Any) -> bool:
    if isinstance(writer, (io.RawIOBase, io.BufferedIOBase)):
        return True
    mode = getattr(writer, "mode", None)
    return isinstance(mode, str) and "b" in mode


def queue(writer: _W, *args: Command) -> _W:
    """Write the commands to ``writer`` in order, without flushing.

    Returns the writer so that calls can be chained.
    """
    binary = _is_binary(writer)
    for command in args:
        if not isinstance(command, Command):
            raise TypeError(
                f"expected a Command, got {type(command).__name__}"
            )
        text = command.write_ansi()
        writer.write(text.encode("utf-8") if binary else text)
    return writer


def execute(writer: _W, *args: Command) -> _W:
    """Write the commands to ``writer`` in order, then flush it."""
    queue(writer, *args)
    writer.flush()
    return writer