"""Query whether a stream or file descriptor refers to a terminal."""

from __future__ import annotations

import io
import os
from typing import Any

__all__ = ["is_tty"]


def is_tty(stream: Any) -> bool:
    """Return True when ``stream`` (an object with ``fileno`` or a raw
    file descriptor) is a terminal, otherwise False."""
    if isinstance(stream, int):
        fd = stream
    else:
        try:
            fd = stream.fileno()
        except (AttributeError, io.UnsupportedOperation, OSError, ValueError):
            return False
    try:
        return os.isatty(fd)
    except OSError:
        return False