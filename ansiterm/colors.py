"""An optional foreground and background color pair."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ansiterm.color import Color, Colored, Layer

__all__ = ["Colors"]


@dataclass(frozen=True)
class Colors:
    """Optionally a foreground and/or a background color."""

    foreground: Optional[Color] = None
    background: Optional[Color] = None

    def then(self, other: Colors) -> Colors:
        """Return colors with the same effect as applying ``self`` and then ``other``."""
        return Colors(
            foreground=other.foreground if other.foreground is not None else self.foreground,
            background=other.background if other.background is not None else self.background,
        )

    @classmethod
    def from_colored(cls, colored: Colored) -> Colors:
        """Build colors holding just the foreground or background of ``colored``."""
        if colored.layer is Layer.FOREGROUND:
            return cls(foreground=colored.color)
        return cls(background=colored.color)