"""Terminal colors and their ANSI (SGR) representations."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import ClassVar, Iterator, Optional

__all__ = ["Color", "Colored", "Layer"]

# Named colors in the order of their 8-bit ANSI index (0..15).
_ANSI_NAMED = (
    "black",
    "dark_red",
    "dark_green",
    "dark_yellow",
    "dark_blue",
    "dark_magenta",
    "dark_cyan",
    "grey",
    "dark_grey",
    "red",
    "green",
    "yellow",
    "blue",
    "magenta",
    "cyan",
    "white",
)
_ANSI_INDEX = {name: index for index, name in enumerate(_ANSI_NAMED)}

_RESET = "reset"
_RGB = "rgb"
_ANSI_VALUE = "ansi_value"
_KINDS = frozenset(_ANSI_NAMED) | {_RESET, _RGB, _ANSI_VALUE}

_U8_RE = re.compile(r"\+?[0-9]+")


def _parse_u8(text: str) -> Optional[int]:
    """Parse ``text`` as an unsigned byte, or return None."""
    if not _U8_RE.fullmatch(text):
        return None
    value = int(text)
    return value if value <= 255 else None


def _next_u8(values: Iterator[str]) -> Optional[int]:
    item = next(values, None)
    return None if item is None else _parse_u8(item)


def _check_u8(value: object, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{what} must be an int, got {type(value).__name__}")
    if not 0 <= value <= 255:
        raise ValueError(f"{what} must be in 0..255, got {value}")
    return value


@dataclass(frozen=True)
class Color:
    """A terminal color: one of the 16 named colors, ``RESET``, an RGB
    color or an 8-bit ANSI palette value."""

    kind: str
    components: tuple[int, ...] = ()

    RESET: ClassVar[Color]
    BLACK: ClassVar[Color]
    DARK_GREY: ClassVar[Color]
    RED: ClassVar[Color]
    DARK_RED: ClassVar[Color]
    GREEN: ClassVar[Color]
    DARK_GREEN: ClassVar[Color]
    YELLOW: ClassVar[Color]
    DARK_YELLOW: ClassVar[Color]
    BLUE: ClassVar[Color]
    DARK_BLUE: ClassVar[Color]
    MAGENTA: ClassVar[Color]
    DARK_MAGENTA: ClassVar[Color]
    CYAN: ClassVar[Color]
    DARK_CYAN: ClassVar[Color]
    WHITE: ClassVar[Color]
    GREY: ClassVar[Color]

    def __post_init__(self) -> None:
        if self.kind not in _KINDS:
            raise ValueError(f"unknown color kind: {self.kind!r}")
        expected = {_RGB: 3, _ANSI_VALUE: 1}.get(self.kind, 0)
        if len(self.components) != expected:
            raise ValueError(
                f"color kind {self.kind!r} takes {expected} component(s)"
            )
        for component in self.components:
            _check_u8(component, "color component")

    @classmethod
    def rgb(cls, r: int, g: int, b: int) -> Color:
        """An RGB color."""
        return cls(_RGB, (_check_u8(r, "r"), _check_u8(g, "g"), _check_u8(b, "b")))

    @classmethod
    def ansi_value(cls, value: int) -> Color:
        """A color from the 8-bit ANSI palette."""
        return cls(_ANSI_VALUE, (_check_u8(value, "ansi value"),))

    @property
    def is_named(self) -> bool:
        """True for the 16 named colors (not reset, RGB or palette values)."""
        return self.kind in _ANSI_INDEX

    @classmethod
    def parse_ansi(cls, ansi: str) -> Optional[Color]:
        """Parse ``5;<n>`` or ``2;<r>;<g>;<b>``; return None if invalid."""
        return cls._parse_ansi_iter(iter(ansi.split(";")))

    @classmethod
    def _parse_ansi_iter(cls, values: Iterator[str]) -> Optional[Color]:
        mode = _next_u8(values)
        if mode == 5:
            n = _next_u8(values)
            if n is None:
                return None
            color = cls(_ANSI_NAMED[n]) if n < len(_ANSI_NAMED) else cls.ansi_value(n)
        elif mode == 2:
            r = _next_u8(values)
            if r is None:
                return None
            g = _next_u8(values)
            if g is None:
                return None
            b = _next_u8(values)
            if b is None:
                return None
            color = cls.rgb(r, g, b)
        else:
            return None
        if next(values, None) is not None:
            return None
        return color

    @classmethod
    def from_name(cls, name: str) -> Color:
        """Look up a named color case-insensitively; raise ValueError if unknown."""
        key = name.lower()
        if key not in _ANSI_INDEX:
            raise ValueError(f"unknown color name: {name!r}")
        return cls(key)

    @classmethod
    def from_str(cls, src: str) -> Color:
        """Look up a named color, falling back to ``WHITE`` when unknown."""
        try:
            return cls.from_name(src)
        except ValueError:
            return cls.WHITE

    def to_config_str(self) -> str:
        """Return the textual form used in configuration files."""
        if self.is_named:
            return self.kind
        if self.kind == _ANSI_VALUE:
            return f"ansi_({self.components[0]})"
        if self.kind == _RGB:
            r, g, b = self.components
            return f"rgb_({r},{g},{b})"
        raise ValueError(f"cannot serialize color {self!r}")

    @classmethod
    def from_config_str(cls, value: str) -> Color:
        """Parse the configuration form: a name, ``ansi_(n)`` or ``rgb_(r,g,b)``."""
        try:
            return cls.from_name(value)
        except ValueError:
            pass
        if "ansi" in value:
            inner = value.replace("ansi_(", "").replace(")", "")
            number = _parse_u8(inner)
            if number is not None:
                return cls.ansi_value(number)
        elif "rgb" in value:
            parts = value.replace("rgb_(", "").replace(")", "").split(",")
            if len(parts) == 3:
                parsed = [_parse_u8(part) for part in parts]
                if all(p is not None for p in parsed):
                    r, g, b = parsed
                    return cls.rgb(r, g, b)  # type: ignore[arg-type]
        raise ValueError(
            f"invalid color {value!r}: expected a color name, "
            "`ansi_(value)` or `rgb_(r,g,b)`"
        )

    def __repr__(self) -> str:
        if self.kind == _RGB:
            r, g, b = self.components
            return f"Color.rgb({r}, {g}, {b})"
        if self.kind == _ANSI_VALUE:
            return f"Color.ansi_value({self.components[0]})"
        return f"Color.{self.kind.upper()}"


for _kind in (_RESET, *_ANSI_NAMED):
    setattr(Color, _kind.upper(), Color(_kind))
del _kind


class Layer(enum.Enum):
    """Whether a color applies to the text or to the cell behind it."""

    FOREGROUND = "foreground"
    BACKGROUND = "background"


@dataclass(frozen=True)
class Colored:
    """A foreground or background color, formatted as SGR parameters."""

    layer: Layer
    color: Color

    @classmethod
    def foreground(cls, color: Color) -> Colored:
        return cls(Layer.FOREGROUND, color)

    @classmethod
    def background(cls, color: Color) -> Colored:
        return cls(Layer.BACKGROUND, color)

    @classmethod
    def parse_ansi(cls, ansi: str) -> Optional[Colored]:
        """Parse what appears inside ``ESC [ <str> m``; return None if invalid."""
        values = iter(ansi.split(";"))
        code = _next_u8(values)
        if code == 38:
            color = Color._parse_ansi_iter(values)
            return None if color is None else cls.foreground(color)
        if code == 48:
            color = Color._parse_ansi_iter(values)
            return None if color is None else cls.background(color)
        if code == 39:
            output = cls.foreground(Color.RESET)
        elif code == 49:
            output = cls.background(Color.RESET)
        else:
            return None
        if next(values, None) is not None:
            return None
        return output

    def __str__(self) -> str:
        background = self.layer is Layer.BACKGROUND
        color = self.color
        if color.kind == _RESET:
            return "49" if background else "39"
        prefix = "48;" if background else "38;"
        if color.kind == _RGB:
            r, g, b = color.components
            return f"{prefix}2;{r};{g};{b}"
        if color.kind == _ANSI_VALUE:
            return f"{prefix}5;{color.components[0]}"
        return f"{prefix}5;{_ANSI_INDEX[color.kind]}"