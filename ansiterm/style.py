"""Colors and attributes applied to text, and the commands that set them."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional, TypeVar

from ansiterm.attributes import Attribute, Attributes
from ansiterm.color import Color, Colored
from ansiterm.colors import Colors
from ansiterm.command import Command, csi

__all__ = [
    "style",
    "available_color_count",
    "Stylize",
    "ContentStyle",
    "StyledContent",
    "SetForegroundColor",
    "SetBackgroundColor",
    "SetColors",
    "SetAttribute",
    "SetAttributes",
    "PrintStyledContent",
    "ResetColor",
    "Print",
]

_S = TypeVar("_S", bound="Stylize")


class Stylize(ABC):
    """Methods that set colors and attributes.

    Each method returns a new styled value; the receiver is left unchanged.
    """

    @abstractmethod
    def stylize(self: _S) -> _S:
        """Return an independent styled copy of this value."""

    @abstractmethod
    def _content_style(self) -> ContentStyle:
        """Return the style that the methods below modify."""

    def with_(self: _S, color: Color) -> _S:
        """Set the foreground color."""
        styled = self.stylize()
        styled._content_style().foreground_color = color
        return styled

    def on(self: _S, color: Color) -> _S:
        """Set the background color."""
        styled = self.stylize()
        styled._content_style().background_color = color
        return styled

    def attribute(self: _S, attr: Attribute) -> _S:
        """Add the attribute."""
        styled = self.stylize()
        styled._content_style().attributes.set(attr)
        return styled

    def reset(self: _S) -> _S:
        return self.attribute(Attribute.RESET)

    def bold(self: _S) -> _S:
        return self.attribute(Attribute.BOLD)

    def underlined(self: _S) -> _S:
        return self.attribute(Attribute.UNDERLINED)

    def reverse(self: _S) -> _S:
        return self.attribute(Attribute.REVERSE)

    def dim(self: _S) -> _S:
        return self.attribute(Attribute.DIM)

    def italic(self: _S) -> _S:
        return self.attribute(Attribute.ITALIC)

    def negative(self: _S) -> _S:
        return self.attribute(Attribute.REVERSE)

    def slow_blink(self: _S) -> _S:
        return self.attribute(Attribute.SLOW_BLINK)

    def rapid_blink(self: _S) -> _S:
        return self.attribute(Attribute.RAPID_BLINK)

    def hidden(self: _S) -> _S:
        return self.attribute(Attribute.HIDDEN)

    def crossed_out(self: _S) -> _S:
        return self.attribute(Attribute.CROSSED_OUT)

    def black(self: _S) -> _S:
        return self.with_(Color.BLACK)

    def on_black(self: _S) -> _S:
        return self.on(Color.BLACK)

    def dark_grey(self: _S) -> _S:
        return self.with_(Color.DARK_GREY)

    def on_dark_grey(self: _S) -> _S:
        return self.on(Color.DARK_GREY)

    def red(self: _S) -> _S:
        return self.with_(Color.RED)

    def on_red(self: _S) -> _S:
        return self.on(Color.RED)

    def dark_red(self: _S) -> _S:
        return self.with_(Color.DARK_RED)

    def on_dark_red(self: _S) -> _S:
        return self.on(Color.DARK_RED)

    def green(self: _S) -> _S:
        return self.with_(Color.GREEN)

    def on_green(self: _S) -> _S:
        return self.on(Color.GREEN)

    def dark_green(self: _S) -> _S:
        return self.with_(Color.DARK_GREEN)

    def on_dark_green(self: _S) -> _S:
        return self.on(Color.DARK_GREEN)

    def yellow(self: _S) -> _S:
        return self.with_(Color.YELLOW)

    def on_yellow(self: _S) -> _S:
        return self.on(Color.YELLOW)

    def dark_yellow(self: _S) -> _S:
        return self.with_(Color.DARK_YELLOW)

    def on_dark_yellow(self: _S) -> _S:
        return self.on(Color.DARK_YELLOW)

    def blue(self: _S) -> _S:
        return self.with_(Color.BLUE)

    def on_blue(self: _S) -> _S:
        return self.on(Color.BLUE)

    def dark_blue(self: _S) -> _S:
        return self.with_(Color.DARK_BLUE)

    def on_dark_blue(self: _S) -> _S:
        return self.on(Color.DARK_BLUE)

    def magenta(self: _S) -> _S:
        return self.with_(Color.MAGENTA)

    def on_magenta(self: _S) -> _S:
        return self.on(Color.MAGENTA)

    def dark_magenta(self: _S) -> _S:
        return self.with_(Color.DARK_MAGENTA)

    def on_dark_magenta(self: _S) -> _S:
        return self.on(Color.DARK_MAGENTA)

    def cyan(self: _S) -> _S:
        return self.with_(Color.CYAN)

    def on_cyan(self: _S) -> _S:
        return self.on(Color.CYAN)

    def dark_cyan(self: _S) -> _S:
        return self.with_(Color.DARK_CYAN)

    def on_dark_cyan(self: _S) -> _S:
        return self.on(Color.DARK_CYAN)

    def white(self: _S) -> _S:
        return self.with_(Color.WHITE)

    def on_white(self: _S) -> _S:
        return self.on(Color.WHITE)

    def grey(self: _S) -> _S:
        return self.with_(Color.GREY)

    def on_grey(self: _S) -> _S:
        return self.on(Color.GREY)


@dataclass
class ContentStyle(Stylize):
    """The colors and attributes that can be put on content."""

    foreground_color: Optional[Color] = None
    background_color: Optional[Color] = None
    attributes: Attributes = field(default_factory=Attributes)

    def apply(self, val: Any) -> StyledContent:
        """Return ``val`` styled with a copy of this style."""
        return StyledContent(self.stylize(), val)

    def stylize(self) -> ContentStyle:
        return ContentStyle(
            self.foreground_color, self.background_color, self.attributes.copy()
        )

    def _content_style(self) -> ContentStyle:
        return self


@dataclass
class StyledContent(Stylize):
    """Content together with the style to print it in."""

    style: ContentStyle
    content: Any

    def stylize(self) -> StyledContent:
        return StyledContent(self.style.stylize(), self.content)

    def _content_style(self) -> ContentStyle:
        return self.style

    def __str__(self) -> str:
        return PrintStyledContent(self).write_ansi()


def style(val: Any) -> StyledContent:
    """Wrap ``val`` in a ``StyledContent`` with no style set."""
    return ContentStyle().apply(val)


def available_color_count() -> int:
    """Guess the number of available colors from ``TERM``: 256 or 8."""
    term = os.environ.get("TERM")
    return 256 if term is not None and "256color" in term else 8


@dataclass(frozen=True)
class SetForegroundColor(Command):
    """Set the foreground color."""

    color: Color

    def write_ansi(self) -> str:
        return csi(Colored.foreground(self.color), "m")


@dataclass(frozen=True)
class SetBackgroundColor(Command):
    """Set the background color."""

    color: Color

    def write_ansi(self) -> str:
        return csi(Colored.background(self.color), "m")


@dataclass(frozen=True)
class SetColors(Command):
    """Set the foreground and/or background color, whichever are given."""

    colors: Colors

    def write_ansi(self) -> str:
        parts = []
        if self.colors.foreground is not None:
            parts.append(SetForegroundColor(self.colors.foreground).write_ansi())
        if self.colors.background is not None:
            parts.append(SetBackgroundColor(self.colors.background).write_ansi())
        return "".join(parts)


@dataclass(frozen=True)
class SetAttribute(Command):
    """Set one attribute."""

    attribute: Attribute

    def write_ansi(self) -> str:
        return csi(self.attribute.sgr(), "m")


@dataclass(frozen=True)
class SetAttributes(Command):
    """Set every attribute in the set, in declaration order."""

    attributes: Attributes

    def write_ansi(self) -> str:
        return "".join(
            SetAttribute(attr).write_ansi()
            for attr in Attribute
            if self.attributes.has(attr)
        )


@dataclass(frozen=True)
class PrintStyledContent(Command):
    """Print styled content, then undo its style."""

    styled: StyledContent

    def write_ansi(self) -> str:
        content_style = self.styled.style
        parts = []
        bg = content_style.background_color
        fg = content_style.foreground_color
        if bg is not None:
            parts.append(SetBackgroundColor(bg).write_ansi())
        if fg is not None:
            parts.append(SetForegroundColor(fg).write_ansi())
        has_attributes = not content_style.attributes.is_empty()
        if has_attributes:
            parts.append(SetAttributes(content_style.attributes).write_ansi())

        parts.append(str(self.styled.content))

        if has_attributes:
            # A full reset also clears the colors.
            parts.append(ResetColor().write_ansi())
        else:
            if bg is not None:
                parts.append(SetBackgroundColor(Color.RESET).write_ansi())
            if fg is not None:
                parts.append(SetForegroundColor(Color.RESET).write_ansi())
        return "".join(parts)


@dataclass(frozen=True)
class ResetColor(Command):
    """Reset colors and attributes to the terminal's defaults."""

    def write_ansi(self) -> str:
        return csi("0m")


@dataclass(frozen=True)
class Print(Command):
    """Print the given value as text."""

    value: Any

    def write_ansi(self) -> str:
        return str(self.value)