"""ANSI terminal commands: text styling, colors, screen control and raw mode."""

__version__ = "0.1.0"
__all__ = ["attributes", "color", "colors", "command", "style", "terminal", "tty"]