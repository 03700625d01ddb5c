# ansiterm

A library that writes ANSI escape sequences to text or binary streams. You can use it to style and color text, clear and scroll the screen, switch to the alternate screen, set the window title and size, and turn raw mode on or off.

## Commands

A command is an object whose `write_ansi()` method returns its ANSI sequence. `str(command)` returns the same text.

- `ansiterm.command.queue(writer, *commands)` writes the commands in order and does not flush. It returns the writer.
- `ansiterm.command.execute(writer, *commands)` does the same and then flushes the writer.

Both functions accept text streams and binary streams. For a binary stream they encode the text as UTF-8. If an argument is not a `Command`, they raise `TypeError`.

```python
import sys

from ansiterm.command import execute, queue
from ansiterm.color import Color
from ansiterm.style import SetForegroundColor, Print, ResetColor
from ansiterm.terminal import Clear, ClearType

execute(sys.stdout, Clear(ClearType.ALL))

queue(
    sys.stdout,
    SetForegroundColor(Color.BLUE),
    Print("Blue text"),
    ResetColor(),
)
sys.stdout.flush()
```

`ansiterm.command.csi(*parts)` builds a control sequence, which is `ESC [` followed by the parts.

## Styling text

`ansiterm.style.style(value)` wraps a value in a `StyledContent`. The `Stylize` methods return a new styled copy and leave the original unchanged:

- `with_(color)` and `on(color)` set the foreground and background color.
- `attribute(attr)` adds an attribute.
- `red()`, `on_blue()`, `bold()`, `underlined()`, `italic()` and the other shortcut methods set the matching color or attribute.

Calling `str()` on styled content does three things in order:

1. It sets the colors and attributes.
2. It prints the content.
3. It resets the style.

```python
from ansiterm.style import style, ContentStyle
from ansiterm.color import Color
from ansiterm.attributes import Attribute

print(style("Red on blue").red().on_blue())
print(style("Bold").bold())
print(style("Custom").with_(Color.rgb(50, 60, 70)).attribute(Attribute.UNDERLINED))

warning = ContentStyle().yellow().bold()
print(warning.apply("careful"))
```

The style module provides these commands:

| Command | What it does |
| :-- | :-- |
| `SetForegroundColor` | Sets the foreground color. |
| `SetBackgroundColor` | Sets the background color. |
| `SetColors` | Takes a `Colors` value and sets the colors it holds. |
| `SetAttribute` | Sets one attribute. |
| `SetAttributes` | Takes an `Attributes` set and sets each attribute in it. |
| `PrintStyledContent` | Prints styled content. |
| `ResetColor` | Resets colors and attributes. |
| `Print` | Prints a value as text. |

`available_color_count()` looks at `TERM`. It returns 256 if `TERM` contains `256color`, otherwise 8.

## Colors and attributes

`ansiterm.color.Color` covers these colors:

- the 16 named colors, such as `Color.RED` and `Color.DARK_GREY`
- `Color.RESET`
- `Color.rgb(r, g, b)`
- `Color.ansi_value(n)`

`Colored` pairs a color with a `Layer`, which is foreground or background. It formats as SGR parameters.

```python
from ansiterm.color import Color, Colored

Color.parse_ansi("5;26")          # Color.ansi_value(26)
Colored.parse_ansi("48;2;1;2;3")  # background Color.rgb(1, 2, 3)
str(Colored.foreground(Color.RED))  # "38;5;9"
Color.from_name("Dark_Red")       # Color.DARK_RED; unknown names raise ValueError
Color.from_str("foo")             # unknown names give Color.WHITE
Color.from_config_str("rgb_(1,2,3)")
Color.rgb(1, 2, 3).to_config_str()  # "rgb_(1,2,3)"
```

Other types:

- `ansiterm.colors.Colors` holds an optional foreground and an optional background. `a.then(b)` combines two of them: a color set in `b` replaces the one in `a`, and a color missing from `b` is taken from `a`.
- `ansiterm.attributes.Attribute` lists the SGR text attributes.
- `Attributes` is a set of attributes. It has `set`, `unset`, `toggle`, `has`, `extend`, `is_empty`, membership, iteration, and the `&`, `|` and `^` operators.

## Terminal

`ansiterm.terminal` provides these functions:

- `size()` returns `(columns, rows)`. If the terminal cannot be queried directly, it falls back to `tput`.
- `enable_raw_mode()` turns raw mode on. It needs `termios`.
- `disable_raw_mode()` restores the mode that was in effect before raw mode.
- `is_raw_mode_enabled()` reports whether this module turned raw mode on.

```python
from ansiterm.terminal import size, enable_raw_mode, disable_raw_mode

columns, rows = size()
enable_raw_mode()
try:
    ...
finally:
    disable_raw_mode()
```

It also provides these commands:

- `Clear(ClearType.…)`
- `ScrollUp(n)` and `ScrollDown(n)`, which write nothing when `n` is 0
- `SetSize(columns, rows)`
- `SetTitle(title)`
- `EnterAlternateScreen` and `LeaveAlternateScreen`
- `EnableLineWrap` and `DisableLineWrap`

`ansiterm.tty.is_tty(stream)` tells you whether a stream or file descriptor is a terminal.

## What it does not do

- There are no commands to move, show or hide the cursor.
- The package does not read keyboard or mouse input.
- Every command is written as an ANSI sequence, so consoles that do not understand ANSI are not supported.
- Raw mode needs a platform with `termios`.

## Tests

Install the package with its `test` extra, then run pytest from the project directory.