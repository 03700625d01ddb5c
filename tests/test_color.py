import pytest

from ansiterm.color import Color, Colored, Layer


NAMED = [
    ("grey", Color.GREY),
    ("dark_grey", Color.DARK_GREY),
    ("red", Color.RED),
    ("dark_red", Color.DARK_RED),
    ("green", Color.GREEN),
    ("dark_green", Color.DARK_GREEN),
    ("yellow", Color.YELLOW),
    ("dark_yellow", Color.DARK_YELLOW),
    ("blue", Color.BLUE),
    ("dark_blue", Color.DARK_BLUE),
    ("magenta", Color.MAGENTA),
    ("dark_magenta", Color.DARK_MAGENTA),
    ("cyan", Color.CYAN),
    ("dark_cyan", Color.DARK_CYAN),
    ("white", Color.WHITE),
    ("black", Color.BLACK),
]


@pytest.mark.parametrize("name, expected", NAMED)
def test_known_color_conversion(name, expected):
    assert Color.from_str(name) == expected


def test_unknown_color_conversion_yields_white():
    assert Color.from_str("foo") == Color.WHITE


def test_from_name_rejects_unknown():
    with pytest.raises(ValueError):
        Color.from_name("foo")


def test_know_rgb_color_conversion():
    assert Color.rgb(*(0, 0, 0)) == Color("rgb", (0, 0, 0))
    assert Color.rgb(*(255, 255, 255)) == Color("rgb", (255, 255, 255))


def test_rgb_out_of_range():
    with pytest.raises(ValueError):
        Color.rgb(256, 0, 0)
    with pytest.raises(ValueError):
        Color.ansi_value(-1)


def test_color_parse_ansi_examples():
    assert Color.parse_ansi("5;0") == Color.BLACK
    assert Color.parse_ansi("5;26") == Color.ansi_value(26)
    assert Color.parse_ansi("2;50;60;70") == Color.rgb(50, 60, 70)
    assert Color.parse_ansi("invalid color") is None


# Configuration (de)serialisation.

@pytest.mark.parametrize(
    "text, expected",
    [("Red", Color.RED), ("red", Color.RED)] + NAMED,
)
def test_deserial_known_color_conversion(text, expected):
    assert Color.from_config_str(text) == expected


def test_deserial_unknown_color_conversion():
    with pytest.raises(ValueError):
        Color.from_config_str("unknown")


def test_deserial_ansi_value():
    assert Color.from_config_str("ansi_(255)") == Color.ansi_value(255)


@pytest.mark.parametrize("text", ["ansi_(256)", "ansi_(-1)"])
def test_deserial_unvalid_ansi_value(text):
    with pytest.raises(ValueError):
        Color.from_config_str(text)


def test_deserial_rgb():
    assert Color.from_config_str("rgb_(255,255,255)") == Color.rgb(255, 255, 255)


@pytest.mark.parametrize("text", ["rgb_(255,255,255,255)", "rgb_(256,255,255)"])
def test_deserial_unvalid_rgb(text):
    with pytest.raises(ValueError):
        Color.from_config_str(text)


def test_config_str_round_trip():
    for color in [c for _, c in NAMED] + [Color.ansi_value(42), Color.rgb(1, 2, 3)]:
        assert Color.from_config_str(color.to_config_str()) == color
    assert Color.rgb(1, 2, 3).to_config_str() == "rgb_(1,2,3)"
    assert Color.ansi_value(42).to_config_str() == "ansi_(42)"


def test_reset_cannot_be_serialized():
    with pytest.raises(ValueError):
        Color.RESET.to_config_str()


# Colored formatting.

def test_format_fg_color():
    assert str(Colored.foreground(Color.RED)) == "38;5;9"


def test_format_bg_color():
    assert str(Colored.background(Color.RED)) == "48;5;9"


def test_format_reset_fg_color():
    assert str(Colored.foreground(Color.RESET)) == "39"


def test_format_reset_bg_color():
    assert str(Colored.background(Color.RESET)) == "49"


def test_format_fg_rgb_color():
    assert str(Colored.background(Color.rgb(1, 2, 3))) == "48;2;1;2;3"


def test_format_fg_ansi_color():
    assert str(Colored.foreground(Color.ansi_value(255))) == "38;5;255"


def test_colored_layer():
    assert Colored.background(Color.BLUE).layer is Layer.BACKGROUND
    assert Colored.foreground(Color.BLUE).layer is Layer.FOREGROUND


def test_colored_parse_ansi_examples():
    assert Colored.parse_ansi("38;5;0") == Colored.foreground(Color.BLACK)
    assert Colored.parse_ansi("38;5;26") == Colored.foreground(Color.ansi_value(26))
    assert Colored.parse_ansi("48;2;50;60;70") == Colored.background(
        Color.rgb(50, 60, 70)
    )
    assert Colored.parse_ansi("49") == Colored.background(Color.RESET)
    assert Colored.parse_ansi("invalid color") is None


@pytest.mark.parametrize("make", [Colored.foreground, Colored.background])
def test_parse_ansi_round_trip(make):
    def check(color):
        colored = make(color)
        assert Colored.parse_ansi(str(colored)) == colored

    check(Color.RESET)
    for _, color in NAMED:
        check(color)
    for n in range(16, 256):
        check(Color.ansi_value(n))
    for r in range(256):
        for g in (0, 2, 18, 19, 60, 100, 200, 250, 254, 255):
            for b in (0, 12, 16, 99, 100, 161, 200, 255):
                check(Color.rgb(r, g, b))


@pytest.mark.parametrize(
    "text",
    [
        "", ";", ";;", ";;", "0", "1", "12", "100", "100048949345",
        "39;", "49;", "39;2", "49;2",
        "38", "38;", "38;0", "38;5", "38;5;0;", "38;5;0;2", "38;5;80;",
        "38;5;80;2", "38;5;257", "38;2", "38;2;", "38;2;0", "38;2;0;2",
        "38;2;0;2;257", "38;2;0;2;25;", "38;2;0;2;25;3",
        "48", "48;", "48;0", "48;5", "48;5;0;", "48;5;0;2", "48;5;80;",
        "48;5;80;2", "48;5;257", "48;2", "48;2;", "48;2;0", "48;2;0;2",
        "48;2;0;2;257", "48;2;0;2;25;", "48;2;0;2;25;3",
    ],
)
def test_parse_invalid_ansi_color(text):
    assert Colored.parse_ansi(text) is None


def test_repr_of_colors():
    assert repr(Color.DARK_RED) == "Color.DARK_RED"
    assert repr(Color.rgb(1, 2, 3)) == "Color.rgb(1, 2, 3)"
    assert repr(Color.ansi_value(7)) == "Color.ansi_value(7)"