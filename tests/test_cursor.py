import io
import os.path, sys

import pytest

from termcursor import Cursor, InvalidStreamError, NewlineStream


sys.path.append(os.path.join(os.path.dirname(__file__), "helpers"))
from fakes import FakeStream, Recorder

CSI = "\x1b["


@pytest.mark.parametrize("stream", [None, 42, "stdout", object()])
def test_invalid_stream(stream):
    with pytest.raises(InvalidStreamError):
        Cursor(stream)


def test_invalid_stream_is_type_error():
    with pytest.raises(TypeError):
        Cursor(object())


@pytest.mark.parametrize("tty", [True, False])
def test_enabled_defaults_to_isatty(tty):
    assert Cursor(FakeStream(tty=tty)).enabled is tty


def test_enabled_without_isatty():
    class Sink:
        def write(self, data):
            pass

    assert Cursor(Sink()).enabled is False


@pytest.mark.parametrize("tty", [True, False])
def test_enabled_overrides_isatty(tty):
    assert Cursor(FakeStream(tty=tty), enabled=not tty).enabled is not tty


def test_initial_state():
    cursor = Cursor(FakeStream(), buffering=True)
    assert cursor.buffering
    assert not cursor.bold
    assert not cursor.italic
    assert not cursor.inverse
    assert not cursor.underline
    assert cursor.newlines == 0
    assert isinstance(cursor.stream, NewlineStream)


def test_enable_disable_chain():
    cursor = Cursor(FakeStream(), enabled=False)
    assert cursor.enable() is cursor
    assert cursor.enabled
    assert cursor.disable() is cursor
    assert not cursor.enabled


def test_write_passes_through_and_emits_data():
    stream = FakeStream()
    cursor = Cursor(stream, enabled=False)
    data = Recorder()
    cursor.stream.on("data", data)

    assert cursor.write("hello", "utf-8") is cursor
    assert stream.writes == [("hello", "utf-8")]
    assert data.calls == [("hello", )]


@pytest.mark.parametrize("name, args, expected", [
    ("move_up", (), "A"),
    ("move_up", (3, ), "3A"),
    ("move_down", (2, ), "2B"),
    ("forward", (), "C"),
    ("forward", (4.9, ), "4C"),
    ("backward", (None, ), "1D"),
    ("next_line", (1, ), "1E"),
    ("previous_line", (2, ), "2F"),
    ("horizontal_absolute", (10, ), "10G"),
    ("goto", (5, 12), "5;12H"),
    ("goto", (None, float("nan")), "1;1H"),
    ("erase_chars", (3, ), "3X"),
    ("delete_line", (2, ), "2M"),
    ("delete_char", (), "P"),
    ("scroll_up", (1, ), "1S"),
    ("scroll_down", (1, ), "1T"),
])
def test_movements(name, args, expected):
    stream = FakeStream()
    cursor = Cursor(stream, enabled=True)

    assert getattr(cursor, name)(*args) is cursor
    assert stream.payloads == [CSI + expected]


@pytest.mark.parametrize("name, expected", [
    ("erase_right", "K"),
    ("erase_left", "1K"),
    ("erase_line", "2K"),
    ("erase_down", "J"),
    ("erase_up", "1J"),
    ("erase_screen", "2J"),
    ("hide", "?25l"),
    ("show", "?25h"),
    ("reset", "0m"),
    ("set_bold", "1m"),
    ("set_italic", "3m"),
    ("set_underline", "4m"),
    ("set_inverse", "7m"),
    ("reset_bold", "22m"),
    ("reset_italic", "23m"),
    ("reset_underline", "24m"),
    ("reset_inverse", "27m"),
])
def test_actions(name, expected):
    stream = FakeStream()
    cursor = Cursor(stream, enabled=True)

    assert getattr(cursor, name)() is cursor
    assert stream.payloads == [CSI + expected]


def test_disabled_cursor_writes_no_escapes():
    stream = FakeStream(tty=True)
    cursor = Cursor(stream, enabled=False)

    (cursor.move_up(2).goto(1, 1).erase_screen().hide().set_bold()
           .beep().move(3, 4).erase("$").delete("line", 2)
           .insert(True).insert("char", 2).save().restore(True))
    cursor.fg.red()
    cursor.bg.hex("#fff")

    assert stream.writes == []

    cursor.write("plain")
    assert stream.payloads == ["plain"]


def test_attribute_flags():
    cursor = Cursor(FakeStream(), enabled=True)

    cursor.set_bold().set_italic().set_underline().set_inverse()
    assert cursor.bold and cursor.italic
    assert cursor.underline and cursor.inverse

    cursor.reset_italic()
    assert cursor.bold and not cursor.italic

    cursor.reset()
    assert not (cursor.bold or cursor.italic
                or cursor.underline or cursor.inverse)


def test_beep():
    stream = FakeStream()
    Cursor(stream, enabled=True).beep()
    assert stream.payloads == ["\x07"]


@pytest.mark.parametrize("x, y, expected", [
    (3, -2, [CSI + "2A", CSI + "3C"]),
    (-1, 4, [CSI + "4B", CSI + "1D"]),
    (0, -1, [CSI + "1A"]),
    (2, 0, [CSI + "2C"]),
    (0, 0, []),
])
def test_move(x, y, expected):
    stream = FakeStream()
    cursor = Cursor(stream, enabled=True)

    assert cursor.move(x, y) is cursor
    assert stream.payloads == expected


def test_save_restore():
    stream = FakeStream()
    cursor = Cursor(stream, enabled=True)

    cursor.save().restore().save(True).restore(True)
    assert stream.payloads == [
        CSI + "s", CSI + "u", "\x1b7", "\x1b8"
    ]


def test_save_restore_are_buffered():
    # save/restore go through write(), hence the buffer, like the rest.
    stream = FakeStream()
    cursor = Cursor(stream, enabled=True)

    cursor.buffer().save().move_up(1).restore()
    assert stream.writes == []

    cursor.flush()
    assert stream.payloads == [CSI + "s" + CSI + "1A" + CSI + "u"]


def test_newlines_counted():
    stream = FakeStream()
    cursor = Cursor(stream, enabled=False)

    cursor.write("one\ntwo\n\n")
    assert cursor.newlines == 3

    cursor.write("no newline")
    assert cursor.newlines == 3

    cursor.write(b"bytes\n")
    assert cursor.newlines == 4


def test_newlines_counted_on_flush():
    cursor = Cursor(FakeStream())

    cursor.buffer().write("a\n").write("b\n")
    assert cursor.newlines == 0

    cursor.flush()
    assert cursor.newlines == 2


def test_cursors_share_stream():
    stream = FakeStream()
    first = Cursor(stream)
    second = Cursor(first.stream)

    assert second.stream is first.stream
    second.write("\n")
    assert first.newlines == second.newlines == 1


@pytest.mark.parametrize("writes, expected", [
    (["abc"], 3),
    (["abc", "de"], 5),
    (["abc\nxy"], 2),
    (["abc\r"], 0),
    (["\x1b[1mbold\x1b[0m"], 4),
    (["中文"], 4),
])
def test_column(writes, expected):
    cursor = Cursor(FakeStream())
    for data in writes:
        cursor.write(data)

    assert cursor.column == expected


def test_column_with_real_stream():
    buf = io.StringIO()
    cursor = Cursor(buf, enabled=True)

    cursor.write("12345").backward(2).erase_right()
    assert cursor.column == 5
    assert buf.getvalue() == "12345" + CSI + "2D" + CSI + "K"


@pytest.mark.parametrize("args, expected", [
    ((3, ), [CSI + "3C"]),
    ((-2, ), [CSI + "2D"]),
    ((), []),
])
def test_move_defaults_to_zero(args, expected):
    stream = FakeStream()
    cursor = Cursor(stream, enabled=True)

    assert cursor.move(*args) is cursor
    assert stream.payloads == expected
