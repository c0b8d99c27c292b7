"""
    termcursor.cursor
    ~~~~~~~~~~~~~~~~~

    This module provides :class:`Cursor`, which turns cursor movements,
    erasures and text attributes into escape sequences written to a
    stream.

    A cursor is *enabled* when the stream is an interactive terminal
    (or when told so): a disabled cursor swallows every escape sequence
    but still lets plain text through :meth:`Cursor.write`. In
    *buffering* mode writes are kept in memory until :meth:`Cursor.flush`.

    :copyright: (c) 2022-... by termcursor authors and contributors,
                    see AUTHORS for details.
    :license: LGPL, see LICENSE for more details.
"""

import enum
import logging
import math
import re

from wcwidth import wcwidth

from . import escape as esc
from .colorer import Colorer
from .events import EventEmitter
from .exceptions import BufferStateError, InvalidStreamError, UnknownTypeError
from .newline import NewlineStream, isatty


logger = logging.getLogger(__name__)

# Sequences written by this module, stripped before measuring text.
_ESCAPES = re.compile(r"\x1b(?:\[[0-?]*[ -/]*[@-~]|[78])|\x07")


def to_axis(value):
    """Normalizes a movement argument to an integer.

    Missing, NaN, infinite and non-numeric values count as ``1``; any
    other value is floored, so ``-3.7`` becomes ``-4``.

    >>> to_axis(None), to_axis(float("nan")), to_axis(3.7), to_axis(-3.7)
    (1, 1, 3, -4)
    """
    if value is None:
        return 1
    try:
        value = float(value)
    except (TypeError, ValueError):
        return 1
    if not math.isfinite(value):
        return 1
    return math.floor(value)


def text_width(text):
    """Returns the number of columns ``text`` takes once printed."""
    return sum(max(wcwidth(char), 0) for char in _ESCAPES.sub("", text))


class EraseKind(enum.Enum):
    RIGHT = "right"
    LEFT = "left"
    LINE = "line"
    UP = "up"
    DOWN = "down"
    SCREEN = "screen"
    CHARS = "chars"

    @classmethod
    def parse(cls, value):
        """Resolves ``"$"``, ``"^"`` or an erase name to a member.

        :raises UnknownTypeError: if ``value`` is empty or unknown.
        """
        if isinstance(value, cls):
            return value
        if value == "$":
            return cls.RIGHT
        if value == "^":
            return cls.LEFT
        if value and isinstance(value, str):
            try:
                return cls(value[:1].lower() + value[1:])
            except ValueError:
                pass
        raise UnknownTypeError("Unknown erase type: {0}".format(value))


class DeleteKind(enum.Enum):
    LINE = "line"
    CHAR = "char"

    @classmethod
    def parse(cls, value):
        if isinstance(value, cls):
            return value
        if value and isinstance(value, str):
            try:
                return cls(value[:1].lower() + value[1:])
            except ValueError:
                pass
        raise UnknownTypeError("Unknown delete type: {0}".format(value))


class Cursor(EventEmitter):
    """Writes escape sequences to a stream.

    :param stream: anything with a ``write`` method, usually
                   :data:`sys.stdout`.
    :param bool enabled: whether escape sequences are written at all;
                         when ``None`` it is ``stream.isatty()``.
    :param bool buffering: start in buffering mode.

    All the methods return the cursor itself, so calls can be chained:

    >>> import io
    >>> out = io.StringIO()
    >>> _ = Cursor(out, enabled=True).move_up(2).forward().write("x")
    >>> out.getvalue()
    '\\x1b[2A\\x1b[Cx'

    Events:

    * ``error`` -- an :class:`~termcursor.exceptions.UnknownTypeError`
      for an erase, delete or insert type that is not known.
    """

    def __init__(self, stream, enabled=None, buffering=False):
        super().__init__()
        if not callable(getattr(stream, "write", None)):
            raise InvalidStreamError(
                "A valid stream, with a write() method, must be passed in.")

        self.stream = NewlineStream.wrap(stream)

        if enabled is None:
            enabled = isatty(self.stream)
        self.enabled = bool(enabled)

        self.buffering = bool(buffering)
        self._buffer = []

        self.bold = False
        self.italic = False
        self.inverse = False
        self.underline = False

        self.newlines = 0
        self.column = 0
        self.stream.on("newline", self._on_newline)

        self.fg = Colorer(self, esc.FG)
        self.bg = Colorer(self, esc.BG)

        logger.debug("Cursor created (enabled=%s, buffering=%s)",
                     self.enabled, self.buffering)

    def __repr__(self):
        return "{0}(enabled={1}, buffering={2}, newlines={3})".format(
            self.__class__.__name__, self.enabled, self.buffering,
            self.newlines)

    def _on_newline(self):
        self.newlines += 1

    def enable(self):
        self.enabled = True
        logger.debug("Cursor enabled")
        return self

    def disable(self):
        self.enabled = False
        logger.debug("Cursor disabled")
        return self

    # Writing.
    # --------

    def write(self, data, *args):
        """Writes ``data`` to the stream, or to the buffer when
        buffering. This is never gated by :attr:`enabled`.

        Extra arguments are passed along to ``stream.write``, but
        cannot be used while buffering (see :meth:`flush`).
        """
        if self.buffering:
            self._buffer.append((data, ) + args)
        else:
            self.stream.write(data, *args)
            self.stream.emit("data", data)
            self._advance(data)

        return self

    def _write(self, data):
        if self.enabled:
            self.write(data)

        return self

    def _advance(self, data):
        if isinstance(data, (bytes, bytearray)):
            data = data.decode("utf-8", "replace")

        line = re.split(r"[\r\n]", data)[-1]
        if len(line) == len(data):
            self.column += text_width(line)
        else:
            self.column = text_width(line)

    def buffer(self):
        """Keeps the following writes in memory until :meth:`flush`."""
        self.buffering = True
        return self

    def flush(self):
        """Leaves buffering mode and writes the whole buffer at once.

        The buffer is emptied even when this raises.

        :raises BufferStateError: if a buffered write was made with
                                  more than one argument.
        """
        self.buffering = False
        entries, self._buffer = self._buffer, []

        payloads = []
        for args in entries:
            if len(args) != 1:
                raise BufferStateError(
                    "Unexpected args length: {0}".format(len(args)))
            payloads.append(args[0])

        if payloads and all(isinstance(p, (bytes, bytearray))
                            for p in payloads):
            output = b"".join(payloads)
        else:
            output = "".join(payloads)

        logger.debug("Flushing %d buffered writes", len(payloads))
        return self.write(output)

    # Movements.
    # ----------

    def _movement(self, code, *args):
        if args:
            code = ";".join(str(to_axis(arg)) for arg in args) + code

        return self._write(esc.PREFIX + code)

    def move_up(self, *args):
        """Moves the cursor up the given # of lines (default ``1``)."""
        return self._movement(esc.MOVEMENTS["move_up"], *args)

    def move_down(self, *args):
        """Moves the cursor down the given # of lines (default ``1``)."""
        return self._movement(esc.MOVEMENTS["move_down"], *args)

    def forward(self, *args):
        """Moves the cursor right the given # of columns."""
        return self._movement(esc.MOVEMENTS["forward"], *args)

    def backward(self, *args):
        """Moves the cursor left the given # of columns."""
        return self._movement(esc.MOVEMENTS["backward"], *args)

    def next_line(self, *args):
        return self._movement(esc.MOVEMENTS["next_line"], *args)

    def previous_line(self, *args):
        return self._movement(esc.MOVEMENTS["previous_line"], *args)

    def horizontal_absolute(self, *args):
        """Moves the cursor to the given column of the current line."""
        return self._movement(esc.MOVEMENTS["horizontal_absolute"], *args)

    def goto(self, *args):
        """Moves the cursor to ``row, column``, origin at ``1, 1``.

        :param args: row and column; missing ones default to ``1``.
        """
        return self._movement(esc.MOVEMENTS["goto"], *args)

    def erase_chars(self, *args):
        return self._movement(esc.MOVEMENTS["erase_chars"], *args)

    def delete_line(self, *args):
        return self._movement(esc.MOVEMENTS["delete_line"], *args)

    def delete_char(self, *args):
        return self._movement(esc.MOVEMENTS["delete_char"], *args)

    def scroll_up(self, *args):
        return self._movement(esc.MOVEMENTS["scroll_up"], *args)

    def scroll_down(self, *args):
        return self._movement(esc.MOVEMENTS["scroll_down"], *args)

    # Actions.
    # --------

    def _action(self, code):
        return self._write(esc.PREFIX + code)

    def erase_right(self):
        """Erases from the cursor to the end of line."""
        return self._action(esc.ACTIONS["erase_right"])

    def erase_left(self):
        """Erases from the beginning of line to the cursor."""
        return self._action(esc.ACTIONS["erase_left"])

    def erase_line(self):
        return self._action(esc.ACTIONS["erase_line"])

    def erase_down(self):
        return self._action(esc.ACTIONS["erase_down"])

    def erase_up(self):
        return self._action(esc.ACTIONS["erase_up"])

    def erase_screen(self):
        return self._action(esc.ACTIONS["erase_screen"])

    def hide(self):
        return self._action(esc.ACTIONS["hide"])

    def show(self):
        return self._action(esc.ACTIONS["show"])

    def _attribute(self, name, state):
        setattr(self, name, state)
        return self._action(esc.ACTIONS[name if state else "reset_" + name])

    def reset(self):
        """Resets all the text attributes and colors."""
        self.bold = self.italic = self.inverse = self.underline = False
        self.fg.current = self.bg.current = None
        return self._action(esc.ACTIONS["reset"])

    # ``bold`` & co are the advisory state flags, the methods which
    # toggle them live under different names.
    def set_bold(self):
        return self._attribute("bold", True)

    def set_italic(self):
        return self._attribute("italic", True)

    def set_underline(self):
        return self._attribute("underline", True)

    def set_inverse(self):
        return self._attribute("inverse", True)

    def reset_bold(self):
        return self._attribute("bold", False)

    def reset_italic(self):
        return self._attribute("italic", False)

    def reset_underline(self):
        return self._attribute("underline", False)

    def reset_inverse(self):
        return self._attribute("inverse", False)

    # Compound operations.
    # --------------------

    def move(self, x=0, y=0):
        """Moves the cursor relative to its current position.

        :param x: columns, positive to the right.
        :param y: lines, positive downwards.
        """
        if y < 0:
            self.move_up(-y)
        elif y > 0:
            self.move_down(y)

        if x > 0:
            self.forward(x)
        elif x < 0:
            self.backward(-x)

        return self

    def beep(self):
        return self._write(esc.BEEP)

    def erase(self, type):
        """Erases a part of the line or screen.

        :param type: ``"$"`` (to the end of line), ``"^"`` (to the
                     beginning of line), or one of the
                     :class:`EraseKind` names: ``"right"``, ``"left"``,
                     ``"line"``, ``"up"``, ``"down"``, ``"screen"``,
                     ``"chars"``.

        An unknown ``type`` is reported via the ``error`` event.
        """
        try:
            kind = EraseKind.parse(type)
        except UnknownTypeError as exc:
            self.emit("error", exc)
            return self

        handlers = {
            EraseKind.RIGHT: self.erase_right,
            EraseKind.LEFT: self.erase_left,
            EraseKind.LINE: self.erase_line,
            EraseKind.UP: self.erase_up,
            EraseKind.DOWN: self.erase_down,
            EraseKind.SCREEN: self.erase_screen,
            EraseKind.CHARS: self.erase_chars,
        }
        return handlers[kind]()

    def delete(self, type, n=None):
        """Deletes ``n`` lines or characters.

        :param type: ``"line"`` or ``"char"``.
        :param n: how many, ``1`` by default.
        """
        try:
            kind = DeleteKind.parse(type)
        except UnknownTypeError as exc:
            self.emit("error", exc)
            return self

        if kind is DeleteKind.LINE:
            return self.delete_line(n)
        return self.delete_char(n)

    def insert(self, mode, n=None):
        """Switches insert mode, or inserts blank lines or characters.

        :param mode: ``True`` or ``False`` to turn insert mode on or
                     off, ``"line"`` or ``"char"`` to insert ``n``
                     blank lines or characters.
        :param n: how many, ``1`` by default.
        """
        n = to_axis(n) if n else 1

        if mode is True:
            return self._write(esc.PREFIX + esc.INSERT_MODE_ON)
        elif mode is False:
            return self._write(esc.PREFIX + esc.INSERT_MODE_OFF)
        elif mode == "line":
            return self._write(esc.PREFIX + str(n) + esc.INSERT_LINE)
        elif mode == "char":
            return self._write(esc.PREFIX + str(n) + esc.INSERT_CHAR)

        self.emit("error",
                  UnknownTypeError("Unknown insert type: {0}".format(mode)))
        return self

    def save(self, with_attributes=False):
        """Saves the cursor position, and the text attributes as well
        when ``with_attributes`` is true.
        """
        if self.enabled:
            self.write(esc.SAVE_CURSOR if with_attributes
                       else esc.SAVE_POSITION)
        return self

    def restore(self, with_attributes=False):
        """Restores what :meth:`save` saved."""
        if self.enabled:
            self.write(esc.RESTORE_CURSOR if with_attributes
                       else esc.RESTORE_POSITION)
        return self
