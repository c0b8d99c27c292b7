"""
    termcursor
    ~~~~~~~~~~

    `termcursor` writes ANSI escape sequences to a stream: cursor
    movements, erasures, insert mode, text attributes and colors.

    One class: :class:`~termcursor.cursor.Cursor`, which wraps a stream,
    tracks the newlines written through it and gates every escape
    sequence on whether the stream is an interactive terminal.

    :copyright: (c) 2022-... by termcursor authors and contributors,
                    see AUTHORS for details.
    :license: LGPL, see LICENSE for more details.
"""

__all__ = (
    "Cursor", "Colorer", "EraseKind", "DeleteKind", "NewlineStream",
    "InvalidStreamError", "BufferStateError", "UnknownTypeError",
    "to_axis", "isatty"
)

import io

from .colorer import Colorer
from .cursor import Cursor, DeleteKind, EraseKind, to_axis
from .exceptions import BufferStateError, InvalidStreamError, UnknownTypeError
from .newline import NewlineStream, isatty

from .version import __version__


def dis(callback):
    r"""A :func:`dis.dis` for cursors: prints every write ``callback``
    makes on an enabled cursor.

    >>> from termcursor import dis
    >>> dis(lambda cursor: cursor.move(2, -1))
    '\x1b[1A'
    '\x1b[2C'

    >>> dis(lambda cursor: cursor.erase("bogus"))
    error: Unknown erase type: bogus
    """
    with io.StringIO() as buf:
        cursor = Cursor(buf, enabled=True)
        cursor.stream.on("data", lambda data: print(repr(data)))
        cursor.on("error", lambda exc: print("error:", exc))
        callback(cursor)
