"""
    termcursor.exceptions
    ~~~~~~~~~~~~~~~~~~~~~

    Errors raised or reported by :class:`~termcursor.cursor.Cursor`.

    :copyright: (c) 2022-... by termcursor authors and contributors,
                    see AUTHORS for details.
    :license: LGPL, see LICENSE for more details.
"""


class InvalidStreamError(TypeError):
    """The object given as a stream has no callable ``write``."""


class BufferStateError(RuntimeError):
    """A buffered write carried other than exactly one payload, so the
    buffer cannot be joined on :meth:`~termcursor.cursor.Cursor.flush`.
    """


class UnknownTypeError(ValueError):
    """Reported through the ``error`` event for an erase, delete or
    insert type the cursor does not know about.
    """
