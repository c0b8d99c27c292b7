"""
    termcursor.newline
    ~~~~~~~~~~~~~~~~~~

    Wraps a writable stream so that every newline written through it
    is announced with a ``newline`` event.

    :copyright: (c) 2022-... by termcursor authors and contributors,
                    see AUTHORS for details.
    :license: LGPL, see LICENSE for more details.
"""

from .events import EventEmitter


def isatty(stream):
    """Returns ``True`` if ``stream`` says it is an interactive terminal."""
    probe = getattr(stream, "isatty", None)
    if not callable(probe):
        return False
    return bool(probe())


class NewlineStream(EventEmitter):
    """Forwards writes to ``stream`` and emits ``newline`` once per
    ``"\\n"`` found in each written payload.

    >>> import io
    >>> stream = NewlineStream(io.StringIO())
    >>> seen = []
    >>> _ = stream.on("newline", lambda: seen.append(1))
    >>> _ = stream.write("a\\nb\\n")
    >>> len(seen)
    2
    """

    def __init__(self, stream):
        super().__init__()
        self.stream = stream

    @classmethod
    def wrap(cls, stream):
        if isinstance(stream, cls):
            return stream
        return cls(stream)

    def write(self, data, *args):
        result = self.stream.write(data, *args)

        newline = b"\n" if isinstance(data, (bytes, bytearray)) else "\n"
        for _ in range(data.count(newline)):
            self.emit("newline")

        return result

    def flush(self):
        flush = getattr(self.stream, "flush", None)
        if callable(flush):
            flush()

    def isatty(self):
        return isatty(self.stream)
