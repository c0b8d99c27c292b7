"""
    termcursor.colorer
    ~~~~~~~~~~~~~~~~~~

    Foreground and background colors, reachable as ``cursor.fg`` and
    ``cursor.bg``::

        cursor.fg.red().write("error").fg.reset()
        cursor.bg.hex("#1e90ff")

    :copyright: (c) 2022-... by termcursor authors and contributors,
                    see AUTHORS for details.
    :license: LGPL, see LICENSE for more details.
"""

import re

from . import escape as esc


_HEX = re.compile(r"^#?([0-9a-f]{3}|[0-9a-f]{6})$", re.IGNORECASE)


def rgb5(r, g, b):
    """Maps a 24-bit color to the 6x6x6 cube of the 256 color palette."""
    def scale(channel):
        return int(round(channel / 255.0 * 5))

    return 16 + scale(r) * 36 + scale(g) * 6 + scale(b)


def parse_hex(color):
    """Returns the ``(r, g, b)`` triple of ``"#rrggbb"`` or ``"#rgb"``.

    :raises ValueError: if ``color`` is not a hex color.
    """
    match = _HEX.match(color)
    if match is None:
        raise ValueError("Invalid hex color: {0!r}".format(color))

    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(digit * 2 for digit in digits)

    return tuple(int(digits[i:i + 2], 16) for i in (0, 2, 4))


class Colorer:
    """Sets colors relative to ``base``, :data:`~termcursor.escape.FG`
    or :data:`~termcursor.escape.BG`.

    The last written code is remembered in :attr:`current`, setting the
    same color twice in a row writes nothing the second time.
    """

    def __init__(self, cursor, base):
        self.cursor = cursor
        self.base = base
        self.current = None

    def _set(self, code):
        code = str(code)
        if code == self.current:
            return self.cursor

        self.cursor._write(esc.PREFIX + code + esc.SGR)
        if self.cursor.enabled:
            self.current = code
        return self.cursor

    def color(self, name, bright=False):
        """Sets one of the eight named colors.

        :param str name: a key of :data:`~termcursor.escape.COLORS`.
        :param bool bright: use the bright variant.
        """
        code = self.base + esc.COLORS[name]
        if bright:
            code += esc.BRIGHT
        return self._set(code)

    def black(self):
        return self.color("black")

    def red(self):
        return self.color("red")

    def green(self):
        return self.color("green")

    def yellow(self):
        return self.color("yellow")

    def blue(self):
        return self.color("blue")

    def magenta(self):
        return self.color("magenta")

    def cyan(self):
        return self.color("cyan")

    def white(self):
        return self.color("white")

    def bright_black(self):
        return self.color("black", bright=True)

    grey = gray = bright_black

    def bright_red(self):
        return self.color("red", bright=True)

    def bright_green(self):
        return self.color("green", bright=True)

    def bright_yellow(self):
        return self.color("yellow", bright=True)

    def bright_blue(self):
        return self.color("blue", bright=True)

    def bright_magenta(self):
        return self.color("magenta", bright=True)

    def bright_cyan(self):
        return self.color("cyan", bright=True)

    def bright_white(self):
        return self.color("white", bright=True)

    def reset(self):
        """Goes back to the terminal's default color."""
        return self._set(self.base + esc.DEFAULT)

    def rgb(self, r, g, b):
        """Sets the closest of the 256 palette colors."""
        return self._set("{0};5;{1}".format(self.base + esc.EXTENDED,
                                            rgb5(r, g, b)))

    def hex(self, color):
        return self.rgb(*parse_hex(color))
