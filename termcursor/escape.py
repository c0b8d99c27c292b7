"""
    termcursor.escape
    ~~~~~~~~~~~~~~~~~

    This module defines the escape codes written by
    :class:`~termcursor.cursor.Cursor`. CSI sequences are made of
    :data:`PREFIX`, optional ``;``-separated numeric parameters and one
    of the codes below.

    :copyright: (c) 2022-... by termcursor authors and contributors,
                    see AUTHORS for details.
    :license: LGPL, see LICENSE for more details.
"""

#: *Escape*: starts all the escape sequences.
ESC = "\x1b"

#: *Control sequence introducer*: prefix of every CSI sequence.
PREFIX = ESC + "["

#: *Select graphic rendition* final byte, used by colors.
SGR = "m"

#: *Bell*: beeps.
BEEP = "\x07"

#: *Save cursor*: save cursor position and character attributes
#: (DECSC).
SAVE_CURSOR = ESC + "7"

#: *Restore cursor*: restore what :data:`SAVE_CURSOR` saved (DECRC).
RESTORE_CURSOR = ESC + "8"

#: *Save position*: save the cursor position only (SCOSC).
SAVE_POSITION = PREFIX + "s"

#: *Restore position*: restore what :data:`SAVE_POSITION` saved (SCORC).
RESTORE_POSITION = PREFIX + "u"


# Movements.
# ----------
#
# Codes which accept numeric parameters. Several parameters are joined
# with ``;``, so ``goto`` takes ``row;column``.

MOVEMENTS = {
    # *Cursor up* (CUU).
    "move_up": "A",
    # *Cursor down* (CUD).
    "move_down": "B",
    # *Cursor forward* (CUF).
    "forward": "C",
    # *Cursor back* (CUB).
    "backward": "D",
    # *Cursor next line* (CNL).
    "next_line": "E",
    # *Cursor previous line* (CPL).
    "previous_line": "F",
    # *Cursor horizontal align* (CHA).
    "horizontal_absolute": "G",
    # *Cursor position* (CUP), origin at ``1;1``.
    "goto": "H",
    # *Erase character* (ECH).
    "erase_chars": "X",
    # *Delete line* (DL).
    "delete_line": "M",
    # *Delete character* (DCH).
    "delete_char": "P",
    # *Scroll up* (SU).
    "scroll_up": "S",
    # *Scroll down* (SD).
    "scroll_down": "T",
}


# Actions.
# --------
#
# Codes written as-is, without parameters.

ACTIONS = {
    # *Erase in line* from cursor to the end of line.
    "erase_right": "K",
    # *Erase in line* from the beginning of line to cursor.
    "erase_left": "1K",
    # *Erase in line*, complete line.
    "erase_line": "2K",
    # *Erase in display* from cursor to the end of screen.
    "erase_down": "J",
    # *Erase in display* from the beginning of screen to cursor.
    "erase_up": "1J",
    # *Erase in display*, complete screen.
    "erase_screen": "2J",
    # Hide the cursor (DECTCEM reset).
    "hide": "?25l",
    # Show the cursor (DECTCEM set).
    "show": "?25h",
    # Reset all graphic rendition attributes.
    "reset": "0m",
    "bold": "1m",
    "italic": "3m",
    "underline": "4m",
    "inverse": "7m",
    "reset_bold": "22m",
    "reset_italic": "23m",
    "reset_underline": "24m",
    "reset_inverse": "27m",
}

#: *Insert mode on*: set mode 4 (IRM).
INSERT_MODE_ON = "4h"

#: *Insert mode off*.
INSERT_MODE_OFF = "l"

#: *Insert line* (IL).
INSERT_LINE = "L"

#: *Insert character* (ICH).
INSERT_CHAR = "@"


# Colors.
# -------
#
# Offsets from :data:`FG` / :data:`BG`, see :mod:`termcursor.colorer`.

#: Base of the foreground color codes.
FG = 30

#: Base of the background color codes.
BG = 40

#: Offset from the base to the bright variants (``aixterm``).
BRIGHT = 60

#: Offset selecting an extended color, ``;5;N`` for 256 colors.
EXTENDED = 8

#: Offset restoring the default color.
DEFAULT = 9

COLORS = {
    "black": 0,
    "red": 1,
    "green": 2,
    "yellow": 3,
    "blue": 4,
    "magenta": 5,
    "cyan": 6,
    "white": 7,
}
