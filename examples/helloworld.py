"""
    helloworld
    ~~~~~~~~~~

    A minimal working example for :mod:`termcursor`.

    :copyright: (c) 2022-... by termcursor authors and contributors,
                    see AUTHORS for details.
    :license: LGPL, see LICENSE for more details.
"""

import sys

import termcursor


if __name__ == "__main__":
    cursor = termcursor.Cursor(sys.stdout)

    cursor.set_bold().fg.green().write("Hello").reset().write(" World!\n")
    cursor.write("{0} line(s) written, escapes {1}.\n".format(
        cursor.newlines, "enabled" if cursor.enabled else "disabled"))
