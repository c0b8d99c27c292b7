"""
    progress
    ~~~~~~~~

    A tiny example redrawing a few progress bars in place: the bars
    are drawn once, then the cursor goes back up over them on every
    refresh, buffering each frame so it reaches the terminal in one write.

    :copyright: (c) 2022-... by termcursor authors and contributors,
                    see AUTHORS for details.
    :license: LGPL, see LICENSE for more details.
"""

import random
import sys
import time

import termcursor


def draw(cursor, tasks, width=40):
    for name, done in tasks:
        filled = int(width * done)
        cursor.erase("line").horizontal_absolute(1)
        cursor.write("{0:>8} [{1}{2}] {3:3d}%\n".format(
            name, "#" * filled, "." * (width - filled), int(done * 100)))


if __name__ == "__main__":
    cursor = termcursor.Cursor(sys.stdout)
    tasks = [["fetch", 0.0], ["build", 0.0], ["test", 0.0]]

    cursor.hide()
    draw(cursor, tasks)
    try:
        while any(done < 1 for _, done in tasks):
            time.sleep(0.1)
            for task in tasks:
                task[1] = min(1.0, task[1] + random.random() / 10)

            cursor.buffer().move_up(len(tasks))
            draw(cursor, tasks)
            cursor.flush()
    finally:
        cursor.show()
