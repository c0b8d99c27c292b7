"""
    termcursor.events
    ~~~~~~~~~~~~~~~~~

    A tiny observer: callbacks are registered per event name and are
    called synchronously, in registration order, by :meth:`emit`.

    :copyright: (c) 2022-... by termcursor authors and contributors,
                    see AUTHORS for details.
    :license: LGPL, see LICENSE for more details.
"""

import logging
from collections import defaultdict


logger = logging.getLogger(__name__)


class EventEmitter:
    def __init__(self):
        self._listeners = defaultdict(list)

    def on(self, event, callback):
        """Calls ``callback`` each time ``event`` is emitted.

        :param str event: event name, for example ``"newline"``.
        :param callable callback: called with the emitted arguments.
        """
        self._listeners[event].append(callback)
        return self

    def remove_listener(self, event, callback):
        """Unregisters ``callback``; unknown callbacks are ignored."""
        try:
            self._listeners[event].remove(callback)
        except ValueError:
            pass
        return self

    def listeners(self, event):
        return list(self._listeners.get(event, ()))

    def emit(self, event, *args):
        """Calls the listeners of ``event`` with ``args``.

        An ``error`` nobody listens to is logged instead of being lost.

        :returns: ``True`` if at least one listener was called.
        """
        callbacks = self.listeners(event)
        if not callbacks:
            if event == "error":
                logger.warning("Unhandled error event: %s",
                               args[0] if args else None)
            return False

        for callback in callbacks:
            callback(*args)
        return True
