"""Synchronous emitter for event handling."""

from typing import Any

from loguru import logger

from eventide._types import EventName
from eventide.base_emitter import BaseEmitter

log = logger.bind(source=__name__)


class EventEmitter(BaseEmitter):
    """Synchronous event emitter.

    Executes listeners synchronously in priority order.
    Recursive emit() calls execute directly (no queue).
    """

    def emit(self, event: EventName, *args: Any) -> bool:
        """Synchronously dispatch an event.

        Listener exceptions are not caught. A raising listener aborts the
        pass: listeners after it are not invoked and the exception reaches
        the caller unchanged. ``once`` listeners are already removed by
        the time they run, so they stay removed even when they raise.

        Warning:
            Listeners can recursively call emit(). Framework does not detect cycles.
            Users must avoid infinite recursion chains (e.g., A→B→A), otherwise
            Python's RecursionError will be raised.

        Args:
            event: Event name to dispatch.
            args: Positional arguments passed to every listener.

        Returns:
            False if the event had no listeners, True otherwise.

        Post:
            Listeners present at dispatch start executed in priority order.
        """
        count = self._registry.count(event)
        if not count:
            return False
        log.debug("Emit {!r} ({} listener(s))", event, count)
        for entry in self._pending(event):
            entry(*args)
        return True
