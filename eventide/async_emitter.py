import inspect
from typing import Any

from loguru import logger

from eventide._types import EventName
from eventide.base_emitter import BaseEmitter

log = logger.bind(source=__name__)


class AsyncEventEmitter(BaseEmitter):
    """Asynchronous event emitter.

    Accepts both coroutine functions and plain callables as listeners.
    Listeners run one at a time in priority order: an awaitable result is
    awaited to completion before the next listener starts.
    """

    async def emit(self, event: EventName, *args: Any) -> bool:
        """Asynchronously dispatch an event.

        Follows the same rules as :meth:`EventEmitter.emit`: snapshot at
        dispatch start, ``once`` listeners removed before they run, and
        the first raising listener aborts the pass.

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
            result = entry(*args)
            if inspect.isawaitable(result):
                await result
        return True
