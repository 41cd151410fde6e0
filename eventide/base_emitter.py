from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator
from typing import Any, Self

from loguru import logger

from eventide._types import UNSET, EventName, ListenerFn, Unset
from eventide.listener import ListenerEntry, Priority
from eventide.registry import ListenerRegistry

log = logger.bind(source=__name__)


class BaseEmitter(ABC):
    """Abstract base class for event emitters.

    Provides common functionality for both sync and async emitters:
    - Listener registration/unregistration
    - Registry queries

    Subclasses must implement:
    - emit() - Event dispatching logic
    """

    Priority = Priority

    _registry: ListenerRegistry  # Registry for managing listeners

    def __init__(self) -> None:
        self._registry = ListenerRegistry()

    def add_listener(
        self,
        event: EventName,
        callback: ListenerFn,
        context: Any = None,
        priority: int = Priority.NORMAL,
        *,
        once: bool = False,
    ) -> Self:
        """Register a listener for an event.

        Args:
            event: Event name to listen for.
            callback: Callback function.
            context: Receiver passed to ``callback`` as its first argument.
            priority: Lower values fire earlier; ties keep registration order.
            once: Remove the listener before its first invocation.

        Returns:
            This emitter, for chaining.

        Post:
            Callback registered after all listeners of equal priority.

        Raises:
            InvalidListenerError: If ``callback`` is not callable.
        """
        entry = ListenerEntry(
            callback=callback, context=context, once=once, priority=priority
        )
        self._registry.add(event, entry)
        return self

    def on(
        self,
        event: EventName,
        callback: ListenerFn,
        context: Any = None,
        priority: int = Priority.NORMAL,
    ) -> Self:
        """Alias of :meth:`add_listener` for persistent listeners."""
        return self.add_listener(event, callback, context, priority)

    def once(
        self,
        event: EventName,
        callback: ListenerFn,
        context: Any = None,
        priority: int = Priority.NORMAL,
    ) -> Self:
        """Register a listener that fires at most once."""
        return self.add_listener(event, callback, context, priority, once=True)

    def listener[F: Callable[..., Any]](
        self,
        *events: EventName,
        priority: int = Priority.NORMAL,
        once: bool = False,
    ) -> Callable[[F], F]:
        """Decorator to register a plain function as listener.

        Args:
            events: Event names to listen for.
            priority: Lower values fire earlier.
            once: Remove the listener before its first invocation.

        Returns:
            Decorator function that returns the original function unchanged.

        Post:
            Callback registered to all specified events.
        """

        def decorator(func: F) -> F:
            for event in events:
                self.add_listener(event, func, priority=priority, once=once)
            return func

        return decorator

    def remove_listener(
        self,
        event: EventName,
        callback: ListenerFn,
        context: Any = UNSET,
        once: bool | Unset = UNSET,
        priority: int | Unset = UNSET,
    ) -> Self:
        """Remove the listeners of an event that match the given filters.

        A filter that is not passed matches every entry. A filter passed
        explicitly is an exact match, so ``priority=0`` removes only
        priority-0 entries and ``context=None`` only unbound ones.

        Args:
            event: Event name to remove from.
            callback: Callback to remove.
            context: Only remove entries bound to this context.
            once: Only remove entries with this once flag.
            priority: Only remove entries with this priority.

        Returns:
            This emitter, for chaining.

        Post:
            Matching listeners removed; no-op when nothing matches.
        """
        self._registry.remove(event, callback, context, once, priority)
        return self

    def off(
        self,
        event: EventName,
        callback: ListenerFn,
        context: Any = UNSET,
        once: bool | Unset = UNSET,
        priority: int | Unset = UNSET,
    ) -> Self:
        """Alias of :meth:`remove_listener`."""
        return self.remove_listener(event, callback, context, once, priority)

    def remove_all_listeners(self, event: EventName | None = None) -> Self:
        """Remove all listeners, or those of the specified event."""
        self._registry.clear(event)
        log.debug(
            "Removed all listeners from {}",
            "every event" if event is None else repr(event),
        )
        return self

    def event_names(self) -> list[EventName]:
        """Return the events for which the emitter has registered listeners."""
        return self._registry.events()

    def listeners(self, event: EventName) -> list[ListenerFn]:
        """Return the callbacks registered for an event, in dispatch order."""
        return [entry.callback for entry in self._registry.snapshot(event)]

    def listener_count(self, event: EventName) -> int:
        """Return the number of listeners listening to an event."""
        return self._registry.count(event)

    @abstractmethod
    def emit(self, event: EventName, *args: Any) -> Any:
        """Dispatch an event to its listeners.

        Args:
            event: Event name to dispatch.
            args: Positional arguments passed to every listener.

        Returns:
            True if the event had listeners, False otherwise (sync or async).

        Post:
            Listeners present at dispatch start executed in priority order.

        Raises:
            Exception: Whatever a listener raises; later listeners are skipped.
        """
        raise NotImplementedError

    def _pending(self, event: EventName) -> Iterator[ListenerEntry]:
        """Yield the entries to invoke for one dispatch pass.

        Walks a snapshot taken when iteration starts, so listeners added
        during the pass are not invoked. Entries retired since the
        snapshot are skipped. ``once`` entries are removed from the live
        slot before they are yielded.
        """
        for entry in self._registry.snapshot(event):
            if entry.retired:
                continue
            if entry.once:
                self._registry.discard(event, entry)
                log.debug("Retired once-listener {} on {!r}", entry.name, event)
            yield entry
