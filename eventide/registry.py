"""Registry for listener management.

This module provides ListenerRegistry for storing and querying listener
entries per event, keeping every slot sorted by priority.
"""

from bisect import insort_right
from collections.abc import Callable
from operator import attrgetter
from typing import Any

from loguru import logger

from eventide._types import UNSET, EventName, Unset
from eventide.listener import ListenerEntry

log = logger.bind(source=__name__)

_by_priority = attrgetter("priority")


class ListenerRegistry:
    """Registry table for event listeners.

    Maps each event name to its slot: a list of ListenerEntry objects
    sorted by priority ascending, with insertion order preserved among
    equal priorities.

    A slot exists only while it holds at least one entry. Every removal
    path deletes a slot the moment it becomes empty, so a missing key is
    the single representation of "no listeners".
    """

    def __init__(self) -> None:
        """Initialize empty registry.

        Post:
            _slots is empty.
        """
        self._slots: dict[EventName, list[ListenerEntry]] = {}

    def add(self, event: EventName, entry: ListenerEntry) -> None:
        """Insert an entry into the slot for ``event``.

        Args:
            event: Event name to register for.
            entry: Listener entry with callback and metadata.

        Post:
            Slot for ``event`` exists and contains ``entry`` after every
            existing entry whose priority is <= ``entry.priority``.
        """
        slot = self._slots.setdefault(event, [])
        insort_right(slot, entry, key=_by_priority)
        log.debug(
            "Registered {} on {!r} (priority={}, once={})",
            entry.name,
            event,
            entry.priority,
            entry.once,
        )

    def remove(
        self,
        event: EventName,
        callback: Callable[..., Any],
        context: Any = UNSET,
        once: bool | Unset = UNSET,
        priority: int | Unset = UNSET,
    ) -> int:
        """Remove every entry of ``event`` that matches the filters.

        Args:
            event: Event name to remove from.
            callback: Callback to remove.
            context: Only remove entries bound to this context.
            once: Only remove entries with this once flag.
            priority: Only remove entries with this priority.

        Returns:
            Number of entries removed.

        Post:
            Removed entries are retired.
            Slot deleted if it became empty.
        """
        slot = self._slots.get(event)
        if slot is None:
            return 0

        kept: list[ListenerEntry] = []
        removed = 0
        for entry in slot:
            if entry.matches(callback, context, once, priority):
                entry.retire()
                removed += 1
            else:
                kept.append(entry)

        if removed:
            self._replace(event, kept)
            log.debug("Removed {} listener(s) from {!r}", removed, event)
        return removed

    def discard(self, event: EventName, entry: ListenerEntry) -> None:
        """Remove one specific entry, matched by identity.

        Used to retire ``once`` listeners during dispatch.

        Post:
            ``entry`` is retired and absent from the slot.
            Slot deleted if it became empty.
        """
        entry.retire()
        slot = self._slots.get(event)
        if slot is None:
            return
        self._replace(event, [e for e in slot if e is not entry])

    def clear(self, event: EventName | None = None) -> None:
        """Delete one slot, or every slot when ``event`` is None.

        Post:
            Deleted entries are retired.
        """
        if event is None:
            slots = list(self._slots.values())
            self._slots = {}
        else:
            slot = self._slots.pop(event, None)
            slots = [slot] if slot is not None else []
        for slot in slots:
            for entry in slot:
                entry.retire()

    def snapshot(self, event: EventName) -> tuple[ListenerEntry, ...]:
        """Return the entries of ``event`` in dispatch order.

        The returned tuple is independent of later registry mutation.
        """
        slot = self._slots.get(event)
        return tuple(slot) if slot else ()

    def events(self) -> list[EventName]:
        """Return the names of all events that currently have listeners."""
        return list(self._slots)

    def count(self, event: EventName) -> int:
        slot = self._slots.get(event)
        return len(slot) if slot else 0

    def _replace(self, event: EventName, entries: list[ListenerEntry]) -> None:
        if entries:
            self._slots[event] = entries
        else:
            del self._slots[event]
