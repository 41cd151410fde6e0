"""Listener entry model for eventide.

This module provides the Priority scale and the ListenerEntry record
stored in every event slot.
"""

from collections.abc import Callable
from enum import IntEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, PrivateAttr, ValidationError

from eventide._types import UNSET, Unset
from eventide.exceptions import InvalidListenerError
from eventide.utils import callable_name


class Priority(IntEnum):
    """Named points on the listener priority scale.

    The lower the value, the earlier the listener fires. Any integer is
    accepted as a priority; these are conventional anchors.
    """

    HIGHEST = -1000
    HIGHER = -100
    HIGH = -10
    NORMAL = 0
    LOW = 10
    LOWER = 100
    LOWEST = 1000


class ListenerEntry(BaseModel):
    """A registered callback plus its dispatch metadata.

    Attributes:
        callback: Listener callback function.
        context: Receiver passed as the first argument to ``callback``,
            or None to call ``callback`` with the emitted arguments only.
        once: Remove the entry before its first invocation.
        priority: Priority value (lower = executed first).

    Raises:
        InvalidListenerError: If ``callback`` is not callable.
    """

    model_config = ConfigDict(extra="forbid")

    callback: Callable[..., Any]
    context: Any = None
    once: bool = False
    priority: int = 0

    _retired: bool = PrivateAttr(default=False)

    def __init__(self, **data: Any) -> None:
        """Wrap pydantic ValidationError into InvalidListenerError."""
        try:
            super().__init__(**data)
        except ValidationError as exc:
            raise InvalidListenerError(str(exc)) from exc

    def __call__(self, *args: Any) -> Any:
        if self.context is None:
            return self.callback(*args)
        return self.callback(self.context, *args)

    @property
    def name(self) -> str:
        """Debug label for logging."""
        return callable_name(self.callback)

    @property
    def retired(self) -> bool:
        """True once the entry has been removed from its slot."""
        return self._retired

    def retire(self) -> None:
        self._retired = True

    def matches(
        self,
        callback: Callable[..., Any],
        context: Any = UNSET,
        once: bool | Unset = UNSET,
        priority: int | Unset = UNSET,
    ) -> bool:
        """Return whether this entry satisfies a removal filter.

        ``callback`` is compared with ``==`` so that two lookups of the
        same bound method match. A filter left as ``UNSET`` matches any
        value; any other filter value must match exactly, ``context`` by
        identity.
        """
        return (
            self.callback == callback
            and (context is UNSET or self.context is context)
            and (once is UNSET or self.once == once)
            and (priority is UNSET or self.priority == priority)
        )
