"""Shared type definitions for eventide.

All type aliases use PEP 695 ``type`` statement syntax.
"""

from collections.abc import Callable, Hashable
from enum import Enum
from typing import Any, Final, Literal

type EventName = Hashable
"""Identifier of an event: a string, an enum member or any hashable token.

``None`` is reserved by ``remove_all_listeners()`` to mean "every event".
"""

type ListenerFn = Callable[..., Any]
"""Listener callback accepting the positional arguments passed to ``emit``."""

type Observer[T] = Callable[[T], Any]
"""Observer callback receiving one notification value."""


class _Unset(Enum):
    UNSET = "UNSET"

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Final = _Unset.UNSET
"""Marker for a removal filter that was not supplied."""

type Unset = Literal[_Unset.UNSET]
