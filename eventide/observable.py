"""Observer lists for eventide.

This module provides BaseObservable, the add/remove interface shared by
all observables, and Observable, a plain fan-out to every observer.
"""

from abc import ABC

from eventide._types import Observer


class BaseObservable[V](ABC):
    """Ordered list of observers receiving values of type ``V``.

    Observers are notified in registration order. Adding the same observer
    twice makes it fire twice.
    """

    def __init__(self) -> None:
        self._observers: list[Observer[V]] = []

    def add_observer(self, observer: Observer[V]) -> None:
        """Append an observer."""
        self._observers.append(observer)

    def remove_observer(self, observer: Observer[V]) -> bool:
        """Remove the first occurrence of a previously added observer.

        Returns:
            True if the observer was found and removed, False otherwise.
        """
        try:
            self._observers.remove(observer)
        except ValueError:
            return False
        return True

    @property
    def observer_count(self) -> int:
        return len(self._observers)

    def _notify(self, value: V) -> None:
        # Observers added or removed by another observer take effect next time.
        for observer in tuple(self._observers):
            observer(value)


class Observable[T](BaseObservable[T]):
    """A simple observable: every invoke is delivered right away."""

    def invoke(self, value: T) -> None:
        """Invoke all observers with the value.

        Observer exceptions are not caught; observers after a raising one
        are not invoked.
        """
        self._notify(value)
