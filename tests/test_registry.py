"""Tests for ListenerRegistry and ListenerEntry."""

import pytest

from eventide import InvalidListenerError, ListenerEntry
from eventide.registry import ListenerRegistry


def cb(*args):
    return args


class TestListenerEntry:
    def test_defaults(self):
        """Entries default to priority 0, not once, no context."""
        entry = ListenerEntry(callback=cb)
        assert entry.priority == 0
        assert entry.once is False
        assert entry.context is None
        assert entry.retired is False

    def test_call_without_context(self):
        """Calling an entry forwards the arguments."""
        assert ListenerEntry(callback=cb)(1, 2) == (1, 2)

    def test_call_with_context(self):
        """A context is prepended to the arguments."""
        ctx = object()
        assert ListenerEntry(callback=cb, context=ctx)(1) == (ctx, 1)

    def test_rejects_non_callable(self):
        """A non-callable callback raises InvalidListenerError."""
        with pytest.raises(InvalidListenerError) as exc_info:
            ListenerEntry(callback=None)
        assert exc_info.value.__cause__ is not None

    def test_rejects_unknown_field(self):
        """Extra fields are forbidden."""
        with pytest.raises(InvalidListenerError):
            ListenerEntry(callback=cb, weight=3)

    def test_name(self):
        """name is the callback's qualified name."""
        assert ListenerEntry(callback=cb).name == "cb"

    def test_matches_unset_filters(self):
        """Filters that are not given match anything."""
        entry = ListenerEntry(callback=cb, once=True, priority=7)
        assert entry.matches(cb)
        assert entry.matches(cb, priority=7, once=True)
        assert not entry.matches(cb, priority=0)
        assert not entry.matches(cb, once=False)
        assert not entry.matches(print)


class TestListenerRegistry:
    def test_add_sorts_by_priority(self):
        """Entries are kept in ascending priority with stable ties."""
        reg = ListenerRegistry()
        entries = [
            ListenerEntry(callback=cb, priority=p) for p in (5, -1, 5, 0, -1)
        ]
        for entry in entries:
            reg.add("x", entry)

        snap = reg.snapshot("x")
        assert [e.priority for e in snap] == [-1, -1, 0, 5, 5]
        assert snap[0] is entries[1] and snap[1] is entries[4]
        assert snap[3] is entries[0] and snap[4] is entries[2]

    def test_snapshot_is_independent(self):
        """A snapshot does not change when the registry does."""
        reg = ListenerRegistry()
        reg.add("x", ListenerEntry(callback=cb))
        snap = reg.snapshot("x")
        reg.add("x", ListenerEntry(callback=cb))
        assert len(snap) == 1
        assert reg.count("x") == 2

    def test_remove_retires_and_deletes_slot(self):
        """Removed entries are retired and empty slots disappear."""
        reg = ListenerRegistry()
        entry = ListenerEntry(callback=cb)
        reg.add("x", entry)

        assert reg.remove("x", cb) == 1
        assert entry.retired
        assert reg.events() == []

    def test_remove_missing_event(self):
        """Removing from an unknown event reports zero removals."""
        assert ListenerRegistry().remove("x", cb) == 0

    def test_discard_by_identity(self):
        """discard() removes one specific entry among equal ones."""
        reg = ListenerRegistry()
        first = ListenerEntry(callback=cb)
        second = ListenerEntry(callback=cb)
        reg.add("x", first)
        reg.add("x", second)

        reg.discard("x", second)
        assert reg.snapshot("x") == (first,)
        assert second.retired and not first.retired

    def test_clear(self):
        """clear() retires entries of one or all events."""
        reg = ListenerRegistry()
        a, b = ListenerEntry(callback=cb), ListenerEntry(callback=cb)
        reg.add("a", a)
        reg.add("b", b)

        reg.clear("a")
        assert reg.events() == ["b"] and a.retired and not b.retired
        reg.clear()
        assert reg.events() == [] and b.retired
