"""Shared test fixtures for all eventide tests."""

import pytest

from eventide import AsyncEventEmitter, EventEmitter, TransactionObservable


@pytest.fixture
def emitter() -> EventEmitter:
    """Fresh synchronous emitter."""
    return EventEmitter()


@pytest.fixture
def async_emitter() -> AsyncEventEmitter:
    """Fresh asynchronous emitter."""
    return AsyncEventEmitter()


@pytest.fixture
def batches() -> list[list]:
    """Collects every batch delivered to the ``observable`` fixture."""
    return []


@pytest.fixture
def observable(batches: list[list]) -> TransactionObservable[int]:
    """TransactionObservable with one observer recording into ``batches``."""
    obs = TransactionObservable[int]()
    obs.add_observer(batches.append)
    return obs
