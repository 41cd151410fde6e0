"""eventide - Priority event emitters and transactional observables for Python.

This package provides an in-process event emitter with priority ordering and
once-listeners (synchronous and asynchronous dispatch modes), plus observables
that can batch notifications inside transactions.
"""

__version__ = "0.1.0"

from loguru import logger

# Disable all eventide logging by default.  Users opt in with:
#     from loguru import logger
#     logger.enable("eventide")
logger.disable("eventide")

from eventide._types import UNSET, EventName, ListenerFn, Observer
from eventide.async_emitter import AsyncEventEmitter
from eventide.emitter import EventEmitter
from eventide.exceptions import EventideError, InvalidListenerError
from eventide.listener import ListenerEntry, Priority
from eventide.observable import BaseObservable, Observable
from eventide.transaction import TransactionObservable

# Module-level default emitter instance
default_emitter = EventEmitter()

__all__ = [
    # Version
    "__version__",
    # Emitter classes
    "EventEmitter",
    "AsyncEventEmitter",
    "default_emitter",
    "ListenerEntry",
    "Priority",
    # Observable classes
    "BaseObservable",
    "Observable",
    "TransactionObservable",
    # Types
    "EventName",
    "ListenerFn",
    "Observer",
    "UNSET",
    # Exception classes
    "EventideError",
    "InvalidListenerError",
]
