"""Transactional observable for eventide.

Values invoked inside a transaction scope are buffered and released to the
observers as a single batch once the outermost scope completes. If the
scope raises, the buffered values are discarded.

Typical usage::

    changes = TransactionObservable[str]()
    changes.add_observer(lambda batch: print(batch))

    with changes.scope():
        changes.invoke("a")
        changes.invoke("b")
    # prints ['a', 'b'] once
"""

from collections.abc import AsyncIterator, Awaitable, Callable, Iterable, Iterator
from contextlib import asynccontextmanager, contextmanager

from loguru import logger

from eventide.observable import BaseObservable

log = logger.bind(source=__name__)


class TransactionObservable[T](BaseObservable[list[T]]):
    """Observable that batches values emitted during a transaction.

    Observers receive ``list[T]``. Outside a transaction every invoke is
    delivered immediately as its own batch.

    One buffer exists per instance at most. A scope entered while a buffer
    is open, whether nested in the same call stack or started by another
    task while an async scope is suspended, joins that buffer and never
    flushes on its own; the outermost scope alone decides delivery.
    """

    def __init__(self) -> None:
        super().__init__()
        self._transaction: list[T] | None = None

    @property
    def in_transaction(self) -> bool:
        return self._transaction is not None

    def invoke(self, value: T) -> None:
        """Buffer a value, or deliver ``[value]`` when no transaction is open."""
        if self._transaction is not None:
            self._transaction.append(value)
        else:
            self._notify([value])

    def invoke_many(self, values: Iterable[T]) -> None:
        """Buffer several values, or deliver them as one batch right away."""
        if self._transaction is not None:
            self._transaction.extend(values)
        else:
            self._notify(list(values))

    @contextmanager
    def scope(self) -> Iterator[None]:
        """Context manager delimiting a synchronous transaction.

        Post:
            Outermost scope: buffer reset on every exit path; buffered
            values delivered as one batch only on normal exit and only
            if there is at least one.

        Raises:
            BaseException: Whatever the ``with`` body raises, unchanged.
        """
        if self._transaction is not None:
            yield
            return
        batch = self._open()
        try:
            yield
        except BaseException:
            self._discard(batch)
            raise
        finally:
            self._transaction = None
        self._flush(batch)

    @asynccontextmanager
    async def scope_async(self) -> AsyncIterator[None]:
        """Async context manager delimiting an asynchronous transaction.

        Same contract as :meth:`scope`. The transaction stays open while
        the body is suspended, so invokes from other tasks made in the
        meantime land in the same buffer.
        """
        if self._transaction is not None:
            yield
            return
        batch = self._open()
        try:
            yield
        except BaseException:
            self._discard(batch)
            raise
        finally:
            self._transaction = None
        self._flush(batch)

    def run_scope[R](self, body: Callable[[], R]) -> R:
        """Run ``body`` inside a transaction.

        All invokes made while ``body`` runs are accumulated and delivered
        as one batch after it returns. If ``body`` raises, the values are
        discarded and the exception propagates.

        Args:
            body: Zero-argument callable forming the transaction.

        Returns:
            Whatever ``body`` returns.
        """
        with self.scope():
            return body()

    async def run_scope_async[R](self, body: Callable[[], Awaitable[R]]) -> R:
        """Await ``body()`` inside a transaction. See :meth:`run_scope`."""
        async with self.scope_async():
            return await body()

    transaction = run_scope
    transaction_async = run_scope_async

    def _open(self) -> list[T]:
        batch: list[T] = []
        self._transaction = batch
        log.debug("Transaction opened on {}", type(self).__qualname__)
        return batch

    def _discard(self, batch: list[T]) -> None:
        log.debug("Transaction failed, discarding {} value(s)", len(batch))

    def _flush(self, batch: list[T]) -> None:
        if not batch:
            return
        log.debug("Transaction committed, flushing {} value(s)", len(batch))
        self._notify(batch)
