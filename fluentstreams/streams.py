"""Lazy, thread-backed streams with fluent pipe/filter operations."""

from __future__ import annotations

import queue
import threading
from collections.abc import Callable, Iterable, Iterator
from typing import Any, Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")

Emit = Callable[[Any], None]

_CLOSED = object()


class _Failure:
    __slots__ = ("exc",)

    def __init__(self, exc: BaseException) -> None:
        self.exc = exc


class _Channel:
    """A bounded queue filled by a background producer thread."""

    def __init__(self, produce: Callable[[Emit], None], capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"buffer size must not be negative, got {capacity}")
        # A capacity of zero stands for an unbuffered hand-off; the closest
        # bounded queue holds a single item.
        self._queue: queue.Queue = queue.Queue(maxsize=max(capacity, 1))
        self._done = False
        thread = threading.Thread(target=self._run, args=(produce,), daemon=True)
        thread.start()

    def _run(self, produce: Callable[[Emit], None]) -> None:
        try:
            produce(self._queue.put)
        except BaseException as exc:  # handed over to the consumer
            self._queue.put(_Failure(exc))
            return
        self._queue.put(_CLOSED)

    def __iter__(self) -> Iterator[Any]:
        while not self._done:
            item = self._queue.get()
            if item is _CLOSED:
                self._done = True
                return
            if isinstance(item, _Failure):
                self._done = True
                raise item.exc
            yield item


def _feed(items: Iterable[Any]) -> Callable[[Emit], None]:
    def produce(emit: Emit) -> None:
        for item in items:
            emit(item)

    return produce


def _mapped(source: Iterable[Any], fn: Callable[[Any], Any]) -> Callable[[Emit], None]:
    def produce(emit: Emit) -> None:
        for item in source:
            emit(fn(item))

    return produce


def _filtered(source: Iterable[Any], fn: Callable[[Any], bool]) -> Callable[[Emit], None]:
    def produce(emit: Emit) -> None:
        for item in source:
            if fn(item):
                emit(item)

    return produce


class Stream(Generic[T]):
    """A single-pass stream whose producer hands items over one at a time."""

    def __init__(self, channel: _Channel) -> None:
        self._channel = channel

    def __iter__(self) -> Iterator[T]:
        return iter(self._channel)

    def pipe(self, fn: Callable[[T], U]) -> Stream[U]:
        """Return a new stream with ``fn`` applied to every item."""
        return Stream(_Channel(_mapped(self, fn), 0))

    def filter(self, fn: Callable[[T], bool]) -> Stream[T]:
        """Return a new stream holding only the items for which ``fn`` is true."""
        return Stream(_Channel(_filtered(self, fn), 0))

    def for_each(self, fn: Callable[[T], Any]) -> None:
        """Consume the stream, calling ``fn`` on each item."""
        for item in self:
            fn(item)

    def to_list(self) -> list[T]:
        """Consume the stream and collect its items."""
        return list(self)

    def to_buffered_stream(self, buffer_size: int) -> BufferedStream[T]:
        """Re-emit the items through a buffer of ``buffer_size`` items."""
        return BufferedStream(_Channel(_feed(self), buffer_size), buffer_size)


class BufferedStream(Generic[T]):
    """A single-pass stream whose producer may run ahead by ``buffer_size`` items."""

    def __init__(self, channel: _Channel, buffer_size: int) -> None:
        self._channel = channel
        self.buffer_size = buffer_size

    def _derive(self, produce: Callable[[Emit], None]) -> BufferedStream[Any]:
        return BufferedStream(_Channel(produce, self.buffer_size), self.buffer_size)

    def __iter__(self) -> Iterator[T]:
        return iter(self._channel)

    def pipe(self, fn: Callable[[T], U]) -> BufferedStream[U]:
        """Return a new stream with ``fn`` applied to every item."""
        return self._derive(_mapped(self, fn))

    def filter(self, fn: Callable[[T], bool]) -> BufferedStream[T]:
        """Return a new stream holding only the items for which ``fn`` is true."""
        return self._derive(_filtered(self, fn))

    def for_each(self, fn: Callable[[T], Any]) -> None:
        """Consume the stream, calling ``fn`` on each item."""
        for item in self:
            fn(item)

    def to_list(self) -> list[T]:
        """Consume the stream and collect its items."""
        return list(self)

    def to_stream(self) -> Stream[T]:
        """Re-emit the items through an unbuffered stream."""
        return Stream(_Channel(_feed(self), 0))


def streamify(items: Iterable[T]) -> Stream[T]:
    """Create a stream over ``items``."""
    return Stream(_Channel(_feed(items), 0))


def create_stream(generator: Callable[[Emit], None]) -> Stream[Any]:
    """Create a stream fed by ``generator``, which is given an emit callable."""
    return Stream(_Channel(generator, 0))


def recast_stream(stream: Stream[Any], type_: type[U]) -> Stream[U]:
    """Keep only the items of ``stream`` that are instances of ``type_``."""
    return Stream(_Channel(_filtered(stream, lambda v: isinstance(v, type_)), 0))


def streamify_with_buffer(items: Iterable[T], buffer_size: int) -> BufferedStream[T]:
    """Create a buffered stream over ``items``."""
    return BufferedStream(_Channel(_feed(items), buffer_size), buffer_size)


def create_buffered_stream(
    generator: Callable[[Emit], None], buffer_size: int
) -> BufferedStream[Any]:
    """Create a buffered stream fed by ``generator``, which is given an emit callable."""
    return BufferedStream(_Channel(generator, buffer_size), buffer_size)


def recast_buffered_stream(stream: BufferedStream[Any], type_: type[U]) -> BufferedStream[U]:
    """Keep only the items of ``stream`` that are instances of ``type_``."""
    produce = _filtered(stream, lambda v: isinstance(v, type_))
    return BufferedStream(_Channel(produce, stream.buffer_size), stream.buffer_size)