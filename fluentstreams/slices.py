"""An eager, list-backed collection with fluent functional operations."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from functools import cmp_to_key
from typing import Any, Generic, TypeVar

from fluentstreams.streams import BufferedStream, Stream, streamify, streamify_with_buffer

T = TypeVar("T")
U = TypeVar("U")


class Collection(Generic[T]):
    """An immutable-style wrapper around a list of items."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = list(items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Collection({self._items!r})"

    def filter(self, fn: Callable[[T], bool]) -> Collection[T]:
        """Return the items for which ``fn`` is true."""
        return Collection(item for item in self._items if fn(item))

    def for_each(self, fn: Callable[[T], Any]) -> None:
        """Call ``fn`` on each item."""
        for item in self._items:
            fn(item)

    def map(self, fn: Callable[[T], U]) -> Collection[U]:
        """Return a collection of ``fn`` applied to each item."""
        return Collection(fn(item) for item in self._items)

    def to_list(self) -> list[T]:
        """Return the items as a list."""
        return list(self._items)

    def reduce(self, fn: Callable[[T, T], T], initial: T) -> T:
        """Fold the items into one value, starting from ``initial``."""
        acc = initial
        for item in self._items:
            acc = fn(acc, item)
        return acc

    def find(self, fn: Callable[[T], bool]) -> T | None:
        """Return the first item for which ``fn`` is true, or None."""
        return next((item for item in self._items if fn(item)), None)

    def some(self, fn: Callable[[T], bool]) -> bool:
        """Tell whether any item satisfies ``fn``."""
        return any(fn(item) for item in self._items)

    def every(self, fn: Callable[[T], bool]) -> bool:
        """Tell whether every item satisfies ``fn``."""
        return all(fn(item) for item in self._items)

    def sort(self, less: Callable[[T, T], bool]) -> Collection[T]:
        """Return a stably sorted copy, ordered by the ``less`` predicate."""

        def compare(a: T, b: T) -> int:
            if less(a, b):
                return -1
            if less(b, a):
                return 1
            return 0

        return Collection(sorted(self._items, key=cmp_to_key(compare)))

    def concat(self, other: Iterable[T]) -> Collection[T]:
        """Return a collection of these items followed by ``other``."""
        return Collection([*self._items, *other])

    def slice(self, start: int, end: int) -> Collection[T]:
        """Return items ``start`` to ``end``; an empty collection if out of range."""
        if start < 0 or end > len(self._items) or start > end:
            return Collection()
        return Collection(self._items[start:end])

    def to_stream(self) -> Stream[T]:
        """Return an unbuffered stream over the items."""
        return streamify(list(self._items))

    def to_buffered_stream(self, buffer_size: int) -> BufferedStream[T]:
        """Return a buffered stream over the items."""
        return streamify_with_buffer(list(self._items), buffer_size)


def slicefy(items: Iterable[T]) -> Collection[T]:
    """Wrap ``items`` in a collection."""
    return Collection(items)


def recast_slice(collection: Collection[Any], type_: type[U]) -> Collection[U]:
    """Keep only the items that are instances of ``type_``."""
    return Collection(item for item in collection if isinstance(item, type_))