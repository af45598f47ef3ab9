# fluentstreams

Chainable helpers for working with sequences, in two styles:

- **`Collection`** (in `fluentstreams.slices`): an eager, list-backed
  wrapper with `filter`, `map`, `reduce`, `find`, `some`, `every`, `sort`,
  `concat` and `slice`.
- **`Stream`** and **`BufferedStream`** (in `fluentstreams.streams`): lazy
  pipelines. Each stage runs its producer in a background daemon thread and
  hands items to the next stage through a bounded queue. A `Stream` queue
  holds a single item. A `BufferedStream` queue holds up to `buffer_size`
  items, so its producer can run that far ahead of the consumer.

## Installation

```
pip install fluentstreams
```

The package has no dependencies outside the standard library.

## Collections

```python
from fluentstreams.slices import slicefy, recast_slice

numbers = slicefy([4, 3, 2, 1])

numbers.filter(lambda x: x % 2 == 0).to_list()        # [4, 2]
numbers.reduce(lambda acc, x: acc + x, 0)             # 10
numbers.find(lambda x: x == 3)                        # 3
numbers.find(lambda x: x == 5)                        # None
numbers.some(lambda x: x > 3)                         # True
numbers.every(lambda x: x < 4)                        # False
numbers.sort(lambda a, b: a < b).to_list()            # [1, 2, 3, 4]
numbers.concat([0]).to_list()                         # [4, 3, 2, 1, 0]
numbers.slice(1, 3).to_list()                         # [3, 2]
numbers.slice(5, 3).to_list()                         # [] (out of range gives an empty result)
len(numbers)                                          # 4

squares = numbers.map(lambda x: x * x)
recast_slice(squares, int).to_list()                  # [16, 9, 4, 1]
```

Every operation that returns a collection returns a new one and leaves the
original unchanged. A `Collection` can also be iterated over directly.

`sort` takes a "less than" function, as in `lambda a, b: a < b`, and keeps
equal items in their original order.

`slice(start, end)` returns an empty collection when `start` is negative,
`end` is past the last item, or `start` is greater than `end`.

`recast_slice` keeps only the items that are instances of the given type and
drops the rest.

## Streams

```python
from fluentstreams.streams import create_stream, recast_stream, streamify


def numbers(put):
    for i in range(1, 4):
        put(i)


doubled = streamify([1, 2, 3, 4]).pipe(lambda x: x * 2)
recast_stream(doubled, int).to_list()                 # [2, 4, 6, 8]

create_stream(numbers).to_list()                      # [1, 2, 3]

for item in streamify([1, 2, 3, 4]).filter(lambda x: x % 2 == 0):
    print(item)                                       # 2, then 4
```

A generator function passed to `create_stream` receives a callable that
sends one item into the stream. The stream ends when that function returns.
If the function, or a function given to `pipe` or `filter`, raises an
exception, the stream ends there and the same exception is raised to
whoever is reading from it.

Streams can be used only once. Iterating over a stream, or calling
`for_each` or `to_list` on it, uses up its items.

## Buffered streams

```python
from fluentstreams.streams import (
    create_buffered_stream,
    recast_buffered_stream,
    streamify_with_buffer,
)

stream = streamify_with_buffer([1, 2, 3, 4, 5], 2)
stream.buffer_size                                                   # 2
recast_buffered_stream(stream.pipe(lambda x: x * 2), int).to_list()  # [2, 4, 6, 8, 10]

create_buffered_stream(lambda put: [put(i) for i in range(3)], 3).to_list()  # [0, 1, 2]
```

Streams derived with `pipe`, `filter` or `recast_buffered_stream` keep the
buffer size of the stream they came from. A negative buffer size raises
`ValueError`; a buffer size of zero behaves like a plain `Stream`.

## Converting between kinds

- `Collection.to_stream()` and `Collection.to_buffered_stream(n)` turn a
  collection into a stream.
- `Stream.to_buffered_stream(n)` turns a stream into a buffered stream.
- `BufferedStream.to_stream()` turns a buffered stream back into a plain
  stream.
- `to_list()` on any of them gives a plain Python list.