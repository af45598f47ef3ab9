import pytest

from fluentstreams.streams import (
    BufferedStream,
    Stream,
    create_buffered_stream,
    create_stream,
    recast_buffered_stream,
    recast_stream,
    streamify,
    streamify_with_buffer,
)


def _generator(items):
    def produce(emit):
        for item in items:
            emit(item)

    return produce


# Unbuffered streams


def test_streamify():
    items = [1, 2, 3, 4]
    assert streamify(items).to_list() == items


def test_create_stream():
    def produce(emit):
        for i in range(1, 4):
            emit(i)

    assert create_stream(produce).to_list() == [1, 2, 3]


def test_stream_pipe():
    transformed = streamify([1, 2, 3, 4]).pipe(lambda x: x * 2)
    assert recast_stream(transformed, int).to_list() == [2, 4, 6, 8]


def test_stream_filter():
    filtered = streamify([1, 2, 3, 4]).filter(lambda x: x % 2 == 0)
    assert filtered.to_list() == [2, 4]


def test_stream_for_each():
    result = []
    streamify([1, 2, 3, 4]).for_each(result.append)
    assert result == [1, 2, 3, 4]


def test_stream_to_buffered_stream():
    buffered = streamify([1, 2, 3, 4]).to_buffered_stream(2)
    assert isinstance(buffered, BufferedStream)
    assert buffered.to_list() == [1, 2, 3, 4]


def test_stream_is_iterable():
    assert [x + 1 for x in streamify([1, 2, 3])] == [2, 3, 4]


def test_stream_is_single_pass():
    stream = streamify([1, 2, 3])
    assert stream.to_list() == [1, 2, 3]
    assert stream.to_list() == []


def test_recast_stream_drops_other_types():
    mixed = streamify([1, "a", 2.5, 3]).pipe(lambda x: x)
    assert recast_stream(mixed, int).to_list() == [1, 3]


def test_stream_pipe_error_reaches_consumer():
    def boom(x):
        if x == 3:
            raise RuntimeError("bad item")
        return x

    with pytest.raises(RuntimeError, match="bad item"):
        streamify([1, 2, 3, 4]).pipe(boom).to_list()


def test_create_stream_generator_error_reaches_consumer():
    def produce(emit):
        emit(1)
        raise KeyError("missing")

    with pytest.raises(KeyError):
        create_stream(produce).to_list()


def test_stream_chained_operations():
    result = (
        streamify(range(10))
        .filter(lambda x: x % 3 == 0)
        .pipe(lambda x: x * 10)
        .to_list()
    )
    assert result == [0, 30, 60, 90]


# Buffered streams


def test_streamify_with_buffer():
    stream = streamify_with_buffer([1, 2, 3, 4, 5], 2)
    assert stream.buffer_size == 2
    assert stream.to_list() == [1, 2, 3, 4, 5]


def test_create_buffered_stream():
    buffered = create_buffered_stream(_generator([1, 2, 3, 4, 5]), 3)
    assert buffered.to_list() == [1, 2, 3, 4, 5]


def test_buffered_stream_pipe():
    buffered = create_buffered_stream(_generator([1, 2, 3, 4, 5]), 3)
    transformed = recast_buffered_stream(buffered.pipe(lambda x: x * 2), int)
    assert transformed.to_list() == [2, 4, 6, 8, 10]


def test_buffered_stream_buffer_size_consistency():
    items = [1, 2, 3, 4, 5]
    buffered = create_buffered_stream(_generator(items), 2)
    processed = []

    def track(x):
        processed.append(x)
        return x

    result = recast_buffered_stream(buffered.pipe(track), int).to_list()
    assert result == [1, 2, 3, 4, 5]
    assert len(processed) == len(items)


def test_buffered_stream_for_each():
    result = []
    streamify_with_buffer([1, 2, 3, 4], 2).for_each(result.append)
    assert result == [1, 2, 3, 4]


def test_buffered_stream_with_multiple_items_and_smaller_buffer():
    items = [1, 2, 3, 4, 5]
    buffered = create_buffered_stream(_generator(items), 2)
    batches = []

    def track(x):
        batches.append(x)
        return x

    result = recast_buffered_stream(buffered.pipe(track), int).to_list()
    assert result == [1, 2, 3, 4, 5]
    assert len(batches) == len(items)


def test_buffered_stream_with_larger_buffer():
    buffered = create_buffered_stream(_generator([1, 2, 3, 4, 5]), 10)
    assert buffered.to_list() == [1, 2, 3, 4, 5]


def test_buffered_stream_with_small_buffer():
    buffered = create_buffered_stream(_generator([1, 2, 3, 4]), 2)
    assert buffered.to_list() == [1, 2, 3, 4]


def test_buffered_stream_filter():
    filtered = streamify_with_buffer([1, 2, 3, 4], 2).filter(lambda x: x % 2 == 0)
    assert filtered.buffer_size == 2
    assert filtered.to_list() == [2, 4]


def test_buffered_stream_to_stream():
    stream = streamify_with_buffer([1, 2, 3, 4], 2).to_stream()
    assert isinstance(stream, Stream)
    assert stream.to_list() == [1, 2, 3, 4]


def test_buffered_stream_zero_buffer():
    assert streamify_with_buffer([7, 8, 9], 0).to_list() == [7, 8, 9]


def test_buffered_stream_negative_buffer_rejected():
    with pytest.raises(ValueError):
        streamify_with_buffer([1], -1)


def test_buffered_stream_pipe_keeps_buffer_size():
    piped = streamify_with_buffer([1, 2], 4).pipe(str)
    assert piped.buffer_size == 4
    assert piped.to_list() == ["1", "2"]


def test_recast_buffered_stream_drops_other_types():
    mixed = streamify_with_buffer(["x", 1, None, 2], 3).pipe(lambda v: v)
    assert recast_buffered_stream(mixed, str).to_list() == ["x"]


def test_buffered_stream_filter_error_reaches_consumer():
    def check(x):
        raise ValueError("rejected")

    with pytest.raises(ValueError, match="rejected"):
        streamify_with_buffer([1, 2], 2).filter(check).to_list()