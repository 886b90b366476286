"""Line-by-line reading of a stream in fixed-size chunks."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr

BUFFER_SIZE = 256


def read_lines(stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> Iterator[AnyStr]:
    """Yield the lines of stream, each with its trailing newline if it has one.

    The stream is read buffer_size characters (or bytes) at a time. The last
    line is yielded without a newline when the stream does not end with one;
    an empty stream yields nothing.
    """
    if buffer_size <= 0:
        raise ValueError(f"buffer_size must be positive, got {buffer_size}")
    pending = None
    newline = None
    while True:
        chunk = stream.read(buffer_size)
        if not chunk:
            break
        if newline is None:
            newline = b"\n" if isinstance(chunk, bytes) else "\n"
            pending = chunk
        else:
            pending += chunk
        while True:
            index = pending.find(newline)
            if index < 0:
                break
            yield pending[: index + 1]
            pending = pending[index + 1 :]
    if pending:
        yield pending