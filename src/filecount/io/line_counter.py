from __future__ import annotations

from typing import BinaryIO

from filecount.constants import READ_CHUNK_SIZE


def count_lines(stream: BinaryIO, *, chunk_size: int = READ_CHUNK_SIZE) -> int:
    """Count newline-terminated segments in a binary stream.

    Only b'\\n' bytes are counted: a trailing segment without a newline does
    not add a line, and an empty stream yields 0. The stream is read in
    chunks of *chunk_size* bytes; read errors propagate to the caller.
    """
    if chunk_size <= 0:
        raise ValueError(f'chunk_size must be positive, got {chunk_size}')
    total = 0
    for chunk in iter(lambda: stream.read(chunk_size), b''):
        total += chunk.count(b'\n')
    return total
