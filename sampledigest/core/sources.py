"""Random-access byte sources consumed by one-shot hashing.

A source reports its total size up front and serves reads at absolute
offsets. Reads that run past the end are short; reads that start at or
past the end return ``b""``. Errors from the underlying storage are not
caught here.
"""

import os
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Iterator, Protocol

from loguru import logger


class ByteSource(Protocol):
    """Protocol for finite random-access byte sources."""

    def size(self) -> int:
        """Total number of bytes in the source."""
        ...

    def read(self, offset: int, length: int) -> bytes:
        """Read up to ``length`` bytes starting at ``offset``."""
        ...


class BufferSource:
    """Byte source over an in-memory bytes-like object."""

    def __init__(self, data: bytes | bytearray | memoryview):
        self._view = memoryview(data).cast("B")

    def size(self) -> int:
        return self._view.nbytes

    def read(self, offset: int, length: int) -> bytes:
        if offset < 0:
            raise ValueError(f"negative read offset {offset}")
        return self._view[offset : offset + length].tobytes()


class FileSource:
    """Byte source over a seekable binary file object.

    The size is taken from ``fstat`` once, when the source is created.
    """

    def __init__(self, fileobj: BinaryIO):
        self._file = fileobj
        self._size = os.fstat(fileobj.fileno()).st_size

    @classmethod
    @contextmanager
    def open(cls, path: str | Path) -> Iterator["FileSource"]:
        """Open ``path`` for reading and yield a source over it."""
        with open(path, "rb") as f:
            source = cls(f)
            logger.debug(f"Opened {path} ({source.size()} bytes)")
            yield source

    def size(self) -> int:
        return self._size

    def read(self, offset: int, length: int) -> bytes:
        if offset < 0:
            raise ValueError(f"negative read offset {offset}")
        if offset >= self._size or length <= 0:
            return b""

        self._file.seek(offset)
        length = min(length, self._size - offset)
        chunks = []
        while length > 0:
            chunk = self._file.read(length)
            if not chunk:
                # File shrank after stat
                break
            chunks.append(chunk)
            length -= len(chunk)
        return b"".join(chunks)
