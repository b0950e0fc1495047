"""
Memory
------

The flat, growable byte stores that every region is carved out of.

A memory is measured in pages of :data:`PAGE_SIZE` bytes and may only grow.
Two implementations are provided: :class:`VectorMemory` keeps everything in
the process, and :class:`FileMemory` keeps everything in a single file so
that the records survive a restart.
"""

import os
from abc import ABC, abstractmethod
from typing import Optional

from carhire.store.exceptions import OutOfBoundsError

PAGE_SIZE = 64 * 1024
"""The size of a single page in bytes."""


class Memory(ABC):
    """The abstract memory interface."""

    max_pages: Optional[int] = None
    """The maximum number of pages the memory may grow to (unbounded if None)."""

    @abstractmethod
    def size(self) -> int:
        """Gets the current size of the memory in pages."""

    @abstractmethod
    def grow(self, pages: int) -> int:
        """
        Grows the memory by the given number of pages.

        :return: The previous size in pages, or -1 if the memory cannot grow.
        """

    @abstractmethod
    def read(self, offset: int, length: int) -> bytes:
        """
        Reads ``length`` bytes starting at ``offset``.

        :raises OutOfBoundsError: If the range is not inside the memory.
        """

    @abstractmethod
    def write(self, offset: int, data: bytes):
        """
        Writes the data starting at ``offset``.

        :raises OutOfBoundsError: If the range is not inside the memory.
        """

    def close(self):
        """Releases any resources held by the memory."""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def _can_grow(self, pages: int) -> bool:
        if pages < 0:
            raise ValueError("Memory can only grow.")
        return self.max_pages is None or self.size() + pages <= self.max_pages

    def _check_bounds(self, offset: int, length: int):
        if offset < 0 or length < 0 or offset + length > self.size() * PAGE_SIZE:
            raise OutOfBoundsError(
                f"Access of {length} bytes at {offset} is outside of a memory of {self.size()} pages."
            )


class VectorMemory(Memory):
    """
    Emulates a persistent memory by keeping all the bytes in a
    :class:`bytearray`. Used for testing and when no store path is given.
    """

    def __init__(self, *, max_pages: Optional[int] = None):
        self._buffer = bytearray()
        self.max_pages = max_pages

    def size(self) -> int:
        return len(self._buffer) // PAGE_SIZE

    def grow(self, pages: int) -> int:
        if not self._can_grow(pages):
            return -1
        previous = self.size()
        self._buffer.extend(bytes(pages * PAGE_SIZE))
        return previous

    def read(self, offset: int, length: int) -> bytes:
        self._check_bounds(offset, length)
        return bytes(self._buffer[offset:offset + length])

    def write(self, offset: int, data: bytes):
        self._check_bounds(offset, len(data))
        self._buffer[offset:offset + len(data)] = data


class FileMemory(Memory):
    """
    A memory backed by a single file. The file is extended with zeroes as
    the memory grows and every write is flushed before returning.
    """

    def __init__(self, path: str, *, max_pages: Optional[int] = None):
        self.path = path
        self.max_pages = max_pages
        mode = "r+b" if os.path.exists(path) else "w+b"
        self._file = open(path, mode)
        self._file.seek(0, os.SEEK_END)
        length = self._file.tell()
        if length % PAGE_SIZE:
            self._file.close()
            raise OutOfBoundsError(f"{path} is {length} bytes long, which is not a whole number of pages.")
        self._pages = length // PAGE_SIZE

    def size(self) -> int:
        return self._pages

    def grow(self, pages: int) -> int:
        if not self._can_grow(pages):
            return -1
        previous = self._pages
        self._file.truncate((previous + pages) * PAGE_SIZE)
        self._file.flush()
        self._pages += pages
        return previous

    def read(self, offset: int, length: int) -> bytes:
        self._check_bounds(offset, length)
        self._file.seek(offset)
        return self._file.read(length)

    def write(self, offset: int, data: bytes):
        self._check_bounds(offset, len(data))
        self._file.seek(offset)
        self._file.write(data)
        self._file.flush()

    def close(self):
        if not self._file.closed:
            self._file.close()
