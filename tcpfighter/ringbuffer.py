"""Fixed-capacity byte ring buffer used for socket send and receive queues."""

from __future__ import annotations

RINGBUFFER_SIZE = 2000


class RingBuffer:
    """A circular byte queue with a fixed capacity that can be resized."""

    def __init__(self, capacity: int = RINGBUFFER_SIZE) -> None:
        if capacity <= 0:
            raise ValueError("ring buffer capacity must be positive")
        self._buffer = bytearray(capacity)
        self._read = 0
        self._write = 0
        self._size = 0

    def __len__(self) -> int:
        """Number of bytes currently stored."""
        return self._size

    @property
    def capacity(self) -> int:
        """Total number of bytes the buffer can hold."""
        return len(self._buffer)

    @property
    def free_size(self) -> int:
        """Number of bytes that can still be enqueued."""
        return self.capacity - self._size

    def _wrap(self, index: int) -> int:
        return index % self.capacity

    def enqueue(self, data: bytes) -> int:
        """Append as much of ``data`` as fits and return the number of bytes stored."""
        view = memoryview(bytes(data))
        count = min(len(view), self.free_size)
        first = min(count, self.capacity - self._write)
        second = count - first
        self._buffer[self._write:self._write + first] = view[:first]
        self._buffer[:second] = view[first:count]
        self._write = self._wrap(self._write + count)
        self._size += count
        return count

    def peek(self, size: int) -> bytes:
        """Return up to ``size`` bytes from the front without removing them."""
        if size < 0:
            raise ValueError("size must not be negative")
        count = min(size, self._size)
        first = min(count, self.capacity - self._read)
        second = count - first
        return bytes(self._buffer[self._read:self._read + first]) + bytes(self._buffer[:second])

    def dequeue(self, size: int) -> bytes:
        """Remove and return up to ``size`` bytes from the front."""
        data = self.peek(size)
        self._read = self._wrap(self._read + len(data))
        self._size -= len(data)
        if self._size == 0:
            self._read = 0
            self._write = 0
        return data

    def clear(self) -> None:
        """Discard all stored data."""
        self._read = 0
        self._write = 0
        self._size = 0

    def resize(self, new_size: int) -> None:
        """Change the capacity, keeping the stored data in order.

        Non-positive sizes are ignored; a size smaller than the stored data
        raises ``ValueError``.
        """
        if new_size <= 0:
            return
        if self._size > new_size:
            raise ValueError("new capacity is too small to hold the stored data")
        data = self.peek(self._size)
        self._buffer = bytearray(new_size)
        self._buffer[:len(data)] = data
        self._read = 0
        self._write = self._size % new_size

    def direct_enqueue_size(self) -> int:
        """Bytes that can be written at the rear without wrapping."""
        if self._size == self.capacity:
            return 0
        if self._write >= self._read:
            return self.capacity - self._write
        return self._read - self._write

    def direct_dequeue_size(self) -> int:
        """Bytes that can be read at the front without wrapping."""
        if self._size == 0:
            return 0
        if self._read < self._write:
            return self._write - self._read
        return self.capacity - self._read

    def move_rear(self, size: int) -> int:
        """Advance the write position, counting the bytes as stored."""
        moved = min(size, self.free_size)
        self._write = self._wrap(self._write + moved)
        self._size += moved
        return moved

    def move_front(self, size: int) -> int:
        """Advance the read position, discarding the bytes."""
        moved = min(size, self._size)
        self._read = self._wrap(self._read + moved)
        self._size -= moved
        return moved