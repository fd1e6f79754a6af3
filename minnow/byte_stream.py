"""A bounded, in-memory, reliable stream of bytes."""

from __future__ import annotations


class ByteStream:
    """A byte stream with a writing end, a reading end and a fixed capacity.

    Bytes pushed beyond the available capacity are dropped.
    """

    def __init__(self, capacity: int) -> None:
        self._capacity = capacity
        self._buffer = bytearray()
        self._pushed = 0
        self._popped = 0
        self._closed = False
        self._error = False

    def push(self, data: bytes) -> None:
        """Append as much of ``data`` as fits in the available capacity."""
        if not data:
            return
        if self._closed:
            self._error = True
            return
        accepted = bytes(data[: self.available_capacity()])
        self._buffer += accepted
        self._pushed += len(accepted)

    def close(self) -> None:
        self._closed = True

    def is_closed(self) -> bool:
        return self._closed

    def available_capacity(self) -> int:
        return self._capacity - len(self._buffer)

    def bytes_pushed(self) -> int:
        return self._pushed

    def peek(self) -> bytes:
        """Return the buffered bytes without consuming them."""
        return bytes(self._buffer)

    def pop(self, length: int) -> None:
        """Discard up to ``length`` bytes from the front of the buffer."""
        length = min(length, len(self._buffer))
        del self._buffer[:length]
        self._popped += length

    def read(self, length: int) -> bytes:
        """Consume and return up to ``length`` bytes."""
        data = bytes(self._buffer[:length])
        self.pop(len(data))
        return data

    def is_finished(self) -> bool:
        return self._closed and not self._buffer

    def bytes_buffered(self) -> int:
        return len(self._buffer)

    def bytes_popped(self) -> int:
        return self._popped

    def set_error(self) -> None:
        self._error = True

    def has_error(self) -> bool:
        return self._error