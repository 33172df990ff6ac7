"""A bounded in-memory byte stream with a writing and a reading side."""

from __future__ import annotations


class ByteStream:
    """Bytes written at one end and read at the other, bounded by a capacity."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._buffer = bytearray()
        self._pushed = 0
        self._popped = 0
        self._closed = False
        self._error = False

    # Writing side

    def push(self, data: bytes) -> None:
        """Append as much of ``data`` as the available capacity allows."""
        chunk = bytes(data)
        if self._closed:
            return
        accepted = chunk[: self.available_capacity()]
        self._buffer += accepted
        self._pushed += len(accepted)

    def close(self) -> None:
        """Signal that nothing more will be written."""
        self._closed = True

    def is_closed(self) -> bool:
        """Has the stream been closed?"""
        return self._closed

    def available_capacity(self) -> int:
        """How many bytes can be pushed right now."""
        return self._capacity - (self._pushed - self._popped)

    def bytes_pushed(self) -> int:
        """Total number of bytes pushed so far."""
        return self._pushed

    # Reading side

    def is_finished(self) -> bool:
        """Is the stream closed and fully read?"""
        return self._closed and not self._buffer

    def bytes_popped(self) -> int:
        """Total number of bytes popped so far."""
        return self._popped

    def peek(self) -> bytes:
        """Return the buffered bytes without removing them."""
        return bytes(self._buffer)

    def pop(self, length: int) -> None:
        """Remove up to ``length`` bytes from the front of the buffer."""
        if length < 0:
            raise ValueError("length must not be negative")
        count = min(length, len(self._buffer))
        del self._buffer[:count]
        self._popped += count

    def bytes_buffered(self) -> int:
        """Number of bytes pushed and not yet popped."""
        return len(self._buffer)

    # Error state

    def set_error(self) -> None:
        """Mark the stream as having suffered an error."""
        self._error = True

    def has_error(self) -> bool:
        """Has the stream suffered an error?"""
        return self._error


def read(stream: ByteStream, length: int) -> bytes:
    """Peek and pop up to ``length`` bytes from ``stream``."""
    if length < 0:
        raise ValueError("length must not be negative")
    out = bytearray()
    while stream.bytes_buffered() and len(out) < length:
        view = stream.peek()
        if not view:
            raise RuntimeError("peek() returned no data while bytes are buffered")
        view = view[: length - len(out)]
        out += view
        stream.pop(len(view))
    return bytes(out)