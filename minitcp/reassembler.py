"""Reassembly of indexed, possibly overlapping substrings into a byte stream."""

from __future__ import annotations

from minitcp.byte_stream import ByteStream


class Reassembler:
    """Writes out-of-order substrings into ``output`` in stream order.

    Bytes beyond the stream's available capacity are discarded; bytes that fit
    but cannot yet be written are held until the gap before them is filled.
    """

    def __init__(self, output: ByteStream) -> None:
        self.output = output
        self._next_index = 0
        self._end_index: int | None = None
        self._stored_bytes = 0
        self._pending: dict[int, bytes] = {}

    def insert(self, first_index: int, data: bytes, is_last_substring: bool) -> None:
        """Insert ``data`` starting at stream index ``first_index``."""
        data = bytes(data)
        writer = self.output
        right_bound = writer.bytes_pushed() + writer.available_capacity()

        if is_last_substring:
            self._end_index = first_index + len(data)

        if first_index >= right_bound:
            return

        if first_index + len(data) > right_bound:
            data = data[: right_bound - first_index]

        if first_index < self._next_index < first_index + len(data):
            data = data[self._next_index - first_index :]
            first_index = self._next_index

        if first_index > self._next_index:
            existing = self._pending.get(first_index)
            if existing is not None:
                if len(data) <= len(existing):
                    return
                self._stored_bytes += len(data) - len(existing)
            else:
                self._stored_bytes += len(data)
            self._pending[first_index] = data
            self._merge_pending()

        if first_index == self._next_index:
            writer.push(data)
            self._next_index += len(data)
            self._flush_pending(right_bound)

        if self._end_index is not None and self._next_index >= self._end_index:
            writer.close()

    def bytes_pending(self) -> int:
        """How many bytes are held here, waiting for earlier bytes."""
        return self._stored_bytes

    def _merge_pending(self) -> None:
        merged: list[list] = []
        for start, chunk in sorted(self._pending.items()):
            if merged:
                prev_start, prev_chunk = merged[-1]
                prev_end = prev_start + len(prev_chunk)
                end = start + len(chunk)
                if end <= prev_end:
                    self._stored_bytes -= len(chunk)
                    continue
                if start <= prev_end:
                    overlap = prev_end - start
                    self._stored_bytes -= overlap
                    merged[-1][1] = prev_chunk + chunk[overlap:]
                    continue
            merged.append([start, chunk])
        self._pending = {start: chunk for start, chunk in merged}

    def _flush_pending(self, right_bound: int) -> None:
        writer = self.output
        for start, chunk in sorted(self._pending.items()):
            end = start + len(chunk)
            if end <= self._next_index:
                self._stored_bytes -= len(chunk)
                del self._pending[start]
            elif start <= self._next_index:
                left = self._next_index
                piece = chunk[left - start :]
                if end > right_bound:
                    piece = piece[: right_bound - left]
                writer.push(piece)
                self._stored_bytes -= len(chunk)
                self._next_index += len(piece)
                del self._pending[start]