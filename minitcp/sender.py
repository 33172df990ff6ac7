"""The sending side of a TCP connection."""

from __future__ import annotations

from collections import deque
from typing import Callable

from minitcp.byte_stream import ByteStream, read
from minitcp.messages import TCPReceiverMessage, TCPSenderMessage
from minitcp.wrapping import Wrap32

MAX_PAYLOAD_SIZE = 1000
"""Largest payload carried by a single segment."""

_MASK32 = (1 << 32) - 1

Transmit = Callable[[TCPSenderMessage], None]


class TCPSender:
    """Turns an outbound byte stream into segments, tracking and retransmitting them."""

    def __init__(self, stream: ByteStream, isn: Wrap32, initial_rto_ms: int) -> None:
        self.stream = stream
        self._isn = isn
        self._next_seqno = isn
        self._initial_rto_ms = initial_rto_ms
        self._rto_ms = initial_rto_ms
        self._timer_ms = 0
        self._retransmissions = 0
        # The receiver's advertised window; one sequence number before any is known.
        self._window_size = 1
        self._outstanding: deque[TCPSenderMessage] = deque()
        self._in_flight = 0
        self._fin_sent = False

    def sequence_numbers_in_flight(self) -> int:
        """How many sequence numbers are sent but not yet acknowledged."""
        return self._in_flight

    def consecutive_retransmissions(self) -> int:
        """How many retransmissions have happened since the last new acknowledgment."""
        return self._retransmissions

    def make_empty_message(self) -> TCPSenderMessage:
        """Build a segment that occupies no sequence numbers."""
        return TCPSenderMessage(seqno=self._next_seqno, rst=self.stream.has_error())

    def push(self, transmit: Transmit) -> None:
        """Send as many segments as the receiver's window allows."""
        connected = self._next_seqno != self._isn
        if not self.stream.bytes_buffered() and connected and self._fin_sent:
            return

        while True:
            segment = TCPSenderMessage(syn=self._next_seqno == self._isn)
            window = self._window_size
            available = max(window - self._in_flight, 0)

            # A zero window is probed as if it had room for one sequence number.
            if window == 0:
                if self._in_flight:
                    break
                available = 1

            limit = min(MAX_PAYLOAD_SIZE, available)
            segment.payload = read(self.stream, max(limit - int(segment.syn), 0))

            if (
                self.stream.is_closed()
                and not self._fin_sent
                and not self.stream.bytes_buffered()
                and available - len(segment.payload) >= 1
            ):
                segment.fin = True
                self._fin_sent = True

            segment.rst = self.stream.has_error()
            length = segment.sequence_length()
            if length == 0:
                break

            segment.seqno = self._next_seqno
            self._next_seqno = self._next_seqno + length
            self._in_flight += length
            self._outstanding.append(segment)
            transmit(segment)

            if window == 0:
                break

    def receive(self, msg: TCPReceiverMessage) -> None:
        """Process an acknowledgment and window advertisement from the peer."""
        if msg.ackno is None:
            if msg.window_size == 0:
                self.stream.set_error()
            if not self._outstanding:
                self._timer_ms = 0
            self._window_size = msg.window_size & _MASK32
            return

        # An acknowledgment of data never sent is ignored entirely.
        if msg.ackno > self._next_seqno:
            return

        while self._outstanding:
            first = self._outstanding[0]
            if msg.ackno >= first.seqno + first.sequence_length():
                self._rto_ms = self._initial_rto_ms
                self._retransmissions = 0
                self._timer_ms = 0
                self._in_flight -= first.sequence_length()
                self._outstanding.popleft()
            else:
                break

        if not self._outstanding:
            self._timer_ms = 0

        self._window_size = msg.window_size & _MASK32

    def tick(self, ms_since_last_tick: int, transmit: Transmit) -> None:
        """Advance the retransmission timer, resending the oldest segment on expiry."""
        if self._outstanding:
            self._timer_ms += ms_since_last_tick

        if self._timer_ms >= self._rto_ms:
            zero_window = self._window_size == 0
            if self._outstanding:
                transmit(self._outstanding[0])
                if zero_window:
                    self._rto_ms += self._initial_rto_ms
                else:
                    self._rto_ms *= 2
                self._retransmissions += 1
            if not zero_window:
                self._timer_ms = 0