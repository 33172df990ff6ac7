"""The receiving side of a TCP connection."""

from __future__ import annotations

from minitcp.byte_stream import ByteStream
from minitcp.messages import TCPReceiverMessage, TCPSenderMessage
from minitcp.reassembler import Reassembler
from minitcp.wrapping import Wrap32

_MAX_WINDOW = 0xFFFF
_MASK64 = (1 << 64) - 1


class TCPReceiver:
    """Feeds incoming segments into a reassembler and reports acknowledgments."""

    def __init__(self, reassembler: Reassembler) -> None:
        self.reassembler = reassembler
        self._connected = False
        self._ack_number = 0
        self._isn = Wrap32(0)

    @property
    def stream(self) -> ByteStream:
        """The byte stream the reassembled data is written to."""
        return self.reassembler.output

    def receive(self, message: TCPSenderMessage) -> None:
        """Insert the payload of ``message`` at its place in the stream."""
        if message.rst:
            self._connected = False
            self.stream.set_error()
            return

        if message.syn and not self._connected:
            self._connected = True
            self._isn = message.seqno
            self._ack_number = 1
        elif not self._connected:
            return

        if message.syn:
            first_index = 0
        else:
            absolute = message.seqno.unwrap(self._isn, self._ack_number)
            first_index = (absolute - 1) & _MASK64

        self.reassembler.insert(first_index, message.payload, message.fin)

        self._ack_number = self.stream.bytes_pushed() + 1
        if self.stream.is_closed():
            self._ack_number += 1

    def send(self) -> TCPReceiverMessage:
        """Build the acknowledgment and window advertisement for the peer."""
        ackno = Wrap32.wrap(self._ack_number, self._isn) if self._ack_number != 0 else None
        return TCPReceiverMessage(
            ackno=ackno,
            window_size=min(self.stream.available_capacity(), _MAX_WINDOW),
            rst=self.stream.has_error(),
        )