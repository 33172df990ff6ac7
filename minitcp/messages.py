"""Messages exchanged between the sending and the receiving side of a TCP peer."""

from __future__ import annotations

from dataclasses import dataclass, field

from minitcp.wrapping import Wrap32


@dataclass
class TCPSenderMessage:
    """A segment sent by a TCP sender: sequence number, flags and payload."""

    seqno: Wrap32 = field(default_factory=Wrap32)
    syn: bool = False
    payload: bytes = b""
    fin: bool = False
    rst: bool = False

    def sequence_length(self) -> int:
        """How many sequence numbers the segment occupies (SYN and FIN count one each)."""
        return int(self.syn) + len(self.payload) + int(self.fin)


@dataclass
class TCPReceiverMessage:
    """An acknowledgment and window advertisement sent by a TCP receiver."""

    ackno: Wrap32 | None = None
    window_size: int = 0
    rst: bool = False