# minitcp

The core state machines of a TCP endpoint, in pure Python with no
dependencies:

- `minitcp.wrapping.Wrap32`: 32-bit sequence numbers that wrap around.
  `Wrap32.wrap(n, zero_point)` turns a 64-bit absolute sequence number into a
  `Wrap32`; `unwrap(zero_point, checkpoint)` returns the absolute sequence
  number that wraps to it and lies closest to `checkpoint`.
- `minitcp.byte_stream.ByteStream`: a bounded in-memory byte pipe. The writing
  side has `push`, `close`, `is_closed`, `available_capacity` and
  `bytes_pushed`; the reading side has `peek`, `pop`, `is_finished`,
  `bytes_buffered` and `bytes_popped`; `set_error` and `has_error` mark a
  failed stream. `read(stream, length)` peeks and pops up to `length` bytes.
- `minitcp.reassembler.Reassembler`: takes indexed, possibly overlapping and
  out-of-order substrings with `insert(first_index, data, is_last_substring)`
  and writes them in order into its `output` stream. Bytes beyond the stream's
  capacity are dropped; `bytes_pending()` counts the bytes held back waiting
  for a gap to be filled. The stream is closed once the last byte is written.
- `minitcp.messages`: the dataclasses `TCPSenderMessage` (`seqno`, `syn`,
  `payload`, `fin`, `rst`, and `sequence_length()`) and `TCPReceiverMessage`
  (`ackno`, `window_size`, `rst`).
- `minitcp.receiver.TCPReceiver`: feeds incoming `TCPSenderMessage`s into a
  `Reassembler` and builds the acknowledgement and window advertisement with
  `send()`. The advertised window is capped at 65535.
- `minitcp.sender.TCPSender`: cuts an outbound `ByteStream` into segments of
  at most `MAX_PAYLOAD_SIZE` (1000) payload bytes, respects the peer's window,
  probes a zero window with one sequence number, and retransmits the oldest
  unacknowledged segment with exponential back-off.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Sequence numbers:

```python
from minitcp.wrapping import Wrap32

isn = Wrap32(15)
seqno = Wrap32.wrap(3 * 2**32 + 17, isn)   # equals Wrap32(32)
seqno.unwrap(isn, 3 * 2**32)                # 3 * 2**32 + 17
```

A byte stream:

```python
from minitcp.byte_stream import ByteStream, read

stream = ByteStream(8)
stream.push(b"hello world")   # only b"hello wo" fits
stream.close()
read(stream, 5)               # b"hello"
stream.bytes_buffered()       # 3
```

Reassembly:

```python
from minitcp.byte_stream import ByteStream, read
from minitcp.reassembler import Reassembler

reassembler = Reassembler(ByteStream(64))
reassembler.insert(3, b"def", False)
reassembler.bytes_pending()            # 3
reassembler.insert(0, b"abc", True)
read(reassembler.output, 64)           # b"abcdef"
reassembler.output.is_closed()         # True
```

Receiving:

```python
from minitcp.byte_stream import ByteStream
from minitcp.messages import TCPSenderMessage
from minitcp.reassembler import Reassembler
from minitcp.receiver import TCPReceiver
from minitcp.wrapping import Wrap32

receiver = TCPReceiver(Reassembler(ByteStream(1000)))
receiver.receive(TCPSenderMessage(seqno=Wrap32(5), syn=True, payload=b"hi"))
reply = receiver.send()
reply.ackno        # equals Wrap32(8)
reply.window_size  # 998
```

Sending: the sender hands each segment to a callable you provide.

```python
from minitcp.byte_stream import ByteStream
from minitcp.sender import TCPSender
from minitcp.wrapping import Wrap32

sent = []
sender = TCPSender(ByteStream(64000), Wrap32(0), 1000)
sender.push(sent.append)              # sends the SYN segment
sender.tick(1000, sent.append)        # retransmits it after the RTO
sender.consecutive_retransmissions()  # 1
```

## What it does not do

The package only models the endpoint's logic. It opens no sockets, does not
encode segments into or decode them from wire bytes, and has no IP, Ethernet
or routing layer: moving `TCPSenderMessage`s and `TCPReceiverMessage`s between
a sender and a receiver is left to the caller. There is no command-line tool.