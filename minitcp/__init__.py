"""Core pieces of a TCP endpoint: sequence numbers, byte streams, reassembly, sender and receiver."""

__version__ = "0.1.0"
__all__ = ["byte_stream", "messages", "reassembler", "receiver", "sender", "wrapping"]