from hypothesis import given
from hypothesis import strategies as st

from minitcp.messages import TCPReceiverMessage, TCPSenderMessage
from minitcp.wrapping import Wrap32


def test_empty_sender_message_occupies_no_sequence_numbers():
    assert TCPSenderMessage().sequence_length() == 0


def test_sender_message_defaults():
    msg = TCPSenderMessage()
    assert msg.seqno == Wrap32(0)
    assert msg.payload == b""
    assert (msg.syn, msg.fin, msg.rst) == (False, False, False)


def test_rst_does_not_occupy_sequence_space():
    assert TCPSenderMessage(rst=True).sequence_length() == 0


@given(st.binary(max_size=200), st.booleans(), st.booleans())
def test_sequence_length_counts_payload_and_flags(payload, syn, fin):
    plain = TCPSenderMessage(payload=payload)
    flagged = TCPSenderMessage(payload=payload, syn=syn, fin=fin)
    assert plain.sequence_length() == len(payload)
    assert flagged.sequence_length() - plain.sequence_length() == int(syn) + int(fin)


def test_syn_and_fin_each_count_one():
    base = TCPSenderMessage(payload=b"abc").sequence_length()
    assert TCPSenderMessage(payload=b"abc", syn=True).sequence_length() == base + 1
    assert TCPSenderMessage(payload=b"abc", fin=True).sequence_length() == base + 1


def test_receiver_message_defaults():
    msg = TCPReceiverMessage()
    assert msg.ackno is None
    assert msg.window_size == 0
    assert msg.rst is False


def test_receiver_message_equality():
    assert TCPReceiverMessage(Wrap32(5), 10) == TCPReceiverMessage(ackno=Wrap32(5), window_size=10)
    assert TCPReceiverMessage(Wrap32(5), 10) != TCPReceiverMessage(Wrap32(6), 10)