import pytest

from minitalk.protocol import (
    BitDecoder,
    byte_bits,
    encode_message,
)


def _decode(bits, sender=1):
    decoder = BitDecoder()
    out = bytearray()
    for bit in bits:
        byte = decoder.feed(sender, bit)
        if byte is not None:
            out.append(byte)
    return bytes(out)


@pytest.mark.parametrize("byte", [0, 1, 0x41, 0x80, 0xFF])
def test_byte_bits_msb_first(byte):
    bits = list(byte_bits(byte))
    assert len(bits) == 8
    assert "".join(map(str, bits)) == format(byte, "08b")


@pytest.mark.parametrize("byte", [-1, 256])
def test_byte_bits_rejects_non_bytes(byte):
    with pytest.raises(ValueError):
        list(byte_bits(byte))


def test_encode_message_terminator():
    bits = list(encode_message("hi"))
    assert len(bits) == 8 * 3
    assert bits[-8:] == [0] * 8


def test_encode_decode_round_trip_text():
    message = "Hello, world — ünïcode"
    assert _decode(encode_message(message)) == message.encode("utf-8") + b"\0"


def test_encode_decode_round_trip_bytes():
    data = bytes(range(1, 256))
    assert _decode(encode_message(data)) == data + b"\0"


def test_partial_byte_returns_none():
    decoder = BitDecoder()
    results = [decoder.feed(7, 1) for _ in range(7)]
    assert results == [None] * 7
    assert decoder.feed(7, 1) == 0xFF


def test_new_sender_restarts_byte():
    decoder = BitDecoder()
    for _ in range(5):
        decoder.feed(1, 1)
    results = [decoder.feed(2, bit) for bit in byte_bits(ord("A"))]
    assert results[-1] == ord("A")
    assert results[:-1] == [None] * 7


def test_reset_discards_partial_byte():
    decoder = BitDecoder()
    for _ in range(3):
        decoder.feed(1, 1)
    decoder.reset()
    results = [decoder.feed(1, bit) for bit in byte_bits(0x10)]
    assert results[-1] == 0x10