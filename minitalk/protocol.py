"""Bit-level framing of messages carried by SIGUSR1 (one) and SIGUSR2 (zero)."""

from __future__ import annotations

from collections.abc import Hashable, Iterator

PID_MIN = 100
PID_MAX_LIMIT = 99999


def byte_bits(byte: int) -> Iterator[int]:
    """Yield the eight bits of ``byte``, most significant first."""
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"not a byte: {byte}")
    for shift in range(7, -1, -1):
        yield (byte >> shift) & 1


def encode_message(message: str | bytes) -> Iterator[int]:
    """Yield the bits of ``message`` followed by a terminating zero byte."""
    data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    for byte in (*data, 0):
        yield from byte_bits(byte)


class BitDecoder:
    """Reassemble bytes from single bits; a new sender restarts the byte."""

    def __init__(self) -> None:
        self._sender: Hashable | None = None
        self.reset()

    def reset(self) -> None:
        """Discard any partially received byte."""
        self._value = 0
        self._count = 0

    def feed(self, sender: Hashable, bit: int | bool) -> int | None:
        """Add one bit from ``sender``; return the byte once eight have arrived."""
        if sender != self._sender:
            self.reset()
            self._sender = sender
        self._value = (self._value << 1) | (1 if bit else 0)
        self._count += 1
        if self._count < 8:
            return None
        byte = self._value
        self.reset()
        return byte