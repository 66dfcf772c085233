"""Bit-level wire format: each byte travels as eight signals, most significant bit first.

A 0 bit is sent as SIGUSR1 and a 1 bit as SIGUSR2. A message is terminated by
a newline before sending.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

BITS_PER_BYTE = 8
TERMINATOR = b"\n"


def encode_byte(value: int) -> list[int]:
    """Return the eight bits of ``value``, most significant first."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an int, got {type(value).__name__}")
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte value out of range: {value}")
    return [(value >> shift) & 1 for shift in range(BITS_PER_BYTE - 1, -1, -1)]


def encode_message(message: str | bytes) -> list[int]:
    """Return the bits for ``message`` followed by a newline.

    Text is encoded as UTF-8.
    """
    data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    return [bit for byte in data + TERMINATOR for bit in encode_byte(byte)]


@dataclass
class Decoder:
    """Assembles incoming bits into bytes."""

    _value: int = field(default=0, init=False, repr=False)
    _count: int = field(default=0, init=False, repr=False)

    def feed(self, bit: int) -> int | None:
        """Take one bit; return the completed byte after every eighth bit, else None."""
        if bit not in (0, 1) or isinstance(bit, bool):
            raise ValueError(f"bit must be 0 or 1, got {bit!r}")
        self._value = (self._value << 1) | bit
        self._count += 1
        if self._count < BITS_PER_BYTE:
            return None
        byte = self._value
        self.reset()
        return byte

    def reset(self) -> None:
        """Drop any partially received byte."""
        self._value = 0
        self._count = 0

    @property
    def pending(self) -> int:
        """Number of bits received towards the current byte."""
        return self._count


def decode(bits: Iterable[int]) -> bytes:
    """Decode a bit stream into the complete bytes it holds; trailing partial bits are ignored."""
    decoder = Decoder()
    out = bytearray()
    for bit in bits:
        byte = decoder.feed(bit)
        if byte is not None:
            out.append(byte)
    return bytes(out)