"""The PCG32 random number generator with independent streams."""

from __future__ import annotations

import struct

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF
_MULTIPLIER = 6364136223846793005
_DEFAULT_SEED = 0x31E241F862A1FB5E


class Pcg32:
    """A PCG32 (XSH RR) generator; each stream id gives an independent sequence."""

    __slots__ = ("state", "inc")

    def __init__(self, stream_id: int = 1, seed: int = _DEFAULT_SEED) -> None:
        self.state = 0
        self.inc = ((stream_id << 1) | 1) & _MASK64
        self.next_uint32()
        self.state = (self.state + seed) & _MASK64
        self.next_uint32()

    def next_uint32(self) -> int:
        """Advance the generator and return a 32-bit unsigned integer."""
        old = self.state
        self.state = (old * _MULTIPLIER + (self.inc | 1)) & _MASK64
        xorshifted = (((old >> 18) ^ old) >> 27) & _MASK32
        rot = old >> 59
        return ((xorshifted >> rot) | (xorshifted << ((-rot) & 31))) & _MASK32

    def next_float(self) -> float:
        """A single-precision uniform number in [0, 1)."""
        bits = (self.next_uint32() >> 9) | 0x3F800000
        return struct.unpack("<f", struct.pack("<I", bits))[0] - 1.0

    def next_double(self) -> float:
        """A double-precision uniform number in [0, 1)."""
        bits = (self.next_uint32() << 20) | 0x3FF0000000000000
        return struct.unpack("<d", struct.pack("<Q", bits))[0] - 1.0