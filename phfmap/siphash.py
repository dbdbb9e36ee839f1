"""SipHash-1-3 with a 128-bit output, used to hash keys for perfect hashing."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Hash128", "SipHasher13"]

_MASK64 = (1 << 64) - 1


def _rotl(value: int, bits: int) -> int:
    return ((value << bits) | (value >> (64 - bits))) & _MASK64


def _sip_round(v0: int, v1: int, v2: int, v3: int) -> tuple[int, int, int, int]:
    v0 = (v0 + v1) & _MASK64
    v1 = _rotl(v1, 13) ^ v0
    v0 = _rotl(v0, 32)
    v2 = (v2 + v3) & _MASK64
    v3 = _rotl(v3, 16) ^ v2
    v0 = (v0 + v3) & _MASK64
    v3 = _rotl(v3, 21) ^ v0
    v2 = (v2 + v1) & _MASK64
    v1 = _rotl(v1, 17) ^ v2
    v2 = _rotl(v2, 32)
    return v0, v1, v2, v3


def _check_width(value: int, bits: int) -> int:
    if not 0 <= value < (1 << bits):
        raise ValueError(f"{value} does not fit in an unsigned {bits}-bit integer")
    return value


@dataclass(frozen=True)
class Hash128:
    """The two 64-bit halves of a 128-bit SipHash result."""

    h1: int
    h2: int

    def as_int(self) -> int:
        """Return the result as one 128-bit integer, ``h1`` in the low half."""
        return self.h1 | (self.h2 << 64)


class SipHasher13:
    """Streaming SipHash-1-3 hasher producing 128-bit digests."""

    __slots__ = ("_state", "_tail", "_length")

    def __init__(self, key0: int = 0, key1: int = 0) -> None:
        _check_width(key0, 64)
        _check_width(key1, 64)
        self._state = (
            key0 ^ 0x736F6D6570736575,
            key1 ^ 0x646F72616E646F6D ^ 0xEE,
            key0 ^ 0x6C7967656E657261,
            key1 ^ 0x7465646279746573,
        )
        self._tail = b""
        self._length = 0

    def write(self, data: bytes | bytearray | memoryview) -> None:
        """Feed raw bytes into the hasher."""
        data = bytes(data)
        self._length += len(data)
        buffer = self._tail + data
        full = len(buffer) - len(buffer) % 8
        v0, v1, v2, v3 = self._state
        for offset in range(0, full, 8):
            word = int.from_bytes(buffer[offset:offset + 8], "little")
            v3 ^= word
            v0, v1, v2, v3 = _sip_round(v0, v1, v2, v3)
            v0 ^= word
        self._state = (v0, v1, v2, v3)
        self._tail = buffer[full:]

    def write_u8(self, value: int) -> None:
        """Feed one unsigned byte."""
        self.write(_check_width(value, 8).to_bytes(1, "little"))

    def write_u16(self, value: int) -> None:
        """Feed an unsigned 16-bit integer, little-endian."""
        self.write(_check_width(value, 16).to_bytes(2, "little"))

    def write_u32(self, value: int) -> None:
        """Feed an unsigned 32-bit integer, little-endian."""
        self.write(_check_width(value, 32).to_bytes(4, "little"))

    def write_u64(self, value: int) -> None:
        """Feed an unsigned 64-bit integer, little-endian."""
        self.write(_check_width(value, 64).to_bytes(8, "little"))

    def write_usize(self, value: int) -> None:
        """Feed a pointer-sized (64-bit) unsigned integer, little-endian."""
        self.write_u64(value)

    def finish128(self) -> Hash128:
        """Return the digest of everything written so far; the hasher stays usable."""
        v0, v1, v2, v3 = self._state
        last = ((self._length & 0xFF) << 56) | int.from_bytes(self._tail, "little")
        v3 ^= last
        v0, v1, v2, v3 = _sip_round(v0, v1, v2, v3)
        v0 ^= last
        v2 ^= 0xEE
        for _ in range(3):
            v0, v1, v2, v3 = _sip_round(v0, v1, v2, v3)
        h1 = v0 ^ v1 ^ v2 ^ v3
        v1 ^= 0xDD
        for _ in range(3):
            v0, v1, v2, v3 = _sip_round(v0, v1, v2, v3)
        h2 = v0 ^ v1 ^ v2 ^ v3
        return Hash128(h1, h2)