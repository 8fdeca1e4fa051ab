from __future__ import annotations

from typing import Iterable


FNV_OFFSET = 0xCBF29CE484222325
FNV_PRIME = 0x100000001B3
_MASK64 = 0xFFFF_FFFF_FFFF_FFFF


class Fnv1aHasher:
    """64-bit FNV-1a accumulator fed one byte at a time."""

    def __init__(self) -> None:
        self._state = FNV_OFFSET

    def update(self, data: Iterable[int]) -> None:
        state = self._state
        for byte in data:
            state ^= byte
            state = (state * FNV_PRIME) & _MASK64
        self._state = state

    def digest(self) -> int:
        return self._state


def fnv1a_64(data: bytes | bytearray) -> int:
    hasher = Fnv1aHasher()
    hasher.update(data)
    return hasher.digest()
