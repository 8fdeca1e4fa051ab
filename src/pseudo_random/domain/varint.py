from __future__ import annotations


MASK64 = 0xFFFF_FFFF_FFFF_FFFF
_INT64_SIGN = 1 << 63


def to_int64(value: int) -> int:
    """Reinterpret an arbitrary-precision int as a signed 64-bit integer.

    Bits above the low 64 are dropped, so ``2**64 + 5`` becomes ``5`` and
    ``2**63`` becomes ``-2**63``.
    """
    truncated = int(value) & MASK64
    if truncated & _INT64_SIGN:
        return truncated - (1 << 64)
    return truncated


def to_uint64(value: int) -> int:
    return int(value) & MASK64


def zigzag(value: int) -> int:
    n = to_int64(value)
    if n >= 0:
        return n << 1
    return ((-n) << 1) - 1


def encode_varint(value: int) -> bytes:
    num = int(value)
    if num < 0:
        raise ValueError("negative varint")
    if num > MASK64:
        raise ValueError("varint exceeds 64 bits")

    out = bytearray()
    while True:
        byte = num & 0x7F
        num >>= 7
        if num == 0:
            out.append(byte)
            return bytes(out)
        out.append(byte | 0x80)
