from __future__ import annotations

import struct
from itertools import groupby
from typing import List

from pseudo_random.config import DEFAULT_MAX_DEPTH
from pseudo_random.domain.errors import MapKeyCollisionError, StructuralLimitError
from pseudo_random.domain.values import (
    ArrayValue,
    BoolValue,
    FloatValue,
    IntegerValue,
    MapEntry,
    MapValue,
    NullValue,
    OpaqueValue,
    StringValue,
    SymbolValue,
    TimestampValue,
    Value,
)
from pseudo_random.domain.varint import encode_varint, to_uint64, zigzag


TAG_NULL = b"n"
TAG_TRUE = b"t"
TAG_FALSE = b"f"
TAG_INTEGER = b"i"
TAG_FLOAT = b"d"
TAG_STRING = b"s"
TAG_SYMBOL = b"y"
TAG_ARRAY = b"a"
TAG_MAP = b"h"
TAG_TIMESTAMP = b"T"
TAG_OPAQUE = b"o"


def _append_sized(buffer: bytearray, tag: bytes, data: bytes) -> None:
    buffer += tag
    buffer += encode_varint(len(data))
    buffer += data


def _enter(depth: int, max_depth: int) -> int:
    child_depth = depth + 1
    if child_depth > max_depth:
        raise StructuralLimitError(
            f"Value nesting exceeds the configured maximum depth of {max_depth}",
            depth=child_depth,
            limit=max_depth,
        )
    return child_depth


def _ordered_entries(entries: tuple[MapEntry, ...], *, depth: int, max_depth: int, strict_map_keys: bool) -> List[MapEntry]:
    ordered: List[MapEntry] = []
    by_rendering = sorted(entries, key=lambda entry: entry.rendering)
    for rendering, group in groupby(by_rendering, key=lambda entry: entry.rendering):
        colliding = list(group)
        if len(colliding) == 1:
            ordered.extend(colliding)
            continue
        if strict_map_keys:
            raise MapKeyCollisionError(rendering)
        # Equal renderings: order by the entries' own encodings so insertion order still cannot leak in.
        colliding.sort(
            key=lambda entry: (
                _encoded(entry.key, depth=depth, max_depth=max_depth, strict_map_keys=strict_map_keys),
                _encoded(entry.value, depth=depth, max_depth=max_depth, strict_map_keys=strict_map_keys),
            )
        )
        ordered.extend(colliding)
    return ordered


def _encoded(value: Value, *, depth: int, max_depth: int, strict_map_keys: bool) -> bytes:
    scratch = bytearray()
    encode(value, scratch, depth=depth, max_depth=max_depth, strict_map_keys=strict_map_keys)
    return bytes(scratch)


def encode(
    value: Value,
    buffer: bytearray,
    *,
    depth: int = 0,
    max_depth: int = DEFAULT_MAX_DEPTH,
    strict_map_keys: bool = False,
) -> None:
    """Append the canonical, self-delimiting encoding of ``value`` to ``buffer``.

    Every value starts with a one-byte tag. Integers, lengths and timestamp
    fields are varints; integers are zigzagged first. Map entries are written
    in byte-wise order of their key renderings, each key written as a string
    carrying that rendering rather than as the original key.

    ``depth`` is the number of containers already entered; entering one more
    than ``max_depth`` raises :class:`StructuralLimitError`.
    """
    if isinstance(value, NullValue):
        buffer += TAG_NULL
    elif isinstance(value, BoolValue):
        buffer += TAG_TRUE if value.flag else TAG_FALSE
    elif isinstance(value, IntegerValue):
        buffer += TAG_INTEGER
        buffer += encode_varint(zigzag(value.number))
    elif isinstance(value, FloatValue):
        buffer += TAG_FLOAT
        buffer += struct.pack(">d", value.number)
    elif isinstance(value, StringValue):
        _append_sized(buffer, TAG_STRING, value.data)
    elif isinstance(value, SymbolValue):
        _append_sized(buffer, TAG_SYMBOL, value.name)
    elif isinstance(value, ArrayValue):
        child_depth = _enter(depth, max_depth)
        buffer += TAG_ARRAY
        buffer += encode_varint(len(value.items))
        for item in value.items:
            encode(item, buffer, depth=child_depth, max_depth=max_depth, strict_map_keys=strict_map_keys)
    elif isinstance(value, MapValue):
        child_depth = _enter(depth, max_depth)
        buffer += TAG_MAP
        buffer += encode_varint(len(value.entries))
        for entry in _ordered_entries(
            value.entries, depth=child_depth, max_depth=max_depth, strict_map_keys=strict_map_keys
        ):
            _append_sized(buffer, TAG_STRING, entry.rendering)
            encode(entry.value, buffer, depth=child_depth, max_depth=max_depth, strict_map_keys=strict_map_keys)
    elif isinstance(value, TimestampValue):
        buffer += TAG_TIMESTAMP
        buffer += encode_varint(to_uint64(value.seconds))
        buffer += encode_varint(to_uint64(value.nanoseconds))
    elif isinstance(value, OpaqueValue):
        _append_sized(buffer, TAG_OPAQUE, value.payload)
    else:
        raise TypeError(f"Not a seed value variant: {type(value).__name__}")


def canonical_bytes(
    value: Value,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
    strict_map_keys: bool = False,
) -> bytes:
    buffer = bytearray()
    encode(value, buffer, max_depth=max_depth, strict_map_keys=strict_map_keys)
    return bytes(buffer)
