from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any, List, Set

from pseudo_random.application.services.canonical_encoder import canonical_bytes
from pseudo_random.config import DEFAULT_MAX_DEPTH
from pseudo_random.domain.errors import PseudoRandomError, SeedComputationError, StructuralLimitError
from pseudo_random.domain.symbol import Symbol
from pseudo_random.domain.values import (
    FALSE,
    NULL,
    TRUE,
    ArrayValue,
    FloatValue,
    IntegerValue,
    MapEntry,
    MapValue,
    OpaqueValue,
    StringValue,
    SymbolValue,
    TimestampValue,
    Value,
    text_bytes,
)
from pseudo_random.domain.varint import to_int64


_logger = logging.getLogger(__name__)
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_BYTES_TYPES = (bytes, bytearray, memoryview)


def _type_name(obj: Any) -> str:
    return type(obj).__qualname__


def render_key(key: Any) -> bytes:
    """Display rendering used to order and write a mapping key."""
    if isinstance(key, _BYTES_TYPES):
        return bytes(key)
    try:
        return text_bytes(str(key))
    except Exception as exc:
        raise SeedComputationError(f"Could not render mapping key of type {_type_name(key)}", cause=exc) from exc


def timestamp_from_datetime(moment: datetime) -> TimestampValue:
    try:
        if moment.tzinfo is None or moment.utcoffset() is None:
            moment = moment.replace(tzinfo=timezone.utc)
        delta = moment - _EPOCH
    except Exception as exc:
        raise SeedComputationError(f"Could not read timestamp from {_type_name(moment)}", cause=exc) from exc
    seconds = delta.days * 86400 + delta.seconds
    return TimestampValue(seconds=seconds, nanoseconds=delta.microseconds * 1000)


def opaque_from_object(obj: Any) -> OpaqueValue:
    try:
        type_name = _type_name(obj)
        rendering = str(obj)
    except Exception as exc:
        raise SeedComputationError(
            f"Could not render value of type {type(obj).__name__} for seeding", cause=exc
        ) from exc
    _logger.debug("Value encoded through opaque fallback", extra={"type_name": type_name})
    return OpaqueValue(type_name=type_name, rendering=rendering)


class _Adapter:
    def __init__(self, max_depth: int) -> None:
        self.max_depth = max(1, int(max_depth))
        self._active: Set[int] = set()

    def _enter(self, obj: Any, depth: int) -> int:
        child_depth = depth + 1
        if id(obj) in self._active:
            raise StructuralLimitError(
                f"Cyclic reference through {_type_name(obj)} cannot be seeded",
                depth=child_depth,
                limit=self.max_depth,
            )
        if child_depth > self.max_depth:
            raise StructuralLimitError(
                f"Value nesting exceeds the configured maximum depth of {self.max_depth}",
                depth=child_depth,
                limit=self.max_depth,
            )
        self._active.add(id(obj))
        return child_depth

    def _leave(self, obj: Any) -> None:
        self._active.discard(id(obj))

    def convert(self, obj: Any, depth: int = 0) -> Value:
        if obj is None:
            return NULL
        if isinstance(obj, bool):
            return TRUE if obj else FALSE
        if isinstance(obj, int):
            number = int(obj)
            truncated = to_int64(number)
            if truncated != number:
                _logger.debug(
                    "Integer truncated to 64 bits for seeding",
                    extra={"bit_length": number.bit_length(), "truncated": truncated},
                )
            return IntegerValue(truncated)
        if isinstance(obj, float):
            return FloatValue(float(obj))
        if isinstance(obj, Symbol):
            return SymbolValue.from_text(str(obj))
        if isinstance(obj, str):
            return StringValue.from_text(str(obj))
        if isinstance(obj, _BYTES_TYPES):
            return StringValue(bytes(obj))
        if isinstance(obj, (list, tuple)):
            return self._array(obj, depth)
        if isinstance(obj, (set, frozenset)):
            return self._unordered(obj, depth)
        if isinstance(obj, Mapping):
            return self._map(obj, depth)
        if isinstance(obj, datetime):
            return timestamp_from_datetime(obj)
        return opaque_from_object(obj)

    def _array(self, obj: Any, depth: int) -> ArrayValue:
        child_depth = self._enter(obj, depth)
        try:
            return ArrayValue(tuple([self.convert(item, child_depth) for item in obj]))
        finally:
            self._leave(obj)

    def _unordered(self, obj: Any, depth: int) -> ArrayValue:
        child_depth = self._enter(obj, depth)
        try:
            items = [self.convert(item, child_depth) for item in obj]
        finally:
            self._leave(obj)
        items.sort(key=lambda item: canonical_bytes(item, max_depth=self.max_depth))
        return ArrayValue(tuple(items))

    def _map(self, obj: Mapping, depth: int) -> MapValue:
        child_depth = self._enter(obj, depth)
        try:
            try:
                pairs = list(obj.items())
            except Exception as exc:
                raise SeedComputationError(f"Could not iterate mapping of type {_type_name(obj)}", cause=exc) from exc
            entries: List[MapEntry] = []
            for key, val in pairs:
                entries.append(
                    MapEntry(
                        rendering=render_key(key),
                        key=self.convert(key, child_depth),
                        value=self.convert(val, child_depth),
                    )
                )
            return MapValue(tuple(entries))
        finally:
            self._leave(obj)


def from_python(obj: Any, *, max_depth: int = DEFAULT_MAX_DEPTH) -> Value:
    """Convert a host object into the seed value model.

    Failures raised by the object itself (``__str__``, ``items()``, time zone
    lookups) surface as :class:`SeedComputationError`; nesting beyond
    ``max_depth`` or a container reachable from itself raises
    :class:`StructuralLimitError`.
    """
    try:
        return _Adapter(max_depth).convert(obj)
    except PseudoRandomError:
        raise
    except RecursionError as exc:
        raise StructuralLimitError(
            "Value nesting exceeded the interpreter recursion limit",
            depth=max_depth,
            limit=max_depth,
        ) from exc
    except Exception as exc:
        raise SeedComputationError(f"Could not introspect value of type {_type_name(obj)}", cause=exc) from exc
