"""Closed set of value variants understood by the canonical encoder.

Host objects are converted into these before encoding (see
``pseudo_random.application.services.value_adapter``); the encoder itself only
ever matches on the classes defined here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union


TEXT_ENCODING = "utf-8"
TEXT_ERRORS = "surrogatepass"


def text_bytes(text: str) -> bytes:
    return text.encode(TEXT_ENCODING, TEXT_ERRORS)


@dataclass(frozen=True)
class NullValue:
    pass


@dataclass(frozen=True)
class BoolValue:
    flag: bool


@dataclass(frozen=True)
class IntegerValue:
    number: int


@dataclass(frozen=True)
class FloatValue:
    number: float


@dataclass(frozen=True)
class StringValue:
    data: bytes

    @classmethod
    def from_text(cls, text: str) -> "StringValue":
        return cls(text_bytes(text))


@dataclass(frozen=True)
class SymbolValue:
    name: bytes

    @classmethod
    def from_text(cls, text: str) -> "SymbolValue":
        return cls(text_bytes(text))


@dataclass(frozen=True)
class ArrayValue:
    items: Tuple["Value", ...] = ()


@dataclass(frozen=True)
class MapEntry:
    """One key/value pair plus the key's display rendering.

    ``rendering`` is what the encoder writes and sorts by; ``key`` keeps the
    original key so entries whose renderings collide remain distinct.
    """

    rendering: bytes
    key: "Value"
    value: "Value"


@dataclass(frozen=True)
class MapValue:
    entries: Tuple[MapEntry, ...] = ()


@dataclass(frozen=True)
class TimestampValue:
    seconds: int
    nanoseconds: int = 0


@dataclass(frozen=True)
class OpaqueValue:
    type_name: str
    rendering: str

    @property
    def payload(self) -> bytes:
        return text_bytes(f"{self.type_name}:{self.rendering}")


NULL = NullValue()
TRUE = BoolValue(True)
FALSE = BoolValue(False)


Value = Union[
    NullValue,
    BoolValue,
    IntegerValue,
    FloatValue,
    StringValue,
    SymbolValue,
    ArrayValue,
    MapValue,
    TimestampValue,
    OpaqueValue,
]
