from __future__ import annotations

import random
import string
from typing import Any

from pseudo_random.application.services.seed_policy import to_seed_int


ALPHABETIC_CHARS = string.ascii_uppercase + string.ascii_lowercase
ALPHANUMERIC_CHARS = ALPHABETIC_CHARS + string.digits

_HEX_CHUNK = 8
_ALPHABETIC_CHUNK = 3
_ALPHANUMERIC_CHUNK = 5


def _require_length(length: Any) -> int:
    if isinstance(length, bool) or not isinstance(length, int) or length < 0:
        raise ValueError("Length must be a non-negative integer")
    return length


class Generator:
    """Pseudo-random generator seeded from an arbitrary value.

    The seed goes through :func:`to_seed_int`, so ``Generator({"a": 1})`` and
    ``Generator({"a": 1})`` built in different processes draw the same sequence.
    """

    def __init__(self, seed: Any = None) -> None:
        self.seed_value = to_seed_int(seed)
        self._random = random.Random(self.seed_value)

    def rand(self, max: Any = None) -> Any:
        if max is None:
            return self._random.random()
        if isinstance(max, bool):
            raise TypeError("rand() bound must be an int, float or range")
        if isinstance(max, int):
            if max <= 0:
                raise ValueError(f"rand() bound must be positive, got {max}")
            return self._random.randrange(max)
        if isinstance(max, float):
            if not max > 0.0:
                raise ValueError(f"rand() bound must be positive, got {max}")
            return self._random.random() * max
        if isinstance(max, range):
            if len(max) == 0:
                raise ValueError("rand() range must not be empty")
            return max[self._random.randrange(len(max))]
        raise TypeError("rand() bound must be an int, float or range")

    def _base_n(self, length: int, alphabet: str, chunk_size: int) -> str:
        base = len(alphabet)
        chunks: list[str] = []
        remaining = length
        while remaining > 0:
            size = min(chunk_size, remaining)
            number = self._random.randrange(base**size)
            digits = []
            for _ in range(size):
                number, index = divmod(number, base)
                digits.append(alphabet[index])
            chunks.append("".join(reversed(digits)))
            remaining -= size
        return "".join(chunks)

    def hex(self, length: int) -> str:
        remaining = _require_length(length)
        chunks: list[str] = []
        while remaining > 0:
            chunk = format(self._random.getrandbits(32), "08x")
            chunks.append(chunk[: min(_HEX_CHUNK, remaining)])
            remaining -= _HEX_CHUNK
        return "".join(chunks)

    def alphabetic(self, length: int) -> str:
        return self._base_n(_require_length(length), ALPHABETIC_CHARS, _ALPHABETIC_CHUNK)

    def alphanumeric(self, length: int) -> str:
        return self._base_n(_require_length(length), ALPHANUMERIC_CHARS, _ALPHANUMERIC_CHUNK)


def new(seed: Any = None) -> Generator:
    return Generator(seed)


def rand(seed: Any) -> float:
    return Generator(seed).rand()
