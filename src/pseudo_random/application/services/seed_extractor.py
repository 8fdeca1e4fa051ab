from __future__ import annotations

from pseudo_random.application.services.canonical_encoder import encode
from pseudo_random.config import DEFAULT_MAX_DEPTH
from pseudo_random.domain.errors import StructuralLimitError
from pseudo_random.domain.fnv import Fnv1aHasher
from pseudo_random.domain.values import Value


SEED_MASK = 0x7FFF_FFFF
MAX_SEED = SEED_MASK


def fold_digest(digest: int) -> int:
    """Fold a 64-bit digest to 32 bits and clear the sign bit."""
    folded = (digest ^ (digest >> 32)) & 0xFFFF_FFFF
    return folded & SEED_MASK


def seed_for(
    value: Value,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
    strict_map_keys: bool = False,
) -> int:
    buffer = bytearray()
    try:
        encode(value, buffer, max_depth=max_depth, strict_map_keys=strict_map_keys)
    except RecursionError as exc:
        raise StructuralLimitError(
            "Value nesting exceeded the interpreter recursion limit",
            depth=max_depth,
            limit=max_depth,
        ) from exc

    hasher = Fnv1aHasher()
    hasher.update(buffer)
    return fold_digest(hasher.digest())
