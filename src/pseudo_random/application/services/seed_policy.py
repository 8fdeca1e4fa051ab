from __future__ import annotations

import logging
import random
from typing import Any, Mapping

from pseudo_random.application.services.seed_extractor import seed_for
from pseudo_random.application.services.value_adapter import from_python
from pseudo_random.config import load_settings


_logger = logging.getLogger(__name__)


def to_seed_int(obj: Any, *, max_depth: int | None = None, strict_map_keys: bool | None = None) -> int:
    """Reduce any host value to a deterministic seed in ``[0, 2**31 - 1]``.

    Equal value trees give equal seeds on any machine or process; mapping
    insertion order is ignored, sequence order is not.
    """
    settings = load_settings().with_overrides(max_depth=max_depth, strict_map_keys=strict_map_keys)
    value = from_python(obj, max_depth=settings.max_depth)
    return seed_for(value, max_depth=settings.max_depth, strict_map_keys=settings.strict_map_keys)


def derive_seed(namespace: str, context: Mapping[str, Any]) -> int:
    seed = to_seed_int({"namespace": str(namespace), "context": context})
    _logger.debug("Derived namespaced seed", extra={"namespace": str(namespace), "seed": seed})
    return seed


def derive_rng(namespace: str, context: Mapping[str, Any]) -> random.Random:
    return random.Random(derive_seed(namespace, context))
