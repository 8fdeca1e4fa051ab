from __future__ import annotations

import os
from dataclasses import dataclass


DEFAULT_MAX_DEPTH = 128
DEFAULT_LOG_LEVEL = "WARNING"


def _is_truthy(value: str | None, *, default: str) -> bool:
    normalized = str(value if value is not None else default).strip().lower()
    return normalized in {"1", "true", "yes"}


def _int_setting(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


@dataclass(frozen=True)
class SeedSettings:
    max_depth: int = DEFAULT_MAX_DEPTH
    strict_map_keys: bool = False
    log_level: str = DEFAULT_LOG_LEVEL

    def with_overrides(self, *, max_depth: int | None = None, strict_map_keys: bool | None = None) -> "SeedSettings":
        return SeedSettings(
            max_depth=self.max_depth if max_depth is None else max(1, int(max_depth)),
            strict_map_keys=self.strict_map_keys if strict_map_keys is None else bool(strict_map_keys),
            log_level=self.log_level,
        )


def load_settings() -> SeedSettings:
    log_level = str(os.getenv("PSEUDO_RANDOM_LOG_LEVEL", DEFAULT_LOG_LEVEL)).strip().upper()
    return SeedSettings(
        max_depth=max(1, _int_setting("PSEUDO_RANDOM_MAX_DEPTH", DEFAULT_MAX_DEPTH)),
        strict_map_keys=_is_truthy(os.getenv("PSEUDO_RANDOM_STRICT_MAP_KEYS"), default="0"),
        log_level=log_level or DEFAULT_LOG_LEVEL,
    )
