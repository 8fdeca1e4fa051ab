from __future__ import annotations


class PseudoRandomError(Exception):
    pass


class SeedComputationError(PseudoRandomError):
    """Raised when host introspection fails while a value is being reduced to a seed."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class StructuralLimitError(PseudoRandomError):
    def __init__(self, message: str, *, depth: int, limit: int) -> None:
        super().__init__(message)
        self.depth = int(depth)
        self.limit = int(limit)


class MapKeyCollisionError(SeedComputationError):
    def __init__(self, rendering: bytes) -> None:
        text = rendering.decode("utf-8", errors="replace")
        super().__init__(f"Map contains more than one key rendered as {text!r}")
        self.rendering = rendering
